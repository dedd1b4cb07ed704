[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edakit"
version = "0.1.0"
description = "Data structures and algorithm exercises: AVL sets, binary trees, heaps, dynamic programming and branch and bound"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "avl-tree",
    "binary-tree",
    "priority-queue",
    "heap",
    "dynamic-programming",
    "branch-and-bound",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
edakit = "edakit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["edakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
