"""Classic data structures (AVL sets, binary trees, heaps, integers with infinity) and solvers using dynamic programming and branch and bound."""

__version__ = "0.1.0"