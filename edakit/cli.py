"""Command-line entry point that solves a problem on a file of test cases."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence

from edakit import (
    assignment,
    avl_check,
    cassette,
    checkouts,
    coins,
    cows,
    emergency,
    lcs,
    merging,
    monitoring,
    network_diameter,
    palindrome,
    parenthesization,
    task_conflicts,
    treasure,
)

PROBLEMS: dict[str, Callable[[str], str]] = {
    "assignment": assignment.run,
    "avl-check": avl_check.run,
    "cassette": cassette.run,
    "checkouts": checkouts.run,
    "coins": coins.run,
    "cows": cows.run,
    "emergency": emergency.run,
    "lcs": lcs.run,
    "merging": merging.run,
    "monitoring": monitoring.run,
    "network-diameter": network_diameter.run,
    "palindrome": palindrome.run,
    "parenthesization": parenthesization.run,
    "task-conflicts": task_conflicts.run,
    "treasure": treasure.run,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edakit", description="Solve a problem for every test case in the input."
    )
    parser.add_argument("problem", choices=sorted(PROBLEMS), help="problem to solve")
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="file holding the test cases, or - for standard input (default)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read the cases, solve them and write the answers to standard output."""
    args = _parser().parse_args(argv)
    try:
        if args.input == "-":
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
    except OSError as error:
        print(f"edakit: cannot read {args.input}: {error.strerror}", file=sys.stderr)
        return 1
    try:
        answer = PROBLEMS[args.problem](text)
    except (ValueError, StopIteration) as error:
        print(f"edakit: malformed input: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())