"""Operator priorities as used when converting infix expressions."""

from __future__ import annotations

import argparse
import sys

_PRIORITIES = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    "^": 3,
    "%": 4,
    "(": 0,
    ")": 0,
}


def check_priority(operator: str) -> int:
    """Return the priority of a one-character operator, or -1 if it is not one."""
    if len(operator) != 1:
        raise ValueError(f"expected a single character, got {operator!r}")
    return _PRIORITIES.get(operator, -1)


def main(argv: list[str] | None = None) -> int:
    """Print the priority of an operator given as an argument or read from input."""
    parser = argparse.ArgumentParser(
        prog="dsdrills-priority", description="Show the priority of an operator."
    )
    parser.add_argument("operator", nargs="?", help="a single operator character")
    args = parser.parse_args(argv)

    if args.operator is None:
        print("Enter the expression: ", end="", flush=True)
        text = sys.stdin.read().strip()
        if not text:
            print("no operator given", file=sys.stderr)
            return 1
        operator = text[0]
    else:
        operator = args.operator

    try:
        priority = check_priority(operator)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(f"Priority of {operator} is {priority}")
    return 0