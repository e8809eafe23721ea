"""Positional insertion, deletion, overriding and listing of array elements."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TextIO


def insert_at(values: Sequence[Any], position: int, value: Any) -> list[Any]:
    """Return a copy of ``values`` with ``value`` placed at index ``position``.

    Positions count from 0; a position equal to the length appends the value.
    """
    if not 0 <= position <= len(values):
        raise IndexError(
            f"position {position} is outside 0..{len(values)}"
        )
    result = list(values)
    result.insert(position, value)
    return result


def delete_at(values: Sequence[Any], position: int) -> list[Any]:
    """Return a copy of ``values`` without the element at ``position``.

    Positions count from 1, so position 1 removes the first element.
    """
    if not 1 <= position <= len(values):
        raise IndexError(
            f"position {position} is outside 1..{len(values)}"
        )
    result = list(values)
    del result[position - 1]
    return result


def override(
    values: Sequence[Any],
    replacements: Mapping[int, Any] | Iterable[tuple[int, Any]],
) -> list[Any]:
    """Return a copy of ``values`` with the given indices set to new values.

    Indices count from 0 and must lie inside the sequence.
    """
    result = list(values)
    for index, value in dict(replacements).items():
        if not 0 <= index < len(result):
            raise IndexError(f"index {index} is outside 0..{len(result) - 1}")
        result[index] = value
    return result


def format_indexed(values: Iterable[Any]) -> str:
    """List the values one per line as ``a[i]=value``."""
    return "\n".join(f"a[{index}]={value}" for index, value in enumerate(values))


def _read_values(stream: TextIO, out: TextIO) -> list[int]:
    tokens = iter(stream.read().split())

    def next_int(what: str) -> int:
        try:
            word = next(tokens)
        except StopIteration:
            raise ValueError(f"input ended before {what}") from None
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"not a whole number: {word!r}") from None

    print("Enter the size of the array: ", end="", file=out)
    size = next_int("the size of the array")
    if size < 0:
        raise ValueError(f"array size must not be negative, got {size}")
    values = []
    for index in range(size):
        print(f"a[{index}]=", end="", file=out)
        values.append(next_int(f"element a[{index}]"))
    print(file=out)
    return values


def _parse_assignment(text: str) -> tuple[int, int]:
    index, sep, value = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected INDEX=VALUE, got {text!r}")
    try:
        return int(index), int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected whole numbers in {text!r}"
        ) from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsdrills-arrays",
        description="Change an array of whole numbers and list it.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    def add(name: str, help_text: str) -> argparse.ArgumentParser:
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument(
            "values",
            nargs="*",
            type=int,
            help="the array; read from standard input when left out",
        )
        return sub

    add("traverse", "list the array")
    insert = add("insert", "insert an element at a 0-based position")
    insert.add_argument("--position", type=int, required=True)
    insert.add_argument("--value", type=int, required=True)
    delete = add("delete", "delete the element at a 1-based position")
    delete.add_argument("--position", type=int, required=True)
    change = add("override", "replace elements at 0-based indices")
    change.add_argument(
        "--set",
        dest="assignments",
        type=_parse_assignment,
        action="append",
        required=True,
        metavar="INDEX=VALUE",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """List an array, then apply the chosen change and list it again."""
    args = _build_parser().parse_args(argv)
    out = sys.stdout
    try:
        values = args.values or _read_values(sys.stdin, out)
        print("The array is: ", file=out)
        if values:
            print(format_indexed(values), file=out)
        if args.command == "traverse":
            return 0
        if args.command == "insert":
            changed = insert_at(values, args.position, args.value)
            heading = "The array after inserting the element is: "
        elif args.command == "delete":
            changed = delete_at(values, args.position)
            heading = "The array after deletion is: "
        else:
            changed = override(values, args.assignments)
            heading = "The array after overriding is: "
    except (ValueError, IndexError) as error:
        print(error, file=sys.stderr)
        return 1
    print(heading, file=out)
    if changed:
        print(format_indexed(changed), file=out)
    return 0