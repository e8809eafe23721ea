"""Multi-dimensional grids of values: building, flattening, indexing and listing."""

from __future__ import annotations

import argparse
import itertools
import math
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, TextIO

_DIMENSION_PROMPTS = {
    2: ("rows", "columns"),
    3: ("blocks", "rows", "columns"),
}


def _check_shape(shape: Iterable[int]) -> tuple[int, ...]:
    dims = tuple(shape)
    if not dims:
        raise ValueError("shape must have at least one dimension")
    negative = [dim for dim in dims if dim < 0]
    if negative:
        raise ValueError(f"dimensions must not be negative, got {dims}")
    return dims


def _build(items: Iterator[Any], shape: tuple[int, ...]) -> list[Any]:
    if len(shape) == 1:
        return list(itertools.islice(items, shape[0]))
    return [_build(items, shape[1:]) for _ in range(shape[0])]


def reshape(values: Iterable[Any], shape: Iterable[int]) -> list[Any]:
    """Arrange flat values into nested lists of the given shape, row by row.

    The number of values must equal the product of the dimensions.
    """
    dims = _check_shape(shape)
    items = list(values)
    expected = math.prod(dims)
    if len(items) != expected:
        raise ValueError(
            f"shape {dims} needs {expected} values, got {len(items)}"
        )
    return _build(iter(items), dims)


def _is_nested(item: Any) -> bool:
    return isinstance(item, (list, tuple))


def _walk(grid: Sequence[Any]) -> Iterator[Any]:
    for item in grid:
        if _is_nested(item):
            yield from _walk(item)
        else:
            yield item


def flatten(grid: Sequence[Any]) -> list[Any]:
    """Return the values of a nested grid in row-major order."""
    return list(_walk(grid))


def indices(shape: Iterable[int]) -> Iterator[tuple[int, ...]]:
    """Yield every index tuple of a grid of the given shape in row-major order."""
    dims = _check_shape(shape)
    return itertools.product(*(range(dim) for dim in dims))


def _depth(grid: Sequence[Any]) -> int:
    depth = 1
    node: Any = grid
    while node and _is_nested(node[0]):
        depth += 1
        node = node[0]
    return depth


def _render(grid: Sequence[Any]) -> str:
    if not grid or not _is_nested(grid[0]):
        return " ".join(str(value) for value in grid)
    separator = "\n" * (_depth(grid) - 1)
    return separator.join(_render(part) for part in grid)


def format_grid(grid: Sequence[Any]) -> str:
    """Lay a grid out as text.

    Values in a row are separated by spaces, rows by line breaks, and each
    higher dimension by one more line break, so blocks of a 3-D grid are
    separated by a blank line.
    """
    return _render(grid)


def _entries(
    grid: Sequence[Any], prefix: tuple[int, ...] = ()
) -> Iterator[tuple[tuple[int, ...], Any]]:
    for index, item in enumerate(grid):
        position = prefix + (index,)
        if _is_nested(item):
            yield from _entries(item, position)
        else:
            yield position, item


def format_indexed(grid: Sequence[Any]) -> str:
    """List every value of a grid one per line as ``a[i][j]... = value``."""
    return "\n".join(
        "a" + "".join(f"[{i}]" for i in position) + f" = {value}"
        for position, value in _entries(grid)
    )


class _Tokens:
    """Whole numbers read one by one from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._words = iter(stream.read().split())

    def integer(self, what: str) -> int:
        try:
            word = next(self._words)
        except StopIteration:
            raise ValueError(f"input ended before {what}") from None
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"not a whole number: {word!r}") from None


def _read_grid(
    tokens: _Tokens, out: TextIO, shape: list[int] | None, depth: int
) -> list[Any]:
    if not shape:
        shape = []
        for name in _DIMENSION_PROMPTS[depth]:
            print(f"Enter the number of {name}: ", end="", file=out)
            shape.append(tokens.integer(f"the number of {name}"))
    dims = _check_shape(shape)
    print("Enter the elements of the array: ", file=out)
    values = []
    for position in indices(dims):
        label = "a" + "".join(f"[{i}]" for i in position)
        print(f"{label} = ", end="", file=out)
        values.append(tokens.integer(f"element {label}"))
    print(file=out)
    return reshape(values, dims)


def main(argv: list[str] | None = None) -> int:
    """Read a grid of whole numbers from standard input and list it."""
    parser = argparse.ArgumentParser(
        prog="dsdrills-grids",
        description="Read a 2-D or 3-D array of whole numbers and list it.",
    )
    parser.add_argument(
        "shape",
        nargs="*",
        type=int,
        help="dimensions of the array; asked for when left out",
    )
    parser.add_argument(
        "--depth",
        type=int,
        choices=sorted(_DIMENSION_PROMPTS),
        default=2,
        help="number of dimensions to ask for when no shape is given",
    )
    parser.add_argument(
        "--indexed",
        action="store_true",
        help="list each element with its index instead of as a grid",
    )
    args = parser.parse_args(argv)
    out = sys.stdout
    try:
        grid = _read_grid(_Tokens(sys.stdin), out, args.shape, args.depth)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print("The array is: ", file=out)
    text = format_indexed(grid) if args.indexed else format_grid(grid)
    if text:
        print(text, file=out)
    return 0