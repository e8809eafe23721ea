"""Small recursive routines: head, tail, tree, indirect and nested recursion,
products, Fibonacci numbers and handshake counts."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache


def head(n: int) -> Iterator[int]:
    """Yield 1..n, each value produced after the recursive call returns."""
    if n > 0:
        yield from head(n - 1)
        yield n


def tail(n: int) -> Iterator[int]:
    """Yield n..1, each value produced before the recursive call."""
    if n > 0:
        yield n
        yield from tail(n - 1)


def tree(n: int) -> Iterator[int]:
    """Yield n, then the values of two recursive calls on n - 1."""
    if n > 0:
        yield n
        yield from tree(n - 1)
        yield from tree(n - 1)


def indirect(n: int) -> Iterator[int]:
    """Yield the values visited by two functions that call each other.

    The first step continues while n > 0 and moves on to n - 1; the second
    continues while n > 1 and moves on to n // 2.
    """

    def step_a(value: int) -> Iterator[int]:
        if value > 0:
            yield value
            yield from step_b(value - 1)

    def step_b(value: int) -> Iterator[int]:
        if value > 1:
            yield value
            yield from step_a(value // 2)

    return step_a(n)


def nested(n: int) -> int:
    """Evaluate f(n) = n - 10 if n > 100 else f(f(n + 11)).

    The pending outer calls are kept as a counter, so any n is evaluated
    without running into the interpreter's recursion limit.
    """
    pending = 1
    while pending:
        if n > 100:
            n -= 10
            pending -= 1
        else:
            n += 11
            pending += 1
    return n


def product(numbers: Iterable[int]) -> int:
    """Return the product of the numbers, 1 for none."""

    def rest(items: Iterator[int]) -> int:
        try:
            first = next(items)
        except StopIteration:
            return 1
        return first * rest(items)

    values = list(numbers)
    result = 1
    # Multiply in chunks so long inputs stay well inside the recursion limit.
    for start in range(0, len(values), 256):
        result *= rest(iter(values[start:start + 256]))
    return result


@lru_cache(maxsize=None)
def _fib(n: int) -> int:
    if n in (0, 1):
        return n
    return _fib(n - 1) + _fib(n - 2)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, counting F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    # Fill the cache bottom-up so deep n does not exhaust the recursion limit.
    for k in range(0, n, 500):
        _fib(k)
    return _fib(n)


def fibonacci_series(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    return [fibonacci(i) for i in range(count)]


def handshakes(n: int) -> int:
    """Return how many handshakes happen when n people all greet each other."""
    if n < 0:
        raise ValueError(f"number of people must not be negative, got {n}")
    total = 0
    # Each newcomer shakes hands with everyone already present.
    for people in range(2, n + 1):
        total += people - 1
    return total