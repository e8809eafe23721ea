"""An interactive, menu-driven session over a :class:`~dsdrills.stack.Stack`."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from enum import IntEnum
from typing import TextIO

from dsdrills.stack import Stack, StackOverflowError, StackUnderflowError


class Choice(IntEnum):
    """The operations offered by the menu, numbered as they are shown."""

    PUSH = 1
    PUSH_AT = 2
    POP = 3
    POP_AT = 4
    DISPLAY = 5
    IS_EMPTY = 6
    IS_FULL = 7
    PEEK = 8
    EXIT = 9


_LABELS = {
    Choice.PUSH: "Push",
    Choice.PUSH_AT: "Push At A Position",
    Choice.POP: "Pop",
    Choice.POP_AT: "Pop From A Position",
    Choice.DISPLAY: "Display",
    Choice.IS_EMPTY: "isEmpty",
    Choice.IS_FULL: "isFull",
    Choice.PEEK: "Peek",
    Choice.EXIT: "Exit",
}


class _EndOfInput(Exception):
    """The input ran out before a value could be read."""


class _BadInput(ValueError):
    """A token could not be read as a whole number."""


class _Reader:
    """Reads whitespace-separated tokens from a text stream."""

    def __init__(self, stream: Iterable[str]) -> None:
        self._tokens: Iterator[str] = (
            token for line in stream for token in line.split()
        )

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise _EndOfInput from None

    def integer(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise _BadInput(word) from None


_Say = Callable[..., None]


def _push(stack: Stack, reader: _Reader, say: _Say) -> None:
    say("Enter the element you want to push")
    value = reader.integer()
    try:
        stack.push(value)
    except StackOverflowError:
        say("Stack Overflow")


def _push_at(stack: Stack, reader: _Reader, say: _Say) -> None:
    say("Enter the position at which you want to push")
    position = reader.integer()
    say("Enter the element you want to push")
    value = reader.integer()
    try:
        stack.push_at(position, value)
    except StackOverflowError:
        say("Stack Overflow")
    except IndexError:
        say("Invalid Position")


def _pop(stack: Stack, reader: _Reader, say: _Say) -> None:
    try:
        say(f"Popped element is {stack.pop()}")
    except StackUnderflowError:
        say("Stack Underflow")


def _pop_at(stack: Stack, reader: _Reader, say: _Say) -> None:
    say("Enter the position from which you want to pop")
    position = reader.integer()
    try:
        value = stack.pop_at(position)
    except StackUnderflowError:
        say("Stack Underflow")
    except IndexError:
        say(f"{position}:Invalid Position")
    else:
        say(f"Popped element is {value}")


def _display(stack: Stack, reader: _Reader, say: _Say) -> None:
    say("The elements in the stack are: ")
    if stack.is_empty():
        say("Stack is Empty")
    else:
        say(" ".join(str(value) for value in stack))


def _is_empty(stack: Stack, reader: _Reader, say: _Say) -> None:
    say("Stack is Empty" if stack.is_empty() else "Stack is not Empty")


def _is_full(stack: Stack, reader: _Reader, say: _Say) -> None:
    say("Stack is Full" if stack.is_full() else "Stack is not Full")


def _peek(stack: Stack, reader: _Reader, say: _Say) -> None:
    try:
        say(f"The element at the top is {stack.peek()}")
    except StackUnderflowError:
        say("Stack Underflow")


_ACTIONS: dict[Choice, Callable[[Stack, _Reader, _Say], None]] = {
    Choice.PUSH: _push,
    Choice.PUSH_AT: _push_at,
    Choice.POP: _pop,
    Choice.POP_AT: _pop_at,
    Choice.DISPLAY: _display,
    Choice.IS_EMPTY: _is_empty,
    Choice.IS_FULL: _is_full,
    Choice.PEEK: _peek,
}


def _read_choice(reader: _Reader) -> Choice | None:
    word = reader.word()
    try:
        return Choice(int(word))
    except ValueError:
        return None


def run(
    input_stream: Iterable[str],
    output_stream: TextIO,
    capacity: int | None = None,
    growable: bool = False,
) -> Stack | None:
    """Run the stack menu until Exit is chosen or the input runs out.

    When no capacity is given it is read from the input first. Returns the
    stack as it was left, or None if the input ended before a capacity was read.
    Raises ValueError if the capacity read is not a valid size.
    """

    def say(*parts: object) -> None:
        print(*parts, file=output_stream)

    reader = _Reader(input_stream)

    if capacity is None:
        say("Enter the size of the stack")
        try:
            capacity = reader.integer()
        except _EndOfInput:
            return None
        except _BadInput as error:
            raise ValueError(f"invalid stack size: {error}") from None

    stack = Stack(capacity, growable)
    say("Stack Created")

    while True:
        say("Enter the operation you want to perform")
        for choice in Choice:
            say(f"{choice.value}. {_LABELS[choice]}")
        try:
            choice = _read_choice(reader)
            if choice is None:
                say("Invalid Choice")
                continue
            if choice is Choice.EXIT:
                say("Exiting....")
                return stack
            _ACTIONS[choice](stack, reader, say)
        except _BadInput as error:
            say(f"Invalid input: {error}")
        except _EndOfInput:
            return stack


def main(argv: list[str] | None = None) -> int:
    """Start the stack menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dsdrills-stack", description="Work a stack through a menu."
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="capacity of the stack; asked for when left out",
    )
    parser.add_argument(
        "--growable",
        action="store_true",
        help="double the capacity when the stack is full instead of overflowing",
    )
    args = parser.parse_args(argv)
    try:
        run(sys.stdin, sys.stdout, args.capacity, args.growable)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0