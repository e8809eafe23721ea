# dsdrills

Small exercises on basic data structures and recursion. It covers bounded
and growable stacks, positional insertion, deletion and overriding in
arrays, two- and three-dimensional grids, operator priorities, and the
classic kinds of recursion (head, tail, tree, indirect, nested).

Each drill is a plain Python function or class. Several also come as a
console program.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line programs

### `dsdrills-stack`

This is a menu-driven stack. It offers Push, Push At A Position, Pop, Pop
From A Position, Display, isEmpty, isFull, Peek and Exit. Choices and values
are read as whitespace-separated numbers from standard input.

```
dsdrills-stack [--capacity N] [--growable]
```

- `--capacity N` sets the stack size. If you leave it out, the program asks for it.
- `--growable` makes a full stack double its capacity instead of reporting
  "Stack Overflow".

### `dsdrills-priority`

Prints the priority of one operator character.

```
dsdrills-priority [OPERATOR]
```

If no operator is given, the program reads one from standard input and uses
its first character.

### `dsdrills-arrays`

Lists an array of whole numbers, applies one change, then lists it again.

```
dsdrills-arrays traverse [VALUES ...]
dsdrills-arrays insert --position P --value V [VALUES ...]
dsdrills-arrays delete --position P [VALUES ...]
dsdrills-arrays override --set INDEX=VALUE [--set INDEX=VALUE ...] [VALUES ...]
```

- `insert` uses a 0-based position.
- `delete` uses a 1-based position.
- `override` uses 0-based indices.

If no values are given, the program asks for the size and then the elements
on standard input.

### `dsdrills-grids`

Reads a grid of whole numbers from standard input and prints it back.

```
dsdrills-grids [SHAPE ...] [--depth {2,3}] [--indexed]
```

- If you leave out the shape, the program asks for the number of rows and
  columns. With `--depth 3` it asks for blocks, rows and columns.
- `--indexed` lists each element as `a[i][j] = value` instead of laying out
  the grid.

### `dsdrills-env`

Prints the number of arguments, each argument with the program name first,
and every environment variable.

## Library use

### Stacks

`dsdrills.stack.Stack(capacity, growable=False)` holds values up to a fixed
capacity. A stack made with `growable=True` doubles its capacity when it is
full, or grows to 1 if the capacity was 0. A negative capacity raises
`ValueError`.

```python
from dsdrills.stack import Stack, StackOverflowError, StackUnderflowError

stack = Stack(2)
stack.push(1)
stack.push(2)
stack.is_full()        # True
stack.peek()           # 2
stack.pop()            # 2
len(stack)             # 1
stack.capacity         # 2

try:
    Stack(1).pop()
except StackUnderflowError:
    ...
```

Errors:

- Pushing onto a full stack that cannot grow raises `StackOverflowError`.
- `pop` and `peek` on an empty stack raise `StackUnderflowError`.

Positional access and iteration:

- `push_at(position, value)` inserts at a position counted from the bottom,
  starting at 0. A position equal to the size places the value on top.
- `pop_at(position)` removes and returns the value at a position counted from
  the bottom.
- Both raise `IndexError` for a position out of range.
- Iterating a stack yields its values from top to bottom.

The menu can also be driven from Python with any text streams:

```python
import io
from dsdrills.stack_menu import run

out = io.StringIO()
stack = run(io.StringIO("1 5 1 7 9"), out, capacity=3)
list(stack)            # [7, 5]
```

`run` returns the stack as it was left. If the input ends before a capacity
is read, it returns `None`. It raises `ValueError` if the capacity read is
not a whole number.

### Operator priority

```python
from dsdrills.priority import check_priority

check_priority("+")    # 1
check_priority("*")    # 2
check_priority("^")    # 3
check_priority("%")    # 4
check_priority("(")    # 0
check_priority("a")    # -1
```

A string that is not exactly one character raises `ValueError`.

### Arrays

Each function in `dsdrills.arrays` returns a new list and leaves its input
unchanged:

- `insert_at(values, position, value)` uses a 0-based position, from 0 to the
  length.
- `delete_at(values, position)` uses a 1-based position.
- `override(values, replacements)` takes a mapping or pairs of 0-based index
  and new value.

Out-of-range positions raise `IndexError`. `format_indexed(values)` lists the
values as `a[i]=value`, one per line.

```python
from dsdrills.arrays import insert_at, delete_at, override

insert_at([1, 2, 3], 1, 9)      # [1, 9, 2, 3]
delete_at([1, 2, 3], 1)         # [2, 3]
override([1, 2, 3], {0: 10})    # [10, 2, 3]
```

### Grids

`dsdrills.grids` provides these functions:

- `reshape(values, shape)` arranges flat values into nested lists, row by row.
- `flatten(grid)` returns the values in row-major order.
- `indices(shape)` yields every index tuple in row-major order.
- `format_grid(grid)` lays out a grid as text. Values in a row are separated
  by spaces and rows by line breaks; for a 3-D grid, blocks are separated by
  a blank line.
- `format_indexed(grid)` lists each value as `a[i][j] = value`.

`reshape` raises `ValueError` if the number of values does not match the
shape.

### Recursion

```python
from dsdrills.recursion import fibonacci, fibonacci_series, handshakes, nested, product

fibonacci(10)               # 55
fibonacci_series(5)         # [0, 1, 1, 2, 3]
handshakes(4)               # 6
nested(95)                  # 91
product([1, 2, 3, 4, 5])    # 120
```

`head`, `tail`, `tree` and `indirect` are generators. Each yields the values
that its kind of recursion visits, for example `list(tail(3))` is
`[3, 2, 1]`. `fibonacci`, `fibonacci_series` and `handshakes` raise
`ValueError` for negative arguments.

### Environment

`dsdrills.environment.describe(argv, environ)` returns the listing that
`dsdrills-env` prints, for any argument list and mapping.