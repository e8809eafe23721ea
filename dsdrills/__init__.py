"""Drills on stacks, arrays, grids, operator priority and recursion."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "environment",
    "grids",
    "priority",
    "recursion",
    "stack",
    "stack_menu",
]