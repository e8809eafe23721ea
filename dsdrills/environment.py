"""Describe the command-line arguments and environment of a process."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence


def describe(argv: Sequence[str], environ: Mapping[str, str]) -> str:
    """Return a listing of the arguments and the environment variables.

    ``argv`` holds the program name first, followed by its arguments.
    """
    lines = [
        f"The number of arguments 'argc'=: {len(argv)}",
        "The arguments are: ",
    ]
    lines.extend(f"argv[{index}]={arg}" for index, arg in enumerate(argv))
    lines.append("The environment variables are: ")
    lines.extend(
        f"envp[{index}]={name}={value}"
        for index, (name, value) in enumerate(environ.items())
    )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Print the arguments, program name first, and the environment."""
    if argv is None:
        argv = sys.argv
    print(describe(argv, os.environ))
    return 0