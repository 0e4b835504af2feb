"""Interactive line-oriented front end for :class:`AVLVector`."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Optional, Sequence, TextIO

from .vector import AVLVector

__all__ = ["run_command", "repl", "main"]

_WELCOME = (
    "Welcome! To use this AVL-Vector program, type a command along with your "
    "rank/element in a single line (exact same format as listed in test data).\n"
    "Example input: 'INSERT 1 55'\n"
    "Enter one of the following commands: INSERT, DELETE, REPLACE, ELEMENT-AT, "
    "RANK, PRINT, or QUIT followed by the necessary numerical inputs!\n"
)
_PROMPT = "> "
_INT = re.compile(r"\s*([+-]?\d+)")


def _read_ints(text: str, count: int) -> Optional[list[int]]:
    """Read ``count`` leading integers from ``text`` the way a stream extraction does.

    Each integer may be preceded by whitespace; anything left over after the
    requested integers is ignored. Returns None if any integer is missing.
    """
    values: list[int] = []
    pos = 0
    for _ in range(count):
        match = _INT.match(text, pos)
        if match is None:
            return None
        values.append(int(match.group(1)))
        pos = match.end()
    return values


def _usage(out: TextIO, form: str) -> None:
    out.write(f"Invalid input\u2014\u2014the proper format is {form}!\n")


def run_command(vector: AVLVector, line: str, out: TextIO) -> bool:
    """Execute one command line against ``vector``.

    Writes the command's output to ``out`` and returns False once the
    session should end (after QUIT), True otherwise.
    """
    command = line.rstrip("\r\n").strip(" \t")
    parts = command.split(maxsplit=1)
    operation = parts[0] if parts else ""
    rest = parts[1] if len(parts) > 1 else ""

    if operation == "INSERT":
        args = _read_ints(rest, 2)
        if args is None:
            _usage(out, "INSERT <int> <int>")
        else:
            try:
                vector.insert_at_rank(*args)
            except IndexError as exc:
                out.write(f"{exc}\n\n")
            out.write("\n")

    elif operation == "DELETE":
        args = _read_ints(rest, 1)
        if args is None:
            _usage(out, "DELETE <int>")
        else:
            try:
                vector.remove_at_rank(args[0])
            except IndexError as exc:
                out.write(f"{exc}\n\n")
            out.write("\n")

    elif operation == "REPLACE":
        args = _read_ints(rest, 2)
        if args is None:
            _usage(out, "REPLACE <int> <int>")
        else:
            try:
                vector.replace_at_rank(*args)
            except IndexError as exc:
                out.write(f"{exc}\n\n")
            out.write("\n")

    elif operation == "ELEMENT-AT":
        args = _read_ints(rest, 1)
        if args is None:
            _usage(out, "ELEMENT-AT <int>")
        else:
            try:
                value = vector.element_at_rank(args[0])
            except IndexError as exc:
                out.write(f"{exc}\n\n")
            else:
                out.write(f"{value}\n\n")

    elif operation == "RANK":
        args = _read_ints(rest, 1)
        if args is None:
            _usage(out, "RANK <int>")
        else:
            try:
                rank = vector.rank_of(args[0])
            except ValueError as exc:
                out.write(f"{exc}\n\n")
            else:
                out.write(f"{rank}\n\n")

    elif operation == "PRINT":
        if len(vector) == 0:
            out.write("The AVL Tree is empty.\n\n")
        else:
            vector.print_all(out)

    elif operation == "QUIT":
        out.write("Bye!\n\n")
        return False

    else:
        out.write(f"Error: Unknown Command:{command}\n")

    return True


def repl(stdin: TextIO, out: TextIO) -> int:
    """Run an interactive session reading commands from ``stdin`` until QUIT or end of input."""
    vector = AVLVector()
    out.write(_WELCOME)
    while True:
        out.write(_PROMPT)
        out.flush()
        line = stdin.readline()
        if not line:
            return 0
        if not run_command(vector, line, out):
            return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="rankvector",
        description="Interactive rank-indexed vector backed by an AVL tree.",
    )
    parser.parse_args(argv)
    return repl(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())