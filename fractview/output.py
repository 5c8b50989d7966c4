"""Writing strings, numbers and tables of lines to a text stream."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from fractview.chars import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` to the stream (standard output by default); None writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline; None writes nothing at all."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of ``n`` taken as a 32-bit signed int."""
    _target(stream).write(itoa(n))


def print_table(rows: Iterable[str] | None, stream: TextIO | None = None) -> None:
    """Write each row on a line of its own; None writes nothing."""
    if rows is None:
        return
    out = _target(stream)
    for row in rows:
        out.write(row + "\n")