"""Reading a stream line by line in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator

BUFF_SIZE = 32


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFF_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` without their newline characters.

    The stream is read ``buffer_size`` units at a time. A final line without
    a newline is yielded when it is not empty. Works on text and binary
    streams alike.
    """
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    pending = None
    while True:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        newline = b"\n" if isinstance(chunk, bytes) else "\n"
        pending = chunk if pending is None else pending + chunk
        *complete, pending = pending.split(newline)
        yield from complete
    if pending:
        yield pending