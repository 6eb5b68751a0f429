"""Input and output stream selection (file or stdio)."""

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, TextIO

from .core.projection import TextSink
from .errors import JtabIOError


class UnbufferedWriter:
    """Text sink that flushes after every write.

    Used for interactive terminals so rows show up as they are produced.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def write(self, text: str) -> int:
        written = self.stream.write(text)
        self.stream.flush()
        return written

    def flush(self) -> None:
        self.stream.flush()


def _is_tty(stream) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


@contextmanager
def open_input(path: Path | None) -> Iterator[BinaryIO]:
    """Open the JSON input: the named file, or stdin when path is None.

    Stdin is not closed on exit.

    Raises:
        JtabIOError: File cannot be opened
    """
    if path is None:
        yield sys.stdin.buffer
        return

    try:
        handle = open(path, "rb")
    except OSError as e:
        raise JtabIOError(
            f"cannot open input {path}: {e.strerror or e}"
        ) from e
    with handle:
        yield handle


@contextmanager
def open_output(
    path: Path | None, stream: TextIO | None = None
) -> Iterator[TextSink]:
    """Open the output sink.

    - Named file: UTF-8, block buffered, closed on exit.
    - Terminal: every write flushed immediately.
    - Other streams (pipes, redirected stdout): buffered, flushed on exit.

    Args:
        path: Output file, or None for stream
        stream: Fallback text stream (default: sys.stdout)

    Raises:
        JtabIOError: File cannot be created
    """
    if path is not None:
        try:
            handle = open(path, "w", encoding="utf-8", newline="")
        except OSError as e:
            raise JtabIOError(
                f"cannot create output {path}: {e.strerror or e}"
            ) from e
        with handle:
            yield handle
        return

    stream = stream if stream is not None else sys.stdout
    sink = UnbufferedWriter(stream) if _is_tty(stream) else stream
    try:
        yield sink
    finally:
        stream.flush()


__all__ = ["UnbufferedWriter", "open_input", "open_output"]
