"""I/O layer for cfgt - buffers input for repeated parsing and writes output."""

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO

from ..core.model import DEFAULT_BUFFER_SIZE

# Re-export these for import convenience
from .local import LocalByteReader, open_local_reader, open_stdin_reader


def open_reader(source, buffer_size: int = DEFAULT_BUFFER_SIZE) -> LocalByteReader:
    """Factory function to create the appropriate reader for a source.

    ``"-"`` means standard input. Every source is captured whole on first read.
    """
    if hasattr(source, 'read'):  # BinaryIO
        return open_local_reader(source, buffer_size)
    if str(source) == "-":
        return open_stdin_reader(buffer_size=buffer_size)
    return open_local_reader(Path(source), buffer_size)


@contextmanager
def open_writer(destination) -> Iterator[TextIO]:
    """Yield a text sink for ``destination`` (``"-"`` is standard output)."""
    if str(destination) == "-":
        yield sys.stdout
        sys.stdout.flush()
        return
    with open(destination, "w", encoding="utf-8") as sink:
        yield sink
