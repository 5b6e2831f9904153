"""Local input readers that capture a whole source into memory."""

import io
import logging
import shutil
import sys
from pathlib import Path
from typing import BinaryIO, Union

from ..core.model import DEFAULT_BUFFER_SIZE

logger = logging.getLogger(__name__)


class LocalByteReader:
    """Captures a file, pipe or stream once and serves the same bytes on every read.

    Every grammar and the diagnostic locator look at the full input, so the
    source is copied into a buffer on first use. That works the same for
    regular files and for sources that cannot seek (FIFOs, ``/dev/stdin``).
    """

    def __init__(self, source: Union[Path, str, BinaryIO], buffer_size: int = DEFAULT_BUFFER_SIZE):
        self.buffer_size = buffer_size
        self._data: bytes | None = None
        if hasattr(source, 'read'):
            self._file = source
            self._should_close_file = False
        else:
            self._file = open(source, 'rb')
            self._should_close_file = True

    def read_all(self) -> bytes:
        """Return the complete contents of the source."""
        if self._data is None:
            if self._file is None:
                raise ValueError("read from a closed reader")
            buf = io.BytesIO()
            shutil.copyfileobj(self._file, buf, self.buffer_size)
            self._data = buf.getvalue()
            logger.debug("captured %d bytes of input", len(self._data))
        return self._data

    @property
    def size(self) -> int:
        return len(self.read_all())

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the file if we opened it; captured bytes stay readable."""
        if self._should_close_file and self._file is not None:
            self._file.close()
        self._file = None


def open_local_reader(source: Union[Path, str, BinaryIO], buffer_size: int = DEFAULT_BUFFER_SIZE) -> LocalByteReader:
    """Create a reader for a path or binary file object."""
    return LocalByteReader(source, buffer_size)


def open_stdin_reader(stream: BinaryIO | None = None, buffer_size: int = DEFAULT_BUFFER_SIZE) -> LocalByteReader:
    """Create a reader for standard input (or ``stream``); stdin itself is left open."""
    if stream is None:
        stream = getattr(sys.stdin, "buffer", sys.stdin)
    return LocalByteReader(stream, buffer_size)
