"""
Shared, streaming access to the session log.

The log is opened read-only with a plain buffered handle, which takes no
lock on the file, so the RADIUS server may keep appending while we read.
Only the handle's buffer is ever resident; lines are produced one at a time.
"""

import os
from typing import Iterator, Optional, TextIO

from .exceptions import SourceUnavailable
from .logging_config import get_logger

logger = get_logger(__name__)


class LineSource:
    """Lazy, forward-only sequence of lines from one log file.

    Use as a context manager to open eagerly (so a missing file fails before
    any work starts) and to guarantee the handle is released:

        with LineSource(path) as source:
            for line in source:
                ...

    Iterating without the ``with`` block opens the file on first use and
    closes it when the traversal ends, is abandoned or raises.
    """

    def __init__(self, path: str, encoding: str = "utf-8-sig") -> None:
        self.path = path
        self.encoding = encoding
        self.lines_read = 0
        self._handle: Optional[TextIO] = None

    def open(self) -> "LineSource":
        if self._handle is not None:
            return self
        try:
            self._handle = open(self.path, encoding=self.encoding, errors="replace")
        except FileNotFoundError as e:
            raise SourceUnavailable("Log file not found", file_path=self.path) from e
        except OSError as e:
            raise SourceUnavailable(f"Cannot open log file: {e.strerror or e}", file_path=self.path) from e
        logger.debug("Opened %s (%s bytes)", self.path, f"{os.fstat(self._handle.fileno()).st_size:,}")
        return self

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
            logger.debug("Closed %s after %s lines", self.path, f"{self.lines_read:,}")

    @property
    def closed(self) -> bool:
        return self._handle is None

    def __enter__(self) -> "LineSource":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[str]:
        owns_handle = self._handle is None
        if owns_handle:
            self.open()
        try:
            for line in self._handle:
                self.lines_read += 1
                yield line.rstrip("\r\n")
        finally:
            if owns_handle:
                self.close()


def iter_lines(path: str) -> Iterator[str]:
    """Yield the lines of ``path`` in file order, releasing the file afterwards."""
    with LineSource(path) as source:
        yield from source
