"""Protocol interfaces for dependency inversion.

Defines the byte-source capability the line scanner depends on,
so tests can supply in-memory readers without real I/O.

Usage Example:

    from mimetable.protocols import Reader
    from mimetable.utils.scanner import LineScanner

    with open("/etc/mime.types", "rb") as f:
        scanner = LineScanner(f)  # binary files satisfy Reader

    # Or a stub for testing
    class ChunkReader:
        def __init__(self, chunks):
            self.chunks = list(chunks)

        def read(self, size):
            return self.chunks.pop(0) if self.chunks else b""

    scanner = LineScanner(ChunkReader([b"text/html html\\n"]))
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

SplitFunc = Callable[[bytes, bool], tuple[int, bytes | None]]
"""Split function: (window, at_eof) -> (bytes consumed, record or None)."""


@runtime_checkable
class Reader(Protocol):
    """Protocol for a blocking or non-blocking byte source.

    Contract for ``read(size)``:
        - non-empty bytes, at most ``size`` long: data was read
        - ``b""``: end of input
        - ``None``: no data available yet (zero-byte read)
        - raises ``OSError``: the source failed
    """

    def read(self, size: int, /) -> bytes | None:
        """Read up to size bytes."""
        ...
