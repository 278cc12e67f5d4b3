"""Buffered line scanner over a Reader.

Reads a byte source incrementally and yields newline-delimited records
with the trailing CR removed. The buffer grows on demand up to a bounded
maximum token size.
"""

import logging
from collections.abc import Iterator
from typing import Final

from mimetable.protocols import Reader, SplitFunc

logger = logging.getLogger(__name__)

MAX_SCAN_TOKEN_SIZE: Final[int] = 64 * 1024
START_BUF_SIZE: Final[int] = 4096
MAX_CONSECUTIVE_EMPTY_READS: Final[int] = 100


class ScannerError(Exception):
    """Line scanner failed."""

    pass


class BadReadCountError(ScannerError):
    """Reader or split function returned an impossible byte count."""

    pass


class NoProgressError(ScannerError):
    """Too many consecutive reads returned no data."""

    pass


class TokenTooLongError(ScannerError):
    """A single record does not fit in the maximum buffer size."""

    pass


def drop_cr(data: bytes) -> bytes:
    """Drop a single trailing carriage return."""
    if data.endswith(b"\r"):
        return data[:-1]
    return data


def scan_lines(data: bytes, at_eof: bool) -> tuple[int, bytes | None]:
    """Split function returning one line per call.

    Args:
        data: Unconsumed bytes in the scanner window
        at_eof: True once the reader has no more data

    Returns:
        (bytes consumed, record). record is None when more data is needed.
    """
    if at_eof and not data:
        return 0, None

    i = data.find(b"\n")
    if i >= 0:
        return i + 1, drop_cr(data[:i])

    # Final line without a newline
    if at_eof:
        return len(data), drop_cr(data)

    return 0, None


class LineScanner:
    """Incremental record scanner over a Reader.

    Call scan() until it returns False, reading each record with value().
    Iterating the scanner does the same. The first error is latched: after
    it the scanner reports no more records. End of input is not an error.

    Example:
        >>> scanner = LineScanner(io.BytesIO(b"a\\nb\\r\\nc"))
        >>> list(scanner)
        [b'a', b'b', b'c']
    """

    def __init__(
        self,
        reader: Reader,
        split: SplitFunc = scan_lines,
        max_token_size: int = MAX_SCAN_TOKEN_SIZE,
    ) -> None:
        """Initialize scanner.

        Args:
            reader: Byte source
            split: Function extracting one record from the buffer window
            max_token_size: Largest record the buffer may grow to hold
        """
        if max_token_size <= 0:
            raise ValueError(f"max_token_size must be positive: {max_token_size}")

        self._reader = reader
        self._split = split
        self._max_token_size = max_token_size
        self._token: bytes | None = None
        self._buf = bytearray()
        self._start = 0
        self._end = 0
        self._err: BaseException | None = None
        self._empties = 0
        self._done = False

    @property
    def error(self) -> BaseException | None:
        """First error that stopped the scanner, or None at end of input."""
        if isinstance(self._err, EOFError):
            return None
        return self._err

    def value(self) -> bytes:
        """Most recent record produced by scan()."""
        return self._token if self._token is not None else b""

    def text(self, encoding: str = "utf-8") -> str:
        """Most recent record decoded as text."""
        return self.value().decode(encoding)

    def __iter__(self) -> Iterator[bytes]:
        while self.scan():
            yield self.value()

    def scan(self) -> bool:
        """Advance to the next record.

        Returns:
            True if a record is available via value(), False when the input
            is exhausted or an error was latched.
        """
        if self._done:
            return False

        while True:
            # Try to extract a record from buffered data
            if self._end > self._start or self._err is not None:
                at_eof = self._err is not None
                try:
                    advance, token = self._split(
                        bytes(self._buf[self._start : self._end]), at_eof
                    )
                except Exception as e:
                    self._set_err(e)
                    self._done = True
                    return False

                if not self._advance(advance):
                    self._done = True
                    return False

                self._token = token
                if token is not None:
                    if self._err is None or advance > 0:
                        self._empties = 0
                    else:
                        self._empties += 1
                        if self._empties > MAX_CONSECUTIVE_EMPTY_READS:
                            self._set_err(NoProgressError("split made no progress"))
                            self._done = True
                            return False
                    return True

            if self._err is not None:
                self._start = 0
                self._end = 0
                self._done = True
                return False

            self._fill()
            if self._done:
                return False

    def _fill(self) -> None:
        """Make room in the buffer and read more data into it."""
        size = len(self._buf)

        # Shift unread data to the front
        if self._start > 0 and (self._end == size or self._start > size // 2):
            n = self._end - self._start
            self._buf[0:n] = self._buf[self._start : self._end]
            self._end = n
            self._start = 0

        if self._end == size:
            if size >= self._max_token_size:
                # Buffered data is dropped, not returned as a partial record
                self._set_err(
                    TokenTooLongError(f"record exceeds {self._max_token_size} bytes")
                )
                self._start = 0
                self._end = 0
                self._done = True
                return
            new_size = min(size * 2 or START_BUF_SIZE, self._max_token_size)
            new_buf = bytearray(new_size)
            n = self._end - self._start
            new_buf[0:n] = self._buf[self._start : self._end]
            self._buf = new_buf
            self._end = n
            self._start = 0
            logger.debug("Scanner buffer grown to %d bytes", new_size)

        loop = 0
        while True:
            n = len(self._buf) - self._end
            try:
                data = self._reader.read(n)
            except OSError as e:
                self._set_err(e)
                return

            if data is None:
                loop += 1
                if loop > MAX_CONSECUTIVE_EMPTY_READS:
                    self._set_err(
                        NoProgressError(
                            f"{MAX_CONSECUTIVE_EMPTY_READS} consecutive empty reads"
                        )
                    )
                    return
                continue

            if not data:
                self._set_err(EOFError())
                return

            if len(data) > n:
                self._set_err(
                    BadReadCountError(f"read returned {len(data)} bytes, asked for {n}")
                )
                return

            self._buf[self._end : self._end + len(data)] = data
            self._end += len(data)
            return

    def _advance(self, n: int) -> bool:
        """Consume n bytes of the buffer window."""
        if n < 0:
            self._set_err(BadReadCountError(f"split returned negative advance {n}"))
            return False
        if n > self._end - self._start:
            self._set_err(BadReadCountError(f"split advanced {n} bytes beyond input"))
            return False
        self._start += n
        return True

    def _set_err(self, err: BaseException) -> None:
        """Latch err unless an earlier real error is already latched."""
        if self._err is None or isinstance(self._err, EOFError):
            if not isinstance(err, EOFError):
                logger.debug("Scanner stopped: %s: %s", type(err).__name__, err)
            self._err = err
