"""
Streaming ASCII/EBCDIC adapters.

Both classes decorate an already-open binary stream and translate data bytes
as they pass through. They add no buffering and no locking: every call maps to
one call on the wrapped stream, and any exception that call raises reaches the
caller unchanged. Closing an adapter closes the wrapped stream.
"""

import logging
from typing import Any, BinaryIO, Iterable, Iterator, Optional, Union

from ..codec.translate import BufferLike, ascii_to_ebcdic, ebcdic_to_ascii
from ..utils.logging_utils import describe_stream, log_stream_event

logger = logging.getLogger(__name__)

EOF = -1
"""Returned by :meth:`EbcdicToAsciiReader.read` when the source is exhausted."""

_BUFFER_TYPES = (bytes, bytearray, memoryview)


class AsciiToEbcdicWriter:
    """Writes ASCII data to a binary sink as EBCDIC.

    Example::

        with AsciiToEbcdicWriter(open("out.ebc", "wb")) as out:
            out.write(b"HELLO")
    """

    def __init__(self, target: BinaryIO) -> None:
        self._target = target

    @property
    def target(self) -> BinaryIO:
        """The wrapped output stream."""
        return self._target

    @property
    def closed(self) -> bool:
        return bool(getattr(self._target, "closed", False))

    def readable(self) -> bool:
        return False

    def writable(self) -> bool:
        return True

    def write(self, data: Union[int, BufferLike]) -> Optional[int]:
        """Translate and forward one byte value or a buffer.

        Args:
            data: An int, of which only the low 8 bits are written, or a
                bytes-like buffer. The caller's buffer is left untouched.

        Returns:
            Whatever the target's ``write`` reports: the number of bytes it
            accepted, or ``None`` from a non-blocking raw stream that could
            not take any.
        """
        if isinstance(data, int):
            translated = bytes((ascii_to_ebcdic(data),))
        elif isinstance(data, _BUFFER_TYPES):
            translated = ascii_to_ebcdic(bytes(data))
        else:
            raise TypeError(
                f"write() expects an int or a bytes-like object, "
                f"got {type(data).__name__}"
            )
        return self._target.write(translated)

    def writelines(self, lines: Iterable[BufferLike]) -> None:
        for line in lines:
            self.write(line)

    def flush(self) -> None:
        log_stream_event(
            logger, "Flushing EBCDIC writer", describe_stream(self._target)
        )
        self._target.flush()

    def close(self) -> None:
        log_stream_event(logger, "Closing EBCDIC writer", describe_stream(self._target))
        self._target.close()

    def __enter__(self) -> "AsciiToEbcdicWriter":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"AsciiToEbcdicWriter({self._target!r})"


class EbcdicToAsciiReader:
    """Reads EBCDIC data from a binary source as ASCII.

    ``read()`` without arguments returns a single translated byte value, or
    :data:`EOF` once the source is exhausted. ``read(size)`` follows the usual
    binary stream contract and returns translated ``bytes``.
    """

    def __init__(self, source: BinaryIO) -> None:
        self._source = source

    @property
    def target(self) -> BinaryIO:
        """The wrapped input stream."""
        return self._source

    @property
    def closed(self) -> bool:
        return bool(getattr(self._source, "closed", False))

    def readable(self) -> bool:
        return True

    def writable(self) -> bool:
        return False

    def read(self, size: Optional[int] = None) -> Union[int, bytes, None]:
        """Read and translate data from the source.

        Args:
            size: ``None`` for one byte value; otherwise the maximum number of
                bytes to read, ``-1`` meaning everything up to end of stream.

        Returns:
            For a single byte, the translated value or :data:`EOF`. For a
            sized read, the translated bytes (empty at end of stream). A
            ``None`` from a non-blocking source is returned as-is.
        """
        if size is None:
            chunk = self._source.read(1)
            if chunk is None:
                return None
            if not chunk:
                return EOF
            return ebcdic_to_ascii(chunk[0])

        chunk = self._source.read(size)
        if not chunk:
            return chunk
        return ebcdic_to_ascii(bytes(chunk))

    def readinto(self, buffer: Union[bytearray, memoryview]) -> Optional[int]:
        """Read into ``buffer`` and translate the filled part in place."""
        view = memoryview(buffer).cast("B")
        readinto = getattr(self._source, "readinto", None)
        if readinto is not None:
            count = readinto(view)
            if not count:
                return count
            view[:count] = ebcdic_to_ascii(view[:count].tobytes())
            return count

        chunk = self._source.read(len(view))
        if chunk is None:
            return None
        count = len(chunk)
        view[:count] = ebcdic_to_ascii(bytes(chunk))
        return count

    def close(self) -> None:
        log_stream_event(logger, "Closing EBCDIC reader", describe_stream(self._source))
        self._source.close()

    def __iter__(self) -> Iterator[int]:
        while True:
            value = self.read()
            if value is None or value == EOF:
                return
            yield value

    def __enter__(self) -> "EbcdicToAsciiReader":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"EbcdicToAsciiReader({self._source!r})"


__all__ = ["EOF", "AsciiToEbcdicWriter", "EbcdicToAsciiReader"]
