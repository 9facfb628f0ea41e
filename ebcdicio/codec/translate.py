"""
Table-driven ASCII <-> EBCDIC translation for single bytes and buffers.

Single byte values are masked to their low 8 bits before lookup, so a
sign-extended byte (``-63``) or a wider integer (``0x1C1``) translates the
same as ``0xC1``.
"""

import logging
from typing import Union, overload

from ..utils.logging_utils import log_data_processing
from .table import FORWARD_TABLE, INVERSE_TABLE

logger = logging.getLogger(__name__)

BufferLike = Union[bytes, bytearray, memoryview]


def _translate(
    value: Union[int, BufferLike], table: bytes, direction: str
) -> Union[int, bytes, bytearray]:
    if isinstance(value, int):
        return table[value & 0xFF]
    if isinstance(value, bytearray):
        # Mutable buffers are translated in place and handed back.
        if value:
            value[:] = value.translate(table)
        return value
    if isinstance(value, (bytes, memoryview)):
        return bytes(value).translate(table)
    raise TypeError(
        f"{direction} expects an int or a bytes-like object, "
        f"got {type(value).__name__}"
    )


@overload
def ascii_to_ebcdic(value: int) -> int: ...


@overload
def ascii_to_ebcdic(value: bytearray) -> bytearray: ...


@overload
def ascii_to_ebcdic(value: Union[bytes, memoryview]) -> bytes: ...


def ascii_to_ebcdic(value):
    """Translate an ASCII byte value or buffer to EBCDIC.

    Args:
        value: A byte value (only the low 8 bits are used) or a bytes-like
            buffer. A ``bytearray`` is translated in place and returned;
            ``bytes`` and ``memoryview`` produce a new ``bytes``.

    Returns:
        The translated byte value or buffer, same length and order.

    Raises:
        TypeError: If ``value`` is neither an int nor bytes-like.
    """
    return _translate(value, FORWARD_TABLE, "ascii_to_ebcdic")


@overload
def ebcdic_to_ascii(value: int) -> int: ...


@overload
def ebcdic_to_ascii(value: bytearray) -> bytearray: ...


@overload
def ebcdic_to_ascii(value: Union[bytes, memoryview]) -> bytes: ...


def ebcdic_to_ascii(value):
    """Translate an EBCDIC byte value or buffer to ASCII.

    Same contract as :func:`ascii_to_ebcdic`, reverse direction.
    """
    return _translate(value, INVERSE_TABLE, "ebcdic_to_ascii")


def encode_text(text: Union[str, bytes]) -> bytes:
    """Encode a string to EBCDIC bytes.

    Each code point 0-255 is one ASCII/Latin-1 byte. ``bytes`` input is taken
    as already-encoded ASCII and only translated.

    Raises:
        UnicodeEncodeError: If ``text`` has a code point above 255.
    """
    if isinstance(text, (bytes, bytearray)):
        raw = bytes(text)
    else:
        raw = text.encode("latin-1")
    log_data_processing(logger, "Encoding text to EBCDIC", f"{len(raw)} bytes")
    return raw.translate(FORWARD_TABLE)


def decode_text(data: BufferLike) -> str:
    """Decode EBCDIC bytes to a string, one code point per byte."""
    raw = bytes(data)
    log_data_processing(logger, "Decoding EBCDIC to text", f"{len(raw)} bytes")
    return raw.translate(INVERSE_TABLE).decode("latin-1")


__all__ = [
    "BufferLike",
    "ascii_to_ebcdic",
    "ebcdic_to_ascii",
    "encode_text",
    "decode_text",
]
