"""
Codec package for ebcdicio.

Fixed ASCII <-> EBCDIC translation tables and the byte, buffer and text
transforms built on them.
"""

from .charmap import CODEC_NAME, register
from .table import FORWARD_TABLE, INVERSE_TABLE, TABLE_SIZE, build_tables
from .translate import ascii_to_ebcdic, decode_text, ebcdic_to_ascii, encode_text

__all__ = [
    "CODEC_NAME",
    "FORWARD_TABLE",
    "INVERSE_TABLE",
    "TABLE_SIZE",
    "ascii_to_ebcdic",
    "build_tables",
    "decode_text",
    "ebcdic_to_ascii",
    "encode_text",
    "register",
]
