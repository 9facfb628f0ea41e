"""Python character mapping codec for the fixed ASCII/EBCDIC table.

Usage::

    import ebcdicio  # registers the codec
    "HELLO".encode("ebcdic-classic")

The ASCII side is read as Latin-1, so every code point 0-255 encodes and
every byte decodes.
"""

import codecs
import logging
from typing import Optional

from .table import INVERSE_TABLE

logger = logging.getLogger(__name__)

CODEC_NAME = "ebcdic-classic"
_SEARCH_NAMES = frozenset({"ebcdic_classic", "ebcdicclassic"})

# Index is the EBCDIC byte, character is the ASCII/Latin-1 code point.
DECODING_TABLE = INVERSE_TABLE.decode("latin-1")
ENCODING_TABLE = codecs.charmap_build(DECODING_TABLE)


class Codec(codecs.Codec):
    def encode(self, input, errors="strict"):
        return codecs.charmap_encode(input, errors, ENCODING_TABLE)

    def decode(self, input, errors="strict"):
        return codecs.charmap_decode(input, errors, DECODING_TABLE)


class IncrementalEncoder(codecs.IncrementalEncoder):
    def encode(self, input, final=False):
        return codecs.charmap_encode(input, self.errors, ENCODING_TABLE)[0]


class IncrementalDecoder(codecs.IncrementalDecoder):
    def decode(self, input, final=False):
        return codecs.charmap_decode(input, self.errors, DECODING_TABLE)[0]


class StreamWriter(Codec, codecs.StreamWriter):
    pass


class StreamReader(Codec, codecs.StreamReader):
    pass


def getregentry() -> codecs.CodecInfo:
    """Return the codec registry entry."""
    return codecs.CodecInfo(
        name=CODEC_NAME,
        encode=Codec().encode,
        decode=Codec().decode,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=IncrementalDecoder,
        streamreader=StreamReader,
        streamwriter=StreamWriter,
    )


def _codec_search(encoding: str) -> Optional[codecs.CodecInfo]:
    normalized = encoding.lower().replace("-", "_").replace(" ", "_")
    if normalized in _SEARCH_NAMES:
        return getregentry()
    return None


_registered = False


def register() -> None:
    """Register the codec search function; repeat calls are no-ops."""
    global _registered
    if _registered:
        return
    codecs.register(_codec_search)
    _registered = True
    logger.debug(f"Registered codec {CODEC_NAME}")


__all__ = ["CODEC_NAME", "DECODING_TABLE", "ENCODING_TABLE", "getregentry", "register"]
