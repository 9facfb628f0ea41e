"""Stream adapters that translate between ASCII and EBCDIC on the fly."""

from .streams import EOF, AsciiToEbcdicWriter, EbcdicToAsciiReader

__all__ = ["EOF", "AsciiToEbcdicWriter", "EbcdicToAsciiReader"]
