"""
ebcdicio package init.
Exports the ASCII/EBCDIC byte transforms and the translating stream adapters.
"""

import datetime
import json
import logging
import os

from .codec import (
    CODEC_NAME,
    FORWARD_TABLE,
    INVERSE_TABLE,
    ascii_to_ebcdic,
    decode_text,
    ebcdic_to_ascii,
    encode_text,
    register,
)
from .exceptions import CodecTableError, EbcdicIOError
from .io import EOF, AsciiToEbcdicWriter, EbcdicToAsciiReader

__version__ = "0.1.0"

register()


class JSONFormatter(logging.Formatter):
    """JSON formatter with structured logging support."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.datetime.now().isoformat(),
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        # Add extra structured data
        extra = getattr(record, "ebcdicio_extra", {})
        if extra:
            log_entry.update(extra)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "WARNING") -> None:
    """
    Setup basic logging configuration.

    Set ``EBCDICIO_LOG_JSON=true`` in the environment for one JSON object per
    log record.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    use_json = os.environ.get("EBCDICIO_LOG_JSON", "false").lower() == "true"
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper()))
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    if use_json:
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        root.addHandler(handler)
    else:
        logging.basicConfig(level=getattr(logging, level.upper()))


__all__ = [
    "CODEC_NAME",
    "EOF",
    "FORWARD_TABLE",
    "INVERSE_TABLE",
    "AsciiToEbcdicWriter",
    "CodecTableError",
    "EbcdicIOError",
    "EbcdicToAsciiReader",
    "JSONFormatter",
    "ascii_to_ebcdic",
    "decode_text",
    "ebcdic_to_ascii",
    "encode_text",
    "setup_logging",
]
