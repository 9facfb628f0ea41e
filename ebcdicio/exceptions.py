"""Exceptions for ebcdicio."""

from typing import Any, Dict, Optional


class EbcdicIOError(Exception):
    """Base error for ebcdicio.

    ``context`` holds the values that explain the failure and is appended to
    the message when the error is rendered.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.context = dict(context or {})
        self.original_exception = original_exception

    def __str__(self) -> str:
        message = super().__str__()
        if not self.context:
            return message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{message} (Context: {details})"


class CodecTableError(EbcdicIOError):
    """Translation table is not a permutation of the 256 byte values."""
