"""
Utilities package for ebcdicio.

Contains common utility functions used across the ebcdicio codebase.
"""

from .logging_utils import (
    describe_stream,
    log_data_processing,
    log_debug_operation,
    log_stream_event,
)

__all__ = [
    "describe_stream",
    "log_data_processing",
    "log_debug_operation",
    "log_stream_event",
]
