"""
Centralized logging utilities for ebcdicio.

Provides standardized logging functions so codec and stream modules share one
log line format.
"""

import logging
from typing import Any


def log_debug_operation(
    logger: logging.Logger, operation: str, details: Any = None
) -> None:
    """Log debug information for operations."""
    if details is not None:
        logger.debug(f"{operation}: {details}")
    else:
        logger.debug(f"{operation}")


def log_data_processing(
    logger: logging.Logger, operation: str, data_info: str = ""
) -> None:
    """Log data processing operations with consistent format."""
    info_str = f" - {data_info}" if data_info else ""
    logger.debug(f"[DATA] {operation}{info_str}")


def log_stream_event(
    logger: logging.Logger, event_type: str, details: str = ""
) -> None:
    """Log stream lifecycle events (flush, close) with consistent format."""
    detail_str = f": {details}" if details else ""
    logger.debug(f"[STREAM] {event_type}{detail_str}")


def describe_stream(stream: Any) -> str:
    """Short human-readable label for a wrapped stream, used in log lines."""
    name = getattr(stream, "name", None)
    if isinstance(name, str) and name:
        return f"{type(stream).__name__}({name})"
    return type(stream).__name__
