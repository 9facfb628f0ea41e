import io
import logging
from logging import NullHandler
from unittest.mock import Mock

import pytest

from ebcdicio.io import AsciiToEbcdicWriter, EbcdicToAsciiReader


def pytest_configure(config):
    config.option.log_cli_level = "INFO"
    config.addinivalue_line(
        "markers", "property: hypothesis property-based tests for codec invariants"
    )


class ChunkedSource:
    """Binary source that hands out a scripted sequence of read results.

    Each ``read`` call returns the next item; ``b""`` items model end of
    stream and ``None`` items model a non-blocking source with no data.
    """

    def __init__(self, *chunks):
        self._chunks = list(chunks)
        self.closed = False
        self.reads = []

    def read(self, size=-1):
        self.reads.append(size)
        if not self._chunks:
            return b""
        return self._chunks.pop(0)

    def close(self):
        self.closed = True


@pytest.fixture
def mock_sink():
    """Fixture providing a Mock output stream that records every call."""
    sink = Mock()
    sink.closed = False
    sink.write.side_effect = len
    return sink


@pytest.fixture
def memory_sink():
    """Fixture providing a real in-memory binary sink."""
    return io.BytesIO()


@pytest.fixture
def ebcdic_writer(memory_sink):
    """Fixture providing an AsciiToEbcdicWriter over a BytesIO sink."""
    return AsciiToEbcdicWriter(memory_sink)


@pytest.fixture
def abc_reader():
    """Fixture providing a reader over the EBCDIC bytes for "ABC"."""
    return EbcdicToAsciiReader(io.BytesIO(b"\xc1\xc2\xc3"))


@pytest.fixture
def chunked_source():
    return ChunkedSource


@pytest.fixture(autouse=True)
def suppress_logging():
    logger = logging.getLogger()
    old_handlers = logger.handlers[:]
    null_handler = NullHandler()
    logger.addHandler(null_handler)
    yield
    try:
        logger.removeHandler(null_handler)
    except ValueError:
        pass
    current_handlers = logger.handlers[:]
    for h in old_handlers:
        if h not in current_handlers:
            logger.addHandler(h)
    for h in logger.handlers[:]:
        if h not in old_handlers:
            logger.removeHandler(h)
