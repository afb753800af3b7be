"""Tests for ContentLengthInspector."""

import pytest

from vindinium.buffer import GrowableBuffer
from vindinium.errors import AllocationError, TransportFailureError
from vindinium.headers import ContentLengthInspector


@pytest.fixture
def buffer() -> GrowableBuffer:
    return GrowableBuffer()


def test_reserves_content_length_plus_terminator(buffer) -> None:
    inspector = ContentLengthInspector(buffer)
    inspector(b"Content-Length", b"11")
    assert buffer.capacity == 12
    assert buffer.allocations == 1
    assert inspector.content_length == 11


@pytest.mark.parametrize("name", [b"content-length", b"CONTENT-LENGTH", b"CoNtEnT-LeNgTh"])
def test_name_match_is_case_insensitive(buffer, name) -> None:
    ContentLengthInspector(buffer)(name, b" 42 ")
    assert buffer.capacity == 43


@pytest.mark.parametrize("name", [b"", b"a", b"content", b"Content-Type", b"content-length-x"])
def test_other_headers_are_ignored(buffer, name) -> None:
    inspector = ContentLengthInspector(buffer)
    inspector(name, b"application/json")
    assert buffer.capacity == 0
    assert inspector.content_length is None


@pytest.mark.parametrize("value", [b"0", b"", b"abc", b"-5", b"1_0"])
def test_zero_or_malformed_value_aborts(buffer, value) -> None:
    with pytest.raises(TransportFailureError):
        ContentLengthInspector(buffer)(b"Content-Length", value)
    assert buffer.capacity == 0


def test_value_too_long_for_digit_buffer(buffer) -> None:
    with pytest.raises(TransportFailureError):
        ContentLengthInspector(buffer)(b"Content-Length", b"1" * 21)


def test_value_above_maximum_is_an_allocation_failure(buffer) -> None:
    inspector = ContentLengthInspector(buffer, max_content_length=65536)
    with pytest.raises(AllocationError):
        inspector(b"Content-Length", b"100000")
    assert buffer.capacity == 0


def test_value_at_maximum_is_accepted(buffer) -> None:
    ContentLengthInspector(buffer, max_content_length=65536)(b"content-length", b"65536")
    assert buffer.capacity == 65537


def test_repeated_header_is_tolerated(buffer) -> None:
    inspector = ContentLengthInspector(buffer)
    inspector(b"Content-Length", b"10")
    inspector(b"Content-Length", b"20")
    assert buffer.capacity == 21
