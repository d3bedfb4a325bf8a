"""tests/unit/test_exceptions.py"""

import pytest

from urilex.exceptions import (
    ExpectedToken,
    HostnameNotFound,
    InvalidPort,
    ParseError,
    SchemeNotFound,
    UrilexError,
)
from urilex.syntax.token import EOF, Delimiter, Literal


def test_exception_hierarchy():
    """Verify the inheritance structure of Urilex exceptions."""
    assert issubclass(UrilexError, Exception)
    assert issubclass(ParseError, UrilexError)
    assert issubclass(SchemeNotFound, ParseError)
    assert issubclass(ExpectedToken, ParseError)
    assert issubclass(HostnameNotFound, ParseError)
    assert issubclass(InvalidPort, ParseError)


def test_scheme_not_found_default_message():
    """Verify that SchemeNotFound has a default message."""
    with pytest.raises(SchemeNotFound) as exc_info:
        raise SchemeNotFound()
    assert str(exc_info.value) == "Scheme not found"


@pytest.mark.parametrize(
    "expected, found, message",
    [
        (Delimiter(":"), EOF, "Expected: :, but: EOF"),
        (Delimiter("/"), Literal("host"), "Expected: /, but: host"),
        (Delimiter("/"), Delimiter("?"), "Expected: /, but: ?"),
    ],
)
def test_expected_token_message(expected, found, message):
    """Verify that both tokens render as their text."""
    assert str(ExpectedToken(expected, found)) == message


@pytest.mark.parametrize(
    "found, message",
    [
        (Delimiter("/"), "Expected hostname, but was /"),
        (Delimiter("#"), "Expected hostname, but was #"),
        (EOF, "Expected hostname but was Eof"),
    ],
)
def test_hostname_not_found_message(found, message):
    """Verify the delimiter and end-of-input hostname messages."""
    error = HostnameNotFound(found)
    assert str(error) == message
    assert error.found == found


def test_invalid_port_message():
    """Verify that InvalidPort names the offending literal."""
    error = InvalidPort(Literal("http"))
    assert str(error) == "Invalid port: http"
    assert error.literal == Literal("http")


@pytest.mark.parametrize("exception_class", [UrilexError, ParseError])
def test_generic_exceptions_accept_message(exception_class):
    """Verify that generic exceptions can be raised with a message."""
    message = f"Testing {exception_class.__name__}"
    with pytest.raises(exception_class) as exc_info:
        raise exception_class(message)
    assert message in str(exc_info.value)
