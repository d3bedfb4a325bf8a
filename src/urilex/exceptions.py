"""src/urilex/exceptions.py

Urilex Exceptions hierarchy.

The string form of every parse error is its user-facing message.
"""

from typing import Any

from urilex.syntax.token import EndOfInput


class UrilexError(Exception):
    """Base exception for all Urilex errors."""


class ParseError(UrilexError):
    """
    Base exception for parse failures.
    The first error aborts the parse; there is no partial result.
    """


class SchemeNotFound(ParseError):
    """The input does not start with a scheme literal."""

    def __init__(self, message: str = "Scheme not found"):
        super().__init__(message)


class ExpectedToken(ParseError):
    """A required delimiter after the scheme is missing or mismatched."""

    def __init__(self, expected: Any, found: Any):
        self.expected = expected
        self.found = found
        super().__init__(f"Expected: {expected}, but: {found}")


class HostnameNotFound(ParseError):
    """The token after ``://`` is not a hostname literal."""

    def __init__(self, found: Any):
        self.found = found
        if isinstance(found, EndOfInput):
            message = "Expected hostname but was Eof"
        else:
            message = f"Expected hostname, but was {found}"
        super().__init__(message)


class InvalidPort(ParseError):
    """Port literal is not a decimal number in the 0-65535 range."""

    def __init__(self, literal: Any):
        self.literal = literal
        super().__init__(f"Invalid port: {literal}")
