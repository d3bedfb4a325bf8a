"""src/urilex/syntax/parser.py

Recursive descent parser over the lexer's token sequence.
"""

import string
from typing import List, Optional, Sequence

from urilex.config import ParserOptions
from urilex.exceptions import (
    ExpectedToken,
    HostnameNotFound,
    InvalidPort,
    SchemeNotFound,
)
from urilex.syntax.lexer import tokenize
from urilex.syntax.token import EOF, Delimiter, EndOfInput, Literal, Token
from urilex.uri import ParsedUri

__all__ = ["Parser", "parse"]

MAX_PORT = 0xFFFF

COLON = Delimiter(":")
SLASH = Delimiter("/")
QUESTION = Delimiter("?")
HASH = Delimiter("#")


class Parser:
    """
    Grammar driven parser with one token of lookahead.

    Components are read in a fixed order: scheme, hostname, port, path,
    query, fragment. Only the scheme and hostname can fail the parse
    (and the port, under the strict port policy). Tokens left over after
    the fragment are ignored.
    """

    __slots__ = ("tokens", "current", "options")

    def __init__(
        self, tokens: Sequence[Token], options: Optional[ParserOptions] = None
    ):
        self.tokens: List[Token] = list(tokens)
        if not self.tokens or not isinstance(self.tokens[-1], EndOfInput):
            self.tokens.append(EOF)
        self.current = 0
        self.options = options or ParserOptions()

    def parse(self) -> ParsedUri:
        """
        Parse the token sequence.

        Returns:
            The parsed URI.

        Raises:
            SchemeNotFound: If the first token is not a literal.
            ExpectedToken: If ``://`` does not follow the scheme.
            HostnameNotFound: If no literal follows ``://``.
            InvalidPort: If the port is not a number in range and the
                port policy is strict.
        """
        scheme = self.scheme()
        hostname = self.hostname()
        port = self.port()
        path = self.path()
        query = self.query()
        fragment = self.fragment()
        return ParsedUri(
            scheme=scheme,
            hostname=hostname,
            port=port,
            path=path,
            query=query,
            fragment=fragment,
        )

    def scheme(self) -> str:
        """Read the scheme literal and the ``://`` that must follow it."""
        token = self.advance()
        if not isinstance(token, Literal):
            raise SchemeNotFound()

        self.consume(COLON)
        self.consume(SLASH)
        self.consume(SLASH)
        return token.text

    def hostname(self) -> str:
        token = self.advance()
        if not isinstance(token, Literal):
            raise HostnameNotFound(token)
        return token.text

    def port(self) -> Optional[int]:
        """
        Read an optional ``:port``.

        A delimiter right after ``:`` is consumed and yields no port.
        """
        if self.peek() != COLON:
            return None
        self.advance()

        token = self.advance()
        if not isinstance(token, Literal):
            return None

        number = _port_number(token.text)
        if number is None and self.options.strict_port:
            raise InvalidPort(token)
        return number

    def path(self) -> str:
        """Join the ``/`` separated segments, defaulting to ``/``."""
        if self.peek() != SLASH:
            return "/"
        self.advance()

        path = "/"
        while True:
            token = self.advance()
            if isinstance(token, Literal):
                path += token.text
            if self.peek() != SLASH:
                return path
            path += "/"
            self.advance()

    def query(self) -> Optional[str]:
        return self._tail(QUESTION)

    def fragment(self) -> Optional[str]:
        return self._tail(HASH)

    def _tail(self, marker: Delimiter) -> Optional[str]:
        # A marker not followed by a literal records nothing.
        if self.peek() != marker:
            return None
        self.advance()

        token = self.advance()
        if isinstance(token, Literal):
            return token.text
        return None

    def peek(self) -> Token:
        """Return the current token without consuming it."""
        return self.tokens[self.current]

    def advance(self) -> Token:
        """Consume and return the current token; ``EOF`` is never passed."""
        token = self.peek()
        if not self.is_at_end():
            self.current += 1
        return token

    def consume(self, expected: Token) -> None:
        """
        Consume the current token if it equals ``expected``.

        Raises:
            ExpectedToken: If the current token is anything else.
        """
        found = self.peek()
        if found != expected:
            raise ExpectedToken(expected, found)
        self.advance()

    def is_at_end(self) -> bool:
        return isinstance(self.peek(), EndOfInput)


def _port_number(text: str) -> Optional[int]:
    if len(text) > len(str(MAX_PORT)):
        return None
    if not all(char in string.digits for char in text):
        return None
    number = int(text)
    if number > MAX_PORT:
        return None
    return number


def parse(source: str, options: Optional[ParserOptions] = None) -> ParsedUri:
    """
    Parse a ``scheme://host[:port][/path][?query][#fragment]`` string.

    Args:
        source: URI text.
        options: Parser configuration, defaults to ``ParserOptions()``.

    Returns:
        The parsed URI.

    Raises:
        ParseError: On the first structural error; ``str()`` of the
            exception is the message to show the user.
    """
    return Parser(tokenize(source), options).parse()
