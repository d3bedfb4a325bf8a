"""src/urilex/__init__.py

Urilex - lexer and parser for ``scheme://host[:port][/path][?query][#fragment]`` URIs.

Urilex splits URI text into delimiter and literal tokens, parses the tokens
with a small recursive descent grammar and serializes the result back into
canonical text. It has no dependencies outside the standard library.

Key Features:
    - Single pass tokenizer (``:``, ``/``, ``?``, ``#`` delimiters)
    - One token lookahead parser that stops at the first error
    - Immutable ``ParsedUri`` results with structural equality
    - Configurable handling of invalid ports
    - Full type hints (PEP 561)

Example:
    Parsing::

        from urilex import parse

        uri = parse('https://example.com:443/path/to?q1=10&q2=20#fragment')
        print(uri.hostname, uri.port, uri.path)

    Serializing::

        from urilex import format_uri, parse

        format_uri(parse('https://example.com'))  # 'https://example.com/'

    Error handling::

        from urilex import ParseError, parse

        try:
            parse('///example.com')
        except ParseError as exc:
            print(exc)  # Scheme not found
"""

from urilex.config import ParserOptions
from urilex.exceptions import (
    ExpectedToken,
    HostnameNotFound,
    InvalidPort,
    ParseError,
    SchemeNotFound,
    UrilexError,
)
from urilex.syntax.lexer import Lexer, tokenize
from urilex.syntax.parser import Parser, parse
from urilex.syntax.token import EOF, Delimiter, EndOfInput, Literal, Token
from urilex.uri import ParsedUri, format_uri
from urilex.version import __version__

__all__ = [
    "parse",
    "format_uri",
    "tokenize",
    "ParsedUri",
    "ParserOptions",
    "Parser",
    "Lexer",
    "Token",
    "Delimiter",
    "Literal",
    "EndOfInput",
    "EOF",
    "UrilexError",
    "ParseError",
    "SchemeNotFound",
    "ExpectedToken",
    "HostnameNotFound",
    "InvalidPort",
    "__version__",
]
