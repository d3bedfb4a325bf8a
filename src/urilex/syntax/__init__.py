"""src/urilex/syntax/__init__.py

Lexical layer: token types and the tokenizer.

The parser lives in ``urilex.syntax.parser`` and is imported explicitly.
"""

from .lexer import Lexer, tokenize
from .token import DELIMITERS, EOF, Delimiter, EndOfInput, Literal, Token

__all__ = [
    "DELIMITERS",
    "EOF",
    "Delimiter",
    "EndOfInput",
    "Literal",
    "Token",
    "Lexer",
    "tokenize",
]
