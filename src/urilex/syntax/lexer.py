"""src/urilex/syntax/lexer.py

Single pass tokenizer for URI text.
"""

from typing import List, Optional

from urilex.syntax.token import DELIMITERS, EOF, Delimiter, Literal, Token

__all__ = ["Lexer", "tokenize"]


class Lexer:
    """
    Splits text into delimiter and literal tokens.

    Scanning never fails: any string, including the empty one, produces at
    least the ``EOF`` token.
    """

    __slots__ = ("source", "_tokens")

    def __init__(self, source: str):
        self.source = source
        self._tokens: Optional[List[Token]] = None

    def tokens(self) -> List[Token]:
        """
        Return the token sequence, scanning the source on first use.

        Returns:
            A new list of tokens terminated by ``EOF``.
        """
        if self._tokens is None:
            self._tokens = self._scan()
        return list(self._tokens)

    def _scan(self) -> List[Token]:
        source = self.source
        tokens: List[Token] = []
        start = 0

        for index, char in enumerate(source):
            if char not in DELIMITERS:
                continue
            if start < index:
                tokens.append(Literal(source[start:index], offset=start))
            tokens.append(Delimiter(char, offset=index))
            start = index + 1

        if start < len(source):
            tokens.append(Literal(source[start:], offset=start))
        tokens.append(EOF)
        return tokens


def tokenize(source: str) -> List[Token]:
    """Tokenize ``source`` into a list terminated by ``EOF``."""
    return Lexer(source).tokens()
