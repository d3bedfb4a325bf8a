"""src/urilex/syntax/token.py

Token types produced by the lexer.

A token renders (``str()``) as the exact text it was scanned from, so the
concatenation of every token before ``EOF`` is the original input. The
end-of-input sentinel renders as ``"EOF"``.
"""

from dataclasses import dataclass, field
from typing import Union

__all__ = ["DELIMITERS", "Delimiter", "Literal", "EndOfInput", "EOF", "Token"]

DELIMITERS = ":/?#"


@dataclass(frozen=True)
class Delimiter:
    """
    Structural character.

    Attributes:
        char: One of ``:``, ``/``, ``?``, ``#``.
        offset: Position of the character in the source text.
    """

    char: str
    offset: int = field(default=-1, compare=False)

    def __post_init__(self) -> None:
        if len(self.char) != 1 or self.char not in DELIMITERS:
            raise ValueError(f"Not a delimiter: {self.char!r}")

    def __str__(self) -> str:
        return self.char


@dataclass(frozen=True)
class Literal:
    """
    Maximal run of non-delimiter characters.

    Attributes:
        text: The run itself, never empty.
        offset: Position of the first character in the source text.
    """

    text: str
    offset: int = field(default=-1, compare=False)

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Literal token cannot be empty")

    def __str__(self) -> str:
        return self.text


class EndOfInput:
    """End-of-input sentinel; use the module level ``EOF`` instance."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EndOfInput)

    def __hash__(self) -> int:
        return hash(EndOfInput)

    def __repr__(self) -> str:
        return "EndOfInput()"

    def __str__(self) -> str:
        return "EOF"


EOF = EndOfInput()

Token = Union[Delimiter, Literal, EndOfInput]
