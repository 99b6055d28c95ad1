"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum

from miniyaml.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Character-class runs
    # -------------------------
    IDENTIFIER = 20  # one or more ASCII alphanumerics
    ALPHA = 21  # one or more ASCII letters
    NUMBER = 22  # real literal
    WORD = 23  # zero or more ASCII alphanumerics

    # -------------------------
    # Punctuation
    # -------------------------
    COLON = 40  # :
    DASH = 41  # -

    @property
    def may_be_empty(self) -> bool:
        return self in (TokenKind.WORD, TokenKind.EOF)


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    range: TextRange
