"""Character-class scanner.

The document grammar decides which token class it wants at each position
(`alnum+` for keys, `alpha+` for string values, a real literal for numbers),
so the scanner lexes on demand instead of producing a fixed token stream.
"""

from dataclasses import dataclass
import re
import string

from miniyaml.lexer.tokens import Token, TokenKind
from miniyaml.text import TextRange, TextSize

_ALPHA = frozenset(string.ascii_letters)
_ALNUM = frozenset(string.ascii_letters + string.digits)
_TRIVIA = frozenset(" \t\r\n")

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

_PUNCTUATION: dict[TokenKind, str] = {
    TokenKind.COLON: ":",
    TokenKind.DASH: "-",
}


@dataclass(frozen=True, slots=True)
class ScannerCheckpoint:
    position: int


class Scanner:
    """Skips whitespace between tokens and lexes one requested token class at a time."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._furthest = 0

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> TextSize:
        return TextSize.from_int(self._position)

    @property
    def furthest(self) -> TextSize:
        """Furthest offset the scanner has reached, rewinds included."""
        return TextSize.from_int(self._furthest)

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def hit_end(self) -> bool:
        return self._furthest >= len(self._source)

    @property
    def checkpoint(self) -> ScannerCheckpoint:
        return ScannerCheckpoint(position=self._position)

    def rewind(self, checkpoint: ScannerCheckpoint) -> None:
        self._position = checkpoint.position

    def skip_trivia(self) -> None:
        while not self.is_eof and self._current_char() in _TRIVIA:
            self._advance(1)

    def at_end(self) -> bool:
        self.skip_trivia()
        return self.is_eof

    def current_range(self) -> TextRange:
        """One-character range at the current position (empty at EOF)."""
        end = min(self._position + 1, len(self._source))
        return TextRange.from_offsets(self._position, end)

    def lex(self, kind: TokenKind) -> Token | None:
        """Lex a token of `kind` after leading whitespace.

        Returns None without consuming the token when the input does not start
        with that class. Leading whitespace stays consumed.
        """
        self.skip_trivia()
        start = self._position

        match kind:
            case TokenKind.IDENTIFIER | TokenKind.WORD:
                self._consume_run(_ALNUM)
            case TokenKind.ALPHA:
                self._consume_run(_ALPHA)
            case TokenKind.NUMBER:
                self._lex_number()
            case TokenKind.COLON | TokenKind.DASH:
                if self._current_char() == _PUNCTUATION[kind]:
                    self._advance(1)
            case TokenKind.EOF:
                pass
            case _:
                raise ValueError(f"Unsupported token kind: {kind!r}")

        if kind == TokenKind.EOF and not self.is_eof:
            return None
        if self._position == start and not kind.may_be_empty:
            return None
        return Token(kind, TextRange.from_offsets(start, self._position))

    def _lex_number(self) -> None:
        match = _NUMBER_RE.match(self._source, self._position)
        if match is not None:
            self._advance(match.end() - self._position)

    def _consume_run(self, allowed: frozenset[str]) -> None:
        while not self.is_eof and self._current_char() in allowed:
            self._advance(1)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _advance(self, steps: int) -> None:
        self._position += steps
        if self._position > self._furthest:
            self._furthest = self._position
