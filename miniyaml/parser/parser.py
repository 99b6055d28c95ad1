"""Event-buffering parser core."""

from dataclasses import dataclass

from miniyaml.diagnostics import Diagnostic
from miniyaml.lexer import Scanner, ScannerCheckpoint, Token, TokenKind
from miniyaml.parser.event import Event
from miniyaml.text import TextRange, TextSize


@dataclass(frozen=True, slots=True)
class ParserCheckpoint:
    scanner_checkpoint: ScannerCheckpoint
    events_len: int


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside the line loop."""

    _position: TextSize | None = None

    def has_progressed(self, parser: "Parser") -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed

    def assert_progressing(self, parser: "Parser") -> None:
        if not self.has_progressed(parser):
            raise RuntimeError(f"Parser stopped making progress at offset {parser.position.value}")


class Parser:
    """Recursive-descent parser state.

    Grammar routines lex through the scanner and push events; a failed
    production rewinds both the scanner and the event buffer.
    """

    def __init__(self, scanner: Scanner) -> None:
        self._scanner = scanner
        self._events: list[Event] = []
        self._diagnostics: list[Diagnostic] = []

    @property
    def scanner(self) -> Scanner:
        return self._scanner

    @property
    def events(self) -> list[Event]:
        return self._events

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def position(self) -> TextSize:
        return self._scanner.position

    @property
    def current_range(self) -> TextRange:
        return self._scanner.current_range()

    def at_end(self) -> bool:
        return self._scanner.at_end()

    def expect(self, kind: TokenKind) -> Token | None:
        return self._scanner.lex(kind)

    def push(self, event: Event) -> None:
        self._events.append(event)

    def checkpoint(self) -> ParserCheckpoint:
        return ParserCheckpoint(
            scanner_checkpoint=self._scanner.checkpoint,
            events_len=len(self._events),
        )

    def rewind(self, checkpoint: ParserCheckpoint) -> None:
        self._scanner.rewind(checkpoint.scanner_checkpoint)
        del self._events[checkpoint.events_len :]

    def error(self, diagnostic: Diagnostic) -> None:
        if self._diagnostics:
            previous = self._diagnostics[-1]
            if previous.range.start == diagnostic.range.start:
                return
        self._diagnostics.append(diagnostic)

    def finish(self) -> tuple[list[Event], list[Diagnostic]]:
        return self._events, self._diagnostics
