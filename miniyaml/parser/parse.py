"""High-level parse entrypoint for document source text."""

from __future__ import annotations

import logging

from miniyaml.lexer import Scanner
from miniyaml.parser.event import Event
from miniyaml.parser.grammar import parse_document
from miniyaml.parser.outcome import ParseOutcome
from miniyaml.parser.parser import Parser

logger = logging.getLogger(__name__)


def decode_source(text: str | bytes) -> str:
    """Bytes are decoded as Latin-1 so string offsets equal byte offsets."""
    if isinstance(text, bytes):
        return text.decode("latin-1")
    return text


def parse_events(text: str) -> tuple[list[Event], ParseOutcome]:
    scanner = Scanner(text)
    parser = Parser(scanner)

    matched_lines = parse_document(parser)
    full_match = scanner.is_eof
    events, diagnostics = parser.finish()

    stop_offset = len(text) if full_match else scanner.furthest.value
    outcome = ParseOutcome(
        full_match=full_match,
        stop_offset=stop_offset,
        hit_end=scanner.hit_end,
        matched_lines=matched_lines,
        diagnostics=list(diagnostics),
    )

    if full_match:
        logger.debug("parsed %d line(s), %d event(s)", matched_lines, len(events))
    else:
        logger.info(
            "parse stopped at offset %d of %d after %d line(s)",
            stop_offset,
            len(text),
            matched_lines,
        )
    return events, outcome
