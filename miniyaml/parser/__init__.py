"""Parser infrastructure (scanner-driven grammar + buffered events + sink replay)."""

from miniyaml.parser.event import (
    Event,
    EventSink,
    IdentifierEvent,
    ListItemEvent,
    NumberValueEvent,
    StringValueEvent,
    process_events,
)
from miniyaml.parser.grammar import (
    parse_document,
    parse_line,
    parse_list_item,
    parse_property,
    parse_value,
)
from miniyaml.parser.options import ParserOptions
from miniyaml.parser.outcome import ParseOutcome
from miniyaml.parser.parse import decode_source, parse_events
from miniyaml.parser.parser import Parser, ParserCheckpoint, ParserProgress

__all__ = [
    "Event",
    "EventSink",
    "IdentifierEvent",
    "ListItemEvent",
    "NumberValueEvent",
    "ParseOutcome",
    "Parser",
    "ParserCheckpoint",
    "ParserOptions",
    "ParserProgress",
    "StringValueEvent",
    "decode_source",
    "parse_document",
    "parse_events",
    "parse_line",
    "parse_list_item",
    "parse_property",
    "parse_value",
    "process_events",
]
