"""Parser events."""

from dataclasses import dataclass
from typing import Protocol

from miniyaml.text import TextRange, slice_text_range


@dataclass(frozen=True, slots=True)
class IdentifierEvent:
    range: TextRange


@dataclass(frozen=True, slots=True)
class StringValueEvent:
    range: TextRange


@dataclass(frozen=True, slots=True)
class NumberValueEvent:
    range: TextRange


@dataclass(frozen=True, slots=True)
class ListItemEvent:
    range: TextRange


Event = IdentifierEvent | StringValueEvent | NumberValueEvent | ListItemEvent


class EventSink(Protocol):
    def on_identifier(self, text: str) -> None: ...

    def on_string(self, text: str) -> None: ...

    def on_number(self, text: str) -> None: ...

    def on_list_item(self, text: str) -> None: ...


def process_events(sink: EventSink, events: list[Event], text: str) -> None:
    """Replay recognised events into `sink`, in source order."""
    for event in events:
        fragment = slice_text_range(text, event.range)
        match event:
            case IdentifierEvent():
                sink.on_identifier(fragment)
            case StringValueEvent():
                sink.on_string(fragment)
            case NumberValueEvent():
                sink.on_number(fragment)
            case ListItemEvent():
                sink.on_list_item(fragment)
            case _:
                raise RuntimeError(f"Unknown parser event: {event!r}")
