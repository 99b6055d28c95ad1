"""Tagged values held by the document store."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class ValueKind(StrEnum):
    TEXT = "text"
    INTEGER = "integer"
    LIST = "list"

    @staticmethod
    def coerce(kind: ValueKind | type) -> ValueKind:
        """Map `str`/`int`/`list` to their tag; tags pass through."""
        if isinstance(kind, ValueKind):
            return kind
        if kind is str:
            return ValueKind.TEXT
        if kind is int:
            return ValueKind.INTEGER
        if kind is list:
            return ValueKind.LIST
        raise ValueError(f"Unsupported value type: {kind!r}")


@dataclass(frozen=True, slots=True)
class TextValue:
    text: str

    @property
    def kind(self) -> ValueKind:
        return ValueKind.TEXT

    def to_python(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class IntegerValue:
    value: int

    @property
    def kind(self) -> ValueKind:
        return ValueKind.INTEGER

    def to_python(self) -> int:
        return self.value


@dataclass(slots=True)
class ListValue:
    """Ordered text items. Only the builder appends, and only while parsing."""

    items: list[str] = field(default_factory=list)

    @property
    def kind(self) -> ValueKind:
        return ValueKind.LIST

    def append(self, item: str) -> None:
        self.items.append(item)

    def to_python(self) -> list[str]:
        return list(self.items)


Value = TextValue | IntegerValue | ListValue
