"""Keyed value store."""

from __future__ import annotations

from collections.abc import Iterator

from miniyaml.document.values import ListValue, Value


class ValueStore:
    """Identifier -> Value mapping. Re-keying replaces the previous value."""

    def __init__(self) -> None:
        self._values: dict[str, Value] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def get(self, key: str) -> Value | None:
        return self._values.get(key)

    def set(self, key: str, value: Value) -> None:
        self._values[key] = value

    def items(self) -> Iterator[tuple[str, Value]]:
        return iter(self._values.items())

    def first_list(self) -> tuple[str, ListValue] | None:
        """First list in insertion order, with its key."""
        for key, value in self._values.items():
            if isinstance(value, ListValue):
                return key, value
        return None
