"""Lookup errors raised by the document query surface."""

from __future__ import annotations

from miniyaml.document.values import ValueKind


class MiniYamlError(Exception):
    """Base class for document lookup failures."""


class KeyNotFoundError(MiniYamlError, KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Key not found: {self.key!r}"


class TypeMismatchError(MiniYamlError, TypeError):
    def __init__(self, key: str, expected: ValueKind, actual: ValueKind) -> None:
        super().__init__(key, expected, actual)
        self.key = key
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return f"Value under {self.key!r} is {self.actual}, not {self.expected}"


class IndexOutOfRangeError(MiniYamlError, IndexError):
    def __init__(self, index: int, length: int) -> None:
        super().__init__(index, length)
        self.index = index
        self.length = length

    def __str__(self) -> str:
        return f"List index {self.index} out of range for length {self.length}"


class ListNotFoundError(MiniYamlError, LookupError):
    def __init__(self) -> None:
        super().__init__("List not found")
