"""Read-only consumer views over stored values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from miniyaml.document.errors import IndexOutOfRangeError, TypeMismatchError
from miniyaml.document.values import ListValue, ValueKind


@dataclass(frozen=True, slots=True)
class ListView:
    """Explicit view over the document's `ListValue`.

    Borrowed from the owning `Document`; it is not a copy.
    """

    list_value: ListValue
    key: str

    def count(self) -> int:
        return len(self.list_value.items)

    def value_as(self, index: int, kind: ValueKind | type = str) -> str:
        expected = ValueKind.coerce(kind)
        if expected != ValueKind.TEXT:
            raise TypeMismatchError(f"{self.key}[{index}]", expected, ValueKind.TEXT)

        length = self.count()
        if index < 0 or index >= length:
            raise IndexOutOfRangeError(index, length)
        return self.list_value.items[index]

    def __len__(self) -> int:
        return self.count()

    def __getitem__(self, index: int) -> str:
        return self.value_as(index)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self.list_value.items))

    def to_list(self) -> list[str]:
        return self.list_value.to_python()
