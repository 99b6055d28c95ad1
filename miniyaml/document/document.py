"""Document: the parsed store plus its typed query surface."""

from __future__ import annotations

from collections.abc import Iterator
import logging
from typing import overload

from miniyaml.document.builder import DocumentBuilder
from miniyaml.document.errors import KeyNotFoundError, ListNotFoundError, TypeMismatchError
from miniyaml.document.store import ValueStore
from miniyaml.document.values import IntegerValue, TextValue, Value, ValueKind
from miniyaml.document.views import ListView
from miniyaml.parser import ParseOutcome, ParserOptions, decode_source, parse_events, process_events

logger = logging.getLogger(__name__)


class Document:
    """Top-level container of parsed values keyed by identifier."""

    def __init__(self, options: ParserOptions | None = None) -> None:
        self._options = options or ParserOptions()
        self._store = ValueStore()
        self._builder = DocumentBuilder(self._store, self._options)

    @property
    def options(self) -> ParserOptions:
        return self._options

    def parse(self, text: str | bytes) -> ParseOutcome:
        """Parse `text` into this document.

        Never raises for malformed input: the returned outcome says how far
        the grammar got, and every line before that point is stored.
        """
        source = decode_source(text)
        events, outcome = parse_events(source)

        self._builder.reset()
        process_events(self._builder, events, source)
        logger.debug("document holds %d key(s) after parse", len(self._store))
        return outcome

    @overload
    def value_as(self, key: str, kind: type[str]) -> str: ...

    @overload
    def value_as(self, key: str, kind: type[int]) -> int: ...

    @overload
    def value_as(self, key: str, kind: ValueKind) -> str | int: ...

    def value_as(self, key, kind):
        expected = ValueKind.coerce(kind)
        if expected == ValueKind.LIST:
            raise ValueError("Use Document.list() to read the list")

        value = self._lookup(key)
        if expected == ValueKind.TEXT and isinstance(value, TextValue):
            return value.text
        if expected == ValueKind.INTEGER and isinstance(value, IntegerValue):
            return value.value
        raise TypeMismatchError(key, expected, value.kind)

    def text(self, key: str) -> str:
        return self.value_as(key, str)

    def integer(self, key: str) -> int:
        return self.value_as(key, int)

    def list(self) -> ListView:
        found = self._store.first_list()
        if found is None:
            raise ListNotFoundError()
        key, list_value = found
        return ListView(list_value=list_value, key=key)

    def kind_of(self, key: str) -> ValueKind:
        return self._lookup(key).kind

    def keys(self) -> list[str]:
        return list(self._store)

    def to_dict(self) -> dict[str, str | int | list[str]]:
        return {key: value.to_python() for key, value in self._store.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[str]:
        return iter(self._store)

    def _lookup(self, key: str) -> Value:
        value = self._store.get(key)
        if value is None:
            raise KeyNotFoundError(key)
        return value


def parse_document(
    text: str | bytes,
    options: ParserOptions | None = None,
) -> tuple[Document, ParseOutcome]:
    document = Document(options)
    outcome = document.parse(text)
    return document, outcome
