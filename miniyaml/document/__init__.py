"""Document model: tagged values, builder, typed lookups."""

from miniyaml.document.builder import BuilderState, DocumentBuilder
from miniyaml.document.document import Document, parse_document
from miniyaml.document.errors import (
    IndexOutOfRangeError,
    KeyNotFoundError,
    ListNotFoundError,
    MiniYamlError,
    TypeMismatchError,
)
from miniyaml.document.scalar import fits_signed, integer_portion
from miniyaml.document.store import ValueStore
from miniyaml.document.values import IntegerValue, ListValue, TextValue, Value, ValueKind
from miniyaml.document.views import ListView

__all__ = [
    "BuilderState",
    "Document",
    "DocumentBuilder",
    "IndexOutOfRangeError",
    "IntegerValue",
    "KeyNotFoundError",
    "ListNotFoundError",
    "ListValue",
    "ListView",
    "MiniYamlError",
    "TextValue",
    "TypeMismatchError",
    "Value",
    "ValueKind",
    "ValueStore",
    "fits_signed",
    "integer_portion",
    "parse_document",
]
