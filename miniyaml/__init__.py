"""Parser and typed document model for a tiny line-oriented YAML subset."""

from miniyaml.diagnostics import Diagnostic
from miniyaml.document import (
    Document,
    IndexOutOfRangeError,
    IntegerValue,
    KeyNotFoundError,
    ListNotFoundError,
    ListValue,
    ListView,
    MiniYamlError,
    TextValue,
    TypeMismatchError,
    Value,
    ValueKind,
    parse_document,
)
from miniyaml.parser import ParseOutcome, ParserOptions

__all__ = [
    "Diagnostic",
    "Document",
    "IndexOutOfRangeError",
    "IntegerValue",
    "KeyNotFoundError",
    "ListNotFoundError",
    "ListValue",
    "ListView",
    "MiniYamlError",
    "ParseOutcome",
    "ParserOptions",
    "TextValue",
    "TypeMismatchError",
    "Value",
    "ValueKind",
    "parse_document",
]
