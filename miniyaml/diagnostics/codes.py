"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PARSER_EXPECTED_COLON: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_COLON",
    message="Expected `:` after key",
    hint="Write properties as `key:value`.",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_VALUE",
    message="Expected a number or a word of letters after `:`",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_CHARACTER",
    message="Unexpected character at start of line",
    hint="Lines are either `key:value` or `- item`.",
    severity="error",
    category="parser",
)
