"""Diagnostics."""

from miniyaml.diagnostics.codes import (
    PARSER_EXPECTED_COLON,
    PARSER_EXPECTED_VALUE,
    PARSER_UNEXPECTED_CHARACTER,
    DiagnosticSpec,
)
from miniyaml.diagnostics.diagnostic import Diagnostic, Severity
from miniyaml.diagnostics.report import diagnostic_from_spec, has_errors

__all__ = [
    "PARSER_EXPECTED_COLON",
    "PARSER_EXPECTED_VALUE",
    "PARSER_UNEXPECTED_CHARACTER",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "diagnostic_from_spec",
    "has_errors",
]
