"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from miniyaml.diagnostics.codes import DiagnosticSpec
from miniyaml.diagnostics.diagnostic import Diagnostic
from miniyaml.text import TextRange


def diagnostic_from_spec(spec: DiagnosticSpec, range: TextRange) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=spec.message,
        range=range,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)
