"""Structured parse result."""

from __future__ import annotations

from dataclasses import dataclass, field

from miniyaml.diagnostics import Diagnostic, has_errors


@dataclass(frozen=True, slots=True)
class ParseOutcome:
    """How far a parse got.

    A partial match is not an exception: callers decide whether the
    recognised prefix is good enough.
    """

    full_match: bool
    stop_offset: int
    hit_end: bool
    matched_lines: int = 0
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def is_partial(self) -> bool:
        return not self.full_match

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def __bool__(self) -> bool:
        return self.full_match
