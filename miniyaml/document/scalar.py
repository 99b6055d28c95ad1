"""Number literal conversion."""

from __future__ import annotations

import re

_INTEGER_PORTION_RE = re.compile(r"^([+-]?)(\d*)", re.ASCII)


def integer_portion(text: str) -> int | None:
    """Integer part of a real literal, truncated toward zero.

    `3.9` -> 3, `-3.9` -> -3, `1e3` -> 1 (the exponent is not applied).
    Returns None when the literal has no integer digits at all (`.5`).
    """
    match = _INTEGER_PORTION_RE.match(text.strip())
    if match is None or not match.group(2):
        return None
    value = int(match.group(2))
    return -value if match.group(1) == "-" else value


def fits_signed(value: int, *, bits: int) -> bool:
    return -(1 << (bits - 1)) <= value <= (1 << (bits - 1)) - 1
