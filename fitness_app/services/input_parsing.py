"""Parse-attempt helpers for numeric console input."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

INVALID_INTEGER_MESSAGE = "Invalid input. Please enter a valid integer."
INVALID_NUMBER_MESSAGE = "Invalid input. Please enter a valid number."

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of one parse attempt: either a value or an error message."""

    ok: bool
    value: T | None = None
    error: str | None = None


def parse_int(text: str) -> ParseResult[int]:
    """Parse a signed decimal integer such as ``"42"`` or ``"-3"``."""

    candidate = text.strip()
    if not _INTEGER_PATTERN.fullmatch(candidate):
        return ParseResult(ok=False, error=INVALID_INTEGER_MESSAGE)
    try:
        value = int(candidate)
    except ValueError:
        # digit strings past the interpreter's conversion limit
        return ParseResult(ok=False, error=INVALID_INTEGER_MESSAGE)
    return ParseResult(ok=True, value=value)


def parse_float(text: str) -> ParseResult[float]:
    """Parse a finite decimal number; ``nan`` and infinities are rejected."""

    candidate = text.strip()
    if "_" in candidate:
        return ParseResult(ok=False, error=INVALID_NUMBER_MESSAGE)
    try:
        value = float(candidate)
    except ValueError:
        return ParseResult(ok=False, error=INVALID_NUMBER_MESSAGE)
    if not math.isfinite(value):
        return ParseResult(ok=False, error=INVALID_NUMBER_MESSAGE)
    return ParseResult(ok=True, value=value)
