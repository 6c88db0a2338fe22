"""Lenient coercion of query-string values."""

from __future__ import annotations

import math


def coerce_float(value: str | None) -> float | None:
    """Parse a numeric query parameter; anything unusable counts as absent."""

    if value is None or not value.strip():
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def coerce_int(value: str | None) -> int | None:
    number = coerce_float(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def first_present(*values: str | None) -> str | None:
    """Return the first non-empty value, used for aliased parameters."""

    for value in values:
        if value:
            return value
    return None
