"""Normalization helpers.

Centralizes defensive parsing of vendor values.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any


def safe_float(value: Any) -> float | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result):
        return None
    return result


def safe_int(value: Any) -> int | None:
    parsed = safe_float(value)
    if parsed is None:
        return None
    return int(parsed)


def exact_int(value: Any) -> int | None:
    """Parse an integral sentinel; ``"91"`` and ``91.0`` pass, ``90.5`` does not."""
    parsed = safe_float(value)
    if parsed is None or not parsed.is_integer():
        return None
    return int(parsed)


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text else None


def positive_int_or_none(value: Any) -> int | None:
    """Return a positive int, or ``None`` for absent, zero and unparseable values.

    Vendor restriction fields use ``0``/``null`` for "no restriction".
    """
    parsed = safe_int(value)
    if not parsed or parsed < 0:
        return None
    return parsed


def parse_instant(value: Any) -> datetime | None:
    """Parse an ISO-8601 vendor timestamp (``Z`` suffix allowed)."""
    if not isinstance(value, str) or not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None
