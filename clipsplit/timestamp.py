"""
clipsplit.timestamp - Manifest timestamp parsing and formatting.

Accepts plain seconds (``SS`` or ``SS.frac``) and ``MM:SS`` values. Numeric
fields that fail to parse count as zero; only a wrong number of colon
separated fields is an error.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

from clipsplit.exceptions import TimestampError

_WHITESPACE = re.compile(r"\s")


def _parse_seconds(field: str) -> float:
    try:
        value = float(field)
    except ValueError:
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def parse_timestamp(text: str) -> float:
    """Convert a manifest timestamp to seconds.

    Args:
        text: Timestamp string, may contain whitespace anywhere

    Returns:
        Seconds as float (0.0 for empty or unparseable values)

    Raises:
        TimestampError: If the value has more than one colon
    """
    compact = _WHITESPACE.sub("", text)
    if not compact:
        return 0.0

    fields = compact.split(":")
    if len(fields) > 2:
        raise TimestampError(f"error parsing timestamp {compact}")
    if len(fields) == 1:
        return _parse_seconds(compact)

    minutes = _parse_seconds(fields[0])
    seconds = _parse_seconds(fields[1])
    return minutes * 60 + seconds


def format_seconds(value: float) -> str:
    """Format seconds as a plain decimal string for FFmpeg.

    Uses the shortest representation, never an exponent, and drops a
    trailing ``.0`` (``10.0`` -> ``"10"``, ``0.00001`` -> ``"0.00001"``).
    """
    text = repr(float(value))
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text
