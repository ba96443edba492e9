"""Lenient numeric parsing helpers.

Both helpers read the longest numeric prefix of a string and ignore whatever
follows it, so ``"1.000"`` reads as ``1`` and ``"12abc"`` as ``12``.
"""

from __future__ import annotations

import re
from typing import Optional

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_leading_int(text: str) -> Optional[int]:
    """Return the integer at the start of ``text`` or None when there is none."""
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_leading_float(text: str) -> Optional[float]:
    """Return the float at the start of ``text`` or None when there is none."""
    match = _LEADING_FLOAT.match(text)
    if match is None:
        return None
    return float(match.group(1))
