"""Integer range helpers."""

from __future__ import annotations

import math
from typing import List


def inclusive_range(start: int, stop: int, step: int = 1) -> List[int]:
    """
    Return ``start, start + step, ...`` up to and including ``stop``.

    The sequence has ``floor((stop - start) / step) + 1`` elements, so a
    negative ``step`` counts down and a ``stop`` that cannot be reached from
    ``start`` yields an empty list.

    Raises
    ------
    ValueError
        If step is zero
    """
    if step == 0:
        raise ValueError("step must not be zero")

    length = math.floor((stop - start) / step) + 1
    return [start + i * step for i in range(max(length, 0))]
