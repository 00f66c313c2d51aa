"""
Splice math — how many characters are visible for a given progress, and how
the string is partitioned at that point.
"""

import math
from typing import Optional, Sequence

from prompter.models.partition import Partition
from prompter.utils.interpolation import linear_interpolation, clamp


def progress_at(timestamp: float, start: float, duration: float) -> float:
    """Linear progress of a reveal, clamped to [0, 1]."""
    return clamp((timestamp - start) / duration, 0.0, 1.0)


def splice_point(length: int, progress: float) -> int:
    """Number of revealed characters; equals `length` exactly at progress 1."""
    return math.ceil(linear_interpolation(0, length, progress))


def partition(characters: Sequence[str], splice: int, cursor: Optional[str] = None) -> Partition:
    """
    Split characters at `splice`.

    While the string isn't fully revealed, a configured cursor takes the slot
    of the first hidden character instead of being drawn in addition to it.
    """
    revealed = "".join(characters[:splice])
    hidden = list(characters[splice:])

    if cursor and splice < len(characters):
        covered = hidden.pop(0)
        return Partition(revealed=revealed, covered=covered, pending="".join(hidden), cursor=cursor)

    return Partition(revealed=revealed, covered="", pending="".join(hidden))
