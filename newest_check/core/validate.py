from __future__ import annotations

from typing import Optional, Sequence

from .errors import CountMismatch, OrderViolation
from .log import log


def find_order_violation(timestamps: Sequence[int]) -> Optional[int]:
    """Index of the first item that is older than the one after it, else None."""
    for i in range(len(timestamps) - 1):
        if not timestamps[i] >= timestamps[i + 1]:
            return i
    return None


def validate_timestamps(timestamps: Sequence[int], expected: int) -> None:
    """
    Raise CountMismatch unless exactly `expected` timestamps were collected,
    then OrderViolation at the first adjacent pair that is not newest-first.
    Indexes are 0-based.
    """
    if len(timestamps) != expected:
        raise CountMismatch(len(timestamps), expected)

    i = find_order_violation(timestamps)
    if i is not None:
        raise OrderViolation(i, timestamps[i], timestamps[i + 1])

    log(f"[check] Success! The first {expected} articles are sorted from newest to oldest.")
