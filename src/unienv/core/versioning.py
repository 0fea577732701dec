"""Dotted version comparison (core domain)."""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import List

_LEADING_DIGITS = re.compile(r"\d+")


def _segments(version: str) -> List[int]:
    """Split a dotted version into numeric segments.

    Each segment is read as its leading run of digits so pre-release tags
    like ``0rc1`` count as ``0``; a segment with no digits counts as ``0``.
    """

    segments: List[int] = []
    for part in version.strip().split("."):
        match = _LEADING_DIGITS.match(part.strip())
        segments.append(int(match.group()) if match else 0)
    return segments


def compare_versions(left: str, right: str) -> int:
    """Return -1, 0 or 1 as ``left`` is lower, equal or higher than ``right``."""

    if left == right:
        return 0
    for a, b in zip_longest(_segments(left), _segments(right), fillvalue=0):
        if a != b:
            return -1 if a < b else 1
    return 0


def more_than(required: str, current: str) -> bool:
    """Return True when ``current`` satisfies the inclusive floor ``required``."""

    # Identical strings always satisfy the floor, whatever their content.
    if required == current:
        return True
    return compare_versions(current, required) >= 0
