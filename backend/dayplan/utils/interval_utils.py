"""
Set operations on half-open time intervals.

Note the asymmetry: `overlaps` treats touching intervals as disjoint,
while `merge_intervals` coalesces them. Free-time computations rely on
merging touching occupancy into one span.
"""

from __future__ import annotations

from typing import Iterable

from dayplan.models.interval import Interval


def overlaps(a: Interval, b: Interval) -> bool:
    """True if the intervals share at least one instant."""
    return max(a.start, b.start) < min(a.end, b.end)


def merge_intervals(intervals: Iterable[Interval]) -> list[Interval]:
    """
    Coalesce overlapping or touching intervals.

    Returns a minimal, disjoint, start-ordered cover of the input.
    """
    ordered = sorted(intervals, key=lambda interval: interval.start)
    if not ordered:
        return []

    merged: list[Interval] = []
    current_start, current_end = ordered[0].start, ordered[0].end
    for interval in ordered[1:]:
        if current_end >= interval.start:
            current_end = max(current_end, interval.end)
        else:
            merged.append(Interval(start=current_start, end=current_end))
            current_start, current_end = interval.start, interval.end
    merged.append(Interval(start=current_start, end=current_end))
    return merged


def subtract(window: Interval, occupied: Iterable[Interval]) -> list[Interval]:
    """
    Free sub-intervals of `window` not covered by `occupied`.

    Results are disjoint, start-ordered, non-empty and contained in `window`.
    """
    clipped = merge_intervals(
        Interval(start=max(busy.start, window.start), end=min(busy.end, window.end))
        for busy in occupied
        if overlaps(window, busy)
    )
    if not clipped:
        return [window]

    free: list[Interval] = []
    cursor = window.start
    for busy in clipped:
        if cursor < busy.start:
            free.append(Interval(start=cursor, end=busy.start))
        cursor = max(cursor, busy.end)
    if cursor < window.end:
        free.append(Interval(start=cursor, end=window.end))
    return free
