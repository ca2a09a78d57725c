"""
Unit tests for interval set operations.
"""

import pytest

from dayplan.models.interval import Interval
from dayplan.utils.interval_utils import merge_intervals, overlaps, subtract


def iv(start: int, end: int) -> Interval:
    return Interval(start=start, end=end)


def test_overlaps_detects_shared_time():
    assert overlaps(iv(0, 10), iv(5, 15))
    assert overlaps(iv(5, 15), iv(0, 10))
    assert overlaps(iv(0, 100), iv(40, 60))


def test_touching_intervals_do_not_overlap():
    assert not overlaps(iv(0, 10), iv(10, 20))
    assert not overlaps(iv(10, 20), iv(0, 10))


@pytest.mark.parametrize(
    "a, b",
    [
        (iv(0, 10), iv(5, 15)),
        (iv(0, 10), iv(10, 20)),
        (iv(0, 10), iv(20, 30)),
        (iv(3, 4), iv(0, 100)),
    ],
)
def test_overlaps_is_symmetric(a, b):
    assert overlaps(a, b) == overlaps(b, a)


def test_merge_empty():
    assert merge_intervals([]) == []


def test_merge_joins_touching_intervals():
    assert merge_intervals([iv(0, 10), iv(10, 20)]) == [iv(0, 20)]


def test_merge_sorts_and_coalesces():
    merged = merge_intervals([iv(50, 60), iv(0, 10), iv(5, 20), iv(30, 40), iv(35, 38)])

    assert merged == [iv(0, 20), iv(30, 40), iv(50, 60)]


def test_merge_is_idempotent():
    intervals = [iv(7, 9), iv(0, 3), iv(2, 5), iv(9, 12), iv(20, 25)]
    once = merge_intervals(intervals)

    assert merge_intervals(once) == once


def test_subtract_nothing_returns_window():
    window = iv(0, 100)

    assert subtract(window, []) == [window]


def test_subtract_ignores_occupancy_outside_window():
    window = iv(100, 200)

    assert subtract(window, [iv(0, 50), iv(200, 300)]) == [window]


def test_subtract_full_cover_leaves_nothing():
    assert subtract(iv(0, 100), [iv(0, 60), iv(60, 100)]) == []
    assert subtract(iv(0, 100), [iv(-50, 500)]) == []


def test_subtract_returns_gaps_before_between_and_after():
    free = subtract(iv(0, 100), [iv(60, 70), iv(10, 20), iv(15, 30)])

    assert free == [iv(0, 10), iv(30, 60), iv(70, 100)]


def test_subtract_clips_occupancy_to_window():
    free = subtract(iv(100, 200), [iv(50, 120), iv(180, 250)])

    assert free == [iv(120, 180)]


def test_subtract_results_are_contained_and_disjoint():
    window = iv(0, 1000)
    occupied = [iv(100, 200), iv(150, 300), iv(500, 510), iv(990, 1200)]

    free = subtract(window, occupied)

    for slice_ in free:
        assert window.start <= slice_.start < slice_.end <= window.end
        assert not any(overlaps(slice_, busy) for busy in occupied)
    for left, right in zip(free, free[1:]):
        assert left.end <= right.start
