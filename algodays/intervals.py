"""Interval scheduling and merging problems."""

import heapq
from collections.abc import Iterable, Sequence

__all__ = ["min_meeting_rooms", "merge_intervals", "count_car_fleets"]


def min_meeting_rooms(intervals: Iterable[tuple[int, int]]) -> int:
    """Return the fewest rooms needed to hold every meeting.

    A meeting may start in a room at the moment another one ends there.
    """
    ends: list[int] = []
    for start, end in sorted(intervals, key=lambda interval: interval[0]):
        if ends and start >= ends[0]:
            heapq.heapreplace(ends, end)
        else:
            heapq.heappush(ends, end)
    return len(ends)


def merge_intervals(intervals: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Merge overlapping or touching intervals, returned in start order."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted(intervals):
        if merged and merged[-1][1] >= start:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def count_car_fleets(target: int, positions: Sequence[int], speeds: Sequence[int]) -> int:
    """Return how many fleets of cars arrive at ``target``.

    A car that would catch the fleet ahead of it before the target joins it.

    Raises:
        ValueError: if the sequences differ in length or a speed is zero.
    """
    if len(positions) != len(speeds):
        raise ValueError("positions and speeds must have the same length")
    if any(speed == 0 for speed in speeds):
        raise ValueError("speeds must be non-zero")
    cars = sorted(zip(positions, speeds), key=lambda car: car[0], reverse=True)
    fleets = 0
    slowest = 0.0
    for position, speed in cars:
        time = (target - position) / speed
        if time > slowest:
            fleets += 1
            slowest = time
    return fleets