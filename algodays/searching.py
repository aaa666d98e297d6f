"""Binary searches over sorted data and over answer spaces."""

import bisect
import math
from collections.abc import Sequence

__all__ = [
    "lower_bound",
    "upper_bound",
    "integer_sqrt",
    "largest_min_distance",
    "allocate_books",
    "painters_partition",
]


def lower_bound(values: Sequence[int], x: int) -> int:
    """Return the first index of a sorted sequence whose value is >= ``x``."""
    return bisect.bisect_left(values, x)


def upper_bound(values: Sequence[int], x: int) -> int:
    """Return the first index of a sorted sequence whose value is > ``x``."""
    return bisect.bisect_right(values, x)


def integer_sqrt(n: int) -> int:
    """Return the largest integer whose square does not exceed ``n``.

    Raises:
        ValueError: if ``n`` is negative.
    """
    if n < 0:
        raise ValueError("square root of a negative number is not an integer")
    return math.isqrt(n)


def _can_place(positions: list[int], cows: int, gap: int) -> bool:
    placed = 1
    last = positions[0]
    for position in positions[1:]:
        if position - last >= gap:
            placed += 1
            last = position
            if placed >= cows:
                return True
    return False


def largest_min_distance(stalls: Sequence[int], cows: int) -> int:
    """Return the largest gap that can separate every pair of placed cows.

    Returns 0 when no positive gap lets all cows be placed.

    Raises:
        ValueError: if there are no stalls.
    """
    if not stalls:
        raise ValueError("at least one stall is required")
    positions = sorted(stalls)
    low, high = 1, positions[-1] - positions[0]
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if _can_place(positions, cows, mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def _fits(items: Sequence[int], groups: int, limit: int) -> bool:
    used = 1
    current = 0
    for item in items:
        if item > limit:
            return False
        if current + item <= limit:
            current += item
        else:
            used += 1
            current = item
            if used > groups:
                return False
    return True


def _smallest_largest_share(items: Sequence[int], groups: int) -> int:
    low, high = max(items, default=0), sum(items)
    best = high
    while low <= high:
        mid = (low + high) // 2
        if _fits(items, groups, mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best


def allocate_books(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible maximum of pages any one student reads.

    Books go to students in order as contiguous runs, each student
    receiving at least one book.

    Raises:
        ValueError: if there are fewer books than students, or no students.
    """
    if students < 1:
        raise ValueError("at least one student is required")
    if students > len(pages):
        raise ValueError("more students than books")
    return _smallest_largest_share(pages, students)


def painters_partition(boards: Sequence[int], painters: int) -> int:
    """Return the least time in which ``painters`` can paint every board.

    Each painter paints a contiguous run of boards; time equals length.

    Raises:
        ValueError: if there are no painters.
    """
    if painters < 1:
        raise ValueError("at least one painter is required")
    return _smallest_largest_share(boards, painters)