"""Counting problems solved with prefix sums and merge sort."""

from collections.abc import Sequence

__all__ = ["longest_zero_sum_subarray", "count_inversions", "count_smaller_to_right"]


def longest_zero_sum_subarray(values: Sequence[int]) -> int:
    """Return the length of the longest contiguous run summing to zero."""
    first_seen: dict[int, int] = {}
    prefix = 0
    best = 0
    for index, value in enumerate(values):
        prefix += value
        if prefix == 0:
            best = index + 1
        elif prefix in first_seen:
            best = max(best, index - first_seen[prefix])
        else:
            first_seen[prefix] = index
    return best


def _sort_counting(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    mid = (len(items) + 1) // 2
    left, left_count = _sort_counting(items[:mid])
    right, right_count = _sort_counting(items[mid:])
    merged: list[int] = []
    inversions = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def count_inversions(values: Sequence[int]) -> int:
    """Return the number of pairs i < j with values[i] > values[j]."""
    return _sort_counting(list(values))[1]


def count_smaller_to_right(values: Sequence[int]) -> list[int]:
    """For each element, count the strictly smaller elements after it."""
    counts = [0] * len(values)

    def sort(items: list[tuple[int, int]]) -> list[tuple[int, int]]:
        if len(items) <= 1:
            return items
        mid = (len(items) + 1) // 2
        left, right = sort(items[:mid]), sort(items[mid:])
        merged: list[tuple[int, int]] = []
        j = 0
        for value, index in left:
            while j < len(right) and right[j][0] < value:
                merged.append(right[j])
                j += 1
            counts[index] += j
            merged.append((value, index))
        merged.extend(right[j:])
        return merged

    sort([(value, index) for index, value in enumerate(values)])
    return counts