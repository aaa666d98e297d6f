from hypothesis import given, strategies as st

from algodays.counting import (
    count_inversions,
    count_smaller_to_right,
    longest_zero_sum_subarray,
)

ints = st.lists(st.integers(min_value=-5, max_value=5), max_size=25)


def test_zero_sum_classic_example():
    assert longest_zero_sum_subarray([15, -2, 2, -8, 1, 7, 10, 23]) == 5


def test_zero_sum_empty_and_positive():
    assert longest_zero_sum_subarray([]) == 0
    assert longest_zero_sum_subarray([1, 2, 3]) == 0


def test_zero_sum_whole_array():
    values = [3, -1, -2]
    assert longest_zero_sum_subarray(values) == len(values)


@given(ints)
def test_zero_sum_is_maximal_window(values):
    length = longest_zero_sum_subarray(values)
    n = len(values)
    if length:
        assert any(sum(values[i:i + length]) == 0 for i in range(n - length + 1))
    for longer in range(length + 1, n + 1):
        assert all(sum(values[i:i + longer]) != 0 for i in range(n - longer + 1))


def test_inversions_example():
    assert count_inversions([2, 4, 1, 3, 5]) == 3


def test_inversions_sorted_and_equal():
    assert count_inversions([1, 2, 3, 4]) == 0
    assert count_inversions([7, 7, 7]) == 0


@given(st.integers(min_value=0, max_value=40))
def test_inversions_reversed_is_all_pairs(n):
    assert count_inversions(list(range(n, 0, -1))) == n * (n - 1) // 2


@given(st.lists(st.integers(), unique=True, max_size=30))
def test_inversions_complement(values):
    n = len(values)
    assert count_inversions(values) + count_inversions(values[::-1]) == n * (n - 1) // 2


def test_inversions_leaves_input_alone():
    values = [3, 1, 2]
    count_inversions(values)
    assert values == [3, 1, 2]


def test_smaller_to_right_example():
    assert count_smaller_to_right([5, 2, 6, 1]) == [2, 1, 1, 0]


@given(ints)
def test_smaller_to_right_sums_to_inversions(values):
    counts = count_smaller_to_right(values)
    assert len(counts) == len(values)
    assert sum(counts) == count_inversions(values)
    if values:
        assert counts[-1] == 0


@given(ints)
def test_smaller_to_right_zero_when_sorted(values):
    assert count_smaller_to_right(sorted(values)) == [0] * len(values)