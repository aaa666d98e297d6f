import pytest
from hypothesis import given, strategies as st

from algodays.strings import election_winner, first_repeated_char, first_unique_char

small_text = st.text(alphabet="abcdef", max_size=20)


def test_first_repeated_simple():
    assert first_repeated_char("abca") == "a"


def test_first_repeated_picks_earliest_second_occurrence():
    assert first_repeated_char("abba") == "b"


def test_first_repeated_none_when_distinct():
    assert first_repeated_char("abcdef") is None


@given(small_text)
def test_first_repeated_invariant(text):
    result = first_repeated_char(text)
    if result is None:
        assert len(set(text)) == len(text)
    else:
        second = text.index(result, text.index(result) + 1)
        assert len(set(text[:second])) == second


def test_first_unique_simple():
    assert first_unique_char("aabbc") == "c"


def test_first_unique_none_when_all_repeat():
    assert first_unique_char("aabb") is None


@given(small_text)
def test_first_unique_invariant(text):
    result = first_unique_char(text)
    if result is None:
        assert all(text.count(c) > 1 for c in text)
    else:
        assert text.count(result) == 1
        position = text.index(result)
        assert all(text.count(c) > 1 for c in text[:position])


def test_election_clear_winner():
    assert election_winner(["bob", "bob", "alice"]) == ("bob", 2)


def test_election_tie_goes_to_smallest_name():
    assert election_winner(["bob", "alice"]) == ("alice", 1)


def test_election_empty_raises():
    with pytest.raises(ValueError):
        election_winner([])


@given(st.lists(st.sampled_from(["ann", "ben", "cal", "dee"]), min_size=1, max_size=30))
def test_election_invariant(votes):
    name, count = election_winner(votes)
    assert votes.count(name) == count
    for other in set(votes):
        assert votes.count(other) <= count
        if votes.count(other) == count:
            assert name <= other