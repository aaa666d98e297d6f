"""Character and word-frequency queries over strings."""

from collections import Counter
from collections.abc import Iterable

__all__ = ["first_repeated_char", "first_unique_char", "election_winner"]


def first_repeated_char(text: str) -> str | None:
    """Return the first character whose second occurrence comes earliest.

    Returns ``None`` when every character of ``text`` is distinct.
    """
    seen: set[str] = set()
    for char in text:
        if char in seen:
            return char
        seen.add(char)
    return None


def first_unique_char(text: str) -> str | None:
    """Return the first character that occurs exactly once, or ``None``."""
    counts = Counter(text)
    return next((char for char in text if counts[char] == 1), None)


def election_winner(votes: Iterable[str]) -> tuple[str, int]:
    """Return the candidate with the most votes and that vote count.

    Ties go to the lexicographically smallest name.

    Raises:
        ValueError: if no votes were cast.
    """
    tally = Counter(votes)
    if not tally:
        raise ValueError("no votes were cast")
    name, count = min(tally.items(), key=lambda item: (-item[1], item[0]))
    return name, count