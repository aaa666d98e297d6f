"""Command-line front end: read a problem from text and print its answer."""

import argparse
import sys
from collections.abc import Callable, Iterator

from algodays.counting import count_inversions, count_smaller_to_right, longest_zero_sum_subarray
from algodays.graphs import (
    all_pairs_shortest_paths,
    count_components,
    is_connected,
    minimum_spanning_weight,
    shortest_paths,
)
from algodays.intervals import count_car_fleets, merge_intervals, min_meeting_rooms
from algodays.searching import (
    allocate_books,
    integer_sqrt,
    largest_min_distance,
    lower_bound,
    painters_partition,
    upper_bound,
)
from algodays.sorting import (
    bubble_sort,
    bucket_sort,
    counting_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)
from algodays.strings import election_winner, first_repeated_char, first_unique_char

__all__ = ["run", "main", "COMMANDS"]

UNREACHABLE = 2**31 - 1


class _Tokens:
    """Whitespace-separated tokens read one at a time."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def number(self) -> float:
        token = self.word()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.integer(), self.integer()) for _ in range(count)]

    def triples(self, count: int) -> list[tuple[int, int, int]]:
        return [(self.integer(), self.integer(), self.integer()) for _ in range(count)]


def _joined(values) -> str:
    return " ".join(str(value) for value in values)


def _first_repeated(tokens: _Tokens) -> list[str]:
    char = first_repeated_char(tokens.word())
    return ["-1" if char is None else char]


def _first_unique(tokens: _Tokens) -> list[str]:
    char = first_unique_char(tokens.word())
    return ["$" if char is None else char]


def _election(tokens: _Tokens) -> list[str]:
    count = tokens.integer()
    name, votes = election_winner(tokens.word() for _ in range(count))
    return [f"{name} {votes}"]


def _zero_sum(tokens: _Tokens) -> list[str]:
    return [str(longest_zero_sum_subarray(tokens.integers(tokens.integer())))]


def _components(tokens: _Tokens) -> list[str]:
    n, m = tokens.integer(), tokens.integer()
    return [str(count_components(n, tokens.pairs(m)))]


def _connected(tokens: _Tokens) -> list[str]:
    n, m = tokens.integer(), tokens.integer()
    return ["CONNECTED" if is_connected(n, tokens.pairs(m)) else "NOT CONNECTED"]


def _mst(tokens: _Tokens) -> list[str]:
    n, m = tokens.integer(), tokens.integer()
    return [str(minimum_spanning_weight(n, tokens.triples(m)))]


def _dijkstra(tokens: _Tokens) -> list[str]:
    n, m = tokens.integer(), tokens.integer()
    edges = tokens.triples(m)
    source = tokens.integer()
    distances = shortest_paths(n, edges, source)
    return [_joined(UNREACHABLE if d is None else d for d in distances)]


def _floyd(tokens: _Tokens) -> list[str]:
    size = tokens.integer()
    matrix = [tokens.integers(size) for _ in range(size)]
    return [_joined(row) for row in all_pairs_shortest_paths(matrix)]


def _bounds(tokens: _Tokens) -> list[str]:
    values = tokens.integers(tokens.integer())
    x = tokens.integer()
    return [f"{lower_bound(values, x)} {upper_bound(values, x)}"]


def _isqrt(tokens: _Tokens) -> list[str]:
    n = tokens.integer()
    return [] if n < 0 else [str(integer_sqrt(n))]


def _cows(tokens: _Tokens) -> list[str]:
    n, k = tokens.integer(), tokens.integer()
    return [str(largest_min_distance(tokens.integers(n), k))]


def _books(tokens: _Tokens) -> list[str]:
    n, m = tokens.integer(), tokens.integer()
    pages = tokens.integers(n)
    if m > n:
        return ["-1"]
    return [str(allocate_books(pages, m))]


def _painters(tokens: _Tokens) -> list[str]:
    n, k = tokens.integer(), tokens.integer()
    return [str(painters_partition(tokens.integers(n), k))]


def _sorter(sort: Callable[[list[int]], list[int]]) -> Callable[[_Tokens], list[str]]:
    def handler(tokens: _Tokens) -> list[str]:
        return [_joined(sort(tokens.integers(tokens.integer())))]

    return handler


def _bucket(tokens: _Tokens) -> list[str]:
    count = tokens.integer()
    values = [tokens.number() for _ in range(count)]
    return [" ".join(f"{value:.4f}" for value in bucket_sort(values))]


def _inversions(tokens: _Tokens) -> list[str]:
    return [str(count_inversions(tokens.integers(tokens.integer())))]


def _meeting_rooms(tokens: _Tokens) -> list[str]:
    return [str(min_meeting_rooms(tokens.pairs(tokens.integer())))]


def _merge_intervals(tokens: _Tokens) -> list[str]:
    return [f"{start} {end}" for start, end in merge_intervals(tokens.pairs(tokens.integer()))]


def _car_fleets(tokens: _Tokens) -> list[str]:
    target, n = tokens.integer(), tokens.integer()
    positions = tokens.integers(n)
    speeds = tokens.integers(n)
    return [str(count_car_fleets(target, positions, speeds))]


def _smaller_right(tokens: _Tokens) -> list[str]:
    return [_joined(count_smaller_to_right(tokens.integers(tokens.integer())))]


COMMANDS: dict[str, Callable[[_Tokens], list[str]]] = {
    "first-repeated": _first_repeated,
    "first-unique": _first_unique,
    "election": _election,
    "zero-sum": _zero_sum,
    "components": _components,
    "connected": _connected,
    "mst": _mst,
    "dijkstra": _dijkstra,
    "floyd": _floyd,
    "bounds": _bounds,
    "isqrt": _isqrt,
    "cows": _cows,
    "books": _books,
    "painters": _painters,
    "sort": _sorter(sorted),
    "bubble-sort": _sorter(bubble_sort),
    "selection-sort": _sorter(selection_sort),
    "insertion-sort": _sorter(insertion_sort),
    "merge-sort": _sorter(merge_sort),
    "quick-sort": _sorter(quick_sort),
    "counting-sort": _sorter(counting_sort),
    "bucket-sort": _bucket,
    "inversions": _inversions,
    "meeting-rooms": _meeting_rooms,
    "merge-intervals": _merge_intervals,
    "car-fleets": _car_fleets,
    "smaller-right": _smaller_right,
}


def run(command: str, text: str) -> str:
    """Solve ``command`` for the problem in ``text`` and return the output.

    Input with no tokens at all yields no output.

    Raises:
        ValueError: for an unknown command or malformed input.
    """
    try:
        handler = COMMANDS[command]
    except KeyError:
        raise ValueError(f"unknown command {command!r}") from None
    if not text.split():
        return ""
    return "".join(f"{line}\n" for line in handler(_Tokens(text)))


def main(argv: list[str] | None = None) -> int:
    """Entry point: read input from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(prog="algodays", description="Solve classic algorithm problems.")
    parser.add_argument("command", choices=sorted(COMMANDS))
    parser.add_argument("input", nargs="?", default="-", help="input file, or - for standard input")
    args = parser.parse_args(argv)
    try:
        if args.input == "-":
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        output = run(args.command, text)
    except (OSError, ValueError) as error:
        print(f"algodays: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())