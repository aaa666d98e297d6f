# algodays

A collection of classic algorithms written as plain Python functions:
sorting, binary search on sorted data and on answers, graph traversal,
spanning trees and shortest paths, interval scheduling, and a few string and
counting puzzles. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algodays.strings`
  - `first_repeated_char(text)`: the first character seen a second time, or `None`
  - `first_unique_char(text)`: the first character occurring exactly once, or `None`
  - `election_winner(votes)`: `(name, count)` of the most-voted name, with ties
    going to the alphabetically smallest name. It raises `ValueError` when there
    are no votes.
- `algodays.counting`
  - `longest_zero_sum_subarray(values)`: the length of the longest contiguous run summing to 0
  - `count_inversions(values)`: the number of pairs `i < j` with `values[i] > values[j]`
  - `count_smaller_to_right(values)`: for each element, how many later elements are smaller
- `algodays.intervals`
  - `min_meeting_rooms(intervals)`: the fewest rooms for `(start, end)` meetings.
    A room can be reused at the moment a meeting ends.
  - `merge_intervals(intervals)`: overlapping or touching intervals merged, in start order
  - `count_car_fleets(target, positions, speeds)`: the number of fleets reaching the target
- `algodays.graphs` (vertices numbered `1..n`, edges undirected)
  - `count_components(n, edges)`
  - `is_connected(n, edges)`: whether all vertices are reachable from vertex 1.
    Edges that name a vertex outside `1..n` are ignored.
  - `minimum_spanning_weight(n, edges)`: the weight of a minimum spanning tree grown
    from vertex 1. Only the component holding vertex 1 is spanned.
  - `shortest_paths(n, edges, source)`: distances from `source`, with `None` where a
    vertex cannot be reached
  - `all_pairs_shortest_paths(matrix)`: Floyd–Warshall on a square weight matrix.
    `-1` means no edge in the input and no path in the output.
- `algodays.searching`
  - `lower_bound(values, x)` and `upper_bound(values, x)` on a sorted sequence
  - `integer_sqrt(n)`: `ValueError` for negative `n`
  - `largest_min_distance(stalls, cows)`: the largest minimum gap between placed cows
  - `allocate_books(pages, students)`: the smallest possible maximum of pages for one student
  - `painters_partition(boards, painters)`: the least time for the painters to finish
- `algodays.sorting`: every function here returns a new list.
  - `bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort` and `quick_sort`
  - `counting_sort`: non-negative integers only
  - `bucket_sort`: values in `[0, 1)` only

Invalid arguments raise `ValueError`.

## Library use

```python
from algodays.sorting import merge_sort
from algodays.searching import lower_bound, upper_bound, integer_sqrt
from algodays.counting import count_inversions
from algodays.graphs import count_components

merge_sort([64, 25, 12, 22, 34])       # [12, 22, 25, 34, 64]
lower_bound([1, 2, 2, 3], 2)           # 1
upper_bound([1, 2, 2, 3], 2)           # 3
integer_sqrt(10)                       # 3
count_inversions([2, 4, 1, 3, 5])      # 3
count_components(5, [(1, 2), (3, 4)])  # 3
```

Weighted edges are `(u, v, weight)` triples.

## Command line

Installing the package provides the `algodays` command:

```
algodays COMMAND [INPUT]
```

`INPUT` is the path of a file. If it is left out, or given as `-`, the input
is read from standard input. The input is a list of tokens separated by
whitespace. Input that has no tokens gives no output. When the input is
malformed or cannot be read, the command prints a message to standard error
and exits with status 1.

| Command | Input | Output |
|---|---|---|
| `first-repeated` | a word | the character, or `-1` |
| `first-unique` | a word | the character, or `$` |
| `election` | `n`, then `n` names | `name count` |
| `zero-sum` | `n`, then `n` integers | the longest length |
| `components` | `n m`, then `m` edges `u v` | the component count |
| `connected` | `n m`, then `m` edges `u v` | `CONNECTED` or `NOT CONNECTED` |
| `mst` | `n m`, then `m` edges `u v w` | the total weight |
| `dijkstra` | `n m`, then `m` edges `u v w`, then the source | the distances. Vertices that cannot be reached print as `2147483647`. |
| `floyd` | `n`, then an `n`×`n` matrix with `-1` for no edge | the distance matrix |
| `bounds` | `n`, then `n` sorted integers, then `x` | `lower upper` |
| `isqrt` | `n` | the integer square root. A negative `n` prints nothing. |
| `cows` | `n k`, then `n` stall positions | the largest minimum gap |
| `books` | `n m`, then `n` page counts | the answer, or `-1` when `m > n` |
| `painters` | `n k`, then `n` board lengths | the least time |
| `sort`, `bubble-sort`, `selection-sort`, `insertion-sort`, `merge-sort`, `quick-sort`, `counting-sort` | `n`, then `n` integers | the sorted values |
| `bucket-sort` | `n`, then `n` numbers in `[0, 1)` | the sorted values, printed to 4 decimal places |
| `inversions` | `n`, then `n` integers | the inversion count |
| `meeting-rooms` | `n`, then `n` pairs `start end` | the room count |
| `merge-intervals` | `n`, then `n` pairs `start end` | one merged interval per line |
| `car-fleets` | `target n`, then `n` positions, then `n` speeds | the fleet count |
| `smaller-right` | `n`, then `n` integers | one count per element |

For example:

```
echo "5 64 25 12 22 34" | algodays merge-sort
```

prints `12 22 25 34 64`. Run `algodays --help` to see the list of commands.

The same answers are available from Python through
`algodays.cli.run(command, text)`. It returns the output as a string.