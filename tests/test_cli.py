import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodays.cli import COMMANDS, main, run
from algodays.counting import count_inversions, count_smaller_to_right
from algodays.intervals import count_car_fleets
from algodays.searching import integer_sqrt

SORT_COMMANDS = [
    "bubble-sort",
    "selection-sort",
    "insertion-sort",
    "merge-sort",
    "quick-sort",
    "counting-sort",
]


def test_sort_worked_example():
    assert run("sort", "5\n64 34 25 12 22\n") == "12 22 25 34 64\n"


@pytest.mark.parametrize("command", SORT_COMMANDS)
def test_sort_commands_agree_with_sort(command):
    text = "5\n64 34 25 12 22\n"
    assert run(command, text) == run("sort", text)


@given(st.lists(st.integers(min_value=0, max_value=500), max_size=30))
def test_sort_commands_produce_sorted_output(values):
    text = f"{len(values)}\n{' '.join(map(str, values))}\n"
    expected = " ".join(map(str, sorted(values))) + "\n"
    for command in SORT_COMMANDS:
        assert run(command, text) == expected


def test_first_repeated():
    assert run("first-repeated", "abcb") == "b\n"
    assert run("first-repeated", "abc") == "-1\n"


def test_first_unique_none():
    assert run("first-unique", "aabb") == "$\n"
    assert run("first-unique", "aab") == "b\n"


def test_election_tie_goes_to_smaller_name():
    assert run("election", "4\nbob alice bob alice") == "alice 2\n"


def test_connected():
    assert run("connected", "2 1\n1 2") == "CONNECTED\n"
    assert run("connected", "3 1\n1 2") == "NOT CONNECTED\n"


def test_dijkstra_marks_unreachable_with_int_max():
    output = run("dijkstra", "3 1\n1 2 5\n1")
    assert output == "0 5 2147483647\n"


def test_floyd_keeps_missing_paths():
    assert run("floyd", "2\n0 -1\n-1 0") == "0 -1\n-1 0\n"


def test_merge_intervals_lines():
    assert run("merge-intervals", "3\n6 8\n1 3\n2 4") == "1 4\n6 8\n"


def test_merge_intervals_empty():
    assert run("merge-intervals", "0") == ""


def test_bucket_sort_format():
    assert run("bucket-sort", "2\n0.5 0.25") == "0.2500 0.5000\n"


def test_car_fleets_matches_library():
    text = "12 5\n10 8 0 5 3\n2 4 1 1 3"
    expected = count_car_fleets(12, [10, 8, 0, 5, 3], [2, 4, 1, 1, 3])
    assert run("car-fleets", text) == f"{expected}\n"


def test_smaller_right_matches_library():
    values = [5, 2, 6, 1]
    expected = " ".join(map(str, count_smaller_to_right(values)))
    assert run("smaller-right", "4\n5 2 6 1") == expected + "\n"


def test_inversions_matches_library():
    assert run("inversions", "3\n3 2 1") == f"{count_inversions([3, 2, 1])}\n"


def test_isqrt():
    assert run("isqrt", "50") == f"{integer_sqrt(50)}\n"
    assert run("isqrt", "-4") == ""


def test_books_more_students_than_books():
    assert run("books", "2 3\n10 20") == "-1\n"


def test_empty_input_gives_no_output():
    assert run("sort", "   \n") == ""


def test_unknown_command():
    with pytest.raises(ValueError):
        run("no-such-command", "1\n1")


def test_truncated_input():
    with pytest.raises(ValueError):
        run("sort", "3\n1 2")


def test_non_numeric_input():
    with pytest.raises(ValueError):
        run("sort", "2\n1 x")


def test_every_command_is_callable_on_empty_input():
    assert all(run(command, "") == "" for command in COMMANDS)


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("5\n64 34 25 12 22\n", encoding="utf-8")
    assert main(["sort", str(path)]) == 0
    assert capsys.readouterr().out == "12 22 25 34 64\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abcb"))
    assert main(["first-repeated"]) == 0
    assert capsys.readouterr().out == "b\n"


def test_main_reports_bad_input(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("3\n1 2\n", encoding="utf-8")
    assert main(["sort", str(path)]) == 1
    assert "algodays:" in capsys.readouterr().err


def test_main_reports_missing_file(tmp_path, capsys):
    assert main(["sort", str(tmp_path / "absent.txt")]) == 1
    assert "algodays:" in capsys.readouterr().err