import random

import pytest

from numkit.pmerge import (
    InputError,
    main,
    merge_insertion_sort,
    merge_insertion_sort_deque,
    parse_values,
)

SAMPLES = [
    [],
    [5],
    [2, 1],
    [3, 5, 9, 7, 4],
    [1, 1, 1, 0],
    [-3, 10, -3, 0, 7, 7, 2],
    list(range(20, 0, -1)),
]


@pytest.mark.parametrize("values", SAMPLES)
def test_list_sort_matches_sorted(values):
    assert merge_insertion_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_deque_sort_matches_sorted(values):
    assert list(merge_insertion_sort_deque(values)) == sorted(values)


def test_random_inputs_agree():
    rng = random.Random(1234)
    for size in range(0, 60):
        values = [rng.randint(-100, 100) for _ in range(size)]
        expected = sorted(values)
        assert merge_insertion_sort(values) == expected
        assert list(merge_insertion_sort_deque(values)) == expected


def test_sort_does_not_modify_input():
    values = [4, 2, 3]
    merge_insertion_sort(values)
    merge_insertion_sort_deque(values)
    assert values == [4, 2, 3]


def test_parse_values_plain():
    assert parse_values(["3", "+5", "0", "-7"]) == [3, 5, 0, -7]


def test_parse_values_reads_leading_number():
    assert parse_values(["12-3"]) == [12]


def test_parse_values_wraps_to_int():
    assert parse_values(["4294967297"]) == [1]


@pytest.mark.parametrize(
    "args",
    [[], ["abc"], ["1.5"], ["-0"], ["--1"], ["+"], [""], ["9223372036854775807"],
     ["99999999999999999999"], ["-99999999999999999999"]],
)
def test_parse_values_errors(args):
    with pytest.raises(InputError):
        parse_values(args)


def test_parse_values_names_bad_character():
    with pytest.raises(InputError, match="=> x"):
        parse_values(["1", "2x"])


def test_main_output(capsys):
    assert main(["3", "1", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Before: 3 1 2 "
    assert lines[1] == "After: 1 2 3 "
    assert lines[2].startswith("Time to process a range of 3 elements with list : ")
    assert lines[3].startswith("Time to process a range of 3 elements with deque : ")


def test_main_error(capsys):
    assert main(["1", "a"]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "too few arguments" in capsys.readouterr().err