import random

import pytest

from dsakit.sorting import (
    bubble_sort,
    count_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    sort_012,
    wave_sort,
)


def _random_lists():
    rng = random.Random(1234)
    cases = [[], [1], [3, 3, 1, 6, 4, 2, 5], [12, 11, 13, 5, 6, 7], [5, 5, 5, 5]]
    for size in (2, 3, 10, 57):
        cases.append([rng.randint(-20, 20) for _ in range(size)])
    return cases


@pytest.mark.parametrize("values", _random_lists())
def test_general_sorts_match_sorted(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected


def test_general_sorts_do_not_modify_input():
    values = [3, 3, 1, 6, 4, 2, 5]
    original = list(values)
    bubble_sort(values)
    assert values == original
    insertion_sort(values)
    assert values == original
    merge_sort(values)
    assert values == original
    quick_sort(values)
    assert values == original


def test_general_sorts_accept_iterables():
    expected = [2, 10, 49, 90]
    assert bubble_sort(iter([10, 90, 49, 2])) == expected
    assert insertion_sort(iter([10, 90, 49, 2])) == expected
    assert merge_sort(iter([10, 90, 49, 2])) == expected
    assert quick_sort(iter([10, 90, 49, 2])) == expected


def test_general_sorts_handle_already_sorted_and_reversed():
    ascending = list(range(30))
    descending = list(reversed(ascending))
    assert bubble_sort(ascending) == ascending
    assert bubble_sort(descending) == ascending
    assert insertion_sort(ascending) == ascending
    assert insertion_sort(descending) == ascending
    assert merge_sort(ascending) == ascending
    assert merge_sort(descending) == ascending
    assert quick_sort(ascending) == ascending
    assert quick_sort(descending) == ascending


def test_count_sort_source_example():
    text = "geeksforgeeks"
    assert count_sort(text) == "".join(sorted(text))


def test_count_sort_keeps_length_and_characters():
    text = "zebra ZEBRA 123!"
    result = count_sort(text)
    assert sorted(result) == sorted(text)
    assert list(result) == sorted(result)


def test_count_sort_empty():
    assert count_sort("") == ""


def test_count_sort_rejects_wide_characters():
    with pytest.raises(ValueError):
        count_sort("abc\u0101")


def test_sort_012_source_example():
    values = [0, 1, 1, 0, 1, 2, 1, 2, 0, 0, 0, 1]
    result = sort_012(values)
    assert result == sorted(values)
    assert len(result) == len(values)


def test_sort_012_rejects_other_values():
    with pytest.raises(ValueError):
        sort_012([0, 1, 3])


@pytest.mark.parametrize("values", [[10, 90, 49, 2, 1, 5, 23], [1, 2], [4], [], [7, 7, 7, 7], [3, 1, 2, 6, 5, 4]])
def test_wave_sort_shape(values):
    result = wave_sort(values)
    assert sorted(result) == sorted(values)
    for i, (a, b) in enumerate(zip(result, result[1:])):
        if i % 2 == 0:
            assert a >= b
        else:
            assert a <= b