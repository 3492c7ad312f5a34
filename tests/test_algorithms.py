import statistics

import pytest

from goaltrack.algorithms import (
    find_median_sorted_arrays,
    is_palindrome,
    linear_search,
    remove_element,
    reverse_in_place,
    roman_to_int,
    subarrays,
    three_sum,
    two_sum,
)


def test_linear_search_found_and_missing():
    items = [2, 3, 4, 5, 6, 7, 8]
    assert linear_search(items, 5)
    assert not linear_search(items, 9)
    assert not linear_search([], 1)


def test_reverse_in_place():
    items = [2, 3, 4, 5, 6, 7, 8]
    original = list(items)
    assert reverse_in_place(items) is None
    assert items[0] == original[-1] and items[-1] == original[0]
    reverse_in_place(items)
    assert items == original


def test_subarrays_are_contiguous_slices():
    items = [1, -2, 3, 4, -6]
    subs = list(subarrays(items))
    assert subs[0] == [items[0]]
    assert subs[-1] == [items[-1]]
    assert [s for s in subs if len(s) == len(items)] == [items]
    assert sum(1 for s in subs if len(s) == 1) == len(items)
    for sub in subs:
        assert any(items[i:i + len(sub)] == sub for i in range(len(items)))


def test_subarrays_empty():
    assert list(subarrays([])) == []


@pytest.mark.parametrize(
    "nums, target",
    [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6)],
)
def test_two_sum_finds_pair(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_no_pair():
    assert two_sum([1, 2, 3], 100) is None


@pytest.mark.parametrize(
    "a, b",
    [([1, 3], [2]), ([1, 2], [3, 4]), ([], [5]), ([0, 0], [0, 0]), ([4, 9, 12], [1])],
)
def test_median_matches_merged(a, b):
    assert find_median_sorted_arrays(a, b) == statistics.median(a + b)
    assert find_median_sorted_arrays(b, a) == statistics.median(a + b)


def test_median_of_nothing_raises():
    with pytest.raises(ValueError):
        find_median_sorted_arrays([], [])


@pytest.mark.parametrize("number", [0, 7, 121, 1221])
def test_palindromes(number):
    assert is_palindrome(number)


@pytest.mark.parametrize("number", [-121, 10, 123])
def test_not_palindromes(number):
    assert not is_palindrome(number)


@pytest.mark.parametrize(
    "numeral, value",
    [("I", 1), ("V", 5), ("X", 10), ("L", 50), ("C", 100), ("D", 500), ("M", 1000)],
)
def test_roman_single_symbols(numeral, value):
    assert roman_to_int(numeral) == value


def test_roman_examples():
    assert roman_to_int("IV") == 4
    assert roman_to_int("LVIII") == 58
    assert roman_to_int("MCMXCIV") == 1994


def test_roman_additive_and_empty():
    assert roman_to_int("MM") == 2 * roman_to_int("M")
    assert roman_to_int("") == 0


def test_roman_invalid_character():
    with pytest.raises(ValueError):
        roman_to_int("XQ")


def test_three_sum_invariants():
    nums = [-1, 0, 1, 2, -1, -4]
    original = list(nums)
    triples = three_sum(nums)
    assert nums == original
    assert triples
    assert all(sum(t) == 0 and t == sorted(t) for t in triples)
    assert len({tuple(t) for t in triples}) == len(triples)
    assert [-1, 0, 1] in triples


def test_three_sum_none_found():
    assert three_sum([0, 1, 1]) == []
    assert three_sum([0, 0, 0, 0]) == [[0, 0, 0]]


def test_remove_element():
    nums = [0, 1, 2, 2, 3, 0, 4, 2]
    original = list(nums)
    k = remove_element(nums, 2)
    assert k == len(original) - original.count(2)
    assert len(nums) == k
    assert 2 not in nums
    assert sorted(nums) == sorted(x for x in original if x != 2)


def test_remove_element_absent_value():
    nums = [3, 2, 2, 3]
    assert remove_element(nums, 9) == 4
    assert nums == [3, 2, 2, 3]