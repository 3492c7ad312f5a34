"""Small array, number and string algorithms."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Iterator, MutableSequence, Sequence

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def linear_search(items: Iterable[object], target: object) -> bool:
    """Whether target occurs in items, checked one element at a time."""
    return any(item == target for item in items)


def reverse_in_place(items: MutableSequence[object]) -> None:
    """Reverse a mutable sequence in place."""
    items.reverse()


def subarrays(items: Sequence[object]) -> Iterator[list[object]]:
    """Yield every contiguous subarray, grouped by start index, shortest first."""
    for start in range(len(items)):
        for end in range(start + 1, len(items) + 1):
            yield list(items[start:end])


def two_sum(nums: Iterable[int], target: int) -> tuple[int, int] | None:
    """Indices of two elements adding up to target, or None."""
    seen: dict[Hashable, int] = {}
    for index, num in enumerate(nums):
        partner = seen.get(target - num)
        if partner is not None:
            return partner, index
        seen[num] = index
    return None


def find_median_sorted_arrays(nums1: Sequence[float], nums2: Sequence[float]) -> float:
    """Median of the union of two sorted sequences by partition search."""
    short, long_ = (nums1, nums2) if len(nums1) <= len(nums2) else (nums2, nums1)
    m, n = len(short), len(long_)
    if m + n == 0:
        raise ValueError("median of empty data")
    half = (m + n + 1) // 2
    low, high = 0, m
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = half - cut1
        max_left1 = short[cut1 - 1] if cut1 > 0 else -math.inf
        min_right1 = short[cut1] if cut1 < m else math.inf
        max_left2 = long_[cut2 - 1] if cut2 > 0 else -math.inf
        min_right2 = long_[cut2] if cut2 < n else math.inf
        if max_left1 <= min_right2 and max_left2 <= min_right1:
            left = max(max_left1, max_left2)
            if (m + n) % 2 == 0:
                return (left + min(min_right1, min_right2)) / 2
            return float(left)
        if max_left1 > min_right2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    raise ValueError("inputs must be sorted")


def is_palindrome(x: int) -> bool:
    """Whether the decimal digits of x read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral using the subtractive rule."""
    try:
        values = [_ROMAN[char] for char in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral character: {exc.args[0]!r}") from None
    total = 0
    for value, following in zip(values, values[1:] + [0]):
        total += -value if value < following else value
    return total


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """All distinct sorted triples from nums that sum to zero."""
    values = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        left, right = i + 1, len(values) - 1
        while left < right:
            total = first + values[left] + values[right]
            if total == 0:
                result.append([first, values[left], values[right]])
                while left < right and values[left] == values[left + 1]:
                    left += 1
                while left < right and values[right] == values[right - 1]:
                    right -= 1
                left += 1
                right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return result


def remove_element(nums: list[int], val: int) -> int:
    """Drop every occurrence of val from nums in place; return the new length."""
    nums[:] = [num for num in nums if num != val]
    return len(nums)