"""Searches for pairs and tuples of numbers that meet a sum, and related area sums."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def add(num1: int, num2: int) -> int:
    """Return the sum of two integers."""
    return num1 + num2


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Find two positions whose values add up to ``target``.

    The later position comes first. An empty list means there is no such pair.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [index, partner]
        seen[value] = index
    return []


def _pair_sums(ordered: list[int], target: int, start: int) -> list[list[int]]:
    pairs: list[list[int]] = []
    left, right = start, len(ordered) - 1
    while left < right:
        total = ordered[left] + ordered[right]
        if total < target:
            left += 1
        elif total > target:
            right -= 1
        else:
            pairs.append([ordered[left], ordered[right]])
            left += 1
            right -= 1
            while left < right and ordered[left] == ordered[left - 1]:
                left += 1
            while left < right and ordered[right] == ordered[right + 1]:
                right -= 1
    return pairs


def _k_sum(ordered: list[int], target: int, k: int, start: int) -> list[list[int]]:
    if k == 2:
        return _pair_sums(ordered, target, start)
    results: list[list[int]] = []
    for index in range(start, len(ordered) - k + 1):
        value = ordered[index]
        if index > start and value == ordered[index - 1]:
            continue
        results.extend(
            [value, *rest] for rest in _k_sum(ordered, target - value, k - 1, index + 1)
        )
    return results


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct ascending triplet of the values that sums to zero."""
    return _k_sum(sorted(nums), 0, 3, 0)


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct ascending quadruplet of the values that sums to ``target``."""
    return _k_sum(sorted(nums), target, 4, 0)


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Return the sum of three of the values that lies closest to ``target``.

    Raises ValueError when fewer than three values are given.
    """
    ordered = sorted(nums)
    if len(ordered) < 3:
        raise ValueError("at least three numbers are needed")
    closest = sum(ordered[:3])
    last = len(ordered) - 1
    for index, first in enumerate(ordered[:-2]):
        left, right = index + 1, last
        while left < right:
            total = first + ordered[left] + ordered[right]
            if abs(total - target) < abs(closest - target):
                closest = total
            if total < target:
                left += 1
            elif total > target:
                right -= 1
            else:
                return target
    return closest


def max_area(height: Sequence[int]) -> int:
    """Return the most water a container made of two of the lines can hold."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map traps."""
    if len(height) < 3:
        return 0
    left_max = accumulate(height, max)
    right_max = reversed(list(accumulate(reversed(height), max)))
    return sum(min(lm, rm) - h for lm, rm, h in zip(left_max, right_max, height))