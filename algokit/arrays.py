"""Searching and rearranging plain integer arrays."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from itertools import count


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the values of both arrays taken together.

    Raises ValueError when both arrays are empty.
    """
    merged = sorted([*nums1, *nums2])
    if not merged:
        raise ValueError("median of no values")
    middle = len(merged) // 2
    if len(merged) % 2:
        return float(merged[middle])
    return (merged[middle - 1] + merged[middle]) / 2


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place so its first k slots hold each value once; return k."""
    write = 0
    for value in nums:
        if write == 0 or value != nums[write - 1]:
            nums[write] = value
            write += 1
    return write


def remove_element(nums: list[int], val: int) -> int:
    """Move the values other than ``val``, in ascending order, to the front; return their count."""
    kept = sorted(value for value in nums if value != val)
    nums[: len(kept)] = kept
    return len(kept)


def next_permutation(nums: list[int]) -> None:
    """Rearrange the list in place into the next greater permutation.

    The greatest permutation wraps around to ascending order.
    """
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]),
        None,
    )
    if pivot is None:
        nums.reverse()
        return
    successor = next(j for j in range(len(nums) - 1, pivot, -1) if nums[j] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1 :] = reversed(nums[pivot + 1 :])


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Find ``target`` in a rotated ascending array of distinct values; -1 if absent."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """Return the first and last positions of ``target`` in a sorted array, or [-1, -1]."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return where ``target`` is, or would be inserted, in a sorted array."""
    return bisect_left(nums, target)


def first_missing_positive(nums: Sequence[int]) -> int:
    """Return the smallest positive integer that does not occur in the array."""
    present = set(nums)
    return next(candidate for candidate in count(1) if candidate not in present)


def jump(nums: Sequence[int]) -> int:
    """Return the fewest jumps from the first position to the last.

    Each value is the longest jump allowed from its position; the last position
    is assumed to be reachable.
    """
    steps = 0
    boundary = 0
    farthest = 0
    for index, reach in enumerate(nums[:-1]):
        farthest = max(farthest, index + reach)
        if index == boundary:
            steps += 1
            boundary = farthest
    return steps


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of the values.

    Raises ValueError for an empty array.
    """
    if not nums:
        raise ValueError("no subarray of an empty array")
    best = current = nums[0]
    for value in nums[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best