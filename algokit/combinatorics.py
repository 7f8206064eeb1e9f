"""Enumeration of combinations, permutations and bracket strings."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import product

from algokit.arrays import next_permutation

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")
_DIGITS = "0123456789"


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string the phone-keypad digits can spell, in keypad order.

    The empty digit string spells one empty string. Raises ValueError for
    characters that are not decimal digits.
    """
    if any(char not in _DIGITS for char in digits):
        raise ValueError(f"not a digit string: {digits!r}")
    letters = (_KEYPAD[int(char)] for char in digits)
    return ["".join(combo) for combo in product(*letters)]


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of ``n`` bracket pairs, in lexicographic order."""

    def build(prefix: str, opened: int, closed: int) -> Iterator[str]:
        if len(prefix) == 2 * n:
            yield prefix
            return
        if opened < n:
            yield from build(prefix + "(", opened + 1, closed)
        if closed < opened:
            yield from build(prefix + ")", opened, closed + 1)

    return list(build("", 0, 0))


def _combinations(
    ordered: list[int], start: int, remaining: int, reuse: bool
) -> Iterator[list[int]]:
    if remaining == 0:
        yield []
        return
    for index in range(start, len(ordered)):
        value = ordered[index]
        if value > remaining:
            break
        if not reuse and index > start and value == ordered[index - 1]:
            continue
        following = index if reuse else index + 1
        for rest in _combinations(ordered, following, remaining - value, reuse):
            yield [value, *rest]


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return the ascending combinations of candidates, each usable any number of
    times, that add up to ``target``.

    Raises ValueError when a candidate is not positive.
    """
    ordered = sorted(candidates)
    if any(value <= 0 for value in ordered):
        raise ValueError("candidates must be positive")
    if not ordered or ordered[0] > target:
        return []
    return list(_combinations(ordered, 0, target, reuse=True))


def combination_sum2(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return the distinct ascending combinations of candidates, each used at most
    once, that add up to ``target``."""
    ordered = sorted(candidates)
    if not ordered or ordered[0] > target:
        return []
    return list(_combinations(ordered, 0, target, reuse=False))


def _permutation_cycle(start: list[int]) -> list[list[int]]:
    result = [list(start)]
    current = list(start)
    next_permutation(current)
    while current != start:
        result.append(list(current))
        next_permutation(current)
    return result


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Return the distinct permutations of the values in lexicographic order."""
    return _permutation_cycle(sorted(nums))


def permute_unique(nums: Sequence[int]) -> list[list[int]]:
    """Return the distinct permutations of the values in lexicographic order,
    starting from the given arrangement and wrapping around."""
    return _permutation_cycle(list(nums))