"""Scanning, parsing and grouping of strings."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Sequence
from itertools import cycle, groupby

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)
_ATOI_PREFIX = re.compile(r" *([+-]?)([0-9]*)")
_CLOSERS = {")": "(", "]": "[", "}": "{"}


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest run of ``s`` with no repeated character."""
    last_seen: dict[str, int] = {}
    start = best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def _expand(s: str, left: int, right: int) -> tuple[int, int]:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return left + 1, right


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring; the leftmost one wins a tie."""
    best = s[:1]
    for center in range(len(s)):
        for start, stop in (_expand(s, center, center), _expand(s, center, center + 1)):
            if stop - start > len(best):
                best = s[start:stop]
    return best


def convert_zigzag(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it back row by row.

    Raises ValueError when ``num_rows`` is less than 1.
    """
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    if num_rows == 1:
        return s
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    path = [*range(num_rows), *range(num_rows - 2, 0, -1)]
    for char, row in zip(s, cycle(path)):
        rows[row].append(char)
    return "".join("".join(row) for row in rows)


def my_atoi(s: str) -> int:
    """Parse a leading signed integer after spaces, clamped to the 32-bit range.

    Text that does not start with a number gives 0.
    """
    match = _ATOI_PREFIX.match(s)
    sign, digits = match.groups()
    digits = digits.lstrip("0")
    if len(digits) > 10:
        value = 10**10
    else:
        value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return max(_INT_MIN, min(_INT_MAX, value))


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by all the strings.

    Raises ValueError when no strings are given.
    """
    if not strs:
        raise ValueError("no strings given")
    first, others = strs[0], strs[1:]
    for index, char in enumerate(first):
        if any(index == len(other) or other[index] != char for other in others):
            return first[:index]
    return first


def is_valid_parentheses(s: str) -> bool:
    """Tell whether ``s`` is a non-empty, properly nested string of brackets."""
    if not s:
        return False
    stack: list[str] = []
    for char in s:
        if stack and _CLOSERS.get(char) == stack[-1]:
            stack.pop()
        else:
            stack.append(char)
    return not stack


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    return haystack.find(needle)


def find_substring(s: str, words: Sequence[str]) -> list[int]:
    """Return the start indices of every concatenation of all ``words`` in ``s``.

    All words must have the same length. Indices come grouped by their offset
    modulo the word length.
    """
    if not words or not s:
        return []
    width = len(words[0])
    wanted = len(words)
    target = Counter(words)
    result: list[int] = []
    for offset in range(width):
        window: Counter[str] = Counter()
        left = right = offset
        held = 0
        while right + width <= len(s):
            word = s[right : right + width]
            right += width
            if word not in target:
                window.clear()
                held = 0
                left = right
                continue
            window[word] += 1
            held += 1
            while window[word] > target[word]:
                window[s[left : left + width]] -= 1
                held -= 1
                left += width
            if held == wanted:
                result.append(left)
    return result


def longest_valid_parentheses(s: str) -> int:
    """Return the length of the longest well-formed run of round brackets."""
    lengths = [0] * len(s)
    for index in range(1, len(s)):
        if s[index] != ")":
            continue
        if s[index - 1] == "(":
            lengths[index] = (lengths[index - 2] if index >= 2 else 0) + 2
        else:
            opener = index - lengths[index - 1] - 1
            if opener >= 0 and s[opener] == "(":
                before = lengths[opener - 1] if opener >= 1 else 0
                lengths[index] = lengths[index - 1] + before + 2
    return max(lengths, default=0)


def count_and_say(n: int) -> str:
    """Return the n-th term of the count-and-say sequence, starting from "1"."""
    term = "1"
    for _ in range(n - 1):
        term = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))
    return term


def group_anagrams(strs: Sequence[str]) -> list[list[str]]:
    """Group the strings that are anagrams of each other, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())