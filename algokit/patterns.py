"""Matching strings against regular-expression and wildcard patterns."""

from __future__ import annotations


def regex_match(s: str, p: str) -> bool:
    """Tell whether ``p`` matches all of ``s``, with '.' for any character and '*'
    for zero or more of the preceding element.

    Raises ValueError when the pattern starts with '*'.
    """
    if p.startswith("*"):
        raise ValueError("pattern cannot start with '*'")
    size = len(p)
    row = [True] + [False] * size
    for j, token in enumerate(p, 1):
        if token == "*":
            row[j] = row[j - 2]
    for char in s:
        current = [False] * (size + 1)
        for j, token in enumerate(p, 1):
            if token == char or token == ".":
                current[j] = row[j - 1]
            elif token == "*":
                repeated = p[j - 2]
                current[j] = current[j - 2] or (
                    (repeated == char or repeated == ".") and row[j]
                )
        row = current
    return row[size]


def wildcard_match(s: str, p: str) -> bool:
    """Tell whether ``p`` matches all of ``s``, with '?' for any character and '*'
    for any sequence, the empty one included."""
    size = len(p)
    row = [True] + [False] * size
    for j, token in enumerate(p, 1):
        if token != "*":
            break
        row[j] = True
    for char in s:
        current = [False] * (size + 1)
        for j, token in enumerate(p, 1):
            if token == char or token == "?":
                current[j] = row[j - 1]
            elif token == "*":
                current[j] = current[j - 1] or row[j]
        row = current
    return row[size]