"""Sudoku boards and square or rectangular matrices."""

from __future__ import annotations

from collections.abc import Sequence

_EMPTY = "."
_DIGITS = "123456789"


def _box(row: int, col: int) -> int:
    return row // 3 * 3 + col // 3


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Tell whether no filled cell of a 9x9 board repeats a digit in its row,
    column or 3x3 box; '.' marks an empty cell."""
    seen: set[tuple[str, int, str]] = set()
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == _EMPTY:
                continue
            keys = {("row", r, cell), ("col", c, cell), ("box", _box(r, c), cell)}
            if keys & seen:
                return False
            seen |= keys
    return True


def solve_sudoku(board: list[list[str]]) -> bool:
    """Fill the empty cells of a 9x9 board in place by backtracking.

    Return True when solved; when no solution exists the board is left unchanged
    and False is returned.
    """
    rows = [set() for _ in range(9)]
    cols = [set() for _ in range(9)]
    boxes = [set() for _ in range(9)]
    empties: list[tuple[int, int]] = []
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == _EMPTY:
                empties.append((r, c))
            else:
                rows[r].add(cell)
                cols[c].add(cell)
                boxes[_box(r, c)].add(cell)

    def place(position: int) -> bool:
        if position == len(empties):
            return True
        r, c = empties[position]
        b = _box(r, c)
        for digit in _DIGITS:
            if digit in rows[r] or digit in cols[c] or digit in boxes[b]:
                continue
            board[r][c] = digit
            rows[r].add(digit)
            cols[c].add(digit)
            boxes[b].add(digit)
            if place(position + 1):
                return True
            board[r][c] = _EMPTY
            rows[r].discard(digit)
            cols[c].discard(digit)
            boxes[b].discard(digit)
        return False

    return place(0)


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise in place.

    Raises ValueError for a matrix that is not square.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    matrix[:] = [list(row) for row in zip(*reversed(matrix))]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements in clockwise spiral order from the top-left corner."""
    rows = [list(row) for row in matrix]
    result: list[int] = []
    while rows:
        result.extend(rows.pop(0))
        rows = [list(column) for column in zip(*rows)][::-1]
    return result