"""Place N non-attacking queens on an N x N board by backtracking."""

from __future__ import annotations

from typing import Optional

MAX_QUEENS = 40

Board = list[list[bool]]


def is_safe(board: Board, row: int, col: int) -> bool:
    """Return True if a queen at (row, col) is attacked by no queen to its left.

    Queens are placed column by column, so the whole column, the row to the
    left and both left-hand diagonals are checked.
    """
    size = len(board)
    if any(board[r][col] for r in range(size)):
        return False
    if any(board[row][:col]):
        return False
    upper_left = zip(range(row - 1, -1, -1), range(col - 1, -1, -1))
    lower_left = zip(range(row + 1, size), range(col - 1, -1, -1))
    for r, c in (*upper_left, *lower_left):
        if board[r][c]:
            return False
    return True


def _place_from(board: Board, col: int) -> bool:
    size = len(board)
    if col == size:
        return True
    for row in range(size):
        if is_safe(board, row, col):
            board[row][col] = True
            if _place_from(board, col + 1):
                return True
            board[row][col] = False
    return False


def place_queens(size: int) -> Optional[Board]:
    """Return a board with ``size`` non-attacking queens, or None if impossible.

    ``board[row][col]`` is True where a queen stands.
    """
    if not 0 <= size <= MAX_QUEENS:
        raise ValueError(f"number of queens must be between 0 and {MAX_QUEENS}")
    board = [[False] * size for _ in range(size)]
    return board if _place_from(board, 0) else None


def format_board(board: Board) -> str:
    """Render a board with 'Q' for queens and '.' for empty squares."""
    return "".join(
        "".join("Q " if cell else ". " for cell in row) + "\n" for row in board
    )