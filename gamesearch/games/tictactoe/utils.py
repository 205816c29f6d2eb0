"""Line detection shared by the k-in-a-row games."""

from __future__ import annotations

from typing import Iterator, List, Tuple

import numpy as np

from .state import O, X

DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (1, 1), (1, -1))


def k_in_a_row(board: np.ndarray, x: int, y: int, token: int, k: int) -> bool:
    """
    Check if placing ``token`` at ``(x, y)`` gives at least ``k`` in a row.

    The cell itself is counted as holding ``token`` whatever the board says,
    so the check can be made before or after the piece is placed.
    """
    h, v = board.shape
    for dx, dy in DIRECTIONS:
        count = 1
        for sign in (1, -1):
            i, j = x + sign * dx, y + sign * dy
            while 0 <= i < h and 0 <= j < v and board[i, j] == token:
                count += 1
                i += sign * dx
                j += sign * dy
        if count >= k:
            return True
    return False


def line_starts(h: int, v: int, k: int, direction: Tuple[int, int]) -> Iterator[Tuple[int, int]]:
    """Cells where a window of length ``k`` in ``direction`` fits on the board."""
    dx, dy = direction
    xs = range(h - k + 1) if dx else range(h)
    if dy > 0:
        ys = range(v - k + 1)
    elif dy < 0:
        ys = range(k - 1, v)
    else:
        ys = range(v)
    for x in xs:
        for y in ys:
            yield x, y


def all_lines(board: np.ndarray, k: int) -> List[np.ndarray]:
    """Every length-``k`` window of the board in the four line directions."""
    h, v = board.shape
    lines = []
    for dx, dy in DIRECTIONS:
        for x, y in line_starts(h, v, k, (dx, dy)):
            idx = np.arange(k)
            lines.append(board[x + dx * idx, y + dy * idx])
    return lines


def render_board(board: np.ndarray) -> str:
    """Draw the board with the top row first, e.g. ``O| |X`` over ``-+-+-``."""
    chars = {O: "O", X: "X"}
    h, v = board.shape
    rows = []
    for y in reversed(range(v)):
        rows.append("|".join(chars.get(int(board[x, y]), " ") for x in range(h)) + "\n")
    separator = "-+" * (h - 1) + "-\n"
    return separator.join(rows)
