"""
Grid geometry for a toroidal square board.

Positions are row-major integer indices in [0, size * size). All functions
are pure and take the side length as a keyword so a configured grid works.
"""

from typing import Tuple

from .constants import UP, DOWN, LEFT, RIGHT, GRID_SIZE


def _check_position(pos: int, size: int) -> None:
    if not 0 <= pos < size * size:
        raise ValueError(f"Position {pos} out of bounds for a {size}x{size} grid.")


def _check_row_col(row: int, col: int, size: int) -> None:
    if not (0 <= row < size and 0 <= col < size):
        raise ValueError(f"Cell {(row, col)} out of bounds for a {size}x{size} grid.")


def to_row_col(pos: int, size: int = GRID_SIZE) -> Tuple[int, int]:
    _check_position(pos, size)
    return pos // size, pos % size


def to_index(row: int, col: int, size: int = GRID_SIZE) -> int:
    _check_row_col(row, col, size)
    return row * size + col


def step(row: int, col: int, direction: str, size: int = GRID_SIZE) -> Tuple[int, int]:
    """
    Move one cell in `direction`, wrapping around every edge.

    Up from row 0 lands on the last row, Right from the last column lands
    on column 0, and so on.
    """
    _check_row_col(row, col, size)
    if direction == UP:
        row = size - 1 if row == 0 else row - 1
    elif direction == DOWN:
        row = 0 if row == size - 1 else row + 1
    elif direction == LEFT:
        col = size - 1 if col == 0 else col - 1
    elif direction == RIGHT:
        col = 0 if col == size - 1 else col + 1
    else:
        raise ValueError(f"Unknown direction {direction!r}.")
    return row, col


def step_index(pos: int, direction: str, size: int = GRID_SIZE) -> int:
    row, col = step(*to_row_col(pos, size), direction, size=size)
    return to_index(row, col, size)


def manhattan_distance(a: int, b: int, size: int = GRID_SIZE) -> int:
    # Unwrapped grid: wraparound shortcuts are not considered
    row_a, col_a = to_row_col(a, size)
    row_b, col_b = to_row_col(b, size)
    return abs(row_a - row_b) + abs(col_a - col_b)
