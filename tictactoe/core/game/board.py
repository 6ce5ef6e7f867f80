"""
Board geometry and line checks.

Cells are indexed 0..8 in row-major order:

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8
"""

from typing import Optional, Sequence, Tuple

EMPTY = " "
MARKS = ("X", "O")
BOARD_SIZE = 9

# Scan order matters: rows, then columns, then diagonals.
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # Rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # Columns
    (0, 4, 8), (2, 4, 6),  # Diagonals
)


def empty_board() -> Tuple[str, ...]:
    return (EMPTY,) * BOARD_SIZE


def find_winning_line(cells: Sequence[str]) -> Optional[Tuple[int, int, int]]:
    """Return the first line whose three cells hold the same mark, if any."""
    for line in WIN_LINES:
        a, b, c = line
        if cells[a] != EMPTY and cells[a] == cells[b] == cells[c]:
            return line
    return None


def is_full(cells: Sequence[str]) -> bool:
    return EMPTY not in cells


def empty_positions(cells: Sequence[str]) -> list[int]:
    return [i for i, cell in enumerate(cells) if cell == EMPTY]


def other_mark(mark: str) -> str:
    return "O" if mark == "X" else "X"


def board_to_string(cells: Sequence[str]) -> str:
    return "".join(cells)


def board_from_string(value: str) -> Tuple[str, ...]:
    """Parse a stored 9-character board, rejecting anything malformed."""
    if len(value) != BOARD_SIZE:
        raise ValueError(f"Board must have {BOARD_SIZE} cells, got {len(value)}")
    for cell in value:
        if cell != EMPTY and cell not in MARKS:
            raise ValueError(f"Invalid board cell: {cell!r}")
    return tuple(value)
