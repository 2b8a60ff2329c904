"""Text layout of a board for the console."""

from typing import Sequence

from .board import EMPTY, WIDTH, Board

DIVIDER = "---+---+---"


def format_board(board: Board) -> str:
    """Lay the board out as text, showing free cells by their 1-based number."""
    rows = []
    for r in range(WIDTH):
        cells = []
        for c in range(WIDTH):
            idx = r * WIDTH + c
            value = board.cells[idx]
            cells.append(f" {idx + 1 if value == EMPTY else value} ")
        rows.append("|".join(cells))
    return f"\n{DIVIDER}\n".join(rows)


def print_board(board: Board) -> None:
    print(format_board(board))
    print()


def describe_line(line: Sequence[int]) -> str:
    return "-".join(str(idx + 1) for idx in line)
