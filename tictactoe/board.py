"""Board snapshots, the move history arena and win detection.

A board is a tuple of 9 cells in row-major order. Every move derives a new
board from the previous one; the history keeps them all in order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

WIDTH = 3
SIZE = WIDTH * WIDTH

EMPTY = " "
PLAYER1 = "X"
PLAYER2 = "O"
MARKS = (PLAYER1, PLAYER2)

Line = Tuple[int, int, int]

WINNING_LINES: Tuple[Line, ...] = (
    # rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class IllegalMoveError(ValueError):
    """Raised when a move targets a bad index or an occupied cell."""


@dataclass(frozen=True)
class Board:
    """One immutable 3x3 snapshot."""

    cells: Tuple[str, ...] = (EMPTY,) * SIZE

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    def __getitem__(self, index: int) -> str:
        return self.cells[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.cells)


def create_empty() -> Board:
    return Board.empty()


def other_mark(mark: str) -> str:
    return PLAYER2 if mark == PLAYER1 else PLAYER1


def derive(board: Board, index: int, mark: str) -> Board:
    """Return a copy of ``board`` with ``index`` set to ``mark``.

    The caller is expected to validate the move first; an out-of-range index,
    an occupied cell or an unknown mark raises ``IllegalMoveError``.
    """
    if mark not in MARKS:
        raise IllegalMoveError(f"unknown mark {mark!r}")
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < SIZE:
        raise IllegalMoveError(f"index {index!r} is off the board")
    if board.cells[index] != EMPTY:
        raise IllegalMoveError(f"cell {index} is already marked by {board.cells[index]}")
    cells = list(board.cells)
    cells[index] = mark
    return Board(tuple(cells))


def empty_cells(board: Board) -> List[int]:
    return [idx for idx, cell in enumerate(board.cells) if cell == EMPTY]


def board_full(board: Board) -> bool:
    return all(cell != EMPTY for cell in board.cells)


def winning_line(board: Board, mark: str) -> Optional[Line]:
    """Return the first line fully owned by ``mark``, or None."""
    for line in WINNING_LINES:
        if all(board.cells[idx] == mark for idx in line):
            return line
    return None


def has_won(mark: str, board: Board) -> bool:
    return winning_line(board, mark) is not None


class History:
    """Ordered arena of boards, oldest first.

    The successor of ``boards[i]`` is ``boards[i + 1]``; the current board is
    always the last one.
    """

    def __init__(self) -> None:
        self.boards: List[Board] = [create_empty()]

    def __len__(self) -> int:
        return len(self.boards)

    def __iter__(self) -> Iterator[Board]:
        return iter(self.boards)

    @property
    def current(self) -> Board:
        if not self.boards:
            raise IndexError("history has been released")
        return self.boards[-1]

    def advance(self, index: int, mark: str) -> Board:
        board = derive(self.current, index, mark)
        self.boards.append(board)
        logger.debug("Board %d: %s marked cell %d", len(self.boards) - 1, mark, index + 1)
        return board

    def moves(self) -> List[Tuple[str, int]]:
        """Rebuild the (mark, index) sequence from consecutive boards."""
        result: List[Tuple[str, int]] = []
        for prev, nxt in zip(self.boards, self.boards[1:]):
            for idx in range(SIZE):
                if prev.cells[idx] != nxt.cells[idx]:
                    result.append((nxt.cells[idx], idx))
                    break
        return result

    def release(self) -> None:
        self.boards.clear()
