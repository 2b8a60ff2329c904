"""Two-player console game loop: prompt, validate, derive, check for a winner."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .board import EMPTY, MARKS, PLAYER1, SIZE, Board, History, Line, board_full, other_mark, winning_line
from .render import describe_line, print_board

logger = logging.getLogger(__name__)

AWAITING_MOVE = "awaiting_move"
CHECK_WIN = "check_win"
GAME_OVER = "game_over"
DRAW = "draw"
DRAW_RESULT = "Draw"

TURN_MESSAGE = "{mark}'s turn!"
ENTER_PROMPT = "\nEnter the position you want to mark : "
RETRY_PROMPT = "Invalid position! Try again : "

PromptFn = Callable[[str], str]


class GameAborted(RuntimeError):
    """Input ran out before the game reached a result."""


@dataclass
class GameResult:
    winner: str
    line: Optional[Line] = None
    moves: List[Tuple[str, int]] = field(default_factory=list)
    boards: int = 0


def parse_position(text: str, board: Board) -> Optional[int]:
    """Return the 0-based index for a free 1-based position, else None."""
    text = text.strip()
    try:
        value = int(text)
    except ValueError:
        return None
    if not 1 <= value <= SIZE:
        return None
    if board.cells[value - 1] != EMPTY:
        return None
    return value - 1


def read_move(mark: str, board: Board, prompt_fn: PromptFn = input) -> int:
    """Ask ``mark`` for a position until a free one is given; return its index."""
    print(TURN_MESSAGE.format(mark=mark))
    print_board(board)
    text = prompt_fn(ENTER_PROMPT)
    idx = parse_position(text, board)
    while idx is None:
        logger.info("Rejected position %r from %s", text.strip(), mark)
        text = prompt_fn(RETRY_PROMPT)
        idx = parse_position(text, board)
    return idx


def scripted_input(entries: Iterable[str]) -> PromptFn:
    """Build a prompt function that answers from ``entries`` and echoes them.

    Raises EOFError once the entries are used up, like ``input`` at end of file.
    """
    remaining = iter(entries)

    def _prompt(prompt: str) -> str:
        try:
            value = next(remaining)
        except StopIteration:
            raise EOFError("no scripted moves left") from None
        print(f"{prompt}{value}")
        return value

    return _prompt


class Game:
    def __init__(self, prompt_fn: PromptFn = input, first: str = PLAYER1) -> None:
        self.prompt_fn = prompt_fn
        self.history = History()
        self.active = first
        self.phase = AWAITING_MOVE
        self.result: Optional[GameResult] = None

    def _check_winner(self) -> Tuple[Optional[str], Optional[Line]]:
        board = self.history.current
        for mark in MARKS:
            line = winning_line(board, mark)
            if line is not None:
                return mark, line
        return None, None

    def play(self) -> GameResult:
        try:
            while True:
                self.phase = CHECK_WIN
                winner, line = self._check_winner()
                board = self.history.current
                if winner is not None:
                    self.phase = GAME_OVER
                    print_board(board)
                    print(f"\n{winner} wins!!")
                    print(f"Winning line: {describe_line(line)}")
                    logger.info("%s wins on line %s after %d moves", winner, describe_line(line), len(self.history) - 1)
                    break
                if board_full(board):
                    self.phase = DRAW
                    winner = DRAW_RESULT
                    print_board(board)
                    print("\nIt's a draw!")
                    logger.info("Draw after %d moves", len(self.history) - 1)
                    break

                self.phase = AWAITING_MOVE
                try:
                    idx = read_move(self.active, board, self.prompt_fn)
                except EOFError as exc:
                    logger.error("Input ended while waiting for %s to move", self.active)
                    raise GameAborted("input ended before the game finished") from exc
                self.history.advance(idx, self.active)
                self.active = other_mark(self.active)

            self.result = GameResult(
                winner=winner,
                line=line,
                moves=self.history.moves(),
                boards=len(self.history),
            )
            return self.result
        finally:
            self.history.release()

    def summary(self) -> Dict[str, object]:
        if self.result is None:
            return {}
        return {
            "winner": self.result.winner,
            "line": list(self.result.line) if self.result.line else None,
            "moves": [[mark, idx] for mark, idx in self.result.moves],
            "boards": self.result.boards,
        }
