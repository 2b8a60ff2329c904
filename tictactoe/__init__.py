"""Terminal tic-tac-toe for two players sharing one console."""

from .board import (
    EMPTY,
    PLAYER1,
    PLAYER2,
    WINNING_LINES,
    Board,
    History,
    IllegalMoveError,
    board_full,
    create_empty,
    derive,
    has_won,
    winning_line,
)
from .game import Game, GameAborted, GameResult, parse_position, read_move, scripted_input
from .render import format_board, print_board

__version__ = "1.0.0"
__all__ = [
    "EMPTY",
    "PLAYER1",
    "PLAYER2",
    "WINNING_LINES",
    "Board",
    "History",
    "IllegalMoveError",
    "board_full",
    "create_empty",
    "derive",
    "has_won",
    "winning_line",
    "Game",
    "GameAborted",
    "GameResult",
    "parse_position",
    "read_move",
    "scripted_input",
    "format_board",
    "print_board",
]
