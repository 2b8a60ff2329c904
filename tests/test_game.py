import io
import unittest
from contextlib import redirect_stdout
from typing import List

from tictactoe import game
from tictactoe.board import PLAYER1, PLAYER2, create_empty, derive


class RecordingInput:
    """Answers prompts from a list and remembers what was asked."""

    def __init__(self, answers: List[str]) -> None:
        self.answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


class TestParsePosition(unittest.TestCase):
    def test_accepts_free_positions(self) -> None:
        board = create_empty()
        self.assertEqual(game.parse_position("1", board), 0)
        self.assertEqual(game.parse_position(" 9\n", board), 8)

    def test_rejects_bad_text(self) -> None:
        board = derive(create_empty(), 4, PLAYER2)
        for text in ("", "abc", "0", "10", "-3", "2.5", "5"):
            self.assertIsNone(game.parse_position(text, board), text)


class TestReadMove(unittest.TestCase):
    def test_occupied_cell_is_reprompted(self) -> None:
        board = derive(create_empty(), 4, PLAYER2)
        before = board.cells
        answers = RecordingInput(["5", "5", "1"])
        buf = io.StringIO()
        with redirect_stdout(buf):
            idx = game.read_move(PLAYER1, board, answers)
        self.assertEqual(idx, 0)
        self.assertEqual(answers.prompts, [game.ENTER_PROMPT, game.RETRY_PROMPT, game.RETRY_PROMPT])
        self.assertEqual(board.cells, before)
        self.assertIn("X's turn!", buf.getvalue())

    def test_garbage_is_reprompted(self) -> None:
        answers = RecordingInput(["seven", "", "42", "7"])
        with redirect_stdout(io.StringIO()):
            idx = game.read_move(PLAYER1, create_empty(), answers)
        self.assertEqual(idx, 6)
        self.assertEqual(answers.prompts.count(game.RETRY_PROMPT), 3)


class TestGameLoop(unittest.TestCase):
    def test_top_row_win_stops_prompting(self) -> None:
        answers = RecordingInput(["1", "4", "2", "5", "3", "9"])
        g = game.Game(answers)
        buf = io.StringIO()
        with redirect_stdout(buf):
            result = g.play()
        self.assertEqual(result.winner, PLAYER1)
        self.assertEqual(result.line, (0, 1, 2))
        self.assertEqual(result.moves, [("X", 0), ("O", 3), ("X", 1), ("O", 4), ("X", 2)])
        self.assertEqual(result.boards, 6)
        self.assertEqual(len(answers.prompts), 5)
        self.assertEqual(answers.answers, ["9"])
        self.assertEqual(g.phase, game.GAME_OVER)
        self.assertTrue(buf.getvalue().rstrip().endswith("Winning line: 1-2-3"))
        self.assertIn("X wins!!", buf.getvalue())

    def test_second_player_can_win(self) -> None:
        answers = RecordingInput(["1", "3", "2", "5", "9", "7"])
        with redirect_stdout(io.StringIO()):
            result = game.Game(answers).play()
        self.assertEqual(result.winner, PLAYER2)
        self.assertEqual(result.line, (2, 4, 6))

    def test_full_board_ends_in_draw(self) -> None:
        answers = RecordingInput(["1", "2", "3", "5", "4", "6", "8", "7", "9"])
        g = game.Game(answers)
        buf = io.StringIO()
        with redirect_stdout(buf):
            result = g.play()
        self.assertEqual(result.winner, game.DRAW_RESULT)
        self.assertIsNone(result.line)
        self.assertEqual(len(result.moves), 9)
        self.assertEqual(g.phase, game.DRAW)
        self.assertIn("It's a draw!", buf.getvalue())
        self.assertEqual(len(answers.prompts), 9)

    def test_history_released_after_game(self) -> None:
        g = game.Game(RecordingInput(["1", "4", "2", "5", "3"]))
        with redirect_stdout(io.StringIO()):
            g.play()
        self.assertEqual(len(g.history), 0)
        self.assertEqual(g.summary()["winner"], "X")
        self.assertEqual(g.summary()["line"], [0, 1, 2])

    def test_running_out_of_input_aborts(self) -> None:
        g = game.Game(RecordingInput(["1", "4"]))
        with redirect_stdout(io.StringIO()):
            with self.assertRaises(game.GameAborted):
                g.play()
        self.assertEqual(len(g.history), 0)
        self.assertEqual(g.summary(), {})

    def test_scripted_input_echoes_answers(self) -> None:
        prompt = game.scripted_input(["3"])
        buf = io.StringIO()
        with redirect_stdout(buf):
            self.assertEqual(prompt("Pick: "), "3")
            with self.assertRaises(EOFError):
                prompt("Pick: ")
        self.assertEqual(buf.getvalue(), "Pick: 3\n")


if __name__ == "__main__":
    unittest.main()
