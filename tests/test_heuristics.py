"""Tests for the static board evaluators."""

import numpy as np

from alphabeta.games import Player, connect4, tictactoe
from alphabeta.games.connect4 import ROWS, WIN_SCORE


class TestConnect4Evaluate:
    def test_empty_board_is_zero(self):
        board = connect4.create_empty_board()
        assert connect4.evaluate_board(board, Player.AI) == 0
        assert connect4.evaluate_board(board, Player.HUMAN) == 0

    def test_center_column_bonus(self):
        board = connect4.make_move(connect4.create_empty_board(), 3, Player.AI)
        assert connect4.evaluate_board(board, Player.AI) == 3
        assert connect4.evaluate_board(board, Player.HUMAN) == 0

    def test_open_three_and_two(self):
        """Bottom-row X X X _ : one three-window (+5) and one two-window (+2)."""
        board = connect4.create_empty_board()
        board[ROWS - 1, 0:3] = Player.HUMAN
        assert connect4.evaluate_board(board, Player.HUMAN) == 7

    def test_opponent_three_penalty(self):
        board = connect4.create_empty_board()
        board[ROWS - 1, 0:3] = Player.HUMAN
        assert connect4.evaluate_board(board, Player.AI) == -4

    def test_win_and_loss(self):
        board = connect4.create_empty_board()
        board[ROWS - 1, 0:4] = Player.HUMAN
        assert connect4.evaluate_board(board, Player.HUMAN) == WIN_SCORE
        assert connect4.evaluate_board(board, Player.AI) == -WIN_SCORE

    def test_is_pure(self):
        board = connect4.create_empty_board()
        board[ROWS - 1, 1:4] = Player.AI
        board[ROWS - 2, 3] = Player.HUMAN

        first = connect4.evaluate_board(board, Player.AI)
        # Scoring other boards in between must not leak into the result
        connect4.evaluate_board(connect4.create_empty_board(), Player.AI)
        connect4.evaluate_board(board, Player.HUMAN)
        assert connect4.evaluate_board(board, Player.AI) == first

    def test_does_not_modify_board(self):
        board = connect4.create_empty_board()
        board[ROWS - 1, 2] = Player.AI
        before = board.copy()
        connect4.evaluate_board(board, Player.AI)
        assert np.array_equal(board, before)

    def test_accepts_plain_int_player(self):
        board = connect4.make_move(connect4.create_empty_board(), 3, Player.AI)
        assert connect4.evaluate_board(board, 2) == 3


class TestTicTacToeEvaluate:
    def test_win_loss(self):
        board = np.array([[2, 2, 2], [1, 1, 0], [1, 0, 0]], dtype=np.int8)
        assert tictactoe.evaluate_board(board, Player.AI) == 10
        assert tictactoe.evaluate_board(board, Player.HUMAN) == -10

    def test_draw(self):
        board = np.array([[1, 2, 1], [1, 2, 2], [2, 1, 1]], dtype=np.int8)
        assert tictactoe.evaluate_board(board, Player.AI) == 0

    def test_center(self):
        board = tictactoe.make_move(tictactoe.create_empty_board(), 1, 1, Player.HUMAN)
        assert tictactoe.evaluate_board(board, Player.HUMAN) == 1
        assert tictactoe.evaluate_board(board, Player.AI) == -1

    def test_no_center(self):
        board = tictactoe.make_move(tictactoe.create_empty_board(), 0, 0, Player.HUMAN)
        assert tictactoe.evaluate_board(board, Player.AI) == 0
