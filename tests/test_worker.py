"""Tests for background move computation."""

import pytest

from alphabeta.games import get_game
from alphabeta.play import MoveDecision, MoveWorker


class TestMoveWorker:
    def test_returns_decision(self):
        game = get_game("tictactoe")
        board = game.parse_board("110/220/000")

        with MoveWorker() as worker:
            decision = worker.submit(game, board, "hard").result(timeout=60)

        assert isinstance(decision, MoveDecision)
        assert decision.move == (0, 2)
        assert decision.tree is not None

    def test_board_snapshot(self):
        game = get_game("tictactoe")
        board = game.parse_board("110/220/000")

        with MoveWorker() as worker:
            future = worker.submit(game, board, "hard")
            board[:] = 0
            assert future.result(timeout=60).move == (0, 2)

    def test_requests_run_in_order(self):
        game = get_game("connect4")
        boards = [game.initial_state() for _ in range(3)]

        with MoveWorker() as worker:
            futures = [worker.submit(game, b, "medium", randomize=False) for b in boards]
            moves = [f.result(timeout=60).move for f in futures]

        assert len(set(moves)) == 1

    def test_submit_after_shutdown(self):
        game = get_game("connect4")
        worker = MoveWorker()
        worker.shutdown()
        with pytest.raises(RuntimeError):
            worker.submit(game, game.initial_state(), "easy")
