"""
Background move computation.

Deep searches (Connect 4 hard, Tic-Tac-Toe from an early position) can
take long enough to stall an interactive front-end. MoveWorker runs them
on a single background thread, so at most one search is in flight and
later requests queue behind it. There is no mid-search cancellation: a
caller that loses interest simply ignores the future.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional, Union

from ..games.base import Board, Game
from .ai import MoveDecision, choose_move
from .difficulty import Difficulty


class MoveWorker:
    """
    Single-threaded executor for AI move decisions.

    Usage:
        with MoveWorker() as worker:
            future = worker.submit(game, board, "hard")
            decision = future.result()
    """

    def __init__(self):
        self._executor: Optional[ThreadPoolExecutor] = ThreadPoolExecutor(
            max_workers=1,
            thread_name_prefix="alphabeta-search",
        )

    def submit(
        self,
        game: Game,
        board: Board,
        difficulty: Union[Difficulty, str],
        rng=None,
        randomize: bool = True,
    ) -> Future:
        """
        Schedule a move decision.

        The board is copied first, so the caller may keep playing on its
        own array while the search runs.

        Returns:
            Future resolving to a MoveDecision
        """
        if self._executor is None:
            raise RuntimeError("MoveWorker has been shut down")

        snapshot = board.copy()

        def _run() -> MoveDecision:
            return choose_move(game, snapshot, difficulty, rng=rng, randomize=randomize)

        return self._executor.submit(_run)

    def shutdown(self, wait: bool = True) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=wait)
            self._executor = None

    def __enter__(self) -> MoveWorker:
        return self

    def __exit__(self, *exc) -> None:
        self.shutdown()
