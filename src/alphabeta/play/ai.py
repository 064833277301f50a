"""
Move selection for the computer player and hints for the human.

Two separate paths pick the AI's move:
- Random: with the difficulty's probability, a uniformly random legal
  move. No search runs and no tree is produced.
- Search: minimax at the difficulty's depth for Player.AI, with tree
  recording on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union
import numpy as np

from ..games.base import Board, Game, Player
from ..search import DecisionTreeRecorder, SearchNode, minimax
from .difficulty import Difficulty, get_difficulty_config


HINT_DEPTH = 3


@dataclass
class MoveDecision:
    """
    Outcome of one AI move computation.

    Attributes:
        move: Chosen move, game.no_move if the board has none
        score: Minimax score (None for random or missing moves)
        tree: Recorded search tree (None unless the search path ran)
        randomized: True if the move came from the random path
        depth: Search depth used (0 if no search ran)
    """
    move: Any
    score: Optional[float] = None
    tree: Optional[SearchNode] = None
    randomized: bool = False
    depth: int = 0

    @property
    def searched(self) -> bool:
        return self.tree is not None


def random_move(game: Game, board: Board, rng=None) -> Any:
    """Uniformly random legal move, or game.no_move."""
    actions = game.legal_actions(board)
    if not actions:
        return game.no_move
    rng = rng if rng is not None else np.random
    return actions[int(rng.choice(len(actions)))]


def search_move(game: Game, board: Board, depth: int) -> MoveDecision:
    """Run a recorded minimax search for the AI."""
    score, move, tree = minimax(
        game,
        board,
        depth,
        maximizing=True,
        player=Player.AI,
        record_tree=True,
    )
    return MoveDecision(move=move, score=score, tree=tree, depth=depth)


def choose_move(
    game: Game,
    board: Board,
    difficulty: Union[Difficulty, str],
    rng=None,
    randomize: bool = True,
) -> MoveDecision:
    """
    Pick the AI's move for the given difficulty.

    Args:
        game: Game being played
        board: Current board (not modified)
        difficulty: Preset difficulty level
        rng: Source of randomness with random() and choice(); defaults
            to the global numpy generator
        randomize: Set False to always search

    Returns:
        MoveDecision describing the move and how it was found
    """
    if not game.legal_actions(board):
        return MoveDecision(move=game.no_move)

    config = get_difficulty_config(difficulty, game.name)
    rng = rng if rng is not None else np.random

    if randomize and config.random_move_probability > 0:
        if rng.random() < config.random_move_probability:
            return MoveDecision(move=random_move(game, board, rng), randomized=True)

    return search_move(game, board, config.depth)


def get_ai_move(
    game: Game,
    board: Board,
    difficulty: Union[Difficulty, str],
    recorder: Optional[DecisionTreeRecorder] = None,
    rng=None,
    randomize: bool = True,
) -> Any:
    """
    Return the AI's move, storing the search tree in recorder if given.

    Random moves leave the recorder's previous tree in place.
    """
    decision = choose_move(game, board, difficulty, rng=rng, randomize=randomize)
    if recorder is not None and decision.tree is not None:
        recorder.capture(decision.tree)
    return decision.move


def get_hint(
    game: Game,
    board: Board,
    depth: int = HINT_DEPTH,
    enabled: Optional[bool] = None,
) -> Any:
    """
    Suggest a move for the human player.

    Uses a fixed-depth search with no randomness and no tree. Games with
    hints_enabled False return game.no_move unless enabled=True.
    """
    if enabled is None:
        enabled = game.hints_enabled
    if not enabled:
        return game.no_move

    _, move, _ = minimax(
        game,
        board,
        depth,
        maximizing=True,
        player=Player.HUMAN,
    )
    return move
