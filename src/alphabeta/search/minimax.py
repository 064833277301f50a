"""
Depth-limited minimax with alpha-beta pruning.

The search:
1. Cutoff: at depth 0, with no legal moves, or once either side has won,
   score the board with the game's heuristic
2. Recurse: try every legal move in the game's order, alternating between
   the maximizing side (plays `player`) and the minimizing side (plays the
   opponent)
3. Prune: stop scanning a node's moves once beta <= alpha

All scores are from `player`'s point of view.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple
import math

from .node import SearchNode
from ..games.base import Board, Game, Player


SearchResult = Tuple[float, Any, Optional[SearchNode]]


def minimax(
    game: Game,
    board: Board,
    depth: int,
    alpha: float = -math.inf,
    beta: float = math.inf,
    maximizing: bool = True,
    player: Player = Player.AI,
    record_tree: bool = False,
) -> SearchResult:
    """
    Search board and return the best move for the side to move.

    Ties keep the first move in legal_actions order: a later move must be
    strictly better to replace the current best.

    Args:
        game: Rules of the game being searched
        board: Position to search (never modified)
        depth: Remaining plies
        alpha: Best score the maximizer is already guaranteed
        beta: Best score the minimizer is already guaranteed
        maximizing: True if `player` is to move
        player: Side whose evaluation is being maximized
        record_tree: Build a SearchNode tree of the visited positions

    Returns:
        (score, move, node) where move is game.no_move at a cutoff and
        node is None unless record_tree is set
    """
    player = Player(player)
    opponent = player.opponent
    actions = game.legal_actions(board)

    node: Optional[SearchNode] = None
    if record_tree:
        node = SearchNode(score=None, is_maximizing=maximizing)
        if game.records_bounds:
            node.alpha = alpha
            node.beta = beta
            node.board = board.copy()

    if (
        depth == 0
        or not actions
        or game.has_won(board, player)
        or game.has_won(board, opponent)
    ):
        score = game.evaluate(board, player)
        if node is not None:
            node.score = score
        return score, game.no_move, node

    mover = player if maximizing else opponent
    best_score = -math.inf if maximizing else math.inf
    best_move = actions[0]

    for i, action in enumerate(actions):
        child_board = game.apply_action(board, action, mover)
        score, _, child = minimax(
            game,
            child_board,
            depth - 1,
            alpha,
            beta,
            not maximizing,
            player,
            record_tree,
        )

        if child is not None:
            child.parent_move = action
            node.children.append(child)

        if maximizing:
            if score > best_score:
                best_score = score
                best_move = action
            alpha = max(alpha, best_score)
        else:
            if score < best_score:
                best_score = score
                best_move = action
            beta = min(beta, best_score)

        if beta <= alpha:
            if node is not None and game.records_pruned:
                node.children.extend(
                    _pruned_placeholders(
                        game, board, actions[i + 1:], mover, not maximizing
                    )
                )
            break

    if node is not None:
        node.score = best_score
        node.move = best_move
        if game.records_bounds:
            node.alpha = alpha
            node.beta = beta

    return best_score, best_move, node


def _pruned_placeholders(
    game: Game,
    board: Board,
    skipped: list,
    mover: Player,
    child_maximizing: bool,
) -> list[SearchNode]:
    """Unsearched children for the moves a cutoff skipped."""
    placeholders = []
    for action in skipped:
        placeholder = SearchNode(
            score=None,
            is_maximizing=child_maximizing,
            parent_move=action,
            pruned=True,
        )
        if game.records_bounds:
            placeholder.board = game.apply_action(board, action, mover)
        placeholders.append(placeholder)
    return placeholders
