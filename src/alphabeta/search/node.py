"""
Search tree node recorded during minimax.

Each node represents one visited position and stores:
- score: value backed up to this position (None if never searched)
- move: best move chosen here (None at leaves and unsearched nodes)
- parent_move: move that produced this position (None at the root)
- alpha/beta: pruning window when the scan of this node finished
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional
import math
import numpy as np


@dataclass
class SearchNode:
    """
    Minimax tree node.

    Trees are built bottom-up: each recursive call returns its finished
    subtree and the caller appends it to its own children.
    """

    score: Optional[float]
    is_maximizing: bool

    move: Any = None
    parent_move: Any = None

    children: list[SearchNode] = field(default_factory=list)

    # Only recorded for games with records_bounds
    alpha: Optional[float] = None
    beta: Optional[float] = None
    board: Optional[np.ndarray] = None

    # Placeholder for a move skipped by alpha-beta pruning
    pruned: bool = False

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def iter_nodes(self) -> Iterator[SearchNode]:
        """Yield this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    @property
    def size(self) -> int:
        """Number of nodes in this subtree."""
        return sum(1 for _ in self.iter_nodes())

    @property
    def height(self) -> int:
        """Length of the longest path down to a leaf (0 for a leaf)."""
        if not self.children:
            return 0
        return 1 + max(child.height for child in self.children)

    @property
    def num_pruned(self) -> int:
        return sum(1 for node in self.iter_nodes() if node.pruned)

    def to_dict(self) -> dict:
        """Plain-data export for renderers. Infinite bounds become strings."""
        data = {
            "score": _plain_number(self.score),
            "move": _plain_move(self.move),
            "parent_move": _plain_move(self.parent_move),
            "is_maximizing": self.is_maximizing,
            "pruned": self.pruned,
            "children": [child.to_dict() for child in self.children],
        }
        if self.alpha is not None or self.beta is not None:
            data["alpha"] = _plain_number(self.alpha)
            data["beta"] = _plain_number(self.beta)
        if self.board is not None:
            data["board"] = self.board.tolist()
        return data

    def __repr__(self) -> str:
        kind = "max" if self.is_maximizing else "min"
        return (
            f"SearchNode({kind}, score={self.score}, move={self.move}, "
            f"children={len(self.children)}, pruned={self.pruned})"
        )


def _plain_number(value: Optional[float]) -> Any:
    if value is None:
        return None
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return value


def _plain_move(move: Any) -> Any:
    if isinstance(move, tuple):
        return list(move)
    return move
