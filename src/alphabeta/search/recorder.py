"""
Holder for the most recent recorded search tree.

One recorder belongs to one game session. It starts empty, is filled by
the first search-driven AI move, replaced by every later one, and
cleared when a new game starts. Random moves don't touch it, so after a
random move it still shows the previous search.
"""

from __future__ import annotations

from typing import Optional

from .node import SearchNode


class DecisionTreeRecorder:
    """Keeps the root of the latest recorded minimax tree."""

    def __init__(self):
        self._tree: Optional[SearchNode] = None
        self.searches_recorded = 0

    @property
    def tree(self) -> Optional[SearchNode]:
        return self._tree

    @property
    def has_tree(self) -> bool:
        return self._tree is not None

    def get_tree(self) -> Optional[SearchNode]:
        """Return the last recorded tree, or None before any search."""
        return self._tree

    def capture(self, node: Optional[SearchNode]) -> None:
        """Replace the stored tree with a newly recorded one."""
        if node is None:
            return
        self._tree = node
        self.searches_recorded += 1

    def reset(self) -> None:
        """Forget the stored tree (start of a new game)."""
        self._tree = None
        self.searches_recorded = 0

    def __repr__(self) -> str:
        size = self._tree.size if self._tree is not None else 0
        return f"DecisionTreeRecorder(nodes={size}, searches={self.searches_recorded})"
