"""
Minimax search module.
"""

from .node import SearchNode
from .minimax import minimax
from .recorder import DecisionTreeRecorder

__all__ = [
    "SearchNode",
    "minimax",
    "DecisionTreeRecorder",
]
