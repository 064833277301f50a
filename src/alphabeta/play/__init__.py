"""
Play module for AI move selection with difficulty control.
"""

from .difficulty import (
    Difficulty,
    DifficultyConfig,
    DIFFICULTY_PRESETS,
    GAME_DIFFICULTY_OVERRIDES,
    get_difficulty_config,
    parse_difficulty,
)
from .ai import (
    HINT_DEPTH,
    MoveDecision,
    choose_move,
    get_ai_move,
    get_hint,
    random_move,
    search_move,
)
from .worker import MoveWorker

__all__ = [
    "Difficulty",
    "DifficultyConfig",
    "DIFFICULTY_PRESETS",
    "GAME_DIFFICULTY_OVERRIDES",
    "get_difficulty_config",
    "parse_difficulty",
    "HINT_DEPTH",
    "MoveDecision",
    "choose_move",
    "get_ai_move",
    "get_hint",
    "random_move",
    "search_move",
    "MoveWorker",
]
