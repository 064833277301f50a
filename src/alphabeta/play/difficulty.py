"""
Difficulty system for AI players.

Difficulty is controlled by two parameters:
1. Depth: How many plies minimax looks ahead
2. Random-move probability: Chance of ignoring the search entirely and
   playing a uniformly random legal move

Deeper search = stronger play (more lookahead)
Lower probability = more consistent (fewer random blunders)

Tic-Tac-Toe is always searched to the end of the game, so only the
random-move probability separates its levels.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Difficulty(Enum):
    """Preset difficulty levels."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass
class DifficultyConfig:
    """
    Configuration for AI difficulty.

    Attributes:
        depth: Minimax search depth in plies
        random_move_probability: Chance of a random move instead of search
        name: Human-readable name
        description: Description for UI
    """
    depth: int
    random_move_probability: float
    name: str = ""
    description: str = ""

    def __post_init__(self):
        if self.depth < 1:
            raise ValueError("Depth must be at least 1")
        if not 0.0 <= self.random_move_probability <= 1.0:
            raise ValueError("Random-move probability must be between 0 and 1")


# Default presets (Connect 4)
DIFFICULTY_PRESETS: dict[Difficulty, DifficultyConfig] = {
    Difficulty.EASY: DifficultyConfig(
        depth=2,
        random_move_probability=0.7,
        name="Easy",
        description="Random move 70% of the time, shallow search otherwise",
    ),
    Difficulty.MEDIUM: DifficultyConfig(
        depth=3,
        random_move_probability=0.3,
        name="Medium",
        description="Random move 30% of the time",
    ),
    Difficulty.HARD: DifficultyConfig(
        depth=4,
        random_move_probability=0.0,
        name="Hard",
        description="Always plays the best move it can find",
    ),
}


# Game-specific presets
GAME_DIFFICULTY_OVERRIDES: dict[str, dict[Difficulty, DifficultyConfig]] = {
    "tictactoe": {
        # Small enough to search every game to the end
        Difficulty.EASY: DifficultyConfig(
            depth=9,
            random_move_probability=0.7,
            name="Easy",
            description="Makes random moves most of the time",
        ),
        Difficulty.MEDIUM: DifficultyConfig(
            depth=9,
            random_move_probability=0.3,
            name="Medium",
            description="Perfect play with occasional random moves",
        ),
        Difficulty.HARD: DifficultyConfig(
            depth=9,
            random_move_probability=0.0,
            name="Hard",
            description="Perfect play - will always draw or win",
        ),
    },
}


def parse_difficulty(value: Union[Difficulty, str]) -> Difficulty:
    """Accept a Difficulty or its name ('easy', 'Medium', ...)."""
    if isinstance(value, Difficulty):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid difficulty {value!r}, expected a name")
    try:
        return Difficulty(value.strip().lower())
    except ValueError:
        choices = ", ".join(d.value for d in Difficulty)
        raise ValueError(f"Invalid difficulty '{value}'. Choose: {choices}") from None


def get_difficulty_config(
    difficulty: Union[Difficulty, str],
    game_name: Optional[str] = None,
) -> DifficultyConfig:
    """
    Get difficulty configuration.

    Args:
        difficulty: Preset difficulty level
        game_name: Optional game name for game-specific tuning

    Returns:
        DifficultyConfig for the specified difficulty
    """
    difficulty = parse_difficulty(difficulty)
    if game_name and game_name in GAME_DIFFICULTY_OVERRIDES:
        return GAME_DIFFICULTY_OVERRIDES[game_name][difficulty]
    return DIFFICULTY_PRESETS[difficulty]
