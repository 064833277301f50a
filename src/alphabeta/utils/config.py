"""
Configuration management for the alphabeta front-end.

Uses a dataclass for clean configuration with sensible defaults.
Supports loading from YAML files.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, fields
from typing import Optional
import yaml

from ..play.difficulty import parse_difficulty


@dataclass
class Config:
    """Settings for a play session."""

    # Opponent
    difficulty: str = "medium"
    human_first: bool = True

    # Hints (Tic-Tac-Toe hints stay off unless enable_all_hints is set)
    hint_depth: int = 3
    enable_all_hints: bool = False

    # Presentation
    think_delay: float = 0.0  # Seconds to pause before showing the AI move
    show_tree: bool = False
    tree_depth: int = 2  # Levels of the decision tree to print

    # Random seed (None = unseeded)
    seed: Optional[int] = None

    def __post_init__(self):
        self.difficulty = parse_difficulty(self.difficulty).value
        for name in ("hint_depth", "tree_depth"):
            if not _is_int(getattr(self, name)):
                raise ValueError(f"{name} must be an integer")
        if self.seed is not None and not _is_int(self.seed):
            raise ValueError("seed must be an integer or null")
        if isinstance(self.think_delay, bool) or not isinstance(self.think_delay, (int, float)):
            raise ValueError("think_delay must be a number")
        for name in ("human_first", "enable_all_hints", "show_tree"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be true or false")

        if self.hint_depth < 1:
            raise ValueError("hint_depth must be at least 1")
        if self.think_delay < 0:
            raise ValueError("think_delay must be non-negative")
        if self.tree_depth < 0:
            raise ValueError("tree_depth must be non-negative")

    def save(self, path: str) -> None:
        """Save config to YAML file."""
        with open(path, "w") as f:
            yaml.dump(asdict(self), f, default_flow_style=False)

    @classmethod
    def load(cls, path: str) -> Config:
        """Load config from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping of settings")
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
