"""Utilities module."""

from .config import Config, get_default_config
from .seed import set_seed
from .logging import (
    Logger,
    console,
    build_tree,
    print_board,
    print_config,
    print_tree,
)

__all__ = [
    "Config",
    "get_default_config",
    "set_seed",
    "Logger",
    "console",
    "build_tree",
    "print_board",
    "print_config",
    "print_tree",
]
