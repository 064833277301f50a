"""
Game implementations.

Each game implements the Game interface from base.py.
"""

from .base import (
    Board,
    Game,
    Player,
    register_game,
    get_game,
    list_games,
)

# Import games to register them
from . import connect4
from . import tictactoe
from .connect4 import Connect4Game
from .tictactoe import TicTacToeGame

__all__ = [
    "Board",
    "Game",
    "Player",
    "Connect4Game",
    "TicTacToeGame",
    "register_game",
    "get_game",
    "list_games",
]
