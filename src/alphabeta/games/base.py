"""
Abstract base class for the two board games.

The search engine doesn't know the rules of either game. It only needs
these methods to:
1. Know what moves are legal (and in which order to try them)
2. Apply moves and get new boards
3. Know when someone has won
4. Score a position it can't search any deeper
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, ClassVar, Tuple
import numpy as np


# Boards are plain int8 arrays of Player values
Board = np.ndarray


class Player(IntEnum):
    """Cell contents / side to move. Human always moves first."""
    EMPTY = 0
    HUMAN = 1
    AI = 2

    @property
    def opponent(self) -> Player:
        if self is Player.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Player.AI if self is Player.HUMAN else Player.HUMAN


# Characters accepted by parse_board, on top of the digits 0/1/2
_CELL_SYMBOLS = {".": 0, "_": 0, "X": 1, "x": 1, "O": 2, "o": 2}


class Game(ABC):
    """
    Rules of one fixed-size game.

    Boards are never modified in place: apply_action always returns a new
    array, so every search frame owns its own copy.

    Class attributes:
        name: Registry name
        board_shape: (rows, cols)
        no_move: Sentinel returned when there is nothing to play
        records_bounds: Store alpha/beta and board snapshots in search trees
        records_pruned: Emit placeholder nodes for branches cut by pruning
        hints_enabled: Whether get_hint searches for this game by default
    """

    name: ClassVar[str]
    board_shape: ClassVar[Tuple[int, int]]
    no_move: ClassVar[Any]
    records_bounds: ClassVar[bool] = False
    records_pruned: ClassVar[bool] = False
    hints_enabled: ClassVar[bool] = True

    def initial_state(self) -> Board:
        """Return an empty board."""
        return np.zeros(self.board_shape, dtype=np.int8)

    @abstractmethod
    def legal_actions(self, board: Board) -> list:
        """Return playable moves in search order."""
        pass

    @abstractmethod
    def apply_action(self, board: Board, action: Any, player: Player) -> Board:
        """
        Return a new board with the move applied.

        An illegal move (full column, occupied cell) yields an unchanged
        copy. Callers must check legality themselves.
        """
        pass

    @abstractmethod
    def has_won(self, board: Board, player: Player) -> bool:
        """Check whether player has a complete line."""
        pass

    @abstractmethod
    def winning_line(self, board: Board, player: Player) -> list[tuple[int, int]]:
        """Return the cells of the first winning line found, or []."""
        pass

    @abstractmethod
    def evaluate(self, board: Board, player: Player) -> int:
        """Static score of board from player's point of view."""
        pass

    def is_full(self, board: Board) -> bool:
        return not np.any(board == Player.EMPTY)

    def is_draw(self, board: Board) -> bool:
        """Board full and nobody has won."""
        return (
            self.is_full(board)
            and not self.has_won(board, Player.HUMAN)
            and not self.has_won(board, Player.AI)
        )

    def is_terminal(self, board: Board) -> Tuple[bool, Player]:
        """
        Check if the game is over.

        Returns:
            (done, winner) where winner is Player.EMPTY for a draw or an
            unfinished game
        """
        for player in (Player.HUMAN, Player.AI):
            if self.has_won(board, player):
                return True, player
        return self.is_full(board), Player.EMPTY

    def is_no_move(self, action: Any) -> bool:
        return action == self.no_move

    def format_move(self, action: Any) -> str:
        return str(action)

    def render(self, board: Board) -> str:
        """Render board as ASCII art."""
        symbols = {0: ".", 1: "X", 2: "O"}
        rows, _ = self.board_shape
        return "\n".join(
            " ".join(symbols[int(v)] for v in board[r]) for r in range(rows)
        )

    def parse_board(self, text: str) -> Board:
        """
        Build a board from text such as "110/220/000" or "XX./OO./...".

        Rows are separated by '/' (or newlines), top row first.
        """
        rows_text = [r.strip() for r in text.replace("\n", "/").split("/") if r.strip()]
        rows, cols = self.board_shape
        if len(rows_text) != rows:
            raise ValueError(f"Expected {rows} rows, got {len(rows_text)}")

        board = self.initial_state()
        for r, row_text in enumerate(rows_text):
            cells = row_text.replace(" ", "")
            if len(cells) != cols:
                raise ValueError(f"Row {r} must have {cols} cells, got {len(cells)}")
            for c, ch in enumerate(cells):
                if ch in "012":
                    board[r, c] = int(ch)
                elif ch in _CELL_SYMBOLS:
                    board[r, c] = _CELL_SYMBOLS[ch]
                else:
                    raise ValueError(f"Unknown cell symbol {ch!r}")
        return board


# Registry of available games
_GAME_REGISTRY: dict[str, type[Game]] = {}


def register_game(name: str):
    """Decorator to register a game class."""
    def decorator(cls: type[Game]):
        cls.name = name
        _GAME_REGISTRY[name] = cls
        return cls
    return decorator


def get_game(name: str) -> Game:
    """Get a game instance by name."""
    if name not in _GAME_REGISTRY:
        available = ", ".join(_GAME_REGISTRY.keys())
        raise ValueError(f"Unknown game '{name}'. Available: {available}")
    return _GAME_REGISTRY[name]()


def list_games() -> list[str]:
    """List all registered games."""
    return list(_GAME_REGISTRY.keys())
