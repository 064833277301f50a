"""
Tic-Tac-Toe game implementation.

Rules:
- 3x3 board
- Players alternate placing their mark
- First to get 3 in a row (horizontal, vertical, diagonal) wins
- If board fills with no winner, it's a draw

The full game tree is small enough to search to the end, so the
heuristic only matters for positions reached at a depth cutoff.
"""

from __future__ import annotations

from typing import Tuple
import numpy as np

from .base import Board, Game, Player, register_game


BOARD_SIZE = 3
CENTER = (1, 1)

WIN_SCORE = 10

Move = Tuple[int, int]


@register_game("tictactoe")
class TicTacToeGame(Game):
    """
    Tic-Tac-Toe implementation.

    Actions are (row, col) pairs:
    (0,0) | (0,1) | (0,2)
    ---------------------
    (1,0) | (1,1) | (1,2)
    ---------------------
    (2,0) | (2,1) | (2,2)
    """

    board_shape = (BOARD_SIZE, BOARD_SIZE)
    no_move = (-1, -1)
    records_bounds = True
    records_pruned = True
    # Hints were never wired up for this game; opt in with get_hint(enabled=True)
    hints_enabled = False

    # Winning lines in scan order: rows, columns, then both diagonals
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    _LINE_ROWS = np.array([[r for r, _ in line] for line in WINNING_LINES])
    _LINE_COLS = np.array([[c for _, c in line] for line in WINNING_LINES])

    def legal_actions(self, board: Board) -> list[Move]:
        """Return empty cells in row-major order."""
        return [
            (r, c)
            for r in range(BOARD_SIZE)
            for c in range(BOARD_SIZE)
            if board[r, c] == Player.EMPTY
        ]

    def apply_action(self, board: Board, action: Move, player: Player) -> Board:
        """Place a mark; an occupied cell leaves the board unchanged."""
        row, col = action
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise ValueError(f"Invalid action {action}, must be within 0-{BOARD_SIZE-1}")

        new_board = board.copy()
        if new_board[row, col] == Player.EMPTY:
            new_board[row, col] = player
        return new_board

    def _complete_lines(self, board: Board, player: Player) -> np.ndarray:
        return np.all(board[self._LINE_ROWS, self._LINE_COLS] == player, axis=1)

    def has_won(self, board: Board, player: Player) -> bool:
        return bool(np.any(self._complete_lines(board, player)))

    def winning_line(self, board: Board, player: Player) -> list[Move]:
        complete = self._complete_lines(board, player)
        if not np.any(complete):
            return []
        return list(self.WINNING_LINES[int(np.argmax(complete))])

    def evaluate(self, board: Board, player: Player) -> int:
        """
        Score the board for player.

        +10 win, -10 loss, 0 draw. An undecided position is worth +1 or -1
        depending on who holds the centre, 0 if nobody does.
        """
        player = Player(player)
        opponent = player.opponent

        if self.has_won(board, player):
            return WIN_SCORE
        if self.has_won(board, opponent):
            return -WIN_SCORE
        if self.is_draw(board):
            return 0

        center = board[CENTER]
        if center == player:
            return 1
        if center == opponent:
            return -1
        return 0

    def is_no_move(self, action: Move) -> bool:
        return tuple(action) == self.no_move

    def format_move(self, action: Move) -> str:
        row, col = action
        return f"({row}, {col})"

    def render(self, board: Board) -> str:
        """Render board as ASCII art."""
        symbols = {0: ".", 1: "X", 2: "O"}

        lines = []
        for r in range(BOARD_SIZE):
            row_str = " | ".join(
                symbols[int(board[r, c])] for c in range(BOARD_SIZE)
            )
            lines.append(f" {row_str} ")
            if r < BOARD_SIZE - 1:
                lines.append("-----------")

        return "\n".join(lines)


# Convenience functions for direct use
_GAME = TicTacToeGame()


def create_empty_board() -> Board:
    return _GAME.initial_state()


def make_move(board: Board, row: int, col: int, player: Player) -> Board:
    return _GAME.apply_action(board, (row, col), player)


def check_win(board: Board, player: Player) -> bool:
    return _GAME.has_won(board, player)


def is_draw(board: Board) -> bool:
    return _GAME.is_draw(board)


def find_winning_coordinates(board: Board, player: Player) -> list[Move]:
    return _GAME.winning_line(board, player)


def evaluate_board(board: Board, player: Player) -> int:
    return _GAME.evaluate(board, player)
