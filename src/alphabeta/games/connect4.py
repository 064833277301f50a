"""
Connect 4 game implementation.

Rules:
- 6 rows x 7 columns board
- Players drop pieces into columns
- First to get 4 in a row (horizontal, vertical, or diagonal) wins
- If board fills up with no winner, it's a draw

Board representation (absolute, not canonical):
- 0 = empty
- 1 = human pieces
- 2 = AI pieces
Row 0 is the top of the board.
"""

from __future__ import annotations

import numpy as np

from .base import Board, Game, Player, register_game


# Board dimensions
ROWS = 6
COLS = 7
WIN_LENGTH = 4
CENTER_COL = COLS // 2

WIN_SCORE = 1_000_000


def _build_windows() -> np.ndarray:
    """
    Every 4-cell alignment as (row, col) pairs, shape (69, 4, 2).

    Order: horizontal (top-to-bottom, left-to-right), vertical,
    down-right diagonals, up-right diagonals.
    """
    windows = []
    for r in range(ROWS):
        for c in range(COLS - WIN_LENGTH + 1):
            windows.append([(r, c + i) for i in range(WIN_LENGTH)])
    for r in range(ROWS - WIN_LENGTH + 1):
        for c in range(COLS):
            windows.append([(r + i, c) for i in range(WIN_LENGTH)])
    for r in range(ROWS - WIN_LENGTH + 1):
        for c in range(COLS - WIN_LENGTH + 1):
            windows.append([(r + i, c + i) for i in range(WIN_LENGTH)])
    for r in range(WIN_LENGTH - 1, ROWS):
        for c in range(COLS - WIN_LENGTH + 1):
            windows.append([(r - i, c + i) for i in range(WIN_LENGTH)])
    return np.array(windows, dtype=np.intp)


WINDOWS = _build_windows()
_WINDOW_ROWS = WINDOWS[:, :, 0]
_WINDOW_COLS = WINDOWS[:, :, 1]


@register_game("connect4")
class Connect4Game(Game):
    """
    Connect 4 implementation.

    Actions are column indices (0-6).
    """

    board_shape = (ROWS, COLS)
    no_move = -1

    def legal_actions(self, board: Board) -> list[int]:
        """Return columns that aren't full, left to right."""
        return [c for c in range(COLS) if board[0, c] == Player.EMPTY]

    def is_column_full(self, board: Board, col: int) -> bool:
        return board[0, col] != Player.EMPTY

    def next_available_row(self, board: Board, col: int) -> int:
        """Lowest empty row in column, -1 if full."""
        for row in range(ROWS - 1, -1, -1):
            if board[row, col] == Player.EMPTY:
                return row
        return -1

    def apply_action(self, board: Board, action: int, player: Player) -> Board:
        """Drop a piece in column; a full column leaves the board unchanged."""
        if action < 0 or action >= COLS:
            raise ValueError(f"Invalid action {action}, must be 0-{COLS-1}")

        new_board = board.copy()
        row = self.next_available_row(new_board, action)
        if row != -1:
            new_board[row, action] = player
        return new_board

    def parse_board(self, text: str) -> Board:
        """Parse a position; every piece must rest on the floor or another piece."""
        board = super().parse_board(text)
        floating = (board[:-1] != Player.EMPTY) & (board[1:] == Player.EMPTY)
        if floating.any():
            rows, cols = np.nonzero(floating)
            raise ValueError(
                f"Piece at row {rows[0]}, column {cols[0]} has an empty cell below it"
            )
        return board

    def _window_cells(self, board: Board) -> np.ndarray:
        return board[_WINDOW_ROWS, _WINDOW_COLS]

    def has_won(self, board: Board, player: Player) -> bool:
        """Check if the given player has 4 in a row."""
        complete = np.all(self._window_cells(board) == player, axis=1)
        return bool(np.any(complete))

    def winning_line(self, board: Board, player: Player) -> list[tuple[int, int]]:
        complete = np.all(self._window_cells(board) == player, axis=1)
        if not np.any(complete):
            return []
        first = int(np.argmax(complete))
        return [(int(r), int(c)) for r, c in WINDOWS[first]]

    def evaluate(self, board: Board, player: Player) -> int:
        """
        Score the board for player.

        Decisive positions score +/-WIN_SCORE. Otherwise each 4-cell window
        contributes +5 (three own + one empty), +2 (two own + two empty)
        or -4 (three opponent + one empty), and every own piece in the
        centre column adds +3.
        """
        player = Player(player)
        opponent = player.opponent

        if self.has_won(board, player):
            return WIN_SCORE
        if self.has_won(board, opponent):
            return -WIN_SCORE

        cells = self._window_cells(board)
        own = np.count_nonzero(cells == player, axis=1)
        theirs = np.count_nonzero(cells == opponent, axis=1)
        empty = np.count_nonzero(cells == Player.EMPTY, axis=1)

        score = 5 * np.count_nonzero((own == 3) & (empty == 1))
        score += 2 * np.count_nonzero((own == 2) & (empty == 2))
        score -= 4 * np.count_nonzero((theirs == 3) & (empty == 1))
        score += 3 * np.count_nonzero(board[:, CENTER_COL] == player)
        return int(score)

    def render(self, board: Board) -> str:
        """Render board as ASCII art."""
        symbols = {0: ".", 1: "X", 2: "O"}

        lines = []
        lines.append(" " + " ".join(str(i) for i in range(COLS)))
        lines.append("-" * (COLS * 2 + 1))

        for r in range(ROWS):
            row_str = "|" + "|".join(
                symbols[int(board[r, c])] for c in range(COLS)
            ) + "|"
            lines.append(row_str)

        lines.append("-" * (COLS * 2 + 1))
        return "\n".join(lines)


# Convenience functions for direct use
_GAME = Connect4Game()


def create_empty_board() -> Board:
    return _GAME.initial_state()


def make_move(board: Board, col: int, player: Player) -> Board:
    return _GAME.apply_action(board, col, player)


def is_column_full(board: Board, col: int) -> bool:
    return _GAME.is_column_full(board, col)


def get_next_available_row(board: Board, col: int) -> int:
    return _GAME.next_available_row(board, col)


def check_win(board: Board, player: Player) -> bool:
    return _GAME.has_won(board, player)


def is_draw(board: Board) -> bool:
    return _GAME.is_draw(board)


def find_winning_coordinates(board: Board, player: Player) -> list[tuple[int, int]]:
    return _GAME.winning_line(board, player)


def evaluate_board(board: Board, player: Player) -> int:
    return _GAME.evaluate(board, player)
