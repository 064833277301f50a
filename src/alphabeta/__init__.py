"""
alphabeta - Connect 4 and Tic-Tac-Toe against a minimax AI.

The computer player searches the game tree with minimax and alpha-beta
pruning, scoring cut-off positions with a per-game heuristic. Every
search can record its tree so a front-end can show how the move was
chosen.

Supported games:
- Connect 4 (depth-limited search with a window heuristic)
- Tic-Tac-Toe (searched to the end of the game)

Usage:
    from alphabeta.games import get_game, Player
    from alphabeta.play import get_ai_move, get_hint
    from alphabeta.search import DecisionTreeRecorder

    game = get_game('connect4')
    board = game.initial_state()
    board = game.apply_action(board, 3, Player.HUMAN)

    recorder = DecisionTreeRecorder()
    move = get_ai_move(game, board, 'hard', recorder=recorder)
    tree = recorder.get_tree()
"""

__version__ = "0.1.0"

from . import games
from . import search
from . import play

__all__ = [
    "games",
    "search",
    "play",
    "__version__",
]
