"""
Command-line interface for alphabeta.

Commands:
- list-games: Show available games and search depths
- play: Play against the minimax AI
- analyze: Show the AI's move and decision tree for a position
- hint: Suggest a move for the human side of a position
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Optional
import time
import typer
from rich.table import Table

from .utils.logging import Logger, console, print_board, print_config, print_tree

app = typer.Typer(
    name="alphabeta",
    help="Connect 4 and Tic-Tac-Toe against a minimax AI",
    no_args_is_help=True,
)

logger = Logger()

BOARD_HELP = "Rows top to bottom separated by '/', cells 0/1/2 or ./X/O; Connect 4 pieces must be stacked"


def _load_game(game_name: str):
    from .games import get_game

    try:
        return get_game(game_name)
    except ValueError as e:
        logger.log_error(f"Error: {e}")
        raise typer.Exit(1)


def _parse_board_arg(game, text: str):
    try:
        return game.parse_board(text)
    except ValueError as e:
        logger.log_error(f"Invalid board: {e}")
        raise typer.Exit(1)


def _check_difficulty(difficulty: str) -> str:
    from .play import parse_difficulty

    try:
        return parse_difficulty(difficulty).value
    except ValueError as e:
        logger.log_error(str(e))
        raise typer.Exit(1)


def _parse_move(game, text: str) -> Optional[Any]:
    """Parse '3' (Connect 4) or '1 2' / '1,2' (Tic-Tac-Toe) into a move."""
    parts = text.replace(",", " ").split()
    try:
        numbers = [int(p) for p in parts]
    except ValueError:
        return None
    if game.name == "tictactoe":
        return tuple(numbers) if len(numbers) == 2 else None
    return numbers[0] if len(numbers) == 1 else None


@app.command("list-games")
def list_games_cmd() -> None:
    """List all available games."""
    from .games import list_games, get_game
    from .play import Difficulty, get_difficulty_config

    table = Table(title="Available Games")
    table.add_column("Name", style="cyan")
    table.add_column("Board", style="green")
    for difficulty in Difficulty:
        table.add_column(difficulty.value.capitalize(), style="yellow")

    for name in list_games():
        game = get_game(name)
        board_str = "x".join(str(d) for d in game.board_shape)
        levels = []
        for difficulty in Difficulty:
            config = get_difficulty_config(difficulty, name)
            levels.append(
                f"depth {config.depth}, {config.random_move_probability:.0%} random"
            )
        table.add_row(name, board_str, *levels)

    console.print(table)


@app.command()
def play(
    game_name: str = typer.Argument(..., help="Game to play ('connect4' or 'tictactoe')"),
    difficulty: Optional[str] = typer.Option(None, "--difficulty", "-d", help="easy/medium/hard"),
    human_first: bool = typer.Option(True, "--first/--second", help="Human plays first"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    show_tree: bool = typer.Option(False, "--show-tree", help="Print the tree after each AI move"),
    tree_depth: Optional[int] = typer.Option(None, "--tree-depth", help="Tree levels to print"),
) -> None:
    """Play against the minimax AI."""
    from .games import Player
    from .play import MoveWorker, get_difficulty_config, get_hint
    from .search import DecisionTreeRecorder
    from .utils import Config, get_default_config, set_seed

    game = _load_game(game_name)

    try:
        config = Config.load(str(config_path)) if config_path else get_default_config()
    except (OSError, ValueError) as e:
        logger.log_error(f"Could not load config: {e}")
        raise typer.Exit(1)

    overrides = {}
    if difficulty is not None:
        overrides["difficulty"] = _check_difficulty(difficulty)
    if not human_first:
        overrides["human_first"] = False
    if seed is not None:
        overrides["seed"] = seed
    if show_tree:
        overrides["show_tree"] = True
    if tree_depth is not None:
        overrides["tree_depth"] = tree_depth

    # replace() runs Config validation again on the merged settings
    try:
        config = replace(config, **overrides)
    except ValueError as e:
        logger.log_error(f"Invalid option: {e}")
        raise typer.Exit(1)

    if config.seed is not None:
        set_seed(config.seed)

    diff_config = get_difficulty_config(config.difficulty, game.name)
    logger.log_info(f"Difficulty: {diff_config.name} (depth {diff_config.depth})")
    if config_path:
        print_config(config)

    recorder = DecisionTreeRecorder()
    board = game.initial_state()
    human_turn = config.human_first
    hints = True if config.enable_all_hints else None

    console.print(f"\n[bold]Playing {game.name}[/]")
    console.print("You are X, AI is O. Enter 'h' for a hint, 't' for the last tree, 'q' to quit.\n")

    with MoveWorker() as worker:
        while True:
            print_board(game.render(board), title=game.name)

            done, winner = game.is_terminal(board)
            if done:
                if winner == Player.HUMAN:
                    logger.log_success("You win!")
                elif winner == Player.AI:
                    logger.log_error("AI wins!")
                else:
                    logger.log_warning("Draw!")
                if winner != Player.EMPTY:
                    line = game.winning_line(board, winner)
                    console.print("Winning line: " + " ".join(str(cell) for cell in line))
                break

            if human_turn:
                legal = game.legal_actions(board)
                while True:
                    text = typer.prompt(f"Your move {legal}").strip().lower()
                    if text == "q":
                        raise typer.Exit(0)
                    if text == "h":
                        move = get_hint(game, board, depth=config.hint_depth, enabled=hints)
                        if game.is_no_move(move):
                            logger.log_warning("No hint available")
                        else:
                            logger.log_info(f"Hint: {game.format_move(move)}")
                        continue
                    if text == "t":
                        print_tree(recorder.get_tree(), game, config.tree_depth)
                        continue
                    move = _parse_move(game, text)
                    if move is not None and move in legal:
                        break
                    logger.log_error("Invalid move")

                board = game.apply_action(board, move, Player.HUMAN)
            else:
                with console.status("AI thinking..."):
                    decision = worker.submit(game, board, config.difficulty).result()
                    if config.think_delay:
                        time.sleep(config.think_delay)

                if decision.tree is not None:
                    recorder.capture(decision.tree)
                board = game.apply_action(board, decision.move, Player.AI)

                how = "random move" if decision.randomized else f"score {decision.score}"
                console.print(f"AI played: {game.format_move(decision.move)} ({how})\n")
                if config.show_tree and not decision.randomized:
                    print_tree(recorder.get_tree(), game, config.tree_depth)

            human_turn = not human_turn


@app.command()
def analyze(
    game_name: str = typer.Argument(..., help="Game of the position"),
    board_text: str = typer.Argument(..., help=BOARD_HELP),
    difficulty: str = typer.Option("hard", "--difficulty", "-d", help="easy/medium/hard"),
    randomize: bool = typer.Option(False, "--random/--no-random", help="Apply the difficulty's random moves"),
    tree_depth: int = typer.Option(2, "--tree-depth", min=0, help="Tree levels to print"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
) -> None:
    """Show the AI's move and decision tree for a position."""
    from .play import choose_move
    from .utils import set_seed

    game = _load_game(game_name)
    board = _parse_board_arg(game, board_text)
    difficulty = _check_difficulty(difficulty)

    if seed is not None:
        set_seed(seed)

    print_board(game.render(board), title=game.name)

    start = time.time()
    decision = choose_move(game, board, difficulty, randomize=randomize)
    elapsed = time.time() - start

    if game.is_no_move(decision.move):
        logger.log_warning("No legal moves")
        return

    if decision.randomized:
        console.print(f"AI move: {game.format_move(decision.move)} (random)")
        return

    console.print(f"AI move: {game.format_move(decision.move)}")
    console.print(f"Score: {decision.score}  Depth: {decision.depth}  Time: {elapsed:.2f}s")
    print_tree(decision.tree, game, tree_depth)


@app.command()
def hint(
    game_name: str = typer.Argument(..., help="Game of the position"),
    board_text: str = typer.Argument(..., help=BOARD_HELP),
    depth: int = typer.Option(3, "--depth", min=1, help="Search depth"),
    force: bool = typer.Option(False, "--force", help="Search even where hints are disabled"),
) -> None:
    """Suggest a move for the human (X) side."""
    from .play import get_hint

    game = _load_game(game_name)
    board = _parse_board_arg(game, board_text)

    move = get_hint(game, board, depth=depth, enabled=True if force else None)
    if game.is_no_move(move):
        logger.log_warning("No hint available")
        return
    console.print(f"Hint: {game.format_move(move)}")


if __name__ == "__main__":
    app()
