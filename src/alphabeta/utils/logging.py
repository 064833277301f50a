"""
Logging utilities with rich formatting.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Optional, TYPE_CHECKING
import math

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

if TYPE_CHECKING:
    from ..games.base import Game
    from ..search.node import SearchNode


console = Console()


class Logger:
    """
    Console logger with rich styling.

    Args:
        verbose: Whether to print to console
    """

    def __init__(self, verbose: bool = True, out: Optional[Console] = None):
        self.verbose = verbose
        self.console = out if out is not None else console

    def log_message(self, message: str, style: str = "white") -> None:
        """Log a message."""
        if self.verbose:
            self.console.print(f"[{style}]{message}[/]")

    def log_info(self, message: str) -> None:
        """Log info message."""
        self.log_message(message, "blue")

    def log_success(self, message: str) -> None:
        """Log success message."""
        self.log_message(message, "green")

    def log_warning(self, message: str) -> None:
        """Log warning message."""
        self.log_message(message, "yellow")

    def log_error(self, message: str) -> None:
        """Log error message."""
        self.log_message(message, "red")


def print_config(config: Any) -> None:
    """Print configuration in a nice format."""
    table = Table(title="Configuration", show_header=True)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="white")

    for k, v in asdict(config).items():
        table.add_row(k, str(v))

    console.print(table)


def print_board(board_str: str, title: str = "Board") -> None:
    """Print a game board in a panel."""
    console.print(Panel(board_str, title=title, border_style="blue"))


def _format_score(score: Optional[float]) -> str:
    if score is None:
        return "?"
    if math.isinf(score):
        return "∞" if score > 0 else "-∞"
    return f"{score:.0f}"


def _score_style(score: Optional[float]) -> str:
    if score is None:
        return "dim"
    if score > 100:
        return "green"
    if score < -100:
        return "red"
    return "white"


def _node_label(node: SearchNode, game: Game) -> str:
    kind = "[yellow]MAX[/]" if node.is_maximizing else "[red]MIN[/]"
    if node.parent_move is None:
        head = f"{kind} root"
    else:
        head = f"{kind} {game.format_move(node.parent_move)}"

    if node.pruned:
        return f"[dim strike]{head} pruned[/]"

    style = _score_style(node.score)
    label = f"{head}  [{style}]{_format_score(node.score)}[/]"
    if node.move is not None and not game.is_no_move(node.move):
        label += f"  best={game.format_move(node.move)}"
    if node.alpha is not None or node.beta is not None:
        label += f"  [dim]α={_format_score(node.alpha)} β={_format_score(node.beta)}[/]"
    return label


def build_tree(node: SearchNode, game: Game, max_depth: int = 2) -> Tree:
    """Convert a SearchNode tree into a rich Tree, max_depth levels deep."""
    root = Tree(_node_label(node, game))

    def add_children(branch: Tree, parent: SearchNode, depth: int) -> None:
        if depth >= max_depth:
            if parent.children:
                branch.add(f"[dim]… {parent.size - 1} more nodes[/]")
            return
        for child in parent.children:
            add_children(branch.add(_node_label(child, game)), child, depth + 1)

    add_children(root, node, 0)
    return root


def print_tree(node: Optional[SearchNode], game: Game, max_depth: int = 2) -> None:
    """Print the decision tree of the last search."""
    if node is None:
        console.print("[yellow]No decision tree recorded yet[/]")
        return
    console.print(build_tree(node, game, max_depth))
    console.print(
        f"[dim]{node.size} nodes, height {node.height}, {node.num_pruned} pruned[/]"
    )
