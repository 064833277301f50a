"""Tests for the command-line interface and tree printing."""

import pytest
from typer.testing import CliRunner

from alphabeta.cli import app
from alphabeta.games import get_game
from alphabeta.search import minimax
from alphabeta.utils import build_tree


runner = CliRunner()

HINT_BOARD = "0000000/0000000/0000000/0000000/0220000/2111000"


class TestListGames:
    def test_lists_both_games(self):
        result = runner.invoke(app, ["list-games"])
        assert result.exit_code == 0
        assert "connect4" in result.output
        assert "tictactoe" in result.output


class TestAnalyze:
    def test_tictactoe_block(self):
        result = runner.invoke(app, ["analyze", "tictactoe", "110/220/000"])
        assert result.exit_code == 0
        assert "AI move: (0, 2)" in result.output
        assert "nodes" in result.output

    def test_connect4(self):
        result = runner.invoke(app, ["analyze", "connect4", HINT_BOARD, "--difficulty", "easy"])
        assert result.exit_code == 0
        assert "AI move: 4" in result.output

    def test_full_board(self):
        result = runner.invoke(app, ["analyze", "tictactoe", "121/122/211"])
        assert result.exit_code == 0
        assert "No legal moves" in result.output

    def test_unknown_game(self):
        result = runner.invoke(app, ["analyze", "chess", "000/000/000"])
        assert result.exit_code == 1

    def test_bad_board(self):
        result = runner.invoke(app, ["analyze", "tictactoe", "11/22/00"])
        assert result.exit_code == 1

    def test_floating_connect4_piece(self):
        result = runner.invoke(app, ["analyze", "connect4", "0000000/0000000/0000000/0000000/0001000/0000000"])
        assert result.exit_code == 1
        assert "empty cell below" in result.output

    def test_bad_difficulty(self):
        result = runner.invoke(app, ["analyze", "tictactoe", "110/220/000", "-d", "impossible"])
        assert result.exit_code == 1


class TestHint:
    def test_connect4(self):
        result = runner.invoke(app, ["hint", "connect4", HINT_BOARD])
        assert result.exit_code == 0
        assert "Hint: 4" in result.output

    def test_tictactoe_disabled(self):
        result = runner.invoke(app, ["hint", "tictactoe", "110/220/000"])
        assert result.exit_code == 0
        assert "No hint available" in result.output

    def test_tictactoe_forced(self):
        result = runner.invoke(app, ["hint", "tictactoe", "110/220/000", "--force"])
        assert result.exit_code == 0
        assert "Hint: (0, 2)" in result.output


class TestPlay:
    def test_hint_then_quit(self):
        result = runner.invoke(app, ["play", "tictactoe", "--seed", "1"], input="h\nq\n")
        assert result.exit_code == 0
        assert "No hint available" in result.output

    def test_invalid_move_then_quit(self):
        result = runner.invoke(app, ["play", "connect4"], input="9\nq\n")
        assert result.exit_code == 0
        assert "Invalid move" in result.output

    def test_ai_moves_first_and_tree(self):
        result = runner.invoke(
            app,
            ["play", "connect4", "--second", "-d", "hard", "--show-tree", "--tree-depth", "1"],
            input="t\nq\n",
        )
        assert result.exit_code == 0
        assert "AI played:" in result.output
        assert "MAX root" in result.output

    def test_bad_config(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("nonsense: 1\n")
        result = runner.invoke(app, ["play", "connect4", "--config", str(path)])
        assert result.exit_code == 1

    @pytest.mark.parametrize("text", ["difficulty: null\n", "hint_depth: deep\n", "- hard\n"])
    def test_malformed_config_exits_cleanly(self, tmp_path, text):
        path = tmp_path / "bad.yaml"
        path.write_text(text)
        result = runner.invoke(app, ["play", "connect4", "--config", str(path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Could not load config" in result.output

    def test_negative_tree_depth(self):
        result = runner.invoke(app, ["play", "connect4", "--tree-depth", "-1"], input="q\n")
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "tree_depth" in result.output


class TestBuildTree:
    def test_depth_limit(self):
        game = get_game("connect4")
        _, _, root = minimax(game, game.initial_state(), 2, record_tree=True)

        tree = build_tree(root, game, max_depth=1)
        assert len(tree.children) == len(root.children)
        for branch in tree.children:
            # Deeper levels collapse into one summary line
            assert len(branch.children) == 1

    def test_pruned_label(self):
        game = get_game("tictactoe")
        _, _, root = minimax(game, game.parse_board("110/220/000"), 9, record_tree=True)
        tree = build_tree(root, game, max_depth=9)

        labels = []
        stack = [tree]
        while stack:
            branch = stack.pop()
            labels.append(str(branch.label))
            stack.extend(branch.children)
        assert any("pruned" in label for label in labels)
