"""Tests for the terminal front end."""

import io

from dropfour.interfaces.cli import SimpleCLI


def run_cli(moves, argv=None):
    stdin = io.StringIO("".join(f"{m}\n" for m in moves))
    stdout = io.StringIO()
    cli = SimpleCLI(stdin=stdin, stdout=stdout)
    code = cli.run(["play"] + (argv or []))
    return code, stdout.getvalue(), cli


class TestPlay:
    """Test a full hot-seat session."""

    def test_vertical_win_announced(self):
        code, output, cli = run_cli([0, 1, 0, 1, 0, 1, 0])
        assert code == 0
        assert output.rstrip().endswith("Player 1 won!")
        assert cli.game.is_complete

    def test_full_column_reprompts_same_player(self):
        moves = [0] * 6 + [0, 1] + [1, 2, 1, 2, 1]
        code, output, cli = run_cli(moves, ["--height", "6"])
        assert "Column 0 is full" in output
        assert cli.game.cell_at(5, 1) is not None

    def test_bad_input(self):
        code, output, _ = run_cli(["x", "9", "q"])
        assert code == 0
        assert "Invalid input" in output
        assert "Column must be between 0 and 6." in output
        assert "Quitting game." in output

    def test_restart_builds_new_game(self):
        code, output, cli = run_cli([3, "r", "q"])
        assert "Game restarted." in output
        assert cli.game.moves_made == 0

    def test_end_of_input_quits(self):
        code, output, _ = run_cli([2])
        assert code == 0
        assert "Quitting game." in output

    def test_colors_in_prompt(self):
        _, output, _ = run_cli(["q"], ["--p1-color", "green"])
        assert "Player 1 (green, X) move:" in output

    def test_invalid_dimensions(self):
        code, output, cli = run_cli([], ["--width", "0"])
        assert code == 1
        assert "Cannot start game" in output
        assert cli.game is None


def test_no_command():
    stdout = io.StringIO()
    assert SimpleCLI(stdout=stdout).run([]) == 1
    assert "Please specify a command" in stdout.getvalue()
