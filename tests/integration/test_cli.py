"""Integration tests for the command-line entry points."""

from unittest.mock import patch

from click.testing import CliRunner

from crazyeights.cli.playtest import main as play_main
from crazyeights.cli.simulate import main as simulate_main
from crazyeights.errors import SetupError


def test_simulate_reports_rates():
    runner = CliRunner()

    result = runner.invoke(simulate_main, ["-n", "5", "--player", "random", "--seed", "3"])

    assert result.exit_code == 0
    assert "Games: 5 (random vs computer)" in result.output
    assert "Computer wins:" in result.output


def test_playtest_quit():
    runner = CliRunner()

    result = runner.invoke(play_main, ["--seed", "1", "--ai-delay", "0", "--no-rules"], input="q\n")

    assert result.exit_code == 0
    assert "Your hand:" in result.output
    assert "Thanks for playing!" in result.output


def test_playtest_shows_rules_and_seed():
    runner = CliRunner()

    result = runner.invoke(play_main, ["--seed", "77", "--ai-delay", "0"], input="q\n")

    assert "=== Crazy Eights ===" in result.output
    assert "Seed: 77" in result.output


def test_playtest_setup_error_exits_nonzero():
    runner = CliRunner()

    with patch(
        "crazyeights.playtest.session.initialize",
        side_effect=SetupError("No non-8 card available to start the discard pile"),
    ):
        result = runner.invoke(play_main, ["--ai-delay", "0"])

    assert result.exit_code == 1
    assert "Could not start the game" in result.output
