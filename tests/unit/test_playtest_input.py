"""Tests for human input handling."""

from unittest.mock import patch

import pytest
from crazyeights.cards import Suit
from crazyeights.playtest.input import HumanPlayer


class TestGetCommand:
    """Tests for HumanPlayer.get_command."""

    def test_card_number_is_one_indexed(self):
        with patch("builtins.input", return_value="2"):
            result = HumanPlayer().get_command(hand_size=3)

        assert result.card_index == 1
        assert not result.draw and not result.quit

    @pytest.mark.parametrize("raw", ["d", "draw", " D "])
    def test_draw(self, raw):
        with patch("builtins.input", return_value=raw):
            result = HumanPlayer().get_command(hand_size=3)

        assert result.draw

    @pytest.mark.parametrize("raw", ["q", "quit", "exit"])
    def test_quit(self, raw):
        with patch("builtins.input", return_value=raw):
            assert HumanPlayer().get_command(hand_size=3).quit

    def test_eof_quits(self):
        with patch("builtins.input", side_effect=EOFError):
            assert HumanPlayer().get_command(hand_size=3).quit

    def test_out_of_range(self):
        with patch("builtins.input", return_value="4"):
            result = HumanPlayer().get_command(hand_size=3)

        assert result.error == "Invalid choice 4. Enter 1-3."
        assert result.card_index is None

    def test_garbage(self):
        with patch("builtins.input", return_value="xyz"):
            result = HumanPlayer().get_command(hand_size=3)

        assert "Invalid input 'xyz'" in result.error


class TestGetSuit:
    """Tests for HumanPlayer.get_suit."""

    @pytest.mark.parametrize("raw,expected", [
        ("1", Suit.HEARTS),
        ("diamonds", Suit.DIAMONDS),
        ("c", Suit.CLUBS),
        ("Spades", Suit.SPADES),
    ])
    def test_valid_choices(self, raw, expected):
        with patch("builtins.input", return_value=raw):
            assert HumanPlayer().get_suit().suit == expected

    def test_invalid_choice(self):
        with patch("builtins.input", return_value="5"):
            result = HumanPlayer().get_suit()

        assert result.suit is None
        assert "Invalid suit" in result.error

    def test_interrupt_quits(self):
        with patch("builtins.input", side_effect=KeyboardInterrupt):
            assert HumanPlayer().get_suit().quit


class TestGetYesNo:
    """Tests for HumanPlayer.get_yes_no."""

    @pytest.mark.parametrize("raw,expected", [("y", True), ("no", False), ("maybe", None)])
    def test_answers(self, raw, expected):
        with patch("builtins.input", return_value=raw):
            assert HumanPlayer().get_yes_no("? ") is expected
