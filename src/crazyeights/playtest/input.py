"""Human input handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from crazyeights.cards import Suit, SUITS


@dataclass
class InputResult:
    """Result of human input."""

    card_index: Optional[int] = None  # 0-based position in hand
    suit: Optional[Suit] = None
    draw: bool = False
    quit: bool = False
    error: Optional[str] = None


class HumanPlayer:
    """Handles human player input."""

    def get_command(self, hand_size: int, prompt: str = "> ") -> InputResult:
        """Get a turn command from human input.

        Args:
            hand_size: Number of cards in the player's hand
            prompt: Input prompt string

        Returns:
            InputResult with a card index, draw flag, quit flag, or error
        """
        try:
            raw = input(prompt).strip().lower()
        except (EOFError, KeyboardInterrupt):
            return InputResult(quit=True)

        if raw in ("q", "quit", "exit"):
            return InputResult(quit=True)

        if raw in ("d", "draw"):
            return InputResult(draw=True)

        try:
            choice = int(raw)
        except ValueError:
            return InputResult(error=f"Invalid input '{raw}'. Enter a card number, 'd' or 'q'.")

        # Validate range (1-indexed for human)
        if choice < 1 or choice > hand_size:
            return InputResult(error=f"Invalid choice {choice}. Enter 1-{hand_size}.")

        return InputResult(card_index=choice - 1)

    def get_suit(self, prompt: str = "> ") -> InputResult:
        """Get a suit choice by number, name or initial.

        Returns:
            InputResult with a suit, quit flag, or error
        """
        try:
            raw = input(prompt).strip().lower()
        except (EOFError, KeyboardInterrupt):
            return InputResult(quit=True)

        if raw in ("q", "quit", "exit"):
            return InputResult(quit=True)

        for i, suit in enumerate(SUITS):
            if raw in (str(i + 1), suit.value, suit.value[0]):
                return InputResult(suit=suit)
        return InputResult(error=f"Invalid suit '{raw}'. Enter 1-{len(SUITS)} or a suit name.")

    def get_yes_no(self, prompt: str) -> Optional[bool]:
        """Get yes/no response.

        Returns:
            True for yes, False for no, None for quit/cancel
        """
        try:
            raw = input(prompt).strip().lower()
        except (EOFError, KeyboardInterrupt):
            return None

        if raw in ("y", "yes"):
            return True
        if raw in ("n", "no"):
            return False
        return None
