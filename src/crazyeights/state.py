"""Immutable game state representation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from crazyeights.cards import Card, Rank, Suit


class GameStatus(Enum):
    """Game phases."""

    DEALING = "dealing"
    PLAYER_TURN = "player_turn"
    AI_TURN = "ai_turn"
    SELECTING_SUIT = "selecting_suit"
    GAME_OVER = "game_over"


class Side(Enum):
    """The two seats at the table."""

    PLAYER = "player"
    AI = "ai"


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of a Crazy Eights game.

    All zones are tuples so a snapshot can never be mutated through a
    shared reference. ``deck[-1]`` is the top of the deck and
    ``discard_pile[0]`` is the face-up card.
    """

    deck: tuple[Card, ...]
    discard_pile: tuple[Card, ...]
    player_hand: tuple[Card, ...]
    ai_hand: tuple[Card, ...]
    current_suit: Suit
    current_rank: Rank
    status: GameStatus
    winner: Optional[Side] = None
    last_action: str = ""
    # Wild card waiting for the player's suit choice
    pending_wild_card: Optional[Card] = None

    @property
    def top_card(self) -> Card:
        return self.discard_pile[0]

    def hand(self, side: Side) -> tuple[Card, ...]:
        """Get the hand held by a side."""
        return self.player_hand if side == Side.PLAYER else self.ai_hand

    def copy_with(self, **changes) -> "GameState":  # type: ignore
        """Create a new state with specified changes."""
        return replace(self, **changes)
