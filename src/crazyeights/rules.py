"""Move legality and win detection.

Every function here is pure. The same predicate decides human plays,
computer plays and which cards a driver highlights.
"""

from __future__ import annotations

from typing import Iterable, Optional

from crazyeights.cards import Card, Rank, Suit, WILD_RANK
from crazyeights.state import GameState, Side


def is_valid_move(card: Card, current_suit: Suit, current_rank: Rank) -> bool:
    """Check whether a card may be played against the current target."""
    return (
        card.rank == WILD_RANK
        or card.suit == current_suit
        or card.rank == current_rank
    )


def playable_cards(
    hand: Iterable[Card], current_suit: Suit, current_rank: Rank
) -> list[Card]:
    """Legal cards from a hand, in hand order."""
    return [c for c in hand if is_valid_move(c, current_suit, current_rank)]


def check_winner(state: GameState) -> Optional[Side]:
    """Return the side with an empty hand, checking the player first."""
    if not state.player_hand:
        return Side.PLAYER
    if not state.ai_hand:
        return Side.AI
    return None
