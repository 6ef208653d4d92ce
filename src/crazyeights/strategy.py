"""Computer opponent move selection."""

from __future__ import annotations

from typing import Optional, Sequence

from crazyeights.cards import Card, Rank, Suit
from crazyeights.rules import playable_cards

# Suit named when the computer plays its last card as a wild
DEFAULT_SUIT = Suit.HEARTS


def select_card(
    hand: Sequence[Card], current_suit: Suit, current_rank: Rank
) -> Optional[Card]:
    """Pick the card the computer plays, or None if it must draw.

    Any legal non-8 wins over an 8; among those the first in hand order
    is played. An 8 is only used when nothing else is legal.
    """
    playable = playable_cards(hand, current_suit, current_rank)
    if not playable:
        return None
    for card in playable:
        if not card.is_wild:
            return card
    return playable[0]


def choose_wild_suit(hand: Sequence[Card]) -> Suit:
    """Most common suit in the hand.

    Ties go to the suit seen first when counting in hand order.
    """
    counts: dict[Suit, int] = {}
    for card in hand:
        counts[card.suit] = counts.get(card.suit, 0) + 1
    if not counts:
        return DEFAULT_SUIT
    # max() keeps the first of equal keys, i.e. first-encountered order
    return max(counts, key=lambda suit: counts[suit])
