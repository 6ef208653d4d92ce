"""Card vocabulary and deck construction."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Rank(Enum):
    """Playing card ranks."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"


class Suit(Enum):
    """Playing card suits."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"


RANKS: tuple[Rank, ...] = tuple(Rank)
SUITS: tuple[Suit, ...] = tuple(Suit)

# Rank that acts as the wild card
WILD_RANK = Rank.EIGHT

DECK_SIZE = len(RANKS) * len(SUITS)


@dataclass(frozen=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    @property
    def index(self) -> int:
        """Position of this card in an unshuffled deck (0-51)."""
        return SUITS.index(self.suit) * len(RANKS) + RANKS.index(self.rank)

    @property
    def is_wild(self) -> bool:
        return self.rank == WILD_RANK

    def __str__(self) -> str:
        return f"{self.rank.value} of {self.suit.value}"


def card_from_index(index: int) -> Card:
    """Rebuild a card from its deck index."""
    if index < 0 or index >= DECK_SIZE:
        raise ValueError(f"Card index must be 0-{DECK_SIZE - 1}, got {index}")
    suit_pos, rank_pos = divmod(index, len(RANKS))
    return Card(rank=RANKS[rank_pos], suit=SUITS[suit_pos])


def full_deck() -> tuple[Card, ...]:
    """All 52 cards in index order."""
    return tuple(Card(rank=rank, suit=suit) for suit in SUITS for rank in RANKS)


def create_deck(rng: Optional[random.Random] = None) -> list[Card]:
    """Create a freshly shuffled 52-card deck.

    Args:
        rng: Random source; a seeded ``random.Random`` makes the order
            reproducible. Defaults to the module-level generator.

    Returns:
        List of cards; the last element is the top of the deck.
    """
    deck = list(full_deck())
    (rng or random).shuffle(deck)
    return deck
