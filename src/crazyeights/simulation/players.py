"""Scripted players for the human seat."""

import random
from abc import ABC, abstractmethod
from typing import Optional

from crazyeights.cards import Card, Suit, SUITS
from crazyeights.rules import playable_cards
from crazyeights.state import GameState
from crazyeights.strategy import choose_wild_suit, select_card


class SeatPlayer(ABC):
    """Base class for players that take the human seat."""

    @abstractmethod
    def choose_card(self, state: GameState) -> Optional[Card]:
        """Choose a card to play, or None to draw."""
        pass

    @abstractmethod
    def choose_suit(self, state: GameState) -> Suit:
        """Choose the suit after playing an 8."""
        pass


class RandomPlayer(SeatPlayer):
    """Plays a random legal card, drawing only when none is legal."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def choose_card(self, state: GameState) -> Optional[Card]:
        playable = playable_cards(state.player_hand, state.current_suit, state.current_rank)
        if not playable:
            return None
        return self.rng.choice(playable)

    def choose_suit(self, state: GameState) -> Suit:
        return self.rng.choice(SUITS)


class GreedyPlayer(SeatPlayer):
    """Mirrors the computer opponent's policy."""

    def choose_card(self, state: GameState) -> Optional[Card]:
        return select_card(state.player_hand, state.current_suit, state.current_rank)

    def choose_suit(self, state: GameState) -> Suit:
        return choose_wild_suit(state.player_hand)
