"""Crazy Eights game engine: human vs. computer."""

from crazyeights.cards import (
    Card,
    Rank,
    Suit,
    RANKS,
    SUITS,
    WILD_RANK,
    card_from_index,
    create_deck,
    full_deck,
)
from crazyeights.errors import CrazyEightsError, SetupError
from crazyeights.state import GameState, GameStatus, Side
from crazyeights.rules import check_winner, is_valid_move, playable_cards
from crazyeights.engine import (
    HAND_SIZE,
    initialize,
    draw,
    play,
    choose_suit,
    resolve_computer_turn,
)

__all__ = [
    # cards
    "Card",
    "Rank",
    "Suit",
    "RANKS",
    "SUITS",
    "WILD_RANK",
    "card_from_index",
    "create_deck",
    "full_deck",
    # errors
    "CrazyEightsError",
    "SetupError",
    # state
    "GameState",
    "GameStatus",
    "Side",
    # rules
    "check_winner",
    "is_valid_move",
    "playable_cards",
    # engine
    "HAND_SIZE",
    "initialize",
    "draw",
    "play",
    "choose_suit",
    "resolve_computer_turn",
]
