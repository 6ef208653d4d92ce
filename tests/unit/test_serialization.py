"""Tests for snapshot serialization."""

import json
import random

from crazyeights.cards import Card, Rank, Suit
from crazyeights.engine import initialize, play
from crazyeights.serialization import card_to_dict, state_to_dict, state_to_json
from crazyeights.state import GameState, GameStatus


def make_card(rank: str, suit: str) -> Card:
    """Helper to create cards."""
    return Card(rank=Rank(rank), suit=Suit(suit))


def make_state(status: GameStatus = GameStatus.PLAYER_TURN) -> GameState:
    return GameState(
        deck=(make_card("2", "spades"), make_card("3", "spades")),
        discard_pile=(make_card("K", "hearts"),),
        player_hand=(make_card("5", "hearts"), make_card("2", "clubs"), make_card("8", "clubs")),
        ai_hand=(make_card("4", "diamonds"),),
        current_suit=Suit.HEARTS,
        current_rank=Rank.KING,
        status=status,
        last_action="Game started! Your turn.",
    )


def test_card_to_dict():
    card = make_card("10", "spades")

    assert card_to_dict(card) == {"index": card.index, "rank": "10", "suit": "spades"}


def test_state_to_dict_hides_computer_hand():
    data = state_to_dict(make_state())

    assert data["status"] == "player_turn"
    assert data["winner"] is None
    assert data["current_suit"] == "hearts"
    assert data["current_rank"] == "K"
    assert data["top_card"]["rank"] == "K"
    assert data["deck_size"] == 2
    assert data["ai_hand_size"] == 1
    assert "ai_hand" not in data
    assert len(data["player_hand"]) == 3
    assert data["last_action"] == "Game started! Your turn."


def test_playable_lists_legal_cards_on_player_turn():
    data = state_to_dict(make_state())

    assert data["playable"] == [make_card("5", "hearts").index, make_card("8", "clubs").index]


def test_playable_empty_outside_player_turn():
    data = state_to_dict(make_state(GameStatus.AI_TURN))

    assert data["playable"] == []


def test_reveal_computer_hand():
    data = state_to_dict(make_state(), reveal_ai_hand=True)

    assert data["ai_hand"] == [card_to_dict(make_card("4", "diamonds"))]


def test_pending_wild_card_serialized():
    state = play(make_state(), make_card("8", "clubs"))

    data = state_to_dict(state)

    assert data["status"] == "selecting_suit"
    assert data["pending_wild_card"] == card_to_dict(make_card("8", "clubs"))


def test_state_to_json_round_trips_through_json():
    state = initialize(random.Random(5))

    data = json.loads(state_to_json(state))

    assert data == state_to_dict(state)
