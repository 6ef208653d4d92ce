"""JSON serialization for game snapshots."""

import json
from typing import Any, Dict, Optional

from crazyeights.cards import Card
from crazyeights.rules import is_valid_move
from crazyeights.state import GameState, GameStatus


def card_to_dict(card: Card) -> Dict[str, Any]:
    """Convert Card to JSON-serializable dict."""
    return {
        "index": card.index,
        "rank": card.rank.value,
        "suit": card.suit.value,
    }


def _optional_card(card: Optional[Card]) -> Optional[Dict[str, Any]]:
    return card_to_dict(card) if card is not None else None


def state_to_dict(state: GameState, reveal_ai_hand: bool = False) -> Dict[str, Any]:
    """Convert GameState to the view a player is allowed to see.

    The deck is reduced to its size and the computer's hand to a count
    unless ``reveal_ai_hand`` is set. ``playable`` lists the indexes of
    player cards that may be played right now.
    """
    if state.status == GameStatus.PLAYER_TURN:
        playable = [
            c.index for c in state.player_hand
            if is_valid_move(c, state.current_suit, state.current_rank)
        ]
    else:
        playable = []

    data: Dict[str, Any] = {
        "status": state.status.value,
        "winner": state.winner.value if state.winner else None,
        "current_suit": state.current_suit.value,
        "current_rank": state.current_rank.value,
        "top_card": _optional_card(state.discard_pile[0] if state.discard_pile else None),
        "discard_size": len(state.discard_pile),
        "deck_size": len(state.deck),
        "player_hand": [card_to_dict(c) for c in state.player_hand],
        "ai_hand_size": len(state.ai_hand),
        "playable": playable,
        "pending_wild_card": _optional_card(state.pending_wild_card),
        "last_action": state.last_action,
    }
    if reveal_ai_hand:
        data["ai_hand"] = [card_to_dict(c) for c in state.ai_hand]
    return data


def state_to_json(state: GameState, reveal_ai_hand: bool = False, indent: int = 2) -> str:
    """Serialize GameState view to JSON string."""
    return json.dumps(state_to_dict(state, reveal_ai_hand), indent=indent)
