"""Structural invariant checks for game snapshots."""

from __future__ import annotations

from collections import Counter
from typing import List

from crazyeights.cards import full_deck
from crazyeights.state import GameState, GameStatus, Side

_FULL_DECK = frozenset(full_deck())


def validate_state(state: GameState) -> List[str]:
    """Check a running game's snapshot.

    Returns:
        Descriptions of every violated invariant (empty when valid)
    """
    problems: list[str] = []

    zones = state.deck + state.discard_pile + state.player_hand + state.ai_hand
    duplicates = [card for card, n in Counter(zones).items() if n > 1]
    if duplicates:
        problems.append(f"Duplicate cards: {', '.join(str(c) for c in duplicates)}")
    missing = _FULL_DECK - set(zones)
    if missing:
        problems.append(f"Missing {len(missing)} cards")
    if len(zones) != len(_FULL_DECK):
        problems.append(f"Expected {len(_FULL_DECK)} cards in play, found {len(zones)}")

    if not state.discard_pile:
        problems.append("Discard pile is empty")

    if state.status == GameStatus.DEALING:
        problems.append("Running game still marked as dealing")
    if (state.status == GameStatus.GAME_OVER) != (state.winner is not None):
        problems.append(f"Status {state.status.value} inconsistent with winner {state.winner}")

    empty = [side for side in Side if not state.hand(side)]
    if state.status == GameStatus.GAME_OVER:
        if len(empty) != 1 or state.winner not in empty:
            problems.append(f"Winner {state.winner} does not match the empty hands")
    elif empty and not (state.status == GameStatus.SELECTING_SUIT and empty == [Side.PLAYER]):
        # Only the player's final 8 may leave a hand empty before the game ends
        problems.append(f"Empty hand during {state.status.value} without a winner")

    if state.status == GameStatus.SELECTING_SUIT:
        if state.pending_wild_card is None:
            problems.append("Selecting suit without a pending wild card")
        elif state.discard_pile and state.discard_pile[0] != state.pending_wild_card:
            problems.append("Pending wild card is not on top of the discard pile")
    elif state.pending_wild_card is not None:
        problems.append(f"Pending wild card held during {state.status.value}")

    return problems
