"""Automated games against the computer opponent."""

from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional

from crazyeights.engine import choose_suit, draw, initialize, play, resolve_computer_turn
from crazyeights.simulation.players import SeatPlayer
from crazyeights.state import GameState, GameStatus, Side

logger = logging.getLogger(__name__)

DEFAULT_MAX_TURNS = 500


@dataclass(frozen=True)
class GameResult:
    """Result of a simulated game."""

    winner: Optional[Side]  # None when the game stalled
    turn_count: int
    history: tuple[GameState, ...]  # State after each operation
    seed: int


def step(state: GameState, player: SeatPlayer) -> GameState:
    """Apply the next operation for whichever side is to act."""
    if state.status == GameStatus.PLAYER_TURN:
        card = player.choose_card(state)
        return draw(state) if card is None else play(state, card)
    if state.status == GameStatus.SELECTING_SUIT:
        return choose_suit(state, player.choose_suit(state))
    if state.status == GameStatus.AI_TURN:
        return resolve_computer_turn(state)
    return state


def simulate_game(
    player: SeatPlayer,
    seed: int,
    max_turns: int = DEFAULT_MAX_TURNS,
) -> GameResult:
    """Play one game to completion or until ``max_turns`` operations."""
    state = initialize(random.Random(seed))
    history: List[GameState] = [state]

    while state.status != GameStatus.GAME_OVER and len(history) <= max_turns:
        state = step(state, player)
        history.append(state)

    if state.winner is None:
        logger.debug(f"Seed {seed}: no winner after {max_turns} turns")

    return GameResult(
        winner=state.winner,
        turn_count=len(history) - 1,
        history=tuple(history),
        seed=seed,
    )


def summarize(results: List[GameResult]) -> dict[str, float]:
    """Win rates and average length over a batch of games."""
    if not results:
        return {"player": 0.0, "ai": 0.0, "stalled": 0.0, "avg_turns": 0.0}

    counts = Counter(r.winner for r in results)
    n = len(results)
    return {
        "player": counts[Side.PLAYER] / n,
        "ai": counts[Side.AI] / n,
        "stalled": counts[None] / n,
        "avg_turns": sum(r.turn_count for r in results) / n,
    }
