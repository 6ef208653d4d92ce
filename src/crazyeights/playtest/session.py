"""Playtest session management."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Optional

from crazyeights.engine import choose_suit, draw, initialize, play, resolve_computer_turn
from crazyeights.state import GameState, GameStatus, Side
from crazyeights.playtest.display import StateRenderer, CommandPresenter, format_card
from crazyeights.playtest.rules import RuleExplainer
from crazyeights.playtest.input import HumanPlayer

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Configuration for playtest session."""

    ai_delay: float = 1.5  # seconds before the computer moves
    debug: bool = False
    max_turns: int = 500
    seed: Optional[int] = None
    show_rules: bool = True

    def __post_init__(self):
        """Generate seed if not provided."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)


@dataclass
class PlaytestResult:
    """Outcome of one playtest session."""

    winner: str  # human, ai, quit, stuck
    seed: int
    turns: int
    quit_early: bool = False
    stuck_reason: Optional[str] = None


class PlaytestSession:
    """Runs one game between a human at the terminal and the computer."""

    def __init__(
        self,
        config: SessionConfig,
        sleep_fn: Callable[[float], None] = time.sleep,
    ):
        """Initialize session."""
        self.config = config
        self.seed = config.seed
        self.rng = random.Random(self.seed)
        self.sleep_fn = sleep_fn

        # Components
        self.renderer = StateRenderer()
        self.presenter = CommandPresenter()
        self.explainer = RuleExplainer()
        self.human_input = HumanPlayer()

        # Session state
        self.move_history: list[dict] = []
        self.turns = 0
        self.state: Optional[GameState] = None

    def _record_move(self, player: str, move_data: dict) -> None:
        """Record move in history."""
        self.move_history.append({
            "turn": self.turns,
            "player": player,
            "move": move_data,
        })

    def run(self, output_fn: Callable[[str], None] = print) -> PlaytestResult:
        """Run the playtest session.

        Args:
            output_fn: Function to output text (default: print)

        Returns:
            PlaytestResult with game outcome

        Raises:
            SetupError: If the game cannot be dealt
        """
        self.state = initialize(self.rng)

        if self.config.show_rules:
            output_fn(self.explainer.explain_rules())
            output_fn("")
            output_fn(f"Seed: {self.seed} (use --seed {self.seed} to replay)")

        while self.state.status != GameStatus.GAME_OVER:
            if self.turns >= self.config.max_turns:
                reason = f"no winner after {self.config.max_turns} turns"
                output_fn(f"\nGame stuck: {reason}")
                return self._result("stuck", stuck_reason=reason)

            status = self.state.status
            if status == GameStatus.PLAYER_TURN:
                if not self._human_turn(output_fn):
                    return self._result("quit", quit_early=True)
            elif status == GameStatus.SELECTING_SUIT:
                if not self._suit_selection(output_fn):
                    return self._result("quit", quit_early=True)
            elif status == GameStatus.AI_TURN:
                self._computer_turn(output_fn)
            else:
                raise RuntimeError(f"Unexpected status {status.value}")

        output_fn("")
        output_fn(self.state.last_action)
        if self.state.winner == Side.PLAYER:
            output_fn("=== You Win! ===")
            return self._result("human")
        output_fn("=== Computer Wins ===")
        return self._result("ai")

    def _human_turn(self, output_fn: Callable[[str], None]) -> bool:
        """Handle one human command. Returns False if the player quit."""
        state = self.state
        output_fn("")
        output_fn(self.renderer.render(state, self.config.debug))
        output_fn(self.presenter.present_turn(state))

        result = self.human_input.get_command(len(state.player_hand))
        if result.quit:
            return False
        if result.error:
            output_fn(result.error)
            return True

        if result.draw:
            new_state = draw(state)
            self._record_move("human", {"action": "draw"})
        else:
            card = state.player_hand[result.card_index]
            new_state = play(state, card)
            if new_state is state:
                output_fn(f"You can't play the {format_card(card)} now.")
                return True
            self._record_move("human", {"action": "play", "card": card.index})

        self._advance(new_state)
        return True

    def _suit_selection(self, output_fn: Callable[[str], None]) -> bool:
        """Ask for the wild card suit. Returns False if the player quit."""
        output_fn(self.presenter.present_suits())
        result = self.human_input.get_suit()
        if result.quit:
            return False
        if result.error:
            output_fn(result.error)
            return True

        self._record_move("human", {"action": "suit", "suit": result.suit.value})
        self._advance(choose_suit(self.state, result.suit))
        return True

    def _computer_turn(self, output_fn: Callable[[str], None]) -> None:
        """Resolve one computer turn after the pacing delay."""
        if self.config.ai_delay > 0:
            self.sleep_fn(self.config.ai_delay)
        self._advance(resolve_computer_turn(self.state))
        self._record_move("ai", {"action": self.state.last_action})
        if self.state.status != GameStatus.GAME_OVER:
            output_fn(self.state.last_action)

    def _advance(self, state: GameState) -> None:
        self.state = state
        self.turns += 1
        logger.debug(f"Turn {self.turns}: {state.status.value}")

    def _result(self, winner: str, **kwargs) -> PlaytestResult:
        return PlaytestResult(winner=winner, seed=self.seed, turns=self.turns, **kwargs)
