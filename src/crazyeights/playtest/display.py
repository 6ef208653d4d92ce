"""Terminal display for game state."""

from __future__ import annotations

from crazyeights.cards import Card, Suit, SUITS, WILD_RANK
from crazyeights.rules import is_valid_move
from crazyeights.state import GameState, GameStatus


# Unicode card symbols
SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}


def format_card(card: Card) -> str:
    """Format card with unicode suit symbol."""
    return f"{card.rank.value}{SUIT_SYMBOLS[card.suit]}"


class StateRenderer:
    """Renders the player's view of the game to the terminal."""

    def render(self, state: GameState, debug: bool = False) -> str:
        """Render state from the human player's perspective."""
        lines: list[str] = []

        lines.append(f"Computer: {len(state.ai_hand)} cards | Deck: {len(state.deck)} cards")
        lines.append(f"Discard pile: {format_card(state.top_card)}")
        lines.append(f"To match: {self._describe_target(state)}")
        if state.last_action:
            lines.append(f"> {state.last_action}")
        lines.append("")

        hand = state.player_hand
        if hand:
            show_playable = state.status == GameStatus.PLAYER_TURN
            cards_str = "  ".join(
                f"[{i+1}] {format_card(card)}{self._marker(card, state, show_playable)}"
                for i, card in enumerate(hand)
            )
            lines.append(f"Your hand: {cards_str}")
        else:
            lines.append("Your hand: (empty)")

        if debug:
            lines.append("")
            lines.append("--- Debug Info ---")
            ai_cards = ", ".join(format_card(c) for c in state.ai_hand)
            lines.append(f"Computer hand: [{ai_cards}]")

        return "\n".join(lines)

    def _describe_target(self, state: GameState) -> str:
        symbol = SUIT_SYMBOLS[state.current_suit]
        if state.current_rank == WILD_RANK:
            return f"any {state.current_suit.value} {symbol} (or an 8)"
        return f"{state.current_rank.value} or {state.current_suit.value} {symbol} (or an 8)"

    def _marker(self, card: Card, state: GameState, show: bool) -> str:
        if show and is_valid_move(card, state.current_suit, state.current_rank):
            return "*"
        return ""


class CommandPresenter:
    """Presents the available commands."""

    def present_turn(self, state: GameState) -> str:
        """Prompt shown on the player's turn."""
        if not state.player_hand:
            return "Enter [d]raw or [q]uit:"
        return f"Enter card 1-{len(state.player_hand)} (* = playable), [d]raw, or [q]uit:"

    def present_suits(self) -> str:
        """Prompt shown while choosing a suit after an 8."""
        options = "  ".join(
            f"[{i+1}] {suit.value} {SUIT_SYMBOLS[suit]}" for i, suit in enumerate(SUITS)
        )
        return f"Choose a suit: {options}"
