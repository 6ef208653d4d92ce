"""Game state machine.

Every operation takes a snapshot and returns the next one. Operations
whose guard does not hold return the input snapshot itself, so callers
can detect a rejected operation with an identity check.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from crazyeights.cards import Card, Rank, Suit, create_deck
from crazyeights.errors import SetupError
from crazyeights.rules import check_winner, is_valid_move
from crazyeights.state import GameState, GameStatus, Side
from crazyeights.strategy import choose_wild_suit, select_card

logger = logging.getLogger(__name__)

HAND_SIZE = 8


def initialize(
    rng: Optional[random.Random] = None,
    deck: Optional[Sequence[Card]] = None,
) -> GameState:
    """Deal a new game.

    Args:
        rng: Random source for the shuffle (ignored when ``deck`` is given)
        deck: Pre-ordered deck to deal from instead of a shuffled one

    Returns:
        Initial state with the player to move

    Raises:
        SetupError: If both hands cannot be dealt or no non-8 card is
            left to start the discard pile
    """
    cards = list(deck) if deck is not None else create_deck(rng)
    if len(cards) < 2 * HAND_SIZE + 1:
        raise SetupError(f"Need at least {2 * HAND_SIZE + 1} cards to deal, got {len(cards)}")

    player_hand = tuple(cards[:HAND_SIZE])
    ai_hand = tuple(cards[HAND_SIZE:2 * HAND_SIZE])
    remaining = cards[2 * HAND_SIZE:]

    # Scan forward for the first card that is not an 8
    starter_idx = next((i for i, c in enumerate(remaining) if not c.is_wild), None)
    if starter_idx is None:
        raise SetupError("No non-8 card available to start the discard pile")
    starter = remaining.pop(starter_idx)

    logger.info(f"New game: starter card {starter}")
    return GameState(
        deck=tuple(remaining),
        discard_pile=(starter,),
        player_hand=player_hand,
        ai_hand=ai_hand,
        current_suit=starter.suit,
        current_rank=starter.rank,
        status=GameStatus.PLAYER_TURN,
        winner=None,
        last_action="Game started! Your turn.",
    )


def draw(state: GameState) -> GameState:
    """Draw one card for the player.

    The player keeps the turn only if the drawn card can be played.
    With an empty deck the turn passes to the computer.
    """
    if state.status != GameStatus.PLAYER_TURN:
        return _ignored("draw", state)

    if not state.deck:
        logger.debug("Player draw on empty deck, turn forfeited")
        return state.copy_with(
            status=GameStatus.AI_TURN,
            last_action="The deck is empty! You pass your turn.",
        )

    drawn = state.deck[-1]
    can_play = is_valid_move(drawn, state.current_suit, state.current_rank)
    logger.debug(f"Player drew {drawn} (playable={can_play})")
    return state.copy_with(
        deck=state.deck[:-1],
        player_hand=state.player_hand + (drawn,),
        status=GameStatus.PLAYER_TURN if can_play else GameStatus.AI_TURN,
        last_action=f"You drew the {drawn}.",
    )


def play(state: GameState, card: Card) -> GameState:
    """Play a card from the player's hand.

    An 8 moves the game to suit selection; any other card hands the turn
    to the computer unless it was the player's last card.
    """
    if state.status != GameStatus.PLAYER_TURN:
        return _ignored("play", state)
    if card not in state.player_hand:
        return _ignored(f"play of {card} (not in hand)", state)
    if not is_valid_move(card, state.current_suit, state.current_rank):
        return _ignored(f"play of {card} (illegal)", state)

    hand = _remove_card(state.player_hand, card)
    discard = (card,) + state.discard_pile
    logger.debug(f"Player played {card}")

    if card.is_wild:
        # Suit stays the old one until chosen
        return state.copy_with(
            player_hand=hand,
            discard_pile=discard,
            current_rank=Rank.EIGHT,
            status=GameStatus.SELECTING_SUIT,
            pending_wild_card=card,
            last_action="You played an 8! Choose a new suit.",
        )

    return _finish_if_won(state.copy_with(
        player_hand=hand,
        discard_pile=discard,
        current_suit=card.suit,
        current_rank=card.rank,
        status=GameStatus.AI_TURN,
        last_action=f"You played the {card}.",
    ))


def choose_suit(state: GameState, suit: Suit) -> GameState:
    """Resolve the player's wild card by naming the next suit."""
    if state.status != GameStatus.SELECTING_SUIT or state.pending_wild_card is None:
        return _ignored("suit choice", state)

    logger.debug(f"Player chose {suit.value}")
    return _finish_if_won(state.copy_with(
        current_suit=suit,
        current_rank=Rank.EIGHT,
        status=GameStatus.AI_TURN,
        pending_wild_card=None,
        last_action=f"Suit changed to {suit.value}!",
    ))


def resolve_computer_turn(state: GameState) -> GameState:
    """Take one computer turn.

    The computer plays a card if it has a legal one. Otherwise it draws
    a single card and keeps the turn only if that card is playable; the
    card is then played on the next call, not this one.
    """
    if state.status != GameStatus.AI_TURN:
        return _ignored("computer turn", state)

    card = select_card(state.ai_hand, state.current_suit, state.current_rank)

    if card is not None:
        hand = _remove_card(state.ai_hand, card)
        if card.is_wild:
            suit = choose_wild_suit(hand)
            rank = Rank.EIGHT
            action = f"The computer played an 8 and changed the suit to {suit.value}!"
        else:
            suit = card.suit
            rank = card.rank
            action = f"The computer played the {card}."
        logger.debug(action)
        return _finish_if_won(state.copy_with(
            ai_hand=hand,
            discard_pile=(card,) + state.discard_pile,
            current_suit=suit,
            current_rank=rank,
            status=GameStatus.PLAYER_TURN,
            last_action=action,
        ))

    if state.deck:
        drawn = state.deck[-1]
        can_play = is_valid_move(drawn, state.current_suit, state.current_rank)
        logger.debug(f"Computer drew {drawn} (playable={can_play})")
        return state.copy_with(
            deck=state.deck[:-1],
            ai_hand=state.ai_hand + (drawn,),
            status=GameStatus.AI_TURN if can_play else GameStatus.PLAYER_TURN,
            last_action="The computer drew a card.",
        )

    logger.debug("Computer cannot play and the deck is empty, turn forfeited")
    return state.copy_with(
        status=GameStatus.PLAYER_TURN,
        last_action="The computer passes (the deck is empty).",
    )


def _remove_card(hand: tuple[Card, ...], card: Card) -> tuple[Card, ...]:
    """Remove one card from a hand by identity."""
    return tuple(c for c in hand if c.index != card.index)


def _finish_if_won(state: GameState) -> GameState:
    """End the game if a hand is empty."""
    winner = check_winner(state)
    if winner is None:
        return state
    logger.info(f"Game over: {winner.value} wins")
    message = "You win!" if winner == Side.PLAYER else "The computer wins!"
    return state.copy_with(
        status=GameStatus.GAME_OVER,
        winner=winner,
        last_action=f"{state.last_action} {message}",
    )


def _ignored(operation: str, state: GameState) -> GameState:
    logger.debug(f"Ignored {operation} during {state.status.value}")
    return state
