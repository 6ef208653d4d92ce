"""In-memory store of live games."""

from __future__ import annotations

import logging
import threading
import time
import uuid
from dataclasses import dataclass
from typing import Callable

from crazyeights.errors import CrazyEightsError
from crazyeights.state import GameState

logger = logging.getLogger(__name__)

# One hour
DEFAULT_GAME_TTL = 3600.0


class GameNotFoundError(CrazyEightsError):
    """No live game with the given id."""


class VersionConflictError(CrazyEightsError):
    """The client acted on a stale snapshot."""


class MoveNotAllowedError(CrazyEightsError):
    """The engine ignored the requested operation."""


@dataclass(frozen=True)
class StoredGame:
    """A live game and its optimistic-locking version."""

    game_id: str
    state: GameState
    version: int
    last_updated: float = 0.0


class GameStore:
    """Holds the current snapshot of each live game.

    Games exist only for the lifetime of the process. Each update is
    checked against the version the client last saw, so a repeated
    request cannot apply the same operation twice. Games left idle for
    longer than ``ttl`` seconds are evicted on the next create or update.
    """

    def __init__(
        self,
        ttl: float = DEFAULT_GAME_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._games: dict[str, StoredGame] = {}
        self._lock = threading.Lock()
        self.ttl = ttl
        self._clock = clock

    def __len__(self) -> int:
        return len(self._games)

    def create(self, state: GameState) -> StoredGame:
        """Register a new game."""
        with self._lock:
            now = self._clock()
            self._evict_expired(now)
            game = StoredGame(
                game_id=str(uuid.uuid4()), state=state, version=1, last_updated=now
            )
            self._games[game.game_id] = game
        logger.debug(f"Created game {game.game_id}")
        return game

    def get(self, game_id: str) -> StoredGame:
        with self._lock:
            return self._get(game_id)

    def update(
        self,
        game_id: str,
        version: int,
        operation: Callable[[GameState], GameState],
    ) -> StoredGame:
        """Apply an engine operation to a game.

        Raises:
            GameNotFoundError: Unknown game id
            VersionConflictError: ``version`` is not the current version
            MoveNotAllowedError: The engine returned the state unchanged
        """
        with self._lock:
            now = self._clock()
            self._evict_expired(now)
            game = self._get(game_id)
            if version != game.version:
                raise VersionConflictError(
                    f"Version conflict: expected {game.version}, got {version}"
                )
            new_state = operation(game.state)
            if new_state is game.state:
                raise MoveNotAllowedError("Move not allowed")
            updated = StoredGame(
                game_id=game_id,
                state=new_state,
                version=game.version + 1,
                last_updated=now,
            )
            self._games[game_id] = updated
            return updated

    def delete(self, game_id: str) -> None:
        with self._lock:
            self._get(game_id)
            del self._games[game_id]
        logger.debug(f"Deleted game {game_id}")

    def _evict_expired(self, now: float) -> None:
        expired = [
            game_id for game_id, game in self._games.items()
            if now - game.last_updated > self.ttl
        ]
        for game_id in expired:
            del self._games[game_id]
        if expired:
            logger.info(f"Evicted {len(expired)} idle games")

    def _get(self, game_id: str) -> StoredGame:
        try:
            return self._games[game_id]
        except KeyError:
            raise GameNotFoundError(f"Game {game_id} not found") from None
