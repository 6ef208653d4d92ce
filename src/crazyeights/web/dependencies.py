"""FastAPI dependency injection."""

from __future__ import annotations

import os

from crazyeights.web.store import DEFAULT_GAME_TTL, GameStore


# Singleton store instance
_store: GameStore | None = None


def game_ttl() -> float:
    """Idle game lifetime in seconds from CRAZYEIGHTS_GAME_TTL."""
    return float(os.environ.get("CRAZYEIGHTS_GAME_TTL", DEFAULT_GAME_TTL))


def get_store() -> GameStore:
    """Get the game store singleton."""
    global _store
    if _store is None:
        _store = GameStore(ttl=game_ttl())
    return _store
