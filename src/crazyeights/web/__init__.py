"""Web API backend for playing in the browser."""

from crazyeights.web.store import (
    GameStore,
    StoredGame,
    GameNotFoundError,
    VersionConflictError,
    MoveNotAllowedError,
)
from crazyeights.web.dependencies import get_store

__all__ = [
    "GameStore",
    "StoredGame",
    "GameNotFoundError",
    "VersionConflictError",
    "MoveNotAllowedError",
    "get_store",
]
