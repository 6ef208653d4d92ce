"""FastAPI application for the Crazy Eights web front-end."""

from __future__ import annotations

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crazyeights.web.routes import games

# Vite dev server
DEFAULT_ALLOWED_ORIGINS = "http://localhost:5173"


def allowed_origins() -> list[str]:
    """CORS origins from CRAZYEIGHTS_ALLOWED_ORIGINS (comma separated)."""
    raw = os.environ.get("CRAZYEIGHTS_ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Crazy Eights",
        description="Play Crazy Eights against the computer",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(games.router, prefix="/api", tags=["games"])

    return app


# Default app instance
app = create_app()
