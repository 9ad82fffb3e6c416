"""
FastAPI Application Entry Point for pokerroom.

This module creates and configures the FastAPI application with:
- HTTP routes for rooms, seating and betting
- A JSON error handler for rejected commands
- CORS middleware for browser clients
"""

from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pokerroom import __version__
from pokerroom.core.errors import PokerError
from pokerroom.core.game import HandEngine
from pokerroom.server.routes import router
from pokerroom.server.store import SessionStore, InMemorySessionStore

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("pokerroom server starting up...")
    yield
    logger.info("pokerroom server shutting down...")


async def poker_error_handler(request: Request, exc: PokerError) -> JSONResponse:
    """Return a rejected command to the client that sent it."""
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_app(
    store: Optional[SessionStore] = None,
    engine: Optional[HandEngine] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Session store for room state; in-memory when omitted
        engine: Hand engine; a fresh one with its own random source when omitted

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="pokerroom",
        description="Multiplayer Texas Hold'em rooms over HTTP",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.store = store or InMemorySessionStore()
    app.state.engine = engine or HandEngine()

    # CORS middleware for browser clients
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PokerError, poker_error_handler)
    app.include_router(router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": __version__}

    return app


# Create the application instance
app = create_app()


def main():
    """Run the server (for use as entry point)."""
    import uvicorn
    uvicorn.run(
        "pokerroom.server.app:app",
        host="0.0.0.0",
        port=8000,
    )


if __name__ == "__main__":
    main()
