"""FastAPI application — the main entrypoint for VoteHub."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.app.api.features import router as features_router
from backend.app.api.users import router as users_router
from backend.app.api.widget import router as widget_router
from backend.app.config import settings
from backend.app.services.vote_ledger import VoteLedger
from backend.app.store import get_ledger, init_store

logger = logging.getLogger(__name__)

# Configure logging for our app modules so INFO/DEBUG logs are visible.
# Uvicorn's log_level="info" only affects its own logger, not ours.
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(levelname)s:%(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    ledger = init_store()
    logger.info("Ledger ready with %d feature requests", len(ledger))
    yield


app = FastAPI(
    title="VoteHub",
    description="Feature request voting board",
    version="0.1.0",
    lifespan=lifespan,
)

# The widget is embedded on third-party pages, so no credentials are shared.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Global exception handler ---


@app.exception_handler(Exception)
async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch unhandled exceptions and return a clean JSON 500 instead of a stack trace."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# Include routers
app.include_router(users_router, prefix="/api")
app.include_router(features_router, prefix="/api")
app.include_router(widget_router, prefix="/api")


# --- Health check ---


@app.get("/api/health")
async def health(ledger: VoteLedger = Depends(get_ledger)) -> dict[str, str | int]:
    """Health check reporting the size of the in-memory board."""
    return {"status": "ok", "features": len(ledger)}
