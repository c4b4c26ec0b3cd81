"""FastAPI app exposing :func:`greeter.greet` over HTTP."""

from __future__ import annotations

import json
import logging
import os
import time
from typing import Awaitable, Callable, Optional

from fastapi import Depends, FastAPI, Header, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, StrictStr

from . import __version__
from .core import DEFAULT_USER, greet

# ---------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------
VERSION = f"api-v{__version__}"

# ---------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------
SERVER_API_KEY = os.getenv("SERVER_API_KEY", "")
CORS_ORIGINS = [
    o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()
]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    """Route request log lines to stderr at ``level`` (default ``LOG_LEVEL``).

    Called by every launcher (``greeter serve``, ``asgi.py``); uvicorn only
    configures its own ``uvicorn.*`` loggers.
    """

    resolved = (level or LOG_LEVEL).upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logger.setLevel(resolved)


# ---------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------
app = FastAPI(title="greeter API", version=VERSION)

allow_origins = CORS_ORIGINS or [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1",
    "http://127.0.0.1:5173",
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------
# Auth dep (only enforced if SERVER_API_KEY is set)
# ---------------------------------------------------------------------
def require_api_key(x_api_key: Optional[str] = Header(None)) -> None:
    if SERVER_API_KEY and x_api_key != SERVER_API_KEY:
        raise HTTPException(
            status_code=401, detail="Unauthorized: missing or invalid API key"
        )


# ---------------------------------------------------------------------
# Request models / responses
# ---------------------------------------------------------------------
class GreetRequest(BaseModel):
    # strict: {"name": 1} is a 422, never "Hello, 1"
    name: StrictStr


class GreetResponse(BaseModel):
    greeting: str
    version: str


def _log_request(start: float, request: Request, status: int) -> None:
    payload = {
        "path": request.url.path,
        "method": request.method,
        "origin": request.headers.get("origin", ""),
        "status": status,
        "latency_ms": int((time.perf_counter() - start) * 1000),
    }
    logger.info(json.dumps(payload))


@app.middleware("http")
async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        _log_request(start, request, 500)
        raise
    _log_request(start, request, response.status_code)
    return response


# ---------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------
@app.get("/api/health")
def health() -> dict[str, str]:
    return {"ok": "true", "version": VERSION}


# ---------------------------------------------------------------------
# /api/greet
# ---------------------------------------------------------------------
@app.get("/api/greet", response_model=GreetResponse)
def greet_query(
    name: str = DEFAULT_USER, _: None = Depends(require_api_key)
) -> GreetResponse:
    return GreetResponse(greeting=greet(name), version=VERSION)


@app.post("/api/greet", response_model=GreetResponse)
def greet_body(req: GreetRequest, _: None = Depends(require_api_key)) -> GreetResponse:
    return GreetResponse(greeting=greet(req.name), version=VERSION)
