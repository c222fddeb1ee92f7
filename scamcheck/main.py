from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .analyzer import analyze
from .config import Settings, load_settings
from .models import ErrorResponse
from .ratelimit import RateLimiter

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Scam Message Analyzer", docs_url=None, redoc_url=None)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

settings: Optional[Settings] = None
limiter: Optional[RateLimiter] = None


def _safe_error(code: int, error: str, details: str, error_code: str, with_timestamp: bool = False) -> JSONResponse:
    body = ErrorResponse(
        error=error,
        details=details,
        code=error_code,
        timestamp=datetime.now(timezone.utc).isoformat() if with_timestamp else None,
    )
    return JSONResponse(status_code=code, content=body.model_dump(exclude_none=True))


def _client_key(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded
    if request.client is not None:
        return request.client.host
    return "unknown"


@app.on_event("startup")
def _load_settings() -> None:
    global settings, limiter
    settings = load_settings()
    limiter = RateLimiter(settings.rate_limit_max_requests, settings.rate_limit_window_seconds)
    mode = "remote with heuristic fallback" if settings.remote_enabled else "heuristic only"
    logger.info("Service started successfully (%s)", mode)


@app.get("/")
@app.head("/")
def root_probe() -> JSONResponse:
    return JSONResponse(status_code=200, content={"status": "ok"})


@app.post("/api/analyze")
async def analyze_message(request: Request) -> JSONResponse:
    if settings is None or limiter is None:
        return _safe_error(500, "Server not initialized", "The service is still starting up.", "INTERNAL_SERVER_ERROR", True)

    if not limiter.hit(_client_key(request)):
        return _safe_error(
            429,
            "Too many requests",
            "You have exceeded the rate limit. Please try again in a minute.",
            "RATE_LIMIT_EXCEEDED",
        )

    try:
        raw = await request.body()
        payload = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        payload = None

    if not isinstance(payload, dict):
        return _safe_error(
            400,
            "Invalid request format",
            "The request body must be valid JSON. Please check your request format and try again.",
            "INVALID_JSON",
        )

    message = payload.get("message")
    if not message or not isinstance(message, str):
        return _safe_error(
            400,
            "Invalid message format",
            "The 'message' field is required and must be a text string. Please provide a valid message to analyze.",
            "INVALID_MESSAGE_TYPE",
        )

    if not message.strip():
        return _safe_error(
            400,
            "Empty message",
            "The message cannot be empty or contain only whitespace. Please enter some text to analyze.",
            "EMPTY_MESSAGE",
        )

    if len(message) > settings.max_message_length:
        return _safe_error(
            400,
            "Message too long",
            f"The message is {len(message):,} characters long, but the maximum allowed is "
            f"{settings.max_message_length:,} characters. Please shorten your message and try again.",
            "MESSAGE_TOO_LONG",
        )

    try:
        verdict = await run_in_threadpool(analyze, message, settings)
    except Exception:
        logger.exception("Error analyzing message")
        return _safe_error(
            500,
            "Analysis failed",
            "An unexpected error occurred while analyzing your message. This might be due to a "
            "temporary service issue. Please try again in a few moments.",
            "INTERNAL_SERVER_ERROR",
            True,
        )

    return JSONResponse(status_code=200, content=verdict.model_dump())
