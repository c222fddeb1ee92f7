from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash"
    gemini_base_url: str = DEFAULT_GEMINI_BASE_URL
    http_timeout_seconds: float = 30.0
    max_message_length: int = 10000
    rate_limit_window_seconds: float = 60.0
    rate_limit_max_requests: int = 10

    @property
    def remote_enabled(self) -> bool:
        return bool(self.gemini_api_key)


def load_settings() -> Settings:
    load_dotenv()

    # An empty key is a valid state: analysis runs on heuristics only.
    gemini_api_key = os.environ.get("GEMINI_API_KEY", "").strip()
    gemini_model = os.environ.get("GEMINI_MODEL", "gemini-1.5-flash")
    gemini_base_url = os.environ.get("GEMINI_BASE_URL", DEFAULT_GEMINI_BASE_URL)

    http_timeout_seconds = float(os.environ.get("GEMINI_TIMEOUT", os.environ.get("HTTP_TIMEOUT_SECONDS", "30")))
    max_message_length = int(os.environ.get("MAX_MESSAGE_LENGTH", "10000"))
    rate_limit_window_seconds = float(os.environ.get("RATE_LIMIT_WINDOW_SECONDS", "60"))
    rate_limit_max_requests = int(os.environ.get("RATE_LIMIT_MAX_REQUESTS", "10"))

    return Settings(
        gemini_api_key=gemini_api_key,
        gemini_model=gemini_model,
        gemini_base_url=gemini_base_url,
        http_timeout_seconds=http_timeout_seconds,
        max_message_length=max_message_length,
        rate_limit_window_seconds=rate_limit_window_seconds,
        rate_limit_max_requests=rate_limit_max_requests,
    )
