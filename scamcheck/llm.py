from __future__ import annotations

import json
import logging
import math
import re
from typing import Any, Dict

from openai import OpenAI, OpenAIError
from pydantic import ValidationError

from .config import Settings
from .detector import unique_phrases
from .errors import (
    ConfigurationAbsentError,
    InvalidResponseFormatError,
    InvalidResponseSchemaError,
    RemoteCallFailedError,
)
from .models import AnalysisVerdict

logger = logging.getLogger(__name__)

TEMPERATURE = 0.1
MAX_OUTPUT_TOKENS = 500

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*|\s*```$")

_PROMPT_TEMPLATE = """You are a cybersecurity expert specializing in scam and phishing detection.
Analyze the message below and decide how likely it is to be a scam.

Return ONLY a JSON object, with no markdown and no commentary, using exactly this shape:
{{
    "riskScore": <integer 0-100, higher means more likely a scam>,
    "riskLevel": "<low|medium|high>",
    "explanation": "<2-3 sentences explaining the verdict in plain language>",
    "patterns": ["<scam tactic detected, e.g. urgent language, impersonation>"],
    "suspiciousPhrases": ["<exact phrase copied verbatim from the message>"]
}}

Rules:
- riskLevel is "low" for scores 0-30, "medium" for 31-70 and "high" for 71-100.
- suspiciousPhrases must be copied character for character from the message; use at most 8.
- If nothing suspicious is found, use ["No scam patterns detected"] for patterns and [] for suspiciousPhrases.

Message:
\"\"\"
{message}
\"\"\""""


def build_prompt(message: str) -> str:
    return _PROMPT_TEMPLATE.format(message=message)


def _strip_code_fences(text: str) -> str:
    return _CODE_FENCE.sub("", text.strip()).strip()


def parse_verdict(content: str) -> AnalysisVerdict:
    text = _strip_code_fences(content or "")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidResponseFormatError(f"model returned non-JSON output: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidResponseSchemaError("model output is not a JSON object")

    score = data.get("riskScore")
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise InvalidResponseSchemaError("riskScore missing or not numeric")
    if not math.isfinite(score):
        raise InvalidResponseSchemaError("riskScore is not a finite number")
    level = data.get("riskLevel")
    if not isinstance(level, str) or not level.strip():
        raise InvalidResponseSchemaError("riskLevel missing")

    payload: Dict[str, Any] = dict(data)
    payload["riskScore"] = int(round(score))
    payload["riskLevel"] = level.strip().lower()
    if not payload.get("patterns"):
        payload.pop("patterns", None)
    if isinstance(payload.get("explanation"), str):
        payload["explanation"] = payload["explanation"].strip()
    phrases = payload.get("suspiciousPhrases")
    if isinstance(phrases, list) and all(isinstance(phrase, str) for phrase in phrases):
        payload["suspiciousPhrases"] = unique_phrases(phrases)
    try:
        return AnalysisVerdict.model_validate(payload)
    except ValidationError as exc:
        raise InvalidResponseSchemaError(str(exc)) from exc


def _build_client(settings: Settings) -> OpenAI:
    # One attempt per request; the caller falls back instead of retrying.
    return OpenAI(
        api_key=settings.gemini_api_key,
        base_url=settings.gemini_base_url,
        timeout=settings.http_timeout_seconds,
        max_retries=0,
    )


def classify_with_llm(message: str, settings: Settings) -> AnalysisVerdict:
    if not settings.gemini_api_key:
        raise ConfigurationAbsentError("GEMINI_API_KEY is not set")

    try:
        client = _build_client(settings)
        response = client.chat.completions.create(
            model=settings.gemini_model,
            messages=[{"role": "user", "content": build_prompt(message)}],
            temperature=TEMPERATURE,
            max_tokens=MAX_OUTPUT_TOKENS,
        )
    except OpenAIError as exc:
        raise RemoteCallFailedError(f"{type(exc).__name__}: {exc}") from exc

    try:
        content = response.choices[0].message.content if response.choices else ""
    except (AttributeError, IndexError, TypeError) as exc:
        raise InvalidResponseFormatError(f"unexpected completion shape: {exc}") from exc
    verdict = parse_verdict(content or "")
    logger.info("remote classifier score=%s level=%s", verdict.riskScore, verdict.riskLevel)
    return verdict
