from __future__ import annotations

import logging
import re
from typing import List

from .models import DetectorResult, RiskLevel
from .patterns import SCAM_PATTERNS, SENSITIVE_INFO_KEYWORDS

logger = logging.getLogger(__name__)

FORMATTING_PATTERN = "Poor grammar or unusual formatting"
SHORTENED_URL_PATTERN = "Shortened or suspicious URLs"
LINK_PATTERN = "Contains links (verify before clicking)"
SENSITIVE_INFO_PATTERN = "Requests for sensitive personal information"

MAX_PHRASES_PER_CATEGORY = 3
SHORT_MESSAGE_LENGTH = 50

_POOR_SPACING = re.compile(r"\s{3,}")
_CASE_BREAK = re.compile(r"[a-z][A-Z]")
_URL_PATTERN = re.compile(r"https?://|www\.", re.IGNORECASE)
_SHORTENED_URL_PATTERN = re.compile(r"(bit\.ly|tinyurl|goo\.gl)", re.IGNORECASE)


def risk_level_for(score: int) -> RiskLevel:
    if score <= 30:
        return "low"
    if score <= 70:
        return "medium"
    return "high"


def has_unusual_formatting(text: str) -> bool:
    if text.count("!") > 2:
        return True
    shouting = [word for word in text.split(" ") if len(word) > 3 and word == word.upper()]
    if len(shouting) > 2:
        return True
    return bool(_POOR_SPACING.search(text) or _CASE_BREAK.search(text))


def detect_scam_patterns(text: str) -> DetectorResult:
    normalized = (text or "").lower()
    patterns: List[str] = []
    phrases: List[str] = []
    score = 0

    for category in SCAM_PATTERNS:
        matched = [keyword for keyword in category.keywords if keyword in normalized]
        if matched:
            patterns.append(category.description)
            phrases.extend(matched[:MAX_PHRASES_PER_CATEGORY])
            score += 15 + len(matched) * 5

    if has_unusual_formatting(text):
        patterns.append(FORMATTING_PATTERN)
        score += 10

    # A bare link is not evidence on its own; it only counts next to other signals.
    if _SHORTENED_URL_PATTERN.search(text):
        patterns.append(SHORTENED_URL_PATTERN)
        score += 20
    elif _URL_PATTERN.search(text) and patterns:
        patterns.append(LINK_PATTERN)
        score += 10

    if any(keyword in normalized for keyword in SENSITIVE_INFO_KEYWORDS):
        patterns.append(SENSITIVE_INFO_PATTERN)
        score += 25

    score = max(0, min(score, 100))

    if len(text) < SHORT_MESSAGE_LENGTH and not patterns:
        score = max(0, score - 10)

    logger.debug("heuristic score=%s patterns=%s", score, patterns)
    return DetectorResult(score=score, patterns=patterns, phrases=phrases)


def unique_phrases(phrases: List[str], limit: int = 8) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for phrase in phrases:
        if phrase not in seen:
            seen.add(phrase)
            ordered.append(phrase)
    return ordered[:limit]
