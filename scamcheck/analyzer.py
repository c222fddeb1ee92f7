from __future__ import annotations

import logging
from typing import Optional

from .config import Settings, load_settings
from .detector import detect_scam_patterns, risk_level_for, unique_phrases
from .errors import ClassifierError, ConfigurationAbsentError
from .explain import build_explanation
from .llm import classify_with_llm
from .models import NO_PATTERNS, AnalysisVerdict

logger = logging.getLogger(__name__)


def analyze_heuristically(message: str) -> AnalysisVerdict:
    """Score ``message`` with the local keyword rules only. Pure and deterministic."""
    detector = detect_scam_patterns(message)
    level = risk_level_for(detector.score)
    return AnalysisVerdict(
        riskScore=detector.score,
        riskLevel=level,
        explanation=build_explanation(detector.score, level, detector.patterns),
        patterns=detector.patterns or [NO_PATTERNS],
        suspiciousPhrases=unique_phrases(detector.phrases),
    )


def analyze(message: str, settings: Optional[Settings] = None) -> AnalysisVerdict:
    """Classify one message.

    Uses the remote model when a key is configured and falls back to the
    heuristic path on any remote failure. Never raises for remote errors.
    """
    if settings is None:
        settings = load_settings()

    if not settings.remote_enabled:
        return analyze_heuristically(message)

    try:
        return classify_with_llm(message, settings)
    except ConfigurationAbsentError:
        logger.debug("Remote classifier not configured; using heuristics")
    except ClassifierError as exc:
        logger.warning("Remote classifier failed (%s): %s; using heuristics", type(exc).__name__, exc)
    except Exception:
        logger.exception("Unexpected error from remote classifier; using heuristics")

    return analyze_heuristically(message)
