from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ScamIndicatorCategory:
    key: str
    keywords: Tuple[str, ...]
    description: str


# Declaration order matters: the scorer reports patterns in this order.
SCAM_PATTERNS: Tuple[ScamIndicatorCategory, ...] = (
    ScamIndicatorCategory(
        key="urgentLanguage",
        keywords=(
            "urgent",
            "immediately",
            "act now",
            "limited time",
            "expires",
            "hurry",
            "today only",
            "last chance",
            "final notice",
            "suspended",
            "locked",
            "expire",
        ),
        description="Urgent or time-pressured language",
    ),
    ScamIndicatorCategory(
        key="paymentRequest",
        keywords=(
            "wire transfer",
            "gift card",
            "bitcoin",
            "crypto",
            "payment",
            "send money",
            "pay now",
            "invoice",
            "western union",
            "paypal",
            "venmo",
            "cash app",
            "zelle",
        ),
        description="Requests for payment or financial information",
    ),
    ScamIndicatorCategory(
        key="impersonation",
        keywords=(
            "verify account",
            "confirm identity",
            "update information",
            "security alert",
            "unusual activity",
            "click here",
            "log in",
            "reset password",
            "suspended account",
            "unauthorized access",
        ),
        description="Impersonation of official organizations",
    ),
    ScamIndicatorCategory(
        key="prizes",
        keywords=(
            "you've won",
            "congratulations",
            "winner",
            "prize",
            "lottery",
            "claim your",
            "free gift",
            "selected",
            "lucky",
        ),
        description="Too-good-to-be-true offers or prizes",
    ),
    ScamIndicatorCategory(
        key="threats",
        keywords=(
            "legal action",
            "arrest",
            "warrant",
            "police",
            "lawsuit",
            "court",
            "penalty",
            "fine",
            "consequences",
            "investigation",
        ),
        description="Threats or legal intimidation",
    ),
)

SENSITIVE_INFO_KEYWORDS: Tuple[str, ...] = (
    "social security",
    "ssn",
    "credit card",
    "bank account",
    "password",
    "pin",
    "date of birth",
)
