from __future__ import annotations

from typing import List

from .models import RiskLevel

LEGITIMATE_EXPLANATION = (
    "This message appears to be legitimate with no obvious scam indicators detected. "
    "However, always exercise caution when sharing personal information or clicking on links."
)


def build_explanation(score: int, level: RiskLevel, patterns: List[str]) -> str:
    if score == 0:
        return LEGITIMATE_EXPLANATION

    if level == "low":
        detail = (
            "While some patterns were detected, they may be used in legitimate contexts."
            if patterns
            else "No significant scam patterns were found."
        )
        return f"This message shows minimal risk indicators. {detail} Always verify the sender's identity before taking action."

    if level == "medium":
        headline = patterns[0].lower() if patterns else "suspicious language"
        return (
            "This message contains several concerning elements that are commonly found in scam attempts. "
            f"The use of {headline} and other patterns suggest caution is warranted. "
            "Verify the sender through official channels before responding or clicking any links."
        )

    combination = " and ".join(pattern.lower() for pattern in patterns[:2])
    return (
        "⚠️ This message exhibits multiple high-risk characteristics typical of scam attempts. "
        f"The combination of {combination} are major red flags. "
        "Do not click any links, provide personal information, or send money. "
        "Contact the organization directly using official contact information to verify."
    )
