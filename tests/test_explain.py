from __future__ import annotations

from scamcheck.analyzer import analyze_heuristically
from scamcheck.explain import LEGITIMATE_EXPLANATION, build_explanation


def test_zero_score_is_reassurance():
    assert build_explanation(0, "low", []) == LEGITIMATE_EXPLANATION


def test_low_with_and_without_patterns():
    with_patterns = build_explanation(20, "low", ["Urgent or time-pressured language"])
    assert with_patterns == (
        "This message shows minimal risk indicators. While some patterns were detected, "
        "they may be used in legitimate contexts. Always verify the sender's identity before taking action."
    )
    without = build_explanation(5, "low", [])
    assert "No significant scam patterns were found." in without
    assert without.endswith("Always verify the sender's identity before taking action.")


def test_medium_headlines_first_pattern():
    text = build_explanation(45, "medium", ["Threats or legal intimidation", "Poor grammar or unusual formatting"])
    assert "The use of threats or legal intimidation and other patterns" in text
    assert text.endswith("Verify the sender through official channels before responding or clicking any links.")


def test_medium_without_patterns_uses_generic_wording():
    assert "The use of suspicious language" in build_explanation(50, "medium", [])


def test_high_joins_first_two_patterns():
    text = build_explanation(
        90,
        "high",
        ["Urgent or time-pressured language", "Impersonation of official organizations", "Shortened or suspicious URLs"],
    )
    assert text.startswith("⚠️ This message exhibits multiple high-risk characteristics")
    assert (
        "The combination of urgent or time-pressured language and impersonation of official organizations "
        "are major red flags." in text
    )
    assert "shortened" not in text
    assert "Do not click any links, provide personal information, or send money." in text


def test_medium_verdict_from_heuristics():
    verdict = analyze_heuristically("URGENT: your payment is overdue, pay now by wire transfer")
    assert verdict.riskScore == 50
    assert verdict.riskLevel == "medium"
    assert "The use of urgent or time-pressured language" in verdict.explanation
