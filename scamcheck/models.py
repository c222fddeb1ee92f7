from __future__ import annotations

from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

RiskLevel = Literal["low", "medium", "high"]

NO_PATTERNS = "No scam patterns detected"


class AnalysisVerdict(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    riskScore: int = Field(ge=0, le=100)
    riskLevel: RiskLevel
    explanation: str = Field(min_length=1)
    patterns: List[str] = Field(default_factory=lambda: [NO_PATTERNS])
    suspiciousPhrases: List[str] = Field(default_factory=list, max_length=8)


class DetectorResult(BaseModel):
    # Raw scorer output: patterns may be empty, phrases not yet deduplicated.
    score: int
    patterns: List[str]
    phrases: List[str]


class ErrorResponse(BaseModel):
    error: str
    details: str
    code: str
    timestamp: Optional[str] = None
