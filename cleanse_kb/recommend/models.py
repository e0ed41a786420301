"""
Recommender Models

Pydantic models for condition-to-protocol recommendations.

Version: protocol_recommender_v1
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..catalog.models import Protocol
from ..shared.disclaimer import SafetyDisclaimer

RECOMMENDER_VERSION = "protocol_recommender_v1"


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class Recommendation(BaseModel):
    """A protocol proposed for the client's conditions."""
    model_config = ConfigDict(frozen=True)

    protocol: Protocol
    match_score: int = Field(..., ge=1, description="Distinct conditions this protocol targets")
    matched_conditions: List[str] = Field(
        description="Caller's condition tags that matched, as supplied"
    )
    match_percent: float = Field(
        ..., ge=0, le=100,
        description="Share of distinct input conditions matched (0-100)",
    )
    reasoning: str


class RecommendationRequest(BaseModel):
    """Body of POST /api/v1/recommendations."""
    model_config = ConfigDict(extra="forbid")

    conditions: List[str] = Field(
        default_factory=list,
        description="Ailment tags from the wizard, e.g. ['digestive_issues', 'fatigue']",
    )
    region: Optional[str] = Field(
        default=None,
        description="Client region; omitted means no regional filtering",
    )
    exclude_flags: List[str] = Field(
        default_factory=list,
        description="Client flags such as 'pregnancy' or 'children'",
    )

    @field_validator("conditions", "exclude_flags")
    @classmethod
    def drop_blank(cls, v: List[str]) -> List[str]:
        return [item for item in v if item and item.strip()]


class RecommendationAudit(BaseModel):
    """Audit trail for a recommendation run."""
    conditions_received: int
    distinct_conditions: int
    candidates_considered: int = Field(description="Protocols matching at least one condition")
    excluded_by_region: int
    excluded_by_contraindication: int
    returned: int
    region_applied: Optional[str] = None
    exclude_flags_applied: List[str] = Field(default_factory=list)
    processed_at: str = Field(default_factory=_utc_now)


class RecommendationResult(BaseModel):
    recommendations: List[Recommendation]
    unmatched_conditions: List[str] = Field(
        description="Input conditions no returned protocol targets"
    )
    recommendation_hash: str = Field(
        description="Deterministic hash of the ranked recommendations"
    )
    audit: RecommendationAudit
    version: str = RECOMMENDER_VERSION


# Response models for API endpoints

class RecommendationResponse(BaseModel):
    success: bool = True
    result: RecommendationResult
    disclaimer: SafetyDisclaimer
    generated_at: str = Field(default_factory=_utc_now)


class RecommenderHealthResponse(BaseModel):
    """Health check response for the recommender module."""
    status: str = "ok"
    module: str = "protocol_recommender"
    version: str = RECOMMENDER_VERSION
    protocol_count: int = 0
    timestamp: str = Field(default_factory=_utc_now)
