"""
Cleanse KB Recommender

Medical conditions → ranked cleanse protocols (Protocol Wizard customization step).

- Scores protocols by how many of the client's conditions they target
- Optional region gate with worldwide passthrough
- Optional contraindication gate for client flags (pregnancy, children, ...)
- At most 5 results, each with a human-readable reasoning line

Version: protocol_recommender_v1
"""

from .models import (
    Recommendation,
    RecommendationRequest,
    RecommendationAudit,
    RecommendationResult,
)
from .recommend import (
    MAX_RECOMMENDATIONS,
    get_recommendations,
    build_recommendation_result,
    compute_recommendation_hash,
)

__all__ = [
    "Recommendation",
    "RecommendationRequest",
    "RecommendationAudit",
    "RecommendationResult",
    "MAX_RECOMMENDATIONS",
    "get_recommendations",
    "build_recommendation_result",
    "compute_recommendation_hash",
]

__version__ = "protocol_recommender_v1"
