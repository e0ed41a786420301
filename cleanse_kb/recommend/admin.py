"""
Recommender Endpoints

POST /api/v1/recommendations        - Rank protocols for a client's conditions
GET  /api/v1/recommendations/health - Health check

Version: protocol_recommender_v1
"""

import logging

from fastapi import APIRouter, HTTPException

from ..catalog.store import get_catalog
from ..shared.disclaimer import build_safety_disclaimer
from .models import (
    RecommendationRequest,
    RecommendationResponse,
    RecommenderHealthResponse,
)
from .recommend import build_recommendation_result

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/recommendations",
    tags=["recommendations"],
)


@router.get("/health", response_model=RecommenderHealthResponse)
async def recommender_health():
    """Health check for the recommender module."""
    return RecommenderHealthResponse(protocol_count=len(get_catalog()))


@router.post("", response_model=RecommendationResponse)
async def recommend_protocols(request: RecommendationRequest):
    """
    Rank cleanse protocols for the wizard's medical-conditions step.

    1. Deduplicates conditions (case-insensitive)
    2. Scores protocols by conditions targeted
    3. Applies the optional region and contraindication gates
    4. Returns at most 5 protocols with reasoning and an audit trail

    An empty condition list is valid and yields no recommendations.
    """
    try:
        result = build_recommendation_result(
            get_catalog(),
            request.conditions,
            region=request.region,
            exclude_flags=request.exclude_flags,
        )
        intensities = [r.protocol.intensity for r in result.recommendations]
        return RecommendationResponse(
            result=result,
            disclaimer=build_safety_disclaimer(len(result.recommendations), intensities),
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Recommendation failed")
        raise HTTPException(status_code=500, detail=f"Recommendation error: {str(e)}")
