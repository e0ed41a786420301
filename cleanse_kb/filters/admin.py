"""
Protocol Filter Endpoints

GET /api/v1/protocols/by-ailment/{tag}     - Protocols targeting an ailment
GET /api/v1/protocols/by-intensity/{level} - Protocols of an intensity tier
GET /api/v1/protocols/by-evidence/{tier}   - Protocols of an evidence tier
GET /api/v1/protocols/by-region/{region}   - Protocols available in a region (worldwide always included)

Unknown values are not errors: they return 200 with an empty list.

Version: protocol_filters_v1
"""

import logging

from fastapi import APIRouter, HTTPException

from ..catalog.admin import protocol_list_response
from ..catalog.models import ProtocolListResponse
from ..catalog.store import get_catalog
from .query import by_ailment, by_evidence, by_intensity, by_region

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/protocols",
    tags=["protocol-filters"],
)


@router.get("/by-ailment/{tag}", response_model=ProtocolListResponse)
async def protocols_by_ailment(tag: str):
    try:
        return protocol_list_response(by_ailment(get_catalog(), tag))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Ailment filter failed for '{tag}'")
        raise HTTPException(status_code=500, detail=f"Filter error: {str(e)}")


@router.get("/by-intensity/{level}", response_model=ProtocolListResponse)
async def protocols_by_intensity(level: str):
    try:
        return protocol_list_response(by_intensity(get_catalog(), level))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Intensity filter failed for '{level}'")
        raise HTTPException(status_code=500, detail=f"Filter error: {str(e)}")


@router.get("/by-evidence/{tier}", response_model=ProtocolListResponse)
async def protocols_by_evidence(tier: str):
    try:
        return protocol_list_response(by_evidence(get_catalog(), tier))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Evidence filter failed for '{tier}'")
        raise HTTPException(status_code=500, detail=f"Filter error: {str(e)}")


@router.get("/by-region/{region}", response_model=ProtocolListResponse)
async def protocols_by_region(region: str):
    """Region match, plus every protocol available worldwide."""
    try:
        return protocol_list_response(by_region(get_catalog(), region))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Region filter failed for '{region}'")
        raise HTTPException(status_code=500, detail=f"Filter error: {str(e)}")
