"""
Protocol Catalog Endpoints

GET /api/v1/protocols                - List protocols (optional filters, intersected)
GET /api/v1/protocols/ailments       - Distinct ailment tags
GET /api/v1/protocols/regions        - Distinct region tags
GET /api/v1/protocols/{protocol_id}  - Single protocol (404 if unknown)

Version: protocol_catalog_v1
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from ..filters import query
from ..shared.disclaimer import build_safety_disclaimer
from .models import (
    Protocol,
    ProtocolDetailResponse,
    ProtocolListResponse,
    TagListResponse,
)
from .store import get_catalog

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/protocols",
    tags=["protocols"],
)


def protocol_list_response(protocols: List[Protocol]) -> ProtocolListResponse:
    """Wrap a filtered protocol list with its disclaimer block."""
    return ProtocolListResponse(
        count=len(protocols),
        protocols=protocols,
        disclaimer=build_safety_disclaimer(len(protocols), [p.intensity for p in protocols]),
    )


@router.get("", response_model=ProtocolListResponse)
async def list_protocols(
    ailment: Optional[str] = Query(None, description="Ailment tag, e.g. digestive_issues"),
    intensity: Optional[str] = Query(None, description="gentle | moderate | intensive"),
    evidence: Optional[str] = Query(None, description="traditional | anecdotal | clinical_studies | who_approved"),
    region: Optional[str] = Query(None, description="Region tag; worldwide protocols always match"),
    category: Optional[str] = Query(None, description="traditional | ayurvedic | modern | combination"),
):
    """
    List protocols in catalog order.

    Every supplied filter narrows the result; an unknown value yields an
    empty list rather than an error.
    """
    try:
        protocols = query(
            get_catalog(),
            ailment=ailment,
            intensity=intensity,
            evidence=evidence,
            region=region,
            category=category,
        )
        return protocol_list_response(protocols)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Protocol listing failed")
        raise HTTPException(status_code=500, detail=f"Protocol listing error: {str(e)}")


@router.get("/ailments", response_model=TagListResponse)
async def list_ailment_tags():
    tags = get_catalog().ailment_tags()
    return TagListResponse(count=len(tags), tags=tags)


@router.get("/regions", response_model=TagListResponse)
async def list_region_tags():
    tags = get_catalog().regions()
    return TagListResponse(count=len(tags), tags=tags)


@router.get("/{protocol_id}", response_model=ProtocolDetailResponse)
async def get_protocol(protocol_id: str):
    """Fetch one protocol by exact id."""
    protocol = get_catalog().get_by_id(protocol_id)
    if protocol is None:
        raise HTTPException(status_code=404, detail=f"Protocol not found: {protocol_id}")

    return ProtocolDetailResponse(
        protocol=protocol,
        total_phase_days=protocol.total_phase_days,
        disclaimer=build_safety_disclaimer(1, [protocol.intensity]),
    )
