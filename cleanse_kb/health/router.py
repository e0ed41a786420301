"""
Catalog Health Check Endpoint
=============================
Reports whether the protocol catalog is loaded and what it contains.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from ..catalog.models import CatalogIntegrityError
from ..catalog.store import get_catalog
from ..config import API_VERSION, CATALOG_VERSION, ENVIRONMENT

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/health", tags=["Health"])


@router.get("/catalog")
def catalog_health():
    """
    Catalog status for deployment checks.

    A catalog that fails integrity checks reports status "error" with the
    reason codes instead of raising.
    """
    status = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "api_version": API_VERSION,
        "catalog_version": CATALOG_VERSION,
        "environment": ENVIRONMENT,
    }

    try:
        catalog = get_catalog()
        status.update({
            "status": "healthy",
            "protocol_count": len(catalog),
            "catalog_hash": catalog.catalog_hash,
            "summary": catalog.summary(),
        })
    except CatalogIntegrityError as e:
        logger.error(f"Catalog health check failed: {e}")
        status.update({
            "status": "error",
            "issues": [issue.model_dump(mode="json") for issue in e.issues],
        })

    return status
