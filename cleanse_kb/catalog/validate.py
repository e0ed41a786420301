"""
Protocol Catalog Validation
Cross-record integrity rules for the cleanse protocol catalog.

Per-record shape rules (ranges, phase sums, dosage units) are enforced by the
pydantic models. This pass covers what a single record cannot see on its own:

1. Protocol ids are unique across the catalog.
2. Intensive protocols list pregnancy as a contraindication.
3. The catalog is not empty.

Validation is pure: it returns every issue found and never raises.

Version: protocol_catalog_v1
"""

import logging
from typing import Dict, List, Sequence

from .models import (
    CatalogIssue,
    Intensity,
    Protocol,
    ReasonCode,
)

logger = logging.getLogger(__name__)

PREGNANCY_TAG = "pregnancy"


def _check_unique_ids(protocols: Sequence[Protocol]) -> List[CatalogIssue]:
    issues = []
    first_seen: Dict[str, int] = {}

    for index, protocol in enumerate(protocols):
        if protocol.id in first_seen:
            issues.append(CatalogIssue(
                protocol_id=protocol.id,
                index=index,
                reason_code=ReasonCode.DUPLICATE_ID,
                detail=f"id '{protocol.id}' already used at index {first_seen[protocol.id]}",
            ))
        else:
            first_seen[protocol.id] = index

    return issues


def _check_intensive_contraindications(protocols: Sequence[Protocol]) -> List[CatalogIssue]:
    issues = []
    for index, protocol in enumerate(protocols):
        if protocol.intensity != Intensity.INTENSIVE:
            continue
        if PREGNANCY_TAG not in protocol.normalized_contraindications:
            issues.append(CatalogIssue(
                protocol_id=protocol.id,
                index=index,
                reason_code=ReasonCode.INTENSIVE_WITHOUT_PREGNANCY_CONTRAINDICATION,
                detail="intensive protocol must list 'pregnancy' as a contraindication",
            ))
    return issues


def validate_catalog(protocols: Sequence[Protocol]) -> List[CatalogIssue]:
    """
    Run every cross-record check and return the issues found.

    An empty list means the catalog is valid.
    """
    if not protocols:
        return [CatalogIssue(
            reason_code=ReasonCode.EMPTY_CATALOG,
            detail="catalog contains no protocols",
        )]

    issues: List[CatalogIssue] = []
    issues.extend(_check_unique_ids(protocols))
    issues.extend(_check_intensive_contraindications(protocols))

    if issues:
        logger.debug(f"Catalog validation found {len(issues)} issue(s)")
    return issues
