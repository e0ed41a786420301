"""
Protocol Recommender

Condition tags → ranked cleanse protocols.

ALGORITHM:
1. Deduplicate the caller's conditions (case-insensitive, first spelling wins)
2. Score every protocol by how many distinct conditions it targets; drop score 0
3. Optional region gate (worldwide protocols always pass)
4. Optional contraindication gate (client flags such as pregnancy)
5. Stable sort by score, highest first; ties keep catalog order
6. Keep the top MAX_RECOMMENDATIONS

The recommender is pure: same catalog and inputs give the same output.

Version: protocol_recommender_v1
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ..catalog.models import Protocol, normalize_tag
from ..catalog.store import ProtocolCatalog
from ..filters.query import by_region, is_contraindicated
from ..shared.hashing import canonicalize_and_hash
from .models import Recommendation, RecommendationAudit, RecommendationResult

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 5


@dataclass
class _RankingRun:
    """Intermediate state of one ranking pass, kept for the audit block."""
    distinct: Dict[str, str] = field(default_factory=OrderedDict)
    candidates: int = 0
    excluded_by_region: int = 0
    excluded_by_contraindication: int = 0
    recommendations: List[Recommendation] = field(default_factory=list)


def _distinct_conditions(conditions: Optional[Iterable[Optional[str]]]) -> Dict[str, str]:
    """normalized tag -> caller's literal tag, in first-seen order."""
    if isinstance(conditions, str):
        conditions = [conditions]
    distinct: Dict[str, str] = OrderedDict()
    for condition in conditions or []:
        tag = normalize_tag(condition)
        if tag and tag not in distinct:
            distinct[tag] = condition
    return distinct


def _score(protocol: Protocol, distinct: Dict[str, str]) -> List[str]:
    """Literal condition tags the protocol targets."""
    targets = protocol.normalized_ailments
    return [literal for tag, literal in distinct.items() if tag in targets]


def _rank(
    catalog: ProtocolCatalog,
    conditions: Optional[Iterable[Optional[str]]],
    region: Optional[str],
    exclude_flags: Optional[Iterable[Optional[str]]],
) -> _RankingRun:
    run = _RankingRun(distinct=_distinct_conditions(conditions))
    if not run.distinct:
        return run

    region_ids = None
    if normalize_tag(region):
        region_ids = {p.id for p in by_region(catalog, region)}
    if isinstance(exclude_flags, str):
        exclude_flags = [exclude_flags]
    flags = [f for f in (exclude_flags or []) if normalize_tag(f)]

    scored: List[Recommendation] = []
    for protocol in catalog:
        matched = _score(protocol, run.distinct)
        if not matched:
            continue
        run.candidates += 1

        if region_ids is not None and protocol.id not in region_ids:
            run.excluded_by_region += 1
            continue
        if flags and is_contraindicated(protocol, flags):
            run.excluded_by_contraindication += 1
            continue

        scored.append(Recommendation(
            protocol=protocol,
            match_score=len(matched),
            matched_conditions=matched,
            match_percent=round(len(matched) / len(run.distinct) * 100, 2),
            reasoning=f"Targets {', '.join(matched)}",
        ))

    # sorted() is stable: equal scores stay in catalog order
    scored = sorted(scored, key=lambda r: r.match_score, reverse=True)
    run.recommendations = scored[:MAX_RECOMMENDATIONS]
    return run


def get_recommendations(
    catalog: ProtocolCatalog,
    conditions: Optional[Iterable[Optional[str]]],
    region: Optional[str] = None,
    exclude_flags: Optional[Iterable[Optional[str]]] = None,
) -> List[Recommendation]:
    """
    Rank protocols for a client's conditions.

    Args:
        catalog: The protocol catalog.
        conditions: Ailment tags, any case. Duplicates count once.
        region: When given, only protocols available there (or worldwide).
        exclude_flags: Client flags; protocols contraindicated for any are dropped.

    Returns:
        At most MAX_RECOMMENDATIONS recommendations, best match first.
        Empty list when nothing matches or no conditions were given.
    """
    return _rank(catalog, conditions, region, exclude_flags).recommendations


def compute_recommendation_hash(
    recommendations: List[Recommendation],
    unmatched_conditions: List[str],
) -> str:
    """Hash of the ranked ids, scores and matched tags. Ranking order is significant."""
    return canonicalize_and_hash({
        "recommendations": [
            {
                "protocol_id": r.protocol.id,
                "match_score": r.match_score,
                "matched_conditions": r.matched_conditions,
            }
            for r in recommendations
        ],
        "unmatched_conditions": unmatched_conditions,
    })


def build_recommendation_result(
    catalog: ProtocolCatalog,
    conditions: Optional[Iterable[Optional[str]]],
    region: Optional[str] = None,
    exclude_flags: Optional[Iterable[Optional[str]]] = None,
) -> RecommendationResult:
    """
    Recommendations plus unmatched conditions, audit trail and hash.

    Same ranking as get_recommendations().
    """
    if isinstance(conditions, str):
        conditions = [conditions]
    if isinstance(exclude_flags, str):
        exclude_flags = [exclude_flags]
    conditions = list(conditions or [])
    exclude_flags = list(exclude_flags or [])
    run = _rank(catalog, conditions, region, exclude_flags)

    covered = {normalize_tag(c) for r in run.recommendations for c in r.matched_conditions}
    unmatched = [literal for tag, literal in run.distinct.items() if tag not in covered]

    audit = RecommendationAudit(
        conditions_received=len(conditions),
        distinct_conditions=len(run.distinct),
        candidates_considered=run.candidates,
        excluded_by_region=run.excluded_by_region,
        excluded_by_contraindication=run.excluded_by_contraindication,
        returned=len(run.recommendations),
        region_applied=normalize_tag(region) or None,
        exclude_flags_applied=sorted({normalize_tag(f) for f in exclude_flags} - {""}),
    )

    logger.info(
        f"Recommendations: {audit.returned} returned from {audit.candidates_considered} candidates "
        f"({audit.distinct_conditions} conditions, region={audit.region_applied})"
    )

    return RecommendationResult(
        recommendations=run.recommendations,
        unmatched_conditions=unmatched,
        recommendation_hash=compute_recommendation_hash(run.recommendations, unmatched),
        audit=audit,
    )
