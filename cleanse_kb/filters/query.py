"""
Protocol Filters
Pure selection functions over a ProtocolCatalog.

RULES:
1. Matching is case-insensitive on both sides (strip + lower-case).
2. Unknown, empty or None input returns [], never raises.
3. Results keep catalog order and are new lists on every call.
4. A protocol available "worldwide" matches every region.

Version: protocol_filters_v1
"""

import logging
from enum import Enum
from typing import Callable, Iterable, List, Optional, Type

from ..catalog.models import (
    Category,
    EvidenceTier,
    Intensity,
    Protocol,
    normalize_tag,
)
from ..catalog.store import ProtocolCatalog

logger = logging.getLogger(__name__)

WORLDWIDE = "worldwide"


def _select(catalog: ProtocolCatalog, predicate: Callable[[Protocol], bool]) -> List[Protocol]:
    return [p for p in catalog if predicate(p)]


def _coerce_enum(enum_cls: Type[Enum], value: Optional[str]) -> Optional[Enum]:
    """Map a free-form string onto a closed vocabulary, or None if it is not in it."""
    tag = normalize_tag(value)
    if not tag:
        return None
    try:
        return enum_cls(tag)
    except ValueError:
        logger.warning(f"Unknown {enum_cls.__name__} value '{value}'; returning no protocols")
        return None


def by_ailment(catalog: ProtocolCatalog, tag: Optional[str]) -> List[Protocol]:
    """Protocols whose ailment targets include the tag."""
    wanted = normalize_tag(tag)
    if not wanted:
        return []
    return _select(catalog, lambda p: wanted in p.normalized_ailments)


def by_intensity(catalog: ProtocolCatalog, level: Optional[str]) -> List[Protocol]:
    """Protocols of exactly the given intensity. Unknown level returns []."""
    intensity = _coerce_enum(Intensity, level)
    if intensity is None:
        return []
    return _select(catalog, lambda p: p.intensity == intensity)


def by_evidence(catalog: ProtocolCatalog, tier: Optional[str]) -> List[Protocol]:
    """Protocols of exactly the given evidence tier. Unknown tier returns []."""
    evidence = _coerce_enum(EvidenceTier, tier)
    if evidence is None:
        return []
    return _select(catalog, lambda p: p.evidence == evidence)


def by_region(catalog: ProtocolCatalog, region: Optional[str]) -> List[Protocol]:
    """
    Protocols available in the region.

    "worldwide" protocols are included for every region, including region
    names the catalog has never seen. None or empty region returns [].
    """
    wanted = normalize_tag(region)
    if not wanted:
        return []
    return _select(
        catalog,
        lambda p: wanted in p.normalized_regions or WORLDWIDE in p.normalized_regions,
    )


def by_category(catalog: ProtocolCatalog, category: Optional[str]) -> List[Protocol]:
    """Protocols in the given category. Unknown category returns []."""
    wanted = _coerce_enum(Category, category)
    if wanted is None:
        return []
    return _select(catalog, lambda p: p.category == wanted)


def is_contraindicated(protocol: Protocol, flags: Iterable[Optional[str]]) -> bool:
    """True when any client flag appears among the protocol's contraindications."""
    if isinstance(flags, str):
        flags = [flags]
    wanted = {normalize_tag(f) for f in flags} - {""}
    return bool(wanted & protocol.normalized_contraindications)


def safe_for(catalog: ProtocolCatalog, flags: Optional[Iterable[Optional[str]]]) -> List[Protocol]:
    """
    Protocols not contraindicated for any of the client's flags.

    No flags means nothing is excluded.
    """
    if isinstance(flags, str):
        flags = [flags]
    flags = list(flags or [])
    return _select(catalog, lambda p: not is_contraindicated(p, flags))


def query(
    catalog: ProtocolCatalog,
    ailment: Optional[str] = None,
    intensity: Optional[str] = None,
    evidence: Optional[str] = None,
    region: Optional[str] = None,
    category: Optional[str] = None,
) -> List[Protocol]:
    """
    Intersection of every filter that was supplied (None means not supplied).

    With no filters the whole catalog is returned.
    """
    selected = catalog.protocols
    criteria = [
        (ailment, by_ailment),
        (intensity, by_intensity),
        (evidence, by_evidence),
        (region, by_region),
        (category, by_category),
    ]

    for value, selector in criteria:
        if value is None:
            continue
        keep = {p.id for p in selector(catalog, value)}
        selected = [p for p in selected if p.id in keep]
        if not selected:
            break

    return selected
