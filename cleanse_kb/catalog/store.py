"""
Protocol Catalog Store
In-memory, read-only handle over the validated cleanse protocol dataset.

PRINCIPLE: the catalog is either fully valid or it does not exist.
A record that fails validation aborts construction with CatalogIntegrityError;
there is no partial catalog and no fallback dataset.

Lifecycle:
1. get_catalog() builds the process-wide catalog from PARASITE_CLEANSE_PROTOCOLS
   the first time it is called (api_server calls it at startup).
2. Every query receives the catalog handle explicitly.
3. reset_catalog() drops the instance (tests only).

Version: protocol_catalog_v1
"""

import logging
import threading
from collections import Counter
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from ..config import CATALOG_VERSION
from ..shared.hashing import canonicalize_and_hash
from .models import (
    CatalogIntegrityError,
    CatalogIssue,
    Protocol,
    ReasonCode,
    normalize_tag,
)
from .protocols_data import PARASITE_CLEANSE_PROTOCOLS
from .validate import validate_catalog

logger = logging.getLogger(__name__)


def _log_issues(issues: List[CatalogIssue]) -> None:
    for issue in issues:
        logger.error(
            f"Catalog integrity: {issue.reason_code.value} "
            f"id={issue.protocol_id} index={issue.index}: {issue.detail}"
        )


class ProtocolCatalog:
    """
    Ordered, immutable collection of Protocol records.

    Catalog order is the authoring order of the source definitions and is the
    order every query returns results in.
    """

    def __init__(self, protocols: Sequence[Protocol]):
        protocols = tuple(protocols)

        issues = validate_catalog(protocols)
        if issues:
            _log_issues(issues)
            raise CatalogIntegrityError(issues)

        self._protocols = protocols
        self._by_id: Dict[str, Protocol] = {p.id: p for p in protocols}
        self._hash = canonicalize_and_hash([p.model_dump(mode="json") for p in protocols])

    @classmethod
    def from_definitions(cls, definitions: Sequence[Mapping[str, Any]]) -> "ProtocolCatalog":
        """
        Build a catalog from raw dict definitions.

        Every record is validated; all failures are collected and raised together.

        Raises:
            CatalogIntegrityError: if any record is malformed or the set as a whole
                violates a cross-record rule.
        """
        protocols: List[Protocol] = []
        issues: List[CatalogIssue] = []

        for index, definition in enumerate(definitions):
            try:
                protocols.append(Protocol.model_validate(definition))
            except ValidationError as e:
                record_id = definition.get("id") if isinstance(definition, Mapping) else None
                for err in e.errors():
                    location = ".".join(str(part) for part in err.get("loc", ()))
                    issues.append(CatalogIssue(
                        protocol_id=record_id if isinstance(record_id, str) else None,
                        index=index,
                        reason_code=ReasonCode.INVALID_RECORD,
                        detail=f"{location or 'record'}: {err.get('msg')}",
                    ))

        if issues:
            _log_issues(issues)
            raise CatalogIntegrityError(issues)

        return cls(protocols)

    # ===== Accessors =====

    @property
    def protocols(self) -> List[Protocol]:
        """All protocols in catalog order (a new list on each call)."""
        return list(self._protocols)

    @property
    def catalog_hash(self) -> str:
        return self._hash

    def __len__(self) -> int:
        return len(self._protocols)

    def __iter__(self) -> Iterator[Protocol]:
        return iter(self._protocols)

    def get_by_id(self, protocol_id: Optional[str]) -> Optional[Protocol]:
        """Exact id lookup. Returns None for unknown, empty or None ids."""
        if not protocol_id or not isinstance(protocol_id, str):
            return None
        return self._by_id.get(protocol_id)

    def ids(self) -> List[str]:
        return [p.id for p in self._protocols]

    def ailment_tags(self) -> List[str]:
        """Sorted distinct ailment tags (normalized)."""
        return sorted({normalize_tag(t) for p in self._protocols for t in p.ailment_targets})

    def regions(self) -> List[str]:
        """Sorted distinct region tags (normalized)."""
        return sorted({normalize_tag(r) for p in self._protocols for r in p.regional_availability})

    def summary(self) -> Dict[str, Any]:
        """Counts by category, intensity and evidence tier."""
        return {
            "total": len(self._protocols),
            "by_category": dict(sorted(Counter(p.category.value for p in self._protocols).items())),
            "by_intensity": dict(sorted(Counter(p.intensity.value for p in self._protocols).items())),
            "by_evidence": dict(sorted(Counter(p.evidence.value for p in self._protocols).items())),
        }


# ============================================================
# PROCESS-WIDE INSTANCE
# ============================================================

_catalog: Optional[ProtocolCatalog] = None
_catalog_lock = threading.Lock()


def get_catalog() -> ProtocolCatalog:
    """
    Return the process-wide catalog, building it on first use.

    Raises:
        CatalogIntegrityError: if the bundled dataset is invalid. Fatal.
    """
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                catalog = ProtocolCatalog.from_definitions(PARASITE_CLEANSE_PROTOCOLS)
                logger.info(
                    f"Loaded {len(catalog)} cleanse protocols "
                    f"({CATALOG_VERSION}, {catalog.catalog_hash[:19]})"
                )
                _catalog = catalog
    return _catalog


def reset_catalog() -> None:
    """Drop the process-wide catalog (for testing)."""
    global _catalog
    with _catalog_lock:
        _catalog = None
