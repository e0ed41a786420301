"""
Cleanse KB Protocol Catalog

The static, validated set of parasite cleanse protocols.

- Records are frozen pydantic models built once from PARASITE_CLEANSE_PROTOCOLS
- Per-record invariants are checked on construction, cross-record rules by validate_catalog()
- Any violation raises CatalogIntegrityError; the service does not start on a bad catalog

Version: protocol_catalog_v1
"""

from .models import (
    Category,
    Intensity,
    EvidenceTier,
    HerbDetail,
    ProtocolPhase,
    DurationRange,
    Effectiveness,
    Protocol,
    ReasonCode,
    CatalogIssue,
    CatalogIntegrityError,
    normalize_tag,
)
from .validate import validate_catalog
from .store import ProtocolCatalog, get_catalog, reset_catalog
from .protocols_data import PARASITE_CLEANSE_PROTOCOLS

__all__ = [
    "Category",
    "Intensity",
    "EvidenceTier",
    "HerbDetail",
    "ProtocolPhase",
    "DurationRange",
    "Effectiveness",
    "Protocol",
    "ReasonCode",
    "CatalogIssue",
    "CatalogIntegrityError",
    "normalize_tag",
    "validate_catalog",
    "ProtocolCatalog",
    "get_catalog",
    "reset_catalog",
    "PARASITE_CLEANSE_PROTOCOLS",
]

__version__ = "protocol_catalog_v1"
