"""
Protocol Catalog Models

Pydantic models for cleanse protocol records and catalog integrity reporting.

Every record is frozen after construction. Per-record invariants are enforced
by validators here; cross-record rules live in validate.py.

Version: protocol_catalog_v1
"""

import re
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..shared.disclaimer import SafetyDisclaimer

MAX_DURATION_DAYS = 365
ID_PATTERN = r"^[a-z0-9-]+$"

# Dosage must carry a recognizable measurement
DOSAGE_UNIT_PATTERN = re.compile(
    r"\d\s*(mg|g)\b|\bdrops?\b|\bteaspoons?\b|\btablespoons?\b|\bcups?\b",
    re.IGNORECASE,
)


def normalize_tag(value: Optional[str]) -> str:
    """Normalize a tag for comparison. None becomes the empty string."""
    if value is None:
        return ""
    return str(getattr(value, "value", value)).strip().lower()


class Category(str, Enum):
    TRADITIONAL = "traditional"
    AYURVEDIC = "ayurvedic"
    MODERN = "modern"
    COMBINATION = "combination"


class Intensity(str, Enum):
    """Aggressiveness tier of a protocol."""
    GENTLE = "gentle"
    MODERATE = "moderate"
    INTENSIVE = "intensive"


class EvidenceTier(str, Enum):
    """Strength of supporting evidence, weakest first."""
    TRADITIONAL = "traditional"
    ANECDOTAL = "anecdotal"
    CLINICAL_STUDIES = "clinical_studies"
    WHO_APPROVED = "who_approved"


class HerbDetail(BaseModel):
    """A single herb (or compound) used by a protocol."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    latin_name: str = Field(..., min_length=1)
    dosage: str = Field(..., description="Dose with unit, e.g. '250-500mg', '1 tablespoon'")
    timing: str = Field(..., min_length=1)
    active_compounds: Tuple[str, ...] = Field(..., min_length=1)
    mechanism: str = Field(..., min_length=11, description="Mechanism of action")
    preparations: Tuple[str, ...] = Field(..., min_length=1)

    @field_validator("dosage")
    @classmethod
    def dosage_has_unit(cls, v: str) -> str:
        if not DOSAGE_UNIT_PATTERN.search(v or ""):
            raise ValueError(f"dosage '{v}' has no recognizable unit")
        return v

    @field_validator("active_compounds", "preparations")
    @classmethod
    def no_blank_entries(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if any(not item.strip() for item in v):
            raise ValueError("entries must be non-empty strings")
        return v


class ProtocolPhase(BaseModel):
    """One sequential phase of a protocol."""
    model_config = ConfigDict(frozen=True)

    phase: int = Field(..., ge=1, description="1-based sequence number")
    name: str = Field(..., min_length=1)
    duration: int = Field(..., gt=0, description="Days")
    herbs: Tuple[str, ...] = Field(default_factory=tuple)
    dietary_restrictions: Tuple[str, ...] = Field(default_factory=tuple)
    supportive_measures: Tuple[str, ...] = Field(default_factory=tuple)
    objective: str = Field(..., min_length=11)


class DurationRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    minimum: int = Field(..., gt=0, le=MAX_DURATION_DAYS)
    recommended: int = Field(..., gt=0, le=MAX_DURATION_DAYS)
    maximum: int = Field(..., gt=0, le=MAX_DURATION_DAYS)

    @model_validator(mode="after")
    def ordered(self) -> "DurationRange":
        if not (self.minimum <= self.recommended <= self.maximum):
            raise ValueError(
                f"duration must satisfy minimum <= recommended <= maximum "
                f"(got {self.minimum}/{self.recommended}/{self.maximum})"
            )
        return self


class Effectiveness(BaseModel):
    """Estimated efficacy (0-100) per organism class."""
    model_config = ConfigDict(frozen=True)

    protozoa: int = Field(..., ge=0, le=100)
    helminths: int = Field(..., ge=0, le=100)
    flukes: int = Field(..., ge=0, le=100)


class Protocol(BaseModel):
    """
    A parasite cleanse protocol.

    Immutable once built. Tag collections are tuples in authoring order;
    matching code normalizes them with normalize_tag().
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., pattern=ID_PATTERN)
    name: str = Field(..., min_length=6)
    description: str = Field(..., min_length=21)
    category: Category
    target_parasites: Tuple[str, ...] = Field(..., min_length=1)
    primary_herbs: Tuple[HerbDetail, ...] = Field(..., min_length=1)
    supporting_herbs: Tuple[HerbDetail, ...] = Field(default_factory=tuple)
    duration: DurationRange
    intensity: Intensity
    ailment_targets: Tuple[str, ...] = Field(..., min_length=1)
    contraindications: Tuple[str, ...] = Field(..., min_length=1)
    evidence: EvidenceTier
    protocol: Tuple[ProtocolPhase, ...] = Field(..., min_length=1)
    effectiveness: Effectiveness
    side_effects: Tuple[str, ...] = Field(..., min_length=1)
    regional_availability: Tuple[str, ...] = Field(..., min_length=1)

    @model_validator(mode="after")
    def phases_consistent(self) -> "Protocol":
        for position, phase in enumerate(self.protocol, start=1):
            if phase.phase != position:
                raise ValueError(
                    f"phase numbers must run 1..{len(self.protocol)} in order "
                    f"(position {position} has phase {phase.phase})"
                )

        total = self.total_phase_days
        if not (self.duration.minimum <= total <= self.duration.maximum):
            raise ValueError(
                f"phase durations sum to {total} days, outside "
                f"[{self.duration.minimum}, {self.duration.maximum}]"
            )
        return self

    @property
    def total_phase_days(self) -> int:
        return sum(p.duration for p in self.protocol)

    @property
    def normalized_ailments(self) -> frozenset:
        return frozenset(normalize_tag(t) for t in self.ailment_targets)

    @property
    def normalized_contraindications(self) -> frozenset:
        return frozenset(normalize_tag(t) for t in self.contraindications)

    @property
    def normalized_regions(self) -> frozenset:
        return frozenset(normalize_tag(t) for t in self.regional_availability)


# ============================================================
# INTEGRITY REPORTING
# ============================================================

class ReasonCode(str, Enum):
    """Why a catalog failed integrity checks."""
    INVALID_RECORD = "INVALID_RECORD"
    DUPLICATE_ID = "DUPLICATE_ID"
    INTENSIVE_WITHOUT_PREGNANCY_CONTRAINDICATION = "INTENSIVE_WITHOUT_PREGNANCY_CONTRAINDICATION"
    EMPTY_CATALOG = "EMPTY_CATALOG"


class CatalogIssue(BaseModel):
    protocol_id: Optional[str] = Field(None, description="Offending record id, when known")
    index: Optional[int] = Field(None, description="Position in the source definition")
    reason_code: ReasonCode
    detail: str


class CatalogIntegrityError(Exception):
    """Raised when the static catalog violates an invariant. Fatal at startup."""

    def __init__(self, issues: List[CatalogIssue]):
        self.issues = issues
        summary = "; ".join(
            f"{i.reason_code.value}[{i.protocol_id or i.index}]: {i.detail}" for i in issues[:5]
        )
        more = f" (+{len(issues) - 5} more)" if len(issues) > 5 else ""
        super().__init__(f"Protocol catalog failed integrity checks: {summary}{more}")


# ============================================================
# API RESPONSES
# ============================================================

class ProtocolListResponse(BaseModel):
    """List payload shared by every protocol listing endpoint."""
    success: bool = True
    count: int
    protocols: List[Protocol]
    disclaimer: SafetyDisclaimer


class ProtocolDetailResponse(BaseModel):
    success: bool = True
    protocol: Protocol
    total_phase_days: int
    disclaimer: SafetyDisclaimer


class TagListResponse(BaseModel):
    success: bool = True
    count: int
    tags: List[str]
