"""
Cleanse KB Canonical Hashing
Single source of truth for dataset and recommendation fingerprints.
"""

import hashlib
import json
from enum import Enum
from typing import Any

from pydantic import BaseModel

# Fields excluded from fingerprints (volatile/generated)
VOLATILE_FIELDS = frozenset([
    "generated_at",
    "timestamp",
    "processed_at",
    "recommendation_hash",
])


def _clean(o: Any, exclude_volatile: bool) -> Any:
    if isinstance(o, BaseModel):
        return _clean(o.model_dump(mode="json"), exclude_volatile)
    if isinstance(o, Enum):
        return o.value
    if isinstance(o, dict):
        return {
            str(k): _clean(v, exclude_volatile)
            for k, v in sorted(o.items(), key=lambda kv: str(kv[0]))
            if not (exclude_volatile and k in VOLATILE_FIELDS)
        }
    if isinstance(o, (list, tuple)):
        return [_clean(i, exclude_volatile) for i in o]
    if isinstance(o, (set, frozenset)):
        return sorted(_clean(i, exclude_volatile) for i in o)
    if isinstance(o, float):
        return round(o, 10)
    return o


def canonicalize(obj: Any, exclude_volatile: bool = True) -> str:
    """
    Convert object to canonical JSON string.

    Accepts plain containers and pydantic models. Sequence order is kept
    (it is meaningful for ranked output); sets and dict keys are sorted.
    """
    cleaned = _clean(obj, exclude_volatile)
    return json.dumps(cleaned, sort_keys=True, separators=(',', ':'), ensure_ascii=True)


def canonicalize_and_hash(obj: Any, exclude_volatile: bool = True) -> str:
    """
    Returns: "sha256:<64-char-hex>"
    """
    canonical = canonicalize(obj, exclude_volatile)
    digest = hashlib.sha256(canonical.encode('utf-8')).hexdigest()
    return f"sha256:{digest}"


def verify_hash(obj: Any, expected_hash: str, exclude_volatile: bool = True) -> bool:
    return canonicalize_and_hash(obj, exclude_volatile) == expected_hash
