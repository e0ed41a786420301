"""Cleanse KB Shared Utilities"""

from .hashing import (
    canonicalize,
    canonicalize_and_hash,
    verify_hash,
)
from .disclaimer import (
    SafetyDisclaimer,
    build_safety_disclaimer,
    choose_disclaimer_text,
)

__all__ = [
    "canonicalize",
    "canonicalize_and_hash",
    "verify_hash",
    "SafetyDisclaimer",
    "build_safety_disclaimer",
    "choose_disclaimer_text",
]
