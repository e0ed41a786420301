"""
Cleanse KB Protocol Filters

Selection over the protocol catalog by ailment, intensity, evidence tier,
region, category and client contraindication flags.

Version: protocol_filters_v1
"""

from .query import (
    WORLDWIDE,
    by_ailment,
    by_intensity,
    by_evidence,
    by_region,
    by_category,
    is_contraindicated,
    safe_for,
    query,
)

__all__ = [
    "WORLDWIDE",
    "by_ailment",
    "by_intensity",
    "by_evidence",
    "by_region",
    "by_category",
    "is_contraindicated",
    "safe_for",
    "query",
]

__version__ = "protocol_filters_v1"
