"""
Cleanse KB Runtime Configuration

Environment-driven settings for the API host. Anything that changes query
semantics (result caps, the worldwide region tag) lives with the code that
uses it, not here.
"""

import os
from typing import List

API_VERSION = "1.2.0"
CATALOG_VERSION = "parasite_cleanse_v1"

ENVIRONMENT = os.getenv("CLEANSE_KB_ENV", "development")
LOG_LEVEL = os.getenv("CLEANSE_KB_LOG_LEVEL", "INFO").upper()
PORT = int(os.getenv("PORT", "8000"))


def _parse_origins(raw: str) -> List[str]:
    if raw.strip() == "*":
        return ["*"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


CORS_ORIGINS = _parse_origins(os.getenv("CLEANSE_KB_CORS_ORIGINS", "*"))
