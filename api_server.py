"""
Cleanse KB API Server
Parasite cleanse protocol knowledge base and recommender.

The protocol catalog is built and validated when the app starts. A catalog
that fails integrity checks raises CatalogIntegrityError and the process does
not come up.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cleanse_kb.catalog.admin import router as catalog_router
from cleanse_kb.catalog.store import get_catalog
from cleanse_kb.config import API_VERSION, CATALOG_VERSION, CORS_ORIGINS, LOG_LEVEL
from cleanse_kb.filters.admin import router as filters_router
from cleanse_kb.health import router as health_router
from cleanse_kb.recommend.admin import router as recommend_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("cleanse_kb.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    catalog = get_catalog()
    logger.info(f"Cleanse KB API {API_VERSION} ready with {len(catalog)} protocols")
    yield


# ============================================
# App Configuration
# ============================================
app = FastAPI(
    title="Cleanse KB API",
    description="Parasite cleanse protocol catalog and recommender",
    version=API_VERSION,
    lifespan=lifespan,
)

# ============================================
# CORS Configuration
# ============================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# ============================================
# Routers
# ============================================
app.include_router(filters_router)
app.include_router(catalog_router)
app.include_router(recommend_router)
app.include_router(health_router)


# ============================================
# Core Endpoints
# ============================================
@app.get("/")
def root():
    return {
        "service": "Cleanse KB API",
        "version": API_VERSION,
        "catalog_version": CATALOG_VERSION,
        "status": "operational",
    }


@app.get("/health")
def health():
    return {"status": "healthy", "version": API_VERSION}
