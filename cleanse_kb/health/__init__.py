"""Cleanse KB health endpoints."""

from .router import router

__all__ = ["router"]
