"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under a unified prefix.
When new endpoint groups are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import instruments

router = APIRouter()

router.include_router(instruments.router, prefix="/instrumentos", tags=["instrumentos"])
