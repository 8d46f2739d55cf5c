"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers.  Each resource router
defines its full path internally, so no prefixes are added here.
"""

from fastapi import APIRouter

from .endpoints import companies, info, selections

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(companies.router, tags=["companies"])
router.include_router(selections.router, tags=["selections"])
