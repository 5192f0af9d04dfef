"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from glyph.api import advisors, algorithms, generate, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(algorithms.router)
api_router.include_router(generate.router)
api_router.include_router(advisors.router)
