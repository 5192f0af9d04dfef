"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from glyph.config import settings
from glyph.engine.registry import register_builtin_generators

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.glyph_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Glyph",
        description="Deterministic parametric logo engine: brand name in, SVG marks out",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all generator modules to trigger registration
    register_builtin_generators()

    from glyph.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
