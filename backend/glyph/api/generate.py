"""POST /api/generate — logo generation; DELETE /api/generate/history/{brand}."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException

from glyph.dependencies import get_engine, get_history_store
from glyph.engine.engine import GeneratedLogo, GenerateOptions, LogoEngine
from glyph.engine.store import InMemoryHashStore
from glyph.models.requests import GenerateRequest
from glyph.models.responses import (
    AnimationModel,
    GenerateResponse,
    HistoryClearedResponse,
    LogoModel,
    QualityModel,
)

router = APIRouter()


def _to_model(logo: GeneratedLogo) -> LogoModel:
    meta = logo.metadata
    return LogoModel(
        svg=logo.svg,
        algorithm=logo.algorithm,
        hash=logo.hash,
        seed=logo.seed,
        variation=logo.variation,
        quality=meta.quality,
        complexity=meta.complexity,
        accepted=meta.accepted,
        attempts=meta.attempts,
        report=QualityModel(**meta.report.to_dict()),
        animation=AnimationModel(
            preset=logo.animation.preset,
            duration_ms=logo.animation.duration_ms,
            easing=logo.animation.easing,
            stagger_ms=logo.animation.stagger_ms,
        ),
    )


@router.post("/generate", response_model=GenerateResponse)
async def generate(
    req: GenerateRequest,
    engine: LogoEngine = Depends(get_engine),
    history: InMemoryHashStore = Depends(get_history_store),
) -> GenerateResponse:
    start = time.perf_counter()

    options = GenerateOptions(
        industry=req.industry,
        aesthetic=req.aesthetic,
        algorithm=req.algorithm,
        variations=req.variations,
        primary_color=req.primary_color,
        accent_color=req.accent_color,
        semantic=req.semantic,
    )
    store = history if req.remember else None

    try:
        if req.all_algorithms:
            logos = engine.generate_all(req.brand_name, options, store=store)
        else:
            logos = engine.generate(req.brand_name, options, store=store)
    except ValueError as e:
        # Bad hex color or unknown algorithm id
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000

    return GenerateResponse(
        logos=[_to_model(logo) for logo in logos],
        processing_time_ms=round(elapsed, 1),
    )


@router.delete("/generate/history/{brand}", response_model=HistoryClearedResponse)
async def clear_history(
    brand: str,
    history: InMemoryHashStore = Depends(get_history_store),
) -> HistoryClearedResponse:
    cleared = len(history.hashes(brand))
    history.clear(brand)
    return HistoryClearedResponse(brand=brand, cleared=cleared)
