"""GET /api/algorithms — registered generator catalogue."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from glyph.dependencies import get_engine
from glyph.engine.engine import LogoEngine
from glyph.models.responses import AlgorithmInfoModel

router = APIRouter()


@router.get("/algorithms", response_model=list[AlgorithmInfoModel])
async def algorithms(engine: LogoEngine = Depends(get_engine)) -> list[AlgorithmInfoModel]:
    return [
        AlgorithmInfoModel(
            id=info.id,
            name=info.name,
            description=info.description,
            inspiration=info.inspiration,
            tags=list(info.tags),
        )
        for info in engine.list_algorithms()
    ]
