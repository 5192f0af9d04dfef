"""POST /api/semantics and POST /api/typography — brand advisors."""

from __future__ import annotations

from fastapi import APIRouter

from glyph.advisors.semantics import analyze_semantics, semantic_algorithms, semantic_context
from glyph.advisors.typography import (
    FontInfo,
    pairing_rationale,
    select_typography_pairing,
    typography_variations,
)
from glyph.models.requests import SemanticRequest, TypographyRequest
from glyph.models.responses import FontModel, SemanticResponse, TypographyChoiceModel, TypographyResponse

router = APIRouter()


@router.post("/semantics", response_model=SemanticResponse)
async def semantics(req: SemanticRequest) -> SemanticResponse:
    analysis = analyze_semantics(req.brand_name, req.industry)
    return SemanticResponse(
        brand_name=req.brand_name,
        industry=analysis.industry,
        keywords=[m.word for m in analysis.matched_keywords],
        shapes=analysis.combined_shapes,
        recommended_algorithms=analysis.recommended_algorithms,
        algorithms=semantic_algorithms(req.brand_name, req.industry, seed=req.brand_name, limit=req.limit),
        context=semantic_context(req.brand_name, req.industry),
    )


def _font_model(info: FontInfo) -> FontModel:
    return FontModel(
        name=info.name,
        classification=info.classification,
        personality=list(info.personality),
        best_for=list(info.best_for),
        description=info.description,
    )


@router.post("/typography", response_model=TypographyResponse)
async def typography(req: TypographyRequest) -> TypographyResponse:
    if req.count > 1:
        choices = typography_variations(req.industry, count=req.count, style=req.style, seed=req.seed or "")
    else:
        choices = [select_typography_pairing(req.industry, req.style, seed=req.seed)]

    return TypographyResponse(
        choices=[
            TypographyChoiceModel(
                pairing_id=c.pairing.id,
                pairing_name=c.pairing.name,
                display=_font_model(c.display),
                body=_font_model(c.body),
                score=c.score,
                reason=c.reason,
                rationale=pairing_rationale(c.display.name, c.body.name),
            )
            for c in choices
        ]
    )
