"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    generators_registered: int = 0


class AlgorithmInfoModel(BaseModel):
    id: str
    name: str
    description: str = ""
    inspiration: str = ""
    tags: list[str] = Field(default_factory=list)


class QualityModel(BaseModel):
    overall: float
    path_smoothness: float
    visual_balance: float
    complexity: float
    golden_ratio: float
    uniqueness: float
    degenerate: bool = False
    notes: list[str] = Field(default_factory=list)


class AnimationModel(BaseModel):
    preset: str
    duration_ms: int
    easing: str
    stagger_ms: int = 0


class LogoModel(BaseModel):
    svg: str
    algorithm: str
    hash: str
    seed: str
    variation: int = 0
    quality: float = 0.0
    complexity: float = 0.0
    accepted: bool = True
    attempts: int = 1
    report: QualityModel | None = None
    animation: AnimationModel | None = None


class GenerateResponse(BaseModel):
    logos: list[LogoModel] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class HistoryClearedResponse(BaseModel):
    brand: str
    cleared: int = 0


class SemanticResponse(BaseModel):
    brand_name: str
    industry: str | None = None
    keywords: list[str] = Field(default_factory=list)
    shapes: list[str] = Field(default_factory=list)
    recommended_algorithms: list[str] = Field(default_factory=list)
    algorithms: list[str] = Field(default_factory=list)
    context: str = ""


class FontModel(BaseModel):
    name: str
    classification: str
    personality: list[str] = Field(default_factory=list)
    best_for: list[str] = Field(default_factory=list)
    description: str = ""


class TypographyChoiceModel(BaseModel):
    pairing_id: str
    pairing_name: str
    display: FontModel
    body: FontModel
    score: int = 0
    reason: str = ""
    rationale: str = ""


class TypographyResponse(BaseModel):
    choices: list[TypographyChoiceModel] = Field(default_factory=list)
