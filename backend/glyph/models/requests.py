"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    brand_name: str = Field(..., description="Brand name; also the generation seed")
    industry: str | None = Field(default=None, description="Industry hint (technology, food, finance, ...)")
    aesthetic: str | None = Field(default=None, description="Aesthetic hint (tech-minimal, playful, ...)")
    algorithm: str | None = Field(default=None, description="Force a specific algorithm id")
    variations: int = Field(default=1, ge=1, description="Number of logos to return (clamped server-side)")
    primary_color: str | None = Field(default=None, description="Primary hex color; omit for currentColor")
    accent_color: str | None = Field(default=None, description="Accent hex color")
    semantic: bool = Field(default=False, description="Bias algorithm choice by brand-name meaning")
    all_algorithms: bool = Field(default=False, description="Return one logo per registered algorithm")
    remember: bool = Field(
        default=False,
        description="Avoid repeating logos already returned for this brand in this process",
    )


class SemanticRequest(BaseModel):
    brand_name: str = Field(..., description="Brand name to analyze")
    industry: str | None = Field(default=None, description="Optional industry context")
    limit: int = Field(default=5, ge=1, le=12, description="Max algorithms to suggest")


class TypographyRequest(BaseModel):
    industry: str = Field(default="technology", description="Industry the brand operates in")
    style: str | None = Field(default=None, description="Style hint (minimal, bold, organic, ...)")
    seed: str | None = Field(default=None, description="Seed for a deterministic pick among top pairings")
    count: int = Field(default=1, ge=1, le=10, description="Number of distinct pairings")
