"""Pydantic schemas for API request/response."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models import MetaTagSet, SeoAnalysis


class AnalyzeRequest(BaseModel):
    """Request body for POST /analyze."""

    url: str = ""

    @field_validator("url", mode="before")
    @classmethod
    def normalize_url(cls, value: object) -> str:
        return str(value or "").strip()


class AnalyzeResponse(BaseModel):
    """Response for POST /analyze."""

    model_config = ConfigDict(populate_by_name=True)

    url: str
    meta_tags: MetaTagSet = Field(alias="metaTags")
    seo_analysis: SeoAnalysis = Field(alias="seoAnalysis")


class HealthResponse(BaseModel):
    """Response for GET /health."""

    status: str = "ok"
