"""Data models and types used across the backend.

Request/response bodies for the HTTP layer are in schemas.py.
Records produced by the extractor and the scorer live here.
"""

from pydantic import BaseModel, ConfigDict, Field

MAX_SCORE = 100


class _Record(BaseModel):
    """Immutable record; every field has an empty default."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class OpenGraphTags(_Record):
    """Open Graph properties (og:*). Empty string means the tag is absent."""

    title: str = ""
    description: str = ""
    image: str = ""
    url: str = ""
    type: str = ""
    site_name: str = ""


class TwitterCardTags(_Record):
    """Twitter Card properties (twitter:*). Empty string means the tag is absent."""

    card: str = ""
    site: str = ""
    title: str = ""
    description: str = ""
    image: str = ""
    creator: str = ""


class MetaTagSet(_Record):
    """Normalized SEO tags extracted from a single page."""

    title: str = ""
    description: str = ""
    canonical: str = ""
    robots: str = ""
    viewport: str = ""
    favicon: str = ""
    h1_tags: tuple[str, ...] = Field(default=(), alias="h1Tags")
    og: OpenGraphTags = Field(default_factory=OpenGraphTags)
    twitter: TwitterCardTags = Field(default_factory=TwitterCardTags)


class SeoAnalysis(_Record):
    """Score and findings for a MetaTagSet."""

    score: int = Field(default=0, ge=0, le=MAX_SCORE)
    max_score: int = Field(default=MAX_SCORE, alias="maxScore")
    issues: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    passes: tuple[str, ...] = ()


class AnalysisResult(_Record):
    """Output of one pipeline run: the extracted tags and their analysis."""

    meta_tags: MetaTagSet = Field(alias="metaTags")
    seo_analysis: SeoAnalysis = Field(alias="seoAnalysis")
