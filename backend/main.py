"""SEO Meta Analyzer API – FastAPI app and endpoints."""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from analyzer import analyze_url
from config import CORS_ALLOW_ORIGINS, LOG_LEVEL
from schemas import AnalyzeRequest, AnalyzeResponse, HealthResponse
from scraper import FetchError, MalformedDocumentError

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(
    title="SEO Meta Analyzer API",
    description="Meta tag extraction and SEO scoring for a single page",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/analyze", response_model=AnalyzeResponse)
def analyze(body: AnalyzeRequest) -> AnalyzeResponse:
    """
    Pipeline: fetch page -> parse -> extract meta tags -> score -> return.
    """
    if not body.url:
        raise HTTPException(status_code=400, detail="URL is required")

    try:
        result = analyze_url(body.url)
    except FetchError as exc:
        logger.warning("Fetch failed for %s: %s", body.url, exc)
        raise HTTPException(status_code=502, detail=f"Failed to analyze website: {exc}") from exc
    except MalformedDocumentError as exc:
        logger.warning("Unparseable document at %s: %s", body.url, exc)
        raise HTTPException(status_code=422, detail=f"Failed to analyze website: {exc}") from exc

    logger.info("Analyzed %s: score %s", body.url, result.seo_analysis.score)
    return AnalyzeResponse(
        url=body.url,
        meta_tags=result.meta_tags,
        seo_analysis=result.seo_analysis,
    )


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Health check for deployment."""
    return HealthResponse(status="ok")
