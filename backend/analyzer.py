"""Analysis pipeline: fetch -> parse -> extract -> score."""

from bs4 import BeautifulSoup

from models import AnalysisResult
from scorer import analyze_seo
from scraper import extract_meta_tags, fetch_html, parse_html


def analyze_document(soup: BeautifulSoup) -> AnalysisResult:
    """Extract meta tags from an already parsed document and score them."""
    meta_tags = extract_meta_tags(soup)
    return AnalysisResult(meta_tags=meta_tags, seo_analysis=analyze_seo(meta_tags))


def analyze_html(html: str | bytes) -> AnalysisResult:
    """Parse raw HTML and analyze it. Raises MalformedDocumentError."""
    return analyze_document(parse_html(html))


def analyze_url(url: str) -> AnalysisResult:
    """
    Fetch `url` and analyze the page.
    Raises FetchError or MalformedDocumentError; analysis itself never fails.
    """
    return analyze_html(fetch_html(url))
