"""Tests for the fetch -> parse -> extract -> score pipeline."""

from __future__ import annotations

import pytest
import requests
from pydantic import ValidationError

from analyzer import analyze_document, analyze_html, analyze_url
from conftest import FakeResponse
from models import AnalysisResult, MetaTagSet
from scraper import AnalysisError, FetchError, MalformedDocumentError, parse_html


def test_analyze_html_returns_tags_and_analysis(full_page_html: str) -> None:
    result = analyze_html(full_page_html)

    assert isinstance(result, AnalysisResult)
    assert result.meta_tags.title == "Learn How to Build Better Websites Today"
    assert result.seo_analysis.score == 74


def test_analyze_document_matches_analyze_html(full_page_html: str) -> None:
    assert analyze_document(parse_html(full_page_html)) == analyze_html(full_page_html)


def test_page_without_tags_still_produces_an_analysis() -> None:
    result = analyze_html("<html><body><p>Nothing to see</p></body></html>")

    assert result.meta_tags == MetaTagSet()
    assert result.seo_analysis.score == 0
    assert "Missing H1 tag (critical SEO element)" in result.seo_analysis.issues


def test_analyze_url_fetches_then_scores(fake_get, full_page_html: str) -> None:
    calls = fake_get(FakeResponse(text=full_page_html))

    result = analyze_url("https://example.com/guides/better-websites")

    assert calls[0]["url"] == "https://example.com/guides/better-websites"
    assert result.seo_analysis.score == 74


def test_analyze_url_surfaces_fetch_errors(fake_get) -> None:
    fake_get(requests.ConnectionError("boom"))

    with pytest.raises(FetchError):
        analyze_url("https://unreachable.example")


def test_pipeline_errors_share_a_base_class() -> None:
    assert issubclass(FetchError, AnalysisError)
    assert issubclass(MalformedDocumentError, AnalysisError)


def test_result_serializes_with_wire_names(full_page_html: str) -> None:
    payload = analyze_html(full_page_html).model_dump(by_alias=True)

    assert set(payload) == {"metaTags", "seoAnalysis"}
    assert payload["metaTags"]["h1Tags"] == ("Building Faster Websites With Modern Toolkits",)
    assert payload["metaTags"]["og"]["site_name"] == "Example Guides"
    assert payload["seoAnalysis"]["maxScore"] == 100


def test_records_are_immutable(full_page_html: str) -> None:
    result = analyze_html(full_page_html)

    with pytest.raises(ValidationError):
        result.meta_tags.title = "changed"  # type: ignore[misc]
