"""Shared fixtures for the backend tests."""

from __future__ import annotations

import pytest
import requests
from requests.structures import CaseInsensitiveDict
from requests.utils import get_encoding_from_headers

import scraper

FULL_PAGE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Learn How to Build Better Websites Today</title>
  <meta name="description" content="Discover practical guidance on responsive websites, accessible layouts and fast pages so your small business can reach more customers online">
  <meta name="robots" content="index, follow">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link rel="canonical" href="https://example.com/guides/better-websites">
  <link rel="icon" href="/favicon.ico">
  <meta property="og:title" content="Build Better Websites">
  <meta property="og:description" content="A practical guide to modern web design.">
  <meta property="og:image" content="https://example.com/og.png">
  <meta property="og:url" content="https://example.com/guides/better-websites">
  <meta property="og:type" content="article">
  <meta property="og:site_name" content="Example Guides">
  <meta name="twitter:card" content="summary_large_image">
  <meta name="twitter:site" content="@example">
  <meta name="twitter:title" content="Build Better Websites">
  <meta name="twitter:description" content="A practical guide to modern web design.">
  <meta name="twitter:image" content="https://example.com/twitter.png">
  <meta name="twitter:creator" content="@author">
</head>
<body>
  <h1>
    Building Faster Websites With Modern Toolkits
  </h1>
  <p>Body copy.</p>
</body>
</html>
"""


class FakeResponse:
    """Stand-in for requests.Response with just what fetch_html reads.

    The encoding is derived from the headers the same way requests does it,
    so text/* without a charset starts out as ISO-8859-1.
    """

    def __init__(
        self,
        text: str = "",
        status_code: int = 200,
        content_type: str = "text/html; charset=utf-8",
        apparent_encoding: str | None = "utf-8",
    ) -> None:
        self.content = text.encode("utf-8")
        self.status_code = status_code
        self.headers = CaseInsensitiveDict({"Content-Type": content_type})
        self.encoding = get_encoding_from_headers(self.headers)
        self.apparent_encoding = apparent_encoding

    @property
    def text(self) -> str:
        return self.content.decode(self.encoding or "utf-8", errors="replace")

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=self)


@pytest.fixture
def full_page_html() -> str:
    return FULL_PAGE_HTML


@pytest.fixture
def fake_get(monkeypatch):
    """Route scraper's requests.get to a canned response or exception."""

    calls: list[dict] = []

    def install(result):
        def _get(url, **kwargs):
            calls.append({"url": url, **kwargs})
            if isinstance(result, Exception):
                raise result
            return result

        monkeypatch.setattr(scraper.requests, "get", _get)
        return calls

    return install
