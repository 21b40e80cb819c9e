"""Page fetcher and meta tag extractor.

Fetches a single URL, parses it with BeautifulSoup and extracts the
SEO-relevant head tags (title, description, canonical, robots, viewport,
favicon, Open Graph, Twitter Card) plus every H1 heading.
Does NOT crawl subpages or execute JavaScript.
"""

import logging
from html import unescape

import requests
from bs4 import BeautifulSoup

from config import FETCH_TIMEOUT_SECONDS, FETCH_USER_AGENT
from models import MetaTagSet, OpenGraphTags, TwitterCardTags

logger = logging.getLogger(__name__)

_REQUEST_HEADERS = {
    "User-Agent": FETCH_USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}

OG_FIELDS = ("title", "description", "image", "url", "type", "site_name")
TWITTER_FIELDS = ("card", "site", "title", "description", "image", "creator")


class AnalysisError(Exception):
    """Base class for failures that happen before analysis can run."""


class FetchError(AnalysisError):
    """The target URL could not be retrieved (network, non-2xx, timeout)."""

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class MalformedDocumentError(AnalysisError):
    """The fetched payload could not be parsed as HTML."""


def fetch_html(url: str, timeout: float = FETCH_TIMEOUT_SECONDS) -> str:
    """
    Fetch `url` and return the response body as text.
    Raises FetchError on network failure, timeout or a non-2xx status.
    """
    logger.debug("Fetching %s", url)
    try:
        response = requests.get(url, timeout=timeout, headers=_REQUEST_HEADERS)
    except requests.Timeout as exc:
        logger.warning("Timed out fetching %s after %s seconds", url, timeout)
        raise FetchError(url, f"Request timed out after {timeout:g} seconds") from exc
    except (requests.RequestException, ValueError) as exc:
        logger.warning("Could not fetch %s: %s", url, exc)
        raise FetchError(url, str(exc)) from exc

    try:
        response.raise_for_status()
    except requests.HTTPError as exc:
        logger.warning("Fetching %s returned status %s", url, response.status_code)
        raise FetchError(
            url,
            f"Request failed with status code {response.status_code}",
            status_code=response.status_code,
        ) from exc

    # requests assumes ISO-8859-1 for text/* without a charset
    if "charset" not in response.headers.get("Content-Type", "").lower():
        response.encoding = response.apparent_encoding or "utf-8"
    return response.text


def parse_html(html: str | bytes) -> BeautifulSoup:
    """Parse raw HTML into a queryable tree. Raises MalformedDocumentError."""
    if not isinstance(html, (str, bytes)):
        raise MalformedDocumentError(f"Expected HTML text, got {type(html).__name__}")
    try:
        return BeautifulSoup(html, "html.parser")
    except Exception as exc:
        raise MalformedDocumentError(f"Could not parse HTML: {exc}") from exc


def _first_attr(soup: BeautifulSoup, selector: str, attribute: str) -> str:
    tag = soup.select_one(selector)
    if tag is None:
        return ""
    return tag.get(attribute) or ""


def extract_meta_tags(soup: BeautifulSoup) -> MetaTagSet:
    """
    Build a MetaTagSet from a parsed document.
    Missing elements and attributes become empty strings; never raises.
    """
    # --- Title ---
    title_tag = soup.find("title")
    # title is raw text: markup inside it counts as characters, entities are decoded
    title = unescape(title_tag.decode_contents()) if title_tag is not None else ""

    # --- Favicon (icon first, then legacy "shortcut icon") ---
    favicon = _first_attr(soup, 'link[rel="icon"]', "href") or _first_attr(
        soup, 'link[rel="shortcut icon"]', "href"
    )

    # --- Social ---
    og = OpenGraphTags(
        **{field: _first_attr(soup, f'meta[property="og:{field}"]', "content") for field in OG_FIELDS}
    )
    twitter = TwitterCardTags(
        **{field: _first_attr(soup, f'meta[name="twitter:{field}"]', "content") for field in TWITTER_FIELDS}
    )

    # --- Headings ---
    h1_tags = tuple(h1.get_text().strip() for h1 in soup.find_all("h1"))

    return MetaTagSet(
        title=title,
        description=_first_attr(soup, 'meta[name="description"]', "content"),
        canonical=_first_attr(soup, 'link[rel="canonical"]', "href"),
        robots=_first_attr(soup, 'meta[name="robots"]', "content"),
        viewport=_first_attr(soup, 'meta[name="viewport"]', "content"),
        favicon=favicon,
        h1_tags=h1_tags,
        og=og,
        twitter=twitter,
    )
