"""SEO scoring rubric.

Runs a fixed, ordered list of independent checks over a MetaTagSet. Each
check awards a fraction of one slot (100 points / 15 slots) and appends
human-readable findings. The raw total is then curved so partial credit
counts for less than clean passes.
"""

import math
import re
from typing import Callable

from models import MAX_SCORE, MetaTagSet, SeoAnalysis

CHECK_COUNT = 15
POINTS_PER_CHECK = MAX_SCORE / CHECK_COUNT
SCORE_CURVE_EXPONENT = 1.2

CTA_PATTERN = re.compile(
    r"(learn|discover|find|get|read|view|see|check|explore|start|try|contact|call|download"
    r"|sign up|register|buy|shop|order|visit)",
    re.IGNORECASE,
)

REQUIRED_OG_TAGS = ("title", "description", "image", "url", "type")
REQUIRED_TWITTER_TAGS = ("card", "title", "description", "image")


class CheckReport:
    """Raw points and findings accumulated while the checks run."""

    def __init__(self) -> None:
        self.points = 0.0
        self.issues: list[str] = []
        self.recommendations: list[str] = []
        self.passes: list[str] = []

    def award(self, fraction: float) -> None:
        self.points += POINTS_PER_CHECK * fraction

    def fail(self, issue: str, recommendation: str) -> None:
        self.issues.append(issue)
        self.recommendations.append(recommendation)


def _word_count(text: str) -> int:
    return len(text.split())


def _check_title(tags: MetaTagSet, report: CheckReport) -> None:
    if not tags.title:
        report.fail(
            "Missing title tag (critical SEO issue)",
            "Add a descriptive title tag immediately - this is a fundamental SEO element",
        )
        return

    title_length = len(tags.title)
    if 30 <= title_length <= 55:
        report.award(0.6)
        report.passes.append("Title tag has optimal length (30-55 characters)")
    elif 55 < title_length < 60:
        report.award(0.3)
        report.fail(
            f"Title tag length ({title_length} characters) is slightly above optimal range",
            "Consider shortening title tag to 30-55 characters for better display in search results",
        )
    else:
        report.fail(
            f"Title tag length ({title_length} characters) is outside optimal range",
            "Title tag should be between 30-55 characters for optimal search display",
        )

    title_words = _word_count(tags.title)
    if 3 <= title_words <= 9:
        report.award(0.4)
        report.passes.append(f"Title contains {title_words} words (optimal is 3-9 words)")
    else:
        report.fail(
            f"Title contains {title_words} words (outside optimal range)",
            "Title should contain 3-9 words for better SEO performance",
        )


def _check_description(tags: MetaTagSet, report: CheckReport) -> None:
    if not tags.description:
        report.fail(
            "Missing meta description (critical SEO issue)",
            "Add a compelling meta description immediately - this significantly affects click-through rates",
        )
        return

    desc_length = len(tags.description)
    if 120 <= desc_length <= 155:
        report.award(1)
        report.passes.append("Meta description has optimal length (120-155 characters)")
    elif 110 <= desc_length < 120 or 155 < desc_length <= 165:
        report.award(0.5)
        report.fail(
            f"Meta description length ({desc_length} characters) is slightly outside optimal range",
            "Adjust meta description to 120-155 characters for optimal search display",
        )
    else:
        report.fail(
            f"Meta description length ({desc_length} characters) is far from optimal",
            "Meta description should be between 120-155 characters for optimal search display",
        )

    if CTA_PATTERN.search(tags.description):
        report.award(0.5)
        report.passes.append("Meta description contains a call to action")
    else:
        report.fail(
            "Meta description lacks a clear call to action",
            "Include a call to action in your meta description to improve click-through rates",
        )


def _check_canonical(tags: MetaTagSet, report: CheckReport) -> None:
    if not tags.canonical:
        report.fail(
            "Missing canonical URL (important for preventing duplicate content)",
            "Add a canonical URL to prevent duplicate content issues and consolidate link signals",
        )
    elif tags.canonical.startswith("http"):
        report.award(1)
        report.passes.append("Canonical URL is properly specified")
    else:
        report.award(0.3)
        report.fail(
            "Canonical URL is present but may not be properly formatted",
            "Ensure canonical URL uses absolute path with http/https protocol",
        )


def _check_robots(tags: MetaTagSet, report: CheckReport) -> None:
    if not tags.robots:
        report.fail(
            "Missing robots meta tag",
            'Add a robots meta tag with "index, follow" for optimal search engine crawling',
        )
        return

    robots = tags.robots.lower()
    if "noindex" in robots:
        report.award(0.3)
        report.fail(
            'Robots meta tag includes "noindex" directive - page will not be indexed',
            'Remove "noindex" directive if you want this page to appear in search results',
        )
    elif "index" in robots and "follow" in robots:
        report.award(1)
        report.passes.append("Robots meta tag properly configured for indexing and following links")
    else:
        report.award(0.7)
        report.passes.append("Robots meta tag is specified")
        report.recommendations.append('Consider using "index, follow" in robots meta tag for optimal crawling')


def _check_viewport(tags: MetaTagSet, report: CheckReport) -> None:
    if not tags.viewport:
        report.fail(
            "Missing viewport meta tag (critical for mobile SEO)",
            "Add a viewport meta tag for better mobile experience - mobile optimization is a ranking factor",
        )
    elif "width=device-width" in tags.viewport and "initial-scale=1" in tags.viewport:
        report.award(1)
        report.passes.append("Viewport meta tag is properly configured for responsive design")
    else:
        report.award(0.5)
        report.fail(
            "Viewport meta tag is present but may not be optimally configured",
            'Set viewport to "width=device-width, initial-scale=1" for proper mobile rendering',
        )


def _check_open_graph(tags: MetaTagSet, report: CheckReport) -> None:
    missing = [name for name in REQUIRED_OG_TAGS if not getattr(tags.og, name)]

    if not missing:
        report.award(1)
        report.passes.append("All essential Open Graph tags are implemented")
        if "placeholder" not in tags.og.image:
            report.recommendations.append(
                "Ensure Open Graph image is at least 1200×630 pixels for optimal display"
            )
    elif len(missing) <= 2:
        report.award(1 - len(missing) / len(REQUIRED_OG_TAGS))
        report.fail(
            f"Missing some Open Graph tags: {', '.join(missing)}",
            f"Add missing Open Graph tags: {', '.join(missing)} for better social sharing",
        )
    else:
        report.fail(
            "Several required Open Graph tags are missing",
            "Implement all essential Open Graph tags (title, description, image, url, type) "
            "for optimal social sharing",
        )


def _check_twitter(tags: MetaTagSet, report: CheckReport) -> None:
    missing = [name for name in REQUIRED_TWITTER_TAGS if not getattr(tags.twitter, name)]

    if not missing:
        report.award(1)
        report.passes.append("All essential Twitter Card tags are implemented")
        if tags.twitter.card == "summary_large_image":
            report.award(0.2)
            report.passes.append('Using optimal "summary_large_image" Twitter card type for better visibility')
        else:
            report.recommendations.append(
                'Consider using "summary_large_image" Twitter card type for better visibility'
            )
    elif len(missing) <= 2:
        report.award(1 - len(missing) / len(REQUIRED_TWITTER_TAGS))
        report.fail(
            f"Missing some Twitter Card tags: {', '.join(missing)}",
            f"Add missing Twitter Card tags: {', '.join(missing)} for better Twitter sharing",
        )
    else:
        report.fail(
            "Several required Twitter Card tags are missing",
            "Implement all essential Twitter Card tags (card, title, description, image) "
            "for optimal Twitter sharing",
        )


def _check_favicon(tags: MetaTagSet, report: CheckReport) -> None:
    if not tags.favicon:
        report.fail(
            "Missing favicon (affects brand recognition and professionalism)",
            "Add a favicon for better brand recognition and user experience",
        )
    elif tags.favicon.endswith((".ico", ".png")):
        report.award(1)
        report.passes.append("Favicon is properly specified")
    else:
        report.award(0.5)
        report.fail(
            "Favicon format may not be optimal",
            "Use .ico or .png format for favicon with multiple sizes (16x16, 32x32, 48x48)",
        )


def _check_h1(tags: MetaTagSet, report: CheckReport) -> None:
    h1_count = len(tags.h1_tags)
    if h1_count == 0:
        report.fail(
            "Missing H1 tag (critical SEO element)",
            "Add a single H1 tag that clearly describes the page content - this is a fundamental SEO element",
        )
        return
    if h1_count > 1:
        report.fail(
            f"Multiple H1 tags found ({h1_count}) - this is against SEO best practices",
            "Use exactly one H1 tag per page for optimal SEO structure",
        )
        return

    h1_text = tags.h1_tags[0]
    h1_length = len(h1_text)
    if 20 <= h1_length <= 70:
        report.award(0.7)
        report.passes.append("H1 tag has good length (20-70 characters)")
    else:
        report.fail(
            f"H1 tag length ({h1_length} characters) is not optimal",
            "H1 tag should be between 20-70 characters for better readability and SEO",
        )

    if 3 <= _word_count(h1_text) <= 10:
        report.award(0.3)
        report.passes.append("H1 tag has optimal word count (3-10 words)")
    else:
        report.recommendations.append("Aim for 3-10 words in your H1 tag for better readability and SEO")


def _check_uniqueness(tags: MetaTagSet, report: CheckReport) -> None:
    if not (tags.title and tags.description):
        return

    title_words = {word for word in tags.title.lower().split() if len(word) > 3}
    desc_words = {word for word in tags.description.lower().split() if len(word) > 3}
    common_words = title_words & desc_words
    # 0/0 stays undefined and falls through to the "too similar" branch
    similarity = len(common_words) / len(title_words) if title_words else math.nan

    if similarity < 0.4:
        report.award(1)
        report.passes.append("Title and meta description are sufficiently unique")
    elif similarity < 0.6:
        report.award(0.5)
        report.fail(
            "Title and meta description share too many keywords",
            "Reduce keyword overlap between title and description for better SEO diversity",
        )
    else:
        report.fail(
            "Title and meta description are too similar",
            "Create more diverse content between title and meta description",
        )


def _check_keyword_consistency(tags: MetaTagSet, report: CheckReport) -> None:
    if not (tags.title and tags.description and tags.h1_tags):
        return

    description = tags.description.lower()
    first_h1 = tags.h1_tags[0].lower()
    keywords_in_all = [
        word
        for word in tags.title.lower().split()
        if len(word) > 4 and word in description and word in first_h1
    ]

    if keywords_in_all:
        report.award(1)
        report.passes.append("Key terms are consistently used across title, description, and H1 tag")
    else:
        report.fail(
            "Inconsistent use of keywords across title, description, and H1 tag",
            "Ensure consistent use of key terms across title, meta description, and H1 tag",
        )


CHECKS: tuple[Callable[[MetaTagSet, CheckReport], None], ...] = (
    _check_title,
    _check_description,
    _check_canonical,
    _check_robots,
    _check_viewport,
    _check_open_graph,
    _check_twitter,
    _check_favicon,
    _check_h1,
    _check_uniqueness,
    _check_keyword_consistency,
)


def curve_score(points: float) -> int:
    """Apply the concave grading curve to raw points and clamp to 0..MAX_SCORE."""
    ratio = max(points, 0.0) / MAX_SCORE
    curved = math.floor(ratio**SCORE_CURVE_EXPONENT * MAX_SCORE + 0.5)
    return max(0, min(curved, MAX_SCORE))


def run_checks(tags: MetaTagSet) -> CheckReport:
    """Run every check in order and return the uncurved points with findings."""
    report = CheckReport()
    for check in CHECKS:
        check(tags, report)
    return report


def analyze_seo(tags: MetaTagSet) -> SeoAnalysis:
    """Score `tags` against the rubric. Total over every MetaTagSet; never raises."""
    report = run_checks(tags)

    return SeoAnalysis(
        score=curve_score(report.points),
        max_score=MAX_SCORE,
        issues=tuple(report.issues),
        recommendations=tuple(report.recommendations),
        passes=tuple(report.passes),
    )
