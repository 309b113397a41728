import re
from decimal import Decimal, ROUND_HALF_UP
from .text_utils import count_words, strip_html
from ..scoring import issues as issue
from ..scoring.results import KeywordAnalysis, KeywordPlacementAnalysis

DENSITY_MIN_PERCENT = 0.5
DENSITY_MAX_PERCENT = 2.5
FIRST_PARAGRAPH_FALLBACK_CHARS = 200

HEADING_TEXT_RE = re.compile(r'<h([1-6])[^>]*>(.*?)</h\1\s*>', re.IGNORECASE | re.DOTALL)
PLACEMENT_PENALTY = 5


def format_percent(value: float) -> str:
    """One decimal, exact halves rounded up (same digits as JavaScript's toFixed(1))."""
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def count_keyword_occurrences(content: str, keyword: str) -> int:
    # Scans the raw markup, attribute values included.
    pattern = re.compile(re.escape(keyword.lower()), re.IGNORECASE)
    return len(pattern.findall(content))


def keyword_density(occurrences: int, keyword: str, total_words: int) -> float:
    if total_words <= 0:
        return 0.0
    keyword_words = len(keyword.split(' '))
    return (occurrences * keyword_words / total_words) * 100


def first_paragraph(content: str) -> str:
    end = content.find('</p>')
    if end == -1:
        return content[:FIRST_PARAGRAPH_FALLBACK_CHARS]
    return content[:end]


def analyze_keyword(content: str, keyword: str) -> KeywordAnalysis:
    content = content if isinstance(content, str) else ""
    score = 0
    issues = []

    occurrences = count_keyword_occurrences(content, keyword)
    density = keyword_density(occurrences, keyword, count_words(content))

    if density < DENSITY_MIN_PERCENT:
        issues.append(issue.warning(
            f"Keyword density is low ({format_percent(density)}%). Use your keyword more frequently."))
    elif density > DENSITY_MAX_PERCENT:
        issues.append(issue.warning(
            f"Keyword density is high ({format_percent(density)}%). Avoid keyword stuffing."))
        score += 5
    else:
        score += 15

    if keyword.lower() in first_paragraph(content).lower():
        score += 10
    else:
        issues.append(issue.suggestion("Include your focus keyword in the first paragraph."))

    return KeywordAnalysis(score=score, issues=tuple(issues), density=density, occurrences=occurrences)


def heading_texts(content: str) -> list:
    return [strip_html(inner) for _level, inner in HEADING_TEXT_RE.findall(content)]


def analyze_keyword_placement(content: str, keyword: str, url: str = "") -> KeywordPlacementAnalysis:
    """
    Checks where the focus keyword sits outside the body text.

    Scored on its own 0-100 scale; a missing heading or URL placement costs
    5 points each. The URL is only checked when one is supplied.
    """
    content = content if isinstance(content, str) else ""
    url = url if isinstance(url, str) else ""
    score = 100
    issues = []
    lower_keyword = keyword.lower()

    in_headings = any(lower_keyword in text.lower() for text in heading_texts(content))
    if not in_headings:
        issues.append(issue.suggestion(
            "Keyword not in subheadings. Consider adding the keyword to at least one subheading."))
        score -= PLACEMENT_PENALTY

    in_url = None
    if url:
        in_url = lower_keyword in url.lower()
        if not in_url:
            issues.append(issue.suggestion(
                "Keyword not in URL. Including the keyword in the URL can help with SEO."))
            score -= PLACEMENT_PENALTY

    return KeywordPlacementAnalysis(score=score, issues=tuple(issues), in_headings=in_headings, in_url=in_url)
