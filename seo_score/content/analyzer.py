from ..base_module import SEOModule
from ..scoring import issues as issue
from ..scoring.results import AnalysisResult
from ..scoring.util import clamp_score, get_grade
from ..on_page.headings_links_images import analyze_headings, analyze_images, analyze_links
from .text_utils import count_words
from .keywords import analyze_keyword
from .readability import analyze_readability

MIN_WORD_COUNT = 300
LENGTH_SCORE = 15


def analyze(content: str, focus_keyword: str = "", site_hostname: str = "") -> AnalysisResult:
    """
    Scores one HTML fragment for on-page SEO.

    Each check runs on the raw content independently of the others; their
    score contributions are summed, rounded and clamped to 0-100. Issues keep
    the order length, keyword, headings, images, links.

    Args:
        content (str): HTML body from the editor. Non-strings count as empty.
        focus_keyword (str): Term to optimize for. Empty means none is set.
        site_hostname (str): Hostname of the current site, used to tell
            internal absolute links from external ones.

    Returns:
        AnalysisResult: score, grade, issues and the sub-analysis payloads.
    """
    content = content if isinstance(content, str) else ""
    focus_keyword = focus_keyword if isinstance(focus_keyword, str) else ""
    score = 0
    issues = []

    word_count = count_words(content)
    if word_count < MIN_WORD_COUNT:
        issues.append(issue.warning(
            f"Content is too short ({word_count} words). Aim for at least {MIN_WORD_COUNT} words."))
    else:
        score += LENGTH_SCORE

    keyword_analysis = None
    if focus_keyword:
        keyword_analysis = analyze_keyword(content, focus_keyword)
        score += keyword_analysis.score
        issues.extend(keyword_analysis.issues)
    else:
        issues.append(issue.critical("No focus keyword set. Set a focus keyword to optimize your content."))

    heading_analysis = analyze_headings(content)
    score += heading_analysis.score
    issues.extend(heading_analysis.issues)

    image_analysis = analyze_images(content)
    score += image_analysis.score
    issues.extend(image_analysis.issues)

    link_analysis = analyze_links(content, site_hostname)
    score += link_analysis.score
    issues.extend(link_analysis.issues)

    readability = analyze_readability(content)
    score += readability.score

    final_score = clamp_score(score)
    return AnalysisResult(
        score=final_score,
        grade=get_grade(final_score),
        issues=tuple(issues),
        keyword=keyword_analysis,
        readability=readability,
        word_count=word_count,
        headings=heading_analysis,
        images=image_analysis,
        links=link_analysis,
    )


class ContentAnalyzer(SEOModule):
    """Scores editor content; the site hostname comes from module config."""

    def __init__(self, config=None):
        super().__init__(config=config)
        self.content_config = self.config
        self.site_hostname = self.content_config.get("site_hostname", "") or ""

    def analyze(self, content: str, focus_keyword: str = "") -> AnalysisResult:
        return analyze(content, focus_keyword, site_hostname=self.site_hostname)
