from ..scoring import issues as issue
from ..scoring.results import TitleAnalysis, MetaDescriptionAnalysis

TITLE_MIN_LENGTH = 30
TITLE_MAX_LENGTH = 60
TITLE_KEYWORD_MAX_POSITION = 20

DESC_MIN_LENGTH = 120
DESC_MAX_LENGTH = 160


def _as_text(value) -> str:
    return value if isinstance(value, str) else ""


def analyze_title(title: str, focus_keyword: str = "") -> TitleAnalysis:
    """
    Checks the SEO title's length and the focus keyword's presence and position.

    Scored on its own 0-100 scale; not part of the content score.
    """
    title = _as_text(title)
    focus_keyword = _as_text(focus_keyword)
    length = len(title)
    score = 100
    issues = []

    if length < TITLE_MIN_LENGTH:
        issues.append(issue.warning(
            f"Title is too short ({length} characters). "
            f"The title should be at least {TITLE_MIN_LENGTH} characters for better SEO."))
        score -= 15
    elif length > TITLE_MAX_LENGTH:
        issues.append(issue.warning(
            f"Title is too long ({length} characters). "
            f"The title exceeds {TITLE_MAX_LENGTH} characters and may be truncated in search results."))
        score -= 10

    keyword_position = None
    if focus_keyword:
        position = title.lower().find(focus_keyword.lower())
        if position == -1:
            issues.append(issue.critical(
                "Focus keyword not in title. The focus keyword should appear in the title for better rankings."))
            score -= 25
        else:
            keyword_position = position
            if position > TITLE_KEYWORD_MAX_POSITION:
                issues.append(issue.suggestion(
                    "Keyword not at start of title. Moving the keyword closer to the beginning may improve rankings."))
                score -= 5

    return TitleAnalysis(
        score=max(0, score),
        issues=tuple(issues),
        title=title,
        length=length,
        has_focus_keyword=keyword_position is not None,
        keyword_position=keyword_position,
    )


def analyze_meta_description(description: str, focus_keyword: str = "") -> MetaDescriptionAnalysis:
    description = _as_text(description)
    focus_keyword = _as_text(focus_keyword)

    if not description:
        return MetaDescriptionAnalysis(
            score=0,
            issues=(issue.critical(
                "No meta description. Add a meta description to control how your page appears in search results."),),
            description=None,
            length=0,
            has_focus_keyword=False,
        )

    length = len(description)
    score = 100
    issues = []
    if length < DESC_MIN_LENGTH:
        issues.append(issue.warning(
            f"Meta description is too short ({length} characters). "
            f"The description should be at least {DESC_MIN_LENGTH} characters."))
        score -= 15
    elif length > DESC_MAX_LENGTH:
        issues.append(issue.warning(
            f"Meta description is too long ({length} characters). "
            f"The description exceeds {DESC_MAX_LENGTH} characters and may be truncated."))
        score -= 10

    has_keyword = False
    if focus_keyword:
        has_keyword = focus_keyword.lower() in description.lower()
        if not has_keyword:
            issues.append(issue.warning(
                "Focus keyword not in meta description. Include your focus keyword in the meta description."))
            score -= 15

    return MetaDescriptionAnalysis(
        score=max(0, score),
        issues=tuple(issues),
        description=description,
        length=length,
        has_focus_keyword=has_keyword,
    )
