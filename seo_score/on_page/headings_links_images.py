import re
from urllib.parse import urlparse
from ..scoring import issues as issue
from ..scoring.results import HeadingAnalysis, ImageAnalysis, LinkAnalysis, frozen_mapping

# Regex heuristics, not a DOM parse: malformed markup just yields fewer matches.
HEADING_RES = {f"h{level}": re.compile(rf'<h{level}[^>]*>', re.IGNORECASE) for level in range(1, 7)}
IMG_RE = re.compile(r'<img[^>]*>', re.IGNORECASE)
ALT_RE = re.compile(r'''alt=["']([^"']*)''', re.IGNORECASE)
LINK_HREF_RE = re.compile(r'''<a[^>]*?href=["']([^"']*)''', re.IGNORECASE)

ABSOLUTE_PREFIXES = ('http://', 'https://')
SITE_RELATIVE_PREFIXES = ('/', '#')


def analyze_headings(content: str) -> HeadingAnalysis:
    content = content if isinstance(content, str) else ""
    score = 0
    issues = []
    structure = {name: len(pattern.findall(content)) for name, pattern in HEADING_RES.items()}

    h1_count = structure["h1"]
    if h1_count == 0:
        issues.append(issue.warning("No H1 heading found. Add a main heading to your content."))
    elif h1_count > 1:
        issues.append(issue.warning(
            f"Multiple H1 headings found ({h1_count}). Use only one H1 per page."))
    else:
        score += 10

    if structure["h2"] + structure["h3"] >= 2:
        score += 10
    else:
        issues.append(issue.suggestion("Add more subheadings (H2, H3) to structure your content."))

    return HeadingAnalysis(score=score, issues=tuple(issues), structure=frozen_mapping(structure))


def has_alt_text(img_tag: str) -> bool:
    match = ALT_RE.search(img_tag)
    return bool(match and match.group(1))


def analyze_images(content: str) -> ImageAnalysis:
    content = content if isinstance(content, str) else ""
    score = 0
    issues = []
    images = IMG_RE.findall(content)
    total = len(images)
    with_alt = sum(1 for img in images if has_alt_text(img))

    if total == 0:
        issues.append(issue.suggestion("Consider adding images to make your content more engaging."))
    else:
        score += 5
        if with_alt < total:
            issues.append(issue.warning(f"{total - with_alt} image(s) missing alt text."))
        else:
            score += 5

    return ImageAnalysis(score=score, issues=tuple(issues), total=total, with_alt=with_alt)


def _host_of(href: str) -> str:
    try:
        return (urlparse(href).hostname or "").lower()
    except ValueError:
        return ""


def classify_href(href: str, site_hostname: str) -> str | None:
    """Return 'internal', 'external', or None for hrefs that are neither (mailto:, bare paths)."""
    if href.startswith(ABSOLUTE_PREFIXES):
        site = (site_hostname or "").lower()
        if site and _host_of(href) == site:
            return "internal"
        return "external"
    if href.startswith(SITE_RELATIVE_PREFIXES):
        return "internal"
    return None


def analyze_links(content: str, site_hostname: str = "") -> LinkAnalysis:
    content = content if isinstance(content, str) else ""
    score = 0
    issues = []
    internal = 0
    external = 0

    for href in LINK_HREF_RE.findall(content):
        kind = classify_href(href, site_hostname)
        if kind == "internal":
            internal += 1
        elif kind == "external":
            external += 1

    if internal == 0:
        issues.append(issue.suggestion("Add internal links to other content on your site."))
    else:
        score += 5

    if external > 0:
        score += 5

    return LinkAnalysis(score=score, issues=tuple(issues), internal=internal, external=external)
