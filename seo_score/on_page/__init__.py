"""On-Page markup checks.

Regex-based heading, image and link checks over raw HTML, plus the
title and meta description checks.
"""

from .headings_links_images import analyze_headings, analyze_images, analyze_links
from .title_meta import analyze_title, analyze_meta_description
