"""On-page SEO content scoring.

`analyze` scores an HTML fragment against an optional focus keyword;
`ContentAnalyzer` wraps it as a configurable module.
"""

from .content import ContentAnalyzer, analyze, count_words
from .scoring import get_grade, get_score_color
