"""Content analysis package.

Provides `ContentAnalyzer` orchestrating the length, keyword, heading, image,
link and readability checks implemented in sibling modules.
"""

from .analyzer import ContentAnalyzer, analyze
from .text_utils import count_words, strip_html
from .keywords import analyze_keyword, analyze_keyword_placement
from .readability import analyze_readability, analyze_readability_details
