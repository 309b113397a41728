from .issues import Issue, CRITICAL, WARNING, SUGGESTION
from .results import (
    AnalysisResult, KeywordAnalysis, HeadingAnalysis, ImageAnalysis, LinkAnalysis, ReadabilityAnalysis,
    TitleAnalysis, MetaDescriptionAnalysis, KeywordPlacementAnalysis, ReadabilityDetails,
)
from .util import clamp_score, get_grade, get_score_color
