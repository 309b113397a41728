"""Value objects produced by a single content analysis.

Every object is frozen and built once per call. Issue sequences are tuples
and heading counts a read-only mapping, so results are hashable and cannot
be changed in place. ``to_dict`` emits the camelCase payload rendered by the
editor and stored by persistence.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Any, List, Mapping, Optional, Tuple

from .issues import Issue


def _issues_to_dicts(issues: Tuple[Issue, ...]) -> List[Dict[str, Any]]:
    return [issue.to_dict() for issue in issues]


def frozen_mapping(values: Mapping[str, int]) -> Mapping[str, int]:
    return MappingProxyType(dict(values))


@dataclass(frozen=True)
class KeywordAnalysis:
    score: int
    issues: Tuple[Issue, ...]
    density: float  # percent
    occurrences: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "issues": _issues_to_dicts(self.issues),
            "density": self.density,
            "occurrences": self.occurrences,
        }


@dataclass(frozen=True)
class HeadingAnalysis:
    score: int
    issues: Tuple[Issue, ...]
    # Read-only view; left out of the hash since mappings are unhashable.
    structure: Mapping[str, int] = field(hash=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "issues": _issues_to_dicts(self.issues),
            "structure": dict(self.structure),
        }


@dataclass(frozen=True)
class ImageAnalysis:
    score: int
    issues: Tuple[Issue, ...]
    total: int
    with_alt: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "issues": _issues_to_dicts(self.issues),
            "total": self.total,
            "withAlt": self.with_alt,
        }


@dataclass(frozen=True)
class LinkAnalysis:
    score: int
    issues: Tuple[Issue, ...]
    internal: int
    external: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "issues": _issues_to_dicts(self.issues),
            "internal": self.internal,
            "external": self.external,
        }


@dataclass(frozen=True)
class ReadabilityAnalysis:
    score: int = 0
    flesch_score: float = 0.0
    grade_level: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "fleschScore": self.flesch_score,
            "gradeLevel": self.grade_level,
        }


@dataclass(frozen=True)
class AnalysisResult:
    score: int
    grade: str
    issues: Tuple[Issue, ...]
    keyword: Optional[KeywordAnalysis]
    readability: ReadabilityAnalysis
    word_count: int = 0
    headings: Optional[HeadingAnalysis] = None
    images: Optional[ImageAnalysis] = None
    links: Optional[LinkAnalysis] = None

    def issues_of_type(self, issue_type: str) -> List[Issue]:
        return [issue for issue in self.issues if issue.type == issue_type]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "grade": self.grade,
            "issues": _issues_to_dicts(self.issues),
            "keyword": self.keyword.to_dict() if self.keyword else None,
            "readability": self.readability.to_dict(),
            "wordCount": self.word_count,
            "headings": self.headings.to_dict() if self.headings else None,
            "images": self.images.to_dict() if self.images else None,
            "links": self.links.to_dict() if self.links else None,
        }


# Supplementary checks: reported next to an AnalysisResult, never added to its score.

@dataclass(frozen=True)
class TitleAnalysis:
    score: int  # 0-100
    issues: Tuple[Issue, ...]
    title: str
    length: int
    has_focus_keyword: bool
    keyword_position: Optional[int]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "issues": _issues_to_dicts(self.issues),
            "title": self.title,
            "length": self.length,
            "hasFocusKeyword": self.has_focus_keyword,
            "keywordPosition": self.keyword_position,
        }


@dataclass(frozen=True)
class MetaDescriptionAnalysis:
    score: int  # 0-100
    issues: Tuple[Issue, ...]
    description: Optional[str]
    length: int
    has_focus_keyword: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "issues": _issues_to_dicts(self.issues),
            "description": self.description,
            "length": self.length,
            "hasFocusKeyword": self.has_focus_keyword,
        }


@dataclass(frozen=True)
class KeywordPlacementAnalysis:
    score: int  # 0-100
    issues: Tuple[Issue, ...]
    in_headings: bool
    in_url: Optional[bool]  # None when no URL was supplied

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "issues": _issues_to_dicts(self.issues),
            "inHeadings": self.in_headings,
            "inUrl": self.in_url,
        }


@dataclass(frozen=True)
class ReadabilityDetails:
    score: int = 100  # 0-100
    issues: Tuple[Issue, ...] = ()
    flesch_kincaid_grade: float = 0.0
    avg_sentence_length: float = 0.0
    avg_syllables_per_word: float = 0.0
    passive_voice_percentage: float = 0.0
    transition_word_percentage: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "issues": _issues_to_dicts(self.issues),
            "fleschKincaidGrade": self.flesch_kincaid_grade,
            "avgSentenceLength": self.avg_sentence_length,
            "avgSyllablesPerWord": self.avg_syllables_per_word,
            "passiveVoicePercentage": self.passive_voice_percentage,
            "transitionWordPercentage": self.transition_word_percentage,
        }
