import pytest

from seo_score.on_page import analyze_title, analyze_meta_description
from seo_score.scoring import CRITICAL, WARNING, SUGGESTION, TitleAnalysis


class TestAnalyzeTitle:
    def test_good_title(self):
        result = analyze_title("Coffee brewing guide for beginners at home", "coffee")
        assert result == TitleAnalysis(
            score=100, issues=(), title="Coffee brewing guide for beginners at home",
            length=42, has_focus_keyword=True, keyword_position=0,
        )

    def test_too_short(self):
        result = analyze_title("Coffee tips", "coffee")
        assert result.score == 85
        assert result.issues[0].type == WARNING
        assert result.issues[0].message.startswith("Title is too short (11 characters).")

    def test_too_long(self):
        result = analyze_title("x" * 61)
        assert result.score == 90
        assert result.issues[0].message.startswith("Title is too long (61 characters).")

    def test_missing_keyword_is_critical(self):
        result = analyze_title("A complete guide to brewing better tea at home", "coffee")
        assert [issue.type for issue in result.issues] == [CRITICAL]
        assert result.score == 75
        assert result.has_focus_keyword is False
        assert result.keyword_position is None

    def test_keyword_far_from_start(self):
        result = analyze_title("The complete beginner guide to brewing coffee", "Coffee")
        assert result.keyword_position == 39
        assert [issue.type for issue in result.issues] == [SUGGESTION]
        assert result.score == 95

    def test_length_counts_characters(self):
        assert analyze_title("Café crème brûlée recipes for every season").length == 42

    def test_to_dict(self):
        payload = analyze_title("Coffee tips", "coffee").to_dict()
        assert set(payload) == {"score", "issues", "title", "length", "hasFocusKeyword", "keywordPosition"}


class TestAnalyzeMetaDescription:
    @pytest.mark.parametrize("description", ["", None])
    def test_missing_description(self, description):
        result = analyze_meta_description(description, "coffee")
        assert result.score == 0
        assert result.description is None
        assert [issue.type for issue in result.issues] == [CRITICAL]

    def test_good_description(self):
        result = analyze_meta_description("Coffee " + "x" * 123, "coffee")
        assert result.length == 130
        assert result.has_focus_keyword is True
        assert result.issues == ()
        assert result.score == 100

    def test_too_short(self):
        result = analyze_meta_description("Fresh coffee tips.", "coffee")
        assert result.score == 85
        assert result.issues[0].message.startswith("Meta description is too short (18 characters).")

    def test_too_long_without_keyword(self):
        result = analyze_meta_description("y" * 170, "coffee")
        assert [issue.type for issue in result.issues] == [WARNING, WARNING]
        assert result.score == 75
        assert result.to_dict()["hasFocusKeyword"] is False

    def test_no_keyword_set(self):
        result = analyze_meta_description("z" * 140)
        assert result.has_focus_keyword is False
        assert result.score == 100
