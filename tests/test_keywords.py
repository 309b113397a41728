import pytest

from seo_score.content.keywords import (
    analyze_keyword, analyze_keyword_placement, count_keyword_occurrences, first_paragraph, format_percent,
)
from seo_score.scoring import WARNING, SUGGESTION


class TestKeywordOccurrences:
    def test_match_is_case_insensitive(self):
        assert count_keyword_occurrences("Coffee COFFEE coffee", "coffee") == 3

    def test_special_characters_are_literal(self):
        assert count_keyword_occurrences("I write C++ and c++ but not cxx", "c++") == 2

    def test_attribute_values_are_scanned(self):
        assert count_keyword_occurrences('<img alt="coffee cup"><p>coffee</p>', "coffee") == 2


class TestAnalyzeKeyword:
    def test_density_formula(self):
        result = analyze_keyword("foo foo foo bar", "foo")
        assert result.occurrences == 3
        assert result.density == pytest.approx(75.0)

    def test_high_density_is_keyword_stuffing(self):
        result = analyze_keyword("foo foo foo bar", "foo")
        assert result.score == 5 + 10
        assert result.issues[0].type == WARNING
        assert result.issues[0].message == "Keyword density is high (75.0%). Avoid keyword stuffing."

    def test_multi_word_keyword_weights_density(self):
        content = "<p>green tea</p> " + " ".join(["word"] * 98)
        result = analyze_keyword(content, "green tea")
        assert result.occurrences == 1
        assert result.density == pytest.approx(2.0)

    def test_low_density_scores_nothing(self):
        content = "<p>" + " ".join(["word"] * 300) + " coffee</p>"
        result = analyze_keyword(content, "coffee")
        assert result.density < 0.5
        assert result.score == 10
        assert [issue.type for issue in result.issues] == [WARNING]
        assert "Keyword density is low" in result.issues[0].message

    def test_density_in_band_with_keyword_in_first_paragraph(self):
        content = "<p>coffee " + " ".join(["word"] * 99) + "</p>"
        result = analyze_keyword(content, "coffee")
        assert result.density == pytest.approx(1.0)
        assert result.score == 25
        assert result.issues == ()

    def test_keyword_missing_from_first_paragraph(self):
        content = "<p>" + " ".join(["word"] * 99) + "</p><p>coffee</p>"
        result = analyze_keyword(content, "coffee")
        assert result.score == 15
        assert [issue.type for issue in result.issues] == [SUGGESTION]
        assert result.issues[0].message == "Include your focus keyword in the first paragraph."

    def test_first_paragraph_falls_back_to_leading_characters(self):
        content = "x " * 150 + "coffee"
        result = analyze_keyword(content, "coffee")
        assert result.score == 15
        assert result.issues[-1].type == SUGGESTION

    def test_empty_content(self):
        result = analyze_keyword("", "coffee")
        assert result.density == 0.0
        assert result.occurrences == 0
        assert result.score == 0


class TestFirstParagraph:
    def test_text_before_first_closing_paragraph(self):
        assert first_paragraph("<h1>T</h1><p>a</p><p>b</p>") == "<h1>T</h1><p>a"

    def test_without_paragraph_uses_200_characters(self):
        assert first_paragraph("y" * 500) == "y" * 200


class TestFormatPercent:
    @pytest.mark.parametrize("value,expected", [
        (0.0, "0.0"),
        (0.25, "0.3"),
        (6.25, "6.3"),
        (21.25, "21.3"),
        (75.0, "75.0"),
        (1.04, "1.0"),
    ])
    def test_exact_halves_round_up(self, value, expected):
        assert format_percent(value) == expected

    def test_density_message_rounds_half_up(self):
        content = "<p>" + "word " * 399 + "coffee</p>"
        result = analyze_keyword(content, "coffee")
        assert result.density == pytest.approx(0.25)
        assert result.issues[0].message == "Keyword density is low (0.3%). Use your keyword more frequently."


class TestKeywordPlacement:
    def test_keyword_in_heading_without_url(self):
        content = "<h1>Brew</h1><h2>Coffee <em>grinders</em></h2>"
        result = analyze_keyword_placement(content, "coffee")
        assert result.in_headings is True
        assert result.in_url is None
        assert result.score == 100
        assert result.issues == ()

    def test_keyword_only_in_url(self):
        result = analyze_keyword_placement("<h2>Beans</h2><p>coffee</p>", "coffee",
                                           url="https://example.com/coffee-guide")
        assert (result.in_headings, result.in_url) == (False, True)
        assert result.score == 95
        assert [issue.type for issue in result.issues] == [SUGGESTION]

    def test_keyword_missing_everywhere(self):
        result = analyze_keyword_placement("<h2>Beans</h2>", "coffee", url="https://example.com/guide")
        assert (result.in_headings, result.in_url) == (False, False)
        assert result.score == 90
        assert len(result.issues) == 2

    def test_unclosed_heading_is_ignored(self):
        assert analyze_keyword_placement("<h2>coffee", "coffee").in_headings is False
