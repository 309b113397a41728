import re
from .text_utils import WHITESPACE_RE, strip_html, split_sentences, split_tokens
from ..scoring import issues as issue
from ..scoring.results import ReadabilityAnalysis, ReadabilityDetails

NON_LETTER_RE = re.compile(r'[^a-z\s\ufeff]')
SILENT_ENDING_RE = re.compile(r'(?:[^laeiouy]es|ed|[^laeiouy]e)$')
LEADING_Y_RE = re.compile(r'^y')
VOWEL_GROUP_RE = re.compile(r'[aeiouy]{1,2}')

# (minimum Flesch score, grade label, score contribution), easiest first
GRADE_LEVEL_BANDS = [
    (90, "5th grade", 15),
    (80, "6th grade", 15),
    (70, "7th grade", 15),
    (60, "8th-9th grade", 10),
    (50, "10th-12th grade", 10),
]
COLLEGE_LEVEL = ("College", 5)


def count_syllables(text: str) -> int:
    words = WHITESPACE_RE.split(NON_LETTER_RE.sub('', text.lower()))
    count = 0
    for word in words:
        if len(word) <= 3:
            count += 1
            continue
        word = SILENT_ENDING_RE.sub('', word)
        word = LEADING_Y_RE.sub('', word)
        count += len(VOWEL_GROUP_RE.findall(word)) or 1
    return count


def flesch_reading_ease(words: int, sentences: int, syllables: int) -> float:
    score = 206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words)
    return max(0.0, min(100.0, score))


def grade_level_for(flesch_score: float) -> tuple:
    for minimum, label, contribution in GRADE_LEVEL_BANDS:
        if flesch_score >= minimum:
            return label, contribution
    return COLLEGE_LEVEL


def analyze_readability(content: str) -> ReadabilityAnalysis:
    text = strip_html(content)
    if not text:
        return ReadabilityAnalysis()

    # Word tokens come from the stripped text, not from count_words().
    sentences = len(split_sentences(text))
    words = len(split_tokens(text))
    if sentences == 0 or words == 0:
        return ReadabilityAnalysis()

    flesch_score = flesch_reading_ease(words, sentences, count_syllables(text))
    label, contribution = grade_level_for(flesch_score)
    return ReadabilityAnalysis(score=contribution, flesch_score=flesch_score, grade_level=label)


# Passive voice heuristic: "was|were|be|been|being" + past participle ending with -ed (very rough)
PASSIVE_RE = re.compile(r"\b(was|were|be|been|being)\b\s+\b(\w+ed)\b")
TRANSITION_WORDS = [
    "however", "therefore", "moreover", "furthermore", "additionally",
    "consequently", "meanwhile", "nevertheless", "also", "first", "second", "finally",
]
TRANSITION_RE = re.compile(r"\b(?:" + "|".join(TRANSITION_WORDS) + r")\b")

MAX_AVG_SENTENCE_LENGTH = 25
MAX_PASSIVE_PERCENT = 20
MIN_TRANSITION_PERCENT = 20


def flesch_kincaid_grade(words: int, sentences: int, syllables: int) -> float:
    return max(0.0, 0.39 * (words / sentences) + 11.8 * (syllables / words) - 15.59)


def analyze_readability_details(content: str) -> ReadabilityDetails:
    """
    Sentence-level readability signals reported next to the Flesch score.

    Scored on its own 0-100 scale and never added to the content score.
    Passive voice and transition words are counted per sentence.
    """
    text = strip_html(content)
    if not text:
        return ReadabilityDetails()
    sentences = len(split_sentences(text))
    words = len(split_tokens(text))
    if sentences == 0 or words == 0:
        return ReadabilityDetails()

    syllables = count_syllables(text)
    avg_sentence = words / sentences
    lower_text = text.lower()
    passive_pct = len(PASSIVE_RE.findall(lower_text)) / sentences * 100
    transition_pct = len(TRANSITION_RE.findall(lower_text)) / sentences * 100
    flesch = flesch_reading_ease(words, sentences, syllables)

    score = 100
    issues = []
    if avg_sentence > MAX_AVG_SENTENCE_LENGTH:
        issues.append(issue.warning(
            "Sentences are too long. Try to keep sentences under 20-25 words for better readability."))
        score -= 15
    if flesch < 30:
        issues.append(issue.warning(
            "Content is very difficult to read. Simplify your language and use shorter sentences."))
        score -= 20
    elif flesch < 50:
        issues.append(issue.suggestion(
            "Content is fairly difficult to read. Consider simplifying some sentences."))
        score -= 10
    if passive_pct > MAX_PASSIVE_PERCENT:
        issues.append(issue.suggestion(
            "High use of passive voice. Try using more active voice for engaging content."))
        score -= 5
    if transition_pct < MIN_TRANSITION_PERCENT and sentences > 3:
        issues.append(issue.suggestion(
            "Few transition words. Use more transition words to improve flow."))
        score -= 5

    return ReadabilityDetails(
        score=max(0, score),
        issues=tuple(issues),
        flesch_kincaid_grade=round(flesch_kincaid_grade(words, sentences, syllables), 2),
        avg_sentence_length=round(avg_sentence, 2),
        avg_syllables_per_word=round(syllables / words, 2),
        passive_voice_percentage=round(passive_pct, 2),
        transition_word_percentage=round(transition_pct, 2),
    )
