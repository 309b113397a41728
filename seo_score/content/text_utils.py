import re

TAG_RE = re.compile(r'<[^>]*>')
# U+FEFF (BOM / zero-width no-break space) is whitespace for browsers but not for Python's \s.
WHITESPACE_RE = re.compile(r'[\s\ufeff]+')
SENTENCE_END_RE = re.compile(r'[.!?]+')


def _as_text(value) -> str:
    return value if isinstance(value, str) else ""


def is_blank(text: str) -> bool:
    return not WHITESPACE_RE.sub('', text)


def strip_html(html: str) -> str:
    """Replace tags with spaces, collapse whitespace and trim."""
    text = TAG_RE.sub(' ', _as_text(html))
    return WHITESPACE_RE.sub(' ', text).strip(' ')


def count_words(html: str) -> int:
    cleaned = strip_html(html)
    return len(cleaned.split(' ')) if cleaned else 0


def split_sentences(text: str) -> list:
    """Split plain text on runs of sentence terminators, dropping blank fragments."""
    fragments = SENTENCE_END_RE.split(_as_text(text))
    return [fragment for fragment in fragments if not is_blank(fragment)]


def split_tokens(text: str) -> list:
    """Whitespace tokens of already-stripped text."""
    return WHITESPACE_RE.split(_as_text(text))
