from __future__ import annotations

from collections import Counter
import re

from resume_checker.core.scoring import get_scoring_value

_LINE_BREAK_RE = re.compile(r"[\n\r]+")
# ASCII word characters only: accented letters are treated as separators.
_NON_WORD_RE = re.compile(r"[^\w\s]", re.ASCII)

STOPWORDS = frozenset(
    {
        "and", "the", "a", "an", "to", "of", "for", "with", "in",
        "on", "or", "by", "is", "are", "as", "be", "at", "from",
    }
)


def normalize(text: str | None) -> str:
    cleaned = _LINE_BREAK_RE.sub(" ", text or "")
    cleaned = _NON_WORD_RE.sub(" ", cleaned)
    return cleaned.lower()


def tokenize(text: str | None) -> list[str]:
    return normalize(text).split()


def keyword_counts(text: str | None) -> Counter[str]:
    """Count candidate keywords, keeping first-seen order for equal counts."""
    min_length = int(get_scoring_value("keywords.min_length", 3))
    return Counter(
        token
        for token in tokenize(text)
        if len(token) >= min_length and token not in STOPWORDS
    )


def extract_keywords(text: str | None, limit: int | None = None) -> list[str]:
    if limit is None:
        limit = int(get_scoring_value("keywords.limit", 30))
    if limit <= 0:
        return []
    # most_common() is stable, so ties keep first-seen order.
    return [word for word, _count in keyword_counts(text).most_common(limit)]
