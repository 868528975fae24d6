"""Frequency based keyword extraction over stopword-filtered tokens."""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterator, List

from .types import Keyword


WORD_PATTERN = re.compile(r"[\u00C0-\u024F\w']+")

STOPWORDS = frozenset(
    {
        "a", "an", "the", "and", "or", "for", "of", "to", "in", "on", "by",
        "with", "is", "are", "was", "were", "be", "been", "being", "from",
        "that", "this", "it", "as", "at", "into", "about", "over", "through",
        "between", "after", "before", "above", "below", "up", "down", "out",
        "off", "again", "further", "then", "once", "here", "there", "when",
        "where", "why", "how", "all", "any", "both", "each", "few", "more",
        "most", "other", "some", "such", "no", "nor", "not", "only", "own",
        "same", "so", "than", "too", "very", "can", "will", "just",
    }
)

MIN_KEYWORD_LENGTH = 3


def tokenize(text: str) -> Iterator[str]:
    """Yield lowercase word tokens, stopwords included."""
    for match in WORD_PATTERN.finditer(text or ""):
        yield match.group(0).lower()


def rank_keywords(text: str, limit: int) -> List[Keyword]:
    """Most frequent tokens first, ties in alphabetical order."""
    if limit <= 0:
        return []
    counts: Counter[str] = Counter()
    for token in tokenize(text):
        if len(token) < MIN_KEYWORD_LENGTH or token in STOPWORDS:
            continue
        counts[token] += 1
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [Keyword(word=word, frequency=count) for word, count in ranked[:limit]]


def extract_keywords(text: str, max_keywords: int) -> List[str]:
    return [keyword.word for keyword in rank_keywords(text, max_keywords)]
