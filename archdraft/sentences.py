"""Extractive single-document summaries built from scored sentences."""

from __future__ import annotations

import re
from collections import Counter
from typing import Dict, List

from .keywords import STOPWORDS, tokenize
from .types import SentenceScore


# Terminal punctuation, whitespace, then a capital letter or digit.
SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+(?=[A-Z0-9])")

DEFAULT_MAX_BULLETS = 5


def split_sentences(content: str) -> List[str]:
    normalized = (content or "").replace("\r", " ").replace("\n", " ")
    if not normalized.strip():
        return []
    parts = SENTENCE_BOUNDARY.split(normalized)
    return [part.strip() for part in parts if part.strip()]


def word_frequencies(sentences: List[str]) -> Dict[str, int]:
    counts: Counter[str] = Counter()
    for sentence in sentences:
        for token in tokenize(sentence):
            if token not in STOPWORDS:
                counts[token] += 1
    return dict(counts)


def score_sentence(sentence: str, frequencies: Dict[str, int]) -> float:
    """Summed corpus frequency of the sentence's words per character."""
    if not sentence.strip():
        return 0.0
    total = sum(frequencies.get(token, 0) for token in tokenize(sentence))
    return total / max(len(sentence), 1)


def score_sentences(sentences: List[str]) -> List[SentenceScore]:
    frequencies = word_frequencies(sentences)
    return [
        SentenceScore(index=idx, score=score_sentence(sentence, frequencies))
        for idx, sentence in enumerate(sentences)
    ]


def summarize_document(content: str, max_bullets: int = DEFAULT_MAX_BULLETS) -> str:
    """Pick the densest sentences and list them in document order.

    Returns an empty string when the content holds no sentences.
    """
    sentences = split_sentences(content)
    if not sentences:
        return ""

    ranked = sorted(score_sentences(sentences), key=lambda item: (-item.score, item.index))
    selected = sorted(item.index for item in ranked[: max(max_bullets, 0)])

    lines = [f"- {sentences[idx]}" for idx in selected]
    return "\n".join(lines).rstrip()
