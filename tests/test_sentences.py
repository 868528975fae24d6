"""Tests for sentence splitting, scoring and single-document summaries."""

import pytest

from archdraft.sentences import score_sentences, split_sentences, summarize_document


def test_summarize_document_empty():
    assert summarize_document("") == ""
    assert summarize_document("   \n  ") == ""


def test_summarize_document_reference_example():
    content = "Apples are great. Bananas are tasty and very great indeed. Cats sleep a lot."

    assert summarize_document(content, 2) == "- Apples are great.\n- Cats sleep a lot."


def test_summarize_document_keeps_document_order():
    """The densest sentence comes second in the text and stays second."""
    content = (
        "Zebras run. Data data data. "
        "A long sentence with many filler words appears first here."
    )
    scores = {item.index: item.score for item in score_sentences(split_sentences(content))}
    assert scores[1] > scores[0] > scores[2]

    assert summarize_document(content, 2) == "- Zebras run.\n- Data data data."


def test_summarize_document_returns_all_when_few_sentences():
    content = "First point here. Second point here."

    assert summarize_document(content) == "- First point here.\n- Second point here."


def test_summarize_document_without_terminal_punctuation():
    assert summarize_document("no punctuation text") == "- no punctuation text"


def test_split_sentences_normalizes_line_breaks():
    assert split_sentences("First line\nstill first.\r\nSecond.") == [
        "First line still first.",
        "Second.",
    ]


def test_split_sentences_ignores_lowercase_continuations():
    assert split_sentences("Use e.g. the tool. Then stop.") == ["Use e.g. the tool.", "Then stop."]


def test_split_sentences_on_digits_and_marks():
    assert split_sentences("Is it ready? 3 teams agree! Ship it.") == [
        "Is it ready?",
        "3 teams agree!",
        "Ship it.",
    ]


def test_score_is_frequency_per_character():
    sentences = split_sentences("Apples are great. Bananas are tasty and very great indeed.")
    scores = score_sentences(sentences)

    assert scores[0].score == pytest.approx(3 / len("Apples are great."))
    assert scores[1].score == pytest.approx(5 / len("Bananas are tasty and very great indeed."))
