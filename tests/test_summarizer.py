"""Tests for the cross-document summary."""

from archdraft.summarizer import (
    INTEGRATION_RISK,
    NEXT_STEPS,
    SCOPE_RISK,
    SECURITY_RISK,
    TESTING_RISK,
    condense_summary,
    infer_risks,
    limit_words,
    summarize_documents,
)
from archdraft.types import DocumentRecord

from .conftest import REQUIREMENTS_TEXT


def test_summarize_documents_empty():
    assert summarize_documents([]) == ""


def test_summarize_documents_section_order(documents):
    result = summarize_documents(documents)

    headings = [
        "## Combined Document Summary",
        "### Key Themes",
        "### Document Insights",
        "### Potential Risks and Gaps",
        "### Recommended Next Steps",
    ]
    positions = [result.index(heading) for heading in headings]
    assert positions == sorted(positions)
    assert result.startswith("## Combined Document Summary")
    assert result.endswith(NEXT_STEPS[-1])


def test_summarize_documents_lists_every_document(documents):
    result = summarize_documents(documents)

    assert "- **requirements.pdf**: The platform must expose a public API" in result
    assert "- **operations.docx**: " in result


def test_summarize_documents_risks_follow_themes(documents):
    result = summarize_documents(documents)

    assert SECURITY_RISK in result
    assert INTEGRATION_RISK in result
    assert SCOPE_RISK not in result
    # "Testing" appears in the operations document.
    assert TESTING_RISK not in result


def test_summarize_documents_flags_missing_testing():
    result = summarize_documents([DocumentRecord(file_name="req.pdf", extracted_content=REQUIREMENTS_TEXT)])

    assert TESTING_RISK in result


def test_summarize_documents_without_themes():
    result = summarize_documents([DocumentRecord(file_name="empty.txt", extracted_content="The and of it.")])

    assert "### Key Themes" not in result
    assert SCOPE_RISK in result
    assert TESTING_RISK in result


def test_summarize_documents_blank_content_has_no_risks():
    result = summarize_documents([DocumentRecord(file_name="blank.txt", extracted_content="")])

    assert "### Potential Risks and Gaps" not in result
    assert "- **blank.txt**: " in result
    assert "### Recommended Next Steps" in result


def test_summarize_documents_prefers_stored_summary():
    record = DocumentRecord(
        file_name="notes.txt",
        extracted_content="Ignored content here.",
        summary="- first point\n- second point\n\n- third point\n- fourth point",
    )

    result = summarize_documents([record])

    assert "- **notes.txt**: First point; Second point; Third point" in result
    assert "Fourth point" not in result


def test_summarize_documents_respects_word_budget(documents):
    result = summarize_documents(documents, max_words=10)

    words = result.split()
    assert len(words) == 10
    assert result.endswith("…")


def test_limit_words_leaves_short_text_untouched():
    assert limit_words("one two three", 3) == "one two three"
    assert limit_words("one  two\nthree four", 2) == "one two…"
    assert limit_words("   ", 5) == ""


def test_condense_summary_strips_bullets():
    assert condense_summary("- alpha\n-- beta\n  - gamma", 2) == "Alpha; Beta"
    assert condense_summary("", 3) == ""


def test_infer_risks_order():
    risks = infer_risks("security and api work", ["security", "api"])

    assert risks == [SECURITY_RISK, INTEGRATION_RISK, TESTING_RISK]


def test_infer_risks_blank_text():
    assert infer_risks("  ", []) == []
