"""Cross-document synthesis: themes, condensed insights, risks, next steps."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .keywords import extract_keywords
from .sentences import summarize_document
from .types import DocumentRecord


DEFAULT_MAX_WORDS = 800
THEME_LIMIT = 8
INSIGHT_SEGMENTS = 3
ELLIPSIS = "…"

SECURITY_RISK = "Security requirements appear frequently; ensure controls are designed and validated early."
INTEGRATION_RISK = "Integration points need interface contracts and failure-handling strategies."
SCOPE_RISK = "Clarify the primary business goals to focus the solution scope."
TESTING_RISK = "Testing expectations are unclear; define validation and acceptance criteria."

NEXT_STEPS = (
    "Validate requirements with stakeholders to confirm shared understanding.",
    "Prioritize solution components that deliver the highest business impact first.",
    "Align integration and security workstreams with the implementation roadmap.",
)


def combined_text(documents: Iterable[DocumentRecord]) -> str:
    return "\n".join(doc.extracted_content for doc in documents)


def document_summary(record: DocumentRecord) -> str:
    """The stored summary, or a fresh extractive one when it is blank."""
    if record.summary and record.summary.strip():
        return record.summary
    return summarize_document(record.extracted_content)


def summarize_documents(documents: Sequence[DocumentRecord], max_words: int = DEFAULT_MAX_WORDS) -> str:
    records = list(documents)
    if not records:
        return ""

    text = combined_text(records)
    themes = extract_keywords(text, THEME_LIMIT)

    lines: List[str] = ["## Combined Document Summary", ""]
    if themes:
        lines.append("### Key Themes")
        lines.extend(f"- {theme}" for theme in themes)
        lines.append("")

    lines.append("### Document Insights")
    for record in records:
        condensed = condense_summary(document_summary(record), INSIGHT_SEGMENTS)
        lines.append(f"- **{record.file_name}**: {condensed}")
    lines.append("")

    risks = infer_risks(text, themes)
    if risks:
        lines.append("### Potential Risks and Gaps")
        lines.extend(f"- {risk}" for risk in risks)
        lines.append("")

    lines.append("### Recommended Next Steps")
    lines.extend(f"- {step}" for step in NEXT_STEPS)

    return limit_words("\n".join(lines).strip(), max_words)


def condense_summary(summary: str, max_segments: int) -> str:
    """Join the first bullet lines of a summary into one sentence-ish line."""
    if not summary or not summary.strip():
        return ""
    segments = [line.strip() for line in summary.split("\n") if line.strip()]
    return "; ".join(_clean_bullet(segment) for segment in segments[:max_segments])


def _clean_bullet(line: str) -> str:
    line = line.lstrip("-").strip()
    if not line:
        return ""
    return line[0].upper() + line[1:]


def infer_risks(text: str, themes: Sequence[str]) -> List[str]:
    if not text or not text.strip():
        return []

    lowered = {theme.lower() for theme in themes}
    risks: List[str] = []
    if "security" in lowered:
        risks.append(SECURITY_RISK)
    if "integration" in lowered or "api" in lowered:
        risks.append(INTEGRATION_RISK)
    if not themes:
        risks.append(SCOPE_RISK)
    if "testing" not in text.lower():
        risks.append(TESTING_RISK)
    return risks


def limit_words(text: str, max_words: int) -> str:
    """Cut ``text`` to its first ``max_words`` whitespace-separated words."""
    if not text or not text.strip():
        return ""
    words = text.split()
    if len(words) <= max_words:
        return text
    return " ".join(words[: max(max_words, 0)]) + ELLIPSIS
