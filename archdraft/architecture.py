"""Render the Markdown architecture draft with embedded mermaid diagrams."""

from __future__ import annotations

from typing import List, Sequence

from .keywords import extract_keywords
from .summarizer import combined_text, document_summary
from .types import DocumentRecord


EMPTY_DRAFT = "# Architecture Draft\n\n_No source documents were provided._"
SCOPE_THEME_LIMIT = 6
SCOPE_FALLBACK = (
    "Document inputs highlight business capabilities, technical components, "
    "and delivery considerations."
)
NO_HIGHLIGHTS = "- No specific highlights were found in the document extract."

FLOW_DIAGRAM = """```mermaid
flowchart LR
    Users[Stakeholder Inputs] --> Intake[Requirement Intake]
    Intake --> Analysis[Architecture Analysis]
    Analysis --> Design[Solution Design]
    Design --> Delivery[Implementation Streams]
    Delivery --> Value[Measured Outcomes]
```"""

SEQUENCE_DIAGRAM = """```mermaid
sequenceDiagram
    participant Stakeholder
    participant ArchitectureTeam as Architecture Team
    participant Systems as Core Systems
    participant Security as Security Services
    Stakeholder->>ArchitectureTeam: Share business drivers and constraints
    ArchitectureTeam->>Systems: Evaluate current capabilities and integration needs
    Systems-->>ArchitectureTeam: Provide interface and performance data
    ArchitectureTeam->>Security: Validate compliance and protection requirements
    Security-->>ArchitectureTeam: Recommend controls and policies
    ArchitectureTeam-->>Stakeholder: Present target architecture and roadmap
```"""

RECOMMENDATIONS = (
    "Align integration patterns with the most critical business capabilities.",
    "Establish observability and error-handling for all cross-system interfaces.",
    "Apply zero-trust principles to user and service access, including strong identity and encryption controls.",
    "Define operational guardrails for data protection, privacy, and regulatory adherence.",
)


def generate(documents: Sequence[DocumentRecord]) -> str:
    records = list(documents)
    if not records:
        return EMPTY_DRAFT

    themes = extract_keywords(combined_text(records), SCOPE_THEME_LIMIT)

    lines: List[str] = ["# Architecture Draft", ""]

    lines.append("## 1. Project Scope")
    if themes:
        lines.append("The solution targets the following primary themes:")
        lines.extend(f"- {_capitalize(theme)}" for theme in themes)
    else:
        lines.append(SCOPE_FALLBACK)
    lines.append("")

    lines.append("## 2. Solution Overview Diagram")
    lines.extend(overview_diagram(records))
    lines.append("")

    lines.append("## 3. Component Descriptions")
    for record in records:
        lines.append(f"### {record.file_name}")
        summary = document_summary(record)
        lines.append(summary if summary.strip() else NO_HIGHLIGHTS)
        lines.append("")

    lines.append("## 4. Solution Flow Diagram")
    lines.append(FLOW_DIAGRAM)
    lines.append("")

    lines.append("## 5. Solution Sequence Diagram")
    lines.append(SEQUENCE_DIAGRAM)
    lines.append("")

    lines.append("## 6. Integration and Security Recommendations")
    lines.extend(f"- {item}" for item in RECOMMENDATIONS)

    return "\n".join(lines).strip()


def overview_diagram(records: Sequence[DocumentRecord]) -> List[str]:
    """One node per document, all feeding the target solution node."""
    lines = ["```mermaid", "graph TD", "    A[Business Goals] --> B[Target Solution]"]
    for idx, record in enumerate(records, start=1):
        lines.append(f"    D{idx}[{mermaid_label(record.file_name)} Insights] --> B")
    lines.append("    B --> C[Value Outcomes]")
    lines.append("```")
    return lines


def mermaid_label(value: str) -> str:
    if not value or not value.strip():
        return "Document"
    return value.replace("[", "(").replace("]", ")")


def _capitalize(value: str) -> str:
    if not value or not value.strip():
        return value
    return value[0].upper() + value[1:]
