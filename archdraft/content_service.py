"""Interchangeable content services: local heuristics or a remote chat agent."""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import PromptTemplate
from langchain_openai import ChatOpenAI
from langchain_text_splitters import RecursiveCharacterTextSplitter

from . import architecture, summarizer
from .config import Settings
from .document_loader import extract_plain_text
from .errors import AgentError, ContentServiceConfigError
from .log import get_logger
from .sentences import summarize_document
from .types import DocumentRecord


logger = get_logger(__name__)


class ContentService(Protocol):
    """Extraction, summarization and drafting behind one interface."""

    def extract_content(self, file_name: str, data: bytes, content_type: Optional[str] = None) -> str:
        ...

    def summarize_document(self, file_name: str, content: str) -> str:
        ...

    def summarize_documents(self, documents: Sequence[DocumentRecord]) -> str:
        ...

    def generate_architecture(self, documents: Sequence[DocumentRecord]) -> str:
        ...


def no_insights_summary(file_name: str) -> str:
    return f"- No significant insights were detected in {file_name}."


class LocalContentService:
    """Deterministic extractive summaries and template-based drafts."""

    def __init__(self, max_bullets: int = 5, max_words: int = summarizer.DEFAULT_MAX_WORDS) -> None:
        self.max_bullets = max_bullets
        self.max_words = max_words

    def extract_content(self, file_name: str, data: bytes, content_type: Optional[str] = None) -> str:
        return extract_plain_text(file_name, data, content_type)

    def summarize_document(self, file_name: str, content: str) -> str:
        summary = summarize_document(content, self.max_bullets)
        if not summary.strip():
            summary = no_insights_summary(file_name)
        logger.debug("document_summarized", file_name=file_name, chars=len(content or ""))
        return summary

    def summarize_documents(self, documents: Sequence[DocumentRecord]) -> str:
        return summarizer.summarize_documents(documents, self.max_words)

    def generate_architecture(self, documents: Sequence[DocumentRecord]) -> str:
        return architecture.generate(documents)


CHUNK_SUMMARY_PROMPT = PromptTemplate(
    input_variables=["file_name", "content"],
    template=(
        "You are a solution architect reviewing business documents. "
        "Summarize the excerpt from {file_name} as at most five Markdown bullet points, "
        "one line each, starting with '- '. Keep only facts stated in the excerpt.\n\n"
        "Excerpt:\n{content}\n\nSummary:"
    ),
)

COMBINED_SUMMARY_PROMPT = PromptTemplate(
    input_variables=["documents", "max_words"],
    template=(
        "You are a solution architect. Combine the document notes below into one Markdown summary "
        "titled '## Combined Document Summary' with the sections '### Key Themes', "
        "'### Document Insights', '### Potential Risks and Gaps' and '### Recommended Next Steps'. "
        "Use at most {max_words} words.\n\n{documents}\n\nSummary:"
    ),
)

ARCHITECTURE_PROMPT = PromptTemplate(
    input_variables=["documents"],
    template=(
        "You are a solution architect. Draft an architecture document in Markdown titled "
        "'# Architecture Draft' with these numbered sections: 1. Project Scope, "
        "2. Solution Overview Diagram, 3. Component Descriptions (one subsection per document), "
        "4. Solution Flow Diagram, 5. Solution Sequence Diagram, "
        "6. Integration and Security Recommendations. Diagrams must be ```mermaid blocks.\n\n"
        "{documents}\n\nArchitecture document:"
    ),
)


class RemoteAgentContentService:
    """Sends extracted text to an OpenAI-compatible agent endpoint.

    Bytes are still parsed locally; only text leaves the process. Failures
    surface as :class:`AgentError` and are never retried here.
    """

    def __init__(
        self,
        llm: BaseChatModel,
        max_chunk_chars: int = 12000,
        max_words: int = summarizer.DEFAULT_MAX_WORDS,
    ) -> None:
        self._llm = llm
        self.max_words = max_words
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=max_chunk_chars,
            chunk_overlap=min(200, max_chunk_chars // 10),
            separators=["\n\n", "\n", ". ", " ", ""],
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "RemoteAgentContentService":
        if not settings.agent_configured:
            raise ContentServiceConfigError(
                "Remote agent requires ARCHDRAFT_AGENT_ENDPOINT, ARCHDRAFT_AGENT_ID and ARCHDRAFT_AGENT_API_KEY."
            )
        headers = {"x-agent-project": settings.agent_project} if settings.agent_project else None
        llm = ChatOpenAI(
            model=settings.agent_id,
            api_key=settings.agent_api_key,
            base_url=settings.agent_endpoint.rstrip("/"),
            temperature=settings.agent_temperature,
            timeout=settings.agent_timeout_seconds,
            max_retries=0,
            default_headers=headers,
        )
        return cls(llm, max_chunk_chars=settings.agent_max_chunk_chars, max_words=settings.combined_max_words)

    def extract_content(self, file_name: str, data: bytes, content_type: Optional[str] = None) -> str:
        return extract_plain_text(file_name, data, content_type)

    def summarize_document(self, file_name: str, content: str) -> str:
        chunks = self._splitter.split_text(content or "")
        if not chunks:
            return no_insights_summary(file_name)
        partials = [self._ask(CHUNK_SUMMARY_PROMPT, file_name=file_name, content=chunk) for chunk in chunks]
        if len(partials) == 1:
            return partials[0]
        return self._ask(CHUNK_SUMMARY_PROMPT, file_name=file_name, content="\n".join(partials))

    def summarize_documents(self, documents: Sequence[DocumentRecord]) -> str:
        records = list(documents)
        if not records:
            return ""
        return self._ask(
            COMBINED_SUMMARY_PROMPT,
            documents=self._render_documents(records),
            max_words=self.max_words,
        )

    def generate_architecture(self, documents: Sequence[DocumentRecord]) -> str:
        records = list(documents)
        if not records:
            return architecture.EMPTY_DRAFT
        return self._ask(ARCHITECTURE_PROMPT, documents=self._render_documents(records))

    def _render_documents(self, records: List[DocumentRecord]) -> str:
        blocks = []
        for idx, record in enumerate(records, start=1):
            notes = record.summary.strip()
            if not notes:
                pieces = self._splitter.split_text(record.extracted_content or "")
                notes = pieces[0] if pieces else "(no text extracted)"
            blocks.append(f"Document {idx}: {record.file_name}\n{notes}")
        return "\n\n".join(blocks)

    def _ask(self, prompt: PromptTemplate, **variables) -> str:
        chain = prompt | self._llm | StrOutputParser()
        try:
            answer = chain.invoke(variables)
        except Exception as exc:
            logger.error("agent_request_failed", error=str(exc))
            raise AgentError(f"Agent request failed: {exc}") from exc
        answer = (answer or "").strip()
        if not answer:
            raise AgentError("Agent returned an empty response.")
        return answer


def build_content_service(settings: Settings) -> ContentService:
    """Pick the tier named by ``settings.content_service``."""
    if settings.content_service == "remote":
        logger.info("content_service_selected", tier="remote", endpoint=settings.agent_endpoint)
        return RemoteAgentContentService.from_settings(settings)
    logger.info("content_service_selected", tier="local")
    return LocalContentService(
        max_bullets=settings.summary_max_bullets,
        max_words=settings.combined_max_words,
    )
