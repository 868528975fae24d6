"""Conversation-level orchestration of uploads, summaries and drafts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .content_service import ContentService
from .document_loader import is_supported
from .errors import ArchDraftError, NoDocumentsError, UnsupportedDocumentError
from .log import get_logger
from .session_store import SessionStore
from .types import DocumentRecord, SessionState, SessionStatus, Upload


logger = get_logger(__name__)

FOLLOW_UP_QUESTION = (
    "Would you like to upload more documents or should I generate the draft architecture document?"
)
NO_DOCUMENTS_PROCESSED = "I was not able to process any of the attachments."


@dataclass
class UploadFailure:
    file_name: str
    reason: str


@dataclass
class IngestResult:
    """Outcome of one batch of uploads for a conversation."""

    processed: List[DocumentRecord] = field(default_factory=list)
    failures: List[UploadFailure] = field(default_factory=list)
    notices: List[str] = field(default_factory=list)
    summary: str = ""
    message: str = ""

    @property
    def ok(self) -> bool:
        return bool(self.processed)


def fallback_summary(documents: Iterable[DocumentRecord]) -> str:
    lines = ["Here is what I extracted:"]
    lines.extend(f"• {doc.file_name}" for doc in documents)
    return "\n".join(lines)


class DocumentWorkflow:
    """Drives a conversation from first upload to architecture draft.

    Content service errors are caught here and nowhere else. A file whose
    extraction fails is skipped; a failed combined summary falls back to a
    listing of the processed file names.
    """

    def __init__(self, store: SessionStore, service: ContentService) -> None:
        self.store = store
        self.service = service

    def session(self, conversation_id: str) -> SessionState:
        return self.store.get_or_create(conversation_id)

    def ingest(self, conversation_id: str, uploads: Iterable[Upload]) -> IngestResult:
        state = self.store.get_or_create(conversation_id)
        result = IngestResult()

        for upload in uploads:
            record = self._process_upload(conversation_id, upload, result)
            if record is not None:
                state.documents.append(record)
                result.processed.append(record)

        if not result.processed:
            result.message = NO_DOCUMENTS_PROCESSED
            return result

        try:
            result.summary = self.service.summarize_documents(state.documents)
        except ArchDraftError:
            logger.exception("combined_summary_failed", conversation_id=conversation_id)
            result.summary = fallback_summary(result.processed)

        state.advance(SessionStatus.READY_FOR_DECISION)
        result.message = f"{result.summary}\n\n{FOLLOW_UP_QUESTION}"
        logger.info(
            "documents_ingested",
            conversation_id=conversation_id,
            processed=len(result.processed),
            failed=len(result.failures),
            documents=len(state.documents),
        )
        return result

    def _process_upload(self, conversation_id: str, upload: Upload, result: IngestResult) -> Optional[DocumentRecord]:
        name = upload.display_name
        if not is_supported(upload.file_name, upload.content_type):
            result.failures.append(UploadFailure(name, str(UnsupportedDocumentError(name))))
            return None
        if not upload.data:
            result.failures.append(UploadFailure(name, f"I could not download {name}."))
            return None

        try:
            content = self.service.extract_content(name, upload.data, upload.content_type)
        except ArchDraftError as exc:
            logger.exception("extraction_failed", conversation_id=conversation_id, file_name=name)
            result.failures.append(UploadFailure(name, str(exc)))
            return None

        try:
            summary = self.service.summarize_document(name, content)
        except ArchDraftError:
            logger.exception("document_summary_failed", conversation_id=conversation_id, file_name=name)
            result.notices.append(f"I extracted content from {name} but could not summarize it.")
            summary = ""

        return DocumentRecord(file_name=name, extracted_content=content, summary=summary)

    def request_more(self, conversation_id: str) -> SessionState:
        state = self.store.get_or_create(conversation_id)
        state.await_documents()
        logger.info("awaiting_documents", conversation_id=conversation_id, documents=len(state.documents))
        return state

    def generate_architecture(self, conversation_id: str) -> str:
        state = self.store.get_or_create(conversation_id)
        if not state.has_documents:
            raise NoDocumentsError("I need at least one processed document before drafting the architecture.")

        document = self.service.generate_architecture(state.documents)
        state.advance(SessionStatus.ARCHITECTURE_GENERATED)
        logger.info("architecture_generated", conversation_id=conversation_id, documents=len(state.documents))
        return document

    def reset(self, conversation_id: str) -> None:
        self.store.reset(conversation_id)
        logger.info("session_reset", conversation_id=conversation_id)
