"""Common data structures for the architecture drafting pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


DEFAULT_FILE_NAME = "document"


class SessionStatus(str, Enum):
    """Where a conversation stands between uploading and drafting."""

    AWAITING_DOCUMENTS = "awaiting_documents"
    READY_FOR_DECISION = "ready_for_decision"
    ARCHITECTURE_GENERATED = "architecture_generated"


_STATUS_ORDER = {
    SessionStatus.AWAITING_DOCUMENTS: 0,
    SessionStatus.READY_FOR_DECISION: 1,
    SessionStatus.ARCHITECTURE_GENERATED: 2,
}


@dataclass
class DocumentRecord:
    """One processed upload owned by a session."""

    file_name: str = DEFAULT_FILE_NAME
    extracted_content: str = ""
    summary: str = ""

    def __post_init__(self) -> None:
        if not self.file_name or not self.file_name.strip():
            self.file_name = DEFAULT_FILE_NAME


@dataclass
class SessionState:
    """Documents and status accumulated for one conversation.

    A state is mutated in place by the turn currently handling its
    conversation. Callers must not run two turns for the same conversation
    at once; nothing here locks.
    """

    documents: List[DocumentRecord] = field(default_factory=list)
    status: SessionStatus = SessionStatus.AWAITING_DOCUMENTS

    def advance(self, target: SessionStatus) -> None:
        """Move the status forward to ``target``; backward moves are ignored."""
        if _STATUS_ORDER[target] > _STATUS_ORDER[self.status]:
            self.status = target

    def await_documents(self) -> None:
        """Return to collecting uploads. Documents are kept."""
        self.status = SessionStatus.AWAITING_DOCUMENTS

    @property
    def has_documents(self) -> bool:
        return bool(self.documents)


@dataclass(frozen=True)
class Keyword:
    """A lowercase token and how often it occurred."""

    word: str
    frequency: int


@dataclass(frozen=True)
class SentenceScore:
    """Frequency density of the sentence at ``index``."""

    index: int
    score: float


@dataclass(frozen=True)
class Upload:
    """Raw bytes received for one attachment."""

    file_name: Optional[str]
    data: bytes
    content_type: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.file_name or DEFAULT_FILE_NAME
