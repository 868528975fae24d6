"""Exceptions raised at the parsing and agent boundaries."""

from __future__ import annotations


class ArchDraftError(Exception):
    """Base class for all pipeline errors."""


class ExtractionError(ArchDraftError):
    def __init__(self, file_name: str, reason: str = "") -> None:
        self.file_name = file_name
        message = f"Failed to extract content from {file_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnsupportedDocumentError(ArchDraftError):
    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        super().__init__(f"{file_name} is not a supported file type.")


class NoDocumentsError(ArchDraftError):
    """Architecture generation was requested before any upload succeeded."""


class AgentError(ArchDraftError):
    """The remote agent failed or returned an empty answer."""


class ContentServiceConfigError(ArchDraftError):
    """The selected content service cannot be built from the settings."""
