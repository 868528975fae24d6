"""Turn uploaded PDF, Word, image and text bytes into plain text."""

from __future__ import annotations

import io
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

import docx
from docx.table import Table
from docx.text.paragraph import Paragraph
from PIL import Image
from pypdf import PdfReader

from .errors import ExtractionError
from .log import get_logger
from .types import DEFAULT_FILE_NAME, Upload


logger = get_logger(__name__)


class DocumentKind(str, Enum):
    PDF = "pdf"
    DOCX = "docx"
    DOC = "doc"
    IMAGE = "image"
    TEXT = "text"


TEAMS_DOWNLOAD_INFO = "application/vnd.microsoft.teams.file.download.info"

CONTENT_TYPE_KINDS: Dict[str, DocumentKind] = {
    "application/pdf": DocumentKind.PDF,
    "application/msword": DocumentKind.DOC,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": DocumentKind.DOCX,
    "image/jpeg": DocumentKind.IMAGE,
    "image/jpg": DocumentKind.IMAGE,
    "image/png": DocumentKind.IMAGE,
}

EXTENSION_KINDS: Dict[str, DocumentKind] = {
    ".pdf": DocumentKind.PDF,
    ".docx": DocumentKind.DOCX,
    ".doc": DocumentKind.DOC,
    ".jpg": DocumentKind.IMAGE,
    ".jpeg": DocumentKind.IMAGE,
    ".png": DocumentKind.IMAGE,
    ".txt": DocumentKind.TEXT,
    ".md": DocumentKind.TEXT,
    ".markdown": DocumentKind.TEXT,
}


def _extension(file_name: Optional[str]) -> str:
    return Path(file_name or "").suffix.lower()


def classify(file_name: Optional[str], content_type: Optional[str] = None) -> Optional[DocumentKind]:
    """Content type wins; the extension decides otherwise. ``None`` if neither matches."""
    if content_type:
        kind = CONTENT_TYPE_KINDS.get(content_type.lower())
        if kind is not None:
            return kind
    return EXTENSION_KINDS.get(_extension(file_name))


def is_supported(file_name: Optional[str], content_type: Optional[str] = None) -> bool:
    if content_type and content_type.lower() == TEAMS_DOWNLOAD_INFO:
        return True
    return classify(file_name, content_type) is not None


def _extract_pdf(data: bytes) -> str:
    reader = PdfReader(io.BytesIO(data))
    pages = [page.extract_text() or "" for page in reader.pages]
    return "\n".join(pages)


def _iter_docx_paragraphs(document) -> Iterable[Paragraph]:
    for block in document.iter_inner_content():
        if isinstance(block, Paragraph):
            yield block
        elif isinstance(block, Table):
            for row in block.rows:
                for cell in row.cells:
                    yield from cell.paragraphs


def _extract_docx(data: bytes) -> str:
    document = docx.Document(io.BytesIO(data))
    lines = [p.text.strip() for p in _iter_docx_paragraphs(document) if p.text.strip()]
    return "\n".join(lines)


def _extract_doc(data: bytes) -> str:
    raise ValueError("legacy .doc files are not supported; save the document as .docx")


def _extract_image(data: bytes) -> str:
    # No OCR locally: the image is validated and contributes no text.
    with Image.open(io.BytesIO(data)) as image:
        image.verify()
    return ""


def _extract_text(data: bytes) -> str:
    return data.decode("utf-8-sig", errors="replace")


EXTRACTORS: Dict[DocumentKind, Callable[[bytes], str]] = {
    DocumentKind.PDF: _extract_pdf,
    DocumentKind.DOCX: _extract_docx,
    DocumentKind.DOC: _extract_doc,
    DocumentKind.IMAGE: _extract_image,
    DocumentKind.TEXT: _extract_text,
}


def extract_plain_text(file_name: Optional[str], data: bytes, content_type: Optional[str] = None) -> str:
    """Decode ``data`` using the parser for its inferred format.

    Unknown formats are decoded as UTF-8 text. Raises :class:`ExtractionError`
    when the bytes cannot be parsed as the inferred format.
    """
    if data is None:
        raise ValueError("data must not be None")
    name = file_name or DEFAULT_FILE_NAME
    if not data:
        return ""

    kind = classify(file_name, content_type) or DocumentKind.TEXT
    try:
        text = EXTRACTORS[kind](data)
    except Exception as exc:
        logger.warning("extraction_failed", file_name=name, kind=kind.value, error=str(exc))
        raise ExtractionError(name, str(exc)) from exc

    logger.debug("extraction_complete", file_name=name, kind=kind.value, chars=len(text))
    return text


def read_upload(path: Path) -> Upload:
    """Load a file from disk as if it had been uploaded."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Document not found: {path}")
    return Upload(file_name=path.name, data=path.read_bytes())


def read_uploads(paths: Iterable[Path]) -> List[Upload]:
    return [read_upload(path) for path in paths]
