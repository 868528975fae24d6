"""Pytest configuration and fixtures."""

import pytest

from archdraft.config import Settings, get_settings
from archdraft.content_service import LocalContentService
from archdraft.session_store import SessionStore
from archdraft.types import DocumentRecord
from archdraft.workflow import DocumentWorkflow


REQUIREMENTS_TEXT = (
    "The platform must expose a public API for partner integration. "
    "Security reviews are required before every API release. "
    "Integration with the billing system uses the existing API gateway. "
    "Security logging must cover every integration endpoint."
)

OPERATIONS_TEXT = (
    "Operations teams need dashboards for every service. "
    "Alerts should page the on-call engineer within five minutes. "
    "Testing of failover runs every quarter."
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep the developer's environment out of settings-driven tests."""
    for name in ("ARCHDRAFT_CONTENT_SERVICE", "ARCHDRAFT_AGENT_ENDPOINT", "ARCHDRAFT_AGENT_ID", "ARCHDRAFT_AGENT_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def store():
    return SessionStore()


@pytest.fixture
def workflow(store):
    return DocumentWorkflow(store, LocalContentService())


@pytest.fixture
def documents():
    return [
        DocumentRecord(file_name="requirements.pdf", extracted_content=REQUIREMENTS_TEXT),
        DocumentRecord(file_name="operations.docx", extracted_content=OPERATIONS_TEXT),
    ]
