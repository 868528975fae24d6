"""Tests for the local and remote content services."""

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.runnables import RunnableLambda

from archdraft.architecture import EMPTY_DRAFT, generate
from archdraft.config import Settings
from archdraft.content_service import (
    LocalContentService,
    RemoteAgentContentService,
    build_content_service,
)
from archdraft.errors import AgentError, ContentServiceConfigError
from archdraft.summarizer import summarize_documents

from .conftest import REQUIREMENTS_TEXT


def _failing_llm():
    def _raise(_):
        raise RuntimeError("connection refused")

    return RunnableLambda(_raise)


def test_local_extract_content():
    service = LocalContentService()

    assert service.extract_content("notes.txt", b"Plain notes.") == "Plain notes."


def test_local_summarize_document():
    service = LocalContentService(max_bullets=2)

    summary = service.summarize_document("req.pdf", REQUIREMENTS_TEXT)

    assert summary.count("\n") == 1
    assert summary.startswith("- ")


def test_local_summarize_document_placeholder():
    service = LocalContentService()

    assert service.summarize_document("scan.png", "") == "- No significant insights were detected in scan.png."


def test_local_delegates_to_core(documents):
    service = LocalContentService(max_words=50)

    assert service.summarize_documents(documents) == summarize_documents(documents, 50)
    assert service.generate_architecture(documents) == generate(documents)


def test_remote_summarize_document():
    service = RemoteAgentContentService(FakeListChatModel(responses=["  - Agent bullet  "]))

    assert service.summarize_document("req.pdf", REQUIREMENTS_TEXT) == "- Agent bullet"


def test_remote_summarize_document_in_chunks():
    service = RemoteAgentContentService(FakeListChatModel(responses=["- merged"]), max_chunk_chars=40)

    assert service.summarize_document("req.pdf", REQUIREMENTS_TEXT) == "- merged"


def test_remote_summarize_document_without_text():
    service = RemoteAgentContentService(FakeListChatModel(responses=["unused"]))

    assert service.summarize_document("scan.png", "") == "- No significant insights were detected in scan.png."


def test_remote_summarize_documents(documents):
    service = RemoteAgentContentService(FakeListChatModel(responses=["## Combined Document Summary"]))

    assert service.summarize_documents(documents) == "## Combined Document Summary"
    assert service.summarize_documents([]) == ""


def test_remote_generate_architecture(documents):
    service = RemoteAgentContentService(FakeListChatModel(responses=["# Architecture Draft\n..."]))

    assert service.generate_architecture(documents).startswith("# Architecture Draft")
    assert service.generate_architecture([]) == EMPTY_DRAFT


def test_remote_empty_answer_raises(documents):
    service = RemoteAgentContentService(FakeListChatModel(responses=["   "]))

    with pytest.raises(AgentError):
        service.generate_architecture(documents)


def test_remote_failure_raises_agent_error(documents):
    service = RemoteAgentContentService(_failing_llm())

    with pytest.raises(AgentError, match="connection refused"):
        service.summarize_documents(documents)


def test_build_content_service_local(settings):
    service = build_content_service(settings)

    assert isinstance(service, LocalContentService)
    assert service.max_bullets == settings.summary_max_bullets


def test_build_content_service_remote_requires_configuration():
    settings = Settings(_env_file=None, content_service="remote", agent_endpoint="https://agent.example.com")

    assert not settings.agent_configured
    with pytest.raises(ContentServiceConfigError):
        build_content_service(settings)


def test_build_content_service_remote():
    settings = Settings(
        _env_file=None,
        content_service="remote",
        agent_endpoint="https://agent.example.com/v1/",
        agent_id="architecture-agent",
        agent_api_key="test-key",
        agent_project="poc",
    )

    assert settings.agent_configured
    assert isinstance(build_content_service(settings), RemoteAgentContentService)
