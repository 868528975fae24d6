"""Runtime settings read from ``ARCHDRAFT_*`` environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Pipeline settings.

    ``content_service`` picks the local heuristics or the remote agent. The
    remote agent is only usable when ``agent_configured`` is true.
    """

    model_config = SettingsConfigDict(
        env_prefix="ARCHDRAFT_",
        env_file=".env",
        extra="ignore",
    )

    content_service: Literal["local", "remote"] = Field(default="local", description="Content service tier")

    agent_endpoint: Optional[str] = Field(default=None, description="OpenAI-compatible agent base URL")
    agent_project: Optional[str] = Field(default=None, description="Agent project name, sent as a header")
    agent_id: Optional[str] = Field(default=None, description="Agent / model identifier")
    agent_api_key: Optional[str] = Field(default=None, description="Agent API key")
    agent_timeout_seconds: float = Field(default=600.0, gt=0, description="Per-request timeout")
    agent_temperature: float = Field(default=0.1, ge=0, description="Generation temperature")
    agent_max_chunk_chars: int = Field(default=12000, gt=0, description="Largest text chunk sent per request")

    summary_max_bullets: int = Field(default=5, gt=0, description="Bullets per document summary")
    combined_max_words: int = Field(default=800, gt=0, description="Word budget of the combined summary")

    log_level: str = Field(default="INFO", description="Root log level")
    log_json: bool = Field(default=False, description="Render logs as JSON lines")

    @property
    def agent_configured(self) -> bool:
        return all(
            value is not None and value.strip()
            for value in (self.agent_endpoint, self.agent_id, self.agent_api_key)
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
