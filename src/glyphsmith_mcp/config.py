"""Glyphsmith-mcp settings loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Glyphsmith MCP server settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Largest text (in code points) a tool call will accept
    glyphsmith_max_input_chars: int = 100_000

    # Root logging level applied by main()
    glyphsmith_log_level: str = "INFO"
