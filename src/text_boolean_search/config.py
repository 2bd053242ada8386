"""Centralized configuration for text-boolean-search using Pydantic Settings."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables.

    Every field can be overridden with a ``TEXT_SEARCH_`` prefixed variable,
    e.g. ``TEXT_SEARCH_INTERSECTION_STRATEGY=galloping``.
    """

    model_config = SettingsConfigDict(
        env_prefix="TEXT_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Corpus discovery
    document_extension: str = Field(
        default=".txt",
        description="Exact, case-sensitive file name suffix of indexable documents",
    )
    text_encoding: str = Field(default="utf-8", description="Encoding used to decode document contents")
    text_errors: Literal["strict", "replace", "surrogateescape", "ignore"] = Field(
        default="replace",
        description="Decode error handler; with strict, undecodable documents are skipped",
    )

    # Text analysis
    analyzer: str = Field(
        default="boolean",
        description="Analyzer applied to documents and queries (boolean, boolean-nocollapse)",
    )

    # Query evaluation
    intersection_strategy: Literal["linear", "galloping"] = Field(
        default="linear",
        description="AND implementation: two-pointer merge or lower-bound skipping",
    )

    # Index lifecycle
    cache_index: bool = Field(
        default=False,
        description="Reuse the index built for a corpus root across searches (ignores later file changes)",
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    @field_validator("document_extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"document_extension must look like '.txt', got {value!r}")
        return value
