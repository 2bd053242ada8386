"""Shared test fixtures and configuration."""

from __future__ import annotations

import os
from pathlib import Path

import pytest


TEST_ENV = {
    "TEXT_SEARCH_DOCUMENT_EXTENSION": ".txt",
    "TEXT_SEARCH_TEXT_ENCODING": "utf-8",
    "TEXT_SEARCH_TEXT_ERRORS": "replace",
    "TEXT_SEARCH_ANALYZER": "boolean",
    "TEXT_SEARCH_INTERSECTION_STRATEGY": "linear",
    "TEXT_SEARCH_CACHE_INDEX": "false",
    "TEXT_SEARCH_LOG_LEVEL": "info",
    "TEXT_SEARCH_LOG_JSON": "true",
}


for key, value in TEST_ENV.items():
    os.environ[key] = value


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset settings-related environment variables before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)


def _write_corpus(root: Path, files: dict[str, str]) -> Path:
    for relative, text in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def corpus_factory(tmp_path: Path):
    """Return a helper that writes ``{relative path: text}`` under a fresh root."""

    def factory(files: dict[str, str], name: str = "corpus") -> Path:
        return _write_corpus(tmp_path / name, files)

    return factory


@pytest.fixture
def pets_corpus(corpus_factory) -> Path:
    """Two-document corpus used by the end-to-end scenarios."""
    return corpus_factory(
        {
            "doc1.txt": "The Cat sat",
            "doc2.txt": "A Dog and Cat ran",
        }
    )
