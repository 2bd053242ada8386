"""Ephemeral inverted index and boolean keyword search over plain-text corpora."""

from text_boolean_search.config import Settings
from text_boolean_search.registry import DocumentRegistry
from text_boolean_search.search_engine import SearchEngine


__all__ = ["DocumentRegistry", "SearchEngine", "Settings"]
