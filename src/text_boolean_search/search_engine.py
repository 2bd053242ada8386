"""Search facade: index a corpus root, then evaluate one boolean query.

Keeps a single :class:`DocumentRegistry` for its lifetime, so a document name
maps to the same id across every search issued through the same engine.
"""

from __future__ import annotations

import logging
from pathlib import Path

from text_boolean_search.config import Settings
from text_boolean_search.observability.context import get_trace_context, trace_context
from text_boolean_search.registry import DocumentRegistry
from text_boolean_search.search.analyzers import get_analyzer
from text_boolean_search.search.indexer import CorpusIndexer
from text_boolean_search.search.models import InvertedIndex
from text_boolean_search.search.query import QueryEvaluator
from text_boolean_search.search.set_algebra import get_intersection


logger = logging.getLogger(__name__)


class SearchEngine:
    """Boolean keyword search over a directory of plain-text documents.

    Interface Methods:
    - search(root_path, query) -> list[int]
    - resolve(doc_id) -> str | None
    - explain(query) -> str
    - clear_cache()
    """

    def __init__(self, settings: Settings | None = None, registry: DocumentRegistry | None = None) -> None:
        self.settings = settings if settings is not None else Settings()
        self.registry = registry if registry is not None else DocumentRegistry()

        analyzer = get_analyzer(self.settings.analyzer)
        self._indexer = CorpusIndexer(self.registry, analyzer, self.settings)
        self._evaluator = QueryEvaluator(analyzer, get_intersection(self.settings.intersection_strategy))
        self._index_cache: dict[Path, InvertedIndex] = {}

    def search(self, root_path: str | Path, query: str) -> list[int]:
        """Return the ascending ids of documents under ``root_path`` matching ``query``.

        The index is rebuilt on every call unless ``settings.cache_index`` is
        enabled, in which case the first index built for a root is reused.
        """
        root = Path(root_path)
        token = trace_context.set({**get_trace_context(), "corpus": root.name})
        try:
            index = self._index_for(root)
            return self._evaluator.evaluate(query, index)
        finally:
            trace_context.reset(token)

    def resolve(self, doc_id: int) -> str | None:
        """Return the document name behind ``doc_id``, or None."""
        return self.registry.resolve(doc_id)

    def explain(self, query: str) -> str:
        """Return the parenthesized resolution order of ``query``."""
        return self._evaluator.explain(query)

    def clear_cache(self) -> None:
        self._index_cache.clear()

    def _index_for(self, root: Path) -> InvertedIndex:
        if not self.settings.cache_index:
            return self._indexer.build(root)

        key = root.expanduser().resolve()
        cached = self._index_cache.get(key)
        if cached is not None:
            logger.debug("Reusing cached index for %s", key)
            return cached

        index = self._indexer.build(root)
        self._index_cache[key] = index
        return index
