"""Corpus indexing: walk a directory, tokenize each document, fill the index.

The indexer never fails on corpus content. A missing root produces an empty
index and a document that cannot be read simply contributes no terms. Stray
bytes the configured encoding cannot decode go through ``settings.text_errors``
instead of discarding the whole document.
"""

from __future__ import annotations

import logging
from pathlib import Path

from text_boolean_search.config import Settings
from text_boolean_search.observability.metrics import INDEX_BUILD_LATENCY, INDEX_DOC_COUNT, track_latency
from text_boolean_search.observability.tracing import create_span
from text_boolean_search.registry import DocumentRegistry
from text_boolean_search.search.analyzers import Analyzer, BooleanTermAnalyzer, tokenize
from text_boolean_search.search.corpus import CorpusDocument, discover_documents
from text_boolean_search.search.models import IndexBuildResult, InvertedIndex


logger = logging.getLogger(__name__)


class CorpusIndexer:
    """Build an :class:`InvertedIndex` for one corpus root."""

    def __init__(
        self,
        registry: DocumentRegistry,
        analyzer: Analyzer | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.registry = registry
        self.analyzer = analyzer if analyzer is not None else BooleanTermAnalyzer()
        self.settings = settings if settings is not None else Settings()

    def build(self, root: Path | str) -> InvertedIndex:
        """Return a fresh index for ``root``."""
        index, _result = self.build_with_result(root)
        return index

    def build_with_result(self, root: Path | str) -> tuple[InvertedIndex, IndexBuildResult]:
        """Index ``root`` and report how many documents were indexed or skipped."""

        index = InvertedIndex()
        documents_indexed = 0
        documents_skipped = 0
        errors: list[str] = []

        with (
            create_span("index.build", attributes={"corpus.root": str(root)}) as span,
            track_latency(INDEX_BUILD_LATENCY),
        ):
            for document in discover_documents(root, self.settings.document_extension):
                doc_id = self.registry.identify(document.name)
                try:
                    terms = self._read_terms(document)
                except (OSError, UnicodeDecodeError) as exc:
                    logger.warning("Failed to read %s: %s", document.path, exc)
                    errors.append(f"{document.name}: {exc}")
                    documents_skipped += 1
                    continue

                index.add_document(doc_id)
                for term in terms:
                    index.add_posting(term, doc_id)
                documents_indexed += 1

            span.set_attribute("index.documents", documents_indexed)
            span.set_attribute("index.terms", len(index))

        INDEX_DOC_COUNT.set(documents_indexed)
        result = IndexBuildResult(
            root=str(root),
            documents_indexed=documents_indexed,
            documents_skipped=documents_skipped,
            term_count=len(index),
            errors=tuple(errors),
        )
        logger.info(
            "Indexed %d documents (%d skipped, %d terms) under %s",
            documents_indexed,
            documents_skipped,
            len(index),
            root,
        )
        return index, result

    def _read_terms(self, document: CorpusDocument) -> list[str]:
        with document.open_text(self.settings.text_encoding, self.settings.text_errors) as stream:
            return tokenize(stream, self.analyzer)
