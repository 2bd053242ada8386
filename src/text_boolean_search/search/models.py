"""Search data models."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator
from dataclasses import dataclass


PostingSet = tuple[int, ...]

EMPTY_POSTINGS: PostingSet = ()


class InvertedIndex:
    """In-memory map from term to an ascending, duplicate-free list of doc ids."""

    def __init__(self) -> None:
        self._postings: dict[str, list[int]] = {}
        self._doc_ids: list[int] = []

    def add_document(self, doc_id: int) -> None:
        """Record that ``doc_id`` was indexed, even if it yielded no terms."""
        _insort_unique(self._doc_ids, doc_id)

    def add_posting(self, term: str, doc_id: int) -> None:
        """Insert ``doc_id`` into the posting set of ``term``; repeats are no-ops."""
        postings = self._postings.get(term)
        if postings is None:
            self._postings[term] = [doc_id]
            return
        _insort_unique(postings, doc_id)

    def get_postings(self, term: str) -> PostingSet:
        """Return the posting set for ``term`` or an empty one."""
        postings = self._postings.get(term)
        if postings is None:
            return EMPTY_POSTINGS
        return tuple(postings)

    def terms(self) -> Iterator[str]:
        """Iterate over all terms in the index."""
        return iter(self._postings)

    @property
    def doc_ids(self) -> PostingSet:
        return tuple(self._doc_ids)

    @property
    def doc_count(self) -> int:
        return len(self._doc_ids)

    def __len__(self) -> int:
        return len(self._postings)

    def __contains__(self, term: object) -> bool:
        return term in self._postings

    def to_dict(self) -> dict[str, list[int]]:
        """Return a JSON-serializable copy of the term map."""
        return {term: list(postings) for term, postings in self._postings.items()}


def _insort_unique(values: list[int], value: int) -> None:
    # Ids usually arrive in ascending order, so check the tail first.
    if not values or values[-1] < value:
        values.append(value)
        return
    index = bisect_left(values, value)
    if index < len(values) and values[index] == value:
        return
    values.insert(index, value)


@dataclass(frozen=True)
class IndexBuildResult:
    """Outcome of one corpus indexing run."""

    root: str
    documents_indexed: int
    documents_skipped: int
    term_count: int
    errors: tuple[str, ...] = ()
