"""Document registry mapping document names to stable integer ids."""

from __future__ import annotations

from collections.abc import Iterator
import logging


logger = logging.getLogger(__name__)


class DocumentRegistry:
    """Bidirectional ``name <-> id`` mapping with lazy id allocation.

    Ids start at 1 and grow by one for every name seen for the first time.
    Nothing is ever removed, so an id stays valid for the registry lifetime.
    The registry is not synchronized; a single indexing pipeline owns it.
    """

    def __init__(self) -> None:
        self._ids_by_name: dict[str, int] = {}
        self._names_by_id: dict[int, str] = {}
        self._last_id = 0

    def identify(self, name: str) -> int:
        """Return the id for ``name``, allocating the next one on first sight."""
        existing = self._ids_by_name.get(name)
        if existing is not None:
            return existing

        self._last_id += 1
        doc_id = self._last_id
        self._ids_by_name[name] = doc_id
        self._names_by_id[doc_id] = name
        logger.debug("Registered document %s as id %d", name, doc_id)
        return doc_id

    def resolve(self, doc_id: int) -> str | None:
        """Return the name registered for ``doc_id`` or None."""
        return self._names_by_id.get(doc_id)

    def names(self) -> Iterator[str]:
        """Iterate registered names in id order."""
        for doc_id in sorted(self._names_by_id):
            yield self._names_by_id[doc_id]

    def __len__(self) -> int:
        return len(self._ids_by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._ids_by_name
