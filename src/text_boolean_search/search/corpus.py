"""Filesystem discovery of indexable documents under a corpus root."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import TextIO


logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".txt"


@dataclass(frozen=True)
class CorpusDocument:
    """A document handle: its registry name plus the file backing it."""

    name: str
    path: Path

    def open_text(self, encoding: str = "utf-8", errors: str = "strict") -> TextIO:
        return self.path.open("r", encoding=encoding, errors=errors)


def discover_documents(root: Path | str, extension: str = DEFAULT_EXTENSION) -> list[CorpusDocument]:
    """Return every regular file under ``root`` whose name ends with ``extension``.

    The match is an exact, case-sensitive suffix check on the file name.
    Documents are named by their POSIX path relative to ``root`` and returned
    sorted by that name. A missing or non-directory root yields an empty list.
    """

    root_path = Path(root)
    if not root_path.is_dir():
        logger.info("Corpus root %s is missing or not a directory", root_path)
        return []

    documents: list[CorpusDocument] = []
    for candidate in root_path.rglob("*"):
        if not candidate.name.endswith(extension):
            continue
        try:
            if not candidate.is_file():
                continue
        except OSError as exc:
            logger.debug("Skipping %s: %s", candidate, exc)
            continue
        name = candidate.relative_to(root_path).as_posix()
        documents.append(CorpusDocument(name=name, path=candidate))

    documents.sort(key=lambda document: document.name)
    return documents
