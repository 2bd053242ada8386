"""Analyzer utilities for boolean keyword search.

Analyzers follow a composable tokenizer/filter design: a tokenizer splits raw
text into tokens and an ordered chain of filters rewrites or drops them. The
same analyzer must be used for documents and queries so that both sides land
on identical terms.

Normalization is a small set of literal rules rather than linguistic
stemming:

1. lowercase and strip every ``.`` ``:`` ``,`` ``;`` ``-``
2. drop a fixed set of stopwords
3. collapse everything from the first ``ation`` to the end into ``e``
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
import re
from typing import Protocol, TextIO


@dataclass
class Token:
    """Represents a token emitted by analyzers."""

    text: str
    position: int
    start_char: int
    end_char: int

    def copy_with(self, **updates: object) -> Token:
        data = {
            "text": self.text,
            "position": self.position,
            "start_char": self.start_char,
            "end_char": self.end_char,
        }
        data.update(updates)
        return Token(**data)  # type: ignore[arg-type]


class Analyzer(Protocol):
    """Protocol implemented by analyzers."""

    def __call__(self, text: str) -> list[Token]:  # pragma: no cover - interface definition
        ...


class Tokenizer(Protocol):
    """Protocol implemented by tokenizers."""

    def __call__(self, text: str) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class TokenFilter(Protocol):
    """Protocol implemented by token filters."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


STOPWORDS: frozenset[str] = frozenset({"the", "of", "an", "a", "to", "at", "in"})

STRIPPED_CHARACTERS: frozenset[str] = frozenset(".:,;-")

COLLAPSED_INFIX = "ation"
COLLAPSED_REPLACEMENT = "e"


class WhitespaceTokenizer:
    """Split text on runs of whitespace, keeping character offsets."""

    _PATTERN = re.compile(r"\S+")

    def __call__(self, text: str) -> Iterator[Token]:
        for position, match in enumerate(self._PATTERN.finditer(text)):
            yield Token(
                text=match.group(0),
                position=position,
                start_char=match.start(),
                end_char=match.end(),
            )


class PunctuationStripFilter:
    """Lowercase tokens and remove every configured punctuation character.

    Tokens left empty (e.g. a lone ``-``) are dropped.
    """

    def __init__(self, characters: Iterable[str] | None = None) -> None:
        chars = STRIPPED_CHARACTERS if characters is None else frozenset(characters)
        self._table = str.maketrans("", "", "".join(sorted(chars)))

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            normalized = token.text.lower().translate(self._table)
            if not normalized:
                continue
            if normalized == token.text:
                yield token
            else:
                yield token.copy_with(text=normalized)


class StopFilter:
    """Removes tokens that exactly equal a stopword."""

    def __init__(self, stopwords: Sequence[str] | None = None) -> None:
        self.stopwords = STOPWORDS if stopwords is None else frozenset(stopwords)

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.text not in self.stopwords:
                yield token


class SuffixCollapseFilter:
    """Replace everything from the first ``ation`` onwards with ``e``.

    Triggers on any occurrence, not only a true suffix:
    ``automation`` -> ``autome``, ``nationalities`` -> ``ne``.
    """

    def __init__(self, infix: str = COLLAPSED_INFIX, replacement: str = COLLAPSED_REPLACEMENT) -> None:
        self.infix = infix
        self.replacement = replacement

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            yield token.copy_with(text=collapse_suffix(token.text, self.infix, self.replacement))


def collapse_suffix(word: str, infix: str = COLLAPSED_INFIX, replacement: str = COLLAPSED_REPLACEMENT) -> str:
    index = word.find(infix)
    if index < 0:
        return word
    return word[:index] + replacement


class AnalyzerPipeline:
    """Composable analyzer pipeline (tokenizer + filters)."""

    def __init__(self, tokenizer: Tokenizer, filters: Sequence[TokenFilter] | None = None) -> None:
        self.tokenizer = tokenizer
        self.filters = list(filters or [])

    def __call__(self, text: str) -> list[Token]:
        stream: Iterable[Token] = self.tokenizer(text)
        for token_filter in self.filters:
            stream = token_filter(stream)
        tokens = list(stream)
        for idx, token in enumerate(tokens):  # normalize positions post-filtering
            token.position = idx
        return tokens


class BooleanTermAnalyzer:
    """Default analyzer shared by the indexer and the query evaluator."""

    def __init__(self, *, stopwords: Sequence[str] | None = None, apply_collapse: bool = True) -> None:
        filters: list[TokenFilter] = [PunctuationStripFilter(), StopFilter(stopwords)]
        if apply_collapse:
            filters.append(SuffixCollapseFilter())
        self.pipeline = AnalyzerPipeline(WhitespaceTokenizer(), filters)

    def __call__(self, text: str) -> list[Token]:
        return self.pipeline(text)


def tokenize(source: str | TextIO, analyzer: Analyzer | None = None) -> list[str]:
    """Return the term texts for ``source``.

    ``source`` is either a string or a readable text stream; streams are read
    to the end. The result is a fresh list, so re-tokenizing identical content
    yields an identical sequence.
    """

    text = source if isinstance(source, str) else source.read()
    active = analyzer if analyzer is not None else BooleanTermAnalyzer()
    return [token.text for token in active(text)]


_ANALYZER_FACTORIES: dict[str, Callable[[], Analyzer]] = {
    "default": lambda: BooleanTermAnalyzer(),
    "boolean": lambda: BooleanTermAnalyzer(),
    "boolean-nocollapse": lambda: BooleanTermAnalyzer(apply_collapse=False),
}


def get_analyzer(name: str | None) -> Analyzer:
    """Return analyzer by name, defaulting to the boolean term analyzer."""

    if name is None:
        return _ANALYZER_FACTORIES["default"]()
    normalized = name.lower()
    if normalized not in _ANALYZER_FACTORIES:
        msg = f"Unknown analyzer '{name}'. Available: {sorted(_ANALYZER_FACTORIES)}"
        raise ValueError(msg)
    return _ANALYZER_FACTORIES[normalized]()
