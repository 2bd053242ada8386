"""Boolean query evaluation over an inverted index.

Queries are flat sequences of terms joined by ``and``, ``or`` and ``not``.
There is no grouping and no unary operator: ``a not b`` is the difference
``a - b``. Evaluation is a single left-to-right scan with an operand stack and
an operator stack:

* a term pushes its posting set (empty when unknown);
* an operator first reduces every stacked operator whose precedence is
  strictly higher, then is pushed itself;
* leftover operators are reduced from the top once the scan ends.

Precedence is ``AND (3) > OR (2) > NOT (1)``. Because only strictly higher
precedence triggers a reduction, a run of equal operators piles up and is
resolved from the right: ``a not b not c`` means ``a - (b - c)``. An operator
that finds fewer than two operands is dropped without effect, so malformed
queries degrade to a best-effort result instead of raising.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import IntEnum
import logging
from types import MappingProxyType
from typing import Generic, TypeVar

from text_boolean_search.observability.metrics import QUERY_COUNT, QUERY_LATENCY, track_latency
from text_boolean_search.observability.tracing import create_span
from text_boolean_search.search.analyzers import Analyzer, BooleanTermAnalyzer
from text_boolean_search.search.models import InvertedIndex
from text_boolean_search.search.set_algebra import SetOperation, difference, intersect, union


logger = logging.getLogger(__name__)

T = TypeVar("T")


class BooleanOperator(IntEnum):
    """Binary query operators; the value is the binding precedence."""

    NOT = 1
    OR = 2
    AND = 3


OPERATOR_KEYWORDS = MappingProxyType(
    {
        "and": BooleanOperator.AND,
        "or": BooleanOperator.OR,
        "not": BooleanOperator.NOT,
    }
)


class _Reducer(Generic[T]):
    """Two-stack precedence reduction, generic over the operand type."""

    def __init__(self, operand: Callable[[str], T], combine: Callable[[BooleanOperator, T, T], T]) -> None:
        self._operand = operand
        self._combine = combine

    def run(self, tokens: Sequence[str]) -> T | None:
        operands: list[T] = []
        operators: list[BooleanOperator] = []
        for token in tokens:
            operator = OPERATOR_KEYWORDS.get(token)
            if operator is None:
                operands.append(self._operand(token))
                continue
            while operators and operators[-1] > operator:
                self._apply(operators.pop(), operands)
            operators.append(operator)

        while operators:
            self._apply(operators.pop(), operands)

        return operands[-1] if operands else None

    def _apply(self, operator: BooleanOperator, operands: list[T]) -> None:
        if len(operands) < 2:
            logger.debug("Dropping %s: only %d operand(s) available", operator.name, len(operands))
            return
        right = operands.pop()
        left = operands.pop()
        operands.append(self._combine(operator, left, right))


class QueryEvaluator:
    """Evaluate boolean keyword queries against an :class:`InvertedIndex`."""

    def __init__(self, analyzer: Analyzer | None = None, intersection: SetOperation = intersect) -> None:
        self.analyzer = analyzer if analyzer is not None else BooleanTermAnalyzer()
        self._operations: dict[BooleanOperator, SetOperation] = {
            BooleanOperator.AND: intersection,
            BooleanOperator.OR: union,
            BooleanOperator.NOT: difference,
        }

    def tokens(self, query: str) -> list[str]:
        """Analyze ``query`` exactly like document text."""
        return [token.text for token in self.analyzer(query)]

    def evaluate(self, query: str, index: InvertedIndex) -> list[int]:
        """Return the ascending ids of documents matching ``query``."""

        tokens = self.tokens(query)
        with (
            create_span("query.evaluate", attributes={"query.tokens": len(tokens)}) as span,
            track_latency(QUERY_LATENCY),
        ):
            reducer: _Reducer[Sequence[int]] = _Reducer(
                operand=index.get_postings,
                combine=lambda operator, left, right: self._operations[operator](left, right),
            )
            result = reducer.run(tokens)
            matches = list(result) if result is not None else []
            span.set_attribute("query.matches", len(matches))

        QUERY_COUNT.labels(outcome="hit" if matches else "empty").inc()
        logger.debug("Query %r -> %d match(es)", query, len(matches))
        return matches

    def explain(self, query: str) -> str:
        """Render the order in which ``query`` is resolved.

        ``"a or b and c"`` renders as ``"(a OR (b AND c))"``. Terms appear in
        their analyzed form; an empty query renders as an empty string.
        """

        reducer: _Reducer[str] = _Reducer(
            operand=lambda term: term,
            combine=lambda operator, left, right: f"({left} {operator.name} {right})",
        )
        rendered = reducer.run(self.tokens(query))
        return rendered if rendered is not None else ""
