"""Set operations over ascending, duplicate-free document id sequences.

Every function takes two sorted sequences, leaves them untouched and returns
a new sorted list. ``intersect`` and ``intersect_with_skips`` always produce
the same output; the latter only pays off when one side is much longer.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Sequence


SetOperation = Callable[[Sequence[int], Sequence[int]], list[int]]


def union(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Merge two sorted sequences, collapsing shared ids."""

    merged: list[int] = []
    i = j = 0
    len_a, len_b = len(a), len(b)
    while i < len_a and j < len_b:
        left, right = a[i], b[j]
        if left == right:
            merged.append(left)
            i += 1
            j += 1
        elif left < right:
            merged.append(left)
            i += 1
        else:
            merged.append(right)
            j += 1
    merged.extend(a[i:])
    merged.extend(b[j:])
    return merged


def intersect(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Two-pointer intersection, advancing whichever side is smaller."""

    result: list[int] = []
    i = j = 0
    len_a, len_b = len(a), len(b)
    while i < len_a and j < len_b:
        left, right = a[i], b[j]
        if left == right:
            result.append(left)
            i += 1
            j += 1
        elif left < right:
            i += 1
        else:
            j += 1
    return result


def intersect_with_skips(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Intersection that jumps to the first element >= the other side's head.

    Uses a lower-bound search instead of single steps whenever the pointers
    diverge, which skips long runs in the larger input.
    """

    result: list[int] = []
    i = j = 0
    len_a, len_b = len(a), len(b)
    while i < len_a and j < len_b:
        left, right = a[i], b[j]
        if left == right:
            result.append(left)
            i += 1
            j += 1
        elif left < right:
            i = bisect_left(a, right, i + 1, len_a)
        else:
            j = bisect_left(b, left, j + 1, len_b)
    return result


def difference(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Ids of ``a`` that are not in ``b``, in ``a``'s order."""

    if not b:
        return list(a)
    excluded = set(b)
    return [doc_id for doc_id in a if doc_id not in excluded]


_INTERSECTIONS: dict[str, SetOperation] = {
    "linear": intersect,
    "galloping": intersect_with_skips,
}


def get_intersection(strategy: str) -> SetOperation:
    """Return the intersection function registered for ``strategy``."""

    try:
        return _INTERSECTIONS[strategy.lower()]
    except KeyError:
        msg = f"Unknown intersection strategy '{strategy}'. Available: {sorted(_INTERSECTIONS)}"
        raise ValueError(msg) from None
