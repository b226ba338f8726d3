"""'Did you mean' suggestions via bounded Levenshtein distance."""

import math
from typing import Iterable

DEFAULT_SUGGESTIONS = 3
MAX_DISTANCE = 3
MAX_COMPARE_LENGTH = 64


def distance_threshold(length: int) -> int:
    """Edit distance still considered close for a name of *length* characters.

    Roughly 40% of the length, never below 1 and never above 3.
    """
    return min(MAX_DISTANCE, max(1, math.ceil(0.4 * length)))


def bounded_levenshtein(a: str, b: str, limit: int) -> int | None:
    """Levenshtein distance between *a* and *b*, or None once it must exceed *limit*."""
    if abs(len(a) - len(b)) > limit:
        return None
    if a == b:
        return 0

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i] + [0] * len(b)
        row_min = i
        for j, cb in enumerate(b, 1):
            cost = 0 if ca == cb else 1
            current[j] = min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost)
            if current[j] < row_min:
                row_min = current[j]
        if row_min > limit:
            return None
        previous = current

    result = previous[-1]
    return result if result <= limit else None


def find_similar(
    candidate: str | None,
    names: Iterable[str],
    max_suggestions: int = DEFAULT_SUGGESTIONS,
    max_distance: int | None = None,
) -> list[str]:
    """Return up to *max_suggestions* names closest to *candidate*.

    Comparison is case-insensitive. Results are ordered by distance, ties by
    the order of *names*.
    """
    if not candidate or not candidate.strip() or max_suggestions <= 0:
        return []

    query = candidate.strip().lower()[:MAX_COMPARE_LENGTH]
    limit = max_distance if max_distance is not None else distance_threshold(len(query))

    scored: list[tuple[int, int, str]] = []
    exact = 0
    for index, name in enumerate(names):
        if not name:
            continue
        target = name.strip().lower()[:MAX_COMPARE_LENGTH]
        d = bounded_levenshtein(query, target, limit)
        if d is None:
            continue
        scored.append((d, index, name))
        if d == 0:
            exact += 1
            if exact >= max_suggestions:
                break

    scored.sort(key=lambda item: (item[0], item[1]))
    return [name for _, _, name in scored[:max_suggestions]]
