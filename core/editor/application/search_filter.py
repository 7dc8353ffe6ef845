"""Fuzzy list filtering: substring, then subsequence, then edit distance."""

from typing import Iterable, List

from core import Todo


def levenshtein(a: str, b: str) -> int:
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (ca != cb),
            ))
        previous = current
    return previous[-1]


def is_subsequence(query: str, text: str) -> bool:
    it = iter(text)
    return all(ch in it for ch in query)


def max_edit_distance(query: str) -> int:
    return 1 if len(query) <= 3 else 2


def matches(query: str, text: str) -> bool:
    """Case-insensitive fuzzy match of query against text.

    Tiers are checked cheapest first: contiguous substring, in-order
    subsequence ("prj" -> "project"), then Levenshtein distance against the
    whole text or any single word of it, with a threshold of 1 for queries up
    to three characters and 2 otherwise ("mlik" -> "buy milk").
    """
    q = query.lower()
    t = text.lower()
    if q in t:
        return True
    if is_subsequence(q, t):
        return True
    limit = max_edit_distance(q)
    return any(levenshtein(q, candidate) <= limit for candidate in (t, *t.split()))


def filter_indices(query: str, todos: Iterable[Todo]) -> List[int]:
    """Store indices of todos surviving query, in store order."""
    items = list(todos)
    if not query:
        return list(range(len(items)))
    return [idx for idx, todo in enumerate(items) if matches(query, todo.text)]


__all__ = ["levenshtein", "is_subsequence", "max_edit_distance", "matches", "filter_indices"]
