"""Shortest word-ladder search over a dictionary."""

from collections import deque
from typing import Iterable, List, Optional

from .data import Dictionary, wildcard_patterns
from .models import ValidationResult
from .validate import validate


def differs_by_one_letter(first: Optional[str], second: Optional[str]) -> bool:
    """True if both words have equal length and differ in exactly one position."""
    if first is None or second is None or len(first) != len(second):
        return False
    return sum(1 for a, b in zip(first, second) if a != b) == 1


def _as_dictionary(dictionary: Iterable[str]) -> Dictionary:
    if isinstance(dictionary, Dictionary):
        return dictionary
    return Dictionary(dictionary)


def find_shortest_path(start: str, target: str, dictionary: Iterable[str]) -> List[str]:
    """
    Breadth-first search for the shortest ladder from `start` to `target`.

    Two words are adjacent when they differ in exactly one position; neighbors
    are looked up through the wildcard pattern index. The start word does not
    have to be in the dictionary, the target does.

    Returns:
        The path from start to target inclusive, [start] when they are equal,
        or an empty list when no ladder exists.
    """
    start = start.upper()
    target = target.upper()
    words = _as_dictionary(dictionary)

    if target not in words:
        return []
    if start == target:
        return [start]

    index = words.pattern_index
    queue = deque([[start]])
    visited = {start}

    while queue:
        path = queue.popleft()
        current = path[-1]
        for pattern in wildcard_patterns(current):
            for neighbor in index.get(pattern, []):
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                next_path = path + [neighbor]
                # first arrival is the shortest in an unweighted graph
                if neighbor == target:
                    return next_path
                queue.append(next_path)

    return []


def score_path(target: str, path: List[str], dictionary: Iterable[str]) -> List[ValidationResult]:
    """Validation results for every word of `path` after the start word."""
    if not path or len(path) <= 1:
        return []
    return [validate(word, target, dictionary) for word in path[1:]]
