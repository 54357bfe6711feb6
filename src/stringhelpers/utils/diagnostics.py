"""
"Did you mean?" helpers for argument errors.

Unknown names passed to the library (alignment modes, log levels) are
compared against the valid ones so `InvalidArgument` can carry a hint.
"""

from __future__ import annotations


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Calculate the edit distance between two strings.

    Counts the minimum number of single-character insertions, deletions
    or substitutions needed to turn ``s1`` into ``s2``.

    Args:
        s1: First string
        s2: Second string

    Returns:
        The edit distance as an integer
    """
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    if not s2:
        return len(s1)

    previous = list(range(len(s2) + 1))

    for i, a in enumerate(s1, start=1):
        current = [i]
        for j, b in enumerate(s2, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (a != b),
                )
            )
        previous = current

    return previous[-1]


def suggest_similar(
    name: str,
    candidates: list[str],
    max_distance: int = 2,
    max_suggestions: int = 3,
) -> list[str]:
    """
    Return candidates within ``max_distance`` edits of ``name``.

    Comparison is case-insensitive. Results are ordered closest first,
    ties broken alphabetically.
    """
    scored = []
    for candidate in candidates:
        if abs(len(candidate) - len(name)) > max_distance:
            continue

        distance = levenshtein_distance(name.lower(), candidate.lower())
        if distance <= max_distance:
            scored.append((distance, candidate))

    scored.sort()
    return [candidate for _, candidate in scored[:max_suggestions]]
