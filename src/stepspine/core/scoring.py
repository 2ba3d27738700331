"""Similarity scoring between step text and macro signatures."""

from __future__ import annotations

from dataclasses import dataclass


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Number of single character insertions, deletions and substitutions
    needed to turn ``s1`` into ``s2``.

    >>> levenshtein_distance("kitten", "sitting")
    3
    """
    if s1 == s2:
        return 0

    # table[i][j] is the distance between s1[:i] and s2[:j]
    table = [[0] * (len(s2) + 1) for _ in range(len(s1) + 1)]
    for i in range(len(s1) + 1):
        table[i][0] = i
    for j in range(len(s2) + 1):
        table[0][j] = j

    for j, c2 in enumerate(s2):
        for i, c1 in enumerate(s1):
            if c1 == c2:
                table[i + 1][j + 1] = table[i][j]
            else:
                deletion = table[i][j + 1] + 1
                insertion = table[i + 1][j] + 1
                substitution = table[i][j] + 1
                table[i + 1][j + 1] = min(substitution, deletion, insertion)

    return table[len(s1)][len(s2)]


@dataclass(frozen=True)
class SimilarityScore:
    """Edit distance score; lower is more similar."""

    value: int

    @classmethod
    def between(cls, s1: str, s2: str) -> SimilarityScore:
        return cls(levenshtein_distance(s1, s2))

    def beats(self, other: SimilarityScore) -> bool:
        return self.value < other.value

    def equals(self, other: SimilarityScore | None) -> bool:
        if other is None:
            return False
        return isinstance(other, SimilarityScore) and self.value == other.value
