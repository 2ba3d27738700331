"""
Competition between macros that can all interpret the same step.

Every candidate is scored by the edit distance between the raw step text and
the macro's stripped signature. The lowest distance wins; a tie for first
place is an error rather than a guess.

Note that the step is NOT stripped before scoring. Punctuation in a step
therefore counts against every candidate equally, and only the signature
side loses its regex syntax.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from stepspine.core.errors import AmbiguousStepError, UndefinedStepError
from stepspine.core.logging import get_logger
from stepspine.core.scoring import SimilarityScore
from stepspine.framework.macro import Macro

logger = get_logger(__name__)


@dataclass(frozen=True)
class MatchCandidate:
    """A compatible macro and its score for one step."""

    macro: Macro
    score: SimilarityScore


class Competition:
    """Ranks compatible macros for a step and picks a clear winner."""

    FIRST_PLACE = 0
    SECOND_PLACE = 1

    def __init__(self, step: str, macros: Iterable[Macro]):
        self.step = step
        self.results = self._rank(step, macros)

    @staticmethod
    def _rank(step: str, macros: Iterable[Macro]) -> list[MatchCandidate]:
        candidates = [
            MatchCandidate(macro, SimilarityScore.between(step, macro.similarity_key()))
            for macro in macros
        ]
        return sorted(candidates, key=lambda candidate: candidate.score.value)

    def clear_winner(self) -> Macro:
        """
        The single best macro for the step.

        Raises:
            UndefinedStepError: If there are no candidates
            AmbiguousStepError: If the two best candidates score the same
        """
        if len(self) == 0:
            raise UndefinedStepError(self.step)
        if self._joint_first_place():
            tied = [
                str(candidate.macro)
                for candidate in self.results
                if candidate.score.equals(self.results[self.FIRST_PLACE].score)
            ]
            raise AmbiguousStepError(self.step, tied)
        logger.debug(
            "competition.ranked",
            step=self.step,
            winner=str(self.winner()),
            scores=[(str(c.macro), c.score.value) for c in self.results],
        )
        return self.winner()

    def winner(self) -> Macro:
        return self.results[self.FIRST_PLACE].macro

    def _joint_first_place(self) -> bool:
        return len(self) > 1 and self.results[self.FIRST_PLACE].score.equals(
            self.results[self.SECOND_PLACE].score
        )

    def __len__(self) -> int:
        return len(self.results)
