"""Interfaces for choosing between ambiguous candidate lines."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List

from legend.legend_types import LegendOperation, MatchCandidate


@dataclass(frozen=True)
class LegendChoice:
    """A resolver's decision: a buffer index, or skip the operation."""

    index: int | None = None

    @classmethod
    def at(cls, index: int) -> 'LegendChoice':
        """Choose the candidate at a buffer index."""
        return cls(index=index)

    @classmethod
    def skip(cls) -> 'LegendChoice':
        """Decline to choose; the operation will not be applied."""
        return cls(index=None)

    @property
    def is_skip(self) -> bool:
        return self.index is None


class LegendResolver(ABC):
    """Abstract base class for synchronous candidate resolution."""

    @abstractmethod
    def resolve(
        self,
        operation: LegendOperation,
        target: str,
        candidates: List[MatchCandidate]
    ) -> LegendChoice:
        """
        Pick which candidate line an operation applies to.

        Args:
            operation: The operation being applied
            target: The line content the operation is looking for
            candidates: Candidate lines, best first

        Returns:
            LegendChoice for one of the candidates' indices, or a skip
        """


class AsyncLegendResolver(ABC):
    """Abstract base class for resolution that may wait, e.g. on a person."""

    @abstractmethod
    async def resolve(
        self,
        operation: LegendOperation,
        target: str,
        candidates: List[MatchCandidate]
    ) -> LegendChoice:
        """
        Pick which candidate line an operation applies to.

        May suspend for as long as needed.  Cancelling the awaiting task
        abandons the apply run without affecting operations already applied.

        Args:
            operation: The operation being applied
            target: The line content the operation is looking for
            candidates: Candidate lines, best first

        Returns:
            LegendChoice for one of the candidates' indices, or a skip
        """


class FirstCandidateResolver(LegendResolver):
    """Always takes the first (best) candidate."""

    def resolve(
        self,
        operation: LegendOperation,
        target: str,
        candidates: List[MatchCandidate]
    ) -> LegendChoice:
        return LegendChoice.at(candidates[0].index)


class SkipResolver(LegendResolver):
    """Never applies an operation that needs a decision."""

    def resolve(
        self,
        operation: LegendOperation,
        target: str,
        candidates: List[MatchCandidate]
    ) -> LegendChoice:
        return LegendChoice.skip()


class CallbackResolver(LegendResolver):
    """Adapts a plain function taking the candidate list."""

    def __init__(self, callback: Callable[[List[MatchCandidate]], LegendChoice]):
        self._callback = callback

    def resolve(
        self,
        operation: LegendOperation,
        target: str,
        candidates: List[MatchCandidate]
    ) -> LegendChoice:
        return self._callback(candidates)
