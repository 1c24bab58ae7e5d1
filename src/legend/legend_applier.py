"""Sequential application of legend operations to a line buffer."""

import logging
from typing import List, Tuple

from legend.legend_exceptions import LegendResolutionError
from legend.legend_matcher import LegendMatcher
from legend.legend_resolver import AsyncLegendResolver, LegendChoice, LegendResolver
from legend.legend_types import (
    DeleteOperation,
    InsertOperation,
    LegendOperation,
    LegendStatistics,
    MatchCandidate,
    OperationOutcome,
    ReplaceOperation,
)


class LegendApplier:
    """
    Applies operations, in order, to a progressively mutated buffer.

    Each operation sees the buffer as left by the ones before it, so indices
    shift as lines are removed and inserted.  Operations are never reordered.
    """

    def __init__(self, matcher: LegendMatcher | None = None):
        """
        Initialize the applier.

        Args:
            matcher: Matcher used to locate each operation's target line
        """
        self._matcher = matcher if matcher is not None else LegendMatcher()
        self._logger = logging.getLogger("LegendApplier")

    def apply(
        self,
        buffer: List[str],
        operations: List[LegendOperation],
        resolver: LegendResolver
    ) -> LegendStatistics:
        """
        Apply operations to a buffer, modifying it in place.

        Args:
            buffer: Lines to modify
            operations: Operations in script order
            resolver: Consulted whenever a target is ambiguous or only loosely matched

        Returns:
            Statistics describing what was applied

        Raises:
            LegendResolutionError: If the resolver picks a line it wasn't offered
        """
        statistics = LegendStatistics(selected=len(operations))

        for operation in operations:
            index, candidates = self._locate(buffer, operation)
            if candidates:
                choice = resolver.resolve(operation, operation.target, candidates)
                index = self._check_choice(operation, choice, candidates)
                if index is None:
                    self._record(statistics, operation, OperationOutcome.SKIPPED)
                    continue

            self._record(statistics, operation, self._apply_at(buffer, operation, index))

        return statistics

    async def apply_async(
        self,
        buffer: List[str],
        operations: List[LegendOperation],
        resolver: AsyncLegendResolver
    ) -> LegendStatistics:
        """
        Apply operations to a buffer, awaiting the resolver where needed.

        If the task is cancelled while waiting for a decision, the operations
        already applied stay in the buffer and the pending one is not applied.

        Args:
            buffer: Lines to modify
            operations: Operations in script order
            resolver: Consulted whenever a target is ambiguous or only loosely matched

        Returns:
            Statistics describing what was applied

        Raises:
            LegendResolutionError: If the resolver picks a line it wasn't offered
        """
        statistics = LegendStatistics(selected=len(operations))

        for operation in operations:
            index, candidates = self._locate(buffer, operation)
            if candidates:
                choice = await resolver.resolve(operation, operation.target, candidates)
                index = self._check_choice(operation, choice, candidates)
                if index is None:
                    self._record(statistics, operation, OperationOutcome.SKIPPED)
                    continue

            self._record(statistics, operation, self._apply_at(buffer, operation, index))

        return statistics

    def _locate(
        self,
        buffer: List[str],
        operation: LegendOperation
    ) -> Tuple[int | None, List[MatchCandidate]]:
        """
        Find where an operation applies.

        Args:
            buffer: Current buffer lines
            operation: Operation to locate

        Returns:
            Tuple of (index, candidates).  A unique exact match gives its index
            and no candidates; an ambiguous or close-only match gives no index
            and the candidates to resolve; no match gives neither.
        """
        result = self._matcher.find_matches(buffer, operation.target)
        if result.is_empty():
            return None, []

        if len(result.exact) == 1:
            return result.exact[0], []

        return None, self._matcher.candidates(buffer, result)

    def _check_choice(
        self,
        operation: LegendOperation,
        choice: LegendChoice,
        candidates: List[MatchCandidate]
    ) -> int | None:
        if choice.is_skip:
            return None

        offered = [c.index for c in candidates]
        if choice.index not in offered:
            raise LegendResolutionError(
                f"Resolver chose line {choice.index}, which was not a candidate",
                {
                    'operation': operation.type.value,
                    'target': operation.target,
                    'chosen': choice.index,
                    'offered': offered
                }
            )

        return choice.index

    def _apply_at(
        self,
        buffer: List[str],
        operation: LegendOperation,
        index: int | None
    ) -> OperationOutcome:
        """
        Apply a single operation at a resolved buffer index.

        Args:
            buffer: Lines to modify
            operation: Operation to apply
            index: Resolved 0-indexed line, or None if not applying

        Returns:
            Outcome of the operation
        """
        if index is None:
            return OperationOutcome.UNMATCHED

        if isinstance(operation, DeleteOperation):
            del buffer[index]

        elif isinstance(operation, ReplaceOperation):
            buffer[index:index + 1] = list(operation.new_lines)

        elif isinstance(operation, InsertOperation):
            buffer[index + 1:index + 1] = list(operation.new_lines)

        return OperationOutcome.APPLIED

    def _record(
        self,
        statistics: LegendStatistics,
        operation: LegendOperation,
        outcome: OperationOutcome
    ) -> None:
        if outcome is OperationOutcome.APPLIED:
            if isinstance(operation, DeleteOperation):
                statistics.deletes += 1

            elif isinstance(operation, ReplaceOperation):
                statistics.replaces += 1

            elif isinstance(operation, InsertOperation):
                statistics.inserts += len(operation.new_lines)

            return

        if outcome is OperationOutcome.SKIPPED:
            self._logger.info("Skipped %s for %r at resolver's request", operation.type.value, operation.target)
            statistics.skipped += 1
            return

        self._logger.debug("No line matches %s target %r", operation.type.value, operation.target)
        statistics.unmatched += 1
