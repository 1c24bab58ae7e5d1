"""One-shot application of a legend script to a block of text."""

import logging
from typing import Collection, List

from legend.legend_annotator import LegendAnnotator
from legend.legend_applier import LegendApplier
from legend.legend_matcher import LegendMatcher
from legend.legend_parser import LegendParser
from legend.legend_resolver import AsyncLegendResolver, LegendResolver
from legend.legend_settings import LegendSettings
from legend.legend_types import (
    DeleteOperation,
    InsertOperation,
    LegendOperation,
    LegendPatchResult,
    LegendStatistics,
    ReplaceOperation,
)


class LegendPatcher:
    """Parses a script, applies the selected hunks and annotates the changes."""

    def __init__(self, settings: LegendSettings | None = None, strict: bool = False):
        """
        Initialize the patcher.

        Args:
            settings: Matching settings, defaults used if not given
            strict: If True, unrecognised script lines are a parse error
        """
        self._parser = LegendParser(strict=strict)
        self._applier = LegendApplier(LegendMatcher(settings))
        self._annotator = LegendAnnotator()
        self._logger = logging.getLogger("LegendPatcher")

    def parse(self, script_text: str) -> List[LegendOperation]:
        """Parse script text into hunks."""
        return self._parser.parse(script_text)

    def patch(
        self,
        original_text: str,
        script_text: str,
        resolver: LegendResolver,
        enabled: Collection[int] | None = None
    ) -> LegendPatchResult:
        """
        Apply a legend script to some text.

        Args:
            original_text: Text to patch
            script_text: Legend script
            resolver: Consulted when a target line is ambiguous
            enabled: 0-indexed hunks to apply, or None for all of them

        Returns:
            LegendPatchResult with the patched text, annotation and statistics
        """
        original, operations = self._prepare(original_text, script_text, enabled)
        buffer = list(original)
        statistics = self._applier.apply(buffer, operations, resolver)
        return self._finish(original, buffer, operations, statistics)

    async def patch_async(
        self,
        original_text: str,
        script_text: str,
        resolver: AsyncLegendResolver,
        enabled: Collection[int] | None = None
    ) -> LegendPatchResult:
        """
        Apply a legend script to some text, awaiting the resolver as needed.

        Args:
            original_text: Text to patch
            script_text: Legend script
            resolver: Consulted when a target line is ambiguous
            enabled: 0-indexed hunks to apply, or None for all of them

        Returns:
            LegendPatchResult with the patched text, annotation and statistics
        """
        original, operations = self._prepare(original_text, script_text, enabled)
        buffer = list(original)
        statistics = await self._applier.apply_async(buffer, operations, resolver)
        return self._finish(original, buffer, operations, statistics)

    def _prepare(
        self,
        original_text: str,
        script_text: str,
        enabled: Collection[int] | None
    ) -> tuple[List[str], List[LegendOperation]]:
        hunks = self._parser.parse(script_text)
        if enabled is None:
            operations = hunks

        else:
            operations = [hunk for idx, hunk in enumerate(hunks) if idx in enabled]

        self._logger.debug("Applying %d of %d hunk(s)", len(operations), len(hunks))
        return original_text.split('\n'), operations

    def _finish(
        self,
        original: List[str],
        buffer: List[str],
        operations: List[LegendOperation],
        statistics: LegendStatistics
    ) -> LegendPatchResult:
        if statistics.applied < statistics.selected:
            self._logger.info(
                "Applied %d of %d operation(s): %d unmatched, %d skipped",
                statistics.applied, statistics.selected, statistics.unmatched, statistics.skipped
            )

        return LegendPatchResult(
            text='\n'.join(buffer),
            lines=buffer,
            annotated=self._annotator.build(original, operations),
            statistics=statistics,
            operations=operations
        )


def number_lines(text: str) -> str:
    """
    Render text with each line prefixed by its 1-indexed line number.

    Lines are trimmed and lower-cased, so the view matches the way targets
    are compared rather than the original layout.

    Args:
        text: Text to number

    Returns:
        Numbered text, or an empty string if `text` is blank
    """
    if not text.strip():
        return ''

    return '\n'.join(f'{idx + 1}{line.strip().lower()}' for idx, line in enumerate(text.split('\n')))


def describe_operation(operation: LegendOperation) -> List[str]:
    """
    Describe an operation as '-'/'+' prefixed preview lines.

    Args:
        operation: Operation to describe

    Returns:
        Preview lines
    """
    if isinstance(operation, DeleteOperation):
        return [f'- {operation.content}']

    if isinstance(operation, ReplaceOperation):
        return [f'- {operation.old_lines[0]}'] + [f'+ {line}' for line in operation.new_lines]

    if isinstance(operation, InsertOperation):
        return [f'+ {line}' for line in operation.new_lines]

    return []
