"""Annotated change view of a legend script against the original text."""

from typing import List

from legend.legend_normalizer import normalize
from legend.legend_types import (
    AnnotatedLine,
    DeleteOperation,
    InsertOperation,
    LegendOperation,
    LineStatus,
    ReplaceOperation,
)


class LegendAnnotator:
    """
    Builds a deleted/inserted line view for display.

    This works on the original lines, not on the applier's output, and always
    takes the first unchanged line whose normalized text equals the target.  It
    never asks a resolver, so when an ambiguity was resolved to a later
    candidate the annotation can point at a different physical line than the
    one actually changed.
    """

    def build(self, original: List[str], operations: List[LegendOperation]) -> List[AnnotatedLine]:
        """
        Annotate the changes a list of operations describes.

        Args:
            original: Original buffer lines
            operations: Operations in script order

        Returns:
            Deleted and inserted lines in display order
        """
        annotated = [AnnotatedLine(text, LineStatus.UNCHANGED) for text in original]

        for operation in operations:
            idx = self._find_first_unchanged(annotated, operation.target)
            if idx is None:
                continue

            if isinstance(operation, DeleteOperation):
                annotated[idx].status = LineStatus.DELETED

            elif isinstance(operation, ReplaceOperation):
                annotated[idx].status = LineStatus.DELETED
                annotated[idx + 1:idx + 1] = self._inserted(operation.new_lines)

            elif isinstance(operation, InsertOperation):
                annotated[idx + 1:idx + 1] = self._inserted(operation.new_lines)

        return [line for line in annotated if line.status != LineStatus.UNCHANGED]

    def _find_first_unchanged(self, annotated: List[AnnotatedLine], target: str) -> int | None:
        target_norm = normalize(target)
        for idx, line in enumerate(annotated):
            if line.status == LineStatus.UNCHANGED and normalize(line.text) == target_norm:
                return idx

        return None

    def _inserted(self, new_lines: tuple[str, ...]) -> List[AnnotatedLine]:
        return [AnnotatedLine(text, LineStatus.INSERTED) for text in new_lines]
