"""
Output formatting for legend patch results.
"""

import json
from typing import List

from legend import (
    LegendOperation,
    LegendPatchResult,
    LegendStatistics,
    LineStatus,
    describe_operation,
)


class LegendReporter:
    """Formats hunks, annotations and statistics for display."""

    def format_hunks(self, operations: List[LegendOperation]) -> str:
        """Format parsed hunks as a preview."""
        if not operations:
            return "No operations to preview."

        lines = []
        for idx, operation in enumerate(operations):
            if lines:
                lines.append("")

            lines.append(f"{operation.type.value.upper()} Hunk {idx + 1}")
            for preview in describe_operation(operation):
                lines.append(f"  {preview}")

        return "\n".join(lines)

    def format_annotated(self, result: LegendPatchResult) -> str:
        """Format the annotated change view."""
        if not result.annotated:
            return "(No changes.)"

        return "\n".join(
            ('- ' if line.status == LineStatus.DELETED else '+ ') + line.text
            for line in result.annotated
        )

    def format_statistics(self, statistics: LegendStatistics) -> str:
        """Format apply statistics as text."""
        lines = [
            f"Deleted: {statistics.deletes}",
            f"Replaced: {statistics.replaces}",
            f"Inserted: {statistics.inserts}",
        ]

        if statistics.unmatched or statistics.skipped:
            lines.append(
                f"Applied {statistics.applied} of {statistics.selected} operation(s) "
                f"({statistics.unmatched} not found, {statistics.skipped} skipped)"
            )

        return "\n".join(lines)

    def format_json(self, result: LegendPatchResult) -> str:
        """Format the whole result as JSON."""
        statistics = result.statistics
        data = {
            'text': result.text,
            'annotated': [
                {'text': line.text, 'status': line.status.value}
                for line in result.annotated
            ],
            'statistics': {
                'deletes': statistics.deletes,
                'replaces': statistics.replaces,
                'inserts': statistics.inserts,
                'unmatched': statistics.unmatched,
                'skipped': statistics.skipped,
                'selected': statistics.selected,
                'applied': statistics.applied
            }
        }

        return json.dumps(data, indent=2)
