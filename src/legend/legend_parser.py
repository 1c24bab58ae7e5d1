"""Legend script parsing."""

import logging
from typing import List

from legend.legend_exceptions import LegendParseError
from legend.legend_types import DeleteOperation, InsertOperation, LegendOperation, ReplaceOperation


DELETE_PREFIX = 'D-'
REPLACE_PREFIX = 'M-'
REPLACE_LINE_PREFIX = 'M+-'
INSERT_PREFIX = 'AF+'
INSERT_LINE_PREFIX = 'NAD+'


class LegendParser:
    """Parser for the legend edit script."""

    def __init__(self, strict: bool = False):
        """
        Initialize the parser.

        Args:
            strict: If True, raise on lines that aren't part of any directive
                instead of skipping them
        """
        self._strict = strict
        self._logger = logging.getLogger("LegendParser")

    def parse(self, script_text: str) -> List[LegendOperation]:
        """
        Parse legend script text into operations.

        Args:
            script_text: Script text, one directive per line

        Returns:
            List of parsed operations in script order
        """
        return self.parse_lines(script_text.split('\n'))

    def parse_lines(self, lines: List[str]) -> List[LegendOperation]:
        """
        Parse legend script lines into operations.

        Recognised directives are:

            D-<content>                      delete a line
            M-<old> then M+-<new> ...        replace a line with zero or more lines
            AF+<anchor> then NAD+<new> ...   insert lines after an anchor

        Args:
            lines: Script lines

        Returns:
            List of parsed operations in script order

        Raises:
            LegendParseError: In strict mode, if a line isn't a recognised directive
        """
        operations: List[LegendOperation] = []

        i = 0
        while i < len(lines):
            raw = lines[i].strip()

            if raw.startswith(DELETE_PREFIX):
                operations.append(DeleteOperation(raw[len(DELETE_PREFIX):].strip()))
                i += 1

            elif raw.startswith(REPLACE_PREFIX):
                old_line = raw[len(REPLACE_PREFIX):].strip()
                new_lines, i = self._collect(lines, i + 1, REPLACE_LINE_PREFIX)
                operations.append(ReplaceOperation((old_line,), new_lines))

            elif raw.startswith(INSERT_PREFIX):
                anchor = raw[len(INSERT_PREFIX):].strip()
                new_lines, i = self._collect(lines, i + 1, INSERT_LINE_PREFIX)
                operations.append(InsertOperation(anchor, new_lines))

            else:
                self._unrecognised(i, lines[i])
                i += 1

        return operations

    def _collect(self, lines: List[str], start_idx: int, prefix: str) -> tuple[tuple[str, ...], int]:
        """
        Collect consecutive continuation lines carrying a prefix.

        Args:
            lines: All script lines
            start_idx: Index of the first possible continuation line
            prefix: Continuation prefix to look for

        Returns:
            Tuple of (collected contents, index of the first line not consumed)
        """
        collected: List[str] = []
        i = start_idx
        while i < len(lines):
            raw = lines[i].strip()
            if not raw.startswith(prefix):
                break

            collected.append(raw[len(prefix):].strip())
            i += 1

        return tuple(collected), i

    def _unrecognised(self, idx: int, line: str) -> None:
        if not line.strip():
            return

        if self._strict:
            raise LegendParseError(
                f"Unrecognised script line {idx + 1}: {line}",
                {'line_number': idx + 1, 'line': line}
            )

        self._logger.debug("Skipping unrecognised script line %d: %r", idx + 1, line)
