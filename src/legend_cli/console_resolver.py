"""
Interactive resolution of ambiguous matches on a terminal.
"""

from typing import Callable, List, TextIO

from legend import LegendChoice, LegendOperation, LegendResolver, MatchCandidate


class ConsoleResolver(LegendResolver):
    """Asks the user which candidate line an operation should apply to."""

    def __init__(self, input_func: Callable[[str], str] = input, output: TextIO | None = None):
        """
        Initialize the resolver.

        Args:
            input_func: Function used to read a reply, given a prompt
            output: Stream for the candidate listing, stdout if not given
        """
        self._input = input_func
        self._output = output

    def resolve(
        self,
        operation: LegendOperation,
        target: str,
        candidates: List[MatchCandidate]
    ) -> LegendChoice:
        self._write(f"{operation.type.value.upper()} operation")
        self._write("Multiple lines found or close matches for:")
        self._write(f"  {target}")
        self._write("Pick the line you want to patch or skip entirely:")
        for candidate in candidates:
            self._write(f"  {self.format_candidate(candidate)}")

        by_line = {candidate.index + 1: candidate for candidate in candidates}
        default = candidates[0].index + 1

        while True:
            reply = self._input(f"Line number [{default}], or 's' to skip: ").strip().lower()
            if not reply:
                return LegendChoice.at(default - 1)

            if reply in ('s', 'skip'):
                return LegendChoice.skip()

            if reply.isdigit() and int(reply) in by_line:
                return LegendChoice.at(int(reply) - 1)

            self._write(f"Not one of the offered lines: {reply}")

    @staticmethod
    def format_candidate(candidate: MatchCandidate) -> str:
        """Format a candidate the way it is offered to the user."""
        label = f"Line {candidate.index + 1}: {candidate.text}"
        if candidate.exact:
            return f"{label} (exact match)"

        if candidate.distance is not None:
            return f"{label} (distance={candidate.distance})"

        return label

    def _write(self, text: str) -> None:
        print(text, file=self._output)
