"""Locate the buffer line an operation refers to."""

import logging
from typing import List

from legend.legend_distance import distance
from legend.legend_exceptions import LegendSettingsError
from legend.legend_normalizer import normalize
from legend.legend_settings import LegendSettings
from legend.legend_types import MatchCandidate, MatchResult


class LegendMatcher:
    """Finds exact and close candidate lines for a target."""

    def __init__(self, settings: LegendSettings | None = None):
        """
        Initialize the matcher.

        Args:
            settings: Matching settings, defaults used if not given

        Raises:
            LegendSettingsError: If the settings are invalid
        """
        self._settings = settings if settings is not None else LegendSettings()
        errors = self._settings.validate()
        if errors:
            raise LegendSettingsError("Invalid matching settings", {'errors': errors})

        self._logger = logging.getLogger("LegendMatcher")

    def settings(self) -> LegendSettings:
        """Get the matching settings."""
        return self._settings

    def find_matches(self, buffer: List[str], target: str) -> MatchResult:
        """
        Search the buffer for lines matching a target.

        Lines whose normalized text equals the normalized target are exact
        matches.  Only if there are none is edit distance used to find close
        matches, so a coincidentally similar line never competes with an exact one.

        Args:
            buffer: Current buffer lines
            target: Line content we are looking for

        Returns:
            MatchResult with exact indices in buffer order, or close candidates
            in ascending distance order
        """
        target_norm = normalize(target)
        normalized_lines = [normalize(line) for line in buffer]

        exact = [idx for idx, line_norm in enumerate(normalized_lines) if line_norm == target_norm]
        if exact:
            return MatchResult(exact=exact, close=[])

        scored = [
            MatchCandidate(
                index=idx,
                text=buffer[idx],
                exact=False,
                distance=distance(line_norm, target_norm)
            )
            for idx, line_norm in enumerate(normalized_lines)
        ]

        # sort() is stable so equal distances keep buffer order
        scored.sort(key=lambda c: c.distance)

        threshold = self._settings.close_threshold(target_norm)
        close = [c for c in scored if c.distance is not None and c.distance <= threshold]

        limit = self._settings.max_close_candidates
        if limit is not None:
            close = close[:limit]

        self._logger.debug(
            "No exact match for %r, %d close candidate(s) within distance %d",
            target, len(close), threshold
        )
        return MatchResult(exact=[], close=close)

    def candidates(self, buffer: List[str], result: MatchResult) -> List[MatchCandidate]:
        """
        Build the candidate list offered for resolution.

        Args:
            buffer: Buffer the result was computed against
            result: Result of `find_matches`

        Returns:
            Exact candidates (no distance) if there are any, otherwise the close candidates
        """
        if result.exact:
            return [MatchCandidate(index=idx, text=buffer[idx], exact=True) for idx in result.exact]

        return list(result.close)
