"""Configuration for legend script matching."""

import os
from dataclasses import dataclass
from typing import List

import yaml

from legend.legend_exceptions import LegendSettingsError


@dataclass
class LegendSettings:
    """Tunable parameters for close-match searching."""

    close_match_divisor: int = 2
    min_close_threshold: int = 1
    max_close_candidates: int | None = None

    def close_threshold(self, normalized_target: str) -> int:
        """
        Work out the largest edit distance still treated as a close match.

        Args:
            normalized_target: The normalized text being searched for

        Returns:
            Maximum permitted distance for a close candidate
        """
        return max(self.min_close_threshold, len(normalized_target) // self.close_match_divisor)

    def validate(self) -> List[str]:
        """Validate the settings and return a list of problems found."""
        errors = []

        if self.close_match_divisor < 1:
            errors.append(f"close_match_divisor must be at least 1, got {self.close_match_divisor}")

        if self.min_close_threshold < 0:
            errors.append(f"min_close_threshold must not be negative, got {self.min_close_threshold}")

        if self.max_close_candidates is not None and self.max_close_candidates < 1:
            errors.append(f"max_close_candidates must be at least 1, got {self.max_close_candidates}")

        return errors

    @classmethod
    def load_from_file(cls, config_path: str) -> 'LegendSettings':
        """
        Load settings from a YAML file.

        Args:
            config_path: Path to the YAML settings file

        Returns:
            Loaded settings

        Raises:
            LegendSettingsError: If the file is missing, malformed or invalid
        """
        if not os.path.exists(config_path):
            raise LegendSettingsError(
                f"Settings file not found: {config_path}",
                {'path': config_path}
            )

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}

        except yaml.YAMLError as e:
            raise LegendSettingsError(
                f"Failed to parse settings file: {e}",
                {'path': config_path}
            ) from e

        if not isinstance(data, dict):
            raise LegendSettingsError(
                f"Settings file must contain a mapping: {config_path}",
                {'path': config_path}
            )

        matching = data.get('matching', {}) or {}
        defaults = cls()
        try:
            max_candidates = matching.get('max_close_candidates', defaults.max_close_candidates)
            settings = cls(
                close_match_divisor=int(matching.get('close_match_divisor', defaults.close_match_divisor)),
                min_close_threshold=int(matching.get('min_close_threshold', defaults.min_close_threshold)),
                max_close_candidates=None if max_candidates is None else int(max_candidates)
            )

        except (TypeError, ValueError) as e:
            raise LegendSettingsError(
                f"Invalid value in settings file: {e}",
                {'path': config_path}
            ) from e

        errors = settings.validate()
        if errors:
            raise LegendSettingsError(
                f"Invalid settings in {config_path}",
                {'path': config_path, 'errors': errors}
            )

        return settings

    def save_to_file(self, config_path: str) -> None:
        """Save settings to a YAML file."""
        data = {
            'matching': {
                'close_match_divisor': self.close_match_divisor,
                'min_close_threshold': self.min_close_threshold,
                'max_close_candidates': self.max_close_candidates
            }
        }

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
