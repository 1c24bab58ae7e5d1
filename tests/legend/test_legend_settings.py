"""Tests for legend settings."""

import pytest

from legend.legend_exceptions import LegendSettingsError
from legend.legend_settings import LegendSettings


class TestLegendSettingsThreshold:
    """Test the close-match threshold calculation."""

    def test_default_threshold_is_half_length(self):
        """Test that the default threshold is half the target length, rounded down."""
        settings = LegendSettings()

        assert settings.close_threshold("abcdefgh") == 4
        assert settings.close_threshold("abcdefghi") == 4

    def test_default_threshold_minimum(self):
        """Test that short targets still allow one edit."""
        settings = LegendSettings()

        assert settings.close_threshold("a") == 1
        assert settings.close_threshold("") == 1

    def test_custom_threshold(self):
        """Test custom divisor and minimum."""
        settings = LegendSettings(close_match_divisor=3, min_close_threshold=2)

        assert settings.close_threshold("abcdefghi") == 3
        assert settings.close_threshold("abc") == 2


class TestLegendSettingsValidation:
    """Test settings validation."""

    def test_defaults_valid(self):
        """Test that the defaults validate cleanly."""
        assert LegendSettings().validate() == []

    def test_invalid_values(self):
        """Test that each bad value is reported."""
        settings = LegendSettings(close_match_divisor=0, min_close_threshold=-1, max_close_candidates=0)

        errors = settings.validate()

        assert len(errors) == 3
        assert any('close_match_divisor' in e for e in errors)
        assert any('min_close_threshold' in e for e in errors)
        assert any('max_close_candidates' in e for e in errors)


class TestLegendSettingsFile:
    """Test loading and saving settings."""

    def test_save_and_load(self, tmp_path):
        """Test that saved settings load back unchanged."""
        path = tmp_path / "legend.yaml"
        settings = LegendSettings(close_match_divisor=3, min_close_threshold=2, max_close_candidates=5)

        settings.save_to_file(str(path))
        loaded = LegendSettings.load_from_file(str(path))

        assert loaded == settings

    def test_partial_file_uses_defaults(self, tmp_path):
        """Test that missing keys fall back to defaults."""
        path = tmp_path / "legend.yaml"
        path.write_text("matching:\n  max_close_candidates: 3\n", encoding='utf-8')

        loaded = LegendSettings.load_from_file(str(path))

        assert loaded == LegendSettings(max_close_candidates=3)

    def test_empty_file_uses_defaults(self, tmp_path):
        """Test that an empty file gives default settings."""
        path = tmp_path / "legend.yaml"
        path.write_text("", encoding='utf-8')

        assert LegendSettings.load_from_file(str(path)) == LegendSettings()

    def test_missing_file(self, tmp_path):
        """Test that a missing file is reported."""
        path = tmp_path / "missing.yaml"

        with pytest.raises(LegendSettingsError) as exc_info:
            LegendSettings.load_from_file(str(path))

        assert "not found" in str(exc_info.value)
        assert exc_info.value.error_details['path'] == str(path)

    def test_malformed_yaml(self, tmp_path):
        """Test that unparseable YAML is reported."""
        path = tmp_path / "legend.yaml"
        path.write_text("matching: [unclosed\n", encoding='utf-8')

        with pytest.raises(LegendSettingsError):
            LegendSettings.load_from_file(str(path))

    def test_not_a_mapping(self, tmp_path):
        """Test that a top-level list is rejected."""
        path = tmp_path / "legend.yaml"
        path.write_text("- one\n- two\n", encoding='utf-8')

        with pytest.raises(LegendSettingsError):
            LegendSettings.load_from_file(str(path))

    def test_non_numeric_value(self, tmp_path):
        """Test that a non-numeric value is rejected."""
        path = tmp_path / "legend.yaml"
        path.write_text("matching:\n  close_match_divisor: lots\n", encoding='utf-8')

        with pytest.raises(LegendSettingsError):
            LegendSettings.load_from_file(str(path))

    def test_invalid_value(self, tmp_path):
        """Test that values failing validation are rejected with the problems listed."""
        path = tmp_path / "legend.yaml"
        path.write_text("matching:\n  close_match_divisor: 0\n", encoding='utf-8')

        with pytest.raises(LegendSettingsError) as exc_info:
            LegendSettings.load_from_file(str(path))

        assert len(exc_info.value.error_details['errors']) == 1
