"""Tests for validator configuration."""

import pytest
from quartzcron.config import ValidatorConfig


class TestValidatorConfig:
    """Tests for ValidatorConfig."""

    def test_defaults(self):
        """Test default configuration."""
        config = ValidatorConfig()

        assert config.verbose is False
        assert config.fail_fast is True
        assert config.min_year == 1970
        assert config.max_year == 2199
        assert config.current_year is None
        assert config.collapse_whitespace is False
        assert config.year_bounds == (1970, 2199)

    def test_current_year_replaces_min_year(self):
        """Test the injected current year becomes the lower bound."""
        config = ValidatorConfig(current_year=2026)

        assert config.year_bounds == (2026, 2199)

    def test_min_year_above_max_year(self):
        """Test validation of year bounds."""
        with pytest.raises(ValueError, match="min_year must not be greater than max_year"):
            ValidatorConfig(min_year=2100, max_year=2000)

    def test_current_year_above_max_year(self):
        """Test validation of the current year."""
        with pytest.raises(ValueError, match="current_year must not be greater than max_year"):
            ValidatorConfig(current_year=2300)


class TestFromEnv:
    """Tests for ValidatorConfig.from_env."""

    def test_defaults_without_env(self, monkeypatch):
        """Test an empty environment yields defaults."""
        for name in ("VERBOSE", "FAIL_FAST", "MIN_YEAR", "MAX_YEAR", "CURRENT_YEAR", "COLLAPSE_WHITESPACE"):
            monkeypatch.delenv(f"QUARTZCRON_{name}", raising=False)

        assert ValidatorConfig.from_env() == ValidatorConfig()

    def test_reads_prefixed_variables(self, monkeypatch):
        """Test values are read and cast."""
        monkeypatch.setenv("QUARTZCRON_VERBOSE", "true")
        monkeypatch.setenv("QUARTZCRON_FAIL_FAST", "0")
        monkeypatch.setenv("QUARTZCRON_MAX_YEAR", "2100")
        monkeypatch.setenv("QUARTZCRON_CURRENT_YEAR", "2026")
        monkeypatch.setenv("QUARTZCRON_COLLAPSE_WHITESPACE", "yes")

        config = ValidatorConfig.from_env()

        assert config.verbose is True
        assert config.fail_fast is False
        assert config.max_year == 2100
        assert config.current_year == 2026
        assert config.collapse_whitespace is True
        assert config.year_bounds == (2026, 2100)

    def test_custom_prefix(self, monkeypatch):
        """Test a custom prefix."""
        monkeypatch.setenv("CRON_MIN_YEAR", "2000")

        config = ValidatorConfig.from_env(prefix="CRON_")

        assert config.min_year == 2000

    def test_invalid_values_raise(self, monkeypatch):
        """Test invalid environment values fail validation."""
        monkeypatch.setenv("BAD_MIN_YEAR", "2300")

        with pytest.raises(ValueError):
            ValidatorConfig.from_env(prefix="BAD_")
