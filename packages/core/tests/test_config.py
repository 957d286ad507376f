"""Tests for the configuration system."""

import pytest

from expense_tracker.config import AnalyticsConfig, ExpenseTrackerConfig, ExportConfig


class TestAnalyticsConfig:
    """Test suite for AnalyticsConfig."""

    def test_default_values(self):
        """AnalyticsConfig should default to a top-10 list and 12 months."""
        config = AnalyticsConfig()

        assert config.top_categories_limit == 10
        assert config.trend_months == 12

    def test_limits_validation(self):
        """Limits must be positive and bounded."""
        with pytest.raises(ValueError):
            AnalyticsConfig(top_categories_limit=0)

        with pytest.raises(ValueError):
            AnalyticsConfig(trend_months=0)

        with pytest.raises(ValueError):
            AnalyticsConfig(trend_months=121)

    def test_from_environment(self, monkeypatch):
        """AnalyticsConfig should load from environment variables."""
        monkeypatch.setenv("EXPENSE_TRACKER_ANALYTICS_TOP_CATEGORIES_LIMIT", "5")
        monkeypatch.setenv("EXPENSE_TRACKER_ANALYTICS_TREND_MONTHS", "6")

        config = AnalyticsConfig()

        assert config.top_categories_limit == 5
        assert config.trend_months == 6


class TestExportConfig:
    """Test suite for ExportConfig."""

    def test_default_prefix(self):
        """ExportConfig defaults to the expense-tracker prefix."""
        assert ExportConfig().filename_prefix == "expense-tracker"

    def test_prefix_is_stripped(self):
        """Surrounding whitespace is removed from the prefix."""
        assert ExportConfig(filename_prefix="  budget ").filename_prefix == "budget"

    def test_empty_prefix_rejected(self):
        """A blank prefix is rejected."""
        with pytest.raises(ValueError):
            ExportConfig(filename_prefix="   ")


class TestExpenseTrackerConfig:
    """Test suite for the root ExpenseTrackerConfig."""

    def test_default_values(self):
        """ExpenseTrackerConfig defaults to INFO logging and USD."""
        config = ExpenseTrackerConfig()

        assert config.log_level == "INFO"
        assert config.currency == "USD"
        assert isinstance(config.analytics, AnalyticsConfig)
        assert isinstance(config.export, ExportConfig)

    def test_log_level_validation(self):
        """Log levels are upper-cased and validated."""
        assert ExpenseTrackerConfig(log_level="debug").log_level == "DEBUG"

        with pytest.raises(ValueError):
            ExpenseTrackerConfig(log_level="LOUD")

    def test_currency_validation(self):
        """Currency codes are upper-cased and must be three letters."""
        assert ExpenseTrackerConfig(currency="eur").currency == "EUR"

        with pytest.raises(ValueError):
            ExpenseTrackerConfig(currency="EURO")

    def test_from_environment(self, monkeypatch):
        """Root and nested settings read their own prefixes."""
        monkeypatch.setenv("EXPENSE_TRACKER_LOG_LEVEL", "warning")
        monkeypatch.setenv("EXPENSE_TRACKER_CURRENCY", "thb")
        monkeypatch.setenv("EXPENSE_TRACKER_EXPORT_FILENAME_PREFIX", "ledger")

        config = ExpenseTrackerConfig()

        assert config.log_level == "WARNING"
        assert config.currency == "THB"
        assert config.export.filename_prefix == "ledger"

    def test_reads_dotenv_file(self, tmp_path, monkeypatch):
        """Settings in a .env file in the working directory are loaded."""
        monkeypatch.delenv("EXPENSE_TRACKER_LOG_LEVEL", raising=False)
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("EXPENSE_TRACKER_LOG_LEVEL=debug\n", encoding="utf-8")

        assert ExpenseTrackerConfig().log_level == "DEBUG"
