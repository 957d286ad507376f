"""Configuration system for the expense tracker.

This module provides Pydantic Settings-based configuration with environment
variable support and sensible defaults.

Usage:
    from expense_tracker.config import ExpenseTrackerConfig

    # Load from environment variables and .env file
    config = ExpenseTrackerConfig()

    # Access analytics settings
    print(config.analytics.top_categories_limit)
    print(config.analytics.trend_months)
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class AnalyticsConfig(BaseSettings):
    """Analytics configuration settings.

    Environment Variables:
        EXPENSE_TRACKER_ANALYTICS_TOP_CATEGORIES_LIMIT: Max entries per top-category list
        EXPENSE_TRACKER_ANALYTICS_TREND_MONTHS: Size of the trailing monthly trend window
    """

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_ANALYTICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    top_categories_limit: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum number of entries in each top-category list",
    )
    trend_months: int = Field(
        default=12,
        ge=1,
        le=120,
        description="Number of trailing calendar months in the trend series",
    )


class ExportConfig(BaseSettings):
    """CSV export configuration settings.

    Environment Variables:
        EXPENSE_TRACKER_EXPORT_FILENAME_PREFIX: Prefix of exported file names
    """

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_EXPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    filename_prefix: str = Field(
        default="expense-tracker",
        description="Prefix for export file names (<prefix>-YYYY-MM-DD.csv)",
    )

    @field_validator("filename_prefix")
    @classmethod
    def validate_filename_prefix(cls, v: str) -> str:
        """Ensure the prefix is not empty."""
        if not v or not v.strip():
            raise ValueError("Filename prefix cannot be empty")
        return v.strip()


class ExpenseTrackerConfig(BaseSettings):
    """Root configuration for the expense tracker.

    Environment Variables:
        EXPENSE_TRACKER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        EXPENSE_TRACKER_CURRENCY: ISO 4217 code used when formatting amounts

    Example:
        config = ExpenseTrackerConfig(
            currency="EUR",
            analytics=AnalyticsConfig(top_categories_limit=5),
        )
    """

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    currency: str = Field(
        default="USD",
        description="Currency code for formatted amounts (single currency system-wide)",
    )

    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        v_upper = v.upper().strip()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {VALID_LOG_LEVELS}")
        return v_upper

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Normalize the currency code to three upper-case letters."""
        v_upper = v.upper().strip()
        if len(v_upper) != 3 or not v_upper.isalpha():
            raise ValueError(f"Invalid currency code: {v}. Expected a 3-letter ISO code")
        return v_upper
