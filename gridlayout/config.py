import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gridlayout.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


class Settings(BaseSettings):
    """Grid layout settings with validation.

    Every field has a default, so a bare ``Settings()`` is always valid.
    Values may be overridden through ``GRIDLAYOUT_*`` environment variables
    or a ``.env`` file in the working directory.
    """

    # Logging
    log_level: str = Field(default="INFO", description="Default level for setup_logging()")
    log_file: Path | None = Field(default=None, description="Default JSON log file for setup_logging()")

    # Templates
    default_column_width: str = Field(default="auto", min_length=1, description="Width of columns with no explicit width")
    default_row_height: str = Field(default="auto", min_length=1, description="Height used for every row template entry")

    # Resize behavior: keep explicit widths of retained columns, or reset every
    # column to the default width on any column count change.
    preserve_column_widths: bool = Field(default=True, description="Keep explicit column widths across resizes")

    # Expand ratio projection
    percentage_precision: int = Field(default=6, ge=1, le=15, description="Significant digits of ratio percentages")

    model_config = SettingsConfigDict(
        env_prefix="GRIDLAYOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,  # Validate defaults too
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if v not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return v

    @field_validator("default_column_width", "default_row_height", mode="after")
    @classmethod
    def validate_template_entry(cls, v: str) -> str:
        """Ensure template defaults are not whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("template defaults must not be empty")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance.

    The environment and ``.env`` file are read once; layouts created
    without an explicit ``settings=`` argument share this instance.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
        log_with_context(logger, "debug", "Loaded grid layout settings", event_type="settings_loaded")
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached Settings instance so the next call re-reads the environment."""
    global _settings_instance
    _settings_instance = None
