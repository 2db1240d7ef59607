"""
Configuration settings for numtasks.

**Conceptual**: This module provides strongly-typed configuration objects that
load from environment variables (via .env files). All settings are validated
at construction, so a bad value fails fast with a clear message instead of
surfacing later as a confusing rounding or logging error.

The numeric functions in numtasks.utils.math never read these settings
themselves; they stay pure. Callers such as the command-line action read the
settings once and pass the relevant values in as arguments.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from numtasks.utils.math import HALF_AWAY_FROM_ZERO, ROUNDING_MODES

# Load .env from project root, if present (dev/local environments)
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True)
class NumericSettings:
    """
    Configuration for numeric operations and result formatting.

    Attributes:
        rounding_mode: Tie-breaking rule used by round_to_power_of_ten when the
                      caller does not pass one explicitly. One of ROUNDING_MODES.
        float_precision: Significant digits used when printing float results
                        (default 12). Must be non-negative.
    """
    rounding_mode: str = HALF_AWAY_FROM_ZERO
    float_precision: int = 12

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.rounding_mode not in ROUNDING_MODES:
            raise ValueError(
                f"NUMTASKS_ROUNDING_MODE must be one of {', '.join(ROUNDING_MODES)}, "
                f"got: {self.rounding_mode!r}"
            )
        if self.float_precision < 0:
            raise ValueError(
                f"NUMTASKS_FLOAT_PRECISION must be non-negative, got: {self.float_precision}"
            )

    @classmethod
    def from_env(cls) -> "NumericSettings":
        """
        Load numeric settings from environment variables.

        **Environment variables**:
          - NUMTASKS_ROUNDING_MODE (optional): Default rounding tie-break.
            Defaults to "half_away_from_zero".
          - NUMTASKS_FLOAT_PRECISION (optional): Digits for printed floats.
            Defaults to 12.

        Returns:
            NumericSettings object with values loaded from environment.

        Raises:
            ValueError: If a variable is set to an invalid value.
        """
        rounding_mode = os.getenv("NUMTASKS_ROUNDING_MODE", HALF_AWAY_FROM_ZERO).strip().lower()
        precision_str = os.getenv("NUMTASKS_FLOAT_PRECISION", "12")

        try:
            float_precision = int(precision_str)
        except ValueError:
            raise ValueError(
                f"NUMTASKS_FLOAT_PRECISION must be an integer, got: {precision_str}"
            )

        return cls(rounding_mode=rounding_mode, float_precision=float_precision)


@dataclass(frozen=True)
class LoggingSettings:
    """
    Configuration for package logging.

    Attributes:
        level: Standard logging level name (default "WARNING").
        log_file: Optional path of a JSON-lines log file. None disables file logging.
    """
    level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Validate settings after initialization."""
        if not isinstance(logging.getLevelName(self.level), int):
            raise ValueError(
                f"NUMTASKS_LOG_LEVEL must be a logging level name, got: {self.level!r}"
            )

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        """
        Load logging settings from environment variables.

        **Environment variables**:
          - NUMTASKS_LOG_LEVEL (optional): DEBUG, INFO, WARNING, ERROR or CRITICAL.
            Defaults to WARNING.
          - NUMTASKS_LOG_FILE (optional): Path of a JSON-lines log file.

        Returns:
            LoggingSettings object with values loaded from environment.
        """
        level = os.getenv("NUMTASKS_LOG_LEVEL", "WARNING").strip().upper()
        log_file = os.getenv("NUMTASKS_LOG_FILE") or None
        return cls(level=level, log_file=log_file)


@dataclass(frozen=True)
class Settings:
    """
    Global settings for numtasks.

    **Usage pattern**:
      ```python
      from numtasks.config.settings import Settings

      settings = Settings.from_env()
      mode = settings.numeric.rounding_mode
      ```

    Attributes:
        numeric: Rounding and formatting settings.
        log: Logging level and destination.
    """
    numeric: NumericSettings = field(default_factory=NumericSettings)
    log: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load global settings from environment variables.

        Returns:
            Settings object with all subsystem settings loaded from environment.

        Raises:
            ValueError: If any subsystem setting is invalid.
        """
        return cls(
            numeric=NumericSettings.from_env(),
            log=LoggingSettings.from_env(),
        )


# Loaded lazily by get_settings(); tests can build Settings(...) directly instead.
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from environment on first call, then cached for reuse.
    Call reset_settings() to force a reload.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If the environment holds invalid settings.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          reset_settings()
          monkeypatch.setenv("NUMTASKS_ROUNDING_MODE", "half_up")
          assert get_settings().numeric.rounding_mode == "half_up"
      ```
    """
    global _default_settings
    _default_settings = None
