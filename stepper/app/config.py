# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os
import warnings

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_TRUE_VALUES = ("true", "1", "yes")
LABEL_ICON_STRATEGIES = ("DEFAULT", "NUMBERS_ONLY")


def read_choice(name: str, choices: tuple, default: str) -> str:
    """Read an upper-cased enum-like setting, falling back to default if unknown."""
    value = os.getenv(name, default).strip().upper()
    if value not in choices:
        warnings.warn(
            f"{name}={value!r} is not one of {', '.join(choices)}; using {default}",
            RuntimeWarning,
        )
        return default
    return value


# Navigation defaults
_LINEAR = os.getenv("STEPPER_LINEAR", "true").lower() in _TRUE_VALUES
_LABEL_ICONS = read_choice("STEPPER_LABEL_ICONS", LABEL_ICON_STRATEGIES, "DEFAULT")
_DIVIDER_RATIO = float(os.getenv("STEPPER_DIVIDER_RATIO", "0.75"))

# Logging
_LOG_LEVEL = os.getenv("STEPPER_LOG_LEVEL", "INFO").upper()
_LOG_TO_FILE = os.getenv("STEPPER_LOG_TO_FILE", "false").lower() in _TRUE_VALUES
_LOGS_DIR = os.getenv("STEPPER_LOGS_DIR", None)

# Button captions
_BACK_TEXT = os.getenv("STEPPER_BACK_TEXT", "Back")
_NEXT_TEXT = os.getenv("STEPPER_NEXT_TEXT", "Next")
_SKIP_TEXT = os.getenv("STEPPER_SKIP_TEXT", "Skip")
_CANCEL_TEXT = os.getenv("STEPPER_CANCEL_TEXT", "Cancel")


@dataclass
class Config:
    """Stepper configuration."""

    # Application Info
    APP_NAME: str = "MD Stepper"
    APP_TITLE: str = "Material Design Stepper Demo"
    VERSION: str = "1.0.0"

    # Navigation defaults used when a stepper is built without explicit values
    DEFAULT_LINEAR: bool = _LINEAR
    LABEL_ICON_STRATEGY: str = _LABEL_ICONS  # DEFAULT or NUMBERS_ONLY
    DIVIDER_EXPAND_RATIO: float = _DIVIDER_RATIO

    # Button captions
    BACK_TEXT: str = _BACK_TEXT
    NEXT_TEXT: str = _NEXT_TEXT
    SKIP_TEXT: str = _SKIP_TEXT
    CANCEL_TEXT: str = _CANCEL_TEXT

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent.parent
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else PROJECT_ROOT / "logs"

    # Logging Configuration
    LOG_LEVEL: str = _LOG_LEVEL
    LOG_TO_FILE: bool = _LOG_TO_FILE
    LOG_FILE: str = "stepper.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    LOG_BACKUP_COUNT: int = 3
