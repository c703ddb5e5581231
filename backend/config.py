# config.py
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _int_setting(name, default):
    value = os.getenv(name, default)
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


def _float_setting(name, default):
    value = os.getenv(name, default)
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}")


INITIALS_FONT_FAMILY = os.getenv("INITIALS_FONT_FAMILY", "Arial")
INITIALS_DEFAULT_BACKGROUND = os.getenv("INITIALS_DEFAULT_BACKGROUND", "gray")

# Padding is applied on every side, but only once the widget is wider than the threshold.
INITIALS_PADDING = _int_setting("INITIALS_PADDING", "20")
INITIALS_PADDING_THRESHOLD = _int_setting("INITIALS_PADDING_THRESHOLD", "100")
if INITIALS_PADDING < 0:
    raise ValueError("INITIALS_PADDING must not be negative.")

INITIALS_FIT_FRACTION = _float_setting("INITIALS_FIT_FRACTION", "1.0")
if not 0 < INITIALS_FIT_FRACTION <= 1:
    raise ValueError("INITIALS_FIT_FRACTION must be in (0, 1].")

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
INITIALS_LOG_LEVEL = os.getenv("INITIALS_LOG_LEVEL", "INFO").upper()
if INITIALS_LOG_LEVEL not in LOG_LEVELS:
    raise ValueError(f"INITIALS_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {INITIALS_LOG_LEVEL!r}")
