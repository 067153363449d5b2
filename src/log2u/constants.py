# src/log2u/constants.py
"""
Package-wide constants for log2u.
Keep wire-format templates, settings keys and environment variable names here.
"""

from pathlib import Path

APP_NAME = "log2u"
VERSION = "0.2.0"

# File system
PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_SETTINGS_FILE = PACKAGE_DIR / "default_settings.json"

# Rendered line templates (wire format; glyphs and spacing are significant)
DEFAULT_FORMAT = "> #{id} {date} ⇒  {tag} > {text}\n"
STACK_FORMAT = "> #{id} {date} ⇒  ON {file}:{line} ⇒  {tag} > {text}\n"

FIRST_MESSAGE_ID = 1

# Environment variable names
ENV_SETTINGS_FILE = "LOG2U_SETTINGS_FILE"
ENV_COLOR = "LOG2U_COLOR"
ENV_DATE = "LOG2U_DATE"
ENV_STACK = "LOG2U_STACK"
ENV_RICH = "LOG2U_RICH"
ENV_TIME_FORMAT = "LOG2U_TIME_FORMAT"
ENV_OUTPUT = "LOG2U_OUTPUT"

# Settings key -> environment variable
ENV_OVERRIDES = {
    "color": ENV_COLOR,
    "date": ENV_DATE,
    "stack": ENV_STACK,
    "rich": ENV_RICH,
    "time_format": ENV_TIME_FORMAT,
    "output": ENV_OUTPUT,
}

BOOLEAN_SETTINGS = ("color", "date", "stack", "rich")

# Named output streams accepted in settings
OUTPUT_STREAMS = ("stdout", "stderr")

# Internal diagnostics
LOGGER_NAME = "log2u"
