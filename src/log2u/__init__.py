"""log2u: leveled, colorized console logging with call-site annotation."""

from log2u.colors import RESET, RESET_BACK, Color, Style, ansi
from log2u.config import ConfigError, load_config, logger_from_config, save_settings
from log2u.constants import VERSION as __version__
from log2u.logger import SEVERITIES, Logger, Severity
from log2u.message import Message

__all__ = [
    "Color",
    "ConfigError",
    "Logger",
    "Message",
    "RESET",
    "RESET_BACK",
    "SEVERITIES",
    "Severity",
    "Style",
    "ansi",
    "load_config",
    "logger_from_config",
    "save_settings",
]
