# src/log2u/config.py
"""
Settings loader for log2u.

Responsibilities:
- Load packaged defaults from default_settings.json.
- Apply an optional user settings file.
- Apply environment variables (a .env file is honoured).
- Validate the merged settings and build a Logger from them.

Environment:
    LOG2U_SETTINGS_FILE  -> path of the user settings file
    LOG2U_COLOR, LOG2U_DATE, LOG2U_STACK, LOG2U_RICH
                         -> booleans (1/0, true/false, yes/no, on/off)
    LOG2U_TIME_FORMAT    -> strftime pattern
    LOG2U_OUTPUT         -> "stdout" or "stderr"
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

import jsonschema
from dotenv import find_dotenv, load_dotenv

from log2u.constants import (
    BOOLEAN_SETTINGS,
    DEFAULT_SETTINGS_FILE,
    ENV_OVERRIDES,
    ENV_SETTINGS_FILE,
    OUTPUT_STREAMS,
)
from log2u.diagnostics import logger
from log2u.logger import Logger

SETTINGS_SCHEMA = {
    "type": "object",
    "properties": {
        "color": {"type": "boolean"},
        "date": {"type": "boolean"},
        "stack": {"type": "boolean"},
        "rich": {"type": "boolean"},
        "time_format": {"type": "string"},
        "output": {"enum": list(OUTPUT_STREAMS)},
    },
    "required": ["color", "date", "stack", "rich", "time_format", "output"],
    "additionalProperties": False,
}

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


class ConfigError(ValueError):
    pass


def _load_json_file(path: Path, fallback=None, required: bool = False):
    """
    Load a JSON object from path, falling back when missing or unreadable.
    A missing file is only reported when `required` is set.
    """
    if not path.exists():
        if required:
            logger.warning("Settings file %s not found; using previous settings", path)
        return fallback or {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return fallback or {}
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: top level is not an object", path)
        return fallback or {}
    return data


def parse_bool(value: str) -> bool:
    """Parse an environment flag."""
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigError(f"Not a boolean: {value!r}")


def _env_overrides() -> Dict[str, Any]:
    overrides = {}
    for key, env_name in ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is None:
            continue
        if key in BOOLEAN_SETTINGS:
            try:
                overrides[key] = parse_bool(raw)
            except ConfigError as exc:
                raise ConfigError(f"{env_name}: {exc}") from exc
        else:
            overrides[key] = raw
    return overrides


def validate_settings(settings: Dict[str, Any]) -> None:
    """Raise ConfigError unless settings match SETTINGS_SCHEMA."""
    try:
        jsonschema.validate(instance=settings, schema=SETTINGS_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise ConfigError(f"Invalid log2u settings: {exc.message}") from exc


def load_config(settings_file: Optional[Union[str, Path]] = None, use_dotenv: bool = True) -> Dict[str, Any]:
    """
    Load settings from:
    1. Packaged defaults
    2. User settings file (argument, else LOG2U_SETTINGS_FILE)
    3. Environment variables

    Later layers override earlier ones. The result is validated.
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    config = {}

    # --- Layer 1: packaged defaults ---
    config.update(_load_json_file(DEFAULT_SETTINGS_FILE, {}))

    # --- Layer 2: user settings ---
    user_file = settings_file or os.getenv(ENV_SETTINGS_FILE)
    if user_file:
        config.update(_load_json_file(Path(user_file), {}, required=True))

    # --- Layer 3: environment ---
    config.update(_env_overrides())

    validate_settings(config)
    return config


def save_settings(path: Union[str, Path], settings: Dict[str, Any]) -> bool:
    """Validate and write settings as JSON. Returns True on success."""
    try:
        validate_settings(settings)
    except ConfigError as exc:
        logger.error("Refusing to save settings: %s", exc)
        return False
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(settings, f, indent=4)
        return True
    except OSError as exc:
        logger.error("Failed to save settings to %s: %s", path, exc)
        return False


def resolve_output(name: str):
    """Map a named output stream to the live process stream."""
    if name == "stderr":
        return sys.stderr
    return sys.stdout


def logger_from_config(settings: Optional[Dict[str, Any]] = None) -> Logger:
    """Build a Logger, passing every setting explicitly."""
    if settings is None:
        settings = load_config()
    else:
        validate_settings(settings)
    return Logger(
        color_enabled=settings["color"],
        date_enabled=settings["date"],
        stack_enabled=settings["stack"],
        rich_output_enabled=settings["rich"],
        sink=resolve_output(settings["output"]),
        time_format=settings["time_format"],
    )
