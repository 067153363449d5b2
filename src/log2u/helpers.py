# src/log2u/helpers.py
"""
Small helpers behind the Logger.

- is_windows()                       -> platform check used to force color off
- format_now(time_format)            -> current local time via strftime
- interpolate(template, args)        -> printf-style expansion that never raises
- resolve_call_site()                -> (file, line) of the first caller outside log2u
- write_to_sink(sink, text)          -> best-effort write, failures dropped
"""

import inspect
import io
import os
import platform
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Tuple

from log2u.constants import PACKAGE_DIR
from log2u.diagnostics import logger

_INTERNAL_FILES = frozenset(
    os.path.realpath(PACKAGE_DIR / name) for name in ("logger.py", "helpers.py")
)


def is_windows() -> bool:
    """Return True when running on Windows, where ANSI output is unreliable."""
    return platform.system().lower() == "windows"


def format_now(time_format: str) -> str:
    """Format the current local time. The pattern is passed through untouched."""
    return datetime.now().strftime(time_format)


def interpolate(template: str, args: Tuple[Any, ...]) -> str:
    """
    Expand a %-style template.

    With no arguments the template is returned as is. When expansion fails the
    literal template is followed by the arguments, separated by spaces.
    """
    if not args:
        return template
    values = args[0] if len(args) == 1 and isinstance(args[0], Mapping) else args
    try:
        return template % values
    except (TypeError, ValueError, KeyError) as exc:
        logger.debug("Bad interpolation of %r: %s", template, exc)
        return " ".join([template] + [str(a) for a in args])


def _is_internal(filename: str) -> bool:
    return os.path.realpath(filename) in _INTERNAL_FILES


def resolve_call_site() -> Tuple[str, str]:
    """
    Return (file, line) of the code that called the Logger.

    Frames of the logger and helper modules are skipped, so formatted variants
    that delegate to their plain counterpart still report the caller's line.
    Other log2u modules (the demo) count as callers.
    Returns ("", "") if no such frame can be found.
    """
    frame = inspect.currentframe()
    try:
        while frame is not None and _is_internal(frame.f_code.co_filename):
            frame = frame.f_back
        if frame is None:
            return "", ""
        return frame.f_code.co_filename, str(frame.f_lineno)
    finally:
        del frame


def write_to_sink(sink, text: str) -> None:
    """
    Write text to sink. Text streams receive str, anything else UTF-8 bytes.
    Failures are dropped; a note goes to the diagnostics logger.
    """
    try:
        if isinstance(sink, io.TextIOBase):
            sink.write(text)
        else:
            sink.write(text.encode("utf-8"))
    except Exception as exc:
        logger.debug("Dropped write to sink %r: %s", sink, exc)
