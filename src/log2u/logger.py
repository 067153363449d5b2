# src/log2u/logger.py
"""
Leveled console logger.

A Logger holds its configuration and a message counter, and exposes one
emitting method per severity plus a %-style formatted variant of each:

    log = Logger(True, True, False, True, sys.stdout, "%Y-%m-%d %H:%M:%S")
    log.info("service started")
    log.warningf("disk at %d%%", 91)

Emitting methods return nothing and never raise on write failures.
fatal()/fatalf() emit an error line and then exit the process with status 1.
"""

import sys
from typing import Any, Dict, NamedTuple, Optional

from log2u.colors import Color
from log2u.constants import FIRST_MESSAGE_ID
from log2u.helpers import interpolate, is_windows, resolve_call_site, write_to_sink
from log2u.message import Message

# Call-site policies
STACK_FROM_FLAG = "flag"
STACK_ALWAYS = "always"
STACK_NEVER = "never"


class Severity(NamedTuple):
    tag: str
    color: int
    stack: str


SEVERITIES: Dict[str, Severity] = {
    "info": Severity("INF", Color.WHITE, STACK_FROM_FLAG),
    "success": Severity("SUC", Color.GREEN, STACK_FROM_FLAG),
    "warning": Severity("WAR", Color.YELLOW, STACK_FROM_FLAG),
    "error": Severity("ERR", Color.RED, STACK_FROM_FLAG),
    "critical": Severity("CRT", Color.PINK, STACK_FROM_FLAG),
    "debug": Severity("DBG", Color.BLUE, STACK_ALWAYS),
    # Color is supplied per call
    "custom": Severity("CUS", Color.WHITE, STACK_NEVER),
}


class Logger:
    """
    Console logger writing decorated lines to a sink it does not own.

    Args:
        color_enabled: wrap lines in ANSI color codes. Always off on Windows.
        date_enabled: stored only; rendering does not consult it.
        stack_enabled: annotate lines with the caller's file and line.
        rich_output_enabled: when False, lines are the bare text plus newline.
        sink: text stream or binary writer receiving the lines.
        time_format: strftime pattern for the timestamp.
    """

    def __init__(
        self,
        color_enabled: bool,
        date_enabled: bool,
        stack_enabled: bool,
        rich_output_enabled: bool,
        sink,
        time_format: str,
    ):
        self._color_enabled = not is_windows() and color_enabled
        self._date_enabled = date_enabled
        self._stack_enabled = stack_enabled
        self._rich_output_enabled = rich_output_enabled
        self._sink = sink
        self._time_format = time_format
        self._counter = FIRST_MESSAGE_ID

    def __repr__(self):
        return (
            f"Logger(color={self._color_enabled}, date={self._date_enabled}, "
            f"stack={self._stack_enabled}, rich={self._rich_output_enabled}, "
            f"time_format={self._time_format!r}, counter={self._counter})"
        )

    # --------------------------
    # Configuration
    # --------------------------
    @property
    def color_enabled(self) -> bool:
        return self._color_enabled

    @property
    def date_enabled(self) -> bool:
        return self._date_enabled

    @property
    def stack_enabled(self) -> bool:
        return self._stack_enabled

    @property
    def rich_output_enabled(self) -> bool:
        return self._rich_output_enabled

    @property
    def time_format(self) -> str:
        return self._time_format

    @property
    def sink(self):
        return self._sink

    @property
    def counter(self) -> int:
        """Id the next emitted message will carry."""
        return self._counter

    def set_color(self, enabled: bool) -> None:
        # Platform is re-checked on every call
        self._color_enabled = not is_windows() and enabled

    def set_date(self, enabled: bool) -> None:
        self._date_enabled = enabled

    def set_stack(self, enabled: bool) -> None:
        self._stack_enabled = enabled

    def set_rich_output(self, enabled: bool) -> None:
        self._rich_output_enabled = enabled

    def set_time_format(self, time_format: str) -> None:
        self._time_format = time_format

    def set_output(self, sink) -> None:
        self._sink = sink

    # --------------------------
    # Internal emit
    # --------------------------
    def _emit(self, severity: Severity, text: str, color: Optional[int] = None) -> None:
        stack = severity.stack == STACK_ALWAYS or self._stack_enabled

        # STACK_NEVER still renders the stack template, with an empty call site
        capture = stack and severity.stack != STACK_NEVER
        file, line = resolve_call_site() if capture else ("", "")
        message = Message(
            text=text,
            tag=severity.tag,
            color=severity.color if color is None else color,
            id=self._counter,
            file=file,
            line=line,
        )
        write_to_sink(
            self._sink,
            message.render(stack, self._color_enabled, self._rich_output_enabled, self._time_format),
        )
        self._counter += 1

    # --------------------------
    # Severities
    # --------------------------
    def info(self, text: str) -> None:
        """Emit an INF line in white."""
        self._emit(SEVERITIES["info"], text)

    def infof(self, template: str, *args: Any) -> None:
        self.info(interpolate(template, args))

    # Same as info/infof
    print = info
    printf = infof

    def success(self, text: str) -> None:
        """Emit a SUC line in green."""
        self._emit(SEVERITIES["success"], text)

    def successf(self, template: str, *args: Any) -> None:
        self.success(interpolate(template, args))

    def warning(self, text: str) -> None:
        """Emit a WAR line in yellow."""
        self._emit(SEVERITIES["warning"], text)

    def warningf(self, template: str, *args: Any) -> None:
        self.warning(interpolate(template, args))

    def error(self, text: str) -> None:
        """Emit an ERR line in red."""
        self._emit(SEVERITIES["error"], text)

    def errorf(self, template: str, *args: Any) -> None:
        self.error(interpolate(template, args))

    def critical(self, text: str) -> None:
        """Emit a CRT line in pink."""
        self._emit(SEVERITIES["critical"], text)

    def criticalf(self, template: str, *args: Any) -> None:
        self.critical(interpolate(template, args))

    def debug(self, text: str) -> None:
        """Emit a DBG line in blue. The call site is always included."""
        self._emit(SEVERITIES["debug"], text)

    def debugf(self, template: str, *args: Any) -> None:
        self.debug(interpolate(template, args))

    def custom_ansi_print(self, text: str, code: int) -> None:
        """
        Emit a CUS line using any color or style code.

        The code is not validated; it goes straight into the escape sequence.
        No call site is ever attached.
        """
        self._emit(SEVERITIES["custom"], text, color=code)

    def custom_ansi_printf(self, code: int, template: str, *args: Any) -> None:
        self.custom_ansi_print(interpolate(template, args), code)

    def fatal(self, text: str) -> None:
        """Emit an ERR line, then exit the process with status 1."""
        self.error(text)
        sys.exit(1)

    def fatalf(self, template: str, *args: Any) -> None:
        self.fatal(interpolate(template, args))
