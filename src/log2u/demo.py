# src/log2u/demo.py
"""
Demo entry point for log2u.

Emits one line per severity, then the formatted variant of each, using
settings from the config layers with command-line overrides on top.
"""

import argparse
import sys

from log2u.colors import Style
from log2u.config import ConfigError, load_config, logger_from_config
from log2u.diagnostics import logger, setup_logging


def run_demo(log, custom_code: int = Style.BOLD) -> None:
    log.info("This is an info message")
    log.success("This is a success message")
    log.warning("This is a warning message")
    log.error("This is an error message")
    log.critical("This is a critical message")
    log.debug("This is a debug message")
    log.custom_ansi_print("This is a custom message", custom_code)

    log.infof("This is an info message %s", "with a string")
    log.successf("This is a success message %s", "with a string")
    log.warningf("This is a warning message %s", "with a string")
    log.errorf("This is an error message %s", "with a string")
    log.criticalf("This is a critical message %s", "with a string")
    log.debugf("This is a debug message %s", "with a string")
    log.custom_ansi_printf(custom_code, "This is a custom message %s", "with a string")


def main(argv=None):
    argv = argv if argv is not None else sys.argv[1:]
    parser = argparse.ArgumentParser(prog="log2u-demo")
    parser.add_argument("--settings", "-s", help="Path to a JSON settings file", default=None)
    parser.add_argument("--stack", action="store_true", help="Annotate every line with its call site")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--plain", action="store_true", help="Print bare text without decoration")
    parser.add_argument("--time-format", help="strftime pattern for timestamps", default=None)
    parser.add_argument("--custom", type=int, default=int(Style.BOLD), help="Code used for the custom lines")
    parser.add_argument("--debug", action="store_true", help="Show log2u diagnostics")
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug)

    try:
        cfg = load_config(args.settings)
    except ConfigError as exc:
        logger.error("Cannot load settings: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    if args.stack:
        cfg["stack"] = True
    if args.no_color:
        cfg["color"] = False
    if args.plain:
        cfg["rich"] = False
    if args.time_format:
        cfg["time_format"] = args.time_format

    logger.debug("Demo settings: %s", cfg)
    run_demo(logger_from_config(cfg), custom_code=args.custom)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
