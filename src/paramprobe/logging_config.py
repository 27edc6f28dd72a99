"""Logging configuration for paramprobe.

Provides JSON or text logging on stderr so that log lines never mix with the
parameter values a command writes to stdout.
"""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter


def _build_json_formatter() -> logging.Formatter:
    fields = [
        "asctime",
        "levelname",
        "name",
        "message",
        "module",
        "funcName",
        "lineno",
    ]
    fmt = " ".join([f"{f}=%({f})s" for f in fields])
    return JsonFormatter(fmt=fmt)


def configure_logging(level: str = "WARNING", fmt: str = "text") -> None:
    log_level = getattr(logging, level.upper(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(log_level)

    # Remove default handlers to avoid duplicate logs
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    if fmt.lower() == "json":
        handler.setFormatter(_build_json_formatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S%z",
            )
        )
    root.addHandler(handler)

    # httpx logs every request at INFO; keep it aligned with our level
    logging.getLogger("httpx").setLevel(max(log_level, logging.WARNING))
