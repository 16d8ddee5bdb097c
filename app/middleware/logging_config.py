"""
Structured logging for seed runs.

- ``LOG_FORMAT=json``: one JSON object per line (log aggregator compatible)
- ``LOG_FORMAT=readable``: coloured single-line output for a terminal
- Level from ``LOG_LEVEL``

Without ``LOG_FORMAT`` production logs JSON and everything else is readable.

Seeders log with ``extra={"seeder": name, "rows_created": n, ...}``. The JSON
formatter copies those keys to the top level; the readable formatter renders
them as ``[seeder] ... (+created ~updated !failed) [12ms]``.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone

SEED_EXTRAS = ("seeder", "table", "rows_created", "rows_updated", "steps_failed", "duration_ms")


def seed_extras(record: logging.LogRecord) -> dict:
    """The seeder extras present on ``record``, in ``SEED_EXTRAS`` order."""
    return {
        key: getattr(record, key)
        for key in SEED_EXTRAS
        if getattr(record, key, None) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        entry.update(seed_extras(record))
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class ReadableFormatter(logging.Formatter):
    """Coloured terminal output with the seeder name up front."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    @staticmethod
    def _counts(extras):
        parts = [
            f"{sign}{extras[key]}"
            for key, sign in (("rows_created", "+"), ("rows_updated", "~"), ("steps_failed", "!"))
            if key in extras
        ]
        return f" ({' '.join(parts)})" if parts else ""

    def format(self, record: logging.LogRecord) -> str:
        extras = seed_extras(record)
        color = self.COLORS.get(record.levelname, "")
        ts = datetime.now().strftime("%H:%M:%S")

        line = f"{color}{ts} {record.levelname:<8}{self.RESET} "
        if "seeder" in extras:
            line += f"[{extras['seeder']}] "
        line += f"{record.name}: {record.getMessage()}{self._counts(extras)}"
        if "duration_ms" in extras:
            line += f" [{extras['duration_ms']:.0f}ms]"
        if record.exc_info and record.exc_info[0] is not None:
            line += "\n" + self.formatException(record.exc_info)
        return line


def _use_json(app) -> bool:
    fmt = os.getenv("LOG_FORMAT") or app.config.get("LOG_FORMAT")
    if fmt:
        return fmt.lower() == "json"
    return not app.config.get("DEBUG", False) and not app.config.get("TESTING", False)


def configure_logging(app):
    """Install a single stderr handler on the root logger.

    Level defaults to INFO in production and DEBUG elsewhere. Existing root
    handlers are replaced so repeated app creation under pytest does not
    duplicate output.
    """
    as_json = _use_json(app)
    is_prod = not app.config.get("DEBUG", False) and not app.config.get("TESTING", False)
    level_name = os.getenv("LOG_LEVEL", "INFO" if is_prod else "DEBUG")
    level = getattr(logging, level_name.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if as_json else ReadableFormatter())
    handler.setLevel(level)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # SQL echo and migration chatter drown out seeder output
    for noisy in ("sqlalchemy.engine", "alembic", "werkzeug"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    app.logger.setLevel(level)
    if not app.testing:
        app.logger.debug("Logging configured: level=%s format=%s",
                         level_name, "json" if as_json else "readable")
    return handler
