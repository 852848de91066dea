"""
envlayer/logging_config.py
Logging setup for the envlayer CLI, with optional JSON file output.
The library modules only create loggers; handlers are installed here.
"""

from __future__ import annotations
import json
import logging
import os
import threading
import time
import uuid

LOG_FILENAME = "envlayer.log"

# ── Correlation ID (per-run tracing) ──────────────────────────────────────

_correlation_id = threading.local()


def set_correlation_id(cid: str = ""):
    """Set correlation ID for current thread (ties logs to one CLI run)."""
    _correlation_id.value = cid or str(uuid.uuid4())[:8]


def get_correlation_id() -> str:
    return getattr(_correlation_id, "value", "")


# ── Structured JSON Formatter ─────────────────────────────────────────────

class StructuredFormatter(logging.Formatter):
    """
    JSON log formatter for machine-parseable logs.
    Fields: ts, level, logger, msg, cid (correlation ID), extra, exception
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        cid = get_correlation_id()
        if cid:
            entry["cid"] = cid

        if hasattr(record, "extra_data"):
            entry["extra"] = record.extra_data

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


# ── Setup ─────────────────────────────────────────────────────────────────

def setup_logging(level: str = "WARNING", structured: bool = False,
                  log_dir: str | None = None):
    """
    Configure root logging.
    Args:
        level: log level (DEBUG/INFO/WARNING/ERROR)
        structured: if True, the file log is JSON; otherwise human-readable
        log_dir: directory for envlayer.log (None = console only)
    """
    numeric = getattr(logging, level.upper(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(numeric)

    for h in root.handlers[:]:
        root.removeHandler(h)

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(
        "[%(asctime)s][%(name)s] %(message)s", datefmt="%H:%M:%S"))
    console.setLevel(numeric)
    root.addHandler(console)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        if structured:
            formatter = StructuredFormatter()
        else:
            formatter = logging.Formatter(
                "[%(asctime)s][%(name)s][%(levelname)s] %(message)s",
                datefmt="%H:%M:%S",
            )
        file_handler = logging.FileHandler(
            os.path.join(log_dir, LOG_FILENAME), encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(numeric)
        root.addHandler(file_handler)

    return root
