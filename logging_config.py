"""
Logging for the quote renderer.

setup_logging() is called once by create_app(). Console output is readable
text unless JSON_LOGS is set; the rotating file under LOG_DIR is always JSON.
Render and fetch code passes context through `extra=`; the keys listed in
CONTEXT_KEYS are copied into each JSON line.
"""
import json
import logging
import logging.handlers
import os
from datetime import datetime, timezone

from blindquote.core.paths import LOG_DIR

LOG_FILE = "blindquote.log"
CONTEXT_KEYS = ("route", "method", "status", "duration_ms", "template", "items")
QUIET_LOGGERS = ("urllib3", "werkzeug")


def _context(record) -> dict:
    return {k: getattr(record, k) for k in CONTEXT_KEYS if hasattr(record, k)}


class JSONFormatter(logging.Formatter):
    """One JSON object per line: level, logger, message, request/render context."""

    def format(self, record):
        entry = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "where": f"{record.module}:{record.lineno}",
            **_context(record),
        }
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class HumanFormatter(logging.Formatter):
    """Colored console lines, with the template/route context appended."""
    COLORS = {
        "DEBUG": "\033[36m", "INFO": "\033[32m",
        "WARNING": "\033[33m", "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record):
        color = self.COLORS.get(record.levelname, "")
        ctx = " ".join(f"{k}={v}" for k, v in _context(record).items())
        line = (f"{color}{datetime.now():%H:%M:%S} {record.levelname[0]} "
                f"{record.name}: {record.getMessage()}{self.RESET}")
        if ctx:
            line += f"  [{ctx}]"
        if record.exc_info and record.exc_info[0]:
            line += "\n" + self.formatException(record.exc_info)
        return line


def _file_handler():
    os.makedirs(LOG_DIR, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        os.path.join(LOG_DIR, LOG_FILE), maxBytes=5_000_000, backupCount=5,
        encoding="utf-8",
    )
    handler.setFormatter(JSONFormatter())
    return handler


def setup_logging(level=None, json_logs=None):
    """Install console + file handlers on the root logger.

    level defaults to LOG_LEVEL (INFO); json_logs defaults to JSON_LOGS.
    """
    level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    if json_logs is None:
        json_logs = bool(os.environ.get("JSON_LOGS"))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler()
    console.setFormatter(JSONFormatter() if json_logs else HumanFormatter())
    root.addHandler(console)

    try:
        root.addHandler(_file_handler())
    except OSError as e:
        root.warning("File logging disabled (%s): %s", LOG_DIR, e)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("blindquote").info("Logging initialized at %s (json=%s)",
                                         level, json_logs)
