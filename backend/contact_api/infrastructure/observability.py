"""Structured Logging — contact-aware log formatting installed once per process.

Invariants:
    - Exactly one contact_api handler on the root logger, however many lifespans run
    - Contact and error context (ContactApiError.to_log_extra) is emitted when present,
      nested under "contact" and "error" so log queries do not depend on field order
    - JSON format in production, human-readable in development

Design Decisions:
    - stdlib logging with small formatters: no extra dependency
    - Handler is found again by name and replaced, so a reconfigured level/format wins
"""

import logging
import json
from datetime import datetime, timezone


HANDLER_NAME = "contact_api"

CONTACT_FIELDS: tuple[str, ...] = ("contact_name", "field")
ERROR_FIELDS: tuple[str, ...] = ("error_code", "error_category")


def _collect(record: logging.LogRecord, keys: tuple[str, ...]) -> dict:
    return {
        key: record.__dict__[key]
        for key in keys
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line: base fields, request path, contact and error blocks."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        path = record.__dict__.get("path")
        if path is not None:
            log["path"] = path
        contact = _collect(record, CONTACT_FIELDS)
        if contact:
            log["contact"] = contact
        error = _collect(record, ERROR_FIELDS)
        if error:
            log["error"] = error
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Development format; appends [contact=... code=...] when a contact is involved."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        tags = [
            f"{label}={record.__dict__[key]}"
            for label, key in (("contact", "contact_name"), ("code", "error_code"))
            if record.__dict__.get(key) is not None
        ]
        return f"{line} [{' '.join(tags)}]" if tags else line


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the contact_api root handler."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == HANDLER_NAME:
            logging.root.removeHandler(existing)
            existing.close()

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
