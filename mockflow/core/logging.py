"""Logging configuration for mockflow.

Two output shapes share one stdout handler:

  _ContainerFormatter: one readable line per record, flow context appended
    as ``key=value`` pairs, e.g.
    ``2026-10-19T10:00:00+0000 INFO  mockflow.services.transport  GET ... step=3``

  _JsonFormatter: one JSON object per line, for CI log collectors, with
    the same context as top-level keys.

Context is whatever the flow attaches with ``extra=``: the orchestrator
sets ``step``, the transport sets ``method``, ``url`` and ``status_code``.
Set LOG_JSON=true to switch to JSON output.

The ``GET <url>...`` progress lines and the final ``Success!`` are not log
records; they go to stdout through print() and are unaffected by LOG_LEVEL.
"""

from __future__ import annotations

import json
import logging
import sys

_CONTEXT_FIELDS = ("step", "method", "url", "status_code")

_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"


def _context(record: logging.LogRecord) -> dict[str, object]:
    return {
        key: getattr(record, key)
        for key in _CONTEXT_FIELDS
        if getattr(record, key, None) is not None
    }


class _ContainerFormatter(logging.Formatter):
    """Single-line formatter; WARNING+ also gets ``[file:line]``."""

    def __init__(self) -> None:
        super().__init__(
            "%(asctime)s %(levelname)-8s %(name)s  %(message)s", datefmt=_DATEFMT
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        # Exception text, when present, starts on the line after the message
        head, sep, tail = line.partition("\n")
        context = " ".join(f"{key}={value}" for key, value in _context(record).items())
        if context:
            head = f"{head}  {context}"
        if record.levelno >= logging.WARNING:
            head = f"{head}  [{record.filename}:{record.lineno}]"
        return head + sep + tail


class _JsonFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__(datefmt=_DATEFMT)

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, object] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def setup_logging(level_name: str, *, json_format: bool = False) -> None:
    """Send all records to stdout at ``level_name`` (unknown names: INFO)."""
    level = getattr(logging, level_name.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_JsonFormatter() if json_format else _ContainerFormatter())

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    # httpx logs every request at INFO; the transport already reports them
    for name in ("httpcore", "httpx"):
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
