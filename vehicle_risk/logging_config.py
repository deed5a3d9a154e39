"""Logging setup for the vehicle risk assessor.

stdout carries the interactive session, so log records go to stderr
unless another stream is given.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, TextIO

_TEXT_FORMAT: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


class JSONFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(
    level: str = "WARNING",
    fmt: str = "text",
    stream: TextIO | None = None,
) -> None:
    """Install a single handler on the root logger.

    Any handlers already on the root logger are removed first, so calling
    this again replaces the previous setup.

    Args:
        level: Level name such as ``"DEBUG"``.  Unknown names fall back
            to ``WARNING``.
        fmt: ``"json"`` for :class:`JSONFormatter`, anything else for
            plain text.
        stream: Destination stream.  Defaults to ``sys.stderr``.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for existing in root.handlers[:]:
        root.removeHandler(existing)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    formatter = JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT)
    handler.setFormatter(formatter)
    root.addHandler(handler)
