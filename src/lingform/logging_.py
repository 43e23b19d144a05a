"""Logging setup for the CLI and evaluation scripts.

Library modules only create named loggers; handlers are attached here.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO") -> None:
    """Attach a stderr handler to the root logger at the given level."""
    global _handler
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")

    root = logging.getLogger()
    root.setLevel(numeric)
    # At most one lingform handler, bound to the current sys.stderr.
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    _handler.setLevel(numeric)
    root.addHandler(_handler)
