"""Process-wide logging setup for the command line."""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Route ``beadstock`` loggers to stderr at the given level."""
    root = logging.getLogger("beadstock")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
