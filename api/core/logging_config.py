from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """
    Install a single stream handler on the root logger. Safe to call more than once.
    """
    global _configured
    root = logging.getLogger()
    root.setLevel(level)
    if _configured:
        return None

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True
