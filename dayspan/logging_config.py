"""Logging configuration for dayspan."""

import logging
import sys

_configured = False


def setup_logging(level: int | str = logging.WARNING) -> None:
    """Configure logging for the dayspan package.

    - Output to stderr (keeps rich console stdout clean)
    - Format: HH:MM:SS LEVEL [module.name] message
    - Idempotent: safe to call multiple times
    """
    global _configured
    if _configured:
        return
    _configured = True

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-5s [%(name)s] %(message)s", datefmt="%H:%M:%S")
    )

    root = logging.getLogger("dayspan")
    root.setLevel(level)
    root.addHandler(handler)


def reset_logging() -> None:
    """Reset logging state. For testing only."""
    global _configured
    _configured = False
    root = logging.getLogger("dayspan")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
