"""
clipsplit.logging - Centralized logging configuration.

Provides a simple logging setup with optional verbose mode for debugging.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("clipsplit")


def configure_logging(verbose: bool = False, level: str = "WARNING") -> None:
    """Configure logging for the clipsplit package.

    Args:
        verbose: If True, enable DEBUG level logging regardless of level
        level: Level name used when not verbose (e.g. "INFO", "WARNING")
    """
    resolved = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=resolved,
        format="%(levelname)s: %(message)s",
    )
    logger.setLevel(resolved)
