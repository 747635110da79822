"""Loguru configuration for the CLI.

The library disables its own loguru namespace on import; applications
opt in with ``logger.enable("mkfs_btrfs")`` or, from the CLI, with
:func:`configure_logging`.
"""

from __future__ import annotations

import sys

from loguru import logger


def configure_logging(*, verbose: bool = False) -> None:
    """Route mkfs_btrfs log records to stderr.

    With *verbose* the sink accepts DEBUG records (every command line
    run); otherwise only WARNING and above.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        backtrace=False,
        diagnose=False,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    logger.enable("mkfs_btrfs")
