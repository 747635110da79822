"""Fixed values shared by the option builder, the runner, and the CLI."""

from __future__ import annotations

MKFS_BTRFS: str = "mkfs.btrfs"
"""Executable name, resolved through ``PATH`` at spawn time."""

MAX_LABEL_BYTES: int = 255
"""Longest label accepted, measured in UTF-8 bytes."""

MAX_NODESIZE: int = 16384
"""Largest b-tree node size accepted (2**14)."""

RUNTIME_FEATURES: tuple[str, ...] = ("quota", "free-space-tree")
"""Runtime features known to ``mkfs.btrfs -R``.

Informational only; feature names are checked by the tool itself.
"""
