"""Allow ``python -m mkfs_btrfs`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m mkfs_btrfs`` behaves identically to the ``mkfs-btrfs-py``
console script.
"""

from __future__ import annotations

from mkfs_btrfs.cli.app import cli

if __name__ == "__main__":
    cli()
