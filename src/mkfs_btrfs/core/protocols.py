"""Protocols (interfaces) consumed by the core layer.

The core never spawns processes itself; it hands a finished argument
vector to an object satisfying :class:`CommandRunner`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from mkfs_btrfs.core.models import FormatResult


class CommandRunner(Protocol):
    """Contract for the process boundary that executes ``mkfs.btrfs``.

    Any object with a matching :meth:`run` satisfies this protocol
    structurally (no explicit inheritance required).
    """

    def run(self, args: Sequence[str]) -> FormatResult:
        """Run the tool with *args* and wait for it to exit.

        *args* excludes the executable; the runner prepends it.  The
        call blocks until the process terminates and returns its exit
        status and captured output unmodified.

        Raises
        ------
        ToolInvocationError
            When the operating system cannot spawn the executable.
        """
        ...  # pragma: no cover
