"""``subprocess`` backed implementation of :class:`~mkfs_btrfs.core.protocols.CommandRunner`.

This module is the **only** place in the codebase that spawns
``mkfs.btrfs``.  Operating-system failures to start the process are
re-raised as :class:`~mkfs_btrfs.exceptions.ToolInvocationError`; the
tool's own exit status is returned untouched.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from loguru import logger

from mkfs_btrfs.core.models import FormatResult
from mkfs_btrfs.exceptions import ToolInvocationError
from mkfs_btrfs.infra.mkfs_detector import install_hint
from mkfs_btrfs.utils.constants import MKFS_BTRFS


class SubprocessRunner:
    """Concrete :class:`CommandRunner` that blocks until the tool exits.

    Parameters
    ----------
    executable:
        Program to run.  A bare name is resolved through ``PATH``.
    """

    def __init__(self, executable: str = MKFS_BTRFS) -> None:
        self.executable: str = executable

    def run(self, args: Sequence[str]) -> FormatResult:
        """Run the executable with *args*, capturing stdout and stderr.

        No environment variables or working directory are changed.

        Raises
        ------
        ToolInvocationError
            When the process cannot be spawned (missing binary,
            permission denied, ...).
        """
        argv = (self.executable, *args)
        logger.debug("Running {}", " ".join(argv))

        try:
            proc = subprocess.run(argv, capture_output=True, check=False)
        except FileNotFoundError as exc:
            raise ToolInvocationError(
                f"{self.executable} is not installed or not on PATH.",
                hint=install_hint(),
                errno=exc.errno,
            ) from exc
        except OSError as exc:
            raise ToolInvocationError(
                f"Failed to start {self.executable}: {exc}",
                errno=exc.errno,
            ) from exc

        logger.debug("{} exited with status {}", self.executable, proc.returncode)
        return FormatResult(
            args=argv,
            returncode=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
        )
