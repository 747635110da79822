"""Compiler/invoker — turns compiled options plus a target into a run.

:class:`Formatter` holds an immutable argument vector produced by
:meth:`FormatterOptions.build`.  :meth:`Formatter.format` checks that the
target exists, appends it as the last argument, and delegates to a
:class:`~mkfs_btrfs.core.protocols.CommandRunner`.

Guarantees
----------
* Exactly one process per :meth:`Formatter.format` call, no retries.
* A non-zero exit status is returned, never raised.
* Stdout and stderr are passed back uninterpreted.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from mkfs_btrfs.core.models import FormatResult
from mkfs_btrfs.core.options import FormatterOptions
from mkfs_btrfs.core.protocols import CommandRunner
from mkfs_btrfs.exceptions import PathNotFoundError


@dataclass(frozen=True, slots=True)
class Formatter:
    """Formats anything ``mkfs.btrfs`` accepts: block devices or image files.

    Parameters
    ----------
    args:
        Compiled option tokens, in final order.
    runner:
        Process boundary.  Defaults to
        :class:`~mkfs_btrfs.infra.subprocess_runner.SubprocessRunner`.
    """

    args: tuple[str, ...] = ()
    runner: CommandRunner | None = field(default=None, compare=False, repr=False)

    @staticmethod
    def options() -> FormatterOptions:
        """Return an empty :class:`FormatterOptions` to configure."""
        return FormatterOptions()

    def command_args(self, device: str | os.PathLike[str]) -> tuple[str, ...]:
        """Return the options followed by *device* as the final argument."""
        return (*self.args, os.fspath(device))

    def format(self, device: str | os.PathLike[str]) -> FormatResult:
        """Run ``mkfs.btrfs`` against *device*.

        Raises
        ------
        PathNotFoundError
            When *device* does not exist.  Raised before spawning.
        ToolInvocationError
            When the executable cannot be started.
        """
        if not os.path.exists(device):
            raise PathNotFoundError(os.fspath(device))

        runner = self.runner
        if runner is None:
            from mkfs_btrfs.infra.subprocess_runner import SubprocessRunner

            runner = SubprocessRunner()
        return runner.run(self.command_args(device))


def format_device(
    options: FormatterOptions,
    device: str | os.PathLike[str],
    *,
    runner: CommandRunner | None = None,
) -> FormatResult:
    """Compile *options* and format *device* in one call."""
    return options.build(runner=runner).format(device)
