"""Infrastructure: ``mkfs.btrfs`` detection and install guidance.

Locates the executable on the system PATH and suggests how to install
btrfs-progs when it is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from mkfs_btrfs.utils.constants import MKFS_BTRFS


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MkfsStatus:
    """Result of a ``mkfs.btrfs`` detection probe.

    Attributes
    ----------
    found : bool
        Whether the executable was located on PATH.
    path : Path | None
        Absolute path to the executable, or ``None``.
    version_hint : str
        Human-readable status string (e.g. ``"found at …"`` or ``"not found"``).
    install_commands : tuple[str, ...]
        Suggested shell commands for installing btrfs-progs on the
        current platform.  Empty when the executable is present.
    """

    found: bool
    path: Path | None
    version_hint: str
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_mkfs_btrfs(executable: str = MKFS_BTRFS) -> MkfsStatus:
    """Probe the system for *executable*.

    Returns a :class:`MkfsStatus` whether or not it is present — the
    caller decides whether to abort or merely warn.
    """
    result = shutil.which(executable)

    if result is not None:
        resolved = Path(result).resolve()
        return MkfsStatus(
            found=True,
            path=resolved,
            version_hint=f"found at {resolved}",
            install_commands=(),
        )

    return MkfsStatus(
        found=False,
        path=None,
        version_hint="not found",
        install_commands=platform_install_commands(),
    )


def install_hint() -> str:
    """Return a multi-line hint listing the install commands."""
    lines = ["Install btrfs-progs using one of:"]
    lines.extend(f"  {cmd}" for cmd in platform_install_commands())
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    if platform.system().lower() != "linux":
        # btrfs-progs only builds for Linux.
        return ("btrfs-progs requires Linux; run this tool on a Linux host",)
    return (
        "sudo apt install btrfs-progs",
        "sudo dnf install btrfs-progs",
        "sudo pacman -S btrfs-progs",
        "sudo apk add btrfs-progs",
    )
