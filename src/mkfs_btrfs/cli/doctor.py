"""``mkfs-btrfs-py doctor`` — environment diagnostics command.

Collects system information and renders a table summarising whether
the host can run ``mkfs.btrfs``.  Rendering uses Rich when it can be
imported and plain stderr text otherwise.
"""

from __future__ import annotations

import platform
import sys

from mkfs_btrfs.cli import exit_codes
from mkfs_btrfs.cli.console import console, escape
from mkfs_btrfs.infra.mkfs_detector import MkfsStatus, detect_mkfs_btrfs
from mkfs_btrfs.utils.constants import MKFS_BTRFS
from mkfs_btrfs.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _package_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the mkfs-btrfs-py version row."""
    return "mkfs-btrfs-py", __version__, "[green]OK[/green]"


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _mkfs_check(
    status_obj: MkfsStatus, executable: str = MKFS_BTRFS,
) -> tuple[str, str, str]:
    """Return (label, value, status) for the row of the probed *executable*."""
    if status_obj.found:
        path_str = str(status_obj.path) if status_obj.path else "found"
        return executable, path_str, "[green]OK[/green]"
    return executable, "not found", "[red]FAIL[/red]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system = platform.system()
    value = f"{system} {platform.release()} ({platform.machine()})"
    if system == "Linux":
        return "OS", value, "[green]OK[/green]"
    return "OS", value, "[yellow]WARN (Linux required to format)[/yellow]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_table(checks: list[tuple[str, str, str]]) -> None:
    print("\nmkfs-btrfs-py doctor", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<36} {'Status':<8}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<14} {value:<36} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(executable: str = MKFS_BTRFS) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    mkfs_status = detect_mkfs_btrfs(executable)
    checks = [
        _package_version_check(),
        _python_version_check(),
        _mkfs_check(mkfs_status, executable),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="mkfs-btrfs-py doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(escape(label), escape(value), status)
        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_table(checks)

    if not mkfs_status.found:
        console.print(f"{escape(executable)} is not installed.")
        console.print("Install using one of the following commands:\n")
        for cmd in mkfs_status.install_commands:
            console.print(f"  {cmd}")
        console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
