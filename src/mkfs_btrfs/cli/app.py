"""CLI application entry point and command routing for mkfs-btrfs-py.

This module is the **sole error boundary** for the application.  It
catches :class:`~mkfs_btrfs.exceptions.MkfsBtrfsError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a short
message and returns a well-defined exit code.

No option validation lives here; flags are forwarded to
:class:`~mkfs_btrfs.core.options.FormatterOptions`, which owns the rules.
"""

from __future__ import annotations

import argparse
import shlex
import sys

from mkfs_btrfs.cli import exit_codes
from mkfs_btrfs.cli.console import console, escape
from mkfs_btrfs.core.models import ChecksumAlgorithm, DataProfile
from mkfs_btrfs.core.options import FormatterOptions
from mkfs_btrfs.exceptions import MkfsBtrfsError
from mkfs_btrfs.utils.constants import MKFS_BTRFS, RUNTIME_FEATURES
from mkfs_btrfs.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _csv(value: str) -> list[str]:
    """Split a comma-separated flag value; ``""`` yields an empty list."""
    return [item for item in value.split(",") if item] if value else []


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``mkfs-btrfs-py <device> [options]`` — format a device or image file
    * ``mkfs-btrfs-py doctor``             — environment diagnostics
    * ``mkfs-btrfs-py --version``
    """
    parser = argparse.ArgumentParser(
        prog="mkfs-btrfs-py",
        description="Create a Btrfs filesystem with validated mkfs.btrfs options.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Device or image file to format, or 'doctor' to run diagnostics.",
    )

    opts = parser.add_argument_group("mkfs.btrfs options")
    opts.add_argument("-b", "--byte-count", type=int, metavar="BYTES")
    opts.add_argument(
        "--checksum",
        choices=[member.value for member in ChecksumAlgorithm],
    )
    opts.add_argument(
        "-d", "--data", choices=[member.value for member in DataProfile],
    )
    opts.add_argument(
        "-m", "--metadata", choices=[member.value for member in DataProfile],
    )
    opts.add_argument("-O", "--features", type=_csv, metavar="LIST")
    opts.add_argument(
        "-R",
        "--runtime-features",
        type=_csv,
        metavar="LIST",
        help=f"Comma-separated runtime features (known: {', '.join(RUNTIME_FEATURES)}).",
    )
    opts.add_argument("-f", "--force", action="store_true")
    opts.add_argument("-L", "--label")
    opts.add_argument("-M", "--mixed", action="store_true")
    opts.add_argument("-K", "--nodiscard", dest="no_discard", action="store_true")
    opts.add_argument("-n", "--nodesize", type=int)
    opts.add_argument("-r", "--rootdir")
    opts.add_argument("-s", "--sectorsize", type=int)
    opts.add_argument("--shrink", action="store_true")
    opts.add_argument("-U", "--uuid")

    run = parser.add_argument_group("run control")
    run.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the mkfs.btrfs command line instead of running it.",
    )
    run.add_argument(
        "--mkfs-path",
        default=MKFS_BTRFS,
        help=f"Executable to run (default: {MKFS_BTRFS}).",
    )
    run.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every command line run to stderr.",
    )
    return parser


def _options_from_args(args: argparse.Namespace) -> FormatterOptions:
    """Translate parsed flags into a :class:`FormatterOptions`."""
    options = FormatterOptions()
    if args.byte_count is not None:
        options = options.byte_count(args.byte_count)
    if args.checksum is not None:
        options = options.checksum(args.checksum)
    if args.data is not None:
        options = options.data(args.data)
    if args.features is not None:
        options = options.features(args.features)
    if args.force:
        options = options.force()
    if args.label is not None:
        options = options.label(args.label)
    if args.metadata is not None:
        options = options.metadata(args.metadata)
    if args.mixed:
        options = options.mixed()
    if args.no_discard:
        options = options.no_discard()
    if args.nodesize is not None:
        options = options.nodesize(args.nodesize)
    if args.rootdir is not None:
        options = options.rootdir(args.rootdir)
    if args.runtime_features is not None:
        options = options.runtime_features(args.runtime_features)
    if args.sectorsize is not None:
        options = options.sectorsize(args.sectorsize)
    if args.shrink:
        options = options.shrink()
    if args.uuid is not None:
        options = options.uuid(args.uuid)
    return options


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_format(args: argparse.Namespace) -> int:
    """Build options from *args* and run (or print) mkfs.btrfs."""
    from mkfs_btrfs.infra.subprocess_runner import SubprocessRunner

    options = _options_from_args(args)
    formatter = options.build(runner=SubprocessRunner(args.mkfs_path))

    if args.dry_run:
        console.print(options.describe(), markup=False)
        print(shlex.join((args.mkfs_path, *formatter.command_args(args.target))))
        return exit_codes.SUCCESS

    result = formatter.format(args.target)

    sys.stdout.flush()
    sys.stdout.buffer.write(result.stdout)
    sys.stdout.buffer.flush()
    sys.stderr.flush()
    sys.stderr.buffer.write(result.stderr)
    sys.stderr.buffer.flush()

    if not result.succeeded:
        console.print(
            f"[bold red]{escape(args.mkfs_path)} exited with status "
            f"{result.returncode}.[/bold red]"
        )
        return exit_codes.TOOL_FAILED

    console.print(f"[bold green]Formatted {escape(args.target)}.[/bold green]")
    return exit_codes.SUCCESS


def _handle_doctor(args: argparse.Namespace) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from mkfs_btrfs.cli.doctor import run_doctor

    return run_doctor(args.mkfs_path)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the mkfs-btrfs-py CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        from mkfs_btrfs.logging_setup import configure_logging

        configure_logging(verbose=True)

    if args.target is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.target.lower() == "doctor":
        return _handle_doctor(args)

    return _handle_format(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except MkfsBtrfsError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
