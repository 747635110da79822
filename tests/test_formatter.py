"""Tests for the compiler/invoker (core/formatter.py).

All tests use an in-memory runner or mock ``subprocess.run`` — the real
``mkfs.btrfs`` is never spawned.

Coverage:
* Target path appended last.
* Missing target raises before any process is spawned.
* Non-zero exit status is returned, not raised.
* Default runner wiring.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from mkfs_btrfs.core.formatter import Formatter, format_device
from mkfs_btrfs.core.models import ChecksumAlgorithm, DataProfile
from mkfs_btrfs.core.options import FormatterOptions
from mkfs_btrfs.exceptions import PathNotFoundError

from conftest import FakeRunner


# ---------------------------------------------------------------------------
# Argument assembly
# ---------------------------------------------------------------------------

class TestCommandArgs:
    def test_target_is_last(self, image_file: Path) -> None:
        formatter = FormatterOptions().force().label("vol").build()
        assert formatter.command_args(image_file) == (
            "--force",
            "--label=vol",
            str(image_file),
        )

    def test_empty_options_only_target(self, image_file: Path) -> None:
        assert Formatter().command_args(image_file) == (str(image_file),)

    def test_equality_ignores_runner(self) -> None:
        a = Formatter(("--force",), runner=FakeRunner())
        b = Formatter(("--force",))
        assert a == b


# ---------------------------------------------------------------------------
# format()
# ---------------------------------------------------------------------------

class TestFormat:
    def test_end_to_end(
        self, image_file: Path, rootdir: Path, fake_runner: FakeRunner,
    ) -> None:
        result = (
            Formatter.options()
            .label("label-label")
            .shrink()
            .rootdir(rootdir)
            .build(runner=fake_runner)
            .format(image_file)
        )

        assert fake_runner.calls == [
            (
                "--label=label-label",
                f"--rootdir={rootdir}",
                "--shrink",
                str(image_file),
            )
        ]
        assert result.succeeded
        assert result.args[-1] == str(image_file)

    def test_missing_target_raises_before_spawn(
        self, tmp_path: Path, fake_runner: FakeRunner,
    ) -> None:
        formatter = FormatterOptions().force().build(runner=fake_runner)
        with pytest.raises(PathNotFoundError) as exc_info:
            formatter.format(tmp_path / "missing.img")
        assert isinstance(exc_info.value, FileNotFoundError)
        assert fake_runner.calls == []

    def test_empty_target_raises_before_spawn(self, fake_runner: FakeRunner) -> None:
        # Path("") would resolve to the working directory.
        with pytest.raises(PathNotFoundError):
            Formatter(runner=fake_runner).format("")
        assert fake_runner.calls == []

    def test_non_zero_exit_is_returned(self, image_file: Path) -> None:
        runner = FakeRunner(returncode=1, stdout=b"", stderr=b"ERROR: too small")
        result = Formatter(runner=runner).format(image_file)
        assert result.returncode == 1
        assert result.succeeded is False
        assert result.stderr == b"ERROR: too small"

    def test_output_is_passed_through_unchanged(self, image_file: Path) -> None:
        runner = FakeRunner(stdout=b"\xffbinary\x00", stderr=b"warn\n")
        result = Formatter(runner=runner).format(image_file)
        assert result.stdout == b"\xffbinary\x00"
        assert result.stderr == b"warn\n"

    def test_can_format_twice(self, image_file: Path, fake_runner: FakeRunner) -> None:
        formatter = FormatterOptions().mixed().build(runner=fake_runner)
        formatter.format(image_file)
        formatter.format(image_file)
        assert len(fake_runner.calls) == 2
        assert fake_runner.calls[0] == fake_runner.calls[1]

    @patch("mkfs_btrfs.infra.subprocess_runner.subprocess.run")
    def test_default_runner_uses_subprocess(
        self, mock_run: MagicMock, image_file: Path,
    ) -> None:
        mock_run.return_value = MagicMock(returncode=0, stdout=b"ok", stderr=b"")
        result = (
            Formatter.options()
            .checksum(ChecksumAlgorithm.XXHASH)
            .data(DataProfile.SINGLE)
            .build()
            .format(image_file)
        )

        mock_run.assert_called_once()
        argv = mock_run.call_args.args[0]
        assert argv == (
            "mkfs.btrfs",
            "--checksum=xxhash",
            "--data=single",
            str(image_file),
        )
        assert result.stdout == b"ok"


class TestFormatDevice:
    def test_compiles_and_runs(self, image_file: Path, fake_runner: FakeRunner) -> None:
        options = FormatterOptions().nodesize(16384)
        result = format_device(options, image_file, runner=fake_runner)
        assert fake_runner.calls == [("--nodesize=16384", str(image_file))]
        assert result.returncode == 0

    def test_missing_target(self, tmp_path: Path, fake_runner: FakeRunner) -> None:
        with pytest.raises(PathNotFoundError):
            format_device(FormatterOptions(), tmp_path / "x", runner=fake_runner)
        assert fake_runner.calls == []
