"""Shared pytest fixtures and configuration for the mkfs-btrfs-py test suite.

Guidelines
----------
* The real ``mkfs.btrfs`` is never executed.
* Process spawning is mocked at the ``subprocess.run`` seam or replaced
  by a fake :class:`CommandRunner`.
* Filesystem state comes from ``tmp_path`` only.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from mkfs_btrfs.core.models import FormatResult


class FakeRunner:
    """In-memory :class:`CommandRunner` that records every call."""

    def __init__(
        self,
        returncode: int = 0,
        stdout: bytes = b"",
        stderr: bytes = b"",
    ) -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.calls: list[tuple[str, ...]] = []

    def run(self, args: Sequence[str]) -> FormatResult:
        argv = ("mkfs.btrfs", *args)
        self.calls.append(tuple(args))
        return FormatResult(
            args=argv,
            returncode=self.returncode,
            stdout=self.stdout,
            stderr=self.stderr,
        )


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def image_file(tmp_path: Path) -> Path:
    """An empty file standing in for a block device."""
    path = tmp_path / "test.btrfs"
    path.write_bytes(b"")
    return path


@pytest.fixture
def rootdir(tmp_path: Path) -> Path:
    path = tmp_path / "rootdir"
    path.mkdir()
    (path / "hello.txt").write_text("hello")
    return path
