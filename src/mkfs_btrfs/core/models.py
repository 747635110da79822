"""Domain models for mkfs-btrfs-py.

The enumerations describe the closed keyword vocabularies accepted by
``mkfs.btrfs``.  A member's value *is* its keyword, so every member has
exactly one; :func:`str` on a member yields it.

:class:`FormatResult` is a frozen dataclass carrying the raw outcome of a
single tool invocation.  It holds no behaviour beyond data access.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# (Meta)data profiles
# ---------------------------------------------------------------------------

class DataProfile(Enum):
    """Block group profile for data or metadata.

    ``mkfs.btrfs --data ( raid0 | raid1 | ... )``
    """

    RAID0 = "raid0"
    RAID1 = "raid1"
    RAID1C3 = "raid1c3"
    RAID1C4 = "raid1c4"
    RAID5 = "raid5"
    RAID6 = "raid6"
    RAID10 = "raid10"
    SINGLE = "single"
    DUP = "dup"

    @property
    def keyword(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.keyword


# ---------------------------------------------------------------------------
# Checksum algorithms
# ---------------------------------------------------------------------------

class ChecksumAlgorithm(Enum):
    """Block checksum algorithm.

    ``mkfs.btrfs --checksum [ crc32c | xxhash | sha256 | blake2 ]``
    """

    CRC32C = "crc32c"
    XXHASH = "xxhash"
    SHA256 = "sha256"
    BLAKE2 = "blake2"

    @property
    def keyword(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.keyword


# ---------------------------------------------------------------------------
# Invocation outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FormatResult:
    """Captured outcome of one ``mkfs.btrfs`` run.

    The streams are kept as raw bytes; nothing in this package parses
    them.
    """

    args: tuple[str, ...]
    """Full argument vector, executable first and target path last."""

    returncode: int
    """Exit status reported by the operating system."""

    stdout: bytes
    """Everything the tool wrote to standard output."""

    stderr: bytes
    """Everything the tool wrote to standard error."""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0
