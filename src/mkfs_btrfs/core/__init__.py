"""Core layer — option registry, keyword enums, and argument compilation.

Rules
-----
* No ``print()`` calls.
* Filesystem access is limited to existence probes.
* Processes are spawned only through a :class:`CommandRunner`.
* No imports from ``cli``.
"""

from mkfs_btrfs.core.formatter import Formatter, format_device
from mkfs_btrfs.core.models import ChecksumAlgorithm, DataProfile, FormatResult
from mkfs_btrfs.core.options import SLOT_ORDER, FormatterOptions
from mkfs_btrfs.core.protocols import CommandRunner

__all__: list[str] = [
    "SLOT_ORDER",
    "ChecksumAlgorithm",
    "CommandRunner",
    "DataProfile",
    "FormatResult",
    "Formatter",
    "FormatterOptions",
    "format_device",
]
