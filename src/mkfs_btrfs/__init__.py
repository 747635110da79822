"""mkfs-btrfs-py — typed option builder and runner for ``mkfs.btrfs``.

Configure a :class:`FormatterOptions`, bake it with ``build()`` and call
``format(device)``::

    from mkfs_btrfs import ChecksumAlgorithm, DataProfile, Formatter

    result = (
        Formatter.options()
        .checksum(ChecksumAlgorithm.CRC32C)
        .data(DataProfile.DUP)
        .label("my-volume")
        .build()
        .format("./test.btrfs")
    )
    print(result.returncode)
"""

from loguru import logger

from mkfs_btrfs.core import (
    ChecksumAlgorithm,
    DataProfile,
    Formatter,
    FormatResult,
    FormatterOptions,
    format_device,
)
from mkfs_btrfs.exceptions import (
    ArgumentError,
    MkfsBtrfsError,
    PathNotFoundError,
    ToolInvocationError,
)
from mkfs_btrfs.version import __version__

logger.disable("mkfs_btrfs")

__all__: list[str] = [
    "ArgumentError",
    "ChecksumAlgorithm",
    "DataProfile",
    "FormatResult",
    "Formatter",
    "FormatterOptions",
    "MkfsBtrfsError",
    "PathNotFoundError",
    "ToolInvocationError",
    "__version__",
    "format_device",
]
