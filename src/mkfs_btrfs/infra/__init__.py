"""Infrastructure layer — operating-system integration.

Wraps process spawning and executable lookup.  Raw ``OSError`` raised
while spawning is caught here and re-raised as a
:class:`~mkfs_btrfs.exceptions.MkfsBtrfsError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from mkfs_btrfs.infra.mkfs_detector import MkfsStatus, detect_mkfs_btrfs
from mkfs_btrfs.infra.subprocess_runner import SubprocessRunner

__all__: list[str] = [
    "MkfsStatus",
    "SubprocessRunner",
    "detect_mkfs_btrfs",
]
