"""Custom exception hierarchy for mkfs-btrfs-py.

Every error raised by this package inherits from :class:`MkfsBtrfsError`.
Each concrete class also inherits the matching built-in so callers that
only know the standard library (``ValueError``, ``OSError``) can still
catch them.

Hierarchy
---------
MkfsBtrfsError
├── ArgumentError          (ValueError)
├── PathNotFoundError      (FileNotFoundError)
└── ToolInvocationError    (OSError)

A non-zero exit status from ``mkfs.btrfs`` is **not** an error here; it
is returned to the caller as data.
"""

from __future__ import annotations


class MkfsBtrfsError(Exception):
    """Base exception for all mkfs-btrfs-py errors.

    The CLI error boundary renders the message and, when present, the
    :attr:`hint` without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Option validation -----------------------------------------------------

class ArgumentError(MkfsBtrfsError, ValueError):
    """Raised by an option setter when its input violates a precondition."""


# --- Filesystem / process --------------------------------------------------

class PathNotFoundError(MkfsBtrfsError, FileNotFoundError):
    """Raised when a root directory or target device does not exist."""

    def __init__(self, path: str, *, hint: str | None = None) -> None:
        super().__init__(f"No such file or directory: {path}", hint=hint)
        self.path: str = path


class ToolInvocationError(MkfsBtrfsError, OSError):
    """Raised when the operating system fails to spawn ``mkfs.btrfs``.

    The original :class:`OSError` is available as ``__cause__`` and its
    ``errno`` is copied onto this exception.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        errno: int | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.errno = errno
