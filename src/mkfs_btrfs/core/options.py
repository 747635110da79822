"""Option registry — the typed, chainable set of ``mkfs.btrfs`` options.

Every setter validates its input (where a rule exists), renders the
option into the tool's argument syntax, and returns a **new**
:class:`FormatterOptions` with that slot filled.  The receiver is never
modified, so a setter that raises leaves the previous value usable.

Argument order is fixed by :data:`SLOT_ORDER`, not by the order in which
setters were called.
"""

from __future__ import annotations

import operator
import os
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from mkfs_btrfs.core.models import ChecksumAlgorithm, DataProfile
from mkfs_btrfs.exceptions import ArgumentError, PathNotFoundError
from mkfs_btrfs.utils.constants import MAX_LABEL_BYTES, MAX_NODESIZE

if TYPE_CHECKING:
    from mkfs_btrfs.core.formatter import Formatter
    from mkfs_btrfs.core.protocols import CommandRunner


SLOT_ORDER: tuple[str, ...] = (
    "byte_count",
    "checksum",
    "data",
    "features",
    "force",
    "label",
    "metadata",
    "mixed",
    "no_discard",
    "nodesize",
    "rootdir",
    "runtime_features",
    "sectorsize",
    "shrink",
    "uuid",
)
"""Declared slot order; compiled arguments always follow it."""


# ---------------------------------------------------------------------------
# Input helpers
# ---------------------------------------------------------------------------

def _unsigned(name: str, value: int) -> int:
    """Return *value* as a non-negative ``int`` or raise ``ArgumentError``."""
    try:
        number = operator.index(value)
    except TypeError:
        raise ArgumentError(f"{name} must be an integer, got {value!r}") from None
    if number < 0:
        raise ArgumentError(f"{name} must not be negative: {number}")
    return number


def _join_list(values: Iterable[str]) -> str:
    # A bare string is one feature name, not a sequence of characters.
    if isinstance(values, str):
        return values
    return ",".join(values)


def _coerce_enum(enum_cls: type[Any], value: Any) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ArgumentError(
            f"invalid {enum_cls.__name__}: {value!r}",
            hint=f"Choose one of: {choices}",
        ) from None


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class FormatterOptions:
    """Options for ``mkfs.btrfs``, one pre-formatted token per slot.

    Example
    -------
    >>> opts = (
    ...     FormatterOptions()
    ...     .label("my-volume")
    ...     .data(DataProfile.DUP)
    ...     .force()
    ... )
    >>> opts.to_args()
    ('--data=dup', '--force', '--label=my-volume')
    """

    __slots__ = ("_tokens",)

    def __init__(self) -> None:
        self._tokens: dict[str, str] = {}

    def _with(self, slot: str, token: str) -> FormatterOptions:
        clone = FormatterOptions()
        clone._tokens = {**self._tokens, slot: token}
        return clone

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def byte_count(self, byte_count: int) -> FormatterOptions:
        """Size of each device as seen by the filesystem, in bytes."""
        count = _unsigned("byte_count", byte_count)
        return self._with("byte_count", f"--byte-count={count}")

    def checksum(self, algorithm: ChecksumAlgorithm | str) -> FormatterOptions:
        """Block checksum algorithm."""
        algorithm = _coerce_enum(ChecksumAlgorithm, algorithm)
        return self._with("checksum", f"--checksum={algorithm}")

    def data(self, profile: DataProfile | str) -> FormatterOptions:
        """Profile for data block groups."""
        profile = _coerce_enum(DataProfile, profile)
        return self._with("data", f"--data={profile}")

    def features(self, features: Iterable[str]) -> FormatterOptions:
        """Mkfs-time features.  Prefix a name with ``^`` to unset it.

        Names are passed through unchecked; ``mkfs.btrfs`` validates them.
        An empty iterable still emits ``--features=``.
        """
        return self._with("features", f"--features={_join_list(features)}")

    def force(self) -> FormatterOptions:
        """Format even if an existing filesystem is detected."""
        return self._with("force", "--force")

    def label(self, label: str) -> FormatterOptions:
        """Filesystem label, at most 255 bytes as passed on the command line.

        Bytes are counted after :func:`os.fsencode`, so text decoded from a
        non-UTF-8 ``argv`` (surrogate escapes) is measured as the raw bytes
        that reach ``mkfs.btrfs``.
        """
        try:
            size = len(os.fsencode(label))
        except UnicodeEncodeError:
            raise ArgumentError(
                f"label cannot be encoded for the command line: {label!r}"
            ) from None
        if size > MAX_LABEL_BYTES:
            raise ArgumentError(
                f"label cannot be longer than {MAX_LABEL_BYTES} bytes: {size}, {label}"
            )
        return self._with("label", f"--label={label}")

    def metadata(self, profile: DataProfile | str) -> FormatterOptions:
        """Profile for metadata block groups."""
        profile = _coerce_enum(DataProfile, profile)
        return self._with("metadata", f"--metadata={profile}")

    def mixed(self) -> FormatterOptions:
        """Mix data and metadata in the same block groups."""
        return self._with("mixed", "--mixed")

    def no_discard(self) -> FormatterOptions:
        """Skip the implicit TRIM of the device."""
        return self._with("no_discard", "--nodiscard")

    def nodesize(self, nodesize: int) -> FormatterOptions:
        """B-tree node size: a power of two no larger than 16384."""
        size = _unsigned("nodesize", nodesize)
        if size == 0 or size & (size - 1) or size > MAX_NODESIZE:
            raise ArgumentError(
                f"nodesize ( = {size} ) must be a power of 2, and <= {MAX_NODESIZE}"
            )
        return self._with("nodesize", f"--nodesize={size}")

    def rootdir(self, rootdir: str | os.PathLike[str]) -> FormatterOptions:
        """Directory whose contents are copied into the new filesystem.

        Only existence is checked; the tool reports anything else.
        """
        if not os.path.exists(rootdir):
            raise PathNotFoundError(os.fspath(rootdir))
        return self._with("rootdir", f"--rootdir={os.fspath(rootdir)}")

    def runtime_features(self, features: Iterable[str]) -> FormatterOptions:
        """Runtime features (e.g. ``quota``).  Prefix with ``^`` to unset."""
        return self._with(
            "runtime_features", f"--runtime-features={_join_list(features)}"
        )

    def sectorsize(self, sectorsize: int) -> FormatterOptions:
        """Data block size.

        A value the running kernel does not support yields a volume that
        cannot be mounted; ``mkfs.btrfs`` performs that check.
        """
        size = _unsigned("sectorsize", sectorsize)
        return self._with("sectorsize", f"--sectorsize={size}")

    def shrink(self) -> FormatterOptions:
        """Shrink an image file to the minimum size when used with ``rootdir``."""
        return self._with("shrink", "--shrink")

    def uuid(self, uuid: object) -> FormatterOptions:
        """Filesystem UUID.  The format is checked by ``mkfs.btrfs``."""
        return self._with("uuid", f"--uuid={uuid}")

    # ------------------------------------------------------------------
    # Compilation
    # ------------------------------------------------------------------

    def to_args(self) -> tuple[str, ...]:
        """Return populated tokens in :data:`SLOT_ORDER`."""
        return tuple(self._tokens[slot] for slot in SLOT_ORDER if slot in self._tokens)

    def describe(self) -> str:
        """Human-readable dump of the populated slots."""
        args = self.to_args()
        if not args:
            return "FormatterOptions: no options set"
        width = max(len(slot) for slot in self._tokens)
        lines = [f"FormatterOptions: {len(args)} option(s) set"]
        lines.extend(
            f"  {slot:<{width}}  {self._tokens[slot]}"
            for slot in SLOT_ORDER
            if slot in self._tokens
        )
        return "\n".join(lines)

    def build(self, *, runner: CommandRunner | None = None) -> Formatter:
        """Bake the options into a :class:`~mkfs_btrfs.core.formatter.Formatter`."""
        from mkfs_btrfs.core.formatter import Formatter

        return Formatter(self.to_args(), runner=runner)

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormatterOptions):
            return NotImplemented
        return self._tokens == other._tokens

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FormatterOptions({list(self.to_args())!r})"
