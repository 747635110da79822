"""Tests for domain models (core/models.py).

Covers the keyword vocabularies of the two enumerations and the frozen
:class:`FormatResult` value.
"""

from __future__ import annotations

import pytest

from mkfs_btrfs.core.models import ChecksumAlgorithm, DataProfile, FormatResult


PROFILE_KEYWORDS = {
    "RAID0": "raid0",
    "RAID1": "raid1",
    "RAID1C3": "raid1c3",
    "RAID1C4": "raid1c4",
    "RAID5": "raid5",
    "RAID6": "raid6",
    "RAID10": "raid10",
    "SINGLE": "single",
    "DUP": "dup",
}

CHECKSUM_KEYWORDS = {
    "CRC32C": "crc32c",
    "XXHASH": "xxhash",
    "SHA256": "sha256",
    "BLAKE2": "blake2",
}


# ---------------------------------------------------------------------------
# ChecksumAlgorithm
# ---------------------------------------------------------------------------

class TestChecksumAlgorithm:
    def test_display(self) -> None:
        assert str(ChecksumAlgorithm.BLAKE2) == "blake2"
        assert str(ChecksumAlgorithm.CRC32C) == "crc32c"
        assert str(ChecksumAlgorithm.SHA256) == "sha256"
        assert str(ChecksumAlgorithm.XXHASH) == "xxhash"

    def test_every_member_has_documented_keyword(self) -> None:
        assert {m.name: m.keyword for m in ChecksumAlgorithm} == CHECKSUM_KEYWORDS

    def test_format_spec_uses_keyword(self) -> None:
        assert f"{ChecksumAlgorithm.XXHASH}" == "xxhash"

    def test_lookup_by_keyword(self) -> None:
        assert ChecksumAlgorithm("sha256") is ChecksumAlgorithm.SHA256


# ---------------------------------------------------------------------------
# DataProfile
# ---------------------------------------------------------------------------

class TestDataProfile:
    @pytest.mark.parametrize(("name", "keyword"), sorted(PROFILE_KEYWORDS.items()))
    def test_display(self, name: str, keyword: str) -> None:
        assert str(DataProfile[name]) == keyword

    def test_every_member_has_documented_keyword(self) -> None:
        assert {m.name: m.keyword for m in DataProfile} == PROFILE_KEYWORDS

    def test_keywords_are_lowercase(self) -> None:
        assert all(m.keyword == m.keyword.lower() for m in DataProfile)


# ---------------------------------------------------------------------------
# FormatResult
# ---------------------------------------------------------------------------

class TestFormatResult:
    def test_succeeded_on_zero(self) -> None:
        result = FormatResult(args=("mkfs.btrfs", "x"), returncode=0, stdout=b"", stderr=b"")
        assert result.succeeded is True

    def test_not_succeeded_on_non_zero(self) -> None:
        result = FormatResult(args=(), returncode=1, stdout=b"out", stderr=b"err")
        assert result.succeeded is False
        assert result.stdout == b"out"
        assert result.stderr == b"err"

    def test_frozen(self) -> None:
        result = FormatResult(args=(), returncode=0, stdout=b"", stderr=b"")
        with pytest.raises(AttributeError):
            result.returncode = 1  # type: ignore[misc]
