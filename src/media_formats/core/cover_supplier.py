"""Suppliers of cover art / album art.

A closed two-member value type with stable integer codes and lenient
string parsing.  Parsing never raises; unknown input maps to a default.
"""

from __future__ import annotations

from enum import Enum

from media_formats.exceptions import UnknownCoverSupplierError

NONE_INT: int = 0
COVER_ART_ARCHIVE_INT: int = 1


class CoverSupplier(Enum):
    """Where cover art is fetched from."""

    NONE = (NONE_INT, "None")
    COVER_ART_ARCHIVE = (COVER_ART_ARCHIVE_INT, "Cover Art Archive")

    def __init__(self, code: int, label: str) -> None:
        self.code = code
        self.label = label

    def __str__(self) -> str:
        return self.label

    def to_int(self) -> int:
        return self.code

    def to_integer(self) -> int:
        """Return the integer code through the explicit mapping.

        Every current member is mapped; the error guards members added
        later without a code mapping.

        Raises
        ------
        UnknownCoverSupplierError
            If this member's code has no mapping.
        """
        if self.code == NONE_INT:
            return NONE_INT
        if self.code == COVER_ART_ARCHIVE_INT:
            return COVER_ART_ARCHIVE_INT
        raise UnknownCoverSupplierError(
            f"CoverSupplier {self.label}, {self.code} is unknown.",
        )


_BY_NAME: dict[str, CoverSupplier] = {
    "none": CoverSupplier.NONE,
    "coverartarchive": CoverSupplier.COVER_ART_ARCHIVE,
    "coverartarchive.org": CoverSupplier.COVER_ART_ARCHIVE,
    "cover art archive": CoverSupplier.COVER_ART_ARCHIVE,
}

_BY_CODE: dict[int, CoverSupplier] = {
    NONE_INT: CoverSupplier.NONE,
    COVER_ART_ARCHIVE_INT: CoverSupplier.COVER_ART_ARCHIVE,
}


def to_cover_supplier(
    value: str | int | None,
    default: CoverSupplier = CoverSupplier.NONE,
) -> CoverSupplier:
    """Convert a setting value to a :class:`CoverSupplier`.

    Strings match case-insensitively, integers by code.  ``None`` and
    anything unrecognised yield *default*.
    """
    if isinstance(value, str):
        return _BY_NAME.get(value.lower(), default)
    if isinstance(value, int) and not isinstance(value, bool):
        return _BY_CODE.get(value, default)
    return default
