"""Coarse media category flags.

A format's category is an orthogonal bitmask.  Predicates test single
bits with bitwise AND, while :func:`get_string_type` performs an exact
lookup so that composite masks are never given a single label.
"""

from __future__ import annotations

from enum import IntFlag


class TypeFlags(IntFlag):
    """Independent category bits carried by a format descriptor."""

    UNSET = 0
    AUDIO = 1
    IMAGE = 2
    VIDEO = 4
    UNKNOWN = 8
    PLAYLIST = 16
    ISO = 32
    SUBTITLE = 64


NOT_DEFINED: str = "NOT DEFINED"
"""Label returned for masks that are not exactly one defined bit."""

_LABELS: dict[int, str] = {
    int(TypeFlags.AUDIO): "AUDIO",
    int(TypeFlags.IMAGE): "IMAGE",
    int(TypeFlags.VIDEO): "VIDEO",
    int(TypeFlags.UNKNOWN): "UNKNOWN",
    int(TypeFlags.PLAYLIST): "PLAYLIST",
    int(TypeFlags.ISO): "ISO",
    int(TypeFlags.SUBTITLE): "SUBTITLE",
}


# ---------------------------------------------------------------------------
# Bit predicates
# ---------------------------------------------------------------------------

def _has_bit(mask: int, bit: TypeFlags) -> bool:
    return (int(mask) & bit) == bit


def is_audio(mask: int) -> bool:
    return _has_bit(mask, TypeFlags.AUDIO)


def is_image(mask: int) -> bool:
    return _has_bit(mask, TypeFlags.IMAGE)


def is_video(mask: int) -> bool:
    return _has_bit(mask, TypeFlags.VIDEO)


def is_unknown(mask: int) -> bool:
    return _has_bit(mask, TypeFlags.UNKNOWN)


def is_playlist(mask: int) -> bool:
    return _has_bit(mask, TypeFlags.PLAYLIST)


def is_iso(mask: int) -> bool:
    return _has_bit(mask, TypeFlags.ISO)


def is_subtitle(mask: int) -> bool:
    return _has_bit(mask, TypeFlags.SUBTITLE)


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

def get_string_type(mask: int) -> str:
    """Return the canonical label for a single defined bit.

    UNSET, composite masks and out-of-range values all yield
    :data:`NOT_DEFINED`.
    """
    return _LABELS.get(int(mask), NOT_DEFINED)
