"""Default MIME types per coarse media category."""

from __future__ import annotations

from media_formats.core.type_flags import TypeFlags

FALLBACK_MIME_TYPE: str = "application/octet-stream"

_DEFAULT_MIME_TYPES: dict[int, str] = {
    int(TypeFlags.VIDEO): "video/mpeg",
    int(TypeFlags.AUDIO): "audio/mpeg",
    int(TypeFlags.IMAGE): "image/jpeg",
    int(TypeFlags.SUBTITLE): "text/plain",
    int(TypeFlags.PLAYLIST): "audio/x-mpegurl",
}


def default_mime_type(type_flags: int) -> str:
    """Return the default MIME type for an exact category mask.

    Composite, unset and unmapped masks fall back to
    :data:`FALLBACK_MIME_TYPE`.
    """
    return _DEFAULT_MIME_TYPES.get(int(type_flags), FALLBACK_MIME_TYPE)
