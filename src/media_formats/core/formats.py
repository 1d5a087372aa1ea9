"""Reference format variants.

A representative descriptor per media category.  Each class declares
its identifier, extensions, icon and category; behaviour comes from
:class:`~media_formats.core.format.FormatDescriptor`.
"""

from __future__ import annotations

from typing import ClassVar

from media_formats.core.format import FormatDescriptor
from media_formats.core.identifiers import FormatIdentifier
from media_formats.core.type_flags import TypeFlags
from media_formats.exceptions import UnknownFormatError
from media_formats.utils.uri import get_protocol


# ---------------------------------------------------------------------------
# Audio
# ---------------------------------------------------------------------------

class MP3(FormatDescriptor):
    identifier = FormatIdentifier.MP3
    supported_extensions = ("mp3",)
    icon = "images/formats/audio.png"
    default_type = TypeFlags.AUDIO

    def transcodable(self) -> bool:
        return True


class MPA(FormatDescriptor):
    identifier = FormatIdentifier.MPA
    supported_extensions = ("mpa", "mp2")
    icon = "images/formats/audio.png"
    default_type = TypeFlags.AUDIO

    def transcodable(self) -> bool:
        return True


class FLAC(FormatDescriptor):
    identifier = FormatIdentifier.FLAC
    supported_extensions = ("flac",)
    icon = "images/formats/audio.png"
    default_type = TypeFlags.AUDIO

    def transcodable(self) -> bool:
        return True


# ---------------------------------------------------------------------------
# Video
# ---------------------------------------------------------------------------

class MKV(FormatDescriptor):
    identifier = FormatIdentifier.MKV
    supported_extensions = ("mkv", "mk3d")
    icon = "images/formats/video.png"
    default_type = TypeFlags.VIDEO

    def transcodable(self) -> bool:
        return True


class MPG(FormatDescriptor):
    identifier = FormatIdentifier.MPG
    supported_extensions = ("mpg", "mpeg", "mp4", "m4v", "ts", "m2ts", "vob")
    icon = "images/formats/video.png"
    default_type = TypeFlags.VIDEO

    def transcodable(self) -> bool:
        return True


class Web(FormatDescriptor):
    """Network stream, matched by URI protocol instead of extension.

    The matched protocol is recorded as the matched extension.
    """

    identifier = FormatIdentifier.WEB
    supported_protocols: ClassVar[frozenset[str]] = frozenset(
        {"http", "https", "mms", "rtsp", "rtp", "udp", "ftp"},
    )
    icon = "images/formats/web.png"
    default_type = TypeFlags.VIDEO

    def find_extension(self, filename: str | None) -> str | None:
        protocol = get_protocol(filename)
        if protocol in self.supported_protocols:
            return protocol
        return None

    def transcodable(self) -> bool:
        return True


# ---------------------------------------------------------------------------
# Image
# ---------------------------------------------------------------------------

class JPG(FormatDescriptor):
    identifier = FormatIdentifier.JPG
    supported_extensions = ("jpg", "jpeg", "jpe", "jif", "jfif")
    icon = "images/formats/image.png"
    default_type = TypeFlags.IMAGE

    def transcodable(self) -> bool:
        return True


# ---------------------------------------------------------------------------
# Subtitles
# ---------------------------------------------------------------------------

class SubRip(FormatDescriptor):
    identifier = FormatIdentifier.SUBRIP
    supported_extensions = ("srt",)
    default_type = TypeFlags.SUBTITLE

    def transcodable(self) -> bool:
        return False


class WebVtt(FormatDescriptor):
    identifier = FormatIdentifier.WEBVTT
    supported_extensions = ("vtt",)
    default_type = TypeFlags.SUBTITLE

    def transcodable(self) -> bool:
        return False


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

class Playlist(FormatDescriptor):
    identifier = FormatIdentifier.PLAYLIST
    supported_extensions = ("m3u", "m3u8", "pls", "cue", "ups")
    default_type = TypeFlags.PLAYLIST

    def transcodable(self) -> bool:
        return False


class ISO(FormatDescriptor):
    identifier = FormatIdentifier.ISO
    supported_extensions = ("iso", "img")
    icon = "images/formats/iso.png"
    default_type = TypeFlags.ISO

    def transcodable(self) -> bool:
        return True


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

_VARIANTS: dict[FormatIdentifier, type[FormatDescriptor]] = {
    cls.identifier: cls
    for cls in (MP3, MPA, FLAC, MKV, MPG, Web, JPG, SubRip, WebVtt, Playlist, ISO)
}


def lookup_variant(identifier: FormatIdentifier) -> FormatDescriptor:
    """Return a fresh descriptor for *identifier*.

    Raises
    ------
    UnknownFormatError
        If no reference variant is declared for *identifier*.
    """
    variant = _VARIANTS.get(identifier)
    if variant is None:
        raise UnknownFormatError(
            f"No format variant is declared for {identifier.name}.",
        )
    return variant()
