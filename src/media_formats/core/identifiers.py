"""Closed set of fine-grained format identifiers.

An identifier answers "which format" and is unrelated to the coarse
:class:`~media_formats.core.type_flags.TypeFlags` category.
"""

from __future__ import annotations

from enum import Enum

from media_formats.exceptions import UnknownFormatError


class FormatIdentifier(Enum):
    """Tag reported by exactly one concrete format variant."""

    AACP = "AACP"
    AC3 = "AC3"
    ADPCM = "ADPCM"
    ADTS = "ADTS"
    AIFF = "AIFF"
    APE = "APE"
    ATRAC = "ATRAC"
    AU = "AU"
    AUDIO_AS_VIDEO = "AUDIO_AS_VIDEO"
    ASS = "ASS"
    BMP = "BMP"
    DFF = "DFF"
    DSF = "DSF"
    DTS = "DTS"
    DVRMS = "DVRMS"
    EAC3 = "EAC3"
    FLAC = "FLAC"
    GIF = "GIF"
    RGBE = "RGBE"
    ICNS = "ICNS"
    ICO = "ICO"
    IFF = "IFF"
    IDX = "IDX"
    ISO = "ISO"
    ISOVOB = "ISOVOB"
    JPG = "JPG"
    M4A = "M4A"
    MICRODVD = "MICRODVD"
    MKA = "MKA"
    MKV = "MKV"
    MLP = "MLP"
    MP3 = "MP3"
    MPA = "MPA"
    MPC = "MPC"
    MPG = "MPG"
    OGA = "OGA"
    OGG = "OGG"
    PCX = "PCX"
    PICT = "PICT"
    PNG = "PNG"
    PNM = "PNM"
    PSD = "PSD"
    RA = "RA"
    RAW = "RAW"
    SAMI = "SAMI"
    SGI = "SGI"
    SHN = "SHN"
    SUBRIP = "SUBRIP"
    SUP = "SUP"
    TGA = "TGA"
    THD = "THD"
    THREEGA = "THREEGA"
    THREEG2A = "THREEG2A"
    TIFF = "TIFF"
    TTA = "TTA"
    TXT = "TXT"
    WAV = "WAV"
    WBMP = "WBMP"
    WEB = "WEB"
    WEBP = "WEBP"
    WEBVTT = "WEBVTT"
    WMA = "WMA"
    WV = "WV"
    CUSTOM = "CUSTOM"
    PLAYLIST = "PLAYLIST"

    @classmethod
    def from_name(cls, name: str) -> FormatIdentifier:
        """Parse *name* case-insensitively.

        Raises
        ------
        UnknownFormatError
            If *name* is not a member.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError as exc:
            raise UnknownFormatError(
                f"Unknown format identifier: {name}",
                hint="Identifier names are case-insensitive, e.g. MP3 or MKV.",
            ) from exc
