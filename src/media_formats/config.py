"""Runtime settings read from environment variables.

Only the CLI composition root reads settings; library code receives
what it needs as arguments.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from media_formats.core.identifiers import FormatIdentifier
from media_formats.exceptions import ConfigurationError, UnknownFormatError

LOG_LEVEL_VAR = "MEDIA_FORMATS_LOG_LEVEL"
RENDERER_NAME_VAR = "MEDIA_FORMATS_RENDERER_NAME"
RENDERER_FORMATS_VAR = "MEDIA_FORMATS_RENDERER_FORMATS"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_RENDERER_NAME = "Generic DLNA renderer"
DEFAULT_RENDERER_FORMATS: tuple[FormatIdentifier, ...] = (
    FormatIdentifier.MP3,
    FormatIdentifier.FLAC,
    FormatIdentifier.JPG,
    FormatIdentifier.MPG,
    FormatIdentifier.MKV,
    FormatIdentifier.SUBRIP,
)

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved runtime settings."""

    log_level: str
    """Standard logging level name."""

    renderer_name: str
    """Name of the default renderer profile."""

    renderer_formats: tuple[FormatIdentifier, ...]
    """Formats the default renderer streams natively."""

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in _LEVELS:
        raise ConfigurationError(
            f"Invalid log level in {LOG_LEVEL_VAR}: {raw}",
            hint=f"Use one of: {', '.join(_LEVELS)}",
        )
    return level


def _parse_formats(raw: str) -> tuple[FormatIdentifier, ...]:
    names = [name for name in raw.split(",") if name.strip()]
    try:
        return tuple(FormatIdentifier.from_name(name) for name in names)
    except UnknownFormatError as exc:
        raise ConfigurationError(
            f"Invalid format in {RENDERER_FORMATS_VAR}: {exc}",
            hint=exc.hint,
        ) from exc


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (default ``os.environ``).

    Raises
    ------
    ConfigurationError
        If a variable holds an invalid value.
    """
    env = os.environ if environ is None else environ

    raw_formats = env.get(RENDERER_FORMATS_VAR)
    formats = (
        _parse_formats(raw_formats)
        if raw_formats is not None
        else DEFAULT_RENDERER_FORMATS
    )

    return Settings(
        log_level=_parse_log_level(env.get(LOG_LEVEL_VAR, DEFAULT_LOG_LEVEL)),
        renderer_name=env.get(RENDERER_NAME_VAR, DEFAULT_RENDERER_NAME),
        renderer_formats=formats,
    )
