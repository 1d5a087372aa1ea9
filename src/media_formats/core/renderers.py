"""Renderer configurations and the process-wide default renderer.

The default renderer is installed once by the composition root (the
CLI, or the embedding application) and afterwards only read.  Code
that has a specific renderer at hand passes it explicitly instead.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from media_formats.core.identifiers import FormatIdentifier
from media_formats.core.protocols import Renderer, StoreItem
from media_formats.exceptions import RendererNotConfiguredError

if TYPE_CHECKING:
    from media_formats.core.format import FormatDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RendererConfiguration:
    """Renderer profile listing the formats it plays without transcoding."""

    name: str
    """Human-readable renderer name."""

    supported: frozenset[FormatIdentifier] = field(default_factory=frozenset)
    """Identifiers streamed natively."""

    @classmethod
    def from_identifiers(
        cls,
        name: str,
        identifiers: Iterable[FormatIdentifier],
    ) -> RendererConfiguration:
        return cls(name=name, supported=frozenset(identifiers))

    def is_compatible(
        self,
        resource: StoreItem | None,
        media_format: FormatDescriptor,
    ) -> bool:
        return media_format.get_identifier() in self.supported


# ---------------------------------------------------------------------------
# Process-wide default
# ---------------------------------------------------------------------------

_default_renderer: Renderer | None = None


def set_default_renderer(renderer: Renderer) -> None:
    """Install *renderer* as the fallback used when none is supplied."""
    global _default_renderer
    _default_renderer = renderer
    logger.debug("Default renderer set to %r", renderer)


def get_default_renderer() -> Renderer:
    """Return the installed default renderer.

    Raises
    ------
    RendererNotConfiguredError
        If :func:`set_default_renderer` has not been called.
    """
    if _default_renderer is None:
        raise RendererNotConfiguredError(
            "No default renderer is configured.",
            hint="Call set_default_renderer() at startup or pass a renderer.",
        )
    return _default_renderer


def reset_default_renderer() -> None:
    """Remove the installed default renderer."""
    global _default_renderer
    _default_renderer = None
