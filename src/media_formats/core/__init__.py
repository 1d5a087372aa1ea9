"""Core layer — format classification, matching and renderer contracts.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from media_formats.core.cover_supplier import CoverSupplier, to_cover_supplier
from media_formats.core.format import FormatDescriptor, skip_extension
from media_formats.core.identifiers import FormatIdentifier
from media_formats.core.protocols import Renderer, StoreItem
from media_formats.core.renderers import (
    RendererConfiguration,
    get_default_renderer,
    reset_default_renderer,
    set_default_renderer,
)
from media_formats.core.type_flags import NOT_DEFINED, TypeFlags, get_string_type

__all__: list[str] = [
    "NOT_DEFINED",
    "CoverSupplier",
    "FormatDescriptor",
    "FormatIdentifier",
    "Renderer",
    "RendererConfiguration",
    "StoreItem",
    "TypeFlags",
    "get_default_renderer",
    "get_string_type",
    "reset_default_renderer",
    "set_default_renderer",
    "skip_extension",
    "to_cover_supplier",
]
