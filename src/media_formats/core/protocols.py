"""Protocols (interfaces) consumed by the core layer.

These define the contracts that neighbouring collaborators must
satisfy.  Core code depends ONLY on these protocols — never on a
particular renderer implementation — preserving the dependency
inversion principle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from media_formats.core.format import FormatDescriptor


class StoreItem(Protocol):
    """Opaque media resource handed through to renderers.

    Format descriptors never inspect the resource; any object may be
    passed.  The protocol exists so signatures document intent.
    """


class Renderer(Protocol):
    """Contract for renderer configurations.

    Any object that implements :meth:`is_compatible` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def is_compatible(
        self,
        resource: StoreItem | None,
        media_format: FormatDescriptor,
    ) -> bool:
        """Return whether *resource* in *media_format* streams natively.

        ``True`` means the renderer plays the media as-is; ``False``
        means the media server has to transcode it first.
        """
        ...  # pragma: no cover
