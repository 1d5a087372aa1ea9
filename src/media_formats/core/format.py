"""Abstract format descriptor — extension matching and classification.

A :class:`FormatDescriptor` subclass describes one known media format.
Its immutable configuration (identifier, supported extensions, icon,
category) lives in class attributes; each instance carries a small
mutable state record:

* ``type`` — the category, assignable once through :meth:`set_type`.
* ``secondary_format`` — a non-owning link to an alternate format.
* ``matched_extension`` — the extension recorded by the last successful
  :meth:`FormatDescriptor.match` call.

Concurrency
-----------
``match`` followed by ``skip`` is a read-after-write on the same
instance.  Callers sharing one instance across threads should use the
pure :meth:`FormatDescriptor.find_extension` and :func:`skip_extension`
pair, or work on a :meth:`FormatDescriptor.duplicate`.
"""

from __future__ import annotations

import copy
import logging
import re
from abc import ABC, abstractmethod
from typing import ClassVar

from media_formats.core import type_flags
from media_formats.core.identifiers import FormatIdentifier
from media_formats.core.mime import default_mime_type
from media_formats.core.protocols import Renderer, StoreItem
from media_formats.core.renderers import get_default_renderer
from media_formats.core.type_flags import TypeFlags
from media_formats.exceptions import FormatDuplicationError
from media_formats.utils.uri import get_protocol

logger = logging.getLogger(__name__)

_GROUP_SEPARATOR = re.compile(r",\s*")

SKIP_ALL: str = "*"
"""Extension group that skips every format unconditionally."""


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

def skip_extension(matched_extension: str | None, *extension_groups: str | None) -> bool:
    """Return whether *matched_extension* appears in any extension group.

    Each group is a comma-separated list such as ``"mp4, mkv"``.
    ``None`` groups are ignored and a literal ``"*"`` group matches
    unconditionally, even when nothing has been matched yet.
    """
    for group in extension_groups:
        if group is None:
            continue
        if group == SKIP_ALL:
            return True
        if matched_extension is None:
            continue
        for extension in _GROUP_SEPARATOR.split(group):
            if extension.strip() and extension.lower() == matched_extension.lower():
                return True
    return False


# ---------------------------------------------------------------------------
# Descriptor base class
# ---------------------------------------------------------------------------

class FormatDescriptor(ABC):
    """Known information about a single media format.

    Subclasses declare :attr:`identifier` and implement
    :meth:`transcodable`; everything else has a working default.
    """

    identifier: ClassVar[FormatIdentifier]
    """Fine-grained tag for this variant."""

    supported_extensions: ClassVar[tuple[str, ...]] = ()
    """Lower-case extensions without the dot.  Empty disables matching."""

    icon: ClassVar[str | None] = None
    """Static icon resource for this variant."""

    default_type: ClassVar[TypeFlags] = TypeFlags.UNSET
    """Category assigned at construction."""

    def __init__(self) -> None:
        self._type: TypeFlags = TypeFlags(self.default_type)
        self._type_assigned: bool = self._type != TypeFlags.UNSET
        self._secondary_format: FormatDescriptor | None = None
        self._matched_extension: str | None = None

    # ------------------------------------------------------------------
    # Abstract contract
    # ------------------------------------------------------------------

    @abstractmethod
    def transcodable(self) -> bool:
        """Return whether media in this format can be transcoded."""

    # ------------------------------------------------------------------
    # Static configuration accessors
    # ------------------------------------------------------------------

    def get_identifier(self) -> FormatIdentifier:
        return self.identifier

    def get_supported_extensions(self) -> tuple[str, ...]:
        return self.supported_extensions

    def get_icon(self) -> str | None:
        return self.icon

    def mime_type(self) -> str:
        """Return the default MIME type for this format's category."""
        return default_mime_type(self._type)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def get_type(self) -> TypeFlags:
        return self._type

    def set_type(self, value: int) -> None:
        """Assign the category unless one is already established.

        Assignment only happens while no category has been assigned yet,
        including an explicit UNSET, or while the current category carries
        the UNKNOWN bit; afterwards the call is a no-op.

        Raises
        ------
        ValueError
            If *value* is negative.
        """
        if int(value) < 0:
            raise ValueError(f"Type mask must not be negative: {value}")
        if self._type_assigned and not self.is_unknown():
            logger.debug(
                "Ignoring re-classification of %s from %s to %s",
                self, type_flags.get_string_type(self._type),
                type_flags.get_string_type(value),
            )
            return
        self._type = TypeFlags(value)
        self._type_assigned = True

    def is_audio(self) -> bool:
        return type_flags.is_audio(self._type)

    def is_image(self) -> bool:
        return type_flags.is_image(self._type)

    def is_video(self) -> bool:
        return type_flags.is_video(self._type)

    def is_unknown(self) -> bool:
        return type_flags.is_unknown(self._type)

    def is_playlist(self) -> bool:
        return type_flags.is_playlist(self._type)

    def is_iso(self) -> bool:
        return type_flags.is_iso(self._type)

    def is_subtitle(self) -> bool:
        return type_flags.is_subtitle(self._type)

    # ------------------------------------------------------------------
    # Secondary format
    # ------------------------------------------------------------------

    def get_secondary_format(self) -> FormatDescriptor | None:
        return self._secondary_format

    def set_secondary_format(self, secondary: FormatDescriptor | None) -> None:
        self._secondary_format = secondary

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def get_matched_extension(self) -> str | None:
        """Return the extension or protocol recorded by :meth:`match`."""
        return self._matched_extension

    def set_matched_extension(self, extension: str | None) -> None:
        self._matched_extension = extension

    def find_extension(self, filename: str | None) -> str | None:
        """Return the supported extension that *filename* ends with.

        Pure counterpart of :meth:`match`: instance state is untouched.
        URIs never match by extension, even when the path ends in a
        supported one.
        """
        if filename is None:
            return None
        extensions = self.get_supported_extensions()
        if not extensions:
            return None

        lowered = filename.lower()
        if get_protocol(lowered) is not None:
            return None

        for extension in extensions:
            ext = extension.lower()
            if lowered.endswith("." + ext):
                return ext
        return None

    def match(self, filename: str | None) -> bool:
        """Return whether this format matches *filename*.

        On success the matched extension is recorded so that a
        following :meth:`skip` call can consult it.
        """
        extension = self.find_extension(filename)
        if extension is None:
            return False
        self.set_matched_extension(extension)
        return True

    def skip(self, *extension_groups: str | None) -> bool:
        """Return whether the last matched extension is in any group."""
        return skip_extension(self._matched_extension, *extension_groups)

    # ------------------------------------------------------------------
    # Renderer compatibility
    # ------------------------------------------------------------------

    def is_compatible(
        self,
        resource: StoreItem | None,
        renderer: Renderer | None = None,
    ) -> bool:
        """Return whether *renderer* streams *resource* without transcoding.

        The decision belongs to the renderer; when none is given the
        process default renderer decides.

        Raises
        ------
        RendererNotConfiguredError
            If *renderer* is ``None`` and no default is installed.
        """
        if renderer is None:
            renderer = get_default_renderer()
            logger.debug("Using default renderer %r for %s", renderer, self)
        return renderer.is_compatible(resource, self)

    # ------------------------------------------------------------------
    # Duplication
    # ------------------------------------------------------------------

    def duplicate(self) -> FormatDescriptor:
        """Return a shallow copy with its own matched-extension slot.

        The copy shares the secondary format reference.

        Raises
        ------
        FormatDuplicationError
            If the object cannot be copied.
        """
        try:
            return copy.copy(self)
        except Exception as exc:
            logger.exception("Failed to duplicate format %s", self)
            raise FormatDuplicationError(
                f"Could not duplicate format {self}: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} "
            f"type={type_flags.get_string_type(self._type)} "
            f"matched={self._matched_extension!r}>"
        )

    @property
    def type(self) -> TypeFlags:
        return self._type
