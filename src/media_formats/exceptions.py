"""Custom exception hierarchy for media-formats.

All exceptions that cross layer boundaries must inherit from
:class:`MediaFormatsError`.  Matching, skip checks and flag predicates
are total and never raise; the classes below cover the few genuinely
fallible paths.

Hierarchy
---------
MediaFormatsError
├── FormatDuplicationError
├── UnknownFormatError
├── UnknownCoverSupplierError
├── RendererNotConfiguredError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations


class MediaFormatsError(Exception):
    """Base exception for all media-formats errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Format descriptors ----------------------------------------------------

class FormatDuplicationError(MediaFormatsError):
    """Raised when a format descriptor cannot be copied."""


class UnknownFormatError(MediaFormatsError):
    """Raised when a format identifier name or variant cannot be resolved."""


# --- Cover suppliers -------------------------------------------------------

class UnknownCoverSupplierError(MediaFormatsError):
    """Raised when a cover supplier carries an unmapped integer code."""


# --- Renderers -------------------------------------------------------------

class RendererNotConfiguredError(MediaFormatsError):
    """Raised when no default renderer has been installed at startup."""


# --- Environment / configuration -------------------------------------------

class ConfigurationError(MediaFormatsError):
    """Raised when environment configuration holds an invalid value."""


class EnvironmentError(MediaFormatsError):
    """Raised when an optional runtime dependency is not available."""
