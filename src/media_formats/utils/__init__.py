"""Shared utilities — small helpers importable by any layer.

Rules
-----
* No business logic.
* No I/O.
* No imports from ``cli``.
"""

from media_formats.utils.uri import get_protocol

__all__: list[str] = ["get_protocol"]
