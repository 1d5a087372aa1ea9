"""URI protocol detection for filename matching."""

from __future__ import annotations

import re

_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.\-]*$", re.IGNORECASE)


def get_protocol(filename: str | None) -> str | None:
    """Return the lower-cased scheme of *filename*, or ``None``.

    Only the ``scheme://`` form counts as a URI; Windows drive letters
    such as ``C:\\media`` and bare ``name:tag`` strings are plain paths.
    """
    if not filename:
        return None
    index = filename.find("://")
    if index <= 0:
        return None
    scheme = filename[:index]
    if not _SCHEME_RE.match(scheme):
        return None
    return scheme.lower()
