"""Shared pytest fixtures and configuration for the media-formats test suite.

Guidelines
----------
* No filesystem or network access in any test.
* Renderers are mocked at the protocol boundary.
* The process-wide default renderer is reset around every test.
* Tests must not depend on the caller's environment variables.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from media_formats.config import LOG_LEVEL_VAR, RENDERER_FORMATS_VAR, RENDERER_NAME_VAR
from media_formats.core.renderers import reset_default_renderer


@pytest.fixture(autouse=True)
def _isolate_process_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for var in (LOG_LEVEL_VAR, RENDERER_NAME_VAR, RENDERER_FORMATS_VAR):
        monkeypatch.delenv(var, raising=False)
    reset_default_renderer()
    yield
    reset_default_renderer()
