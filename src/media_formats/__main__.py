"""Allow ``python -m media_formats`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m media_formats`` behaves identically to the
``media-formats`` console script.
"""

from __future__ import annotations

from media_formats.cli.app import cli

if __name__ == "__main__":
    cli()
