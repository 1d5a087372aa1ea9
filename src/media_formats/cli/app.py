"""CLI application entry point and command routing for media-formats.

This module is the **sole error boundary** for the entire application.
It catches :class:`~media_formats.exceptions.MediaFormatsError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

It is also the composition root: settings are read once, logging is
configured once and the default renderer is installed once, before any
command runs.

Commands
--------
* ``media-formats match FILENAME --format ID [--skip GROUP ...]``
* ``media-formats compatible FILENAME --format ID``
* ``media-formats types``
* ``media-formats cover-supplier VALUE``
"""

from __future__ import annotations

import argparse
import logging
import sys

from media_formats.cli import exit_codes
from media_formats.cli.console import console
from media_formats.config import Settings, load_settings
from media_formats.exceptions import MediaFormatsError
from media_formats.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="media-formats",
        description="Classify media filenames by known format.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging (overrides MEDIA_FORMATS_LOG_LEVEL).",
    )

    commands = parser.add_subparsers(dest="command")

    match_cmd = commands.add_parser(
        "match", help="Match a filename against one format.",
    )
    match_cmd.add_argument("filename", help="Filename or URI to match.")
    match_cmd.add_argument(
        "-f", "--format", required=True, dest="format_name",
        help="Format identifier, e.g. MP3 or MKV.",
    )
    match_cmd.add_argument(
        "-s", "--skip", action="append", default=[], dest="skip_groups",
        metavar="GROUP",
        help="Comma-separated extensions to skip; '*' skips everything.",
    )

    compatible_cmd = commands.add_parser(
        "compatible", help="Ask the default renderer about native playback.",
    )
    compatible_cmd.add_argument("filename", help="Resource to check.")
    compatible_cmd.add_argument(
        "-f", "--format", required=True, dest="format_name",
        help="Format identifier, e.g. MP3 or MKV.",
    )

    commands.add_parser("types", help="List media type flags.")

    cover_cmd = commands.add_parser(
        "cover-supplier", help="Parse a cover supplier setting.",
    )
    cover_cmd.add_argument("value", help="Setting value, e.g. 'coverartarchive'.")

    return parser


# ---------------------------------------------------------------------------
# Composition root
# ---------------------------------------------------------------------------

def _setup_logging(settings: Settings, *, verbose: bool) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level_value,
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _install_default_renderer(settings: Settings) -> None:
    from media_formats.core.renderers import (
        RendererConfiguration,
        set_default_renderer,
    )

    set_default_renderer(
        RendererConfiguration.from_identifiers(
            settings.renderer_name,
            settings.renderer_formats,
        ),
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_match(filename: str, format_name: str, skip_groups: list[str]) -> int:
    """Match *filename* and report the outcome."""
    from media_formats.cli.tables import render_table
    from media_formats.core.formats import lookup_variant
    from media_formats.core.identifiers import FormatIdentifier
    from media_formats.core.type_flags import get_string_type

    media_format = lookup_variant(FormatIdentifier.from_name(format_name))
    matched = media_format.match(filename)
    logger.info("Matched %r against %s: %s", filename, media_format, matched)

    rows = [
        ("Filename", filename),
        ("Format", str(media_format)),
        ("Matched", "yes" if matched else "no"),
        ("Extension", media_format.get_matched_extension() or "-"),
        ("Type", get_string_type(media_format.get_type())),
        ("MIME type", media_format.mime_type()),
        ("Transcodable", "yes" if media_format.transcodable() else "no"),
    ]
    if skip_groups:
        rows.append(("Skip", "yes" if media_format.skip(*skip_groups) else "no"))

    render_table("Format match", ("Field", "Value"), rows)
    return exit_codes.SUCCESS if matched else exit_codes.NO_MATCH


def _handle_compatible(filename: str, format_name: str) -> int:
    """Report whether the default renderer streams *filename* natively."""
    from media_formats.core.formats import lookup_variant
    from media_formats.core.identifiers import FormatIdentifier
    from media_formats.core.renderers import get_default_renderer

    media_format = lookup_variant(FormatIdentifier.from_name(format_name))
    renderer = get_default_renderer()
    if media_format.is_compatible(filename, renderer):
        console.print(f"{filename}: streamed natively as {media_format}")
    else:
        console.print(f"{filename}: {media_format} needs transcoding")
    return exit_codes.SUCCESS


def _handle_types() -> int:
    """List every type flag with its label and default MIME type."""
    from media_formats.cli.tables import render_table
    from media_formats.core.mime import default_mime_type
    from media_formats.core.type_flags import TypeFlags, get_string_type

    rows = [
        (flag.name or "", str(int(flag)), get_string_type(flag), default_mime_type(flag))
        for flag in TypeFlags.__members__.values()
    ]
    render_table("Media type flags", ("Flag", "Value", "Label", "MIME type"), rows)
    return exit_codes.SUCCESS


def _handle_cover_supplier(value: str) -> int:
    """Parse *value* as a cover supplier setting."""
    from media_formats.core.cover_supplier import to_cover_supplier

    supplier = to_cover_supplier(value)
    console.print(f"{supplier} ({supplier.to_integer()})")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the media-formats CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    settings = load_settings()
    _setup_logging(settings, verbose=args.verbose)
    _install_default_renderer(settings)

    if args.command == "match":
        return _handle_match(args.filename, args.format_name, args.skip_groups)
    if args.command == "compatible":
        return _handle_compatible(args.filename, args.format_name)
    if args.command == "types":
        return _handle_types()
    return _handle_cover_supplier(args.value)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except MediaFormatsError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
