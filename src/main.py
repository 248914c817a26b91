# src/main.py — v1
"""CLI entry point: clear and internalize commands.

Usage:
    basset clear
    basset internalize <asset> [--kind file|block|archive|directory] [options]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from basset.logging.context import set_command_context
from basset.version import __version__

if TYPE_CHECKING:
    from basset.config.settings import Settings

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        settings = _load_settings()
        _setup_logging(settings, args.verbose)
        set_command_context(args.command)
        return args.func(args, settings)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def cli() -> None:
    """Console-script wrapper."""
    sys.exit(main())


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="basset",
        description=f"basset v{__version__}: internalize front-end assets",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- clear ---
    p_clear = subparsers.add_parser(
        "clear", help="Clear the internalized assets and the cache map",
    )
    p_clear.set_defaults(func=_cmd_clear)

    # --- internalize ---
    p_internalize = subparsers.add_parser(
        "internalize", help="Internalize a single asset",
    )
    p_internalize.add_argument("asset", help="URL, local path or block key")
    p_internalize.add_argument(
        "-k", "--kind", default="file",
        choices=["file", "block", "archive", "directory"],
        help="Asset kind (default: file)",
    )
    p_internalize.add_argument(
        "-o", "--output", default=None,
        help="Output path override (required for archive and directory)",
    )
    p_internalize.add_argument(
        "--code-file", type=Path, default=None,
        help="File holding the inline code (block kind)",
    )
    p_internalize.set_defaults(func=_cmd_internalize)

    return parser


def _cmd_clear(args: argparse.Namespace, settings: Settings) -> int:
    """Delete and recreate the asset and cache map directories."""
    from basset.api.facade import clear

    location = clear(settings)
    print(f"Cleared basset '{location}'")
    print("Done")
    return 0


def _cmd_internalize(args: argparse.Namespace, settings: Settings) -> int:
    """Internalize one asset and report its status."""
    from basset.api.facade import create_manager
    from basset.core.models import AssetKind, StatusOutcome

    kind = AssetKind(args.kind)
    kwargs: dict[str, object] = {}

    if kind in (AssetKind.ARCHIVE, AssetKind.DIRECTORY):
        if not args.output:
            logger.error("--output is required for %s assets", kind.value)
            return 1
        kwargs["output"] = args.output
    elif kind is AssetKind.BLOCK:
        if args.code_file is None or not args.code_file.is_file():
            logger.error("--code-file must point to an existing file for block assets")
            return 1
        kwargs["code"] = args.code_file.read_text(encoding="utf-8")
        kwargs["output"] = False
    else:
        kwargs["output"] = args.output or False

    with create_manager(settings) as manager:
        result = manager.internalize(kind, args.asset, **kwargs)

    print(f"{result.status.value}: {result.path} ({result.elapsed_ms:.1f} ms)")
    return 1 if result.status is StatusOutcome.INVALID else 0


def _load_settings() -> Settings:
    from basset.config.settings import load_settings

    return load_settings()


def _setup_logging(settings: Settings, verbose: bool) -> None:
    """Configure logging for CLI usage."""
    from basset.logging.logger import setup_logging

    level = "DEBUG" if verbose else settings.log_level
    setup_logging(
        level=level,
        log_format=settings.log_format,
        log_file=str(settings.log_file) if settings.log_file else None,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )
