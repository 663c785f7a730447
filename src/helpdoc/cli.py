"""CLI entry and startup wiring."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .constants import APP_NAME, WARNING_PREFIX
from .errors import HelpdocError, PathMappingError, StartupValidationError
from .paths import map_path
from .service import generate_help_document

_LOG_FORMAT = "%(levelname)s: %(message)s"
_VERBOSE_LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        cwd = Path.cwd()
        output_path = _resolve_path(args.output, "--output", cwd)
        assets_dir = _resolve_path(args.assets, "--assets", cwd) if args.assets else cwd
        metadata_path = (
            _resolve_path(args.metadata, "--metadata", cwd) if args.metadata else None
        )
    except StartupValidationError as exc:
        print(f"{WARNING_PREFIX} {exc}", file=sys.stderr)
        return 1

    try:
        result = generate_help_document(
            args.module,
            output_path,
            assets_dir=assets_dir,
            metadata_path=metadata_path,
        )
    except HelpdocError as exc:
        print(f"{WARNING_PREFIX} {exc}", file=sys.stderr)
        return 1
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unexpected failure", exc_info=True)
        print(f"{WARNING_PREFIX} Unexpected: {exc}", file=sys.stderr)
        return 1

    print(
        f"Wrote help for {result.module_name} "
        f"({result.command_count} commands) to {result.output_path}"
    )
    return 0


def setup_logging(verbose: bool) -> None:
    """Send helpdoc diagnostics to stderr; DEBUG when verbose, warnings only otherwise."""
    app_logger = logging.getLogger(APP_NAME)
    for handler in app_logger.handlers[:]:
        app_logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_VERBOSE_LOG_FORMAT if verbose else _LOG_FORMAT))
    app_logger.addHandler(handler)
    app_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _resolve_path(raw: str, arg_name: str, base_dir: Path) -> Path:
    try:
        return map_path(raw, base_dir=base_dir)
    except PathMappingError as exc:
        raise StartupValidationError(f"{arg_name} path is invalid: {exc}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Render a module's command help into a static HTML page.",
    )
    parser.add_argument(
        "--module",
        required=True,
        help="Name of the module to document (importable name, or the name in --metadata).",
    )
    parser.add_argument(
        "--output",
        required=True,
        help="Path of the HTML file to write (absolute, ~, or relative to the working directory).",
    )
    parser.add_argument(
        "--metadata",
        required=False,
        help="Optional JSON file with module help, used instead of importing the module.",
    )
    parser.add_argument(
        "--assets",
        required=False,
        help="Directory holding the stylesheets and scripts (default: working directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print diagnostic messages to stderr.",
    )
    return parser
