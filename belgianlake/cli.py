"""Command-line front door for belgianlake.

Parses CLI options, configures logging, and resolves the record store path.
Then dispatches into the interactive session runtime.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import DEFAULT_LOG_PATH, load_store_path, save_theme_name
from .logging_setup import configure_logging
from .runtime import run_session
from .store import DEFAULT_STORE_FILENAME, RecordFormatError, RecordStoreError
from .ui_theme import available_theme_names
from .version import build_info

logger = logging.getLogger(__name__)


def _default_store_path() -> Path:
    """Resolve the store path used when none is given on the command line."""
    configured = load_store_path()
    if configured is not None:
        return configured
    return Path.cwd() / DEFAULT_STORE_FILENAME


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="belgianlake",
        description="Mark which files to print, one keystroke at a time.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help=f"JSON-lines record store. Defaults to ./{DEFAULT_STORE_FILENAME}.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the records and exit without entering the interactive view.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages.")
    parser.add_argument(
        "--log-format",
        choices=("text", "json"),
        default="text",
        help="Log record format.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help=f"Log file path (default: {DEFAULT_LOG_PATH}).",
    )
    parser.add_argument("--version", action="store_true", help="Print version information and exit.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the editing session.

    Store load failures are fatal: they are logged and turned into a
    ``SystemExit`` with a readable message before the terminal is touched.
    """
    args = build_parser().parse_args(argv)

    if args.version:
        print(build_info())
        return

    try:
        configure_logging(
            verbose=args.verbose,
            json_format=args.log_format == "json",
            log_path=args.log_file or DEFAULT_LOG_PATH,
        )
    except OSError as exc:
        raise SystemExit(f"Cannot open log file: {exc}") from exc

    if args.theme:
        if args.theme.strip().lower() in available_theme_names():
            save_theme_name(args.theme.strip().lower())
        else:
            logger.warning("unknown theme %r; using default", args.theme)

    path = Path(args.path) if args.path else _default_store_path()
    try:
        status = run_session(
            path,
            theme_name=args.theme,
            no_color=args.no_color,
            list_only=args.list,
        )
    except RecordFormatError as exc:
        logger.error("malformed record store: %s", exc)
        raise SystemExit(f"Error decoding records: {exc}") from exc
    except RecordStoreError as exc:
        logger.error("cannot open record store: %s", exc)
        raise SystemExit(f"Error opening file: {exc}") from exc
    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
