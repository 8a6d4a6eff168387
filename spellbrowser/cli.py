"""Command-line front door for spellbrowser.

Parses CLI options, resolves the catalog path and theme, and configures
logging. Then dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .catalog.loader import BUNDLED_CATALOG_PATH
from .errors import CatalogLoadError, SelectionReferenceError
from .runtime import run_browser
from .runtime.config import load_catalog_path, load_list_pane_percent, load_theme_name
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s %(levelname)s %(threadName)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def configure_logging(log_file: Path | None, verbose: bool) -> None:
    """Send package logs to ``log_file``; the terminal itself belongs to the UI."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        encoding="utf-8",
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def resolve_catalog_path(arg: str | None) -> Path:
    """Pick the catalog from the CLI argument, then config, then the bundled sample."""
    if arg is not None:
        return Path(arg).expanduser()
    configured = load_catalog_path()
    if configured is not None:
        return configured
    return BUNDLED_CATALOG_PATH


def main() -> None:
    """Parse CLI arguments and launch the spell browser."""
    parser = argparse.ArgumentParser(
        description="Search a spell catalog incrementally and read spell details in the terminal."
    )
    parser.add_argument(
        "catalog",
        nargs="?",
        default=None,
        help="Path to a JSON spell catalog. Defaults to the configured or bundled catalog.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write logs to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages (with --log-file).")
    parser.add_argument("--nopager", action="store_true", help="Print matching rows instead of starting the UI.")
    parser.add_argument("--query", default="", help="Query for --nopager output.")
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help="Label width for --nopager output (controls flag alignment).",
    )
    args = parser.parse_args()

    configure_logging(args.log_file, args.verbose)
    catalog_path = resolve_catalog_path(args.catalog)
    if not catalog_path.exists():
        raise SystemExit(f"Catalog not found: {catalog_path}")

    theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)
    try:
        run_browser(
            catalog_path,
            theme,
            nopager=args.nopager,
            query=args.query,
            width=args.width,
            list_percent=load_list_pane_percent(),
            color=False if args.no_color else None,
        )
    except CatalogLoadError as exc:
        raise SystemExit(f"Cannot load catalog: {exc}") from exc
    except SelectionReferenceError as exc:
        logging.getLogger(__name__).critical("fatal selection error: %s", exc)
        raise SystemExit(f"fatal: {exc}") from exc


if __name__ == "__main__":
    main()
