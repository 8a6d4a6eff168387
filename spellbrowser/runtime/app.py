"""Runtime bootstrap: wire channels, workers, session, and the event loop."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ..catalog.loader import load_catalog
from ..catalog.producer import CatalogProducer
from ..catalog.types import Catalog
from ..search.filtering import recompute
from ..ui_theme import UITheme
from .bridge import AsyncBridge
from .channel import Channel
from .loop import RuntimeLoopTiming, run_main_loop
from .session import Session
from .terminal import TerminalController

logger = logging.getLogger(__name__)

NOPAGER_DEFAULT_WIDTH = 40


def print_matches(catalog_path: Path, query: str, width: int, theme: UITheme, color: bool) -> None:
    """Print the rows ``query`` selects from the catalog, without the TUI."""
    catalog = load_catalog(catalog_path)
    if color:
        rows = recompute(catalog, query, width, match_start=theme.match_start, match_end=theme.match_end)
    else:
        rows = recompute(catalog, query, width, match_start="", match_end="")
    sys.stdout.write("".join(f"{row.label}\n" for row in rows))


def start_session(catalog_path: Path, theme: UITheme) -> Session:
    """Create a session and start the producer plus both listener threads."""
    session = Session(theme=theme)
    catalog_channel: Channel[Catalog] = Channel("catalog")
    status_channel: Channel[str] = Channel("status")
    AsyncBridge(catalog_channel, status_channel, session.post).start()
    CatalogProducer(catalog_path, catalog_channel, status_channel).start()
    return session


def run_browser(
    catalog_path: Path,
    theme: UITheme,
    *,
    nopager: bool = False,
    query: str = "",
    width: int | None = None,
    list_percent: float | None = None,
    color: bool | None = None,
) -> None:
    """Run the interactive browser, or print matches when not attached to a tty.

    ``color=None`` colors printed matches only when stdout is a terminal.
    """
    if nopager or not os.isatty(sys.stdin.fileno()):
        if color is None:
            color = os.isatty(sys.stdout.fileno())
        print_matches(catalog_path, query, width or NOPAGER_DEFAULT_WIDTH, theme, color)
        return

    session = start_session(catalog_path, theme)
    terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    logger.info("starting interactive session for %s", catalog_path)
    run_main_loop(session, terminal, sys.stdin.fileno(), RuntimeLoopTiming(), list_percent=list_percent)
