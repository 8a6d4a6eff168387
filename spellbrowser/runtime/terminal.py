"""Raw terminal session for the browser.

The browser draws on the alternate screen with the cursor hidden and reads
keys byte by byte, so the tty is switched to raw mode for the whole session
and put back exactly as it was found.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ALT_SCREEN_ON = b"\x1b[?1049h"
ALT_SCREEN_OFF = b"\x1b[?1049l"
CURSOR_HIDE = b"\x1b[?25l"
CURSOR_SHOW = b"\x1b[?25h"


class TerminalController:
    """Switch a tty into browser mode and back."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_attrs: list | None = None

    @property
    def active(self) -> bool:
        return self._saved_attrs is not None

    def enable_tui_mode(self) -> None:
        if self.active:
            return
        self._saved_attrs = termios.tcgetattr(self.stdin_fd)
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ALT_SCREEN_ON + CURSOR_HIDE)

    def disable_tui_mode(self) -> None:
        """Undo ``enable_tui_mode``; a no-op when it never ran."""
        if self._saved_attrs is None:
            return
        os.write(self.stdout_fd, CURSOR_SHOW + ALT_SCREEN_OFF)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_attrs)
        self._saved_attrs = None

    @contextlib.contextmanager
    def raw_mode(self):
        """Run the enclosed block in browser mode, restoring the tty on any exit."""
        self.enable_tui_mode()
        try:
            yield self
        finally:
            self.disable_tui_mode()
