"""Terminal control helpers for the interactive prompts.

Owns raw-mode lifecycle and alternate-screen switching, and writes whole
frames to the screen.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ENTER_TUI = b"\x1b[?1049h\x1b[?25l"
LEAVE_TUI = b"\x1b[?25h\x1b[?1049l"
CLEAR_AND_HOME = "\x1b[H\x1b[2J"


class TerminalController:
    """Manage terminal mode transitions for one interactive prompt."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_TUI)

    def disable_tui_mode(self) -> None:
        """Show the cursor, leave the alternate screen, restore tty state."""
        os.write(self.stdout_fd, LEAVE_TUI)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def draw(self, frame: str) -> None:
        """Replace the screen contents with ``frame``.

        Raw mode disables output post-processing, so bare newlines are
        expanded to CRLF here.
        """
        payload = CLEAR_AND_HOME + frame.replace("\r\n", "\n").replace("\n", "\r\n")
        os.write(self.stdout_fd, payload.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
