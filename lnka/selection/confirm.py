"""Yes/no confirmation dialog model and its rendering."""

from __future__ import annotations

import logging

from ..ui_theme import DEFAULT_THEME, UITheme
from .keys import KeyComboBinding, KeyComboRegistry
from .model import ABORTED, CONFIRMED

logger = logging.getLogger(__name__)

CONFIRM_HELP = "arrows: move | enter/y/n: select | esc: abort"


class ConfirmModel:
    """Two-choice dialog; defaults to "yes"."""

    def __init__(self, message: str, default: bool = True) -> None:
        self.message = message
        self.choice = bool(default)
        self.outcome: str | None = None
        self._keys = KeyComboRegistry().register_bindings(
            KeyComboBinding(("ESC", "CTRL_C"), self._abort),
            KeyComboBinding(("ENTER",), self._finish),
            KeyComboBinding(("LEFT",), lambda: self._highlight(True)),
            KeyComboBinding(("RIGHT",), lambda: self._highlight(False)),
            KeyComboBinding(("y", "Y"), lambda: self._finish(True)),
            KeyComboBinding(("n", "N"), lambda: self._finish(False)),
        )

    @property
    def done(self) -> bool:
        return self.outcome is not None

    @property
    def aborted(self) -> bool:
        return self.outcome == ABORTED

    def handle_key(self, key: str) -> bool:
        """Apply one key token; unknown keys are ignored."""
        if not self.done:
            self._keys.dispatch(key)
            logger.debug("confirm key=%r choice=%s outcome=%s", key, self.choice, self.outcome)
        return self.done

    def _abort(self) -> None:
        self.outcome = ABORTED

    def _highlight(self, choice: bool) -> None:
        self.choice = choice

    def _finish(self, choice: bool | None = None) -> None:
        if choice is not None:
            self.choice = choice
        self.outcome = CONFIRMED


def render_confirm(model: ConfirmModel, theme: UITheme = DEFAULT_THEME) -> str:
    """Render the message, both buttons with the active one styled, and help."""
    if model.aborted:
        return ""
    yes = "[ Yes ]"
    no = "[ No ]"
    if model.choice:
        yes = f"{theme.prompt}{yes}{theme.reset}" if theme.prompt else f"> {yes}"
    else:
        no = f"{theme.prompt}{no}{theme.reset}" if theme.prompt else f"> {no}"
    return f"{model.message}\n\n{yes}  {no}\n\n{theme.help}{CONFIRM_HELP}{theme.reset}"
