"""Entry points that run the selection list and confirmation dialog on a tty."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..errors import UserAbortError
from ..selection import (
    DEFAULT_MAX_VISIBLE_ITEMS,
    ConfirmModel,
    MultiSelectModel,
    render_confirm,
    render_selection,
)
from ..terminal import TerminalController
from ..ui_theme import theme_for
from .loop import InteractiveModel, run_model_loop

logger = logging.getLogger(__name__)


def _drive(
    model: InteractiveModel,
    render,
    stdin_fd: int | None,
    stdout_fd: int | None,
) -> None:
    stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
    stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
    terminal = TerminalController(stdin_fd, stdout_fd)
    run_model_loop(model, render, terminal, stdin_fd)


def run_selection(
    available: Sequence[str],
    enabled: Sequence[str] = (),
    title: str = "",
    max_visible_items: int = DEFAULT_MAX_VISIBLE_ITEMS,
    *,
    no_color: bool = False,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> list[str]:
    """Let the user pick items and return them in selection order.

    Raises ``EmptySelectionError`` when ``available`` is empty and
    ``UserAbortError`` when the user quits. Confirming with nothing selected
    returns an empty list.
    """
    model = MultiSelectModel(available, enabled, title=title, max_visible_items=max_visible_items)
    theme = theme_for(no_color)
    _drive(model, lambda: render_selection(model, theme), stdin_fd, stdout_fd)
    if model.aborted:
        raise UserAbortError()
    selected = model.selected_names()
    logger.debug("selection confirmed: %s", selected)
    return selected


def run_confirmation(
    message: str,
    *,
    no_color: bool = False,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> bool:
    """Ask a yes/no question; raises ``UserAbortError`` on quit."""
    model = ConfirmModel(message)
    theme = theme_for(no_color)
    _drive(model, lambda: render_confirm(model, theme), stdin_fd, stdout_fd)
    if model.aborted:
        raise UserAbortError()
    logger.debug("confirmation answered: %s", model.choice)
    return model.choice
