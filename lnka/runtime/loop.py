"""Blocking read-evaluate-render loop shared by the interactive prompts.

Each iteration draws the current frame, reads one key, folds terminal
Enter variants into a single ``ENTER`` token, and hands it to the model.
The loop ends as soon as the model reports it is done.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from ..input import read_key
from ..terminal import TerminalController

logger = logging.getLogger(__name__)


class InteractiveModel(Protocol):
    """Anything the loop can drive: consumes key tokens until done."""

    def handle_key(self, key: str) -> bool: ...


@dataclass
class KeyNormalizer:
    """Fold ``ENTER_CR``/``ENTER_LF`` into ``ENTER``.

    A CR immediately followed by LF counts as one Enter press.
    """

    skip_next_lf: bool = False

    def normalize(self, key: str) -> str | None:
        """Return the token to dispatch, or ``None`` to drop ``key``."""
        if self.skip_next_lf and key == "ENTER_LF":
            self.skip_next_lf = False
            return None
        self.skip_next_lf = key == "ENTER_CR"
        if key in {"ENTER_CR", "ENTER_LF"}:
            return "ENTER"
        return key


def run_model_loop(
    model: InteractiveModel,
    render: Callable[[], str],
    terminal: TerminalController,
    stdin_fd: int,
    read_key_fn: Callable[[int], str] = read_key,
) -> None:
    """Drive ``model`` with terminal keys until it finishes.

    End of input is treated as ``CTRL_C`` so a closed stdin aborts the
    prompt instead of spinning.
    """
    normalizer = KeyNormalizer()
    with terminal.raw_mode():
        while True:
            terminal.draw(render())
            try:
                key = read_key_fn(stdin_fd)
            except KeyboardInterrupt:
                key = "CTRL_C"
            if key == "":
                logger.debug("end of input, aborting prompt")
                key = "CTRL_C"
            token = normalizer.normalize(key)
            if token is None:
                continue
            if model.handle_key(token):
                break
