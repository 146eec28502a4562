"""Key bindings and the small dispatch table used by the interactive models.

Key tokens are the normalized strings produced by ``lnka.input.read_key``
after the loop folds CR/LF into ``"ENTER"``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyBindings:
    """Keyboard shortcuts for the multi-select list."""

    quit: tuple[str, ...] = ("ESC", "CTRL_C")
    confirm: tuple[str, ...] = ("ENTER",)
    filter: tuple[str, ...] = ("/",)
    hide_toggle: tuple[str, ...] = ("h",)
    toggle_select: tuple[str, ...] = (" ",)
    up: tuple[str, ...] = ("UP",)
    down: tuple[str, ...] = ("DOWN",)
    backspace: tuple[str, ...] = ("BACKSPACE",)


DEFAULT_KEY_BINDINGS = KeyBindings()


@dataclass(frozen=True)
class KeyComboBinding:
    """One or more key tokens bound to a single action."""

    combos: tuple[str, ...]
    handler: Callable[[], None]


class KeyComboRegistry:
    """Exact-match key table; unknown keys dispatch to nothing."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], None]] = {}

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register bindings in order; later combos overwrite earlier ones."""
        for binding in bindings:
            for combo in binding.combos:
                self._handlers[combo] = binding.handler
        return self

    def dispatch(self, key: str) -> bool:
        """Run the handler bound to ``key`` and report whether one existed."""
        handler = self._handlers.get(key)
        if handler is None:
            return False
        handler()
        return True


def is_text_key(key: str) -> bool:
    """Return whether ``key`` is a single printable character token."""
    return len(key) == 1 and key.isprintable()
