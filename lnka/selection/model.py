"""Multi-select list state machine.

``MultiSelectModel`` owns the item list, filter text, hide-unselected flag,
ordered selection, and cursor. ``handle_key`` applies one key token and
leaves the model in a consistent state; rendering lives in ``view``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..errors import EmptySelectionError
from .keys import DEFAULT_KEY_BINDINGS, KeyBindings, KeyComboBinding, KeyComboRegistry, is_text_key
from .order import SelectionOrder

logger = logging.getLogger(__name__)

DEFAULT_MAX_VISIBLE_ITEMS = 15

CONFIRMED = "confirmed"
ABORTED = "aborted"


def filter_choices(choices: Sequence[str], text: str) -> list[str]:
    """Return ``choices`` containing ``text`` case-insensitively, order kept."""
    if not text:
        return list(choices)
    needle = text.casefold()
    return [choice for choice in choices if needle in choice.casefold()]


def initial_cursor(choices: Sequence[str], enabled: Sequence[str]) -> int:
    """Index of the first enabled name within ``choices``, else ``0``."""
    if not enabled:
        return 0
    try:
        return list(choices).index(enabled[0])
    except ValueError:
        return 0


class MultiSelectModel:
    """Interactive multi-select list driven by key tokens."""

    def __init__(
        self,
        choices: Sequence[str],
        enabled: Sequence[str] = (),
        *,
        title: str = "",
        max_visible_items: int = DEFAULT_MAX_VISIBLE_ITEMS,
        keys: KeyBindings = DEFAULT_KEY_BINDINGS,
    ) -> None:
        if not choices:
            raise EmptySelectionError("no files available to enable")
        self.choices: list[str] = list(choices)
        self.selection = SelectionOrder(enabled)
        self.title = title
        self.max_visible_items = max(1, int(max_visible_items))
        self.filter_text = ""
        self.filtering = False
        self.hide_unselected = False
        self.outcome: str | None = None
        self._filtered: list[str] = self.choices
        self._visible_cache: list[str] | None = None
        self.cursor = initial_cursor(self.choices, list(enabled))

        self._browse_keys = KeyComboRegistry().register_bindings(
            KeyComboBinding(keys.quit, self._abort),
            KeyComboBinding(keys.confirm, self._confirm),
            KeyComboBinding(keys.filter, self._start_filtering),
            KeyComboBinding(keys.up, self._move_up),
            KeyComboBinding(keys.down, self._move_down),
            KeyComboBinding(keys.toggle_select, self._toggle_at_cursor),
            KeyComboBinding(keys.hide_toggle, self._toggle_hide_unselected),
        )
        self._filter_keys = KeyComboRegistry().register_bindings(
            KeyComboBinding(keys.quit, self._abort),
            KeyComboBinding(keys.confirm, self._stop_filtering),
            KeyComboBinding(keys.backspace, self._delete_filter_char),
        )

    # -- queries -----------------------------------------------------------

    @property
    def done(self) -> bool:
        return self.outcome is not None

    @property
    def aborted(self) -> bool:
        return self.outcome == ABORTED

    @property
    def confirmed(self) -> bool:
        return self.outcome == CONFIRMED

    def is_selected(self, name: str) -> bool:
        return name in self.selection

    def selected_names(self) -> list[str]:
        """Return selected names in the order they were selected."""
        return self.selection.names()

    def visible_choices(self) -> list[str]:
        """Return the filtered list, narrowed to selected names in hide mode.

        The result is cached until the next mutation or key event.
        """
        if self._visible_cache is None:
            base = self._filtered if self.filter_text else self.choices
            if self.hide_unselected:
                base = [choice for choice in base if choice in self.selection]
            self._visible_cache = base
        return self._visible_cache

    def current_item(self) -> str | None:
        """Return the name under the cursor, or ``None`` for an empty list."""
        visible = self.visible_choices()
        if 0 <= self.cursor < len(visible):
            return visible[self.cursor]
        return None

    # -- events ------------------------------------------------------------

    def handle_key(self, key: str) -> bool:
        """Apply one key token and return whether the model is finished.

        Keys without a binding in the current mode are ignored, except that
        printable characters extend the filter text while filtering.
        """
        self._invalidate()
        if self.done:
            return True
        registry = self._filter_keys if self.filtering else self._browse_keys
        if not registry.dispatch(key) and self.filtering and is_text_key(key):
            self._append_filter_char(key)
        logger.debug(
            "key=%r filtering=%s filter=%r hide=%s cursor=%d selected=%d",
            key,
            self.filtering,
            self.filter_text,
            self.hide_unselected,
            self.cursor,
            len(self.selection),
        )
        return self.done

    def _abort(self) -> None:
        """Finish without a result."""
        self.outcome = ABORTED

    def _confirm(self) -> None:
        """Finish and accept the current selection."""
        self.outcome = CONFIRMED

    def _start_filtering(self) -> None:
        """Enter filter mode; existing filter text stays so it can be edited."""
        self.filtering = True

    def _stop_filtering(self) -> None:
        """Leave filter mode, keeping the filter applied."""
        self.filtering = False
        self._clamp_cursor()

    def _move_up(self) -> None:
        """Move the cursor one row up, stopping at the first row."""
        if self.cursor > 0:
            self.cursor -= 1

    def _move_down(self) -> None:
        """Move the cursor one row down, stopping at the last visible row."""
        if self.cursor < len(self.visible_choices()) - 1:
            self.cursor += 1

    def _append_filter_char(self, char: str) -> None:
        """Extend the filter text with ``char``."""
        self.filter_text += char
        self._refilter()

    def _delete_filter_char(self) -> None:
        """Drop the last filter character, if any."""
        if not self.filter_text:
            return
        self.filter_text = self.filter_text[:-1]
        self._refilter()

    def _toggle_hide_unselected(self) -> None:
        """Switch between all items and selected-only; needs a selection."""
        if not self.selection:
            return
        current = self.current_item()
        self.hide_unselected = not self.hide_unselected
        self._invalidate()
        if not self._place_cursor_on(current):
            self._clamp_cursor()

    def _toggle_at_cursor(self) -> None:
        """Select or deselect the item under the cursor."""
        name = self.current_item()
        if name is None:
            return
        previous_cursor = self.cursor
        selected = self.selection.toggle(name)
        self._invalidate()
        if not selected:
            self._settle_after_deselect(name, previous_cursor)

    def _settle_after_deselect(self, name: str, previous_cursor: int) -> None:
        """Keep the cursor valid once ``name`` may have left the hide-mode list."""
        if not self.hide_unselected:
            return
        visible = self.visible_choices()
        if not visible:
            # Nothing selected is left on screen: fall back to the full list.
            self.hide_unselected = False
            self._invalidate()
            if not self._place_cursor_on(name):
                self._clamp_cursor()
            return
        self.cursor = min(previous_cursor, len(visible) - 1)

    # -- helpers -----------------------------------------------------------

    def _invalidate(self) -> None:
        """Drop the cached visible list."""
        self._visible_cache = None

    def _refilter(self) -> None:
        """Recompute filter matches and clamp the cursor."""
        self._filtered = filter_choices(self.choices, self.filter_text)
        self._invalidate()
        self._clamp_cursor()

    def _place_cursor_on(self, name: str | None) -> bool:
        """Move the cursor to ``name``; return ``False`` if it is not visible."""
        if name is None:
            return False
        try:
            self.cursor = self.visible_choices().index(name)
        except ValueError:
            return False
        return True

    def _clamp_cursor(self) -> None:
        """Pull the cursor back inside the visible list, or to 0 when empty."""
        visible = self.visible_choices()
        if not visible:
            self.cursor = 0
            return
        self.cursor = max(0, min(self.cursor, len(visible) - 1))
