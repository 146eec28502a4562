"""Interactive selection models: the filterable multi-select list and yes/no dialog.

Models are terminal-free; ``lnka.runtime`` drives them with decoded keys.
"""

from .confirm import ConfirmModel, render_confirm
from .keys import DEFAULT_KEY_BINDINGS, KeyBindings
from .model import DEFAULT_MAX_VISIBLE_ITEMS, MultiSelectModel, filter_choices, initial_cursor
from .order import SelectionOrder
from .view import render_selection, visible_window

__all__ = [
    "ConfirmModel",
    "DEFAULT_KEY_BINDINGS",
    "DEFAULT_MAX_VISIBLE_ITEMS",
    "KeyBindings",
    "MultiSelectModel",
    "SelectionOrder",
    "filter_choices",
    "initial_cursor",
    "render_confirm",
    "render_selection",
    "visible_window",
]
