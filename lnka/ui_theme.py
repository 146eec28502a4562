"""ANSI palettes for the selection and confirmation views.

``PLAIN_THEME`` carries empty codes so rendered text contains no escapes,
which is what ``--no-color`` and most tests use.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI codes used by the renderers."""

    name: str
    reset: str
    prompt: str
    cursor: str
    selected: str
    unselected: str
    help: str
    selected_mark: str = ""
    unselected_mark: str = ""


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    prompt="\033[1;32m",
    cursor="\033[7m",
    selected="\033[0m",
    unselected="\033[2;90m",
    help="\033[90m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    prompt="",
    cursor="",
    selected="",
    unselected="",
    help="",
    selected_mark="[x] ",
    unselected_mark="[ ] ",
)


def theme_for(no_color: bool) -> UITheme:
    """Return the palette matching the ``--no-color`` preference."""
    return PLAIN_THEME if no_color else DEFAULT_THEME
