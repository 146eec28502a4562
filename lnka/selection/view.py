"""Text rendering for the multi-select list.

Rendering is a pure read of ``MultiSelectModel``; nothing here mutates it.
Lines are joined with ``\\n``; the runtime converts them for raw terminals.
"""

from __future__ import annotations

from ..ui_theme import DEFAULT_THEME, UITheme
from .model import MultiSelectModel

CURSOR_MARKER = "▶"
FILTER_PROMPT = "$ "


def visible_window(total: int, cursor: int, max_rows: int) -> tuple[int, int]:
    """Return ``[start, end)`` of the rows shown so ``cursor`` stays on screen.

    The window only scrolls once the cursor passes the last row, and it is
    pulled back so it never extends past ``total``.
    """
    max_rows = max(1, max_rows)
    if total <= max_rows:
        return 0, total
    start = cursor - max_rows + 1 if cursor >= max_rows else 0
    end = start + max_rows
    if end > total:
        end = total
        start = max(0, end - max_rows)
    return start, end


def help_text(model: MultiSelectModel, start: int, end: int, total: int) -> str:
    """Build the status line: pagination counts followed by the key legend."""
    text = ""
    if total > model.max_visible_items:
        text = f"{start + 1}-{end} of {total} | "
    if model.filtering:
        return text + "type to filter | enter: exit filter | esc: abort"
    text += "space: toggle | /: filter"
    if model.selection:
        text += " | h: show all" if model.hide_unselected else " | h: linked only"
    return text + " | enter: confirm | esc: abort"


def render_selection(model: MultiSelectModel, theme: UITheme = DEFAULT_THEME) -> str:
    """Render title, filter prompt, the paginated list, and the help line."""
    if model.aborted:
        return ""

    out: list[str] = []
    if model.title:
        out.append(model.title)
        out.append("\n\n")

    if model.filtering:
        out.append(f"{theme.prompt}{FILTER_PROMPT}{theme.reset}{model.filter_text}")
        out.append(f"{theme.cursor} {theme.reset}\n\n")

    if not model.title and not model.filtering:
        out.append("\n")

    choices = model.visible_choices()
    start, end = visible_window(len(choices), model.cursor, model.max_visible_items)
    for idx in range(start, end):
        choice = choices[idx]
        marker = CURSOR_MARKER if idx == model.cursor and not model.filtering else " "
        if model.is_selected(choice):
            style, mark = theme.selected, theme.selected_mark
        else:
            style, mark = theme.unselected, theme.unselected_mark
        out.append(f"{marker} {style}{mark}{choice}{theme.reset}\n")

    out.append("\n")
    out.append(f"{theme.help}{help_text(model, start, end, len(choices))}{theme.reset}")
    return "".join(out)
