"""
Rich rendering for modes.

Provides styled one-line text for a single mode and a summary table for a
set of named modes, for CLIs that show their switches in a status area.
"""
from typing import Mapping, Optional

from rich.table import Table
from rich.text import Text

from .constants import (
    BOOLEAN_LABEL,
    DESCRIPTION_SEPARATOR,
    LABEL_SEPARATOR,
    STYLE_CURRENT,
    STYLE_DESCRIPTION,
    STYLE_MUTED,
    STYLE_OFF,
    STYLE_ON,
    STYLE_OPTION,
)
from .mode import ListMode, Mode


def mode_text(mode: Mode, name: Optional[str] = None) -> Text:
    """
    Build a styled, single-line rendering of a mode.

    List modes show every label with the current one highlighted; boolean
    modes show their on/off state in colour.

    Args:
        mode: The mode to render
        name: Optional label shown before the description

    Returns:
        Styled Text object
    """
    text = Text()

    if name:
        text.append(name, style=STYLE_DESCRIPTION)
        text.append(DESCRIPTION_SEPARATOR, style=STYLE_MUTED)

    if mode.description:
        text.append(mode.description, style=STYLE_DESCRIPTION)
        text.append(DESCRIPTION_SEPARATOR, style=STYLE_MUTED)

    if isinstance(mode, ListMode):
        text.append("{", style=STYLE_MUTED)
        for index, label in enumerate(mode):
            if index:
                text.append(LABEL_SEPARATOR, style=STYLE_MUTED)
            style = STYLE_CURRENT if index == mode.current_index else STYLE_OPTION
            text.append(str(label), style=style)
        text.append("}", style=STYLE_MUTED)
        text.append(" (", style=STYLE_MUTED)
        text.append(str(mode.current), style=STYLE_CURRENT)
        text.append(")", style=STYLE_MUTED)
    else:
        text.append(BOOLEAN_LABEL, style=STYLE_OPTION)
        text.append(" (", style=STYLE_MUTED)
        text.append(mode.value, style=_boolean_style(mode))
        text.append(")", style=STYLE_MUTED)

    return text


def modes_table(modes: Mapping[str, Mode], title: Optional[str] = None) -> Table:
    """
    Build a summary table of named modes.

    Args:
        modes: Mapping of display name to mode, rendered in iteration order
        title: Optional table title

    Returns:
        Table with name, kind, value, options and description columns
    """
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Mode", style=STYLE_DESCRIPTION, no_wrap=True)
    table.add_column("Kind", style=STYLE_MUTED)
    table.add_column("Value")
    table.add_column("Options", style=STYLE_OPTION)
    table.add_column("Description")

    for name, mode in modes.items():
        if isinstance(mode, ListMode):
            value = Text(str(mode.current), style=STYLE_CURRENT)
            options = LABEL_SEPARATOR.join(str(label) for label in mode)
        else:
            value = Text(mode.value, style=_boolean_style(mode))
            options = BOOLEAN_LABEL
        table.add_row(name, mode.kind.value, value, options, mode.description or "")

    return table


def _boolean_style(mode: Mode) -> str:
    return STYLE_ON if mode.current else STYLE_OFF
