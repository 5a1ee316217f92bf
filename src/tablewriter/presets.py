"""
Named bundles of separator and border settings.

Example:
    from tablewriter import Table
    from tablewriter.presets import Preset, apply_preset

    table = Table()
    apply_preset(table, Preset.MARKDOWN)
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from .models import Alignment, Border
from .renderer import CENTER, COLUMN, ROW

if TYPE_CHECKING:
    from .table import Table


class Preset(Enum):
    """Table looks that can be applied in one call."""

    ASCII = "ascii"
    MARKDOWN = "markdown"
    PLAIN = "plain"


def _ascii(table: Table) -> None:
    table.set_center_separator(CENTER)
    table.set_row_separator(ROW)
    table.set_column_separator(COLUMN)
    table.set_border(True)


def _markdown(table: Table) -> None:
    """Pipe table: no top or bottom line, ``|`` at every junction."""
    table.set_center_separator(COLUMN)
    table.set_row_separator(ROW)
    table.set_column_separator(COLUMN)
    table.set_borders(Border(left=True, right=True, top=False, bottom=False))


def _plain(table: Table) -> None:
    """Whitespace-only columns."""
    table.set_center_separator("")
    table.set_row_separator("")
    table.set_column_separator("")
    table.set_border(False)
    table.set_header_line(False)
    table.set_alignment(Alignment.LEFT)


_PRESETS = {
    Preset.ASCII: _ascii,
    Preset.MARKDOWN: _markdown,
    Preset.PLAIN: _plain,
}


def apply_preset(table: Table, preset: Preset) -> None:
    """
    Apply a preset's settings to ``table``.

    Raises:
        ValueError: If ``preset`` is not a known preset
    """
    try:
        configure = _PRESETS[preset]
    except KeyError:
        raise ValueError(f"Unknown preset: {preset}") from None
    configure(table)
