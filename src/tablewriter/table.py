"""
Table: the aggregate that collects rows and renders them as grid text.

Example:
    import sys
    from tablewriter import Table

    table = Table(sys.stdout)
    table.set_header(["Name", "Sign", "Rating"])
    table.append_bulk([
        ["A", "The Good", "500"],
        ["B", "The Very very Bad Man", "288"],
    ])
    table.render()

Output:
    +------+-----------------------+--------+
    | NAME |         SIGN          | RATING |
    +------+-----------------------+--------+
    | A    | The Good              |    500 |
    | B    | The Very very Bad Man |    288 |
    +------+-----------------------+--------+
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Sequence
from typing import Any, TextIO

from .dimensions import DimensionTracker
from .exceptions import OutputError
from .formatting import AlignmentClassifier, format_label
from .models import Alignment, Border
from .renderer import GridRenderer, RenderConfig
from .width import display_width
from .wrap import split_lines, wrap_text

logger = logging.getLogger(__name__)


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class Table:
    """
    A text table with a header, body rows, a footer and a caption.

    Every cell is measured and wrapped as soon as it is added, growing the
    shared column widths and row heights. Those dimensions only ever grow,
    so a wide cell appended late still widens the padding of earlier rows
    in its column. :meth:`render` lays everything out with the final
    dimensions and may be called any number of times.

    Rows may be shorter than the header (missing cells render blank) or
    longer (extra columns are added). Neither is an error.

    Args:
        out: Text sink written by :meth:`render`; defaults to ``sys.stdout``
            at render time
    """

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self._config = RenderConfig()
        self._tracker = DimensionTracker(self._config.max_width)
        self._header: list[list[str]] = []
        self._footer: list[list[str]] = []
        self._footer_text: list[str] = []
        self._rows: list[list[list[str]]] = []

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def set_header(self, cells: Iterable[Any]) -> None:
        """Set the header labels. The header establishes the column count."""
        self._header = [self._parse_label(cell, i) for i, cell in enumerate(cells)]

    def set_footer(self, cells: Iterable[Any]) -> None:
        """
        Set the footer labels.

        Empty labels are left unboxed, so ``["", "", "Total", "$146.93"]``
        draws a rule under the last two columns only.
        """
        texts = [_cell_text(cell) for cell in cells]
        self._footer_text = texts
        self._footer = [self._parse_label(text, i) for i, text in enumerate(texts)]

    def set_caption(self, enabled: bool, text: str | None = None) -> None:
        """Turn the caption on or off, optionally replacing its text."""
        self._config.caption = enabled
        if text is not None:
            self._config.caption_text = text

    def append(self, row: Iterable[Any]) -> None:
        """Append a body row, wrapping each cell to its column."""
        index = len(self._rows)
        cells = [self._parse_cell(cell, i) for i, cell in enumerate(row)]
        if cells:
            self._tracker.observe_height(index, max(len(lines) for lines in cells))
        self._rows.append(cells)

    def append_bulk(self, rows: Iterable[Iterable[Any]]) -> None:
        """Append several body rows in order."""
        for row in rows:
            self.append(row)

    def _parse_cell(self, value: Any, column: int) -> list[str]:
        """Measure and wrap one cell, growing its column as needed."""
        text = _cell_text(value)
        if self._config.auto_wrap:
            budget = self._tracker.observe_width(column, display_width(text))
            lines = wrap_text(text, budget)
        else:
            lines = split_lines(text)
            self._tracker.observe_width(column, max(display_width(line) for line in lines))

        for line in lines:
            self._tracker.fit_line(column, display_width(line))
        return lines

    def _parse_label(self, value: Any, column: int) -> list[str]:
        """Parse a header or footer label, leaving room for its auto-formatted form."""
        lines = self._parse_cell(value, column)
        for line in lines:
            # Uppercasing can widen a label (ß -> SS)
            self._tracker.fit_line(column, display_width(format_label(line)))
        return lines

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_border(self, enabled: bool) -> None:
        """Enable or disable all four outer edges."""
        self._config.border = Border.all(enabled)

    def set_borders(self, border: Border) -> None:
        """Enable or disable each outer edge separately."""
        self._config.border = border

    def set_alignment(self, alignment: Alignment) -> None:
        self._config.alignment = alignment

    def set_header_alignment(self, alignment: Alignment) -> None:
        self._config.header_alignment = alignment

    def set_footer_alignment(self, alignment: Alignment) -> None:
        self._config.footer_alignment = alignment

    def set_alignment_classifier(self, classifier: AlignmentClassifier) -> None:
        """
        Replace the function that picks body alignment for ``Alignment.DEFAULT``.

        The classifier receives the stripped text of one cell line and
        returns LEFT, RIGHT or CENTER.
        """
        self._config.classifier = classifier

    def set_auto_format_headers(self, enabled: bool) -> None:
        """Turn uppercasing of header and footer labels on or off. Default is on."""
        self._config.auto_format = enabled

    def set_auto_wrap_text(self, enabled: bool) -> None:
        """
        Turn word wrapping on or off. Default is on.

        Applies to cells added afterwards. Without wrapping, cells only
        break on explicit newlines and columns grow to fit.
        """
        self._config.auto_wrap = enabled

    def set_column_width(self, width: int) -> None:
        """Set the width cap for cells added afterwards."""
        self._config.max_width = width
        self._tracker.max_width = width

    def set_column_separator(self, separator: str) -> None:
        self._config.column = separator

    def set_row_separator(self, separator: str) -> None:
        self._config.row = separator

    def set_center_separator(self, separator: str) -> None:
        self._config.center = separator

    def set_newline(self, newline: str) -> None:
        self._config.newline = newline

    def set_row_line(self, enabled: bool) -> None:
        """Draw a line after every body row."""
        self._config.row_line = enabled

    def set_header_line(self, enabled: bool) -> None:
        """Draw a line between the header and the body. Default is on."""
        self._config.header_line = enabled

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    @property
    def column_widths(self) -> list[int]:
        """Resolved width of every column."""
        return self._tracker.column_widths

    @property
    def row_heights(self) -> list[int]:
        """Resolved height of every body row."""
        return [self._tracker.height(index) for index in range(len(self._rows))]

    @property
    def num_columns(self) -> int:
        return self._tracker.num_columns

    @property
    def num_rows(self) -> int:
        return len(self._rows)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_lines(self) -> list[str]:
        """Lay out the table and return its lines without newlines."""
        renderer = GridRenderer(
            config=self._config,
            widths=self._tracker.column_widths,
            header=self._header,
            rows=self._rows,
            row_heights=self._tracker.row_heights,
            footer=self._footer,
            footer_text=self._footer_text,
        )
        return list(renderer.lines())

    def render(self) -> None:
        """
        Write the table to the output sink.

        Raises:
            OutputError: If the sink raises OSError while writing
        """
        out = self._out if self._out is not None else sys.stdout
        lines = self.render_lines()
        logger.debug(
            "Rendering %d line(s) for %d column(s) and %d row(s)",
            len(lines),
            self.num_columns,
            self.num_rows,
        )

        newline = self._config.newline
        written = 0
        try:
            for line in lines:
                out.write(line + newline)
                written += 1
        except OSError as e:
            raise OutputError(e, written) from e


def render_table(
    rows: Sequence[Sequence[Any]],
    header: Sequence[Any] | None = None,
    footer: Sequence[Any] | None = None,
) -> str:
    """
    Render rows with the default configuration and return the text.

    Args:
        rows: Body rows
        header: Optional header labels
        footer: Optional footer labels

    Returns:
        The rendered table, one newline-terminated line per table line
    """
    table = Table()
    if header is not None:
        table.set_header(header)
    if footer is not None:
        table.set_footer(footer)
    table.append_bulk(rows)
    return "".join(line + "\n" for line in table.render_lines())
