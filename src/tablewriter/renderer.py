"""
Grid renderer: turns resolved table dimensions into finished text lines.

Rendering walks a fixed sequence of regions, each of which may be skipped
depending on configuration:

    TOP_BORDER -> HEADER -> HEADER_RULE -> BODY_ROWS
        -> BOTTOM_OR_ROW_RULES -> FOOTER -> CAPTION

Example output (default configuration, with a footer):

    +----------+-------------+-------+---------+
    |   DATE   | DESCRIPTION |  CV2  | AMOUNT  |
    +----------+-------------+-------+---------+
    | 1/1/2014 | Domain name |  2233 | $10.98  |
    +----------+-------------+-------+---------+
    |                          TOTAL | $146 93 |
    +----------+-------------+-------+---------+

The renderer never mutates the wrapped cells it is given, so rendering the
same inputs twice yields identical lines.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

from .formatting import SPACE, AlignmentClassifier, classify_numeric, format_label, pad
from .models import Alignment, Border
from .width import display_width
from .wrap import wrap_text

DEFAULT_MAX_COLUMN_WIDTH = 30
DEFAULT_CAPTION = "Table caption."

CENTER = "+"
ROW = "-"
COLUMN = "|"
NEWLINE = "\n"

WrappedCell = Sequence[str]
WrappedRow = Sequence[WrappedCell]


@dataclass
class RenderConfig:
    """
    Rendering configuration owned by a table.

    Attributes:
        center: Glyph at line junctions
        row: Glyph repeated along horizontal lines
        column: Glyph between cells and on the left/right edges
        newline: String written after every line
        border: Which outer edges are drawn
        alignment: Body cell alignment
        header_alignment: Header label alignment (DEFAULT centers)
        footer_alignment: Footer label alignment (DEFAULT centers)
        classifier: Chooses body alignment when ``alignment`` is DEFAULT
        auto_format: Uppercase header and footer labels
        auto_wrap: Word-wrap cells to the column width
        max_width: Width cap applied to raw cell text
        row_line: Draw a line after every body row
        header_line: Draw a line after the header
        caption: Print the caption under the table
        caption_text: Caption text
    """

    center: str = CENTER
    row: str = ROW
    column: str = COLUMN
    newline: str = NEWLINE
    border: Border = field(default_factory=Border)
    alignment: Alignment = Alignment.DEFAULT
    header_alignment: Alignment = Alignment.DEFAULT
    footer_alignment: Alignment = Alignment.DEFAULT
    classifier: AlignmentClassifier = classify_numeric
    auto_format: bool = True
    auto_wrap: bool = True
    max_width: int = DEFAULT_MAX_COLUMN_WIDTH
    row_line: bool = False
    header_line: bool = True
    caption: bool = False
    caption_text: str = DEFAULT_CAPTION


class RenderRegion(Enum):
    """Regions of a rendered table, in output order."""

    TOP_BORDER = "top_border"
    HEADER = "header"
    HEADER_RULE = "header_rule"
    BODY_ROWS = "body_rows"
    BOTTOM_OR_ROW_RULES = "bottom_or_row_rules"
    FOOTER = "footer"
    CAPTION = "caption"


def _blank(glyph: str) -> str:
    """Blank padding as wide as ``glyph``."""
    return SPACE * display_width(glyph)


def _cell_line(cell: WrappedCell | None, index: int) -> str:
    if cell is None or index >= len(cell):
        return ""
    return cell[index]


class GridRenderer:
    """
    Compose the lines of a table from frozen dimensions.

    Args:
        config: Rendering configuration
        widths: Resolved width of each column
        header: Wrapped header cells
        rows: Wrapped body rows
        row_heights: Resolved height of each body row, by row index
        footer: Wrapped footer cells
        footer_text: Raw footer cell text, used to find empty footer cells
    """

    def __init__(
        self,
        config: RenderConfig,
        widths: Sequence[int],
        header: Sequence[WrappedCell],
        rows: Sequence[WrappedRow],
        row_heights: dict[int, int],
        footer: Sequence[WrappedCell],
        footer_text: Sequence[str],
    ) -> None:
        self._config = config
        self._widths = list(widths)
        self._header = header
        self._rows = rows
        self._row_heights = row_heights
        self._footer = footer
        self._footer_text = footer_text

        self._regions: dict[RenderRegion, Callable[[], Iterator[str]]] = {
            RenderRegion.TOP_BORDER: self._top_border,
            RenderRegion.HEADER: self._header_block,
            RenderRegion.HEADER_RULE: self._header_rule,
            RenderRegion.BODY_ROWS: self._body_rows,
            RenderRegion.BOTTOM_OR_ROW_RULES: self._bottom,
            RenderRegion.FOOTER: self._footer_block,
            RenderRegion.CAPTION: self._caption,
        }

    @property
    def table_width(self) -> int:
        """Display width of a full table line with single-column glyphs."""
        return sum(self._widths) + 3 * len(self._widths) + 1

    def lines(self) -> Iterator[str]:
        """Yield every finished line, region by region."""
        for region in RenderRegion:
            yield from self._regions[region]()

    # ------------------------------------------------------------------
    # Building blocks
    # ------------------------------------------------------------------

    def border_line(self) -> str:
        """A horizontal line spanning every column."""
        config = self._config
        return config.center + "".join(
            config.row * (width + 2) + config.center for width in self._widths
        )

    def _left_edge(self) -> str:
        config = self._config
        return config.column if config.border.left else _blank(config.column)

    def _right_edge(self) -> str:
        config = self._config
        return config.column if config.border.right else _blank(config.column)

    def _compose(self, cells: Sequence[str], alignment: Alignment) -> str:
        """Join one line of padded cells with edges and column separators."""
        config = self._config
        padded = [
            f"{SPACE}{pad(text, width, alignment, config.classifier)}{SPACE}"
            for text, width in zip(cells, self._widths)
        ]
        return self._left_edge() + config.column.join(padded) + self._right_edge()

    def _label(self, text: str) -> str:
        return format_label(text) if self._config.auto_format else text

    @staticmethod
    def _label_alignment(alignment: Alignment) -> Alignment:
        return Alignment.CENTER if alignment is Alignment.DEFAULT else alignment

    def _label_lines(self, cells: Sequence[WrappedCell]) -> Iterator[list[str]]:
        height = max((len(cell) for cell in cells), default=0)
        for index in range(height):
            yield [
                self._label(_cell_line(cells[column] if column < len(cells) else None, index))
                for column in range(len(self._widths))
            ]

    # ------------------------------------------------------------------
    # Regions
    # ------------------------------------------------------------------

    def _top_border(self) -> Iterator[str]:
        if self._config.border.top and self._widths:
            yield self.border_line()

    def _header_block(self) -> Iterator[str]:
        alignment = self._label_alignment(self._config.header_alignment)
        for cells in self._label_lines(self._header):
            yield self._compose(cells, alignment)

    def _header_rule(self) -> Iterator[str]:
        if self._header and self._config.header_line and self._widths:
            yield self.border_line()

    def _body_rows(self) -> Iterator[str]:
        config = self._config
        columns = len(self._widths)
        for index, row in enumerate(self._rows):
            height = self._row_heights.get(index, 0)
            if height == 0:
                continue
            for line in range(height):
                cells = [
                    _cell_line(row[column] if column < len(row) else None, line)
                    for column in range(columns)
                ]
                yield self._compose(cells, config.alignment)
            if config.row_line:
                yield self.border_line()

    def _bottom(self) -> Iterator[str]:
        config = self._config
        if config.border.bottom and not config.row_line and self._widths:
            yield self.border_line()

    def _footer_block(self) -> Iterator[str]:
        if not self._footer:
            return
        config = self._config

        if not config.border.bottom:
            yield self.border_line()

        alignment = self._label_alignment(config.footer_alignment)
        last = len(self._widths) - 1
        for cells in self._label_lines(self._footer):
            parts = [self._left_edge()]
            for column, (text, width) in enumerate(zip(cells, self._widths)):
                if self._footer_empty(column):
                    separator = _blank(config.column)
                elif column == last:
                    separator = self._right_edge()
                else:
                    separator = config.column
                parts.append(f"{SPACE}{pad(text, width, alignment)}{SPACE}{separator}")
            yield "".join(parts)

        yield self._footer_rule()

    def _footer_empty(self, column: int) -> bool:
        return column >= len(self._footer_text) or not self._footer_text[column]

    def _footer_rule(self) -> str:
        """
        Line under the footer that boxes only the populated footer cells.

        Empty footer cells are left blank until the first populated cell has
        been reached. A blank junction is restored to the center glyph when
        the next footer cell is populated, so the rule starts exactly at the
        first populated cell. With a left border the rule is a full line.
        """
        config = self._config
        border = config.border
        last = len(self._widths) - 1
        has_printed = False
        parts: list[str] = []

        for column, width in enumerate(self._widths):
            empty = self._footer_empty(column)
            if not empty:
                has_printed = True

            run = config.row
            center = config.center
            blank_center = empty and not border.right
            if blank_center:
                center = _blank(config.center)

            if column == 0:
                parts.append(center)

            if empty:
                run = _blank(config.row)
            if has_printed or border.left:
                run = config.row
                center = config.center
                blank_center = False

            if blank_center and column < last and not self._footer_empty(column + 1):
                center = config.center

            parts.append(run * (width + 2) + center)

        return "".join(parts)

    def _caption(self) -> Iterator[str]:
        config = self._config
        if not config.caption:
            return
        limit = self.table_width if self._widths else display_width(config.caption_text)
        yield from wrap_text(config.caption_text, limit)
