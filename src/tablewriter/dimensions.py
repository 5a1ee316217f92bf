"""Monotonic column width and row height tracking."""

import logging

logger = logging.getLogger(__name__)


class DimensionTracker:
    """
    Track the resolved width of each column and height of each row.

    Both maps only ever grow. Column widths observed from raw cell text are
    capped at ``max_width``; widths observed from already-wrapped lines
    (see :meth:`fit_line`) are not, since such a line cannot be made any
    narrower.
    """

    def __init__(self, max_width: int) -> None:
        self.max_width = max_width
        self._widths: dict[int, int] = {}
        self._heights: dict[int, int] = {}

    def observe_width(self, column: int, width: int) -> int:
        """
        Grow a column to fit raw cell text, up to the max width.

        Returns:
            The column's resolved width after the observation
        """
        capped = max(0, min(width, self.max_width))
        resolved = max(self._widths.get(column, 0), capped)
        self._widths[column] = resolved
        return resolved

    def fit_line(self, column: int, width: int) -> int:
        """
        Grow a column to fit a wrapped line, ignoring the max width.

        Returns:
            The column's resolved width after the observation
        """
        current = self._widths.get(column, 0)
        if width > current:
            if width > self.max_width:
                logger.debug(
                    "Column %d widened to %d past max width %d", column, width, self.max_width
                )
            self._widths[column] = width
            return width
        self._widths.setdefault(column, current)
        return current

    def observe_height(self, row: int, line_count: int) -> int:
        """
        Grow a row to fit ``line_count`` lines.

        Returns:
            The row's resolved height after the observation
        """
        resolved = max(self._heights.get(row, 0), line_count)
        self._heights[row] = resolved
        return resolved

    def width(self, column: int) -> int:
        return self._widths.get(column, 0)

    def height(self, row: int) -> int:
        return self._heights.get(row, 0)

    @property
    def num_columns(self) -> int:
        """Number of columns observed so far."""
        return max(self._widths, default=-1) + 1

    @property
    def column_widths(self) -> list[int]:
        """Resolved width of every column, by index."""
        return [self.width(column) for column in range(self.num_columns)]

    @property
    def row_heights(self) -> dict[int, int]:
        """Copy of the row height map."""
        return dict(self._heights)
