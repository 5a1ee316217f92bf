"""Core models for tablewriter."""

from dataclasses import dataclass
from enum import Enum


class Alignment(Enum):
    """
    Horizontal alignment policy for a cell line.

    DEFAULT defers to the alignment classifier for body cells and centers
    header and footer labels.
    """

    DEFAULT = 0
    CENTER = 1
    RIGHT = 2
    LEFT = 3


@dataclass(frozen=True)
class Border:
    """
    Which outer edges of the table are drawn.

    A disabled edge is replaced by blank padding of the same width, so
    the cell grid keeps its alignment.

    Attributes:
        left: Draw the column separator at the start of each line
        right: Draw the column separator at the end of each line
        top: Draw a border line above the table
        bottom: Draw a border line below the body
    """

    left: bool = True
    right: bool = True
    top: bool = True
    bottom: bool = True

    @classmethod
    def all(cls, enabled: bool) -> "Border":
        """Create a border with every edge set to ``enabled``."""
        return cls(left=enabled, right=enabled, top=enabled, bottom=enabled)
