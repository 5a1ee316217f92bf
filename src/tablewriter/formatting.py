"""
Cell formatting: padding, alignment classification and label casing.

Padding works in display columns (see :mod:`tablewriter.width`), so
colored and double-width text lines up with plain ASCII. Lines wider than
the target are returned unchanged; fitting text to a column is the job of
the wrapper and the dimension tracker.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from .models import Alignment
from .width import ESC, display_width, scan

SPACE = " "

AlignmentClassifier = Callable[[str], Alignment]
"""Maps stripped cell text to the alignment used for ``Alignment.DEFAULT``."""

# Optionally negative decimal, optionally followed by a percent sign
NUMERIC_PATTERN = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)%?$")


def pad_right(text: str, width: int, fill: str = SPACE) -> str:
    """Left-align ``text`` in ``width`` columns."""
    gap = width - display_width(text)
    return text + fill * gap if gap > 0 else text


def pad_left(text: str, width: int, fill: str = SPACE) -> str:
    """Right-align ``text`` in ``width`` columns."""
    gap = width - display_width(text)
    return fill * gap + text if gap > 0 else text


def pad_center(text: str, width: int, fill: str = SPACE) -> str:
    """Center ``text`` in ``width`` columns; an odd gap leaves more space on the right."""
    gap = width - display_width(text)
    if gap <= 0:
        return text
    left = gap // 2
    return fill * left + text + fill * (gap - left)


def classify_numeric(text: str) -> Alignment:
    """
    Default alignment classifier.

    Numbers such as ``2233``, ``-1.5`` or ``12.5%`` are right-aligned;
    everything else is left-aligned.
    """
    if NUMERIC_PATTERN.match(text):
        return Alignment.RIGHT
    return Alignment.LEFT


def pad(
    text: str,
    width: int,
    alignment: Alignment,
    classifier: AlignmentClassifier = classify_numeric,
) -> str:
    """
    Pad one line of cell text to exactly ``width`` display columns.

    Args:
        text: A single, already-wrapped line
        width: Target display width
        alignment: Alignment policy; DEFAULT consults ``classifier``
        classifier: Called with the stripped text when alignment is DEFAULT

    Returns:
        The padded line
    """
    if alignment is Alignment.DEFAULT:
        alignment = classifier(text.strip())

    if alignment is Alignment.RIGHT:
        return pad_left(text, width)
    if alignment is Alignment.CENTER:
        return pad_center(text, width)
    return pad_right(text, width)


def format_label(label: str) -> str:
    """
    Auto-format a header or footer label.

    Underscores and dots become spaces, so ``$146.93`` reads ``$146 93``.
    The result is trimmed and uppercased. A non-empty label that trims to
    nothing becomes a single space so that blank lines in multi-line labels
    survive.
    """
    formatted = label.replace("_", SPACE).replace(".", SPACE).strip()
    if not formatted and label:
        formatted = SPACE
    # Escape sequences are case-sensitive
    return "".join(
        segment if segment.startswith(ESC) else segment.upper() for segment, _ in scan(formatted)
    )
