"""
Display width measurement for terminal text.

Cell text may carry ANSI escape sequences (typically SGR color codes).
They occupy no columns on screen, so they must be skipped when measuring
and must never be split when text is cut into chunks. This module walks
the text with a small scanner that emits each escape sequence as one
zero-width segment and every other character as a segment whose width
comes from wcwidth (two columns for CJK and most emoji).

Recognized sequences:
    CSI: ESC [ <parameters> <intermediates> <final byte 0x40-0x7E>
    OSC: ESC ] ... terminated by BEL or ESC \\
    Two-character escapes: ESC followed by any single character
"""

from collections.abc import Iterator
from enum import Enum

import wcwidth

ESC = "\x1b"
BEL = "\x07"


class _State(Enum):
    NORMAL = "normal"
    ESCAPE = "escape"
    CSI = "csi"
    OSC = "osc"


def _char_width(char: str) -> int:
    # wcwidth returns -1 for non-printable characters, treat as 0
    return max(wcwidth.wcwidth(char), 0)


def scan(text: str) -> Iterator[tuple[str, int]]:
    """
    Split text into ``(segment, width)`` pairs.

    Escape sequences are yielded whole with width 0. Every other character
    is yielded on its own with its display width. An escape sequence left
    unterminated at the end of the text is yielded as-is.

    Args:
        text: Text to scan

    Yields:
        Tuples of segment text and its display width
    """
    state = _State.NORMAL
    start = 0

    for i, char in enumerate(text):
        if state is _State.NORMAL:
            if char == ESC:
                state = _State.ESCAPE
                start = i
            else:
                yield char, _char_width(char)
        elif state is _State.ESCAPE:
            if char == "[":
                state = _State.CSI
            elif char == "]":
                state = _State.OSC
            else:
                yield text[start : i + 1], 0
                state = _State.NORMAL
        elif state is _State.CSI:
            if "\x40" <= char <= "\x7e":
                yield text[start : i + 1], 0
                state = _State.NORMAL
        elif state is _State.OSC:
            if char == BEL or (char == "\\" and text[i - 1] == ESC):
                yield text[start : i + 1], 0
                state = _State.NORMAL

    if state is not _State.NORMAL:
        yield text[start:], 0


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies."""
    return sum(width for _, width in scan(text))


def strip_escapes(text: str) -> str:
    """Return ``text`` with all escape sequences removed."""
    return "".join(segment for segment, width in scan(text) if not segment.startswith(ESC))
