"""
Text wrapping for table cells and captions.

Lines are filled greedily on whitespace boundaries. A token that cannot
fit on a line of its own is hard-broken into chunks, each ending with a
continuation marker, so no text is ever dropped. Widths are display
widths: escape sequences count as zero and are never split.
"""

from .width import display_width, scan

CONTINUATION_MARKER = "-"


def split_lines(text: str) -> list[str]:
    """Split text on explicit newlines only, with no width-based reflow."""
    return text.split("\n")


def _hard_break(token: str, limit: int) -> list[str]:
    """
    Break a token wider than ``limit`` into chunks.

    Every chunk except the last is followed by the continuation marker and
    fits in ``limit`` together with it. With ``limit == 1`` there is no room
    for the marker, so chunks are a single column wide and unmarked. A glyph
    wider than the budget is still emitted alone, without the marker when the
    two would not fit together, so the caller always makes progress.
    """
    marker_width = display_width(CONTINUATION_MARKER)
    marked = limit > marker_width
    budget = limit - marker_width if marked else limit
    marker = CONTINUATION_MARKER if marked else ""

    segments = list(scan(token))
    total = sum(width for _, width in segments)

    chunks: list[str] = []
    current: list[str] = []
    current_width = 0
    for segment, width in segments:
        if current_width and current_width + width > budget:
            # A lone glyph too wide to carry the marker goes out unmarked
            fits_marker = current_width + display_width(marker) <= limit
            chunks.append("".join(current) + (marker if fits_marker else ""))
            total -= current_width
            current, current_width = [], 0
            if total <= limit:
                # The remainder fits without breaking again
                budget = limit
                marker = ""
        current.append(segment)
        current_width += width
    chunks.append("".join(current))
    return chunks


def wrap_text(text: str, limit: int) -> list[str]:
    """
    Wrap text into lines no wider than ``limit`` display columns.

    Tokens are separated by any whitespace, newlines included, and are
    rejoined with single spaces. A limit below 1 is treated as 1.

    Args:
        text: Text to wrap
        limit: Maximum display width of a line

    Returns:
        Wrapped lines; ``[""]`` for empty or whitespace-only text
    """
    limit = max(limit, 1)
    lines: list[str] = []
    current = ""
    current_width = 0

    for token in text.split():
        token_width = display_width(token)

        if current and current_width + 1 + token_width <= limit:
            current = f"{current} {token}"
            current_width += 1 + token_width
            continue

        if current:
            lines.append(current)

        if token_width > limit:
            *full, current = _hard_break(token, limit)
            lines.extend(full)
            current_width = display_width(current)
        else:
            current, current_width = token, token_width

    if current or not lines:
        lines.append(current)
    return lines
