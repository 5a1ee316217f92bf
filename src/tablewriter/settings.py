"""Process-level defaults and their environment variable overrides.

Per-table settings live on :class:`tablewriter.Table`. The values here are
what the command-line entry point uses when no option is given.
"""

import logging
import os

from .renderer import DEFAULT_MAX_COLUMN_WIDTH

logger = logging.getLogger(__name__)

MAX_WIDTH_ENV_VAR = "TABLEWRITER_MAX_WIDTH"
"""Environment variable for overriding the default column width cap."""

PRESET_ENV_VAR = "TABLEWRITER_PRESET"
"""Environment variable for overriding the default preset."""

DEFAULT_PRESET = "ascii"


def resolve_max_width(width: int | None) -> int:
    """Resolve the column width cap from explicit arg, env var, or default.

    Resolution order: ``width`` arg → ``TABLEWRITER_MAX_WIDTH`` env var → ``30``.
    An env value that is not a positive integer is ignored.

    Args:
        width: Explicit width cap, or ``None`` to use env/default.

    Returns:
        Resolved width cap.
    """
    if width is not None:
        return width

    raw = os.environ.get(MAX_WIDTH_ENV_VAR)
    if raw:
        try:
            value = int(raw)
        except ValueError:
            value = 0
        if value > 0:
            return value
        logger.warning("Ignoring invalid %s=%r", MAX_WIDTH_ENV_VAR, raw)

    return DEFAULT_MAX_COLUMN_WIDTH
