"""
tablewriter: render tabular data as fixed-width text grids.

This library provides a table layout engine with:
- Column widths and row heights computed from multi-line cell content
- Word wrapping to a per-column width cap, with hard breaks for long tokens
- Display-width aware padding (ANSI color codes and wide glyphs)
- Configurable borders, separators and alignment
- Footers that box only their populated cells, and wrapped captions

Example:
    from tablewriter import Table

    table = Table()
    table.set_header(["Date", "Description", "CV2", "Amount"])
    table.set_footer(["", "", "Total", "$146.93"])
    table.append_bulk(rows)
    table.render()
"""

from importlib.metadata import PackageNotFoundError, version

from .csv_source import from_csv, from_csv_reader
from .exceptions import CSVSourceError, OutputError, TableWriterError
from .formatting import classify_numeric
from .models import Alignment, Border
from .presets import Preset, apply_preset
from .table import Table, render_table

try:
    __version__ = version("tablewriter")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "Table",
    "render_table",
    # Models
    "Alignment",
    "Border",
    "classify_numeric",
    # Presets
    "Preset",
    "apply_preset",
    # CSV sources
    "from_csv",
    "from_csv_reader",
    # Exceptions
    "TableWriterError",
    "OutputError",
    "CSVSourceError",
]
