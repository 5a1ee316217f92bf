"""Build tables from CSV data."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TextIO

from .exceptions import CSVSourceError
from .table import Table

logger = logging.getLogger(__name__)


def from_csv_reader(
    reader: Iterable[Sequence[str]],
    has_header: bool = True,
    out: TextIO | None = None,
    source: str = "<reader>",
    *,
    max_width: int | None = None,
    auto_wrap: bool = True,
) -> Table:
    """
    Build a table from an already opened CSV reader.

    Args:
        reader: Any iterable of records, typically ``csv.reader(...)``
        has_header: Use the first record as the header
        out: Output sink for the table
        source: Description of the input used in error messages
        max_width: Column width cap applied while the records are added
        auto_wrap: Word-wrap cells while the records are added

    Returns:
        A table holding every record

    Raises:
        CSVSourceError: If the reader reports malformed CSV
    """
    table = Table(out)
    if max_width is not None:
        table.set_column_width(max_width)
    table.set_auto_wrap_text(auto_wrap)
    records = iter(reader)
    try:
        if has_header:
            header = next(records, None)
            if header is not None:
                table.set_header(header)
        table.append_bulk(records)
    except csv.Error as e:
        raise CSVSourceError(source, str(e)) from e

    logger.debug("Loaded %d row(s) from %s", table.num_rows, source)
    return table


def from_csv(
    path: str | Path,
    has_header: bool = True,
    out: TextIO | None = None,
    encoding: str = "utf-8",
    *,
    max_width: int | None = None,
    auto_wrap: bool = True,
) -> Table:
    """
    Build a table from a CSV file.

    Args:
        path: Path to the CSV file
        has_header: Use the first record as the header
        out: Output sink for the table
        encoding: File encoding
        max_width: Column width cap applied while the records are added
        auto_wrap: Word-wrap cells while the records are added

    Returns:
        A table holding every record in the file

    Raises:
        CSVSourceError: If the file cannot be opened, decoded or parsed
    """
    try:
        with open(path, newline="", encoding=encoding) as f:
            return from_csv_reader(
                csv.reader(f),
                has_header=has_header,
                out=out,
                source=str(path),
                max_width=max_width,
                auto_wrap=auto_wrap,
            )
    except OSError as e:
        raise CSVSourceError(str(path), e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise CSVSourceError(str(path), f"not valid {encoding}") from e
