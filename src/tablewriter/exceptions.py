"""Exceptions for tablewriter."""

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class TableWriterError(Exception):
    """
    Base exception for all tablewriter errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.

    Layout problems (uneven rows, empty cells, odd separators) are never
    reported through this hierarchy; they degrade to a best-effort rendering.
    """

    pass


# ---------------------------------------------------------------------------
# Output Exceptions
# ---------------------------------------------------------------------------


class OutputError(TableWriterError, OSError):
    """
    Raised when the output sink fails while a table is being rendered.

    The render call that hit the failure is abandoned; lines already
    written stay written. Subclasses OSError so callers that only know
    about I/O errors still catch it.

    Attributes:
        cause: The underlying OSError raised by the sink
        lines_written: Number of complete lines written before the failure
    """

    def __init__(self, cause: OSError, lines_written: int = 0) -> None:
        self.cause = cause
        self.lines_written = lines_written
        super().__init__(
            f"Failed to write table output after {lines_written} line(s): {cause}"
        )


# ---------------------------------------------------------------------------
# Source Exceptions
# ---------------------------------------------------------------------------


class CSVSourceError(TableWriterError):
    """
    Raised when a CSV source cannot be read.

    Attributes:
        source: Path or description of the CSV source
        reason: Human-readable description of the failure
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read CSV from {source}: {reason}")
