"""
Error taxonomy for csv_annotator.

Everything that can go wrong happens outside the interactive session:
before it (configuration, loading) or after it (saving).
"""


class AnnotatorError(Exception):
    """Base class for fatal csv_annotator errors."""


class ConfigError(AnnotatorError):
    """A required command line option is missing or blank."""


class LoadError(AnnotatorError):
    """The input table could not be opened or parsed."""


class ColumnNotFoundError(LoadError):
    """A required column is absent from the header row."""

    def __init__(self, column: str, header):
        self.column = column
        self.header = list(header)
        super().__init__(
            f"no '{column}' column found in CSV (available: {', '.join(self.header)})"
        )


class SaveError(AnnotatorError):
    """The output table could not be created or written."""
