"""
Ingestion error kinds for the QuickChart Data Dashboard.

Every failure of the file → dataset pipeline raises a subclass of
``IngestionError``.  The controller handles all of them identically:
the ingestion is aborted, the dataset stays cleared and a single
user-visible message is shown.
"""


class IngestionError(ValueError):
    """Base class for all file ingestion failures."""


class UnsupportedFileType(IngestionError):
    """The file extension is not ``csv``, ``xlsx`` or ``xls``."""

    def __init__(self, extension: str):
        super().__init__(f"Unsupported file type: {extension}")
        self.extension = extension


class EmptyInput(IngestionError):
    """CSV text contains no non-blank lines."""


class DecodeError(IngestionError):
    """The spreadsheet library could not read the workbook."""


class ReadFailure(IngestionError):
    """The underlying file read reported an error."""


class EmptyResult(IngestionError):
    """Parsing succeeded but produced zero rows."""
