"""
File ingestion for the QuickChart Data Dashboard.

Maps a file name to a decoder, runs it over the file content and
assembles the resulting canonical rows into a ``Dataset``.  Both
decoders share the type normalizer, so there is exactly one place
where text becomes numbers.
"""

import logging
import os
from typing import Callable, Dict, List, Union

from .constants import (
    CSV_EXTENSIONS, EXCEL_EXTENSIONS, SUPPORTED_EXTENSIONS, ERROR_PREFIX, NO_DATA_MESSAGE,
)
from .csv_parser import decode_text, parse_csv_text
from .data_model import Dataset, Row
from .errors import EmptyResult, IngestionError, ReadFailure, UnsupportedFileType
from .excel_decoder import decode_workbook
from .schema import infer_columns

logger = logging.getLogger(__name__)

Decoder = Callable[[bytes, str], List[Row]]


def _decode_csv(content: Union[bytes, str], name: str) -> List[Row]:
    return parse_csv_text(decode_text(content), source_name=name)


def _decode_excel(content: bytes, name: str) -> List[Row]:
    return decode_workbook(content)


DECODERS: Dict[str, Decoder] = {}
DECODERS.update({ext: _decode_csv for ext in CSV_EXTENSIONS})
DECODERS.update({ext: _decode_excel for ext in EXCEL_EXTENSIONS})


def file_extension(name: str) -> str:
    """Lowercased text after the last ``.`` of *name*.

    A name without a dot yields the whole name, lowercased.

    >>> file_extension("Report.Final.XLSX")
    'xlsx'
    """
    return name.rsplit('.', 1)[-1].lower()


def check_file_type(name: str) -> str:
    """Return the extension of *name*, raising if it cannot be ingested.

    Raises
    ------
    UnsupportedFileType
        If the extension is not ``csv``, ``xlsx`` or ``xls``.
    """
    extension = file_extension(name)
    if extension not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFileType(extension)
    return extension


def decode(name: str, content: Union[bytes, str]) -> List[Row]:
    """Decode file *content* into canonical rows, choosing by file name."""
    extension = check_file_type(name)
    return DECODERS[extension](content, name)


def build_dataset(name: str, content: Union[bytes, str]) -> Dataset:
    """Decode *content* and wrap the rows in a ``Dataset``.

    Raises
    ------
    EmptyResult
        If the file decodes without error but yields no rows.
    IngestionError
        For any other decoding failure.
    """
    rows = decode(name, content)
    if not rows:
        raise EmptyResult(NO_DATA_MESSAGE)
    columns = infer_columns(rows)
    logger.info("Ingested '%s': %d rows, %d columns",
                name, len(rows), len(columns))
    return Dataset(rows=tuple(rows), columns=columns, source_name=name)


def read_file(path: str) -> bytes:
    """Read the raw bytes of *path*, wrapping OS errors as ``ReadFailure``."""
    try:
        with open(path, 'rb') as fh:
            return fh.read()
    except OSError as exc:
        raise ReadFailure("Error reading file") from exc


def load_file(path: str) -> Dataset:
    """Synchronously ingest the file at *path*.

    The file type is checked before the file is opened.
    """
    name = os.path.basename(path)
    check_file_type(name)
    return build_dataset(name, read_file(path))


def user_message(exc: IngestionError) -> str:
    """User-visible text for an ingestion failure."""
    if isinstance(exc, EmptyResult):
        return NO_DATA_MESSAGE
    return f"{ERROR_PREFIX}{exc}"
