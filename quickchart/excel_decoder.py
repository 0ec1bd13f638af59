"""
Excel workbook decoder for the QuickChart Data Dashboard.

Structural decoding (sheet discovery, cell typing, header inference) is
delegated to pandas with the openpyxl (``.xlsx``) or xlrd (``.xls``)
engine.  Only the first sheet is read.  This module is responsible for
turning the library's output into canonical rows: missing cells become
``None``, numpy/pandas scalars become plain Python values and every
value goes through the shared type normalizer.
"""

import io
import logging
import math
from typing import Any, List

import numpy as np
import pandas as pd

from .data_model import Row
from .errors import DecodeError
from .normalize import normalize_row

logger = logging.getLogger(__name__)


def _to_python(value: Any) -> Any:
    """Convert a pandas cell to a plain Python scalar; NaN/NaT → ``None``."""
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, np.bool_):
        return bool(value)
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, np.floating):
        value = float(value)
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, np.datetime64):
        return pd.Timestamp(value).to_pydatetime()
    return value


def decode_workbook(content: bytes) -> List[Row]:
    """Decode the first sheet of an Excel workbook into canonical rows.

    Parameters
    ----------
    content : bytes
        Full binary content of a ``.xlsx`` or ``.xls`` file.

    Returns
    -------
    list of dict
        One row per non-empty sheet row, keyed by the header row.

    Raises
    ------
    DecodeError
        If the content cannot be parsed or the workbook has no sheets.
    """
    try:
        workbook = pd.ExcelFile(io.BytesIO(content))
    except Exception as exc:
        raise DecodeError(f"Unable to read workbook: {exc}") from exc

    with workbook:
        sheet_names = workbook.sheet_names
        if not sheet_names:
            raise DecodeError("Workbook contains no sheets")
        first_sheet = sheet_names[0]
        try:
            # Only truly empty cells are missing; "NA", "None" etc. stay text
            frame = workbook.parse(first_sheet, keep_default_na=False,
                                   na_values=[''])
        except Exception as exc:
            raise DecodeError(
                f"Unable to read sheet '{first_sheet}': {exc}"
            ) from exc

    frame = frame.dropna(how='all')
    frame.columns = [str(name) for name in frame.columns]

    rows: List[Row] = []
    for record in frame.to_dict(orient='records'):
        cleaned = {key: _to_python(value) for key, value in record.items()}
        rows.append(normalize_row(cleaned))

    logger.debug("Decoded %d rows from sheet '%s' (%d sheets in workbook)",
                 len(rows), first_sheet, len(sheet_names))
    return rows
