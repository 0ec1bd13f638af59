"""
CSV parser for the QuickChart Data Dashboard.

Turns the decoded text of one CSV file into canonical rows.  Handles:

- Blank / whitespace-only lines (skipped, including blank data rows)
- Quoted fields containing commas
- UTF-8 BOM markers on byte input
- Short lines (missing trailing fields become ``""``)

Quote handling is deliberately simple: a field has one leading and one
trailing ``"`` stripped, and doubled quotes inside a field are kept
verbatim.
"""

import logging
import warnings
from typing import List, Union

from .data_model import Row
from .errors import EmptyInput
from .normalize import normalize_value

logger = logging.getLogger(__name__)

_QUOTE = '"'
_DELIMITER = ','


def _clean_field(raw: str) -> str:
    """Trim whitespace, then drop one leading and one trailing quote."""
    field = raw.strip()
    if field.startswith(_QUOTE):
        field = field[1:]
    if field.endswith(_QUOTE):
        field = field[:-1]
    return field


def split_csv_line(line: str) -> List[str]:
    """Split one CSV line into cleaned fields.

    Single pass: every ``"`` toggles the in-quotes flag and ``,`` only
    separates fields while outside quotes.

    >>> split_csv_line('a, "b, c" ,d')
    ['a', 'b, c', 'd']
    """
    fields: List[str] = []
    start = 0
    in_quotes = False
    for i, ch in enumerate(line):
        if ch == _QUOTE:
            in_quotes = not in_quotes
        elif ch == _DELIMITER and not in_quotes:
            fields.append(_clean_field(line[start:i]))
            start = i + 1
    fields.append(_clean_field(line[start:]))
    return fields


def decode_text(content: Union[bytes, str]) -> str:
    """Decode raw file bytes as UTF-8 (BOM tolerated, bad bytes replaced)."""
    if isinstance(content, str):
        return content.lstrip('\ufeff')
    return content.decode('utf-8-sig', errors='replace')


def parse_csv_text(text: str, source_name: str = "") -> List[Row]:
    """Parse CSV text into canonical rows keyed by the header fields.

    Parameters
    ----------
    text : str
        Full decoded file content.
    source_name : str
        File name, used only in data-quality warnings.

    Returns
    -------
    list of dict
        One row per non-blank data line.  Empty when the file has a
        header but no data lines.

    Raises
    ------
    EmptyInput
        If the text has no non-blank lines.
    """
    lines = [line for line in text.split('\n') if line.strip() != '']
    if not lines:
        raise EmptyInput("CSV file is empty")

    headers = split_csv_line(lines[0])
    rows: List[Row] = []
    short_lines: List[int] = []

    for line_no, line in enumerate(lines[1:], start=2):
        values = split_csv_line(line)
        if len(values) < len(headers):
            short_lines.append(line_no)
        row: Row = {}
        for index, header in enumerate(headers):
            raw = values[index] if index < len(values) else ''
            row[header] = normalize_value(raw)
        rows.append(row)

    if short_lines:
        examples = ", ".join(str(n) for n in short_lines[:10])
        if len(short_lines) > 10:
            examples += f" ... and {len(short_lines) - 10} more"
        warnings.warn(
            f"{len(short_lines)} line(s) in '{source_name or 'CSV input'}' "
            f"have fewer fields than the header (lines {examples}). "
            f"Missing fields were treated as empty text.",
            stacklevel=2,
        )

    logger.debug("Parsed %d CSV rows with %d header fields",
                 len(rows), len(headers))
    return rows
