import pytest

from quickchart.errors import (
    DecodeError, EmptyInput, EmptyResult, ReadFailure, UnsupportedFileType,
)
from quickchart.ingest import (
    build_dataset, check_file_type, decode, file_extension, load_file, user_message,
)


@pytest.mark.parametrize("name, expected", [
    ("data.csv", "csv"),
    ("Data.CSV", "csv"),
    ("report.final.XLSX", "xlsx"),
    ("legacy.xls", "xls"),
    ("notes.txt", "txt"),
    ("README", "readme"),
])
def test_file_extension(name, expected):
    assert file_extension(name) == expected


def test_unsupported_extension_names_the_extension():
    with pytest.raises(UnsupportedFileType) as info:
        check_file_type("notes.txt")
    assert info.value.extension == "txt"
    assert str(info.value) == "Unsupported file type: txt"


def test_unsupported_extension_fails_before_reading(tmp_path):
    # The file does not exist: a read would raise ReadFailure instead
    with pytest.raises(UnsupportedFileType):
        load_file(str(tmp_path / "missing.txt"))


def test_scenario_dataset(sales_csv):
    ds = build_dataset("sales.csv", sales_csv)
    assert ds.columns == ("Name", "Amount")
    assert len(ds) == 3
    assert ds.source_name == "sales.csv"


def test_excel_dataset(xlsx_bytes):
    ds = build_dataset("orders.xlsx", xlsx_bytes)
    assert ds.columns == ("Region", "Amount", "Note", "Shipped")
    assert len(ds) == 3


def test_decode_dispatches_on_extension(sales_csv):
    assert decode("x.CSV", sales_csv)[0] == {"Name": "A", "Amount": 10}
    with pytest.raises(DecodeError):
        decode("x.xlsx", sales_csv)


def test_empty_csv_raises_empty_input():
    with pytest.raises(EmptyInput):
        build_dataset("empty.csv", b"")


def test_header_only_csv_raises_empty_result():
    with pytest.raises(EmptyResult):
        build_dataset("header.csv", b"a,b\n")


def test_load_file_reads_from_disk(tmp_path, sales_csv):
    path = tmp_path / "sales.csv"
    path.write_bytes(sales_csv)
    ds = load_file(str(path))
    assert ds.source_name == "sales.csv"
    assert ds.rows[1] == {"Name": "B", "Amount": 30}


def test_load_file_missing_raises_read_failure(tmp_path):
    with pytest.raises(ReadFailure, match="Error reading file"):
        load_file(str(tmp_path / "missing.csv"))


def test_user_messages():
    assert user_message(EmptyResult("anything")) == "No valid data found in file"
    assert user_message(EmptyInput("CSV file is empty")) == (
        "Error processing file: CSV file is empty"
    )
    assert user_message(UnsupportedFileType("txt")) == (
        "Error processing file: Unsupported file type: txt"
    )


def test_xls_dataset(xls_bytes):
    ds = build_dataset("legacy.xls", xls_bytes)
    assert ds.columns == ("Region", "Amount", "Code")
    assert len(ds) == 2
