import datetime
import io

import matplotlib
matplotlib.use("Agg")

import pytest
from openpyxl import Workbook

from quickchart.data_model import Dataset
from quickchart.schema import infer_columns


SALES_CSV = b"Name,Amount\nA,10\nB,30\nC,20\n"


def make_dataset(rows, name="test.csv"):
    rows = tuple(rows)
    return Dataset(rows=rows, columns=infer_columns(rows), source_name=name)


@pytest.fixture
def sales_csv():
    return SALES_CSV


@pytest.fixture
def sales_dataset():
    return make_dataset([
        {"Name": "A", "Amount": 10},
        {"Name": "B", "Amount": 30},
        {"Name": "C", "Amount": 20},
    ])


@pytest.fixture
def xlsx_bytes():
    wb = Workbook()
    ws = wb.active
    ws.title = "Orders"
    ws.append(["Region", "Amount", "Note", "Shipped"])
    ws.append(["North", 120.5, "42", datetime.datetime(2024, 1, 15)])
    ws.append(["South", None, "late", datetime.datetime(2024, 2, 1)])
    ws.append([None, None, None, None])
    ws.append(["East", 80, "pending", datetime.datetime(2024, 3, 9)])

    second = wb.create_sheet("Ignored")
    second.append(["Other", "Columns"])
    second.append([1, 2])

    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


@pytest.fixture
def xlsx_text_bytes():
    wb = Workbook()
    ws = wb.active
    ws.append(["Country", "Label", "Amount"])
    ws.append(["NA", "None", 10])
    ws.append(["N/A", "null", 20])
    ws.append(["nan", None, 30])

    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


@pytest.fixture
def xls_bytes():
    import xlwt

    book = xlwt.Workbook()
    sheet = book.add_sheet("Legacy")
    for col, header in enumerate(["Region", "Amount", "Code"]):
        sheet.write(0, col, header)
    sheet.write(1, 0, "West")
    sheet.write(1, 1, 55.5)
    sheet.write(1, 2, "17")
    # Row 2 left blank
    sheet.write(3, 0, "NA")
    sheet.write(3, 2, "x9")

    buf = io.BytesIO()
    book.save(buf)
    return buf.getvalue()
