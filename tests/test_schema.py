import pytest

from quickchart.data_model import AxisSelection
from quickchart.schema import default_axes, infer_columns, numeric_columns


def test_columns_follow_first_row_order():
    rows = [{"b": 1, "a": "x"}, {"b": 2, "a": "y"}]
    assert infer_columns(rows) == ("b", "a")


def test_no_rows_no_columns():
    assert infer_columns([]) == ()
    assert default_axes([], ()) == AxisSelection()


def test_scenario_defaults():
    rows = [{"Name": "A", "Amount": 10}]
    assert default_axes(rows, infer_columns(rows)) == AxisSelection("Name", "Amount")


@pytest.mark.parametrize("row", [
    {"Region": "N", "Units": 3, "Sales": 10.5},
    {"Sales": 10.5, "Region": "N", "Units": 3},
    {"Units": 3, "Sales": 10.5, "Region": "N"},
])
def test_sales_preferred_regardless_of_order(row):
    axes = default_axes([row], infer_columns([row]))
    assert axes.y == "Sales"
    assert axes.x == list(row)[0]


def test_preference_is_case_insensitive_substring():
    row = {"id": 1, "Qty": 2, "UnitPRICE": 9.99, "TotalCost": 20}
    assert default_axes([row], list(row)).y == "UnitPRICE"


def test_falls_back_to_first_numeric_column():
    row = {"Name": "A", "Units": 3, "Score": 9}
    assert default_axes([row], list(row)).y == "Units"


def test_x_axis_may_also_be_numeric():
    row = {"Year": 2024, "Revenue": 5}
    assert default_axes([row], list(row)) == AxisSelection("Year", "Year")


def test_no_numeric_column_means_no_y():
    row = {"Name": "A", "Sales": "n/a"}
    assert default_axes([row], list(row)) == AxisSelection("Name", "")


def test_only_first_row_decides_numeric_kind():
    rows = [{"Name": "A", "Amount": ""}, {"Name": "B", "Amount": 30}]
    assert numeric_columns(rows, ("Name", "Amount")) == ()
    assert default_axes(rows, ("Name", "Amount")).y == ""


def test_bools_are_not_numeric():
    row = {"Name": "A", "Active": True, "Value": 1}
    assert numeric_columns([row], list(row)) == ("Value",)
