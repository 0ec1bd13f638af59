import pytest

from quickchart.controller import DashboardController
from quickchart.data_model import AxisSelection, ChartKind
from quickchart.errors import ReadFailure


@pytest.fixture
def controller():
    return DashboardController()


def _load(controller, name, content):
    request_id = controller.begin_ingestion(name)
    assert request_id is not None
    controller.complete_ingestion(request_id, content)
    return request_id


def test_initial_state(controller):
    assert controller.dataset.is_empty
    assert controller.columns == ()
    assert controller.series == ()
    assert controller.statistics.count == 0
    assert controller.chart_kind is ChartKind.BAR
    assert not controller.loading
    assert controller.error == ""


def test_scenario_end_to_end(controller, sales_csv):
    _load(controller, "sales.csv", sales_csv)
    assert controller.columns == ("Name", "Amount")
    assert controller.selection == AxisSelection("Name", "Amount")
    assert [r["Name"] for r in controller.series] == ["B", "C", "A"]
    stats = controller.statistics
    assert (stats.count, stats.minimum, stats.maximum, stats.mean) == (3, 10, 30, 20)
    assert not controller.loading
    assert controller.error == ""


def test_begin_clears_previous_state(controller, sales_csv):
    _load(controller, "sales.csv", sales_csv)
    controller.begin_ingestion("next.csv")
    assert controller.dataset.is_empty
    assert controller.columns == ()
    assert controller.selection == AxisSelection()
    assert controller.loading
    assert controller.file_name == "next.csv"


def test_unsupported_type_fails_without_read(controller):
    assert controller.begin_ingestion("notes.txt") is None
    assert controller.error == "Error processing file: Unsupported file type: txt"
    assert not controller.loading
    assert controller.dataset.is_empty


def test_empty_csv_error_message(controller):
    _load(controller, "empty.csv", b"")
    assert controller.error.startswith("Error processing file: ")
    assert "CSV file is empty" in controller.error
    assert controller.dataset.is_empty
    assert not controller.loading


def test_header_only_reports_no_valid_data(controller):
    _load(controller, "header.csv", b"a,b\n")
    assert controller.error == "No valid data found in file"


def test_read_failure_message(controller):
    request_id = controller.begin_ingestion("data.csv")
    controller.fail_ingestion(request_id, "disk on fire")
    assert controller.error == "Error processing file: disk on fire"
    assert not controller.loading


def test_read_failure_accepts_ingestion_error(controller):
    request_id = controller.begin_ingestion("data.csv")
    controller.fail_ingestion(request_id, ReadFailure("Error reading file"))
    assert controller.error == "Error processing file: Error reading file"


def test_error_cleared_by_next_upload(controller, sales_csv):
    _load(controller, "empty.csv", b"")
    assert controller.error
    _load(controller, "sales.csv", sales_csv)
    assert controller.error == ""


def test_stale_completion_is_discarded(controller, sales_csv):
    first = controller.begin_ingestion("old.csv")
    second = controller.begin_ingestion("new.csv")
    controller.complete_ingestion(first, b"Old,Value\nx,1\n")
    assert controller.dataset.is_empty
    assert controller.loading

    controller.complete_ingestion(second, sales_csv)
    assert controller.columns == ("Name", "Amount")
    controller.fail_ingestion(first, "late failure")
    assert controller.error == ""
    assert controller.columns == ("Name", "Amount")


def test_duplicate_completion_is_ignored(controller, sales_csv):
    request_id = _load(controller, "sales.csv", sales_csv)
    dataset = controller.dataset
    controller.complete_ingestion(request_id, b"Other,Cols\n1,2\n")
    assert controller.dataset is dataset


def test_user_axis_choice_overrides_default_until_next_dataset(controller, sales_csv):
    _load(controller, "sales.csv", sales_csv)
    controller.set_y_axis("Name")
    assert controller.selection == AxisSelection("Name", "Name")
    assert controller.series == ()
    assert controller.statistics.count == 0

    controller.set_x_axis("Amount")
    controller.set_y_axis("Amount")
    assert controller.selection == AxisSelection("Amount", "Amount")

    _load(controller, "sales.csv", sales_csv)
    assert controller.selection == AxisSelection("Name", "Amount")


def test_chart_kind_and_pie_series(controller):
    rows = "\n".join(f"item{i},{i}" for i in range(12))
    _load(controller, "items.csv", f"Item,Value\n{rows}\n".encode())
    controller.set_chart_kind("Pie")
    assert controller.chart_kind is ChartKind.PIE
    assert len(controller.series) == 12
    assert [r["Item"] for r in controller.pie_series][:2] == ["item11", "item10"]
    assert len(controller.pie_series) == 8


def test_invalid_chart_kind_raises(controller):
    with pytest.raises(ValueError):
        controller.set_chart_kind("Radar")


def test_listeners_notified_on_each_change(controller, sales_csv):
    calls = []
    controller.add_listener(lambda: calls.append(controller.loading))
    _load(controller, "sales.csv", sales_csv)
    assert calls == [True, False]
    controller.set_chart_kind(ChartKind.LINE)
    assert len(calls) == 3


def test_statistics_use_full_dataset(controller):
    rows = "\n".join(f"r{i},{i}" for i in range(150))
    _load(controller, "big.csv", f"Row,Amount\n{rows}\n".encode())
    assert len(controller.series) == 100
    assert controller.statistics.count == 150
    assert controller.statistics.minimum == 0


def test_oversized_integer_does_not_break_statistics(controller):
    huge = "1" + "0" * 400
    _load(controller, "huge.csv", f"Name,Amount\nA,{huge}\nB,5\n".encode())
    assert controller.dataset.rows[0]["Amount"] == huge
    stats = controller.statistics
    assert (stats.count, stats.minimum, stats.maximum) == (1, 5, 5)
    assert [r["Name"] for r in controller.series] == ["B"]
