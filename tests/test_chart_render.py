import matplotlib as mpl
import pytest
from matplotlib.figure import Figure

from conftest import make_dataset
from quickchart.chart_render import render_chart, render_placeholder
from quickchart.constants import PLOT_STYLE_LIGHT
from quickchart.data_model import ChartKind
from quickchart.export import export_png, render_export_figure
from quickchart.projection import project_series


@pytest.fixture
def series():
    ds = make_dataset([{"Region": f"R{i}", "Sales": 1000.0 + i * 250} for i in range(12)])
    return project_series(ds, "Region", "Sales")


def test_bar_chart_has_one_bar_per_row(series):
    fig = Figure()
    render_chart(fig, series, "Region", "Sales", ChartKind.BAR)
    ax = fig.axes[0]
    assert len(ax.patches) == len(series)
    assert ax.get_xticklabels()[0].get_text() == "R11"
    assert ax.get_ylabel() == "Sales"


def test_line_chart_plots_values_in_series_order(series):
    fig = Figure()
    render_chart(fig, series, "Region", "Sales", "Line")
    (line,) = fig.axes[0].get_lines()
    assert list(line.get_ydata()) == [row["Sales"] for row in series]


def test_pie_chart_limited_to_eight_wedges(series):
    fig = Figure()
    render_chart(fig, series, "Region", "Sales", ChartKind.PIE)
    ax = fig.axes[0]
    assert len(ax.patches) == 8
    labels = [t.get_text() for t in ax.texts]
    assert any(label.startswith("R11: ") and label.endswith("%") for label in labels)


def test_pie_chart_without_positive_values():
    ds = make_dataset([{"k": "a", "v": -1}, {"k": "b", "v": 0}])
    fig = Figure()
    render_chart(fig, project_series(ds, "k", "v"), "k", "v", ChartKind.PIE)
    assert len(fig.axes[0].patches) == 0


def test_placeholder_text():
    fig = Figure()
    render_placeholder(fig, "Upload a file to visualize data")
    assert fig.axes[0].texts[0].get_text() == "Upload a file to visualize data"


def test_export_restores_rcparams(series):
    before = {key: mpl.rcParams[key] for key in PLOT_STYLE_LIGHT}
    fig = render_export_figure(series, "Region", "Sales", ChartKind.BAR)
    assert len(fig.axes[0].patches) == len(series)
    assert {key: mpl.rcParams[key] for key in PLOT_STYLE_LIGHT} == before


def test_export_png_writes_file(tmp_path, series):
    path = tmp_path / "chart.png"
    export_png(series, "Region", "Sales", ChartKind.PIE, str(path), dpi=50)
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_bar_values_are_annotated(series):
    fig = Figure()
    render_chart(fig, series, "Region", "Sales", ChartKind.BAR)
    labels = [t.get_text() for t in fig.axes[0].texts]
    assert len(labels) == len(series)
    assert labels[0] == "3,750"


def test_line_values_are_annotated():
    ds = make_dataset([{"k": "a", "v": 1234.5}, {"k": "b", "v": 2}])
    fig = Figure()
    render_chart(fig, project_series(ds, "k", "v"), "k", "v", ChartKind.LINE)
    assert [t.get_text() for t in fig.axes[0].texts] == ["1,234.5", "2"]
