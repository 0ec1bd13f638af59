"""
Chart rendering for the QuickChart Data Dashboard.

Draws a projected series as a bar, line or pie chart on a matplotlib
``Figure``.  The series is already filtered, sorted and capped by
``projection.project_series``; this module only lays it out.
"""

from typing import Sequence

from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter

from .constants import DARK_COLORS, EXPORT_TEXT_COLOR
from .data_model import ChartKind, Row
from .projection import format_number, palette_color, pie_series


def _value_formatter() -> FuncFormatter:
    return FuncFormatter(lambda value, _pos: format_number(value))


def _category_labels(series: Sequence[Row], x_column: str) -> list:
    return [format_number(row.get(x_column)) for row in series]


def render_placeholder(fig: Figure, message: str, *, for_export: bool = False) -> None:
    """Clear *fig* and show *message* centred on an empty axes."""
    fig.clf()
    ax = fig.add_subplot(111)
    ax.set_axis_off()
    color = EXPORT_TEXT_COLOR if for_export else DARK_COLORS['fg_dim']
    ax.text(0.5, 0.5, message, transform=ax.transAxes,
            ha='center', va='center', fontsize=10, color=color)


def _render_bar(ax, series, x_column, y_column):
    positions = range(len(series))
    values = [row[y_column] for row in series]
    bars = ax.bar(positions, values, color=palette_color(0), label=y_column,
                  zorder=3)
    ax.bar_label(bars, labels=[format_number(v) for v in values],
                 fontsize=6, padding=2)
    ax.set_xticks(list(positions))
    ax.set_xticklabels(_category_labels(series, x_column),
                       rotation=45, ha='right')


def _render_line(ax, series, x_column, y_column):
    positions = range(len(series))
    values = [row[y_column] for row in series]
    ax.plot(positions, values, color=palette_color(1), linewidth=2,
            marker='o', markersize=4, label=y_column, zorder=3)
    for position, value in zip(positions, values):
        ax.annotate(format_number(value), (position, value),
                    textcoords='offset points', xytext=(0, 5),
                    ha='center', fontsize=6)
    ax.set_xticks(list(positions))
    ax.set_xticklabels(_category_labels(series, x_column),
                       rotation=45, ha='right')


def _render_pie(ax, series, x_column, y_column):
    # Wedge sizes must be positive; zero/negative rows cannot be drawn
    slices = [row for row in pie_series(series) if row[y_column] > 0]
    if not slices:
        ax.set_axis_off()
        ax.text(0.5, 0.5, 'No positive values to display',
                transform=ax.transAxes, ha='center', va='center')
        return False

    values = [row[y_column] for row in slices]
    names = _category_labels(slices, x_column)
    total = float(sum(values))
    labels = [
        f"{name}: {value / total * 100:.1f}%"
        for name, value in zip(names, values)
    ]
    colors = [palette_color(i) for i in range(len(slices))]
    wedges, _texts = ax.pie(values, labels=labels, colors=colors,
                            startangle=90, counterclock=False,
                            textprops={'fontsize': 7})
    ax.legend(wedges, names, loc='center left', bbox_to_anchor=(1.0, 0.5),
              fontsize=7)
    ax.set_aspect('equal')
    return True


def render_chart(
    fig: Figure,
    series: Sequence[Row],
    x_column: str,
    y_column: str,
    kind: ChartKind,
    *,
    for_export: bool = False,
) -> None:
    """Render *series* on *fig* as a chart of the given *kind*.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
        Figure to draw on (will be cleared).
    series : sequence of dict
        Rows from ``project_series``; ``row[y_column]`` is a Number.
    x_column, y_column : str
        Category and value keys.
    kind : ChartKind
        Bar, line or pie.  Pie charts show the first eight entries.
    for_export : bool
        If ``True``, use light-theme text colours.
    """
    fig.clf()
    ax = fig.add_subplot(111)
    kind = ChartKind(kind)

    if kind is ChartKind.PIE:
        drawn = _render_pie(ax, series, x_column, y_column)
        if drawn:
            ax.set_title(f"{y_column} by {x_column}", fontsize=10,
                         fontweight='bold')
        fig.tight_layout(pad=1.5)
        return

    if kind is ChartKind.BAR:
        _render_bar(ax, series, x_column, y_column)
    else:
        _render_line(ax, series, x_column, y_column)

    ax.yaxis.set_major_formatter(_value_formatter())
    ax.set_xlabel(x_column)
    ax.set_ylabel(y_column)
    ax.set_title(f"{y_column} by {x_column}", fontsize=10, fontweight='bold')
    ax.grid(axis='y', linestyle=(0, (3, 3)), linewidth=0.5, zorder=0)
    ax.legend()
    if not for_export:
        ax.tick_params(axis='x', colors=DARK_COLORS['fg'])
        ax.tick_params(axis='y', colors=DARK_COLORS['fg'])

    fig.tight_layout(pad=1.5)
