"""
Export utilities for the QuickChart Data Dashboard.

PNG export re-renders the current chart on a fresh figure under the
light matplotlib style, so the on-screen dark figure is never touched.
The previous rcParams are restored in a ``finally`` block.
"""

import io
import logging
from typing import Sequence

import matplotlib as mpl
from matplotlib.figure import Figure

from .chart_render import render_chart
from .constants import EXPORT_DPI, EXPORT_FIGSIZE, PLOT_STYLE_LIGHT
from .data_model import ChartKind, Row
from .theme import apply_plot_style

logger = logging.getLogger(__name__)


def render_export_figure(
    series: Sequence[Row],
    x_column: str,
    y_column: str,
    kind: ChartKind,
) -> Figure:
    """Build a light-themed figure for *series*, leaving rcParams as found."""
    saved = {key: mpl.rcParams[key] for key in PLOT_STYLE_LIGHT}
    try:
        apply_plot_style(PLOT_STYLE_LIGHT)
        fig = Figure(figsize=EXPORT_FIGSIZE)
        render_chart(fig, series, x_column, y_column, kind, for_export=True)
    finally:
        apply_plot_style(saved)
    return fig


def export_png(
    series: Sequence[Row],
    x_column: str,
    y_column: str,
    kind: ChartKind,
    filepath: str,
    *,
    dpi: int = EXPORT_DPI,
) -> str:
    """Write the chart for *series* to *filepath* as a PNG.

    Returns
    -------
    str
        The path written.
    """
    fig = render_export_figure(series, x_column, y_column, kind)
    fig.savefig(filepath, format='png', dpi=dpi, bbox_inches='tight',
                facecolor='white', edgecolor='none')
    logger.info("Exported %s chart to %s", ChartKind(kind).value, filepath)
    return filepath


def copy_to_clipboard(fig: Figure, *, dpi: int = 150) -> bool:
    """Copy *fig* to the system clipboard as an image.

    Returns ``False`` when no Qt application/clipboard is available.
    """
    from PySide6.QtWidgets import QApplication
    from PySide6.QtGui import QImage

    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=dpi, bbox_inches='tight',
                facecolor=fig.get_facecolor(), edgecolor='none')
    img = QImage()
    img.loadFromData(buf.getvalue())

    if QApplication.instance() is None:
        return False
    clipboard = QApplication.clipboard()
    if clipboard is None:
        return False
    clipboard.setImage(img)
    return True
