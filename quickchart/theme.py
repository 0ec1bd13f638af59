"""
Theme and stylesheet for the QuickChart Data Dashboard.

Provides the dark GUI stylesheet and a helper for switching matplotlib
between the dark (on-screen) and light (PNG export) styles.
"""

from .constants import DARK_COLORS


def get_dark_stylesheet() -> str:
    """Generate the dark mode Qt stylesheet."""
    c = DARK_COLORS
    return f"""
    QMainWindow, QWidget {{
        background-color: {c['bg']};
        color: {c['fg']};
        font-size: 13px;
    }}
    QGroupBox {{
        background-color: {c['bg_alt']};
        border: 1px solid {c['border']};
        border-radius: 8px;
        margin-top: 14px;
        padding-top: 18px;
        font-weight: bold;
        font-size: 15px;
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 10px;
        padding: 0 4px;
    }}
    QPushButton {{
        background-color: {c['bg_input']};
        color: {c['fg']};
        border: none;
        border-radius: 4px;
        padding: 6px 12px;
        min-height: 22px;
    }}
    QPushButton:hover {{
        background-color: {c['selection']};
    }}
    QPushButton:checked {{
        background-color: {c['accent']};
        color: {c['fg_bright']};
    }}
    QPushButton#uploadButton {{
        background-color: {c['accent']};
        color: {c['fg_bright']};
    }}
    QPushButton#uploadButton:hover {{
        background-color: {c['accent_hover']};
    }}
    QComboBox {{
        background-color: {c['bg_input']};
        color: {c['fg']};
        border: 1px solid {c['border']};
        border-radius: 4px;
        padding: 4px 8px;
        min-height: 22px;
    }}
    QComboBox QAbstractItemView {{
        background-color: {c['bg_input']};
        color: {c['fg']};
        selection-background-color: {c['selection']};
    }}
    QTableWidget {{
        background-color: {c['bg_input']};
        color: {c['fg']};
        gridline-color: {c['border']};
        border: none;
        border-radius: 4px;
        font-size: 11px;
    }}
    QHeaderView::section {{
        background-color: {c['bg_input']};
        color: {c['fg']};
        border: none;
        border-bottom: 1px solid {c['border']};
        padding: 2px 4px;
        font-weight: bold;
    }}
    QLabel#errorLabel {{
        background-color: {c['error_bg']};
        border: 1px solid {c['error_border']};
        border-radius: 4px;
        color: {c['error_fg']};
        padding: 8px;
    }}
    QLabel#dimLabel {{
        color: {c['fg_dim']};
    }}
    QStatusBar, QMenuBar {{
        background-color: {c['bg_alt']};
        color: {c['fg_dim']};
    }}
    QMenu {{
        background-color: {c['bg_alt']};
        color: {c['fg']};
        border: 1px solid {c['border']};
    }}
    QMenu::item:selected, QMenuBar::item:selected {{
        background-color: {c['selection']};
    }}
    QSplitter::handle {{
        background-color: {c['border']};
    }}
    """


def apply_plot_style(style_dict: dict) -> None:
    """Apply a style dictionary to matplotlib rcParams.

    Parameters
    ----------
    style_dict : dict
        One of ``PLOT_STYLE_DARK`` or ``PLOT_STYLE_LIGHT``.
    """
    import matplotlib as mpl
    for key, value in style_dict.items():
        mpl.rcParams[key] = value
