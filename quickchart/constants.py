"""
Constants for the QuickChart Data Dashboard.

Centralises projection limits, the chart palette, accepted file types,
the default-axis name pattern, GUI colours, matplotlib style dicts and
user-visible messages.
"""

import re

# ── Projection limits ────────────────────────────────────────────────────
MAX_DISPLAY_DATA = 100      # rows handed to any chart renderer
PIE_SLICE_LIMIT = 8         # entries shown in a pie chart

# ── Categorical chart palette (reused cyclically, index % 8) ────────────
CHART_PALETTE = [
    '#8884d8', '#82ca9d', '#ffc658', '#ff7f50',
    '#af19ff', '#ff3d67', '#00b0ff', '#00c49f',
]

# ── Accepted input files ─────────────────────────────────────────────────
CSV_EXTENSIONS = ('csv',)
EXCEL_EXTENSIONS = ('xlsx', 'xls')
SUPPORTED_EXTENSIONS = CSV_EXTENSIONS + EXCEL_EXTENSIONS
FILE_DIALOG_FILTER = (
    "Spreadsheets (*.csv *.xlsx *.xls);;"
    "CSV Files (*.csv);;"
    "Excel Files (*.xlsx *.xls);;"
    "All Files (*)"
)

# ── Default Y-axis preference (matched against lowercased names) ─────────
PREFERRED_Y_PATTERN = re.compile(r'amount|value|total|price|cost|sales')

# ── Data preview panel ───────────────────────────────────────────────────
PREVIEW_ROWS = 5
PREVIEW_COLUMNS = 3
PREVIEW_CELL_CHARS = 20
PREVIEW_MISSING = "N/A"

# ── User-visible messages ────────────────────────────────────────────────
ERROR_PREFIX = "Error processing file: "
NO_DATA_MESSAGE = "No valid data found in file"
PLACEHOLDER_NO_FILE = "Upload a file to visualize data"
PLACEHOLDER_NO_AXES = "Select valid X and Y axes to generate chart"

# ── Font family fallback chain ───────────────────────────────────────────
FONT_FAMILIES = [
    "Segoe UI", "DejaVu Sans", "Liberation Sans", "Noto Sans",
    "Helvetica", "Arial", "sans-serif",
]

# ── Dark GUI colour palette ──────────────────────────────────────────────
DARK_COLORS = {
    'bg':           '#111827',
    'bg_alt':       '#1f2937',
    'bg_widget':    '#1f2937',
    'bg_input':     '#374151',
    'border':       '#4b5563',
    'grid':         '#444444',
    'fg':           '#dddddd',
    'fg_dim':       '#9ca3af',
    'fg_bright':    '#ffffff',
    'accent':       '#2563eb',
    'accent_hover': '#1d4ed8',
    'error_bg':     '#3b1d24',
    'error_border': '#991b1b',
    'error_fg':     '#fca5a5',
    'selection':    '#4b5563',
}

# ── Export settings ──────────────────────────────────────────────────────
EXPORT_DPI = 300
EXPORT_FIGSIZE = (8, 5)
EXPORT_TEXT_COLOR = '#333333'

# ── Matplotlib dark-theme style dict (GUI preview) ──────────────────────
PLOT_STYLE_DARK = {
    'figure.facecolor':  DARK_COLORS['bg_alt'],
    'axes.facecolor':    DARK_COLORS['bg_alt'],
    'axes.edgecolor':    '#666666',
    'axes.labelcolor':   DARK_COLORS['fg'],
    'text.color':        DARK_COLORS['fg'],
    'xtick.color':       DARK_COLORS['fg'],
    'ytick.color':       DARK_COLORS['fg'],
    'xtick.labelsize':   8,
    'ytick.labelsize':   8,
    'axes.labelsize':    9,
    'axes.titlesize':    10,
    'legend.fontsize':   8,
    'grid.color':        DARK_COLORS['grid'],
    'legend.facecolor':  '#333333',
    'legend.edgecolor':  '#666666',
}

# ── Matplotlib light-theme style dict (PNG export) ──────────────────────
PLOT_STYLE_LIGHT = {
    'figure.facecolor':  '#ffffff',
    'axes.facecolor':    '#ffffff',
    'axes.edgecolor':    '#333333',
    'axes.labelcolor':   '#1a1a2e',
    'text.color':        '#1a1a2e',
    'xtick.color':       '#333333',
    'ytick.color':       '#333333',
    'xtick.labelsize':   8,
    'ytick.labelsize':   8,
    'axes.labelsize':    9,
    'axes.titlesize':    10,
    'legend.fontsize':   8,
    'grid.color':        '#cccccc',
    'legend.facecolor':  '#ffffff',
    'legend.edgecolor':  '#999999',
}
