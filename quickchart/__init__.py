"""
QuickChart Data Dashboard v1.0.0

Desktop dashboard that turns a CSV or Excel file into an interactive
bar, line or pie chart built from two selected columns, with basic
descriptive statistics for the value column.

Reads ``.csv``, ``.xlsx`` and ``.xls`` files (first sheet only) and
renders up to 100 rows, sorted by the selected value column.
"""

APP_NAME = "QuickChart Data Dashboard"
APP_VERSION = "1.0.0"
APP_DATE = "2026-10-18"
__version__ = APP_VERSION
