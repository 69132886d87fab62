"""
Rate Sheets

Exports a client's shipping rates as weight x zone spreadsheet tabs, one
tab per (locale, shipping_speed) group.

    from rate_sheets import generate_rate_sheets, export_sheets
    sheets = generate_rate_sheets()
    export_sheets(sheets, "rates.xlsx")
"""

from .export import export_sheets
from .pipeline import generate_rate_sheets, run
from .pivot import RatePivot, pivot_rates
from .records import RateRecord, records_from_frame
from .sheets import SheetData, build_sheet, enumerate_sheet_keys, sheet_title
from .version import VERSION

__all__ = [
    "export_sheets",
    "generate_rate_sheets",
    "run",
    "RatePivot",
    "pivot_rates",
    "RateRecord",
    "records_from_frame",
    "SheetData",
    "build_sheet",
    "enumerate_sheet_keys",
    "sheet_title",
    "VERSION",
]
