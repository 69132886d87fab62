"""
Export Rate Sheets

Writes assembled sheets to disk.

Formats:
    xlsx    One workbook, one tab per sheet (pandas + openpyxl)
    csv     One CSV file per sheet in a directory (polars)
"""

import re
from pathlib import Path
from typing import Sequence

import pandas as pd
import polars as pl

from .sheets import SheetData


FORMATS = ("xlsx", "csv")

EXCEL_ENGINE = "openpyxl"
EXCEL_MAX_SHEET_NAME = 31
EXCEL_INVALID_CHARS = re.compile(r"[\[\]:*?/\\]")


# =============================================================================
# NAMING
# =============================================================================

def excel_sheet_names(names: Sequence[str]) -> list[str]:
    """
    Make sheet titles valid, unique Excel tab names.

    Excel rejects []:*?/\\ and names over 31 characters, and tab names are
    case-insensitive. Collisions get a " (2)", " (3)", ... suffix.
    """
    used: set[str] = set()
    result = []

    for name in names:
        base = EXCEL_INVALID_CHARS.sub("", name).strip() or "Sheet"
        candidate = base[:EXCEL_MAX_SHEET_NAME]
        counter = 2
        while candidate.lower() in used:
            suffix = f" ({counter})"
            candidate = base[:EXCEL_MAX_SHEET_NAME - len(suffix)] + suffix
            counter += 1
        used.add(candidate.lower())
        result.append(candidate)

    return result


def csv_file_name(name: str) -> str:
    """'Domestic Ground Rates' -> 'domestic_ground_rates.csv'"""
    slug = re.sub(r"[^0-9a-z]+", "_", name.lower()).strip("_")
    return f"{slug or 'sheet'}.csv"


def _padded_rows(sheet: SheetData) -> list[list]:
    """Data rows padded with None to the header width."""
    width = len(sheet.header)
    return [row + [None] * (width - len(row)) for row in sheet.data_rows]


# =============================================================================
# WRITERS
# =============================================================================

def write_xlsx(sheets: Sequence[SheetData], path: Path) -> Path:
    """Write all sheets to one workbook, in order."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    tab_names = excel_sheet_names([sheet.name for sheet in sheets])

    with pd.ExcelWriter(path, engine=EXCEL_ENGINE) as writer:
        for sheet, tab_name in zip(sheets, tab_names):
            df = pd.DataFrame(_padded_rows(sheet), columns=sheet.header)
            df.to_excel(writer, sheet_name=tab_name, index=False)

    return path


def write_csv(sheets: Sequence[SheetData], directory: Path) -> list[Path]:
    """Write each sheet to <directory>/<slug>.csv."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    paths = []
    used: set[str] = set()
    for sheet in sheets:
        file_name = csv_file_name(sheet.name)
        counter = 2
        while file_name in used:
            file_name = csv_file_name(f"{sheet.name} {counter}")
            counter += 1
        used.add(file_name)

        df = pl.DataFrame(
            _padded_rows(sheet),
            schema=[str(h) for h in sheet.header],
            orient="row",
            infer_schema_length=None,
        )
        out = directory / file_name
        df.write_csv(out)
        paths.append(out)

    return paths


def export_sheets(
    sheets: Sequence[SheetData],
    path: Path,
    fmt: str = "xlsx",
    verbose: bool = True,
) -> list[Path]:
    """
    Export sheets in the given format.

    Args:
        sheets: Assembled sheets, in tab order
        path: Workbook path for xlsx, output directory for csv
        fmt: Format token, one of FORMATS
        verbose: If True, print progress messages

    Returns:
        Paths written

    Raises:
        ValueError: If fmt is not a known format
    """
    if fmt not in FORMATS:
        raise ValueError(f"fmt must be one of {', '.join(FORMATS)}, got '{fmt}'")

    if verbose:
        print(f"Writing {len(sheets)} sheet(s) as {fmt} to {path}...")

    if fmt == "xlsx":
        paths = [write_xlsx(sheets, path)]
    else:
        paths = write_csv(sheets, path)

    if verbose:
        for p in paths:
            print(f"  Wrote {p}")

    return paths
