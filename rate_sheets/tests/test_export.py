"""
Tests for Rate Sheet Export

Run with: pytest rate_sheets/tests/ -v
"""

import pandas as pd
import polars as pl
import pytest

from rate_sheets.export import csv_file_name, excel_sheet_names, export_sheets
from rate_sheets.sheets import SheetData


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def sheets() -> list[SheetData]:
    return [
        SheetData(
            name="Domestic Ground Rates",
            rows=[
                ["Start Weight", "End Weight", "Zone 1", "Zone 2"],
                ["0", 1.0, 5.0, 7.0],
                ["1", 2.0, 6.0, 0.0],
            ],
        ),
        SheetData(
            name="International Ground Rates",
            rows=[
                ["Start Weight", "End Weight", "Zone 9"],
                ["0", 2.0, 22.5],
            ],
        ),
    ]


@pytest.fixture
def sparse_sheet() -> SheetData:
    """Second row never saw Zone 2."""
    return SheetData(
        name="Domestic Express Rates",
        rows=[
            ["Start Weight", "End Weight", "Zone 1", "Zone 2"],
            ["0", 1.0, 5.0, 7.0],
            ["1", 2.0, 6.0],
        ],
    )


# =============================================================================
# NAMING
# =============================================================================

class TestNaming:
    """Excel tab names and CSV file names."""

    def test_valid_names_unchanged(self):
        names = ["Domestic Ground Rates", "International Ground Rates"]
        assert excel_sheet_names(names) == names

    def test_invalid_characters_removed(self):
        assert excel_sheet_names(["Domestic [2/3] Rates?"]) == ["Domestic 23 Rates"]

    def test_truncated_to_31(self):
        (name,) = excel_sheet_names(["International Express Saver Rates"])
        assert name == "International Express Saver Rat"
        assert len(name) == 31

    def test_duplicates_suffixed(self):
        names = excel_sheet_names(["Domestic Ground Rates", "domestic ground rates", "Domestic Ground Rates"])
        assert names == ["Domestic Ground Rates", "domestic ground rates (2)", "Domestic Ground Rates (3)"]

    def test_empty_name(self):
        assert excel_sheet_names([""]) == ["Sheet"]

    def test_csv_file_name(self):
        assert csv_file_name("International Ground Rates") == "international_ground_rates.csv"


# =============================================================================
# XLSX
# =============================================================================

class TestXlsx:
    """One workbook, one tab per sheet."""

    def test_tabs_in_order(self, sheets, tmp_path):
        path = tmp_path / "rates.xlsx"
        assert export_sheets(sheets, path, verbose=False) == [path]

        tabs = pd.read_excel(path, sheet_name=None)
        assert list(tabs) == ["Domestic Ground Rates", "International Ground Rates"]

    def test_tab_contents(self, sheets, tmp_path):
        path = tmp_path / "rates.xlsx"
        export_sheets(sheets, path, verbose=False)

        df = pd.read_excel(path, sheet_name="Domestic Ground Rates", dtype={"Start Weight": str})
        assert list(df.columns) == ["Start Weight", "End Weight", "Zone 1", "Zone 2"]
        assert df["Start Weight"].tolist() == ["0", "1"]
        assert df["Zone 2"].tolist() == [7.0, 0.0]

    def test_sparse_row_left_blank(self, sparse_sheet, tmp_path):
        path = tmp_path / "rates.xlsx"
        export_sheets([sparse_sheet], path, verbose=False)

        df = pd.read_excel(path)
        assert df["Zone 1"].tolist() == [5.0, 6.0]
        assert pd.isna(df["Zone 2"][1])

    def test_header_only_sheet(self, tmp_path):
        path = tmp_path / "nested" / "rates.xlsx"
        export_sheets([SheetData("Empty Rates", [["Start Weight", "End Weight"]])], path, verbose=False)

        df = pd.read_excel(path)
        assert list(df.columns) == ["Start Weight", "End Weight"]
        assert len(df) == 0


# =============================================================================
# CSV
# =============================================================================

class TestCsv:
    """One file per sheet."""

    def test_files(self, sheets, tmp_path):
        paths = export_sheets(sheets, tmp_path, fmt="csv", verbose=False)
        assert [p.name for p in paths] == [
            "domestic_ground_rates.csv",
            "international_ground_rates.csv",
        ]

    def test_contents(self, sheets, tmp_path):
        export_sheets(sheets, tmp_path, fmt="csv", verbose=False)

        df = pl.read_csv(tmp_path / "domestic_ground_rates.csv", schema_overrides={"Start Weight": pl.Utf8})
        assert df.columns == ["Start Weight", "End Weight", "Zone 1", "Zone 2"]
        assert df.rows() == [("0", 1.0, 5.0, 7.0), ("1", 2.0, 6.0, 0.0)]

    def test_duplicate_names(self, sheets, tmp_path):
        paths = export_sheets([sheets[0], sheets[0]], tmp_path, fmt="csv", verbose=False)
        assert [p.name for p in paths] == [
            "domestic_ground_rates.csv",
            "domestic_ground_rates_2.csv",
        ]

    def test_sparse_row_padded(self, sparse_sheet, tmp_path):
        (path,) = export_sheets([sparse_sheet], tmp_path, fmt="csv", verbose=False)
        df = pl.read_csv(path)
        assert df["Zone 2"].to_list() == [7.0, None]


# =============================================================================
# ERRORS
# =============================================================================

class TestErrors:

    def test_unknown_format(self, sheets, tmp_path):
        with pytest.raises(ValueError, match="fmt must be one of"):
            export_sheets(sheets, tmp_path / "rates.pdf", fmt="pdf")

    def test_progress_output(self, sheets, tmp_path, capsys):
        export_sheets(sheets, tmp_path / "rates.xlsx")
        out = capsys.readouterr().out
        assert "Writing 2 sheet(s) as xlsx" in out
