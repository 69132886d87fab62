"""
Tests for the export_rate_sheets script

Run with: pytest rate_sheets/tests/ -v
"""

from pathlib import Path

import pytest

import rate_sheets.scripts.export_rate_sheets as script
from rate_sheets.sheets import SheetData


SHEETS = [
    SheetData("Domestic Ground Rates", [["Start Weight", "End Weight", "Zone 1"], ["0", 1.0, 5.0]]),
]


@pytest.fixture
def calls(monkeypatch):
    calls = {}

    def fake_generate(client_id, max_workers, zero_fill):
        calls["generate"] = dict(client_id=client_id, max_workers=max_workers, zero_fill=zero_fill)
        return SHEETS

    def fake_export(sheets, path, fmt):
        calls["export"] = dict(sheets=sheets, path=path, fmt=fmt)

    monkeypatch.setattr(script, "generate_rate_sheets", fake_generate)
    monkeypatch.setattr(script, "export_sheets", fake_export)
    monkeypatch.setattr(script, "close_connection", lambda: calls.setdefault("closed", True))
    return calls


class TestArguments:

    def test_defaults(self):
        args = script.build_parser().parse_args([])
        assert args.client_id == 1240
        assert args.fmt == "xlsx"
        assert args.workers == 4
        assert args.sparse is False
        assert args.out is None

    def test_unknown_format_rejected(self):
        with pytest.raises(SystemExit):
            script.build_parser().parse_args(["--format", "pdf"])


class TestMain:

    def test_export(self, calls, tmp_path):
        out = tmp_path / "rates.xlsx"
        script.main(["--client-id", "77", "--out", str(out), "--workers", "2", "--sparse"])

        assert calls["generate"] == dict(client_id=77, max_workers=2, zero_fill=False)
        assert calls["export"] == dict(sheets=SHEETS, path=out, fmt="xlsx")
        assert calls["closed"] is True

    def test_default_output(self, calls):
        script.main(["--format", "csv"])
        assert calls["export"]["path"] == script.default_output_path("csv", 1240)
        assert calls["export"]["fmt"] == "csv"

    def test_dry_run_writes_nothing(self, calls, capsys):
        script.main(["--dry-run"])
        assert "export" not in calls
        assert "[DRY RUN] Would write to:" in capsys.readouterr().out

    def test_error_reraised(self, calls, monkeypatch, capsys):
        def failing_generate(**kwargs):
            raise RuntimeError("Error executing query: boom")

        monkeypatch.setattr(script, "generate_rate_sheets", failing_generate)
        with pytest.raises(RuntimeError):
            script.main([])
        assert "Error: Error executing query: boom" in capsys.readouterr().out
        assert calls["closed"] is True

    def test_out_is_path(self, calls):
        script.main(["--out", "somewhere.xlsx"])
        assert calls["export"]["path"] == Path("somewhere.xlsx")
