"""Tests für Tabellen-Renderer sowie Excel- und PDF-Export."""

import random
from datetime import datetime, timedelta
from pathlib import Path

from config.defaults import default_config
from export.excel_export import ExcelExporter
from export.helpers import COLORS, format_timestamp, hex_to_rgb, row_color
from export.pdf_export import PdfExporter
from export.tui_renderer import (
    render_group_rows,
    render_history_rows,
    render_stats_rows,
)
from roster.session import RollCallSession


# ─── Testdaten-Hilfsfunktionen ────────────────────────────────────────────────

def _make_session() -> RollCallSession:
    ticks = iter(datetime(2024, 5, 1, 8, 0, 0) + timedelta(minutes=i) for i in range(100))
    session = RollCallSession(rng=random.Random(3), clock=lambda: next(ticks))
    session.import_lines(["Alice,Mathe", "Bob,Bio", "Carl,Mathe", "Jörg,Bio"])
    for _ in range(3):
        session.pick_random("Mathe")
    session.pick_random("Bio")
    return session


# ─── HELPERS ──────────────────────────────────────────────────────────────────

class TestHelpers:
    def test_format_timestamp_default(self):
        assert format_timestamp(datetime(2024, 5, 1, 8, 3, 9)) == "2024-05-01 08:03:09"

    def test_hex_to_rgb(self):
        assert hex_to_rgb(COLORS["header"]) == (0x44, 0x72, 0xC4)

    def test_row_color(self):
        assert row_color(0, 3) == COLORS["never"]
        assert row_color(3, 3) == COLORS["top"]
        assert row_color(1, 3) is None


# ─── RENDERER ─────────────────────────────────────────────────────────────────

class TestRenderer:
    def test_stats_rows_follow_snapshot_order(self):
        session = _make_session()
        rows = render_stats_rows(session.stats_snapshot())
        assert len(rows) == 4
        assert [int(r[2]) for r in rows] == sorted((int(r[2]) for r in rows), reverse=True)
        assert sum(int(r[2]) for r in rows) == 4

    def test_history_rows_newest_first(self):
        session = _make_session()
        rows = render_history_rows(session.recent_history())
        assert rows[0][0] == "2024-05-01 08:03:00"
        assert rows[0][1] == "Bio"
        assert rows[-1][0] == "2024-05-01 08:00:00"

    def test_group_rows_sorted(self):
        assert render_group_rows({"Mathe": 2, "Bio": 1}) == [["Bio", "1"], ["Mathe", "2"]]

    def test_group_rows_no_data(self):
        assert render_group_rows(None) == []


# ─── EXCEL ────────────────────────────────────────────────────────────────────

class TestExcelExport:
    def test_workbook_sheets_and_content(self, tmp_path: Path):
        from openpyxl import load_workbook

        session = _make_session()
        out = tmp_path / "bericht.xlsx"
        ExcelExporter(session, default_config()).export(out)
        assert out.exists()

        wb = load_workbook(out)
        assert wb.sheetnames == ["Statistik", "Verlauf", "Gruppen"]

        ws = wb["Statistik"]
        assert [c.value for c in ws[1]] == ["Name", "Gruppe", "Aufrufe"]
        counts = [ws.cell(row=r, column=3).value for r in range(2, 6)]
        assert counts == sorted(counts, reverse=True)
        assert sum(counts) == 4

        ws = wb["Verlauf"]
        assert ws.max_row == 5   # Kopfzeile + 4 Aufrufe

        ws = wb["Gruppen"]
        assert [ws.cell(row=2, column=c).value for c in (1, 2)] == ["Bio", 2]

    def test_alternating_rows_shaded(self, tmp_path: Path):
        from openpyxl import load_workbook

        out = tmp_path / "bericht.xlsx"
        ExcelExporter(_make_session(), default_config()).export(out)
        ws = load_workbook(out)["Verlauf"]
        assert ws.cell(row=2, column=1).fill.fill_type is None
        for r in (3, 5):
            for c in (1, 2, 3):
                assert ws.cell(row=r, column=c).fill.start_color.rgb.endswith(COLORS["row_alt"])
        assert ws.cell(row=4, column=1).fill.fill_type is None

    def test_empty_session(self, tmp_path: Path):
        from openpyxl import load_workbook

        out = tmp_path / "leer.xlsx"
        ExcelExporter(RollCallSession(seed=1), default_config()).export(out)
        wb = load_workbook(out)
        assert wb["Verlauf"].max_row == 1


# ─── PDF ──────────────────────────────────────────────────────────────────────

class TestPdfExport:
    def test_pdf_written(self, tmp_path: Path):
        out = tmp_path / "sub" / "bericht.pdf"
        PdfExporter(_make_session(), default_config()).export(out)
        assert out.exists()
        assert out.read_bytes().startswith(b"%PDF")

    def test_pdf_empty_session(self, tmp_path: Path):
        out = tmp_path / "leer.pdf"
        PdfExporter(RollCallSession(seed=1), default_config()).export(out)
        assert out.read_bytes().startswith(b"%PDF")
