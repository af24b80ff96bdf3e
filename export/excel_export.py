"""Excel-Export für Statistik, Verlauf und Gruppen (openpyxl)."""

from pathlib import Path

from config.schema import RollCallConfig
from roster.session import RollCallSession

from export.helpers import COLORS, row_color, today_str
from export.tui_renderer import (
    GROUP_HEADERS, HISTORY_HEADERS, STATS_HEADERS,
    render_group_rows, render_history_rows, render_stats_rows,
)


class ExcelExporter:
    """Exportiert den Zustand einer RollCallSession in eine Excel-Datei.

    Blätter: Statistik, Verlauf (neueste zuerst), Gruppen.
    """

    # Spaltenbreiten (Excel-Einheiten)
    COL_WIDTHS = {
        "Statistik": [24, 18, 10],
        "Verlauf":   [22, 18, 24],
        "Gruppen":   [24, 10],
    }
    ROW_HEADER_H = 22

    def __init__(self, session: RollCallSession, config: RollCallConfig):
        self.session = session
        self.config = config

    # ─── Öffentliche API ──────────────────────────────────────────────────────

    def export(self, output_path: Path) -> None:
        """Erstellt die Excel-Datei mit allen Blättern."""
        from openpyxl import Workbook
        wb = Workbook()
        wb.remove(wb.active)   # Leeres Standard-Sheet entfernen

        self._sheet_statistik(wb)
        self._sheet_verlauf(wb)
        self._sheet_gruppen(wb)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(output_path)

    # ─── Style-Helpers ────────────────────────────────────────────────────────

    def _fill(self, hex_color: str):
        from openpyxl.styles import PatternFill
        return PatternFill(start_color=hex_color, end_color=hex_color, fill_type="solid")

    def _thin_border(self):
        from openpyxl.styles import Border, Side
        s = Side(border_style="thin", color="BBBBBB")
        return Border(left=s, right=s, top=s, bottom=s)

    def _write_table(self, ws, headers: list[str], rows: list[list[str]],
                     start_row: int = 1) -> int:
        """Schreibt Kopfzeile + Zeilen; gibt die letzte belegte Zeile zurück."""
        from openpyxl.styles import Alignment, Font
        from openpyxl.utils import get_column_letter

        for col, width in enumerate(self.COL_WIDTHS.get(ws.title, []), 1):
            ws.column_dimensions[get_column_letter(col)].width = width

        border = self._thin_border()
        header_fill = self._fill(COLORS["header"])
        for col, text in enumerate(headers, 1):
            cell = ws.cell(row=start_row, column=col, value=text)
            cell.fill = header_fill
            cell.font = Font(bold=True, color="FFFFFF", size=10)
            cell.alignment = Alignment(horizontal="center", vertical="center")
            cell.border = border
        ws.row_dimensions[start_row].height = self.ROW_HEADER_H

        alt_fill = self._fill(COLORS["row_alt"])
        row_idx = start_row
        for i, row in enumerate(rows):
            row_idx += 1
            for col, value in enumerate(row, 1):
                cell = ws.cell(row=row_idx, column=col, value=value)
                cell.border = border
                cell.font = Font(size=10)
                if i % 2 == 1:
                    cell.fill = alt_fill
        ws.freeze_panes = f"A{start_row + 1}"
        return row_idx

    # ─── Blätter ──────────────────────────────────────────────────────────────

    def _sheet_statistik(self, wb) -> None:
        ws = wb.create_sheet("Statistik")
        students = self.session.stats_snapshot()
        rows = render_stats_rows(students)
        # Aufrufe als Zahl, damit Excel sortieren/summieren kann
        for row, s in zip(rows, students):
            row[2] = s.call_count
        last = self._write_table(ws, STATS_HEADERS, rows)

        # Überschreibt die Zebra-Streifen aus _write_table
        max_count = max((s.call_count for s in students), default=0)
        for offset, s in enumerate(students):
            color = row_color(s.call_count, max_count)
            if color:
                for col in range(1, len(STATS_HEADERS) + 1):
                    ws.cell(row=2 + offset, column=col).fill = self._fill(color)

        ws.cell(row=last + 2, column=1,
                value=f"{self.config.export.title} – Stand {today_str()}")

    def _sheet_verlauf(self, wb) -> None:
        ws = wb.create_sheet("Verlauf")
        records = self.session.recent_history(0)
        rows = render_history_rows(records, self.config.timestamp_format)
        self._write_table(ws, HISTORY_HEADERS, rows)

    def _sheet_gruppen(self, wb) -> None:
        ws = wb.create_sheet("Gruppen")
        rows = render_group_rows(self.session.group_counts())
        for row in rows:
            row[1] = int(row[1])
        self._write_table(ws, GROUP_HEADERS, rows)
