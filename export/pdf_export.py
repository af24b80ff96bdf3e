"""PDF-Bericht mit Statistik und Verlauf (fpdf2)."""

from pathlib import Path

from config.schema import RollCallConfig
from roster.session import RollCallSession

from export.helpers import COLORS, hex_to_rgb, row_color, today_str
from export.tui_renderer import (
    HISTORY_HEADERS, NO_HISTORY, NO_STUDENTS, STATS_HEADERS,
    render_history_rows, render_stats_rows,
)


def _pdf_safe(text: str) -> str:
    """Ersetzt nicht-latin-1-fähige Zeichen für fpdf2-Built-in-Fonts."""
    text = (
        text
        .replace("—", " - ")   # em dash
        .replace("–", "-")      # en dash
        .replace("→", "->")     # Pfeil
    )
    return text.encode("latin-1", errors="replace").decode("latin-1")


# ─── A4-Hochformat ────────────────────────────────────────────────────────────
# Nutzbare Breite (Margin 15 links+rechts): 180 mm

_STATS_COLS = [90, 60, 30]     # Name, Gruppe, Aufrufe
_HISTORY_COLS = [50, 60, 70]   # Zeitpunkt, Gruppe, Name
_ROW_H = 6                     # mm
_FONT_TITLE = 14               # pt
_FONT_HEADER = 9               # pt
_FONT_CONTENT = 9              # pt


class PdfExporter:
    """Exportiert Statistik und Verlauf einer Session als PDF."""

    def __init__(self, session: RollCallSession, config: RollCallConfig):
        self.session = session
        self.config = config

    def export(self, output_path: Path) -> None:
        from fpdf import FPDF

        title = self.config.export.title

        class _Pdf(FPDF):
            def footer(inner):
                inner.set_y(-14)
                inner.set_font("Helvetica", "I", 7)
                inner.cell(
                    0, 8,
                    f"{_pdf_safe(title)}  |  {today_str()}  |  "
                    f"Seite {inner.page_no()}/{{nb}}",
                    border=0, align="C",
                )

        pdf = _Pdf(orientation="P", unit="mm", format="A4")
        pdf.alias_nb_pages()
        pdf.set_auto_page_break(auto=True, margin=18)
        pdf.set_margins(left=15, top=15, right=15)
        pdf.add_page()

        pdf.set_font("Helvetica", "B", _FONT_TITLE)
        pdf.cell(0, 10, _pdf_safe(title), border=0, align="L")
        pdf.ln(14)

        students = self.session.stats_snapshot()
        self._section(pdf, "Statistik")
        if students:
            max_count = max(s.call_count for s in students)
            colors = [row_color(s.call_count, max_count) for s in students]
            self._table(pdf, STATS_HEADERS, render_stats_rows(students),
                        _STATS_COLS, colors)
        else:
            self._note(pdf, NO_STUDENTS)

        pdf.ln(6)
        records = self.session.recent_history(0)
        self._section(pdf, "Verlauf")
        if records:
            rows = render_history_rows(records, self.config.timestamp_format)
            self._table(pdf, HISTORY_HEADERS, rows, _HISTORY_COLS)
        else:
            self._note(pdf, NO_HISTORY)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        pdf.output(str(output_path))

    # ─── Zeichnen ─────────────────────────────────────────────────────────────

    def _section(self, pdf, text: str) -> None:
        pdf.set_font("Helvetica", "B", 11)
        pdf.cell(0, 8, _pdf_safe(text), border=0, align="L")
        pdf.ln(9)

    def _note(self, pdf, text: str) -> None:
        pdf.set_font("Helvetica", "I", _FONT_CONTENT)
        pdf.cell(0, _ROW_H, _pdf_safe(text), border=0, align="L")
        pdf.ln(_ROW_H)

    def _table(self, pdf, headers: list[str], rows: list[list[str]],
               widths: list[int], colors: list | None = None) -> None:
        r, g, b = hex_to_rgb(COLORS["header"])
        pdf.set_fill_color(r, g, b)
        pdf.set_text_color(255, 255, 255)
        pdf.set_font("Helvetica", "B", _FONT_HEADER)
        for text, w in zip(headers, widths):
            pdf.cell(w, _ROW_H + 1, _pdf_safe(text), border=1, align="C", fill=True)
        pdf.ln(_ROW_H + 1)

        pdf.set_text_color(0, 0, 0)
        pdf.set_font("Helvetica", "", _FONT_CONTENT)
        for i, row in enumerate(rows):
            color = colors[i] if colors else None
            if color:
                pdf.set_fill_color(*hex_to_rgb(color))
            for text, w in zip(row, widths):
                pdf.cell(w, _ROW_H, _pdf_safe(text)[:40], border=1, align="L",
                         fill=bool(color))
            pdf.ln(_ROW_H)
