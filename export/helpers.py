"""Gemeinsame Hilfsfunktionen für Konsole, Excel- und PDF-Export."""

from datetime import date, datetime

from config.defaults import TIMESTAMP_FORMAT

# ─── Farbpalette (RRGGBB, ohne #) ─────────────────────────────────────────────

COLORS: dict[str, str] = {
    "header":   "4472C4",
    "top":      "B3FFB3",   # Am häufigsten aufgerufen
    "never":    "FFB3B3",   # Noch nie aufgerufen
    "row_alt":  "F5F5F5",
}


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Wandelt RRGGBB-String in (r, g, b)-Tupel um."""
    h = hex_color.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def today_str() -> str:
    """Gibt das heutige Datum als DD.MM.YYYY zurück."""
    return date.today().strftime("%d.%m.%Y")


def format_timestamp(ts: datetime, fmt: str = TIMESTAMP_FORMAT) -> str:
    """Formatiert einen Verlaufs-Zeitstempel (Standard: "%F %T")."""
    return ts.strftime(fmt)


def row_color(call_count: int, max_count: int) -> str | None:
    """Hintergrundfarbe einer Statistikzeile (None = keine)."""
    if call_count == 0:
        return COLORS["never"]
    if call_count == max_count:
        return COLORS["top"]
    return None
