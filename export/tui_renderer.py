"""Gemeinsamer Renderer für Tabellen-Zeilen.

Wird von der Rich-Konsole (main.py) und von Excel-/PDF-Export verwendet.
"""

from typing import TYPE_CHECKING, Iterable, Optional

from config.defaults import TIMESTAMP_FORMAT
from export.helpers import format_timestamp

if TYPE_CHECKING:
    from models.call_record import CallRecord
    from models.student import Student

STATS_HEADERS = ["Name", "Gruppe", "Aufrufe"]
HISTORY_HEADERS = ["Zeitpunkt", "Gruppe", "Name"]
GROUP_HEADERS = ["Gruppe", "Schüler"]

# "Keine Daten"-Texte
NO_HISTORY = "Noch kein Verlauf"
NO_STUDENTS = "Keine Schülerdaten"
NO_GROUPS = "Keine Gruppendaten"


def render_stats_rows(students: Iterable["Student"]) -> list[list[str]]:
    """[Name, Gruppe, Aufrufe] pro Schüler, Reihenfolge wie übergeben."""
    return [[s.name, s.group, str(s.call_count)] for s in students]


def render_history_rows(
    records: Iterable["CallRecord"],
    fmt: str = TIMESTAMP_FORMAT,
) -> list[list[str]]:
    """[Zeitpunkt, Gruppe, Name] pro Aufruf, Reihenfolge wie übergeben."""
    return [
        [format_timestamp(r.timestamp, fmt), r.group, r.name]
        for r in records
    ]


def render_group_rows(counts: Optional[dict[str, int]]) -> list[list[str]]:
    """[Gruppe, Anzahl] pro Gruppe, alphabetisch. None → keine Zeilen."""
    if not counts:
        return []
    return [[group, str(n)] for group, n in sorted(counts.items())]
