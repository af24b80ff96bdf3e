"""Roster-Import aus Textdateien im Format "Name,Gruppe" (eine Zeile pro Schüler).

Regeln:
  - Leere Zeilen und Zeilen, die (nach Leerraum) mit '#' beginnen, werden
    stillschweigend übersprungen.
  - Getrennt wird am ERSTEN Komma; Name und Gruppe werden getrimmt.
  - Kein Komma, leerer Name oder leere Gruppe → fehlerhafte Zeile.
  - Bereits bekannter Name → Duplikat (der erste Eintrag gewinnt).

Kein allgemeiner CSV-Dialekt: Kommas innerhalb eines Feldes lassen sich
nicht maskieren.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional, Union

from models.import_stats import ImportStats

if TYPE_CHECKING:
    from roster.store import RosterStore

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\r\n"


class RosterImportError(Exception):
    """Importquelle konnte nicht geöffnet oder gelesen werden."""


class MalformedRecord(ValueError):
    """Eine einzelne Importzeile ist fehlerhaft."""


def parse_roster_line(line: str) -> Optional[tuple[str, str]]:
    """Parst eine Zeile → (name, gruppe).

    Gibt None für Leer- und Kommentarzeilen zurück.

    Raises:
        MalformedRecord: Kein Komma, leerer Name oder leere Gruppe.
    """
    trimmed = line.strip(_WHITESPACE)
    if not trimmed or trimmed.startswith("#"):
        return None
    if "," not in trimmed:
        raise MalformedRecord(f"Kein Komma: {trimmed!r}")
    name, _, group = trimmed.partition(",")
    name = name.strip(_WHITESPACE)
    group = group.strip(_WHITESPACE)
    if not name or not group:
        raise MalformedRecord(f"Name oder Gruppe leer: {trimmed!r}")
    return name, group


def import_lines(store: RosterStore, lines: Iterable[str]) -> ImportStats:
    """Übernimmt alle gültigen Zeilen ins Kursbuch (Bulk-Modus).

    Setzt die Aufruf-Pools NICHT zurück; das erledigt der Aufrufer einmalig
    nach dem Import (RollCallSession.import_from_source).
    """
    stats = ImportStats()
    for line_no, line in enumerate(lines, start=1):
        try:
            parsed = parse_roster_line(line)
        except MalformedRecord as e:
            stats.malformed += 1
            stats.malformed_lines.append(line_no)
            logger.debug(f"Zeile {line_no} übersprungen: {e}")
            continue
        if parsed is None:
            continue

        name, group = parsed
        if store.add(name, group):
            stats.added += 1
        else:
            stats.duplicates += 1
    return stats


def _decode(raw: bytes, path: Path) -> str:
    """UTF-8 (mit oder ohne BOM) zuerst, sonst Windows-1252 bzw. Latin-1.

    Aus Excel exportierte Kurslisten sind häufig cp1252-kodiert.
    """
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass
    try:
        text, encoding = raw.decode("cp1252"), "cp1252"
    except UnicodeDecodeError:
        # Latin-1 bildet jedes Byte ab
        text, encoding = raw.decode("latin-1"), "latin-1"
    logger.info(f"{path} ist nicht UTF-8-kodiert, gelesen als {encoding}")
    return text


def read_roster_lines(path: Union[str, Path]) -> list[str]:
    """Liest die Importdatei vollständig ein.

    Die Datei wird komplett gelesen, bevor irgendetwas ins Kursbuch
    übernommen wird; ein Lesefehler lässt den Zustand unverändert.
    Nicht UTF-8-kodierte Dateien werden als cp1252 (notfalls Latin-1)
    gelesen statt abgelehnt.

    Raises:
        RosterImportError: Datei fehlt, ist ein Verzeichnis oder ist nicht
            lesbar.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        raise RosterImportError(f"Datei nicht gefunden: {path}")
    except OSError as e:
        raise RosterImportError(f"Fehler beim Öffnen der Datei: {path} ({e})") from e
    # Nur an "\n" trennen; ein "\r" am Zeilenende wird beim Trimmen entfernt
    return _decode(raw, path).split("\n")
