"""RollCallSession: Besitzer des gesamten Laufzeit-Zustands.

Kursbuch, Aufruf-Pools, Verlauf und Zufallsquelle gehören genau einer
Session. Der Treiber (main.py) ruft ausschließlich die öffentlichen Methoden
dieser Klasse auf. Alles läuft synchron in einem Thread.
"""

import logging
import random
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from data.roster_import import import_lines as import_roster_lines, read_roster_lines
from models.call_record import CallRecord
from models.import_stats import ImportStats
from models.student import Student
from roster.history import HistoryLog
from roster.pool import SamplingPools
from roster.store import RosterStore

logger = logging.getLogger(__name__)


class RollCallSession:
    """Zufallsaufruf ohne Wiederholung innerhalb eines Durchgangs.

    Args:
        rng:   Zufallsquelle. Wenn None, wird random.Random(seed) erzeugt.
        seed:  Seed für reproduzierbare Reihenfolgen (nur ohne rng).
        clock: Liefert die aktuelle Uhrzeit für neue CallRecords.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        self.roster = RosterStore()
        self.pools = SamplingPools(self.rng)
        self.history = HistoryLog()
        self._clock = clock

    # ─── Kursbuch ───

    def add_student(self, name: str, group: str) -> bool:
        """Fügt einen Schüler hinzu.

        False (ohne Änderung), wenn der Name schon existiert oder Name bzw.
        Gruppe nach dem Trimmen leer sind. Ein neuer Schüler beendet alle
        laufenden Durchgänge.
        """
        try:
            added = self.roster.add(name, group)
        except ValueError as e:
            logger.info(f"Schüler abgelehnt ({name!r}, {group!r}): {e}")
            return False
        if not added:
            logger.info(f"Schüler bereits vorhanden: {name.strip()}")
            return False
        self.reset_cycle()
        return True

    def import_lines(self, lines: Iterable[str]) -> ImportStats:
        """Importiert bereits gelesene Zeilen und startet neue Durchgänge."""
        stats = import_roster_lines(self.roster, lines)
        self.reset_cycle()
        logger.info(f"Import: {stats.summary()}")
        return stats

    def import_from_source(self, path: Union[str, Path]) -> ImportStats:
        """Importiert eine "Name,Gruppe"-Datei.

        Raises:
            RosterImportError: Datei nicht lesbar; Kursbuch und Pools bleiben
                unverändert.
        """
        lines = read_roster_lines(path)
        logger.info(f"Importiere {path}")
        return self.import_lines(lines)

    # ─── Aufrufen ───

    def pick_random(self, group: Optional[str] = None) -> Optional[Student]:
        """Ruft zufällig einen Schüler auf (global oder nur aus `group`).

        Gibt None zurück, wenn niemand wählbar ist; dann wird weder der
        Zähler erhöht noch ein Verlaufseintrag angelegt.
        """
        position = self.pools.draw(self.roster, group)
        if position is None:
            return None

        student = self.roster.increment(position)
        self.history.record(CallRecord(
            name=student.name,
            group=student.group,
            timestamp=self._next_timestamp(),
        ))
        return student

    def reset_cycle(self) -> None:
        """Startet alle Durchgänge neu. Zähler und Verlauf bleiben erhalten."""
        self.pools.reset()

    def remaining_in_cycle(self, group: Optional[str] = None) -> int:
        return self.pools.remaining(group)

    # ─── Abfragen ───

    def recent_history(self, limit: Optional[int] = 0) -> list[CallRecord]:
        """Verlauf, neueste Einträge zuerst. limit 0 oder negativ = alle."""
        return list(self.history.most_recent(limit))

    def stats_snapshot(self) -> list[Student]:
        return self.roster.stats_snapshot()

    def group_counts(self) -> Optional[dict[str, int]]:
        """Gruppe → Anzahl; None bei leerem Kursbuch."""
        return self.roster.group_counts()

    def clear_history(self) -> None:
        self.history.clear()
        logger.info("Verlauf gelöscht")

    # ─── Intern ───

    def _next_timestamp(self) -> datetime:
        # Verlauf bleibt monoton, auch wenn die Systemuhr zurückspringt
        now = self._clock()
        last = self.history.last
        if last is not None and now < last.timestamp:
            return last.timestamp
        return now
