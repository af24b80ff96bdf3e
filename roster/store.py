"""Kursbuch (Roster): Menge aller bekannten Schüler und ihrer Aufruf-Zähler."""

import logging
from typing import Optional

from models.student import Student

logger = logging.getLogger(__name__)


class RosterStore:
    """Hält alle Schüler in stabiler Reihenfolge.

    Einträge werden nur angehängt, nie entfernt. Die Position eines Schülers
    in der Liste ist deshalb ein stabiler Bezeichner, auf den sich die
    Aufruf-Pools (roster.pool) beziehen.
    """

    def __init__(self) -> None:
        self._students: list[Student] = []
        self._index: dict[str, int] = {}   # Name → Position

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, name: str) -> bool:
        return name in self._index

    # ─── Ändern ───

    def add(self, name: str, group: str) -> bool:
        """Hängt einen neuen Schüler mit call_count=0 an.

        Gibt False zurück (ohne Änderung), wenn der Name bereits existiert.
        Die Pools werden hier NICHT invalidiert, das ist Aufgabe der Session.
        """
        student = Student(name=name, group=group)
        if student.name in self._index:
            return False
        self._index[student.name] = len(self._students)
        self._students.append(student)
        logger.debug(f"Schüler angelegt: {student.label}")
        return True

    def increment(self, position: int) -> Student:
        """Erhöht den Aufruf-Zähler und gibt eine Momentaufnahme zurück."""
        student = self._students[position]
        student.call_count += 1
        return student.model_copy()

    # ─── Abfragen ───

    def find(self, name: str) -> Optional[Student]:
        """Sucht einen Schüler per exaktem Namen."""
        position = self._index.get(name)
        if position is None:
            return None
        return self._students[position].model_copy()

    def positions(self, group: Optional[str] = None) -> list[int]:
        """Positionen aller Schüler, optional beschränkt auf eine Gruppe."""
        return [
            i for i, s in enumerate(self._students)
            if group is None or s.group == group
        ]

    def group_counts(self) -> Optional[dict[str, int]]:
        """Gruppe → Anzahl Mitglieder, in Reihenfolge des ersten Auftretens.

        Bei leerem Kursbuch None ("keine Daten"), nicht ein leeres Dict.
        """
        if not self._students:
            return None
        counts: dict[str, int] = {}
        for s in self._students:
            counts[s.group] = counts.get(s.group, 0) + 1
        return counts

    def stats_snapshot(self) -> list[Student]:
        """Kopien aller Schüler, absteigend nach call_count, dann nach Name."""
        ordered = sorted(self._students, key=lambda s: (-s.call_count, s.name))
        return [s.model_copy() for s in ordered]
