"""Aufruf-Pools: Ziehen ohne Zurücklegen, global und pro Gruppe.

Jeder Pool ist eine FIFO-Warteschlange von Kursbuch-Positionen, die im
laufenden Durchgang noch nicht aufgerufen wurden. Ist ein Pool leer, wird er
aus der vollständigen aktuellen Mitgliedschaft neu befüllt und gemischt.
Dadurch kommt jeder Schüler genau einmal pro Durchgang dran, bevor sich ein
Name wiederholt.
"""

import logging
import random
from collections import deque
from typing import Optional

from roster.store import RosterStore

logger = logging.getLogger(__name__)


class SamplingPools:
    """Globaler Pool plus ein Pool pro Gruppe.

    Die Zufallsquelle wird einmal übergeben und für alle Befüllungen
    weiterverwendet (kein Neu-Seeden pro Aufruf).
    """

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng
        self._global: deque[int] = deque()
        self._groups: dict[str, deque[int]] = {}

    def draw(self, store: RosterStore, group: Optional[str] = None) -> Optional[int]:
        """Entnimmt die nächste Position aus dem passenden Pool.

        Gibt None zurück, wenn es keine wählbaren Schüler gibt (leeres
        Kursbuch oder unbekannte/leere Gruppe). In diesem Fall bleibt alles
        unverändert.
        """
        pool = self._pool_for(group)
        if not pool:
            pool = self._refill(store, group)
        if not pool:
            return None
        return pool.popleft()

    def reset(self) -> None:
        """Verwirft alle laufenden Durchgänge (global und alle Gruppen)."""
        self._global.clear()
        self._groups.clear()

    def remaining(self, group: Optional[str] = None) -> int:
        """Anzahl noch nicht aufgerufener Schüler im laufenden Durchgang.

        0 bedeutet: der nächste Aufruf startet einen neuen Durchgang.
        """
        return len(self._pool_for(group))

    # ─── Intern ───

    def _pool_for(self, group: Optional[str]) -> deque[int]:
        if group is None:
            return self._global
        return self._groups.get(group, deque())

    def _refill(self, store: RosterStore, group: Optional[str]) -> deque[int]:
        positions = store.positions(group)
        if not positions:
            # Leere Gruppen bekommen keinen Pool-Eintrag
            if group is not None:
                self._groups.pop(group, None)
            return deque()

        # random.shuffle ist ein Fisher-Yates-Shuffle
        self._rng.shuffle(positions)
        pool = deque(positions)
        if group is None:
            self._global = pool
        else:
            self._groups[group] = pool
        logger.info(
            f"Neuer Durchgang ({'global' if group is None else group}): "
            f"{len(pool)} Schüler"
        )
        return pool
