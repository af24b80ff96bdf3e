"""Kern des Zufallsaufrufs: Kursbuch, Aufruf-Pools, Verlauf, Session."""

from .store import RosterStore
from .pool import SamplingPools
from .history import HistoryLog
from .session import RollCallSession

__all__ = [
    "RosterStore",
    "SamplingPools",
    "HistoryLog",
    "RollCallSession",
]
