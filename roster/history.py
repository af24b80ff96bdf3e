"""Aufruf-Verlauf: reine Anhänge-Liste aller Aufrufe."""

from itertools import islice
from typing import Iterator, Optional

from models.call_record import CallRecord


class HistoryLog:
    """Chronologische Liste aller CallRecords, ohne Größenbegrenzung."""

    def __init__(self) -> None:
        self._records: list[CallRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    @property
    def last(self) -> Optional[CallRecord]:
        return self._records[-1] if self._records else None

    def record(self, entry: CallRecord) -> None:
        self._records.append(entry)

    def most_recent(self, limit: Optional[int] = 0) -> Iterator[CallRecord]:
        """Neueste Einträge zuerst. limit 0, negativ oder None = alle.

        Jeder Aufruf liefert einen neuen, unabhängigen Iterator.
        """
        newest_first = reversed(self._records)
        if not limit or limit < 0:
            return newest_first
        return islice(newest_first, limit)

    def clear(self) -> None:
        self._records.clear()
