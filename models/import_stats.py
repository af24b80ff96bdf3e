"""Ergebnis eines Roster-Imports (Pydantic v2)."""

from pydantic import BaseModel


class ImportStats(BaseModel):
    """Zähler eines einzelnen Imports. Wird nicht gespeichert."""

    added: int = 0
    duplicates: int = 0
    malformed: int = 0
    # Zeilennummern (1-basiert) der fehlerhaften Zeilen, für die Rückmeldung
    malformed_lines: list[int] = []

    @property
    def total(self) -> int:
        """Anzahl ausgewerteter (nicht übersprungener) Zeilen."""
        return self.added + self.duplicates + self.malformed

    def summary(self) -> str:
        """Einzeilige Zusammenfassung für die Konsole."""
        return (
            f"{self.added} neu, {self.duplicates} doppelt, "
            f"{self.malformed} fehlerhaft"
        )
