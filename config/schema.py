from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# ─── EXPORT ───

class ExportConfig(BaseModel):
    """Einstellungen für Excel- und PDF-Export."""
    # Zielverzeichnis für exportierte Dateien
    output_dir: str = Field("output",
        description="Zielverzeichnis für Excel/PDF")
    # Überschrift in Excel-Übersicht und PDF-Kopfzeile
    title: str = Field("Zufallsaufruf",
        description="Titel für Exporte")
    # Dateiname ohne Endung (.xlsx / .pdf werden angehängt)
    basename: str = Field("aufruf_bericht",
        description="Dateiname ohne Endung")


# ─── GESAMT-CONFIG ───

class RollCallConfig(BaseModel):
    """Gesamtkonfiguration des Zufallsaufrufs."""
    # Kursliste, die beim Start automatisch importiert wird (falls vorhanden)
    roster_path: str = Field("roster.csv",
        description="Standard-Kursliste (Name,Gruppe pro Zeile)")
    # Fester Seed für reproduzierbare Reihenfolgen (None = zufällig)
    seed: Optional[int] = Field(None,
        description="Zufalls-Seed (leer = nicht reproduzierbar)")
    # Vorschlag für "Wie viele Einträge anzeigen?" (0 = alle)
    history_limit: int = Field(0, ge=0,
        description="Standardanzahl Verlaufseinträge (0 = alle)")
    # strftime-Format für Zeitstempel in Verlauf und Export
    timestamp_format: str = Field("%Y-%m-%d %H:%M:%S",
        description="Zeitstempel-Format (strftime)")
    # Export-Einstellungen
    export: ExportConfig = Field(default_factory=ExportConfig)

    @field_validator("timestamp_format")
    @classmethod
    def validate_timestamp_format(cls, v: str) -> str:
        """Das Format muss mindestens eine strftime-Direktive enthalten."""
        if "%" not in v:
            raise ValueError(
                f"Zeitstempel-Format {v!r} enthält keine %-Direktive")
        datetime(2000, 1, 1).strftime(v)
        return v
