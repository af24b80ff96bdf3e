"""Datenmodell für einen Eintrag im Aufruf-Verlauf (Pydantic v2)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CallRecord(BaseModel):
    """Ein einzelner Aufruf. Nach dem Anlegen unveränderlich."""

    model_config = ConfigDict(frozen=True)

    name: str
    group: str
    timestamp: datetime   # Lokale Wanduhrzeit des Aufrufs
