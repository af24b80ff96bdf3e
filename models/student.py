"""Datenmodell für eine Schülerin / einen Schüler (Pydantic v2)."""

from pydantic import BaseModel, Field, field_validator

_WHITESPACE = " \t\r\n"


class Student(BaseModel):
    """Repräsentiert einen Eintrag im Kursbuch.

    Der Name ist eindeutig (Groß-/Kleinschreibung wird unterschieden).
    call_count wird ausschließlich vom Aufruf-Mechanismus erhöht.
    """

    name: str                            # "Alice", "Müller, Jonas"
    group: str                           # Gruppe / Kurs, z.B. "Mathe", "7b"
    call_count: int = Field(0, ge=0)     # Wie oft bisher aufgerufen

    @field_validator("name", "group")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        v = v.strip(_WHITESPACE)
        if not v:
            raise ValueError("darf nicht leer sein")
        return v

    @property
    def label(self) -> str:
        """Anzeigeform "Name (Gruppe)"."""
        return f"{self.name} ({self.group})"
