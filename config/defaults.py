from config.schema import ExportConfig, RollCallConfig

# Standard-Kursliste im Arbeitsverzeichnis
DEFAULT_ROSTER = "roster.csv"

# Entspricht "%F %T"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Spaltenbreiten der Konsolen-Tabellen (Zeichen)
COL_NAME_W = 20
COL_GROUP_W = 15

# Menüpunkte des interaktiven Modus (Auswahl → Beschriftung)
MENU_ITEMS: dict[str, str] = {
    "1": "Schüler hinzufügen",
    "2": "Zufällig aufrufen",
    "3": "Aus Gruppe aufrufen",
    "4": "Verlauf anzeigen",
    "5": "Statistik anzeigen",
    "6": "Gruppen anzeigen",
    "7": "Durchgang zurücksetzen",
    "8": "Verlauf löschen",
    "9": "Aus Datei importieren",
    "10": "Bericht exportieren (Excel + PDF)",
    "0": "Beenden",
}


def default_config() -> RollCallConfig:
    """Standard-Konfiguration: roster.csv, kein fester Seed, alle Einträge."""
    return RollCallConfig(
        roster_path=DEFAULT_ROSTER,
        seed=None,
        history_limit=0,
        timestamp_format=TIMESTAMP_FORMAT,
        export=ExportConfig(),
    )
