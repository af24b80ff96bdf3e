"""Konfigurationsmanager: Laden, Speichern und interaktives Bearbeiten.

Nutzt ruamel.yaml für YAML-Serialisierung mit Kommentaren.
"""

import json
from datetime import date
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from config.defaults import default_config
from config.schema import ExportConfig, RollCallConfig

console = Console()
yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120


# ─── YAML-KOMMENTAR-AUFBAU ───

_YAML_HEADER = f"""\
# ============================================
# Zufallsaufruf: Konfiguration
# Erstellt: {date.today().isoformat()}
# ============================================
"""

_FIELD_COMMENTS = {
    "roster_path": "Kursliste, die beim Start importiert wird (Name,Gruppe pro Zeile)",
    "seed": "Fester Zufalls-Seed; leer = jede Sitzung neu gemischt",
    "history_limit": "Standardanzahl Verlaufseinträge (0 = alle)",
    "timestamp_format": "strftime-Format für Zeitstempel",
    "export": "Excel-/PDF-Export",
}


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "rollcall_config.yaml"

    def first_run_check(self) -> bool:
        """Gibt True zurück wenn noch keine Config existiert."""
        return not self.DEFAULT_CONFIG.exists()

    # ─── Laden ───

    def load(self, path: Optional[Path] = None) -> RollCallConfig:
        """Lade Config aus YAML. Validiert automatisch via Pydantic."""
        target = path or self.DEFAULT_CONFIG
        if not target.exists():
            raise FileNotFoundError(
                f"Konfigurationsdatei nicht gefunden: {target}\n"
                f"Führen Sie 'python main.py config init' aus, um sie anzulegen."
            )
        with open(target, "r", encoding="utf-8") as f:
            raw = yaml.load(f)
        try:
            return RollCallConfig.model_validate(dict(raw or {}))
        except Exception as e:
            raise ValueError(
                f"Konfigurationsdatei ungültig: {target}\n"
                f"Pydantic-Fehler: {e}"
            ) from e

    def load_or_default(self, path: Optional[Path] = None) -> RollCallConfig:
        """Wie load(), fällt aber bei fehlender Datei auf die Defaults zurück."""
        target = path or self.DEFAULT_CONFIG
        if not target.exists():
            return default_config()
        return self.load(target)

    # ─── Speichern ───

    def save(self, config: RollCallConfig, path: Optional[Path] = None) -> None:
        """Speichere Config als YAML mit Kommentaren."""
        target = path or self.DEFAULT_CONFIG
        target.parent.mkdir(parents=True, exist_ok=True)

        data = self._build_commented_yaml(config)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(data, f)

        console.print(f"[green]✓[/green] Konfiguration gespeichert: {target}")

    def _build_commented_yaml(self, config: RollCallConfig) -> CommentedMap:
        """Baut die YAML-Struktur mit Kommentaren auf."""
        raw = json.loads(config.model_dump_json())
        cm = CommentedMap(raw)
        cm["export"] = CommentedMap(raw["export"])

        for field, comment in _FIELD_COMMENTS.items():
            cm.yaml_set_comment_before_after_key(field, before=f"\n{comment}")

        return cm

    # ─── Interaktives Bearbeiten ───

    def edit_interactive(self, config: RollCallConfig) -> RollCallConfig:
        """Fragt alle Werte nacheinander ab (aktueller Wert als Default)."""
        console.print(Panel("[bold]Konfiguration bearbeiten[/bold]",
                            border_style="cyan"))

        roster_path = Prompt.ask("Standard-Kursliste", default=config.roster_path)
        seed_raw = Prompt.ask(
            "Zufalls-Seed (leer = zufällig)",
            default="" if config.seed is None else str(config.seed),
        )
        history_limit = IntPrompt.ask(
            "Standardanzahl Verlaufseinträge (0 = alle)",
            default=config.history_limit,
        )
        output_dir = Prompt.ask("Export-Verzeichnis",
                                default=config.export.output_dir)

        seed: Optional[int] = None
        if seed_raw.strip():
            try:
                seed = int(seed_raw)
            except ValueError:
                console.print("[yellow]Ungültiger Seed, bleibt leer.[/yellow]")

        config = config.model_copy(update={
            "roster_path": roster_path,
            "seed": seed,
            "history_limit": max(0, history_limit),
            "export": ExportConfig(
                output_dir=output_dir,
                title=config.export.title,
                basename=config.export.basename,
            ),
        })
        self.save(config)
        return config
