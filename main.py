"""Zufallsaufruf: Haupt-CLI.

Verwendung:
  python main.py                          Interaktives Menü (Standard)
  python main.py menu --roster kurs.csv   Menü mit anderer Kursliste
  python main.py pick kurs.csv -n 5       5 Schüler ohne Wiederholung aufrufen
  python main.py pick kurs.csv -g Mathe   Nur aus Gruppe "Mathe" aufrufen
  python main.py groups kurs.csv          Gruppen einer Kursliste anzeigen
  python main.py config init              Konfiguration mit Defaults anlegen
  python main.py config show              Konfiguration anzeigen
  python main.py config edit              Konfiguration bearbeiten
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.table import Table
from rich import box

from config.defaults import COL_GROUP_W, COL_NAME_W, MENU_ITEMS
from config.schema import RollCallConfig
from data.roster_import import RosterImportError
from export.tui_renderer import (
    GROUP_HEADERS, HISTORY_HEADERS, NO_GROUPS, NO_HISTORY, NO_STUDENTS,
    STATS_HEADERS, render_group_rows, render_history_rows, render_stats_rows,
)
from roster.session import RollCallSession

console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_config() -> RollCallConfig:
    """Lädt die Konfiguration oder bricht mit Fehlermeldung ab."""
    from config.manager import ConfigManager
    try:
        return ConfigManager().load_or_default()
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


def _make_session(config: RollCallConfig, seed: Optional[int]) -> RollCallSession:
    return RollCallSession(seed=seed if seed is not None else config.seed)


# ─── AUSGABE ──────────────────────────────────────────────────────────────────

def _print_table(title: str, headers: list[str], rows: list[list[str]],
                 widths: Optional[list[int]] = None) -> None:
    table = Table(title=title, box=box.ROUNDED)
    for i, header in enumerate(headers):
        width = widths[i] if widths and i < len(widths) else None
        table.add_column(header, min_width=width)
    for row in rows:
        table.add_row(*row)
    console.print(table)


def show_history(session: RollCallSession, config: RollCallConfig,
                 limit: int) -> None:
    records = session.recent_history(limit)
    if not records:
        console.print(f"[dim]{NO_HISTORY}[/dim]")
        return
    _print_table("Verlauf (neueste zuerst)", HISTORY_HEADERS,
                 render_history_rows(records, config.timestamp_format))


def show_stats(session: RollCallSession) -> None:
    students = session.stats_snapshot()
    if not students:
        console.print(f"[dim]{NO_STUDENTS}[/dim]")
        return
    _print_table("Statistik", STATS_HEADERS, render_stats_rows(students),
                 widths=[COL_NAME_W, COL_GROUP_W])


def show_groups(session: RollCallSession) -> None:
    counts = session.group_counts()
    if counts is None:
        console.print(f"[dim]{NO_GROUPS}[/dim]")
        return
    _print_table("Gruppen", GROUP_HEADERS, render_group_rows(counts))


def _import_and_report(session: RollCallSession, path: Path) -> bool:
    try:
        stats = session.import_from_source(path)
    except RosterImportError as e:
        console.print(f"[red]Import fehlgeschlagen:[/red] {e}")
        return False
    console.print(
        f"[green]✓[/green] Importiert aus {path}: {stats.summary()}."
    )
    if stats.malformed_lines:
        lines = ", ".join(str(n) for n in stats.malformed_lines)
        console.print(f"[yellow]Fehlerhafte Zeilen:[/yellow] {lines}")
    return True


def _export_report(session: RollCallSession, config: RollCallConfig) -> None:
    from export import ExcelExporter, PdfExporter

    out_dir = Path(config.export.output_dir)
    xlsx_path = out_dir / f"{config.export.basename}.xlsx"
    pdf_path = out_dir / f"{config.export.basename}.pdf"
    ExcelExporter(session, config).export(xlsx_path)
    console.print(f"[green]✓[/green] Excel gespeichert: {xlsx_path}")
    PdfExporter(session, config).export(pdf_path)
    console.print(f"[green]✓[/green] PDF gespeichert: {pdf_path}")


# ─── INTERAKTIVES MENÜ ────────────────────────────────────────────────────────

def _print_menu() -> None:
    console.print()
    console.print(Panel("[bold]Zufallsaufruf[/bold]", border_style="cyan"))
    for key, label in MENU_ITEMS.items():
        console.print(f"  [bold]{key}.[/bold] {label}")


def run_menu(session: RollCallSession, config: RollCallConfig) -> None:
    """Menü-Schleife bis zur Auswahl 0 (oder Ende der Eingabe)."""
    try:
        _menu_loop(session, config)
    except (EOFError, KeyboardInterrupt):
        console.print()
    console.print("Auf Wiedersehen!")


def _menu_loop(session: RollCallSession, config: RollCallConfig) -> None:
    while True:
        _print_menu()
        choice = Prompt.ask("\nAuswahl", default="0").strip()

        if choice == "1":
            name = Prompt.ask("Name", default="").strip()
            group = Prompt.ask("Gruppe", default="").strip()
            if not name or not group:
                console.print("[yellow]Name und Gruppe dürfen nicht leer sein.[/yellow]")
            elif session.add_student(name, group):
                console.print("[green]✓[/green] Schüler hinzugefügt.")
            else:
                console.print("[yellow]Schüler existiert bereits.[/yellow]")

        elif choice == "2":
            student = session.pick_random()
            if student:
                console.print(f"[bold]Ausgewählt:[/bold] {student.label}")
            else:
                console.print("[yellow]Keine Schüler vorhanden.[/yellow]")

        elif choice == "3":
            group = Prompt.ask("Gruppe", default="").strip()
            if not group:
                console.print("[yellow]Gruppe darf nicht leer sein.[/yellow]")
                continue
            student = session.pick_random(group)
            if student:
                console.print(f"[bold]Ausgewählt:[/bold] {student.label}")
            else:
                console.print("[yellow]Gruppe leer oder unbekannt.[/yellow]")

        elif choice == "4":
            limit = IntPrompt.ask("Wie viele Einträge (0 = alle)",
                                  default=config.history_limit)
            show_history(session, config, max(0, limit))

        elif choice == "5":
            show_stats(session)

        elif choice == "6":
            show_groups(session)

        elif choice == "7":
            session.reset_cycle()
            console.print("[green]✓[/green] Durchgang zurückgesetzt.")

        elif choice == "8":
            session.clear_history()
            console.print("[green]✓[/green] Verlauf gelöscht.")

        elif choice == "9":
            path = Prompt.ask("Datei (Name,Gruppe pro Zeile)", default="").strip()
            if not path:
                console.print("[yellow]Pfad darf nicht leer sein.[/yellow]")
                continue
            _import_and_report(session, Path(path))

        elif choice == "10":
            _export_report(session, config)

        elif choice == "0":
            return

        else:
            console.print("[yellow]Ungültige Auswahl.[/yellow]")


@click.command("menu")
@click.option("--roster", "roster_path", default=None,
              help="Kursliste, die beim Start importiert wird.")
@click.option("--seed", type=int, default=None,
              help="Zufalls-Seed für reproduzierbare Reihenfolgen.")
def cmd_menu(roster_path: Optional[str], seed: Optional[int]):
    """Interaktives Menü (Aufrufen, Verlauf, Statistik, Import, Export)."""
    config = _load_config()
    session = _make_session(config, seed)

    path = Path(roster_path or config.roster_path)
    if path.exists():
        _import_and_report(session, path)
    else:
        console.print(
            f"[dim]Keine Kursliste {path} gefunden. "
            f"Import über Menüpunkt 9.[/dim]"
        )
    run_menu(session, config)


# ─── EINMAL-BEFEHLE ───────────────────────────────────────────────────────────

@click.command("pick")
@click.argument("roster", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--group", "-g", default=None, help="Nur aus dieser Gruppe aufrufen.")
@click.option("--count", "-n", default=1, show_default=True,
              type=click.IntRange(min=1), help="Anzahl Aufrufe.")
@click.option("--seed", type=int, default=None,
              help="Zufalls-Seed für reproduzierbare Reihenfolgen.")
def cmd_pick(roster: Path, group: Optional[str], count: int, seed: Optional[int]):
    """Importiert ROSTER und ruft COUNT Schüler ohne Wiederholung auf."""
    config = _load_config()
    session = _make_session(config, seed)
    if not _import_and_report(session, roster):
        sys.exit(1)

    for i in range(1, count + 1):
        student = session.pick_random(group)
        if student is None:
            console.print("[red]Keine wählbaren Schüler.[/red]")
            sys.exit(1)
        console.print(f"{i:3d}. {student.label}")


@click.command("groups")
@click.argument("roster", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def cmd_groups(roster: Path):
    """Zeigt die Gruppen einer Kursliste mit Anzahl der Schüler."""
    session = RollCallSession()
    if not _import_and_report(session, roster):
        sys.exit(1)
    show_groups(session)


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen, anlegen oder bearbeiten."""


@cmd_config.command("show")
def config_show():
    """Zeigt die aktuelle Konfiguration an."""
    config = _load_config()
    table = Table(title="Konfiguration", box=box.ROUNDED)
    table.add_column("Parameter", style="bold")
    table.add_column("Wert")
    table.add_row("roster_path", config.roster_path)
    table.add_row("seed", "-" if config.seed is None else str(config.seed))
    table.add_row("history_limit", str(config.history_limit))
    table.add_row("timestamp_format", config.timestamp_format)
    table.add_row("export.output_dir", config.export.output_dir)
    table.add_row("export.title", config.export.title)
    table.add_row("export.basename", config.export.basename)
    console.print(table)


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False,
              help="Bestehende Konfiguration überschreiben.")
def config_init(force: bool):
    """Legt die Konfigurationsdatei mit Standardwerten an."""
    from config.defaults import default_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    if not mgr.first_run_check() and not force:
        console.print(
            "[yellow]Eine Konfiguration existiert bereits.[/yellow]\n"
            "Verwenden Sie [bold]--force[/bold] zum Überschreiben."
        )
        return
    mgr.save(default_config())


@cmd_config.command("edit")
def config_edit():
    """Bearbeitet die Konfiguration interaktiv."""
    from config.manager import ConfigManager
    config = _load_config()
    ConfigManager().edit_interactive(config)


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Ausführliche Log-Ausgabe.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Zufallsaufruf: Schüler zufällig aufrufen, ohne Wiederholung pro Durchgang.

    Ohne Befehl startet das interaktive Menü.
    """
    _setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(cmd_menu)


def main():
    """Einstiegspunkt."""
    cli()


# Befehle registrieren
cli.add_command(cmd_menu)
cli.add_command(cmd_pick)
cli.add_command(cmd_groups)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
