"""Tests für den Roster-Import ("Name,Gruppe" pro Zeile)."""

import random
from pathlib import Path

import pytest

from data.roster_import import (
    MalformedRecord,
    RosterImportError,
    import_lines,
    parse_roster_line,
    read_roster_lines,
)
from roster.session import RollCallSession
from roster.store import RosterStore

REFERENCE_INPUT = """\
# comment
Alice, Math
Bob,Science
BadLineNoComma
Alice,Physics
"""


def _write(tmp_path: Path, text: str, name: str = "roster.csv") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


# ─── ZEILEN-PARSER ────────────────────────────────────────────────────────────

class TestParseRosterLine:
    def test_simple(self):
        assert parse_roster_line("Alice,Math") == ("Alice", "Math")

    def test_trims_fields(self):
        assert parse_roster_line(" \tAlice ,  Math\r\n") == ("Alice", "Math")

    def test_splits_on_first_comma_only(self):
        assert parse_roster_line("Alice,Math, LK") == ("Alice", "Math, LK")

    @pytest.mark.parametrize("line", ["", "   ", "\t\r\n", "# Kommentar", "   # eingerückt"])
    def test_skipped_lines(self, line):
        assert parse_roster_line(line) is None

    @pytest.mark.parametrize("line", ["NoComma", ",Math", "Alice,", "  ,  "])
    def test_malformed(self, line):
        with pytest.raises(MalformedRecord):
            parse_roster_line(line)


# ─── IMPORT IN DAS KURSBUCH ───────────────────────────────────────────────────

class TestImportLines:
    def test_reference_example(self):
        store = RosterStore()
        stats = import_lines(store, REFERENCE_INPUT.split("\n"))
        assert (stats.added, stats.duplicates, stats.malformed) == (2, 1, 1)
        assert stats.malformed_lines == [4]
        assert len(store) == 2
        assert store.find("Alice").group == "Math"
        assert store.find("Bob").group == "Science"

    def test_comments_and_blank_lines_not_counted(self):
        store = RosterStore()
        stats = import_lines(store, ["", "# a", "   ", "  #b"])
        assert stats.total == 0

    def test_duplicate_of_existing_student(self):
        store = RosterStore()
        store.add("Alice", "Mathe")
        stats = import_lines(store, ["Alice,Bio", "Bob,Bio"])
        assert stats.added == 1
        assert stats.duplicates == 1
        assert store.find("Alice").group == "Mathe"

    def test_summary_text(self):
        store = RosterStore()
        stats = import_lines(store, REFERENCE_INPUT.split("\n"))
        assert stats.summary() == "2 neu, 1 doppelt, 1 fehlerhaft"


# ─── DATEI-IMPORT ─────────────────────────────────────────────────────────────

class TestImportFromSource:
    def test_reference_file(self, tmp_path: Path):
        session = RollCallSession(rng=random.Random(0))
        stats = session.import_from_source(_write(tmp_path, REFERENCE_INPUT))
        assert (stats.added, stats.duplicates, stats.malformed) == (2, 1, 1)
        assert session.group_counts() == {"Math": 1, "Science": 1}

    def test_crlf_and_bom(self, tmp_path: Path):
        path = tmp_path / "win.csv"
        path.write_bytes("\ufeffAlice,Mathe\r\nBob,Bio\r\n".encode("utf-8"))
        session = RollCallSession(rng=random.Random(0))
        stats = session.import_from_source(path)
        assert stats.added == 2
        assert session.group_counts() == {"Mathe": 1, "Bio": 1}

    def test_missing_file_raises_and_changes_nothing(self, tmp_path: Path):
        session = RollCallSession(rng=random.Random(0))
        session.add_student("Alice", "Mathe")
        session.add_student("Bob", "Mathe")
        session.pick_random()
        remaining = session.remaining_in_cycle()
        with pytest.raises(RosterImportError):
            session.import_from_source(tmp_path / "fehlt.csv")
        assert session.group_counts() == {"Mathe": 2}
        assert session.remaining_in_cycle() == remaining

    def test_directory_raises(self, tmp_path: Path):
        with pytest.raises(RosterImportError):
            read_roster_lines(tmp_path)

    def test_cp1252_file_imports(self, tmp_path: Path):
        """Excel-Export unter Windows: Umlaute in cp1252."""
        path = tmp_path / "excel.csv"
        path.write_bytes("J\xfcrgen,Mathe\nAnna,Bio\n".encode("cp1252"))
        session = RollCallSession(rng=random.Random(0))
        stats = session.import_from_source(path)
        assert stats.added == 2
        assert "Jürgen" in session.roster
        assert session.group_counts() == {"Mathe": 1, "Bio": 1}

    def test_bytes_undefined_in_cp1252_read_as_latin1(self, tmp_path: Path):
        path = tmp_path / "latin1.csv"
        path.write_bytes(b"Ren\x81,Mathe\n")
        assert read_roster_lines(path) == ["Ren\x81,Mathe", ""]

    def test_utf8_preferred_over_cp1252(self, tmp_path: Path):
        path = _write(tmp_path, "Jörg,Bio\n")
        assert read_roster_lines(path)[0] == "Jörg,Bio"

    def test_import_resets_cycle_once(self, tmp_path: Path):
        session = RollCallSession(rng=random.Random(0))
        session.add_student("Alice", "Mathe")
        session.add_student("Bob", "Mathe")
        session.pick_random()
        assert session.remaining_in_cycle() == 1
        session.import_from_source(_write(tmp_path, "Carl,Mathe\n"))
        assert session.remaining_in_cycle() == 0

    def test_readable_file_without_records_still_resets(self, tmp_path: Path):
        session = RollCallSession(rng=random.Random(0))
        session.add_student("Alice", "Mathe")
        session.add_student("Bob", "Mathe")
        session.pick_random()
        stats = session.import_from_source(_write(tmp_path, "# nur Kommentar\n"))
        assert stats.total == 0
        assert session.remaining_in_cycle() == 0
