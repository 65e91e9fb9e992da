"""Tests for the command line entry point."""

import argparse

import pytest

from investigator.main import build_parser, format_sheet, main, parse_raw_assignment
from investigator.models import AttributeName
from investigator.sheet import CharacterSheet, load_name_pools


@pytest.fixture
def local_backend(monkeypatch, tmp_path):
    """Point the CLI at a fresh local database."""
    monkeypatch.setenv("INVESTIGATOR_STORAGE_BACKEND", "local")
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}")


class TestArguments:
    """Tests for argument parsing."""

    def test_raw_assignment_short_code(self):
        assert parse_raw_assignment("siz=8") == (AttributeName.SIZE, 8)

    def test_raw_assignment_full_name(self):
        assert parse_raw_assignment("Education=12") == (AttributeName.EDUCATION, 12)

    @pytest.mark.parametrize("text", ["str", "str=lots", "sanity=5"])
    def test_raw_assignment_invalid(self, text):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_raw_assignment(text)

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestOfflineCommands:
    """Commands that never touch storage."""

    def test_name(self, capsys):
        assert main(["name", "asia"]) == 0
        assert capsys.readouterr().out.strip() in load_name_pools()["asia"]

    def test_derive(self, capsys):
        assert main(["derive", "--raw", "str=12", "--age", "45"]) == 0
        out = capsys.readouterr().out
        assert "STR    12 ->  60" in out
        assert "SIZ     7 ->  65" in out
        assert "HP max 11" in out
        assert "MOV 6" in out
        assert "Age 40-49:" in out


class TestStoredCommands:
    """Commands run against the local backend."""

    def test_new_list_show_delete(self, capsys, local_backend):
        assert main(["new", "--name", "Harvey Walters", "--occupation", "Journalist", "--raw", "dex=14"]) == 0
        character_id = capsys.readouterr().out.strip()

        assert main(["list"]) == 0
        listing = capsys.readouterr().out
        assert character_id in listing
        assert "Harvey Walters" in listing

        assert main(["show", character_id]) == 0
        sheet = capsys.readouterr().out
        assert "DEX   raw  14  final  70" in sheet
        assert "Occupation points: 0/300" in sheet

        assert main(["delete", character_id]) == 0
        assert main(["list"]) == 0
        assert capsys.readouterr().out == ""

    def test_show_unknown(self, capsys, local_backend):
        assert main(["show", "missing"]) == 1
        assert "No character" in capsys.readouterr().err

    def test_unusable_database_reports_error(self, capsys, monkeypatch, tmp_path):
        blocker = tmp_path / "plain_file"
        blocker.write_text("")
        monkeypatch.setenv("INVESTIGATOR_STORAGE_BACKEND", "local")
        monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{blocker / 'sub' / 'x.db'}")

        assert main(["list"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_spreadsheet_without_url(self, capsys):
        assert main(["list"]) == 1
        assert "Error:" in capsys.readouterr().err


class TestFormatSheet:
    """Tests for the plain text sheet."""

    def test_lists_skills_with_fractions(self, sample_record):
        text = format_sheet(CharacterSheet(sample_record))
        assert text.startswith("Harvey Walters")
        # EDU 65: full, half, fifth
        assert "Mother Tongue" in text and " 65  32  13" in text

    def test_over_budget_warning(self, sample_record):
        sheet = CharacterSheet(sample_record)
        sheet.set_skill_points("Library Use", interest=200)
        assert "Interest points: 200/130  (over budget)" in format_sheet(sheet)
