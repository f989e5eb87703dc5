"""Tests for the command line front end."""

import importlib

import pytest

import Utility.storage_config
import run_feature_search
from Analysis.PhoneSelection import PhoneSelection
from Preprocessing.feature_matrix import get_reference_matrix
from run_feature_search import build_parser
from run_feature_search import print_report


def test_parser_defaults():
    args = build_parser().parse_args(["b", "d"])
    assert args.phones == ["b", "d"]
    assert args.import_path is None
    assert not args.all
    assert not args.panphon


def test_parser_options():
    args = build_parser().parse_args(["--import", "chart.html", "--limit_to_imported", "--major_class", "Nasals", "--all"])
    assert args.import_path == "chart.html"
    assert args.limit_to_imported
    assert args.major_class == "Nasals"
    assert args.all


def test_report_output(capsys):
    selection = PhoneSelection(get_reference_matrix(), imported=["p", "b", "m"], limit_to_imported=True)
    selection.select(["b"])
    print_report(selection, all_results=True)
    out = capsys.readouterr().out
    assert "Selected Phones (1): b" in out
    assert "Compared against 3 phones" in out
    assert "Minimal Distinguishing Feature Sets" in out
    assert "sonorant: -" in out


def test_report_without_result(capsys):
    selection = PhoneSelection(get_reference_matrix(), imported=["p", "b"], limit_to_imported=True)
    selection.select(["p", "b"])
    print_report(selection, all_results=False)
    assert "No minimal feature sets found" in capsys.readouterr().out


@pytest.fixture
def explorer_home(tmp_path, monkeypatch):
    """Points the storage location at a temporary directory."""
    monkeypatch.setenv("PHONOLOGY_EXPLORER_HOME", str(tmp_path / "home"))
    importlib.reload(Utility.storage_config)
    importlib.reload(run_feature_search)
    yield tmp_path / "home"
    monkeypatch.undo()
    importlib.reload(Utility.storage_config)
    importlib.reload(run_feature_search)


class TestSessions:
    def test_default_location_follows_environment(self, explorer_home):
        expected = str(explorer_home / "Sessions" / "selection.json")
        assert Utility.storage_config.DEFAULT_SESSION_PATH == expected
        assert run_feature_search.build_parser().parse_args(["b", "--session"]).session == expected

    def test_session_is_stored_and_restored(self, explorer_home, capsys):
        run_feature_search.main(["b", "d", "--session"])
        stored = explorer_home / "Sessions" / "selection.json"
        assert stored.exists()
        capsys.readouterr()
        run_feature_search.main(["--session"])
        assert "Selected Phones (2): b d" in capsys.readouterr().out

    def test_no_session_by_default(self, explorer_home, capsys):
        run_feature_search.main(["b"])
        assert not (explorer_home / "Sessions" / "selection.json").exists()


class TestImportErrors:
    def test_inventory_that_is_not_utf8(self, tmp_path, capsys):
        path = tmp_path / "inventory.txt"
        path.write_bytes("p b ç ñ".encode("latin-1"))
        with pytest.raises(SystemExit) as exit_info:
            run_feature_search.main(["b", "--import", str(path)])
        assert exit_info.value.code == 2
        assert "UTF-8" in capsys.readouterr().err

    def test_missing_inventory(self, tmp_path, capsys):
        with pytest.raises(SystemExit):
            run_feature_search.main(["b", "--import", str(tmp_path / "missing.html")])
        assert "Could not find" in capsys.readouterr().err
