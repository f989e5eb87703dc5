"""Tests for storing and restoring selections."""

import json

import pytest

from Analysis.PhoneSelection import PhoneSelection
from Preprocessing.feature_matrix import get_reference_matrix
from Utility.utils import load_session
from Utility.utils import save_session


def test_session_survives_a_restart(tmp_path):
    path = tmp_path / "Sessions" / "selection.json"
    selection = PhoneSelection(get_reference_matrix(), imported=["ʃ", "ʒ", "s"])
    selection.select(["ʃ", "ʒ"])
    save_session(selection, str(path))

    assert "ʃ" in path.read_text(encoding="utf8")
    restored = load_session(str(path), get_reference_matrix())
    assert restored.selected == ["ʃ", "ʒ"]
    assert restored.imported == ["ʃ", "ʒ", "s"]
    assert restored.limit_to_imported is False


def test_phones_missing_from_matrix_are_dropped(tmp_path):
    path = tmp_path / "selection.json"
    path.write_text(json.dumps({"selected": ["p", "ʘ"], "imported": []}), encoding="utf8")
    assert load_session(str(path), get_reference_matrix()).selected == ["p"]


def test_broken_file(tmp_path):
    path = tmp_path / "selection.json"
    path.write_text("{not json", encoding="utf8")
    with pytest.raises(ValueError):
        load_session(str(path), get_reference_matrix())
