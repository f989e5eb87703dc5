"""Tests for the selection state behind the explorer views."""

import pytest

from Analysis.PhoneSelection import PhoneSelection
from Preprocessing.feature_matrix import FeatureValue
from Preprocessing.feature_matrix import get_reference_matrix


@pytest.fixture
def selection():
    return PhoneSelection(get_reference_matrix())


class TestToggle:
    def test_toggle_adds_and_removes(self, selection):
        selection.toggle("b")
        selection.toggle("d")
        assert selection.selected == ["b", "d"]
        selection.toggle("b")
        assert selection.selected == ["d"]

    def test_toggle_outside_universe_is_ignored(self, selection):
        selection.toggle("ʘ")
        assert selection.selected == []

    def test_toggle_forgets_major_class(self, selection):
        selection.select_major_class("Nasals")
        selection.toggle("m")
        assert selection.selected_class is None
        assert "m" not in selection.selected


class TestUniverse:
    def test_defaults_to_reference_inventory(self, selection):
        assert selection.universe == list(get_reference_matrix().keys())

    def test_import_is_only_used_when_limited(self):
        selection = PhoneSelection(get_reference_matrix(), imported=["p", "b", "m", "ʘ"])
        assert selection.imported == ["p", "b", "m"]
        assert len(selection.universe) == 55
        selection.set_limit_to_imported(True)
        assert selection.universe == ["p", "b", "m"]

    def test_limit_without_import_keeps_reference(self):
        selection = PhoneSelection(get_reference_matrix(), limit_to_imported=True)
        assert len(selection.universe) == 55

    def test_limiting_drops_phones_outside_the_import(self):
        selection = PhoneSelection(get_reference_matrix(), imported=["p", "b", "m"])
        selection.select(["b", "d"])
        selection.set_limit_to_imported(True)
        assert selection.selected == ["b"]

    def test_major_class_within_import(self):
        selection = PhoneSelection(get_reference_matrix(), imported=["p", "b", "m", "n", "a"], limit_to_imported=True)
        selection.select_major_class("Nasals")
        assert selection.selected == ["m", "n"]
        assert selection.selected_class == "Nasals"


class TestFilter:
    def test_case_insensitive_search(self, selection):
        assert selection.filter_phones("P") == ["p", "pʰ", "p'"]

    def test_empty_search_lists_universe(self, selection):
        assert selection.filter_phones() == selection.universe

    def test_show_only_selected(self, selection):
        selection.select(["m", "n", "p"])
        assert selection.filter_phones(show_only_selected=True) == ["m", "n", "p"]
        assert selection.filter_phones("n", show_only_selected=True) == ["n"]


class TestReport:
    def test_report_against_import(self):
        selection = PhoneSelection(get_reference_matrix(), imported=["p", "b", "m"], limit_to_imported=True)
        selection.select(["m"])
        report = selection.report()
        assert report.common["nasal"] is FeatureValue.PLUS
        assert report.distinctive["sonorant"] is FeatureValue.PLUS
        assert len(report.minimal_sets) > 0

    def test_empty_selection_reports_nothing(self, selection):
        report = selection.report()
        assert report.common == {}
        assert report.distinctive == {}
        assert report.minimal_sets == []

    def test_feature_table_marks_unscored_cells(self, selection):
        selection.select(["a", "p"])
        rows = selection.feature_table()
        assert rows[0][0] == "a"
        assert rows[0][1] == "+"
        assert rows[0][12] == "—"
        assert rows[1][12] == "-"
        assert len(rows[1]) == 20


class TestPersistence:
    def test_round_trip(self):
        selection = PhoneSelection(get_reference_matrix(), imported=["p", "b", "m"], limit_to_imported=True)
        selection.select(["b"])
        restored = PhoneSelection.from_dict(selection.to_dict(), get_reference_matrix())
        assert restored.to_dict() == {"selected": ["b"], "imported": ["p", "b", "m"], "limit_to_imported": True}

    def test_not_an_object(self):
        with pytest.raises(ValueError):
            PhoneSelection.from_dict(["b"], get_reference_matrix())


def test_clear(selection):
    selection.select_major_class("Vowels")
    selection.clear()
    assert selection.selected == []
    assert selection.selected_class is None


def test_phone_choices_are_labelled_with_their_group():
    selection = PhoneSelection(get_reference_matrix(), imported=["p", "m", "a"], limit_to_imported=True)
    assert selection.phone_choices() == [("p (obstruent)", "p"), ("m (sonorant)", "m"), ("a (vowel)", "a")]
    selection.select(["a"])
    assert selection.phone_choices(show_only_selected=True) == [("a (vowel)", "a")]
