from typing import NamedTuple

from Analysis.FeatureReduction import common_features
from Analysis.FeatureReduction import distinctive_features
from Analysis.MinimalSeparatingSets import find_minimal_separating_sets
from Preprocessing.InventoryImporter import filter_to_matrix
from Preprocessing.feature_matrix import FEATURES
from Preprocessing.feature_matrix import get_phone_category
from Preprocessing.feature_matrix import get_value
from Preprocessing.feature_matrix import phones_in_class


class SelectionReport(NamedTuple):
    common: dict
    distinctive: dict
    minimal_sets: list


class PhoneSelection:

    def __init__(self, matrix, imported=None, limit_to_imported=False):
        """
        Keeps which phones are selected and which universe
        they are compared against. The selection is always
        kept inside the current universe.
        """
        self.matrix = matrix
        self.imported = list()
        self.limit_to_imported = limit_to_imported
        self.selected = list()
        self.selected_class = None
        if imported is not None:
            self.set_import(imported)

    @property
    def universe(self):
        if self.limit_to_imported and len(self.imported) > 0:
            return list(self.imported)
        return list(self.matrix.keys())

    def set_import(self, symbols):
        self.imported = filter_to_matrix(symbols, self.matrix)
        self._restrict_to_universe()

    def set_limit_to_imported(self, limit_to_imported):
        self.limit_to_imported = limit_to_imported
        self._restrict_to_universe()

    def toggle(self, phone):
        if phone in self.selected:
            self.selected.remove(phone)
        elif phone in self.universe:
            self.selected.append(phone)
        self.selected_class = None

    def select(self, phones):
        universe = set(self.universe)
        self.selected = [phone for phone in dict.fromkeys(phones) if phone in universe]
        self.selected_class = None

    def select_major_class(self, class_name):
        self.selected = phones_in_class(class_name, self.matrix, universe=self.universe)
        self.selected_class = class_name

    def clear(self):
        self.selected = list()
        self.selected_class = None

    def filter_phones(self, search_term="", show_only_selected=False):
        phones = self.selected if show_only_selected else self.universe
        search_term = search_term.lower()
        return [phone for phone in phones if search_term in phone.lower()]

    def phone_choices(self, search_term="", show_only_selected=False):
        # (label, phone) pairs, the label names the vowel/sonorant/obstruent group
        return [(f"{phone} ({get_phone_category(phone, self.matrix)})", phone)
                for phone in self.filter_phones(search_term, show_only_selected=show_only_selected)]

    def report(self, all_results=True):
        universe = self.universe
        return SelectionReport(common=common_features(self.selected, self.matrix),
                               distinctive=distinctive_features(self.selected, universe, self.matrix),
                               minimal_sets=find_minimal_separating_sets(self.selected,
                                                                         universe,
                                                                         self.matrix,
                                                                         all_results=all_results))

    def feature_table(self):
        rows = list()
        for phone in self.selected:
            row = [phone]
            for feature in FEATURES:
                value = get_value(self.matrix, phone, feature)
                row.append(str(value) if value.is_scored else "—")
            rows.append(row)
        return rows

    def to_dict(self):
        return {
            "selected"         : list(self.selected),
            "imported"         : list(self.imported),
            "limit_to_imported": self.limit_to_imported,
        }

    @classmethod
    def from_dict(cls, state, matrix):
        if not isinstance(state, dict):
            raise ValueError("a stored selection has to be a JSON object")
        selection = cls(matrix, imported=state.get("imported", []), limit_to_imported=bool(state.get("limit_to_imported", False)))
        selection.select(state.get("selected", []))
        return selection

    def _restrict_to_universe(self):
        universe = set(self.universe)
        self.selected = [phone for phone in self.selected if phone in universe]
