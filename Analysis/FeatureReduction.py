from Preprocessing.feature_matrix import FEATURES
from Preprocessing.feature_matrix import get_value


def unique_phones(phones):
    return list(dict.fromkeys(phones))


def complement_of(selection, universe, matrix):
    # universe symbols without feature values are not phones to compare against
    selected = set(selection)
    return [phone for phone in unique_phones(universe) if phone in matrix and phone not in selected]


def shared_value(phones, feature, matrix):
    """
    The value all given phones have for the feature, or None
    if one of them is unscored for it or they disagree.
    """
    values = {get_value(matrix, phone, feature) for phone in phones}
    if len(values) != 1:
        return None
    value = values.pop()
    if not value.is_scored:
        return None
    return value


def common_features(selection, matrix):
    """
    Features on which every selected phone has the same
    scored value, in catalogue order.
    """
    selection = unique_phones(selection)
    if len(selection) == 0:
        return dict()
    common = dict()
    for feature in FEATURES:
        value = shared_value(selection, feature, matrix)
        if value is not None:
            common[feature] = value
    return common


def distinctive_features(selection, universe, matrix):
    """
    Features that on their own tell the selection apart from
    the rest of the universe. A phone of the rest that is
    unscored for a feature is not taken as evidence that it
    differs, so such a feature never counts as distinctive.
    """
    selection = unique_phones(selection)
    complement = complement_of(selection, universe, matrix)
    if len(selection) == 0 or len(complement) == 0:
        return dict()
    distinctive = dict()
    for feature in FEATURES:
        selected_value = shared_value(selection, feature, matrix)
        if selected_value is None:
            continue
        complement_values = [get_value(matrix, phone, feature) for phone in complement]
        if not all(value.is_scored for value in complement_values):
            continue
        if selected_value not in complement_values:
            distinctive[feature] = selected_value
    return distinctive


def format_feature_values(feature_values):
    return ", ".join(f"{feature}: {value}" for feature, value in feature_values.items())
