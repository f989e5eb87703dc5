"""
Search for the smallest combinations of feature values that
single out a selection of phones within a universe.

Candidate constraints come from the features all selected
phones agree on, so every selected phone satisfies every
candidate by construction. Combinations of two and then of
three candidates are tried. The first size that yields any
combination no other phone of the universe satisfies wins.
Single features are covered by FeatureReduction.distinctive_features.
"""

import logging
from itertools import combinations
from typing import NamedTuple

from Analysis.FeatureReduction import complement_of
from Analysis.FeatureReduction import shared_value
from Analysis.FeatureReduction import unique_phones
from Preprocessing.feature_matrix import FEATURES
from Preprocessing.feature_matrix import FeatureValue
from Preprocessing.feature_matrix import get_value

logger = logging.getLogger(__name__)

MIN_COMBINATION_SIZE = 2
MAX_COMBINATION_SIZE = 3


class FeatureConstraint(NamedTuple):
    feature: str
    value: FeatureValue

    def __str__(self):
        return f"{self.feature}: {self.value}"


def make_constraint(feature, value):
    if not isinstance(value, FeatureValue):
        value = FeatureValue.from_marker(value)
    if not value.is_scored:
        raise ValueError(f"a constraint on {feature} needs a + or - value")
    return FeatureConstraint(feature, value)


def format_separating_set(separating_set):
    return ", ".join(str(constraint) for constraint in separating_set)


def candidate_pool(selection, matrix):
    pool = list()
    for feature in FEATURES:
        value = shared_value(selection, feature, matrix)
        if value is not None:
            pool.append(make_constraint(feature, value))
    return pool


def matches(phone, constraints, matrix):
    # unscored is never equal to a marker, so it can not match
    return all(get_value(matrix, phone, constraint.feature) is constraint.value for constraint in constraints)


def _tie_break_key(separating_set):
    return len(separating_set), ",".join(constraint.feature for constraint in separating_set)


def find_minimal_separating_sets(selection, universe, matrix, all_results=False):
    """
    Returns a list of separating sets, each a tuple of
    FeatureConstraints in catalogue order. The list is empty
    if there is nothing to separate from or no combination of
    up to MAX_COMBINATION_SIZE features does the job.

    With all_results every separating set of the smallest
    size is returned in the order they were found, otherwise
    only the first by feature names.
    """
    selection = unique_phones(selection)
    complement = complement_of(selection, universe, matrix)
    if len(selection) == 0 or len(complement) == 0:
        return list()

    pool = candidate_pool(selection, matrix)
    logger.debug(f"{len(pool)} candidate constraints for {len(selection)} selected and {len(complement)} other phones")
    if len(pool) < MIN_COMBINATION_SIZE:
        return list()

    separating_sets = list()
    for size in range(MIN_COMBINATION_SIZE, MAX_COMBINATION_SIZE + 1):
        for combination in combinations(pool, size):
            if not all(matches(phone, combination, matrix) for phone in selection):
                continue
            if any(matches(phone, combination, matrix) for phone in complement):
                continue
            separating_sets.append(combination)
        if len(separating_sets) > 0:
            logger.debug(f"found {len(separating_sets)} separating sets of size {size}")
            break

    if all_results or len(separating_sets) == 0:
        return separating_sets
    return sorted(separating_sets, key=_tie_break_key)[:1]
