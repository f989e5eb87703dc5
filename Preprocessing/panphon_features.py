import logging

import panphon

from Preprocessing.feature_matrix import FEATURES
from Preprocessing.feature_matrix import FeatureValue
from Preprocessing.feature_matrix import generate_feature_lookup

logger = logging.getLogger(__name__)

# panphon name -> name in our catalogue. sg and cg are the
# laryngeal features that come closest to aspirated and glottal,
# tense stands in for ATR.
PANPHON_TO_FEATURE = {
    'syl'   : 'syllabic',
    'cons'  : 'consonantal',
    'son'   : 'sonorant',
    'cont'  : 'continuant',
    'delrel': 'delayed_release',
    'strid' : 'strident',
    'distr' : 'distributed',
    'lat'   : 'lateral',
    'ant'   : 'anterior',
    'cor'   : 'coronal',
    'nas'   : 'nasal',
    'voi'   : 'voice',
    'sg'    : 'aspirated',
    'cg'    : 'glottal',
    'hi'    : 'high',
    'lo'    : 'low',
    'back'  : 'back',
    'round' : 'round',
    'tense' : 'ATR',
}

NUMERIC_TO_VALUE = {
    1 : FeatureValue.PLUS,
    -1: FeatureValue.MINUS,
    0 : FeatureValue.UNSCORED,
}


def generate_panphon_feature_matrix(phones=None, feature_table=None):
    """
    Builds a feature matrix in the same catalogue as the
    reference table, but with the values panphon assigns.
    Defaults to the phones of the reference inventory.
    """
    if phones is None:
        phones = list(generate_feature_lookup().keys())
    if feature_table is None:
        feature_table = panphon.FeatureTable()
    matrix = dict()
    for phone in phones:
        vectors = feature_table.word_to_vector_list(phone, numeric=True)
        if len(vectors) != 1:
            logger.warning(f"panphon reads {phone!r} as {len(vectors)} segments, skipping it")
            continue
        matrix[phone] = dict()
        for panphon_name, numeric_value in zip(feature_table.names, vectors[0]):
            feature = PANPHON_TO_FEATURE.get(panphon_name)
            if feature is None:
                continue
            value = NUMERIC_TO_VALUE[numeric_value]
            if value.is_scored:
                matrix[phone][feature] = value
        # keep catalogue order so tables line up with the reference matrix
        matrix[phone] = {feature: matrix[phone][feature] for feature in FEATURES if feature in matrix[phone]}
    return matrix


if __name__ == '__main__':
    for phone, features in generate_panphon_feature_matrix().items():
        print(phone, " ".join(f"{feature}{value}" for feature, value in features.items()))
