# -*- coding: utf-8 -*-


"""
Binary distinctive features for the reference inventory.

Every phone carries a partial mapping from feature name
to "+" or "-". A feature that is missing for a phone is
not scored for it (vowels for example have no values for
the consonantal place and manner features). Missing is a
third state of its own and never means "-".
"""

from enum import Enum
from functools import lru_cache

FEATURES = ['syllabic', 'consonantal', 'sonorant', 'continuant', 'delayed_release',
            'strident', 'distributed', 'lateral', 'anterior', 'coronal', 'nasal',
            'voice', 'aspirated', 'glottal', 'high', 'low', 'back', 'round', 'ATR']


class FeatureValue(Enum):
    PLUS = "+"
    MINUS = "-"
    UNSCORED = "0"

    @classmethod
    def from_marker(cls, marker):
        if marker == "+":
            return cls.PLUS
        if marker == "-":
            return cls.MINUS
        return cls.UNSCORED

    @property
    def is_scored(self):
        return self is not FeatureValue.UNSCORED

    def __str__(self):
        return self.value


def generate_feature_lookup():
    return {
        # obstruents
        'p': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '-', 'delayed_release': '-', 'strident': '-', 'distributed': '+', 'lateral': '-', 'anterior': '+', 'coronal': '-', 'nasal': '-', 'voice': '-', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'pʰ': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '-', 'delayed_release': '-', 'strident': '-', 'distributed': '+', 'lateral': '-', 'anterior': '+', 'coronal': '-', 'nasal': '-', 'voice': '-', 'aspirated': '+', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        "p'": {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '-', 'delayed_release': '-', 'strident': '-', 'distributed': '+', 'lateral': '-', 'anterior': '+', 'coronal': '-', 'nasal': '-', 'voice': '-', 'aspirated': '-', 'glottal': '+', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'b': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '-', 'delayed_release': '-', 'strident': '-', 'distributed': '+', 'lateral': '-', 'anterior': '+', 'coronal': '-', 'nasal': '-', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        't': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '-', 'delayed_release': '-', 'strident': '-', 'distributed': '-', 'lateral': '-', 'anterior': '+', 'coronal': '+', 'nasal': '-', 'voice': '-', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'd': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '-', 'delayed_release': '-', 'strident': '-', 'distributed': '-', 'lateral': '-', 'anterior': '+', 'coronal': '+', 'nasal': '-', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'k': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '-', 'delayed_release': '-', 'strident': '-', 'distributed': '-', 'lateral': '-', 'anterior': '-', 'coronal': '-', 'nasal': '-', 'voice': '-', 'aspirated': '-', 'glottal': '-', 'high': '+', 'low': '-', 'back': '+', 'round': '-'},
        'g': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '-', 'delayed_release': '-', 'strident': '-', 'distributed': '-', 'lateral': '-', 'anterior': '-', 'coronal': '-', 'nasal': '-', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '+', 'low': '-', 'back': '+', 'round': '-'},
        'q': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '-', 'delayed_release': '-', 'strident': '-', 'distributed': '-', 'lateral': '-', 'anterior': '-', 'coronal': '-', 'nasal': '-', 'voice': '-', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '+', 'round': '-'},
        'ɸ': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '+', 'delayed_release': '+', 'strident': '-', 'distributed': '+', 'lateral': '-', 'anterior': '+', 'coronal': '-', 'nasal': '-', 'voice': '-', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'β': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '+', 'delayed_release': '+', 'strident': '-', 'distributed': '+', 'lateral': '-', 'anterior': '+', 'coronal': '-', 'nasal': '-', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'f': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '+', 'delayed_release': '+', 'strident': '+', 'distributed': '-', 'lateral': '-', 'anterior': '+', 'coronal': '-', 'nasal': '-', 'voice': '-', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'v': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '+', 'delayed_release': '+', 'strident': '+', 'distributed': '-', 'lateral': '-', 'anterior': '+', 'coronal': '-', 'nasal': '-', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'θ': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '+', 'delayed_release': '+', 'strident': '-', 'distributed': '+', 'lateral': '-', 'anterior': '+', 'coronal': '+', 'nasal': '-', 'voice': '-', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'ð': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '+', 'delayed_release': '+', 'strident': '-', 'distributed': '+', 'lateral': '-', 'anterior': '+', 'coronal': '+', 'nasal': '-', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        's': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '+', 'delayed_release': '+', 'strident': '+', 'distributed': '-', 'lateral': '-', 'anterior': '+', 'coronal': '+', 'nasal': '-', 'voice': '-', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'z': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '+', 'delayed_release': '+', 'strident': '+', 'distributed': '-', 'lateral': '-', 'anterior': '+', 'coronal': '+', 'nasal': '-', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'ʃ': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '+', 'delayed_release': '+', 'strident': '+', 'distributed': '+', 'lateral': '-', 'anterior': '-', 'coronal': '+', 'nasal': '-', 'voice': '-', 'aspirated': '-', 'glottal': '-', 'high': '+', 'low': '-', 'back': '-', 'round': '-'},
        'ʒ': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '+', 'delayed_release': '+', 'strident': '+', 'distributed': '+', 'lateral': '-', 'anterior': '-', 'coronal': '+', 'nasal': '-', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '+', 'low': '-', 'back': '-', 'round': '-'},
        'x': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '+', 'delayed_release': '+', 'strident': '-', 'distributed': '-', 'lateral': '-', 'anterior': '-', 'coronal': '-', 'nasal': '-', 'voice': '-', 'aspirated': '-', 'glottal': '-', 'high': '+', 'low': '-', 'back': '+', 'round': '-'},
        'ɣ': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '+', 'delayed_release': '+', 'strident': '-', 'distributed': '-', 'lateral': '-', 'anterior': '-', 'coronal': '-', 'nasal': '-', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '+', 'low': '-', 'back': '+', 'round': '-'},
        'ts': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '-', 'delayed_release': '+', 'strident': '+', 'distributed': '-', 'lateral': '-', 'anterior': '+', 'coronal': '+', 'nasal': '-', 'voice': '-', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'tʃ': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '-', 'delayed_release': '+', 'strident': '+', 'distributed': '+', 'lateral': '-', 'anterior': '-', 'coronal': '+', 'nasal': '-', 'voice': '-', 'aspirated': '-', 'glottal': '-', 'high': '+', 'low': '-', 'back': '-', 'round': '-'},
        'dʒ': {'syllabic': '-', 'consonantal': '+', 'sonorant': '-', 'continuant': '-', 'delayed_release': '+', 'strident': '+', 'distributed': '+', 'lateral': '-', 'anterior': '-', 'coronal': '+', 'nasal': '-', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '+', 'low': '-', 'back': '-', 'round': '-'},

        # sonorant consonants
        'm': {'syllabic': '-', 'consonantal': '+', 'sonorant': '+', 'continuant': '-', 'delayed_release': '-', 'strident': '-', 'distributed': '+', 'lateral': '-', 'anterior': '+', 'coronal': '-', 'nasal': '+', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'ɱ': {'syllabic': '-', 'consonantal': '+', 'sonorant': '+', 'continuant': '-', 'delayed_release': '-', 'strident': '-', 'distributed': '-', 'lateral': '-', 'anterior': '+', 'coronal': '-', 'nasal': '+', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'n': {'syllabic': '-', 'consonantal': '+', 'sonorant': '+', 'continuant': '-', 'delayed_release': '-', 'strident': '-', 'distributed': '-', 'lateral': '-', 'anterior': '+', 'coronal': '+', 'nasal': '+', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'ñ': {'syllabic': '-', 'consonantal': '+', 'sonorant': '+', 'continuant': '-', 'delayed_release': '-', 'strident': '-', 'distributed': '+', 'lateral': '-', 'anterior': '-', 'coronal': '+', 'nasal': '+', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '+', 'low': '-', 'back': '-', 'round': '-'},
        'ŋ': {'syllabic': '-', 'consonantal': '+', 'sonorant': '+', 'continuant': '-', 'delayed_release': '-', 'strident': '-', 'distributed': '-', 'lateral': '-', 'anterior': '-', 'coronal': '-', 'nasal': '+', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '+', 'low': '-', 'back': '+', 'round': '-'},
        'l': {'syllabic': '-', 'consonantal': '+', 'sonorant': '+', 'continuant': '+', 'delayed_release': '+', 'strident': '-', 'distributed': '-', 'lateral': '+', 'anterior': '+', 'coronal': '+', 'nasal': '-', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'ɬ': {'syllabic': '-', 'consonantal': '+', 'sonorant': '+', 'continuant': '+', 'delayed_release': '+', 'strident': '-', 'distributed': '-', 'lateral': '+', 'anterior': '+', 'coronal': '+', 'nasal': '-', 'voice': '-', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'ɾ': {'syllabic': '-', 'consonantal': '+', 'sonorant': '+', 'continuant': '+', 'delayed_release': '+', 'strident': '-', 'distributed': '-', 'lateral': '-', 'anterior': '+', 'coronal': '+', 'nasal': '-', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},

        # glides and laryngeals
        'j': {'syllabic': '-', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'delayed_release': '+', 'strident': '-', 'distributed': '-', 'lateral': '-', 'anterior': '-', 'coronal': '-', 'nasal': '-', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '+', 'low': '-', 'back': '-', 'round': '-'},
        'w': {'syllabic': '-', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'delayed_release': '+', 'strident': '-', 'distributed': '+', 'lateral': '-', 'anterior': '-', 'coronal': '-', 'nasal': '-', 'voice': '+', 'aspirated': '-', 'glottal': '-', 'high': '+', 'low': '-', 'back': '+', 'round': '+'},
        'ʔ': {'syllabic': '-', 'consonantal': '-', 'sonorant': '+', 'continuant': '-', 'delayed_release': '-', 'strident': '-', 'distributed': '-', 'lateral': '-', 'anterior': '-', 'coronal': '-', 'nasal': '-', 'voice': '-', 'aspirated': '-', 'glottal': '+', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},
        'h': {'syllabic': '-', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'delayed_release': '+', 'strident': '-', 'distributed': '-', 'lateral': '-', 'anterior': '-', 'coronal': '-', 'nasal': '-', 'voice': '-', 'aspirated': '-', 'glottal': '+', 'high': '-', 'low': '-', 'back': '-', 'round': '-'},

        # vowels
        'i': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '+', 'low': '-', 'back': '-', 'round': '-', 'ATR': '+'},
        'ɪ': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '+', 'low': '-', 'back': '-', 'round': '-', 'ATR': '-'},
        'e': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '-', 'low': '-', 'back': '-', 'round': '-', 'ATR': '+'},
        'ε': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '-', 'low': '-', 'back': '-', 'round': '-', 'ATR': '-'},
        'æ': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '-', 'low': '+', 'back': '-', 'round': '-', 'ATR': '+'},
        'ə': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '-', 'low': '-', 'back': '+', 'round': '-', 'ATR': '+'},
        'a': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '-', 'low': '+', 'back': '+', 'round': '-', 'ATR': '-'},
        'ɨ': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '+', 'low': '-', 'back': '+', 'round': '-', 'ATR': '+'},
        'ɯ': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '+', 'low': '-', 'back': '+', 'round': '-', 'ATR': '+'},
        'u': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '+', 'low': '-', 'back': '+', 'round': '+', 'ATR': '+'},
        'ʊ': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '+', 'low': '-', 'back': '+', 'round': '+', 'ATR': '-'},
        'o': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '-', 'low': '-', 'back': '+', 'round': '+', 'ATR': '+'},
        'ɔ': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '-', 'low': '-', 'back': '+', 'round': '+', 'ATR': '-'},
        'y': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '+', 'low': '-', 'back': '-', 'round': '+', 'ATR': '+'},
        'ʏ': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '+', 'low': '-', 'back': '-', 'round': '+', 'ATR': '-'},
        'ø': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '-', 'low': '-', 'back': '-', 'round': '+', 'ATR': '+'},
        'œ': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '-', 'low': '-', 'back': '-', 'round': '+', 'ATR': '-'},
        'ʌ': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '-', 'low': '-', 'back': '+', 'round': '-', 'ATR': '-'},
        'ɒ': {'syllabic': '+', 'consonantal': '-', 'sonorant': '+', 'continuant': '+', 'high': '-', 'low': '+', 'back': '+', 'round': '+', 'ATR': '-'},
    }


MAJOR_CLASSES = {
    'Obstruents': {'sonorant': '-'},
    'Stops'     : {'sonorant': '-', 'continuant': '-'},
    'Fricatives': {'sonorant': '-', 'continuant': '+'},
    'Affricates': {'sonorant': '-', 'continuant': '-', 'delayed_release': '+'},
    'Sonorants' : {'sonorant': '+'},
    'Nasals'    : {'sonorant': '+', 'nasal': '+'},
    'Liquids'   : {'sonorant': '+', 'consonantal': '+', 'nasal': '-'},
    'Glides'    : {'syllabic': '-', 'consonantal': '-'},
    'Vowels'    : {'syllabic': '+'},
    'Sibilants' : {'strident': '+'},
    'Voiced'    : {'voice': '+'},
    'Voiceless' : {'voice': '-'},
}


def generate_feature_matrix(lookup=None):
    """
    Turns a raw lookup of phone -> {feature: marker} into
    phone -> {feature: FeatureValue}. Features outside of
    the catalogue and anything that is not a marker are
    left out, so they read as unscored later on.
    """
    if lookup is None:
        lookup = generate_feature_lookup()
    matrix = dict()
    for phone, raw_features in lookup.items():
        matrix[phone] = dict()
        for feature in FEATURES:
            value = FeatureValue.from_marker(raw_features.get(feature))
            if value.is_scored:
                matrix[phone][feature] = value
    return matrix


@lru_cache(maxsize=1)
def get_reference_matrix():
    return generate_feature_matrix(generate_feature_lookup())


def get_value(matrix, phone, feature):
    return matrix.get(phone, {}).get(feature, FeatureValue.UNSCORED)


def phones_in_class(class_name, matrix, universe=None):
    class_features = MAJOR_CLASSES[class_name]
    if universe is None:
        universe = list(matrix.keys())
    return [phone for phone in universe
            if all(get_value(matrix, phone, feature) is FeatureValue.from_marker(marker)
                   for feature, marker in class_features.items())]


def get_phone_category(phone, matrix):
    if get_value(matrix, phone, 'syllabic') is FeatureValue.PLUS:
        return 'vowel'
    if get_value(matrix, phone, 'sonorant') is FeatureValue.PLUS:
        return 'sonorant'
    return 'obstruent'


if __name__ == '__main__':
    reference = get_reference_matrix()
    print(f"{len(reference)} phones, {len(FEATURES)} features")
    for name in MAJOR_CLASSES:
        print(f"{name}: {' '.join(phones_in_class(name, reference))}")
