"""
Shared fixtures: small hand-made feature matrices that keep
the expected results easy to work out by hand.
"""

import os
import sys

import pytest

# Ensure the project root is on the path so the package directories resolve.
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from Preprocessing.feature_matrix import generate_feature_matrix  # noqa: E402


@pytest.fixture
def labial_matrix():
    """p, b and m distinguished by voice and sonorant only."""
    return generate_feature_matrix({
        'p': {'voice': '-', 'sonorant': '-'},
        'b': {'voice': '+', 'sonorant': '-'},
        'm': {'voice': '+', 'sonorant': '+'},
    })


@pytest.fixture
def stop_matrix():
    """Voiced and voiceless stops at three places of articulation."""
    return generate_feature_matrix({
        'p': {'voice': '-', 'anterior': '+', 'coronal': '-', 'high': '-'},
        't': {'voice': '-', 'anterior': '+', 'coronal': '+', 'high': '-'},
        'k': {'voice': '-', 'anterior': '-', 'coronal': '-', 'high': '+'},
        'b': {'voice': '+', 'anterior': '+', 'coronal': '-', 'high': '-'},
        'd': {'voice': '+', 'anterior': '+', 'coronal': '+', 'high': '-'},
        'g': {'voice': '+', 'anterior': '-', 'coronal': '-', 'high': '+'},
    })


@pytest.fixture
def partial_matrix():
    """'h' has no nasal value at all."""
    return generate_feature_matrix({
        'n': {'voice': '+', 'nasal': '+', 'sonorant': '+'},
        'l': {'voice': '+', 'nasal': '-', 'sonorant': '+'},
        'h': {'voice': '+', 'sonorant': '+'},
        's': {'voice': '-', 'nasal': '-', 'sonorant': '-'},
    })
