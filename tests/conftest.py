"""
Shared fixtures for m6APrediction tests.
"""

import numpy as np
import pandas as pd
import pytest
from sklearn.ensemble import RandomForestClassifier
from sklearn.pipeline import make_pipeline

from m6APrediction.constants import RNA_TYPE_LEVELS, RNA_REGION_LEVELS, NUCLEOTIDE_LEVELS
from m6APrediction.model import make_feature_encoder
from m6APrediction.predict import prepare_features


class FixedProbabilityClassifier:
    """Stub classifier returning preset Positive probabilities."""

    classes_ = np.array(['Negative', 'Positive'])

    def __init__(self, probs):
        self.probs = probs
        self.calls = []

    def predict_proba(self, X):
        self.calls.append(X.copy())
        pos = np.resize(np.asarray(self.probs, dtype=float), len(X))
        return np.column_stack([1.0 - pos, pos])


class FailingClassifier:
    classes_ = np.array(['Negative', 'Positive'])

    def predict_proba(self, X):
        raise RuntimeError("model exploded")


@pytest.fixture
def feature_df():
    return pd.DataFrame({
        'site_id': ['s1', 's2', 's3', 's4'],
        'gc_content': [0.55, 0.61, 0.42, 0.48],
        'RNA_type': ['mRNA', 'mRNA', 'lincRNA', 'pseudogene'],
        'RNA_region': ['CDS', "3'UTR", 'intron', "5'UTR"],
        'exon_length': [1500, 2318, 980, 1204],
        'distance_to_junction': [120, -45, 310, 15],
        'evolutionary_conservation': [0.32, 0.87, 0.11, 0.54],
        'DNA_5mer': ['ATCGA', 'GGACT', 'TGGCA', 'AGACA'],
    }, index=[10, 11, 12, 13])


def _synthetic_training_table(n_rows=120, seed=0):
    rng = np.random.RandomState(seed)
    kmers = [''.join(rng.choice(NUCLEOTIDE_LEVELS, size=5)) for _ in range(n_rows)]
    df = pd.DataFrame({
        'gc_content': rng.uniform(0.2, 0.8, n_rows),
        'RNA_type': rng.choice(RNA_TYPE_LEVELS, n_rows),
        'RNA_region': rng.choice(RNA_REGION_LEVELS, n_rows),
        'exon_length': rng.randint(100, 5000, n_rows),
        'distance_to_junction': rng.randint(-500, 500, n_rows),
        'evolutionary_conservation': rng.uniform(0, 1, n_rows),
        'DNA_5mer': kmers,
    })
    # DRACH-like signal: central A with G upstream
    labels = np.where([k[1] == 'G' and k[2] == 'A' for k in kmers], 'Positive', 'Negative')
    labels[:2] = ['Positive', 'Negative']
    return df, labels


@pytest.fixture(scope='session')
def rf_model():
    df, labels = _synthetic_training_table()
    model = make_pipeline(make_feature_encoder(), RandomForestClassifier(n_estimators=25, random_state=0))
    model.fit(prepare_features(df), labels)
    return model
