#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""m6APrediction Model Module

Loading of the persisted m6A classifier and the feature encoder that binds a
scikit-learn estimator to the fixed input schema.

A compatible artifact is a scikit-learn estimator (typically a Pipeline of
make_feature_encoder() and a RandomForestClassifier) saved with joblib. It
must accept the frame built by predict.prepare_features() and expose
classes_ containing "Positive".
"""

import os
import logging

import joblib
from sklearn.compose import ColumnTransformer
from sklearn.preprocessing import OneHotEncoder

from .constants import (
    RNA_TYPE, RNA_REGION, RNA_TYPE_LEVELS, RNA_REGION_LEVELS,
    NUCLEOTIDE_LEVELS, NUMERIC_COLUMNS,
)
from .encoding import position_columns
from .exceptions import ClassifierContractError

logger = logging.getLogger(__name__)


def load_model(model_path):
    """Load a persisted classifier.

    Args:
        model_path (str): Path to a joblib file.

    Returns:
        The loaded estimator. Treat it as read-only; it may be shared across calls.

    Raises:
        FileNotFoundError: model_path does not exist.
        ClassifierContractError: Loaded object has no predict_proba().
    """
    if not os.path.exists(model_path):
        raise FileNotFoundError(f"Model file not found: {model_path}")

    logger.info(f"Loading m6A classifier from {model_path}")
    model = joblib.load(model_path)
    if not callable(getattr(model, 'predict_proba', None)):
        raise ClassifierContractError("Loaded object does not provide predict_proba()",
                                      details={'type': type(model).__name__})
    return model


def make_feature_encoder(kmer_length=5):
    """Column transformer for the m6A model input.

    One-hot encodes RNA_type, RNA_region and nt_pos1 ... nt_pos{kmer_length}
    with the fixed level orderings. Unknown or missing levels encode as all
    zeros. The four numeric features are passed through unchanged.

    Args:
        kmer_length (int): Width of DNA_5mer the model is built for.

    Returns:
        sklearn.compose.ColumnTransformer (unfitted)
    """
    nt_columns = position_columns(kmer_length)
    categorical = [RNA_TYPE, RNA_REGION] + nt_columns
    categories = [RNA_TYPE_LEVELS, RNA_REGION_LEVELS] + [NUCLEOTIDE_LEVELS] * kmer_length

    return ColumnTransformer([
        ('categorical', OneHotEncoder(categories=categories, handle_unknown='ignore'), categorical),
        ('numeric', 'passthrough', NUMERIC_COLUMNS),
    ])
