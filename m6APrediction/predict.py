#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""m6APrediction Prediction Module

Predicts m6A methylation status for candidate sites with a pre-trained
classifier.

Model Input (one row per site):
- gc_content, exon_length, distance_to_junction, evolutionary_conservation
- RNA_type, RNA_region (categorical, fixed level order)
- nt_pos1 ... nt_posN, positional encoding of DNA_5mer

Output:
- The input table, unchanged, with two columns appended:
  * predicted_m6A_prob: probability of the "Positive" class
  * predicted_m6A_status: "Positive" if prob > threshold, else "Negative"

The classifier is any object exposing predict_proba() and classes_ in the
scikit-learn manner. It is passed explicitly to every call and never modified.
"""

import logging
import warnings

import numpy as np
import pandas as pd

from .constants import (
    REQUIRED_COLUMNS, DNA_5MER, GC_CONTENT, RNA_TYPE, RNA_REGION, EXON_LENGTH,
    DISTANCE_TO_JUNCTION, EVOLUTIONARY_CONSERVATION,
    PROB_COLUMN, STATUS_COLUMN, POSITIVE, NEGATIVE, DEFAULT_THRESHOLD,
)
from .encoding import (
    check_required_columns, check_feature_domains,
    encode_sequences, normalize_categories,
)
from .exceptions import ClassifierContractError, DomainWarning, SchemaError

# Set up logging
logger = logging.getLogger(__name__)


def prepare_features(feature_df):
    """Build the model input frame for a feature table.

    Keeps the seven required columns (categoricals normalized) followed by
    nt_pos1 ... nt_posN. Extra columns of feature_df are left out. The result
    has a fresh RangeIndex; feature_df is not modified.
    """
    check_required_columns(feature_df)
    base = normalize_categories(feature_df[REQUIRED_COLUMNS]).reset_index(drop=True)
    positions = encode_sequences(feature_df[DNA_5MER].reset_index(drop=True))
    return pd.concat([base, positions], axis=1)


def positive_class_probability(classifier, features):
    """Probability of the "Positive" class for each row of features.

    Args:
        classifier: Object exposing classes_ and predict_proba().
        features (pd.DataFrame): Model input as built by prepare_features().

    Returns:
        np.ndarray: 1-D array aligned with the rows of features.

    Raises:
        ClassifierContractError: classes_ missing or without "Positive", or a
            probability matrix of the wrong shape.
    """
    classes = getattr(classifier, 'classes_', None)
    if classes is None:
        raise ClassifierContractError("Classifier does not expose classes_")
    classes = [str(c) for c in classes]
    if POSITIVE not in classes:
        raise ClassifierContractError(f"Classifier has no '{POSITIVE}' class",
                                      details={'classes': classes})

    # Errors raised by the classifier itself propagate unchanged
    proba = np.asarray(classifier.predict_proba(features), dtype=float)

    if proba.ndim != 2 or proba.shape != (len(features), len(classes)):
        raise ClassifierContractError("Unexpected probability matrix shape",
                                      details={'expected': (len(features), len(classes)),
                                               'got': proba.shape})
    return proba[:, classes.index(POSITIVE)]


def predict_batch(classifier, feature_df, threshold=DEFAULT_THRESHOLD):
    """Predict m6A status for every site of a feature table.

    Args:
        classifier: Pre-trained classifier (see positive_class_probability).
        feature_df (pd.DataFrame): Must contain gc_content, RNA_type,
            RNA_region, exon_length, distance_to_junction,
            evolutionary_conservation and DNA_5mer. Extra columns are kept.
        threshold (float): A site is "Positive" only when its probability is
            strictly greater than threshold.

    Returns:
        pd.DataFrame: Copy of feature_df (same rows, order and index) with
        predicted_m6A_prob and predicted_m6A_status appended.

    Raises:
        SchemaError: Missing columns, empty table, malformed DNA_5mer, or
            input already holding predicted_m6A_prob/predicted_m6A_status.
            Raised before the classifier is called.
    """
    reserved = [col for col in (PROB_COLUMN, STATUS_COLUMN) if col in feature_df.columns]
    if reserved:
        raise SchemaError("Feature table already contains prediction columns",
                          details={'columns': reserved})

    domain_report = check_feature_domains(feature_df)
    if not domain_report.empty:
        summary = domain_report.groupby('column').size().to_dict()
        logger.warning(f"{len(domain_report)} out-of-domain values will be treated as missing: {summary}")
        warnings.warn(f"{len(domain_report)} out-of-domain values treated as missing levels: {summary}",
                      DomainWarning, stacklevel=2)

    features = prepare_features(feature_df)
    logger.info(f"Predicting m6A status for {len(features)} sites "
                f"({features.shape[1]} model features, threshold={threshold})")

    pred_prob = positive_class_probability(classifier, features)

    result = feature_df.copy()
    result[PROB_COLUMN] = pred_prob
    result[STATUS_COLUMN] = np.where(pred_prob > threshold, POSITIVE, NEGATIVE)
    return result


def predict_one(classifier, gc_content, rna_type, rna_region, exon_length,
                distance_to_junction, evolutionary_conservation, dna_5mer,
                threshold=DEFAULT_THRESHOLD):
    """Predict m6A status for a single site.

    Builds a one-row feature table and runs it through predict_batch(), so
    validation and categorical normalization are identical to the batch path.

    Returns:
        tuple: (predicted_m6A_prob, predicted_m6A_status)

    Example:
        >>> prob, status = predict_one(model, 0.55, "mRNA", "CDS", 1500, 120, 0.32, "ATCGA")
        # prob is the Positive-class probability, status "Positive" or "Negative"
    """
    single_df = pd.DataFrame({
        GC_CONTENT: [gc_content],
        RNA_TYPE: [rna_type],
        RNA_REGION: [rna_region],
        EXON_LENGTH: [exon_length],
        DISTANCE_TO_JUNCTION: [distance_to_junction],
        EVOLUTIONARY_CONSERVATION: [evolutionary_conservation],
        DNA_5MER: [dna_5mer],
    })
    pred_result = predict_batch(classifier, single_df, threshold=threshold)
    row = pred_result.iloc[0]
    return float(row[PROB_COLUMN]), str(row[STATUS_COLUMN])
