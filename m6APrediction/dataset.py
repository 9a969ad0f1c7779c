#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""Reading feature tables and writing prediction tables."""

import os
import logging

import pandas as pd

from .constants import NUMERIC_COLUMNS, DNA_5MER, RNA_TYPE, RNA_REGION
from .encoding import check_required_columns

logger = logging.getLogger(__name__)

EXAMPLE_FEATURES = os.path.join(os.path.dirname(__file__), 'data', 'm6A_input_example.csv')


def _infer_sep(path):
    ext = os.path.splitext(path)[1].lower()
    return '\t' if ext in ('.tsv', '.txt') else ','


def example_feature_table_path():
    """Path of the example feature table shipped with the package."""
    return EXAMPLE_FEATURES


def read_feature_table(features_file, sep=None):
    """Load a feature table from CSV or TSV.

    Args:
        features_file (str): Input path.
        sep (str, optional): Field separator. Inferred from the extension when
            omitted (.tsv/.txt -> tab, anything else -> comma).

    Returns:
        pd.DataFrame: Feature table with numeric columns coerced to numbers
        (unparseable values become NaN). DNA_5mer, RNA_type and RNA_region are
        read as plain strings, so values such as "NA" are kept as written.

    Raises:
        FileNotFoundError: features_file does not exist.
        SchemaError: Required columns missing or no rows.
    """
    if not os.path.exists(features_file):
        raise FileNotFoundError(f"Features file not found: {features_file}")

    sep = sep or _infer_sep(features_file)
    logger.info(f"Loading features from {features_file}...")
    df = pd.read_csv(features_file, sep=sep)
    check_required_columns(df)

    # Categorical columns are kept verbatim, without NA parsing
    string_cols = [DNA_5MER, RNA_TYPE, RNA_REGION]
    raw = pd.read_csv(features_file, sep=sep, usecols=string_cols, dtype=str, keep_default_na=False)
    for col in string_cols:
        df[col] = raw[col]

    for col in NUMERIC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors='coerce')

    logger.info(f"Loaded {len(df)} sites")
    return df


def write_prediction_table(df, output_file, sep=None):
    """Write a table without its index, creating parent directories as needed."""
    output_dir = os.path.dirname(output_file) or '.'
    os.makedirs(output_dir, exist_ok=True)
    df.to_csv(output_file, sep=sep or _infer_sep(output_file), index=False)
    logger.info(f"Results saved to {output_file}")
    return output_file
