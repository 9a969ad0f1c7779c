#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""m6APrediction Encoding Module

Turns the raw feature table into the categorical representation the m6A
classifier was trained on:

- DNA_5mer: split into one categorical column per nucleotide position
  (nt_pos1 ... nt_posN), levels A/T/C/G
- RNA_type: categorical, levels mRNA/lincRNA/lncRNA/pseudogene
- RNA_region: categorical, levels CDS/intron/3'UTR/5'UTR

Values outside these closed domains are not rejected. They become missing
levels, which the classifier treats as an absent feature.
check_feature_domains() reports them.
"""

import logging

import pandas as pd

from .constants import (
    REQUIRED_COLUMNS, CATEGORY_LEVELS, NUCLEOTIDE_LEVELS,
    POSITION_PREFIX, DNA_5MER,
)
from .exceptions import SchemaError

logger = logging.getLogger(__name__)


def position_columns(width):
    """Column names for a k-mer of the given width: nt_pos1 ... nt_pos{width}."""
    return [f'{POSITION_PREFIX}{i}' for i in range(1, width + 1)]


def check_required_columns(feature_df):
    """Raise SchemaError unless feature_df holds every required column and at least one row."""
    missing = [col for col in REQUIRED_COLUMNS if col not in feature_df.columns]
    if missing:
        raise SchemaError("Feature table is missing required columns",
                          details={'missing': missing})
    if len(feature_df) == 0:
        raise SchemaError("Feature table has no rows")


def _sequence_width(sequences, labels):
    # Width is taken from the first sequence and enforced on all others
    not_str = [label for label, seq in zip(labels, sequences) if not isinstance(seq, str)]
    if not_str:
        raise SchemaError(f"{DNA_5MER} values must be strings", details={'rows': not_str[:10]})

    width = len(sequences[0])
    if width == 0:
        raise SchemaError(f"{DNA_5MER} values must not be empty")

    uneven = [label for label, seq in zip(labels, sequences) if len(seq) != width]
    if uneven:
        raise SchemaError(f"{DNA_5MER} values differ in length",
                          details={'expected_length': width, 'rows': uneven[:10]})
    return width


def to_levels(values, levels):
    """Categorical with fixed levels; values outside levels become missing."""
    values = values.astype(object)
    return pd.Categorical(values.where(values.isin(levels)), categories=levels)


def encode_sequences(sequences):
    """Encode DNA k-mers into one categorical column per nucleotide position.

    Args:
        sequences: Non-empty ordered collection of equal-length strings. When a
            pandas Series is given, its index is kept on the result.

    Returns:
        pd.DataFrame: One row per sequence, columns nt_pos1 ... nt_posN with
        categorical dtype (levels A, T, C, G). Characters outside the alphabet
        are stored as missing values.

    Raises:
        SchemaError: Empty input, non-string values, or unequal lengths.

    Example:
        >>> encode_sequences(["ATCGA", "TGGCA"])
           nt_pos1 nt_pos2 nt_pos3 nt_pos4 nt_pos5
        0       A       T       C       G       A
        1       T       G       G       C       A
    """
    if isinstance(sequences, str):
        sequences = [sequences]
    index = sequences.index if isinstance(sequences, pd.Series) else None
    sequences = list(sequences)
    if not sequences:
        raise SchemaError("No sequences to encode")

    labels = list(index) if index is not None else list(range(len(sequences)))
    width = _sequence_width(sequences, labels)

    columns = position_columns(width)
    encoded = pd.DataFrame([list(seq) for seq in sequences], columns=columns, index=index)
    for col in columns:
        encoded[col] = to_levels(encoded[col], NUCLEOTIDE_LEVELS)
    return encoded


def normalize_categories(feature_df):
    """Return a copy of feature_df with RNA_type and RNA_region as fixed-level categoricals."""
    normalized = feature_df.copy()
    for column, levels in CATEGORY_LEVELS.items():
        normalized[column] = to_levels(normalized[column], levels)
    return normalized


def check_feature_domains(feature_df):
    """Report values that fall outside the closed categorical domains.

    Checks RNA_type, RNA_region and every character of DNA_5mer. Missing
    values count as out of domain.

    Args:
        feature_df (pd.DataFrame): Feature table.

    Returns:
        pd.DataFrame: Columns 'row' (index label of the offending row),
        'column' (RNA_type, RNA_region or nt_posK) and 'value'. Empty when
        every value is inside its domain.

    Raises:
        SchemaError: Missing required columns, empty table, or malformed
            DNA_5mer values.
    """
    check_required_columns(feature_df)
    sequences = feature_df[DNA_5MER]
    _sequence_width(list(sequences), list(sequences.index))

    records = []
    for column, levels in CATEGORY_LEVELS.items():
        values = feature_df[column]
        for row, value in values[~values.isin(levels)].items():
            records.append({'row': row, 'column': column, 'value': value})

    for row, seq in sequences.items():
        for pos, base in enumerate(seq, start=1):
            if base not in NUCLEOTIDE_LEVELS:
                records.append({'row': row, 'column': f'{POSITION_PREFIX}{pos}', 'value': base})

    return pd.DataFrame(records, columns=['row', 'column', 'value'])
