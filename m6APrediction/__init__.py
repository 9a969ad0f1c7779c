#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
m6APrediction: m6A RNA methylation site prediction

This package predicts m6A methylation status of candidate sites from sequence
context and site attributes using a pre-trained classifier.
"""

__version__ = "1.0.0"

# Core modules
from .encoding import encode_sequences, check_feature_domains
from .predict import predict_batch, predict_one
from .model import load_model, make_feature_encoder
from .exceptions import (
    M6APredictionError,
    SchemaError,
    ClassifierContractError,
    DomainWarning,
)

__all__ = [
    "encode_sequences", "check_feature_domains",
    "predict_batch", "predict_one",
    "load_model", "make_feature_encoder",
    "M6APredictionError", "SchemaError", "ClassifierContractError", "DomainWarning",
]
