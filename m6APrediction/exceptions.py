#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""Exceptions and warnings raised by m6APrediction."""

from typing import Optional


class M6APredictionError(Exception):
    """Base class for m6APrediction errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class SchemaError(M6APredictionError, ValueError):
    """Feature table does not follow the fixed input schema.

    Raised for missing required columns, empty tables, missing sequences and
    sequences of unequal length. No predictions are produced.
    """
    pass


class ClassifierContractError(M6APredictionError):
    """Classifier does not expose the expected probability interface."""
    pass


class DomainWarning(UserWarning):
    """A categorical value or nucleotide lies outside its closed domain.

    The value is fed to the classifier as a missing level instead of being
    rejected.
    """
    pass
