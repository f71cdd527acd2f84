"""Core data structures for pystatecu."""

from __future__ import annotations

from pystatecu.core.components import ComponentType
from pystatecu.core.crop_pattern import CropPatternTS, distinct_crop_names, to_series_list
from pystatecu.core.dataset import StateCUDataSet
from pystatecu.core.exceptions import (
    CropNotFoundError,
    FormatError,
    ParseError,
    ProrationError,
    PyStateCUError,
    ReconciliationWarning,
    StateCUIOError,
    StateCUWriteError,
)
from pystatecu.core.irrigation_practice import IrrigationPracticeTS
from pystatecu.core.parcel import Parcel, Supply

# Reconciliation and validation
from pystatecu.core.reconcile import SupplyPair
from pystatecu.core.series import MISSING, AnnualSeries, is_missing
from pystatecu.core.validation import (
    ValidationProblem,
    validate_crop_pattern,
    validate_dataset,
    validate_irrigation_practice,
)

__all__ = [
    # Series
    "MISSING",
    "AnnualSeries",
    "is_missing",
    # Aggregates
    "CropPatternTS",
    "IrrigationPracticeTS",
    "Parcel",
    "Supply",
    "distinct_crop_names",
    "to_series_list",
    # Data set
    "ComponentType",
    "StateCUDataSet",
    # Reconciliation and validation
    "SupplyPair",
    "ValidationProblem",
    "validate_crop_pattern",
    "validate_irrigation_practice",
    "validate_dataset",
    # Exceptions
    "PyStateCUError",
    "StateCUIOError",
    "FormatError",
    "ParseError",
    "StateCUWriteError",
    "CropNotFoundError",
    "ProrationError",
    "ReconciliationWarning",
]
