"""
pystatecu - Python package for StateCU consumptive use input files.

This package provides tools for:
- Reading and writing crop pattern (CDS) files
- Reading and writing irrigation practice (IPY) files
- Keeping irrigated acreage consistent across supply types
- Validating CU location data
"""

from __future__ import annotations

__version__ = "0.1.0"

from pystatecu.core.components import ComponentType
from pystatecu.core.crop_pattern import CropPatternTS
from pystatecu.core.dataset import StateCUDataSet
from pystatecu.core.exceptions import (
    CropNotFoundError,
    FormatError,
    ParseError,
    ProrationError,
    PyStateCUError,
    StateCUIOError,
    StateCUWriteError,
)
from pystatecu.core.irrigation_practice import IrrigationPracticeTS
from pystatecu.core.series import MISSING, AnnualSeries, is_missing
from pystatecu.io.crop_pattern_io import read_crop_pattern_file, write_crop_pattern_file
from pystatecu.io.irrigation_practice_io import (
    read_irrigation_practice_file,
    write_irrigation_practice_file,
)

__all__ = [
    "__version__",
    # Series
    "MISSING",
    "AnnualSeries",
    "is_missing",
    # Aggregates
    "CropPatternTS",
    "IrrigationPracticeTS",
    # Data set
    "ComponentType",
    "StateCUDataSet",
    # File I/O
    "read_crop_pattern_file",
    "write_crop_pattern_file",
    "read_irrigation_practice_file",
    "write_irrigation_practice_file",
    # Exceptions
    "PyStateCUError",
    "StateCUIOError",
    "FormatError",
    "ParseError",
    "StateCUWriteError",
    "CropNotFoundError",
    "ProrationError",
]
