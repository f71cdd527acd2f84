"""I/O handlers for StateCU file formats."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

# ---------------------------------------------------------------------------
# Lazy import mapping: symbol_name -> (module_path, attr_name)
# ---------------------------------------------------------------------------
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    # Configuration
    "ReadDataFrom": ("pystatecu.io.config", "ReadDataFrom"),
    "CropPatternReadConfig": ("pystatecu.io.config", "CropPatternReadConfig"),
    "CropPatternWriteConfig": ("pystatecu.io.config", "CropPatternWriteConfig"),
    "IrrigationPracticeReadConfig": ("pystatecu.io.config", "IrrigationPracticeReadConfig"),
    "IrrigationPracticeWriteConfig": ("pystatecu.io.config", "IrrigationPracticeWriteConfig"),
    # Layouts
    "FileKind": ("pystatecu.io.fixed_format", "FileKind"),
    "FileLayout": ("pystatecu.io.fixed_format", "FileLayout"),
    "detect_layout": ("pystatecu.io.format_detect", "detect_layout"),
    "scan_period": ("pystatecu.io.format_detect", "scan_period"),
    # Crop pattern files
    "CropPatternWriter": ("pystatecu.io.crop_pattern_io", "CropPatternWriter"),
    "read_crop_pattern_file": ("pystatecu.io.crop_pattern_io", "read_crop_pattern_file"),
    "write_crop_pattern_file": ("pystatecu.io.crop_pattern_io", "write_crop_pattern_file"),
    # Irrigation practice files
    "IrrigationPracticeWriter": ("pystatecu.io.irrigation_practice_io", "IrrigationPracticeWriter"),
    "read_irrigation_practice_file": ("pystatecu.io.irrigation_practice_io", "read_irrigation_practice_file"),
    "write_irrigation_practice_file": ("pystatecu.io.irrigation_practice_io", "write_irrigation_practice_file"),
    # Writer base
    "TemplateWriter": ("pystatecu.io.writer_base", "TemplateWriter"),
}

__all__ = list(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy import of io symbols and submodules (PEP 562).

    Resolved values are cached in ``globals()`` so subsequent access is a
    plain dict lookup.
    """
    spec = _LAZY_IMPORTS.get(name)
    if spec is not None:
        module_path, attr_name = spec
        value = getattr(importlib.import_module(module_path), attr_name)
        globals()[name] = value
        return value

    try:
        module = importlib.import_module(f"pystatecu.io.{name}")
    except ImportError:
        raise AttributeError(f"module 'pystatecu.io' has no attribute {name!r}") from None
    globals()[name] = module
    return module


if TYPE_CHECKING:
    from pystatecu.io.config import CropPatternReadConfig as CropPatternReadConfig
    from pystatecu.io.config import CropPatternWriteConfig as CropPatternWriteConfig
    from pystatecu.io.config import IrrigationPracticeReadConfig as IrrigationPracticeReadConfig
    from pystatecu.io.config import IrrigationPracticeWriteConfig as IrrigationPracticeWriteConfig
    from pystatecu.io.config import ReadDataFrom as ReadDataFrom
    from pystatecu.io.crop_pattern_io import CropPatternWriter as CropPatternWriter
    from pystatecu.io.crop_pattern_io import read_crop_pattern_file as read_crop_pattern_file
    from pystatecu.io.crop_pattern_io import write_crop_pattern_file as write_crop_pattern_file
    from pystatecu.io.fixed_format import FileKind as FileKind
    from pystatecu.io.fixed_format import FileLayout as FileLayout
    from pystatecu.io.format_detect import detect_layout as detect_layout
    from pystatecu.io.format_detect import scan_period as scan_period
    from pystatecu.io.irrigation_practice_io import IrrigationPracticeWriter as IrrigationPracticeWriter
    from pystatecu.io.irrigation_practice_io import (
        read_irrigation_practice_file as read_irrigation_practice_file,
    )
    from pystatecu.io.irrigation_practice_io import (
        write_irrigation_practice_file as write_irrigation_practice_file,
    )
    from pystatecu.io.writer_base import TemplateWriter as TemplateWriter
