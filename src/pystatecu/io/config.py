"""
Read and write options for StateCU files.

The options can be built directly or from the legacy string properties
(``Version``, ``ReadDataFrom``, ``AutoAdjust``, ``WriteCropArea``,
``WriteOnlyTotal``, ``PrecisionForArea``) used by existing StateCU
command files.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class ReadDataFrom(Enum):
    """Where crop areas come from when reading a crop pattern file."""

    CROP_AREA = "CropArea"  # explicit per-crop acreage column
    TOTAL_AND_CROP_FRACTION = "TotalAndCropFraction"  # total x fraction

    @classmethod
    def from_string(cls, s: str) -> ReadDataFrom:
        target = s.strip().lower()
        for member in cls:
            if member.value.lower() == target:
                return member
        raise ValueError(f"Unknown ReadDataFrom value: '{s}'")


def _parse_bool(value: str, name: str) -> bool:
    text = value.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"{name} must be True or False, got {value!r}")


def _parse_version(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass
class CropPatternReadConfig:
    """Options for reading crop pattern (CDS) files.

    Attributes:
        version: ``"10"`` forces the version 10 layout; None auto-detects.
        read_data_from: Read crop areas directly, or derive them from the
            total and crop fractions. Older layouts always use fractions.
        auto_adjust: Replace ``.`` with ``-`` in crop names.
    """

    version: str | None = None
    read_data_from: ReadDataFrom = ReadDataFrom.CROP_AREA
    auto_adjust: bool = False

    @property
    def is_version_10(self) -> bool:
        return self.version == "10"

    @classmethod
    def from_properties(cls, props: Mapping[str, str]) -> CropPatternReadConfig:
        config = cls(version=_parse_version(props.get("Version")))
        if props.get("ReadDataFrom"):
            config.read_data_from = ReadDataFrom.from_string(props["ReadDataFrom"])
        if props.get("AutoAdjust"):
            config.auto_adjust = _parse_bool(props["AutoAdjust"], "AutoAdjust")
        return config


@dataclass
class CropPatternWriteConfig:
    """Options for writing crop pattern (CDS) files.

    Attributes:
        version: ``"10"`` writes the version 10 layout.
        write_crop_area: Write the acreage column after each crop fraction.
        write_only_total: Write only the location totals, no crop lines.
    """

    version: str | None = None
    write_crop_area: bool = True
    write_only_total: bool = False

    @property
    def is_version_10(self) -> bool:
        return self.version == "10"

    @classmethod
    def from_properties(cls, props: Mapping[str, str]) -> CropPatternWriteConfig:
        config = cls(version=_parse_version(props.get("Version")))
        if props.get("WriteCropArea"):
            config.write_crop_area = _parse_bool(props["WriteCropArea"], "WriteCropArea")
        if props.get("WriteOnlyTotal"):
            config.write_only_total = _parse_bool(props["WriteOnlyTotal"], "WriteOnlyTotal")
        return config


@dataclass
class IrrigationPracticeReadConfig:
    """Options for reading irrigation practice (IPY) files."""

    version: str | None = None

    @property
    def is_version_10(self) -> bool:
        return self.version == "10"

    @classmethod
    def from_properties(cls, props: Mapping[str, str]) -> IrrigationPracticeReadConfig:
        return cls(version=_parse_version(props.get("Version")))


@dataclass
class IrrigationPracticeWriteConfig:
    """Options for writing irrigation practice (IPY) files.

    Attributes:
        version: ``"10"`` writes the version 10 layout.
        precision_for_area: Decimal places for acreage columns.
    """

    version: str | None = None
    precision_for_area: int = 0

    def __post_init__(self) -> None:
        if self.precision_for_area < 0:
            raise ValueError(f"precision_for_area must be >= 0, got {self.precision_for_area}")

    @property
    def is_version_10(self) -> bool:
        return self.version == "10"

    @classmethod
    def from_properties(cls, props: Mapping[str, str]) -> IrrigationPracticeWriteConfig:
        config = cls(version=_parse_version(props.get("Version")))
        precision = props.get("PrecisionForArea", "")
        if precision.strip().isdigit():
            config.precision_for_area = int(precision)
        return config
