"""
StateCU data set component types.

Each StateCU data set is made of components (control files, climate
data, crop data, CU location data). :class:`ComponentType` keeps the
display name, group and file extension of every component in a single
table so that they cannot drift apart.

Example
-------
>>> from pystatecu.core.components import ComponentType
>>> ComponentType.from_tag("cds").name
'CROP_PATTERN_TS_YEARLY'
>>> ComponentType.CROP_PATTERN_TS_YEARLY.group.display_name
'CU Location Data and Crops'
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ComponentType(Enum):
    """StateCU component types with their metadata.

    Each value is ``(display_name, group_member_name, file_tag)``. Group
    members have an empty tag and name themselves as their group.
    """

    CONTROL_GROUP = ("Control Data", "CONTROL_GROUP", "")
    RESPONSE = ("Response", "CONTROL_GROUP", "rcu")
    CONTROL = ("Control", "CONTROL_GROUP", "ccu")

    CLIMATE_STATIONS_GROUP = ("Climate Station Data", "CLIMATE_STATIONS_GROUP", "")
    CLIMATE_STATIONS = ("Climate Stations", "CLIMATE_STATIONS_GROUP", "cli")
    TEMPERATURE_TS_MONTHLY_AVERAGE = ("Temperature TS (Monthly Average)", "CLIMATE_STATIONS_GROUP", "stm")
    FROST_DATES_TS_YEARLY = ("Frost Dates TS (Yearly)", "CLIMATE_STATIONS_GROUP", "stm")
    PRECIPITATION_TS_MONTHLY = ("Precipitation TS (Monthly)", "CLIMATE_STATIONS_GROUP", "stm")

    CROP_CHARACTERISTICS_GROUP = ("Crop Characteristics/Coefficient Data", "CROP_CHARACTERISTICS_GROUP", "")
    CROP_CHARACTERISTICS = ("Crop Characteristics", "CROP_CHARACTERISTICS_GROUP", "cch")
    BLANEY_CRIDDLE = ("Blaney-Criddle Crop Coefficients", "CROP_CHARACTERISTICS_GROUP", "kbc")
    PENMAN_MONTEITH = ("Penman-Monteith Crop Coefficients", "CROP_CHARACTERISTICS_GROUP", "kpm")

    DELAY_TABLES_GROUP = ("Delay Table Data", "DELAY_TABLES_GROUP", "")
    DELAY_TABLES_MONTHLY = ("Delay Tables", "DELAY_TABLES_GROUP", "dly")

    CU_LOCATIONS_GROUP = ("CU Location Data and Crops", "CU_LOCATIONS_GROUP", "")
    CU_LOCATIONS = ("CU Locations", "CU_LOCATIONS_GROUP", "str")
    CROP_PATTERN_TS_YEARLY = ("Crop Pattern TS (Yearly)", "CU_LOCATIONS_GROUP", "cds")
    IRRIGATION_PRACTICE_TS_YEARLY = ("Irrigation Practice TS (Yearly)", "CU_LOCATIONS_GROUP", "ipy")
    DIVERSION_TS_MONTHLY = ("Diversion TS (Monthly)", "CU_LOCATIONS_GROUP", "ddh")
    WELL_PUMPING_TS_MONTHLY = ("Well Pumping TS (Monthly)", "CU_LOCATIONS_GROUP", "pvh")
    DIVERSION_RIGHTS = ("Diversion Water Rights", "CU_LOCATIONS_GROUP", "ddr")
    DELAY_TABLE_ASSIGNMENT_MONTHLY = ("Delay Assignment", "CU_LOCATIONS_GROUP", "dla")

    OTHER_GROUP = ("Other", "OTHER_GROUP", "")

    @property
    def display_name(self) -> str:
        return self.value[0]

    @property
    def group(self) -> ComponentType:
        """Group component this component belongs to."""
        return ComponentType[self.value[1]]

    @property
    def tag(self) -> str:
        """File extension used for the component (empty for groups)."""
        return self.value[2]

    @property
    def is_group(self) -> bool:
        return self.group is self

    @classmethod
    def from_tag(cls, tag: str) -> ComponentType:
        """Return the first component using file extension *tag*.

        ``tsp`` is accepted as the historical irrigation practice tag.
        """
        tag = tag.lower().lstrip(".")
        if tag == "tsp":
            return cls.IRRIGATION_PRACTICE_TS_YEARLY
        for member in cls:
            if member.tag and member.tag == tag:
                return member
        raise ValueError(f"Unknown StateCU file tag: '{tag}'")

    @classmethod
    def from_path(cls, path: Path | str) -> ComponentType:
        """Return the component type implied by a file's extension."""
        return cls.from_tag(Path(path).suffix)

    @classmethod
    def from_name(cls, name: str) -> ComponentType:
        target = name.strip().lower()
        for member in cls:
            if member.display_name.lower() == target:
                return member
        raise ValueError(f"Unknown StateCU component: '{name}'")

    @classmethod
    def members_of(cls, group: ComponentType) -> list[ComponentType]:
        """Return the non-group components of *group*, in table order."""
        return [m for m in cls if m.group is group and not m.is_group]
