"""
Minimal StateCU data set container.

Holds parsed component data keyed by :class:`ComponentType`. Only the
crop pattern and irrigation practice components can be read here; other
components are stored if a caller provides them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pystatecu.core.components import ComponentType

logger = logging.getLogger(__name__)


class StateCUDataSet:
    """Parsed StateCU component data keyed by component type."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._data: dict[ComponentType, list[Any]] = {}
        self._paths: dict[ComponentType, Path] = {}

    def set(self, kind: ComponentType, data: list[Any], path: Path | str | None = None) -> None:
        self._data[kind] = list(data)
        if path is not None:
            self._paths[kind] = Path(path)

    def get(self, kind: ComponentType) -> list[Any]:
        """Return the data for *kind*, or an empty list."""
        return self._data.get(kind, [])

    def get_path(self, kind: ComponentType) -> Path | None:
        return self._paths.get(kind)

    def has(self, kind: ComponentType) -> bool:
        return kind in self._data

    @property
    def components(self) -> list[ComponentType]:
        return list(self._data)

    def read_component(
        self,
        path: Path | str,
        kind: ComponentType | None = None,
        config: Any = None,
    ) -> list[Any]:
        """Read a component file and store the result.

        Args:
            path: File to read.
            kind: Component type; inferred from the file extension if None.
            config: Read configuration passed to the component reader.

        Returns:
            The parsed aggregates.

        Raises:
            ValueError: If the component type cannot be read.
        """
        from pystatecu.io.crop_pattern_io import read_crop_pattern_file
        from pystatecu.io.irrigation_practice_io import read_irrigation_practice_file

        path = Path(path)
        if kind is None:
            kind = ComponentType.from_path(path)
        if kind is ComponentType.CROP_PATTERN_TS_YEARLY:
            data = read_crop_pattern_file(path, config=config)
        elif kind is ComponentType.IRRIGATION_PRACTICE_TS_YEARLY:
            data = read_irrigation_practice_file(path, config=config)
        else:
            raise ValueError(f"Reading {kind.display_name} files is not supported")
        self.set(kind, data, path)
        logger.info("Read %s: %d locations from %s", kind.display_name, len(data), path)
        return data
