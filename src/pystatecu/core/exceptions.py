"""Custom exceptions for pystatecu package."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class PyStateCUError(Exception):
    """Base exception for all pystatecu errors."""

    pass


class StateCUIOError(PyStateCUError):
    """Error related to file I/O operations."""

    pass


class FormatError(StateCUIOError):
    """Error raised when a file has no readable content or an unknown layout."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ParseError(StateCUIOError):
    """Error raised when a fixed-column record cannot be decoded.

    The aggregates already built before the failing line are kept on
    ``partial`` so a caller can decide whether to use them.
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
        partial: list[Any] | None = None,
    ) -> None:
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)
        self.line_number = line_number
        self.line = line
        self.partial = partial if partial is not None else []


class StateCUWriteError(StateCUIOError):
    """Error raised when an output file cannot be written."""

    def __init__(self, message: str, path: Path | str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = Path(path)


class CropNotFoundError(PyStateCUError, KeyError):
    """Error raised when a crop is not defined for a location."""

    def __init__(self, location_id: str, crop_name: str) -> None:
        super().__init__(f'Unable to find crop "{crop_name}" for location "{location_id}"')
        self.location_id = location_id
        self.crop_name = crop_name

    def __str__(self) -> str:
        return str(self.args[0])


class ProrationError(PyStateCUError, ValueError):
    """Error raised when crop areas cannot be prorated to a new total."""

    pass


class ReconciliationWarning(UserWarning):
    """Category for non-fatal reconciliation problems.

    Reconciliation never raises; the category name tags the log records
    emitted when a subtotal cannot be prorated.
    """

    pass
