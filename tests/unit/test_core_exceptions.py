"""Unit tests for pystatecu custom exceptions (core/exceptions.py)."""

from __future__ import annotations

import pytest

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


class TestExceptionHierarchy:
    """Tests for the exception class hierarchy."""

    def test_base_is_exception(self) -> None:
        assert issubclass(PyStateCUError, Exception)

    def test_io_errors_inherit(self) -> None:
        for cls in (FormatError, ParseError, StateCUWriteError):
            assert issubclass(cls, StateCUIOError)
            assert issubclass(cls, PyStateCUError)

    def test_crop_not_found_is_key_error(self) -> None:
        assert issubclass(CropNotFoundError, KeyError)
        assert issubclass(CropNotFoundError, PyStateCUError)

    def test_proration_error_is_value_error(self) -> None:
        assert issubclass(ProrationError, ValueError)

    def test_reconciliation_warning_is_not_an_error(self) -> None:
        assert issubclass(ReconciliationWarning, UserWarning)
        assert not issubclass(ReconciliationWarning, PyStateCUError)


class TestExceptionInstantiation:
    """Tests for exception creation and attributes."""

    def test_format_error_path(self) -> None:
        exc = FormatError("No data found", "x.cds")
        assert str(exc) == "No data found"
        assert exc.path is not None and exc.path.name == "x.cds"
        assert FormatError("bad").path is None

    def test_parse_error_with_line(self) -> None:
        exc = ParseError("Expected number", line_number=12, line="1950 ???")
        assert str(exc) == "Expected number (line 12)"
        assert exc.line == "1950 ???"
        assert exc.partial == []

    def test_parse_error_without_line(self) -> None:
        assert str(ParseError("oops")) == "oops"

    def test_parse_error_partial(self) -> None:
        exc = ParseError("bad", partial=["a", "b"])
        assert exc.partial == ["a", "b"]

    def test_write_error(self) -> None:
        exc = StateCUWriteError("Cannot write file", "/tmp/out.cds")
        assert str(exc) == "Cannot write file: /tmp/out.cds"
        assert exc.path.name == "out.cds"

    def test_crop_not_found_message(self) -> None:
        exc = CropNotFoundError("0100503", "WHEAT")
        assert str(exc) == 'Unable to find crop "WHEAT" for location "0100503"'
        assert (exc.location_id, exc.crop_name) == ("0100503", "WHEAT")

    def test_catch_as_key_error(self) -> None:
        with pytest.raises(KeyError):
            raise CropNotFoundError("A", "B")
