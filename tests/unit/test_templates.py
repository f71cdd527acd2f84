"""Unit tests for the template engine, filters and writer base."""

from __future__ import annotations

from pathlib import Path

import pytest

from pystatecu.core.series import MISSING
from pystatecu.io.writer_base import TemplateWriter
from pystatecu.templates import TemplateEngine
from pystatecu.templates.filters import (
    area_field,
    fixed_float,
    fixed_int,
    fixed_text,
    mode_field,
    statecu_comment,
)


class TestNumberFilters:
    """Tests for fixed-width number formatting."""

    def test_fixed_float(self) -> None:
        assert fixed_float(12.5) == "    12.500"
        assert fixed_float(0.6, 6, 2) == "  0.60"

    def test_fixed_float_overflow_drops_decimals(self) -> None:
        assert fixed_float(123456789.0, 10, 3) == " 123456789"

    def test_fixed_float_widens_instead_of_truncating(self) -> None:
        assert fixed_float(12345678901.0, 10, 3) == "12345678901"
        assert fixed_int(12345678901, 10) == "12345678901"

    def test_fixed_int(self) -> None:
        assert fixed_int(2) == "         2"
        assert fixed_int(7, 3) == "  7"

    def test_area_field(self) -> None:
        assert area_field(60.0) == "      60"
        assert area_field(60.25, 8, 2) == "   60.25"
        assert area_field(2000000.0, 8, 2) == " 2000000"
        assert area_field(MISSING) == "    -999"

    def test_mode_field(self) -> None:
        assert mode_field(2.0) == "  2"
        assert mode_field(2.95) == "  3"
        assert mode_field(MISSING) == "   "


class TestTextFilters:
    def test_fixed_text(self) -> None:
        assert fixed_text("ALFALFA", 10) == "ALFALFA   "
        assert fixed_text("ACRE", 6, left=False) == "  ACRE"
        assert fixed_text("A_VERY_LONG_CROP_NAME", 6) == "A_VERY"

    def test_statecu_comment(self) -> None:
        assert statecu_comment("hello") == "#>  hello"
        assert statecu_comment("one\n\ntwo") == "#>  one\n#>\n#>  two"
        assert statecu_comment("x", prefix="#") == "#  x"


class TestTemplateEngine:
    """Tests for TemplateEngine."""

    def test_render_string_with_filters(self) -> None:
        engine = TemplateEngine()
        assert engine.render_string("[{{ v | fixed_float(8, 2) }}]", v=1.5) == "[    1.50]"
        assert engine.render_string("{{ 'x' | statecu_comment }}") == "#>  x"

    def test_builtin_headers(self) -> None:
        engine = TemplateEngine()
        text = engine.render_template(
            "crop_pattern_header.txt",
            comments=[],
            version10=False,
            crop_width=30,
            write_crop_area=True,
            write_only_total=False,
        )
        assert text.endswith("#>EndHeader\n")
        assert all(line.startswith("#>") for line in text.splitlines())
        assert "(5x,a30,f10.3,f10.3)" in text

    def test_render_string_does_not_escape(self) -> None:
        assert TemplateEngine().render_string("{{ text }}", text="#> a < b & c") == "#> a < b & c"

    def test_version_10_header_area_precision(self) -> None:
        text = TemplateEngine().render_template(
            "irrigation_practice_header.txt", comments=[], version10=True, precision=2
        )
        assert "2(f8.2),f12.0,i3,f8.2)" in text

    def test_version_10_header(self) -> None:
        text = TemplateEngine().render_template(
            "irrigation_practice_header.txt", comments=[], version10=True, precision=0
        )
        assert "AcSprnk" in text
        assert "acswfl" not in text
        assert all(line.startswith("#>") for line in text.splitlines())

    def test_custom_dir_overrides(self, tmp_path: Path) -> None:
        (tmp_path / "crop_pattern_header.txt").write_text("#> custom {{ comments | length }}\n")
        engine = TemplateEngine(template_dir=tmp_path)
        assert engine.render_template("crop_pattern_header.txt", comments=["a"]) == "#> custom 1\n"
        # built-ins are still found
        assert "EndHeader" in engine.render_template(
            "irrigation_practice_header.txt", comments=[], version10=False, precision=0
        )


class _EchoWriter(TemplateWriter):
    @property
    def format(self) -> str:
        return "txt"

    def write(self, data, filepath, year1=None, year2=None) -> Path:
        filepath = Path(filepath)
        filepath.write_text(self.render_string("{% for d in data %}{{ d }}\n{% endfor %}", data=data))
        return filepath


class TestTemplateWriter:
    """Tests for the TemplateWriter base class."""

    def test_abstract(self) -> None:
        with pytest.raises(TypeError):
            TemplateWriter()  # type: ignore[abstract]

    def test_render_header_uses_comments(self) -> None:
        writer = _EchoWriter(comments=["from writer"])
        text = writer.render_header(
            "irrigation_practice_header.txt", version10=False, precision=0
        )
        assert "#>  from writer\n" in text

    def test_subclass_write(self, tmp_path: Path) -> None:
        path = _EchoWriter().write([1, 2], tmp_path / "x.txt")
        assert path.read_text() == "1\n2\n"
