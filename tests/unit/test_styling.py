#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_styling.py
"""Tests for font descriptors, trait composition and the reportlab backend."""

import logging

import pytest

from markrun.attributed import AttributedString, AttributeKey
from markrun.styling import FontDescriptor, FontTrait, FontWeight, NamedColor, ReportLabStyleBackend
from markrun.styling.traits import apply_traits


@pytest.fixture
def reportlab_backend():
    """Provide a reportlab backend with the standard families."""
    return ReportLabStyleBackend()


@pytest.mark.unit
class TestFontDescriptor:
    """Tests for FontDescriptor and style tokens."""

    def test_trait_properties(self):
        """Test bold and italic flags reflect the traits."""
        traits = FontTrait.BOLD | FontTrait.ITALIC
        font = FontDescriptor(family="Body", face="Body-BoldItalic", size=12.0, traits=traits)
        assert font.bold
        assert font.italic
        assert not FontDescriptor(family="Body", face="Body", size=12.0).bold

    def test_named_color_hex(self):
        """Test named colors expose their hex value."""
        assert NamedColor.GRAY.hex == "#8E8E93"
        assert NamedColor.BLUE.hex == "#007AFF"


@pytest.mark.unit
class TestReportLabFaces:
    """Tests for face resolution with the standard PDF fonts."""

    def test_system_font(self, reportlab_backend):
        """Test the regular and bold body faces."""
        assert reportlab_backend.system_font(15.0).face == "Helvetica"
        assert reportlab_backend.system_font(15.0, FontWeight.BOLD).face == "Helvetica-Bold"

    def test_monospaced_font(self, reportlab_backend):
        """Test the code font is flagged monospaced."""
        font = reportlab_backend.monospaced_font(14.0)
        assert font.face == "Courier"
        assert font.monospaced
        assert font.size == 14.0

    def test_monospaced_digit_font(self, reportlab_backend):
        """Test the numeral font uses the body family with tabular digits."""
        font = reportlab_backend.monospaced_digit_font(15.0)
        assert font.family == "Helvetica"
        assert font.monospaced_digits

    @pytest.mark.parametrize(
        "traits,face",
        [
            (FontTrait.BOLD, "Helvetica-Bold"),
            (FontTrait.ITALIC, "Helvetica-Oblique"),
            (FontTrait.BOLD | FontTrait.ITALIC, "Helvetica-BoldOblique"),
        ],
    )
    def test_with_traits_faces(self, reportlab_backend, traits, face):
        """Test trait combinations resolve to the matching Helvetica face."""
        font = reportlab_backend.system_font(15.0)
        assert reportlab_backend.with_traits(font, traits).face == face

    def test_times_family(self):
        """Test that another standard family uses its own face names."""
        backend = ReportLabStyleBackend(font_family="Times")
        font = backend.system_font(12.0)
        assert font.face == "Times-Roman"
        assert backend.with_traits(font, FontTrait.ITALIC).face == "Times-Italic"

    def test_traits_are_additive(self, reportlab_backend):
        """Test that italic applied to bold keeps bold."""
        bold = reportlab_backend.system_font(15.0, FontWeight.BOLD)
        both = reportlab_backend.with_traits(bold, FontTrait.ITALIC)
        assert both.traits == FontTrait.BOLD | FontTrait.ITALIC
        assert both.face == "Helvetica-BoldOblique"

    def test_traits_are_idempotent(self, reportlab_backend):
        """Test that applying a trait twice equals applying it once."""
        font = reportlab_backend.system_font(15.0)
        once = reportlab_backend.with_traits(font, FontTrait.BOLD)
        twice = reportlab_backend.with_traits(once, FontTrait.BOLD)
        assert once == twice

    def test_point_size_override(self, reportlab_backend):
        """Test that with_traits can change the point size."""
        font = reportlab_backend.system_font(15.0)
        heading = reportlab_backend.with_traits(font, FontTrait.BOLD, point_size=26.0)
        assert heading.size == 26.0
        assert heading.face == "Helvetica-Bold"
        assert reportlab_backend.with_traits(font, FontTrait.BOLD).size == 15.0

    def test_unknown_family_falls_back_to_helvetica(self, caplog):
        """Test that a missing family substitutes the matching Helvetica variant."""
        backend = ReportLabStyleBackend(font_family="NoSuchFamily")
        with caplog.at_level(logging.DEBUG, logger="markrun.styling.reportlab_backend"):
            font = backend.system_font(15.0)
            bold_italic = backend.with_traits(font, FontTrait.BOLD | FontTrait.ITALIC)

        assert font.face == "Helvetica"
        assert font.family == "NoSuchFamily"
        assert bold_italic.face == "Helvetica-BoldOblique"
        assert "substituting" in caplog.text


@pytest.mark.unit
class TestReportLabMeasure:
    """Tests for text measurement."""

    def test_measure_scales_with_size(self, reportlab_backend):
        """Test widths are positive and proportional to point size."""
        small = reportlab_backend.measure("12.", reportlab_backend.system_font(10.0))
        large = reportlab_backend.measure("12.", reportlab_backend.system_font(20.0))
        assert small > 0
        assert large == pytest.approx(small * 2)

    def test_measure_bullet(self, reportlab_backend):
        """Test the bullet glyph has a width narrower than its point size."""
        width = reportlab_backend.measure("•", reportlab_backend.system_font(15.0))
        assert 0 < width < 15.0

    def test_digits_share_an_advance(self, reportlab_backend):
        """Test the numeral font sets every digit on the same advance."""
        font = reportlab_backend.monospaced_digit_font(15.0)
        widths = {reportlab_backend.measure(digit, font) for digit in "0123456789"}
        assert len(widths) == 1

    def test_unmeasurable_face_uses_average_advance(self, reportlab_backend):
        """Test measurement of an unknown face falls back to half the size per character."""
        font = FontDescriptor(family="Ghost", face="Ghost-Face-Not-Registered", size=10.0)
        assert reportlab_backend.measure("abcd", font) == 20.0


@pytest.mark.unit
class TestApplyTraits:
    """Tests for applying traits across a fragment."""

    def test_apply_traits_to_every_font(self, fake_backend):
        """Test traits reach every run and keep other attributes."""
        regular = fake_backend.system_font(15.0)
        fragment = AttributedString.from_text("a", {AttributeKey.FONT: regular})
        fragment.append(
            AttributedString.from_text(
                "b",
                {AttributeKey.FONT: fake_backend.with_traits(regular, FontTrait.BOLD), AttributeKey.LINK: "x"},
            )
        )

        apply_traits(fragment, FontTrait.ITALIC, fake_backend)

        assert [run.font.face for run in fragment] == ["Body-Italic", "Body-BoldItalic"]
        assert fragment.runs[1].get(AttributeKey.LINK) == "x"

    def test_apply_traits_with_point_size(self, fake_backend):
        """Test that a point size override applies to every run."""
        fragment = AttributedString.from_text("a", {AttributeKey.FONT: fake_backend.system_font(15.0)})
        fragment.append(AttributedString.from_text("b", {AttributeKey.FONT: fake_backend.monospaced_font(14.0)}))

        apply_traits(fragment, FontTrait.BOLD, fake_backend, point_size=24.0)

        assert [(run.font.face, run.font.size) for run in fragment] == [("Body-Bold", 24.0), ("Mono-Bold", 24.0)]

    def test_apply_traits_ignores_runs_without_font(self, fake_backend):
        """Test runs without a font attribute are left untouched."""
        fragment = AttributedString.from_text("plain")
        apply_traits(fragment, FontTrait.BOLD, fake_backend)
        assert fragment.runs[0].font is None
