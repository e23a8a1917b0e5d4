"""Tests for the render-setting enumerations and their lookup tables."""
import pytest

from pdf_composer.models.enums import (
    FONT_FACES,
    PAPER_DIMENSIONS_IN,
    PaperOrientation,
    PaperSize,
    PdfVersion,
    StandardFont,
)


class TestPdfVersion:

    def test_choices(self):
        assert PdfVersion.choices() == ["1.7", "2.0"]

    def test_header(self):
        assert PdfVersion.V2_0.header == b"%PDF-2.0"

    @pytest.mark.parametrize("name", ["1.7", "V1_7", "v1-7", PdfVersion.V1_7])
    def test_from_name(self, name):
        assert PdfVersion.from_name(name) is PdfVersion.V1_7


class TestPaperSize:

    def test_every_size_has_dimensions(self):
        assert set(PAPER_DIMENSIONS_IN) == set(PaperSize)

    def test_a4_in_millimeters(self):
        assert PaperSize.A4.millimeters == (210.82, 297.18)

    def test_letter_in_inches(self):
        assert PaperSize.LETTER.inches == (8.5, 11.0)

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("A4", PaperSize.A4),
            ("a4", PaperSize.A4),
            ("HalfLetter", PaperSize.HALF_LETTER),
            ("half_letter", PaperSize.HALF_LETTER),
            ("JIS-B5", PaperSize.JIS_B5),
            ("jis_b5", PaperSize.JIS_B5),
        ],
    )
    def test_from_name(self, name, expected):
        assert PaperSize.from_name(name) is expected

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Expected one of"):
            PaperSize.from_name("postcard")


class TestPaperOrientation:

    def test_choices(self):
        assert PaperOrientation.choices() == ["portrait", "landscape"]

    def test_from_name_case_insensitive(self):
        assert PaperOrientation.from_name("LANDSCAPE") is PaperOrientation.LANDSCAPE


class TestStandardFont:

    def test_fourteen_fonts(self):
        assert len(StandardFont) == 14
        assert set(FONT_FACES) == set(StandardFont)

    def test_bold_oblique_face(self):
        face = StandardFont.HELVETICA_BOLD_OBLIQUE.face
        assert face.family == "Helvetica, sans-serif"
        assert face.weight == "bold"
        assert face.style == "italic"

    def test_times_roman_face(self):
        face = StandardFont.TIMES_ROMAN.face
        assert face.family == "'Times New Roman', Times, serif"
        assert (face.weight, face.style) == ("normal", "normal")

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("times-roman", StandardFont.TIMES_ROMAN),
            ("TIMES_ROMAN", StandardFont.TIMES_ROMAN),
            ("zapf-dingbats", StandardFont.ZAPF_DINGBATS),
        ],
    )
    def test_from_name(self, name, expected):
        assert StandardFont.from_name(name) is expected
