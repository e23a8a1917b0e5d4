"""
Enumeration Types
------------------

Closed enumerations for PDF Composer render settings.

Enums:
    - PdfVersion: PDF header version written to every output (1.7, 2.0)
    - PaperSize: Standard ISO A/B, North American and JIS paper sizes
    - PaperOrientation: Portrait or landscape
    - StandardFont: The 14 standard PDF typefaces

Each enum has an associated lookup table (paper dimensions, CSS font
faces). The tables are module-level constants and are never extended at
runtime.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum
from typing import Dict, List, NamedTuple, Tuple, Type, TypeVar

# --- Local imports ---
from pdf_composer.core.paths import MM_PER_INCH


E = TypeVar("E", bound=Enum)


def _from_name(enum_cls: Type[E], name: str) -> E:
    """
    Look up an enum member from its value or member name, ignoring case.

    Raises:
        ValueError: If the name matches no member
    """
    if isinstance(name, enum_cls):
        return name
    wanted = str(name).strip().lower().replace("_", "-")
    for member in enum_cls:
        spellings = {
            str(member.value).lower(),
            member.name.lower().replace("_", "-"),
        }
        if wanted in spellings:
            return member
    raise ValueError(
        f"Unknown {enum_cls.__name__} '{name}'. "
        f"Expected one of: {', '.join(str(m.value) for m in enum_cls)}"
    )


class PdfVersion(str, Enum):
    """PDF specification version written in the file header."""

    V1_7 = "1.7"
    V2_0 = "2.0"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all available PDF versions."""
        return [version.value for version in cls]

    @classmethod
    def from_name(cls, name: str) -> "PdfVersion":
        return _from_name(cls, name)

    @property
    def header(self) -> bytes:
        """File header line, e.g. b'%PDF-1.7'."""
        return f"%PDF-{self.value}".encode("ascii")


class PaperOrientation(str, Enum):
    """
    Page orientation.

    - PORTRAIT: Paper dimensions used as listed
    - LANDSCAPE: Width and height swapped
    """

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all available orientations."""
        return [orientation.value for orientation in cls]

    @classmethod
    def from_name(cls, name: str) -> "PaperOrientation":
        return _from_name(cls, name)


class PaperSize(str, Enum):
    """
    Enumeration of standard paper sizes.

    Physical dimensions (portrait) are looked up in PAPER_DIMENSIONS_IN.
    """

    A0 = "A0"
    A1 = "A1"
    A2 = "A2"
    A3 = "A3"
    A4 = "A4"
    A5 = "A5"
    A6 = "A6"
    A7 = "A7"
    A8 = "A8"
    A9 = "A9"
    A10 = "A10"
    B0 = "B0"
    B1 = "B1"
    B2 = "B2"
    B3 = "B3"
    B4 = "B4"
    B5 = "B5"
    B6 = "B6"
    B7 = "B7"
    B8 = "B8"
    B9 = "B9"
    B10 = "B10"
    HALF_LETTER = "HalfLetter"
    LETTER = "Letter"
    LEGAL = "Legal"
    JUNIOR_LEGAL = "JuniorLegal"
    LEDGER = "Ledger"
    TABLOID = "Tabloid"
    JIS_B0 = "JIS-B0"
    JIS_B1 = "JIS-B1"
    JIS_B2 = "JIS-B2"
    JIS_B3 = "JIS-B3"
    JIS_B4 = "JIS-B4"
    JIS_B5 = "JIS-B5"
    JIS_B6 = "JIS-B6"
    JIS_B7 = "JIS-B7"
    JIS_B8 = "JIS-B8"
    JIS_B9 = "JIS-B9"
    JIS_B10 = "JIS-B10"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all available paper sizes."""
        return [size.value for size in cls]

    @classmethod
    def from_name(cls, name: str) -> "PaperSize":
        return _from_name(cls, name)

    @property
    def inches(self) -> Tuple[float, float]:
        """(width, height) in inches, portrait."""
        return PAPER_DIMENSIONS_IN[self]

    @property
    def millimeters(self) -> Tuple[float, float]:
        """(width, height) in millimeters, portrait."""
        width, height = self.inches
        return round(width * MM_PER_INCH, 2), round(height * MM_PER_INCH, 2)


# (width, height) in inches
PAPER_DIMENSIONS_IN: Dict[PaperSize, Tuple[float, float]] = {
    PaperSize.A0: (33.1, 46.8),
    PaperSize.A1: (23.4, 33.1),
    PaperSize.A2: (16.5, 23.4),
    PaperSize.A3: (11.7, 16.5),
    PaperSize.A4: (8.3, 11.7),
    PaperSize.A5: (5.8, 8.3),
    PaperSize.A6: (4.1, 5.8),
    PaperSize.A7: (2.9, 4.1),
    PaperSize.A8: (2.0, 2.9),
    PaperSize.A9: (1.5, 2.0),
    PaperSize.A10: (1.0, 1.5),
    PaperSize.B0: (39.4, 55.7),
    PaperSize.B1: (27.8, 39.4),
    PaperSize.B2: (19.7, 27.8),
    PaperSize.B3: (13.9, 19.7),
    PaperSize.B4: (9.8, 13.9),
    PaperSize.B5: (6.9, 9.8),
    PaperSize.B6: (4.9, 6.9),
    PaperSize.B7: (3.5, 4.9),
    PaperSize.B8: (2.4, 3.5),
    PaperSize.B9: (1.7, 2.4),
    PaperSize.B10: (1.2, 1.7),
    PaperSize.HALF_LETTER: (5.5, 8.5),
    PaperSize.LETTER: (8.5, 11.0),
    PaperSize.LEGAL: (8.5, 14.0),
    PaperSize.JUNIOR_LEGAL: (8.0, 5.0),
    PaperSize.LEDGER: (17.0, 11.0),
    PaperSize.TABLOID: (11.0, 17.0),
    PaperSize.JIS_B0: (40.6, 57.3),
    PaperSize.JIS_B1: (28.7, 40.6),
    PaperSize.JIS_B2: (20.3, 28.7),
    PaperSize.JIS_B3: (14.3, 20.3),
    PaperSize.JIS_B4: (10.1, 14.3),
    PaperSize.JIS_B5: (7.2, 10.1),
    PaperSize.JIS_B6: (5.0, 7.2),
    PaperSize.JIS_B7: (3.6, 5.0),
    PaperSize.JIS_B8: (2.5, 3.6),
    PaperSize.JIS_B9: (1.8, 2.5),
    PaperSize.JIS_B10: (1.3, 1.8),
}


class FontFace(NamedTuple):
    """CSS description of a standard font."""

    family: str
    weight: str
    style: str


class StandardFont(str, Enum):
    """
    Enumeration of the 14 standard PDF fonts.

    CSS family, weight and style are looked up in FONT_FACES.
    """

    COURIER = "courier"
    COURIER_BOLD = "courier-bold"
    COURIER_BOLD_OBLIQUE = "courier-bold-oblique"
    COURIER_OBLIQUE = "courier-oblique"
    HELVETICA = "helvetica"
    HELVETICA_BOLD = "helvetica-bold"
    HELVETICA_BOLD_OBLIQUE = "helvetica-bold-oblique"
    HELVETICA_OBLIQUE = "helvetica-oblique"
    SYMBOL = "symbol"
    TIMES_BOLD = "times-bold"
    TIMES_BOLD_ITALIC = "times-bold-italic"
    TIMES_ITALIC = "times-italic"
    TIMES_ROMAN = "times-roman"
    ZAPF_DINGBATS = "zapf-dingbats"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all available font names."""
        return [font.value for font in cls]

    @classmethod
    def from_name(cls, name: str) -> "StandardFont":
        return _from_name(cls, name)

    @property
    def face(self) -> FontFace:
        return FONT_FACES[self]


_COURIER = "Courier, monospace"
_HELVETICA = "Helvetica, sans-serif"
_TIMES = "'Times New Roman', Times, serif"

FONT_FACES: Dict[StandardFont, FontFace] = {
    StandardFont.COURIER: FontFace(_COURIER, "normal", "normal"),
    StandardFont.COURIER_BOLD: FontFace(_COURIER, "bold", "normal"),
    StandardFont.COURIER_BOLD_OBLIQUE: FontFace(_COURIER, "bold", "italic"),
    StandardFont.COURIER_OBLIQUE: FontFace(_COURIER, "normal", "italic"),
    StandardFont.HELVETICA: FontFace(_HELVETICA, "normal", "normal"),
    StandardFont.HELVETICA_BOLD: FontFace(_HELVETICA, "bold", "normal"),
    StandardFont.HELVETICA_BOLD_OBLIQUE: FontFace(_HELVETICA, "bold", "italic"),
    StandardFont.HELVETICA_OBLIQUE: FontFace(_HELVETICA, "normal", "italic"),
    StandardFont.SYMBOL: FontFace("Symbol", "normal", "normal"),
    StandardFont.TIMES_BOLD: FontFace(_TIMES, "bold", "normal"),
    StandardFont.TIMES_BOLD_ITALIC: FontFace(_TIMES, "bold", "italic"),
    StandardFont.TIMES_ITALIC: FontFace(_TIMES, "normal", "italic"),
    StandardFont.TIMES_ROMAN: FontFace(_TIMES, "normal", "normal"),
    StandardFont.ZAPF_DINGBATS: FontFace("'Zapf Dingbats'", "normal", "normal"),
}
