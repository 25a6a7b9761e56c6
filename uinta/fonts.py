"""Font catalogue, packed glyph metrics and text buffer sizing."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum, auto
from typing import Union

__all__ = [
    "FIRST_CHAR",
    "CHAR_COUNT",
    "FontType",
    "FontMeshAttribType",
    "FontMeshAttrib",
    "PackedChar",
    "AlignedQuad",
    "FontContext",
    "FontRegistry",
    "font_path",
    "font_size",
    "renderable_char_count",
    "vertex_buffer_size",
    "index_buffer_size",
]

FIRST_CHAR = 32
CHAR_COUNT = 96

_RENDERABLE_MIN = 0x21
_RENDERABLE_MAX = 0x7E

_POSITION_FLOATS = 8
_UV_FLOATS = 8
_COLOR_FLOATS = 12
_INDICES_PER_CHAR = 6


class FontType(IntEnum):
    DEJAVU_MATH_TEX_GYRE = 0
    DEJAVU_SANS = auto()
    DEJAVU_SANS_CONDENSED = auto()
    DEJAVU_SANS_CONDENSED_BOLD = auto()
    DEJAVU_SANS_CONDENSED_BOLD_OBLIQUE = auto()
    DEJAVU_SANS_CONDENSED_OBLIQUE = auto()
    DEJAVU_SANS_MONO = auto()
    DEJAVU_SANS_MONO_BOLD = auto()
    DEJAVU_SANS_MONO_BOLD_OBLIQUE = auto()
    DEJAVU_SANS_MONO_OBLIQUE = auto()
    DEJAVU_SANS_BOLD = auto()
    DEJAVU_SANS_BOLD_OBLIQUE = auto()
    DEJAVU_SANS_EXTRA_LIGHT = auto()
    DEJAVU_SANS_OBLIQUE = auto()
    DEJAVU_SERIF = auto()
    DEJAVU_SERIF_CONDENSED = auto()
    DEJAVU_SERIF_CONDENSED_BOLD = auto()
    DEJAVU_SERIF_CONDENSED_BOLD_ITALIC = auto()
    DEJAVU_SERIF_CONDENSED_ITALIC = auto()
    DEJAVU_SERIF_BOLD = auto()
    DEJAVU_SERIF_BOLD_ITALIC = auto()
    DEJAVU_SERIF_ITALIC = auto()
    PROGGY_CLEAN_NERD_FONT_COMPLETE = auto()
    PROGGY_CLEAN_NERD_FONT_COMPLETE_MONO = auto()


_PROGGY_MONO_PATH = "font/proggy/ProggyCleanTT Nerd Font Complete Mono.ttf"

# (relative path, file size in bytes)
_CATALOGUE: dict[FontType, tuple[str, int]] = {
    FontType.DEJAVU_MATH_TEX_GYRE: ("font/dejavu/DejaVuMathTeXGyre.ttf", 577604),
    FontType.DEJAVU_SANS_BOLD_OBLIQUE: ("font/dejavu/DejaVuSans_BoldOblique.ttf", 643288),
    FontType.DEJAVU_SANS_BOLD: ("font/dejavu/DejaVuSans_Bold.ttf", 705684),
    FontType.DEJAVU_SANS_CONDENSED_BOLD_OBLIQUE: (
        "font/dejavu/DejaVuSansCondensed_BoldOblique.ttf",
        641696,
    ),
    FontType.DEJAVU_SANS_CONDENSED_BOLD: ("font/dejavu/DejaVuSansCondensed_Bold.ttf", 703880),
    FontType.DEJAVU_SANS_CONDENSED_OBLIQUE: (
        "font/dejavu/DejaVuSansCondensed_Oblique.ttf",
        633824,
    ),
    FontType.DEJAVU_SANS_CONDENSED: ("font/dejavu/DejaVuSansCondensed.ttf", 755124),
    FontType.DEJAVU_SANS_EXTRA_LIGHT: ("font/dejavu/DejaVuSans_ExtraLight.ttf", 356760),
    FontType.DEJAVU_SANS_MONO_BOLD_OBLIQUE: (
        "font/dejavu/DejaVuSansMono_BoldOblique.ttf",
        253580,
    ),
    FontType.DEJAVU_SANS_MONO_BOLD: ("font/dejavu/DejaVuSansMono_Bold.ttf", 331992),
    FontType.DEJAVU_SANS_MONO_OBLIQUE: ("font/dejavu/DejaVuSansMono_Oblique.ttf", 251932),
    FontType.DEJAVU_SANS_MONO: ("font/dejavu/DejaVuSansMono.ttf", 340712),
    FontType.DEJAVU_SANS_OBLIQUE: ("font/dejavu/DejaVuSans_Oblique.ttf", 635412),
    FontType.DEJAVU_SANS: ("font/dejavu/DejaVuSans.ttf", 757076),
    FontType.DEJAVU_SERIF_BOLD_ITALIC: ("font/dejavu/DejaVuSerif_BoldItalic.ttf", 358820),
    FontType.DEJAVU_SERIF_BOLD: ("font/dejavu/DejaVuSerif_Bold.ttf", 356088),
    FontType.DEJAVU_SERIF_CONDENSED_BOLD_ITALIC: (
        "font/dejavu/DejaVuSerifCondensed_BoldItalic.ttf",
        357888,
    ),
    FontType.DEJAVU_SERIF_CONDENSED_BOLD: ("font/dejavu/DejaVuSerifCondensed_Bold.ttf", 355220),
    FontType.DEJAVU_SERIF_CONDENSED_ITALIC: (
        "font/dejavu/DejaVuSerifCondensed_Italic.ttf",
        358324,
    ),
    FontType.DEJAVU_SERIF_CONDENSED: ("font/dejavu/DejaVuSerifCondensed.ttf", 379296),
    FontType.DEJAVU_SERIF_ITALIC: ("font/dejavu/DejaVuSerif_Italic.ttf", 359000),
    FontType.DEJAVU_SERIF: ("font/dejavu/DejaVuSerif.ttf", 380132),
    FontType.PROGGY_CLEAN_NERD_FONT_COMPLETE_MONO: (_PROGGY_MONO_PATH, 838628),
    # The non-mono variant is served from the mono file.
    FontType.PROGGY_CLEAN_NERD_FONT_COMPLETE: (_PROGGY_MONO_PATH, 874880),
}


def _entry(font_type: FontType | int) -> tuple[str, int]:
    try:
        return _CATALOGUE[FontType(font_type)]
    except (ValueError, KeyError) as exc:
        raise ValueError(f"unknown font type {font_type!r}") from exc


def font_path(font_type: FontType | int) -> str:
    """Relative path of the font file for ``font_type``."""
    return _entry(font_type)[0]


def font_size(font_type: FontType | int) -> int:
    """Size in bytes of the font file for ``font_type``."""
    return _entry(font_type)[1]


class FontMeshAttribType(IntEnum):
    POSITION = 0
    COLOR = 1
    UV = 2


@dataclass(frozen=True)
class FontMeshAttrib:
    """Where an attribute sits in an interleaved vertex: stride and offset in floats."""

    stride: int
    offset: int


@dataclass(frozen=True)
class PackedChar:
    """Atlas rectangle and placement metrics of one packed glyph."""

    x0: int = 0
    y0: int = 0
    x1: int = 0
    y1: int = 0
    xoff: float = 0.0
    yoff: float = 0.0
    xadvance: float = 0.0
    xoff2: float = 0.0
    yoff2: float = 0.0


@dataclass
class AlignedQuad:
    """A glyph quad: screen corners (x, y) and texture corners (s, t)."""

    x0: float = 0.0
    y0: float = 0.0
    s0: float = 0.0
    t0: float = 0.0
    x1: float = 0.0
    y1: float = 0.0
    s1: float = 0.0
    t1: float = 0.0


def _blank_chardata() -> list[PackedChar]:
    return [PackedChar() for _ in range(CHAR_COUNT)]


@dataclass
class FontContext:
    """A font at one atlas size, with its glyph metrics and vertical metrics."""

    font_type: FontType
    tex_width: int
    tex_height: int
    chardata: list[PackedChar] = field(default_factory=_blank_chardata)
    texture_id: int = 0
    asc: float = 0.0
    dsc: float = 0.0
    gap: float = 0.0
    line_size: float = 32.0

    def char_quad(
        self, char: str, xpos: float = 0.0, ypos: float = 0.0
    ) -> tuple[AlignedQuad, float]:
        """The quad for ``char`` placed at the cursor, and the advanced x cursor."""
        if len(char) != 1:
            raise ValueError("char_quad takes a single character")
        index = ord(char) - FIRST_CHAR
        if not 0 <= index < len(self.chardata):
            raise ValueError(f"character {char!r} is not in the packed range")
        glyph = self.chardata[index]
        quad = AlignedQuad(
            x0=xpos + glyph.xoff,
            y0=ypos + glyph.yoff,
            x1=xpos + glyph.xoff2,
            y1=ypos + glyph.yoff2,
            s0=glyph.x0 / self.tex_width,
            t0=glyph.y0 / self.tex_height,
            s1=glyph.x1 / self.tex_width,
            t1=glyph.y1 / self.tex_height,
        )
        return quad, xpos + glyph.xadvance


class FontRegistry:
    """Fonts registered by type and atlas size, addressed by integer handles."""

    def __init__(self) -> None:
        self._fonts: list[FontContext] = []

    def __len__(self) -> int:
        return len(self._fonts)

    def init_font(self, font_type: FontType | int, tex_width: int, tex_height: int) -> int:
        """Handle of the font with these settings, registering it if new."""
        kind = FontType(font_type)
        for handle, ctx in enumerate(self._fonts):
            if (ctx.font_type, ctx.tex_width, ctx.tex_height) == (kind, tex_width, tex_height):
                return handle
        self._fonts.append(FontContext(kind, tex_width, tex_height))
        return len(self._fonts) - 1

    def get(self, handle: int) -> FontContext:
        if not 0 <= handle < len(self._fonts):
            raise IndexError(f"invalid font handle {handle}")
        return self._fonts[handle]

    def texture(self, handle: int) -> int:
        return self.get(handle).texture_id


TextLike = Union[str, bytes, bytearray]


def _codes(text: TextLike) -> list[int]:
    if isinstance(text, str):
        return [ord(c) for c in text]
    return list(text)


def renderable_char_count(text: TextLike) -> int:
    """Number of printable, non-space ASCII characters (0x21 to 0x7E)."""
    return sum(1 for code in _codes(text) if _RENDERABLE_MIN <= code <= _RENDERABLE_MAX)


def vertex_buffer_size(
    text: TextLike, attribs: Mapping[FontMeshAttribType, FontMeshAttrib]
) -> int:
    """Floats needed for the vertices of ``text`` with the given attributes."""
    per_char = 0
    if FontMeshAttribType.POSITION in attribs:
        per_char += _POSITION_FLOATS
    if FontMeshAttribType.UV in attribs:
        per_char += _UV_FLOATS
    if FontMeshAttribType.COLOR in attribs:
        per_char += _COLOR_FLOATS
    return per_char * renderable_char_count(text)


def index_buffer_size(text: TextLike) -> int:
    """Indices needed for ``text``: two triangles per renderable character."""
    return _INDICES_PER_CHAR * renderable_char_count(text)