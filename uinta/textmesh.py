"""Text layout into wrapped lines and generation of textured glyph meshes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .fonts import AlignedQuad, FontContext, FontMeshAttrib, FontMeshAttribType

__all__ = [
    "QUAD_INDICES",
    "HorizontalAlign",
    "Text",
    "Word",
    "Line",
    "TextMesh",
    "try_add_word",
    "layout_lines",
    "find_xstart",
    "generate_mesh",
]

# Two triangles per glyph quad, as offsets from the quad's first vertex.
QUAD_INDICES = (0, 1, 3, 1, 2, 3)
_VERTICES_PER_QUAD = 4

_COMPONENTS = {
    FontMeshAttribType.POSITION: 2,
    FontMeshAttribType.UV: 2,
    FontMeshAttribType.COLOR: 3,
}


class HorizontalAlign(Enum):
    """Horizontal placement of a line within the text's ``max_width``."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass
class Text:
    """A block of text with size, colour, position and wrapping limits."""

    value: str
    line_size: float
    color_r: float = 0.0
    color_g: float = 0.0
    color_b: float = 0.0
    pos_x: float = 0.0
    pos_y: float = 0.0
    max_width: float = 0.0
    max_height: float = 0.0
    align: HorizontalAlign = HorizontalAlign.LEFT

    @property
    def color(self) -> tuple[float, float, float]:
        return (self.color_r, self.color_g, self.color_b)


@dataclass
class Word:
    """A run of non-space characters and its rendered width."""

    value: str = ""
    width: float = 0.0

    def add_char(self, char: str, width: float) -> None:
        self.value += char
        self.width += width


@dataclass
class Line:
    """Words laid out on one line; a ``max_width`` of zero means no limit."""

    max_width: float = 0.0
    words: list[Word] = field(default_factory=list)
    width: float = 0.0


@dataclass
class TextMesh:
    """Interleaved vertex data and triangle indices for a block of text.

    ``vertex_count`` counts the floats written for attributes;
    ``index_offset`` is the vertex index the next mesh should start at.
    """

    vertices: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    vertex_count: int = 0
    index_offset: int = 0

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def quad_count(self) -> int:
        return len(self.indices) // len(QUAD_INDICES)


def try_add_word(line: Line, word: Word) -> bool:
    """Append a copy of ``word`` to ``line`` unless it would exceed the limit."""
    if line.max_width and line.max_width < line.width + word.width:
        return False
    line.words.append(Word(word.value, word.width))
    line.width += word.width
    return True


def find_xstart(text: Text, width: float) -> float:
    """Horizontal start of a line of ``width`` according to the text's alignment.

    Without a ``max_width`` there is nothing to align against, so lines start at zero.
    """
    if text.align is HorizontalAlign.LEFT or not text.max_width:
        return 0.0
    spare = max(text.max_width - width, 0.0)
    if text.align is HorizontalAlign.CENTER:
        return spare / 2
    return spare


def _advance(font: FontContext, char: str, scale: float) -> float:
    _, xpos = font.char_quad(char, 0.0, 0.0)
    return xpos * scale


def layout_lines(
    text: Text, font: FontContext, text_scale: Optional[float] = None
) -> list[Line]:
    """Split ``text`` into words and wrap them into lines of at most ``max_width``."""
    scale = text.line_size / font.line_size if text_scale is None else text_scale
    space_width = _advance(font, " ", scale)
    lines: list[Line] = []
    line = Line(text.max_width)
    word = Word()

    for char in text.value:
        if char == " ":
            if not try_add_word(line, word):
                line.width -= space_width
                lines.append(line)
                line = Line(text.max_width)
                try_add_word(line, word)
            word = Word()
            line.width += space_width
            continue
        word.add_char(char, _advance(font, char, scale))

    if not try_add_word(line, word):
        lines.append(line)
        line = Line(text.max_width)
        try_add_word(line, word)
    lines.append(line)
    return lines


def _vertex_stride(attribs: Mapping[FontMeshAttribType, FontMeshAttrib]) -> int:
    stride = next(iter(attribs.values())).stride
    for kind, attrib in attribs.items():
        components = _COMPONENTS[FontMeshAttribType(kind)]
        if attrib.offset < 0 or attrib.offset + components > stride:
            raise ValueError(f"attribute {FontMeshAttribType(kind).name} does not fit the stride")
    return stride


def _place(
    quad: AlignedQuad,
    text: Text,
    xcursor: float,
    scale: float,
    frame_width: float,
    frame_height: float,
) -> AlignedQuad:
    def ndc_x(x: float) -> float:
        return 2 * ((x * scale + text.pos_x + xcursor) / frame_width) - 1

    def ndc_y(y: float) -> float:
        return -2 * ((y * scale + text.pos_y) / frame_height) + 1

    return AlignedQuad(
        x0=ndc_x(quad.x0),
        y0=ndc_y(quad.y0),
        s0=quad.s0,
        t0=-quad.t0,
        x1=ndc_x(quad.x1),
        y1=ndc_y(quad.y1),
        s1=quad.s1,
        t1=-quad.t1,
    )


def _quad_vertices(
    quad: AlignedQuad,
    text: Text,
    attribs: Mapping[FontMeshAttribType, FontMeshAttrib],
    stride: int,
) -> tuple[list[float], int]:
    block = [0.0] * (stride * _VERTICES_PER_QUAD)
    written = 0

    def store(attrib: FontMeshAttrib, corners: list[tuple[float, ...]]) -> int:
        for vertex, values in enumerate(corners):
            start = attrib.offset + attrib.stride * vertex
            block[start : start + len(values)] = values
        return sum(len(values) for values in corners)

    position = attribs.get(FontMeshAttribType.POSITION)
    if position is not None:
        written += store(
            position,
            [(quad.x0, quad.y0), (quad.x0, quad.y1), (quad.x1, quad.y1), (quad.x1, quad.y0)],
        )
    uv = attribs.get(FontMeshAttribType.UV)
    if uv is not None:
        written += store(
            uv,
            [(quad.s0, quad.t0), (quad.s0, quad.t1), (quad.s1, quad.t1), (quad.s1, quad.t0)],
        )
    color = attribs.get(FontMeshAttribType.COLOR)
    if color is not None:
        written += store(color, [text.color] * _VERTICES_PER_QUAD)
    return block, written


def generate_mesh(
    text: Text,
    font: FontContext,
    frame_width: float,
    frame_height: float,
    attribs: Mapping[FontMeshAttribType, FontMeshAttrib],
    index_offset: int = 0,
) -> TextMesh:
    """Build the glyph quads of ``text`` in normalised device coordinates.

    Indices start at ``index_offset`` so meshes can share one buffer.
    """
    mesh = TextMesh(index_offset=index_offset)
    if not text.value:
        return mesh
    if not attribs:
        raise ValueError("no attributes were provided to generate a text mesh")
    if frame_width <= 0 or frame_height <= 0:
        raise ValueError("frame dimensions must be positive")

    stride = _vertex_stride(attribs)
    scale = text.line_size / font.line_size
    lines = layout_lines(text, font, scale)
    ycursor = font.asc

    for line in lines:
        xcursor = find_xstart(text, line.width)
        for word in line.words:
            for char in word.value:
                quad, advance = font.char_quad(char, 0.0, ycursor)
                placed = _place(quad, text, xcursor, scale, frame_width, frame_height)
                xcursor += advance * scale

                block, written = _quad_vertices(placed, text, attribs, stride)
                mesh.vertices.extend(block)
                mesh.vertex_count += written
                mesh.indices.extend(i + mesh.index_offset for i in QUAD_INDICES)
                mesh.index_offset += _VERTICES_PER_QUAD
            xcursor += _advance(font, " ", scale)
        ycursor += text.line_size
    return mesh