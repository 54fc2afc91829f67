"""A page content stream built from drawing operations."""

from __future__ import annotations

import io
import zlib
from collections.abc import Callable, Iterator, Sequence
from typing import BinaryIO, Optional, Protocol

from .drawing import (
    COLOR_TYPE_FILL_CMYK,
    COLOR_TYPE_FILL_RGB,
    COLOR_TYPE_STROKE_CMYK,
    COLOR_TYPE_STROKE_RGB,
    GRAY_TYPE_FILL,
    GRAY_TYPE_STROKE,
    ColorCMYK,
    ColorRGB,
    Curve,
    CustomLineType,
    Gray,
    ImportedTemplate,
    Line,
    LineType,
    LineWidth,
    Oval,
    Polygon,
    Rectangle,
    Rotate,
)

NO_COMPRESSION = 0
DEFAULT_COMPRESSION = -1

Encryptor = Callable[[int, bytes], bytes]


class Drawable(Protocol):
    """Anything that writes content-stream operators to a text writer."""

    def write(self, w) -> None: ...


def ttf_to_pdf_units(n: int, units_per_em: int) -> int:
    """Convert a TrueType design-unit value to thousandths of an em.

    Division truncates toward zero, as PDF width arrays expect.
    """
    if n < 0:
        return -((-1000 * n) // units_per_em)
    return (n // units_per_em) * 1000 + ((n % units_per_em) * 1000) // units_per_em


def text_height(font_size: float) -> float:
    """Approximate height of text set at ``font_size``."""
    return float(font_size) * 0.7


def clamp_unit(value: float) -> float:
    """Clamp ``value`` to the range 0.0 to 1.0."""
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


class ContentStream:
    """An ordered list of drawing operations for one page.

    ``compress_level`` follows :mod:`zlib` (0 disables compression).
    ``encrypt``, when given, is called with the object number and the
    stream bytes and returns the encrypted bytes.
    """

    def __init__(
        self,
        page_height: float,
        compress_level: int = DEFAULT_COMPRESSION,
        encrypt: Optional[Encryptor] = None,
    ) -> None:
        if not -1 <= compress_level <= 9:
            raise ValueError(f"invalid compression level: {compress_level}")
        self.page_height = page_height
        self.compress_level = compress_level
        self.encrypt = encrypt
        self._items: list[Drawable] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Drawable]:
        return iter(self._items)

    def add(self, item: Drawable) -> None:
        """Append any drawing operation."""
        self._items.append(item)

    def add_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.add(Line(self.page_height, x1, y1, x2, y2))

    def add_imported_template(
        self, name: str, scale_x: float, scale_y: float, tx: float, ty: float
    ) -> None:
        self.add(ImportedTemplate(self.page_height, name, scale_x, scale_y, tx, ty))

    def add_rectangle(
        self, x: float, y: float, width: float, height: float, style: str
    ) -> None:
        self.add(Rectangle(self.page_height, x, y, width, height, style))

    def add_oval(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.add(Oval(self.page_height, x1, y1, x2, y2))

    def add_curve(
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        x3: float,
        y3: float,
        style: str,
    ) -> None:
        """Add a Bezier curve; ``style`` is D, F, DF or FD, case-insensitive."""
        self.add(
            Curve(
                self.page_height, x0, y0, x1, y1, x2, y2, x3, y3,
                style.strip().upper(),
            )
        )

    def add_polygon(self, points: Sequence[tuple[float, float]], style: str) -> None:
        self.add(Polygon(self.page_height, list(points), style))

    def set_line_width(self, width: float) -> None:
        self.add(LineWidth(width))

    def set_line_type(self, line_type: str) -> None:
        self.add(LineType(line_type))

    def set_custom_line_type(self, dash_array: Sequence[float], dash_phase: float) -> None:
        self.add(CustomLineType(list(dash_array), dash_phase))

    def set_gray_fill(self, value: float) -> None:
        self.add(Gray(clamp_unit(value), GRAY_TYPE_FILL))

    def set_gray_stroke(self, value: float) -> None:
        self.add(Gray(clamp_unit(value), GRAY_TYPE_STROKE))

    def set_stroke_color(self, r: int, g: int, b: int) -> None:
        self.add(ColorRGB(r, g, b, COLOR_TYPE_STROKE_RGB))

    def set_fill_color(self, r: int, g: int, b: int) -> None:
        self.add(ColorRGB(r, g, b, COLOR_TYPE_FILL_RGB))

    def set_stroke_color_cmyk(self, c: int, m: int, y: int, k: int) -> None:
        self.add(ColorCMYK(c, m, y, k, COLOR_TYPE_STROKE_CMYK))

    def set_fill_color_cmyk(self, c: int, m: int, y: int, k: int) -> None:
        self.add(ColorCMYK(c, m, y, k, COLOR_TYPE_FILL_CMYK))

    def rotate(self, angle: float, x: float, y: float) -> None:
        """Open a graphics state rotated by ``angle`` degrees around (x, y)."""
        self.add(Rotate(page_height=self.page_height, angle=angle, x=x, y=y))

    def reset_rotation(self) -> None:
        """Close the graphics state opened by :meth:`rotate`."""
        self.add(Rotate(is_reset=True))

    def render(self) -> str:
        """Return the uncompressed operator text of all operations."""
        out = io.StringIO()
        for item in self._items:
            item.write(out)
        return out.getvalue()

    def write(self, w: BinaryIO, obj_id: int) -> None:
        """Write the stream object body (dictionary and stream data) to ``w``."""
        data = self.render().encode("latin-1")
        is_flate = self.compress_level != NO_COMPRESSION
        if is_flate:
            data = zlib.compress(data, self.compress_level)

        w.write(b"<<\n")
        if is_flate:
            w.write(b"/Filter/FlateDecode")
        w.write(f"/Length {len(data)}\n".encode("ascii"))
        w.write(b">>\n")
        w.write(b"stream\n")
        if self.encrypt is not None:
            w.write(self.encrypt(obj_id, data))
            w.write(b"\n")
        else:
            w.write(data)
            if is_flate:
                w.write(b"\n")
        w.write(b"endstream\n")