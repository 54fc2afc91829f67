"""Drawing operations that render themselves as PDF content-stream text.

Every operation has a ``write(w)`` method that appends its operators to a
text writer such as :class:`io.StringIO`.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional, TextIO

COLOR_TYPE_STROKE_RGB = "RG"
COLOR_TYPE_FILL_RGB = "rg"
COLOR_TYPE_STROKE_CMYK = "K"
COLOR_TYPE_FILL_CMYK = "k"
GRAY_TYPE_FILL = "g"
GRAY_TYPE_STROKE = "G"
DRAW_PAINT_STYLE = "S"


def _gs_lines(indexes: Iterable[int]) -> str:
    return "".join(f"/GS{index} gs\n" for index in indexes)


def rotation_matrix(x: float, y: float, degree_angle: float, page_height: float) -> str:
    """Return the ``cm`` operators rotating by ``degree_angle`` around (x, y)."""
    radians = degree_angle * (math.pi / 180)
    c = math.cos(radians)
    s = math.sin(radians)
    cy = page_height - y
    return (
        f"{c:.5f} {s:.5f} {-s:.5f}\n {c:.5f} {x:.2f} {cy:.2f} cm\n"
        f" 1 0 0\n 1 {-x:.2f} {-cy:.2f} cm\n"
    )


@dataclass(frozen=True)
class ColorRGB:
    """An RGB stroke or fill colour, components 0-255."""

    r: int
    g: int
    b: int
    color_type: str = COLOR_TYPE_FILL_RGB

    def write(self, w: TextIO) -> None:
        w.write(f"{self.r / 255:.3f} {self.g / 255:.3f} {self.b / 255:.3f} {self.color_type}\n")


@dataclass(frozen=True)
class ColorCMYK:
    """A CMYK stroke or fill colour, components in percent."""

    c: int
    m: int
    y: int
    k: int
    color_type: str = COLOR_TYPE_FILL_CMYK

    def write(self, w: TextIO) -> None:
        w.write(
            f"{self.c / 100:.2f} {self.m / 100:.2f} {self.y / 100:.2f} "
            f"{self.k / 100:.2f} {self.color_type}\n"
        )


@dataclass(frozen=True)
class TextColorRGB:
    """An RGB text fill colour, components 0-255."""

    r: int
    g: int
    b: int

    def write(self, w: TextIO) -> None:
        ColorRGB(self.r, self.g, self.b, COLOR_TYPE_FILL_RGB).write(w)


@dataclass(frozen=True)
class TextColorCMYK:
    """A CMYK text fill colour, components in percent."""

    c: int
    m: int
    y: int
    k: int

    def write(self, w: TextIO) -> None:
        ColorCMYK(self.c, self.m, self.y, self.k, COLOR_TYPE_FILL_CMYK).write(w)


@dataclass(frozen=True)
class Gray:
    """A grayscale fill or stroke level between 0 and 1."""

    scale: float
    gray_type: str = GRAY_TYPE_FILL

    def write(self, w: TextIO) -> None:
        w.write(f"{self.scale:.2f} {self.gray_type}\n")


@dataclass(frozen=True)
class LineWidth:
    """Sets the stroke line width."""

    width: float

    def write(self, w: TextIO) -> None:
        w.write(f"{self.width:.2f} w\n")


@dataclass(frozen=True)
class LineType:
    """Sets a named dash pattern: ``dashed``, ``dotted``, anything else is solid."""

    line_type: str

    def write(self, w: TextIO) -> None:
        if self.line_type == "dashed":
            w.write("[5] 2 d\n")
        elif self.line_type == "dotted":
            w.write("[2 3] 11 d\n")
        else:
            w.write("[] 0 d\n")


@dataclass(frozen=True)
class CustomLineType:
    """Sets an explicit dash array and phase."""

    dash_array: Sequence[float]
    dash_phase: float

    def write(self, w: TextIO) -> None:
        dashes = " ".join(f"{v:.2f}" for v in self.dash_array)
        w.write(f"[{dashes}] {self.dash_phase:.2f} d\n")


@dataclass
class Line:
    """A straight stroked line in top-left page coordinates."""

    page_height: float
    x1: float
    y1: float
    x2: float
    y2: float
    ext_g_state_indexes: list[int] = field(default_factory=list)

    def write(self, w: TextIO) -> None:
        h = self.page_height
        w.write("q\n")
        w.write(_gs_lines(self.ext_g_state_indexes))
        w.write(f"{self.x1:.2f} {h - self.y1:.2f} m {self.x2:.2f} {h - self.y2:.2f} l S\n")
        w.write("Q\n")


@dataclass(frozen=True)
class Oval:
    """An ellipse inscribed in the box (x1, y1)-(x2, y2), stroked."""

    page_height: float
    x1: float
    y1: float
    x2: float
    y2: float

    def write(self, w: TextIO) -> None:
        h = self.page_height
        x1, y1, x2, y2 = self.x1, self.y1, self.x2, self.y2
        cp = 0.55228
        hx = (x2 - x1) / 2 * cp
        hy = (y2 - y1) / 2 * cp
        v1 = (x1 + (x2 - x1) / 2, h - y2)
        v2 = (x2, h - (y1 + (y2 - y1) / 2))
        v3 = (x1 + (x2 - x1) / 2, h - y1)
        v4 = (x1, h - (y1 + (y2 - y1) / 2))

        def curve(*vals: float) -> str:
            return " ".join(f"{v:.2f}" for v in vals) + " c"

        w.write(f"{v1[0]:.2f} {v1[1]:.2f} m\n")
        w.write(curve(v1[0] + hx, v1[1], v2[0], v2[1] - hy, v2[0], v2[1]) + "\n")
        w.write(curve(v2[0], v2[1] + hy, v3[0] + hx, v3[1], v3[0], v3[1]) + "\n")
        w.write(curve(v3[0] - hx, v3[1], v4[0], v4[1] + hy, v4[0], v4[1]) + "\n")
        w.write(curve(v4[0], v4[1] - hy, v1[0] - hx, v1[1], v1[0], v1[1]) + " S\n")


@dataclass(frozen=True)
class Curve:
    """A cubic Bezier curve; style ``F`` fills, ``FD``/``DF`` fills and strokes."""

    page_height: float
    x0: float
    y0: float
    x1: float
    y1: float
    x2: float
    y2: float
    x3: float
    y3: float
    style: str = ""

    def write(self, w: TextIO) -> None:
        h = self.page_height
        w.write(f"{self.x0:.2f} {h - self.y0:.2f} m\n")
        w.write(
            f"{self.x1:.2f} {h - self.y1:.2f} {self.x2:.2f} {h - self.y2:.2f} "
            f"{self.x3:.2f} {h - self.y3:.2f} c"
        )
        if self.style == "F":
            op = "f"
        elif self.style in ("FD", "DF"):
            op = "B"
        else:
            op = "S"
        w.write(f" {op}\n")


@dataclass
class Polygon:
    """A closed polygon through ``points`` given as (x, y) pairs."""

    page_height: float
    points: Sequence[tuple[float, float]]
    style: str = ""
    ext_g_state_indexes: list[int] = field(default_factory=list)

    def write(self, w: TextIO) -> None:
        w.write("q\n")
        w.write(_gs_lines(self.ext_g_state_indexes))
        for i, (px, py) in enumerate(self.points):
            w.write(f"{px:.2f} {self.page_height - py:.2f}")
            w.write(" m " if i == 0 else " l ")
        if self.style == "F":
            w.write(" f\n")
        elif self.style in ("FD", "DF"):
            w.write(" b\n")
        else:
            w.write(" s\n")
        w.write("Q\n")


@dataclass
class Rectangle:
    """A rectangle painted with a PDF paint operator (stroke by default)."""

    page_height: float
    x: float
    y: float
    width: float
    height: float
    style: str = DRAW_PAINT_STYLE
    ext_g_state_indexes: list[int] = field(default_factory=list)

    def write(self, w: TextIO) -> None:
        style = self.style or DRAW_PAINT_STYLE
        w.write(
            "q\n"
            + _gs_lines(self.ext_g_state_indexes)
            + f"{self.x:.2f} {self.page_height - self.y:.2f} "
            f"{self.width:.2f} {self.height:.2f} re {style}\n"
            + "Q\n"
        )


@dataclass(frozen=True)
class Rotate:
    """Opens a rotated graphics state, or closes one when ``is_reset`` is set."""

    page_height: float = 0.0
    angle: float = 0.0
    x: float = 0.0
    y: float = 0.0
    is_reset: bool = False

    def write(self, w: TextIO) -> None:
        if self.is_reset:
            w.write("Q\n")
            return
        w.write("q\n " + rotation_matrix(self.x, self.y, self.angle, self.page_height))


@dataclass(frozen=True)
class ImportedTemplate:
    """Places an imported page template, scaled and translated."""

    page_height: float
    name: str
    scale_x: float
    scale_y: float
    tx: float
    ty: float

    def write(self, w: TextIO) -> None:
        ty = self.ty + self.page_height
        w.write(
            f"q 0 J 1 w 0 j 0 G 0 g q {self.scale_x:.4F} 0 0 {self.scale_y:.4F} "
            f"{self.tx:.4F} {ty:.4F} cm {self.name} Do Q Q\n"
        )


@dataclass(frozen=True)
class CropOptions:
    """The visible window of an image, relative to its placement."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass
class ImageDraw:
    """Places image XObject ``/I<index+1>`` with optional crop, flip and rotation."""

    page_height: float
    index: int
    x: float
    y: float
    width: float
    height: float
    crop: Optional[CropOptions] = None
    image_angle: float = 0.0
    mask_angle: float = 0.0
    with_mask: bool = False
    vertical_flip: bool = False
    horizontal_flip: bool = False
    ext_g_state_indexes: list[int] = field(default_factory=list)

    def _open_rotation(self) -> Rotate:
        w, h = (self.crop.width, self.crop.height) if self.crop else (self.width, self.height)
        return Rotate(
            page_height=self.page_height,
            angle=self.image_angle,
            x=self.x + w / 2,
            y=self.y + h / 2,
        )

    def _mask_rotation(self) -> str:
        angle = self.mask_angle + self.image_angle
        if angle == 0:
            return ""
        return rotation_matrix(
            self.x + self.width / 2, self.y + self.height / 2, angle, self.page_height
        )

    def _body(self) -> str:
        width, height = self.width, self.height
        stream = "q\n" + _gs_lines(self.ext_g_state_indexes)
        if self.horizontal_flip or self.vertical_flip:
            fh = "-1" if self.horizontal_flip else "1"
            fv = "-1" if self.vertical_flip else "1"
            stream += f"{fh} 0 0 {fv} 0 0 cm\n"

        x = self.x
        y = self.page_height - self.y
        crop = self.crop
        if crop is not None:
            clip_x = -x - crop.width if self.horizontal_flip else x
            clip_y = y - crop.height
            if self.vertical_flip:
                clip_y = -clip_y - crop.height
            stream += f"{clip_x:.2f} {clip_y:.2f} {crop.width:.2f} {crop.height:.2f} re W* n\n"
            x -= crop.x
            if self.horizontal_flip:
                x = -x - width
            y += crop.y - height
            if self.vertical_flip:
                y = -y - height
        else:
            y -= height
            if self.horizontal_flip:
                x = -x - width
            if self.vertical_flip:
                y = -y - height

        mask_matrix = self._mask_rotation() if self.with_mask else ""
        stream += (
            f"q\n {mask_matrix} {width:.2f} 0 0\n {height:.2f} {x:.2f} {y:.2f} "
            f"cm /I{self.index + 1} Do \nQ\n"
        )
        return stream + "Q\n"

    def write(self, w: TextIO) -> None:
        if self.with_mask:
            w.write(self._body())
            return
        self._open_rotation().write(w)
        try:
            w.write(self._body())
        finally:
            Rotate(is_reset=True).write(w)