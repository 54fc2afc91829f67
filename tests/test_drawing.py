import io
import math

import pytest

from pdfstream.drawing import (
    ColorCMYK,
    ColorRGB,
    CropOptions,
    Curve,
    CustomLineType,
    Gray,
    ImageDraw,
    ImportedTemplate,
    Line,
    LineType,
    LineWidth,
    Oval,
    Polygon,
    Rectangle,
    Rotate,
    TextColorCMYK,
    TextColorRGB,
    rotation_matrix,
)


def render(item):
    buf = io.StringIO()
    item.write(buf)
    return buf.getvalue()


@pytest.mark.parametrize(
    "name, expected",
    [("dashed", "[5] 2 d\n"), ("dotted", "[2 3] 11 d\n"), ("solid", "[] 0 d\n"), ("", "[] 0 d\n")],
)
def test_line_type(name, expected):
    assert render(LineType(name)) == expected


def test_rgb_color_components_and_operator():
    out = render(ColorRGB(255, 51, 0, "RG"))
    tokens = out.split()
    assert out.endswith(" RG\n")
    values = [float(t) for t in tokens[:3]]
    assert values == pytest.approx([255 / 255, 51 / 255, 0.0], abs=1e-3)


def test_text_rgb_uses_fill_operator():
    out = render(TextColorRGB(10, 20, 30))
    assert out == render(ColorRGB(10, 20, 30, "rg"))


def test_cmyk_color_components():
    out = render(ColorCMYK(10, 20, 30, 40, "K"))
    tokens = out.split()
    assert tokens[-1] == "K"
    assert [float(t) for t in tokens[:4]] == pytest.approx([0.1, 0.2, 0.3, 0.4])


def test_text_cmyk_uses_fill_operator():
    assert render(TextColorCMYK(0, 6, 14, 0)) == render(ColorCMYK(0, 6, 14, 0, "k"))


def test_text_color_equality():
    assert TextColorRGB(1, 2, 3) == TextColorRGB(1, 2, 3)
    assert not (TextColorRGB(1, 2, 3) == TextColorRGB(1, 2, 4))
    assert not (TextColorCMYK(1, 2, 3, 4) == TextColorRGB(1, 2, 3))


def test_gray():
    tokens = render(Gray(0.5, "G")).split()
    assert float(tokens[0]) == 0.5
    assert tokens[1] == "G"


def test_line_width():
    tokens = render(LineWidth(2.5)).split()
    assert float(tokens[0]) == 2.5
    assert tokens[1] == "w"


def test_custom_line_type():
    out = render(CustomLineType([3, 1.5], 2))
    assert out.endswith(" d\n")
    inside = out[out.index("[") + 1 : out.index("]")]
    assert [float(t) for t in inside.split()] == [3, 1.5]
    assert float(out[out.index("]") + 1 :].split()[0]) == 2


def test_line_flips_y_and_wraps_state():
    out = render(Line(800, 10, 20, 30, 40, [3]))
    lines = out.splitlines()
    assert lines[0] == "q"
    assert lines[1] == "/GS3 gs"
    assert lines[-1] == "Q"
    tokens = lines[2].split()
    assert [float(tokens[i]) for i in (0, 1, 3, 4)] == [10, 780, 30, 760]
    assert tokens[2] == "m" and tokens[-2:] == ["l", "S"]


def test_oval_structure():
    out = render(Oval(100, 10, 20, 50, 60))
    lines = out.splitlines()
    first = lines[0].split()
    assert [float(first[0]), float(first[1])] == [30, 40]
    assert sum(1 for line in lines if line.endswith(" c") or line.endswith(" c S")) == 4
    assert out.endswith(" c S\n")
    last = lines[-1].split()
    assert [float(last[4]), float(last[5])] == [30, 40]


@pytest.mark.parametrize("style, op", [("", "S"), ("F", "f"), ("FD", "B"), ("DF", "B")])
def test_curve_style(style, op):
    out = render(Curve(100, 0, 0, 1, 1, 2, 2, 3, 3, style))
    assert out.endswith(f" c {op}\n")
    assert out.splitlines()[0].split()[-1] == "m"


@pytest.mark.parametrize("style, op", [("F", " f\n"), ("FD", " b\n"), ("DF", " b\n"), ("D", " s\n")])
def test_polygon_style(style, op):
    out = render(Polygon(100, [(1, 2), (3, 4), (5, 6)], style))
    assert out.startswith("q\n")
    assert out.endswith(op + "Q\n")
    assert out.count(" m ") == 1
    assert out.count(" l ") == 2


def test_polygon_first_point_is_moveto():
    out = render(Polygon(100, [(1, 2), (3, 4)], "F", [7]))
    body = out.splitlines()[2].split()
    assert [float(body[0]), float(body[1])] == [1, 98]
    assert body[2] == "m"
    assert "/GS7 gs" in out


def test_rectangle_default_style_is_stroke():
    out = render(Rectangle(100, 10, 20, 30, 40, ""))
    line = out.splitlines()[1].split()
    assert [float(v) for v in line[:4]] == [10, 80, 30, 40]
    assert line[4:] == ["re", "S"]


def test_rectangle_explicit_style_and_gs():
    out = render(Rectangle(100, 10, 20, 30, 40, "f", [1, 2]))
    assert out.splitlines()[1:3] == ["/GS1 gs", "/GS2 gs"]
    assert out.endswith(" re f\nQ\n")


def test_rotation_matrix_quarter_turn():
    mat = rotation_matrix(10, 20, 90, 100)
    tokens = mat.split()
    cos_v, sin_v, neg_sin, cos2 = (float(t) for t in tokens[:4])
    assert cos_v == pytest.approx(0, abs=1e-5)
    assert sin_v == pytest.approx(1)
    assert neg_sin == pytest.approx(-1)
    assert cos2 == pytest.approx(0, abs=1e-5)
    assert [float(tokens[4]), float(tokens[5])] == [10, 80]
    assert [float(tokens[-3]), float(tokens[-2])] == [-10, -80]
    assert tokens[-1] == "cm"


def test_rotation_matrix_is_orthonormal():
    tokens = rotation_matrix(0, 0, 33, 0).split()
    c, s = float(tokens[0]), float(tokens[1])
    assert c * c + s * s == pytest.approx(1, abs=1e-4)
    assert c == pytest.approx(math.cos(math.radians(33)), abs=1e-5)


def test_rotate_open_and_reset():
    assert render(Rotate(is_reset=True)) == "Q\n"
    assert render(Rotate(100, 45, 5, 6)) == "q\n " + rotation_matrix(5, 6, 45, 100)


def test_imported_template_translation_and_idempotence():
    tpl = ImportedTemplate(800, "/TPL1", 1.5, 2, 10, -50)
    out = render(tpl)
    tokens = out.split()
    cm = tokens.index("cm")
    assert [float(t) for t in tokens[cm - 6 : cm]] == [1.5, 0, 0, 2, 10, 750]
    assert tokens[cm + 1 : cm + 3] == ["/TPL1", "Do"]
    assert render(tpl) == out


def test_image_without_mask_is_wrapped_in_rotation():
    img = ImageDraw(page_height=800, index=0, x=10, y=20, width=100, height=50)
    out = render(img)
    assert out.startswith("q\n " + rotation_matrix(60, 45, 0, 800))
    assert out.endswith("Q\nQ\nQ\n")
    assert "cm /I1 Do \n" in out


def test_image_placement_coordinates():
    img = ImageDraw(page_height=800, index=2, x=10, y=20, width=100, height=50, with_mask=True)
    out = render(img)
    assert out.startswith("q\n")
    assert "/I3 Do" in out
    tokens = out.split()
    cm = tokens.index("cm")
    assert [float(t) for t in tokens[cm - 6 : cm]] == [100, 0, 0, 50, 10, 730]


def test_image_horizontal_flip():
    img = ImageDraw(page_height=800, index=0, x=10, y=20, width=100, height=50,
                    with_mask=True, horizontal_flip=True)
    out = render(img)
    assert "-1 0 0 1 0 0 cm\n" in out
    tokens = out.split()
    cm = len(tokens) - 1 - tokens[::-1].index("cm")
    assert float(tokens[cm - 2]) == -10 - 100


def test_image_crop_adds_clip():
    img = ImageDraw(page_height=800, index=0, x=0, y=0, width=100, height=100,
                    crop=CropOptions(0, 0, 10, 100), with_mask=True)
    out = render(img)
    clip = next(line for line in out.splitlines() if line.endswith("re W* n"))
    assert [float(t) for t in clip.split()[:4]] == [0, 700, 10, 100]


def test_image_crop_rotation_uses_crop_size():
    img = ImageDraw(page_height=800, index=0, x=0, y=0, width=100, height=100,
                    crop=CropOptions(0, 0, 10, 40))
    assert render(img).startswith("q\n " + rotation_matrix(5, 20, 0, 800))


def test_image_mask_rotation():
    img = ImageDraw(page_height=800, index=0, x=10, y=20, width=100, height=50,
                    with_mask=True, mask_angle=30, image_angle=15)
    out = render(img)
    assert rotation_matrix(60, 45, 45, 800) in out
    assert not out.startswith("q\n " + rotation_matrix(60, 45, 15, 800))