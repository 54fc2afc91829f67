# pdfstream

Low-level building blocks for writing PDF files by hand. The package has no
dependencies beyond the standard library.

## Modules

- `pdfstream.units`: conversion between points, millimetres, centimetres
  and inches. `Unit` lists the units. `units_to_points(unit, value)` and
  `points_to_units(unit, value)` convert a value, and an unset or unknown
  unit leaves the value as it is. `Box` is a frozen rectangle given by its
  edges. `Box.to_points(unit)` returns a copy in points and uses the box's
  own `unit_override` when that is set.
- `pdfstream.binio`: big-endian writers for binary font data
  (`write_uint32`, `write_uint16`, `write_tag`, `write_bytes`) and
  `PositionedBuffer`, a byte buffer whose write position can be moved. It
  pads with zero bytes when it has to grow. `write_bytes` raises
  `ValueError` for a slice that lies outside the data.
- `pdfstream.options`: option types only.
  - `BreakOption` and `BreakMode` describe how text should be broken into
    lines. `DEFAULT_BREAK_OPTION` is a strict break with no separator.
  - `CellOption` holds the alignment, the borders and the underline factors
    of a cell.
  - `Side` holds the alignment and border flags, with `ALL_BORDERS` being
    the four edges.
  - `FontStyle` holds the style flags. `parse_font_style("BIU")` turns a
    string into those flags, and letter case does not matter.
- `pdfstream.numfmt`:
  - `format_float_trim` formats a number with at most three decimals and
    drops trailing zeros: `10.0001` becomes `"10"` and `9.99` stays `"9.99"`.
  - `convert_typo_unit` turns font design units into points at a given font
    size.
  - `widths_to_string` renders the widths of character codes 32 to 255 as a
    list separated by spaces.
- `pdfstream.drawing`: one class for each drawing operation. Each has a
  `write(w)` method that writes its operators to a text stream such as
  `io.StringIO`.
  - Colours: `ColorRGB` takes components from 0 to 255. `ColorCMYK` takes
    components in percent. `TextColorRGB` and `TextColorCMYK` are the text
    fill colours.
  - Line settings: `Gray`, `LineWidth`, `LineType` (`"dashed"`, `"dotted"`,
    anything else is solid) and `CustomLineType`.
  - Shapes: `Line`, `Oval`, `Curve` and `Polygon`. For `Curve` and
    `Polygon`, style `F` fills, `FD` or `DF` fills and strokes, and any
    other style strokes.
  - `Rectangle` is painted with any PDF paint operator and is stroked by
    default.
  - `Rotate` opens a rotated graphics state, or closes one when
    `is_reset=True`.
  - `ImportedTemplate` places a named form XObject.
  - `ImageDraw` places image XObject `/I<index+1>` with optional
    `CropOptions`, flips and rotation.
  - `rotation_matrix(x, y, degree_angle, page_height)` returns the `cm`
    operators for a rotation around a point.
- `pdfstream.content`:
  - `ContentStream` collects drawing operations for one page. It has
    helpers such as `add_line`, `add_rectangle`, `add_oval`, `add_curve`,
    `add_polygon`, `add_imported_template`, `set_line_width`,
    `set_line_type`, `set_custom_line_type`, `set_gray_fill`,
    `set_gray_stroke`, `set_fill_color`, `set_stroke_color`, their `_cmyk`
    variants, `rotate` and `reset_rotation`. `add` accepts any drawing
    object.
  - `render()` returns the operator text. `write(w, obj_id)` writes the
    stream object to a binary writer.
  - The stream is compressed with zlib unless `compress_level=0`. An
    optional `encrypt(obj_id, data)` callback encrypts the stream data.
  - The module also has three helpers. `ttf_to_pdf_units` turns TrueType
    units into thousandths of an em. `text_height` gives 0.7 times the font
    size. `clamp_unit` limits a value to the range 0 to 1.
- `pdfstream.objects`: dictionary objects. Each has a `write(w, obj_id)`
  method that writes to a binary writer.
  - `Catalog` is the document catalog. `set_outlines_index` links an
    outlines object.
  - `EncryptionDict` is the security handler dictionary for standard
    revision 2.
  - `ExtGState` is a graphics state. `ExtGStateOptions.key()` gives its
    cache key, and `ExtGStateRegistry` is a thread-safe cache of states
    with `find` and `save`.
  - `FontDict` is a TrueType font dictionary.
  - `EncodingDict` is a WinAnsi encoding with differences.
  - `FontDescriptor` is a font descriptor.
  - `DeviceRGB` is a raw stream object and can be encrypted through an
    `encrypt(obj_id, data)` callback.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from pdfstream.units import Unit, units_to_points
from pdfstream.content import ContentStream

page_height = units_to_points(Unit.MM, 297)
stream = ContentStream(page_height=page_height)
stream.set_line_width(1.5)
stream.set_stroke_color(240, 98, 146)
stream.add_line(10, 10, 200, 10)
stream.add_oval(50, 50, 150, 120)

print(stream.render())
```

Coordinates are given in points, measured from the top-left corner of the
page. Each operation converts them to PDF's bottom-up coordinates using the
page height.

## What it does not do

This package provides pieces that you assemble yourself. It does not do any
of the following:

- write a complete PDF file. There is no page tree, cross-reference table or
  trailer.
- parse TrueType fonts, build font subsets or read images.
- draw text, measure text, lay out cells or split text into lines.
  `BreakOption` and `CellOption` only carry settings.
- compute encryption keys. `EncryptionDict` writes values that it is given,
  and encryption of stream data is left to the callback that you pass in.