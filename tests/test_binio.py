import io

import pytest

from pdfstream.binio import (
    PositionedBuffer,
    write_bytes,
    write_tag,
    write_uint16,
    write_uint32,
)


def test_write_uint32():
    buff = io.BytesIO()
    write_uint32(buff, 65536)
    assert buff.getvalue() == bytes([0, 1, 0, 0])


def test_write_uint32_truncates():
    buff = io.BytesIO()
    write_uint32(buff, 0x1_0000_0001)
    assert buff.getvalue() == b"\x00\x00\x00\x01"


def test_write_uint16():
    buff = io.BytesIO()
    write_uint16(buff, 0x0102)
    write_uint16(buff, 0x1FFFF)
    assert buff.getvalue() == b"\x01\x02\xff\xff"


def test_write_tag():
    buff = io.BytesIO()
    write_tag(buff, "glyf")
    assert buff.getvalue() == b"glyf"


def test_write_bytes_slice():
    buff = io.BytesIO()
    write_bytes(buff, b"abcdef", 1, 3)
    assert buff.getvalue() == b"bcd"


def test_write_bytes_out_of_range():
    with pytest.raises(ValueError):
        write_bytes(io.BytesIO(), b"abc", 2, 5)


def test_positioned_buffer_appends():
    buf = PositionedBuffer()
    assert buf.write(b"abc") == 3
    buf.write(b"de")
    assert buf.getvalue() == b"abcde"
    assert buf.position == 5
    assert len(buf) == 5


def test_positioned_buffer_overwrites_and_grows():
    buf = PositionedBuffer()
    buf.write(b"abcdef")
    buf.position = 2
    buf.write(b"XY")
    assert buf.getvalue() == b"abXYef"
    buf.position = 8
    buf.write(b"Z")
    assert buf.getvalue() == b"abXYef\x00\x00Z"
    assert buf.position == 9