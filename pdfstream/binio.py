"""Big-endian binary writers and a seekable byte buffer."""

from __future__ import annotations

from typing import BinaryIO


def write_uint32(w: BinaryIO, v: int) -> None:
    """Write the low 32 bits of ``v`` in big-endian order."""
    w.write((v & 0xFFFFFFFF).to_bytes(4, "big"))


def write_uint16(w: BinaryIO, v: int) -> None:
    """Write the low 16 bits of ``v`` in big-endian order."""
    w.write((v & 0xFFFF).to_bytes(2, "big"))


def write_tag(w: BinaryIO, tag: str) -> None:
    """Write ``tag`` as UTF-8 bytes."""
    w.write(tag.encode("utf-8"))


def write_bytes(w: BinaryIO, data: bytes, offset: int, count: int) -> None:
    """Write ``count`` bytes of ``data`` starting at ``offset``."""
    if offset < 0 or count < 0 or offset + count > len(data):
        raise ValueError(
            f"slice [{offset}:{offset + count}] out of range for {len(data)} bytes"
        )
    w.write(data[offset : offset + count])


class PositionedBuffer:
    """A byte buffer written at a movable position, growing with zeros."""

    def __init__(self) -> None:
        self._data = bytearray()
        self.position = 0

    def write(self, data: bytes) -> int:
        """Write ``data`` at the current position and advance past it."""
        end = self.position + len(data)
        if len(self._data) < end:
            self._data.extend(bytes(end - len(self._data)))
        self._data[self.position : end] = data
        self.position = end
        return len(data)

    def getvalue(self) -> bytes:
        """Return the whole buffer content."""
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)