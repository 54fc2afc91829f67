"""Dictionary objects of a PDF file: catalog, encryption, graphics states and fonts.

Every object has a ``write(w, obj_id)`` method that writes its body to a
binary writer such as :class:`io.BytesIO`.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import BinaryIO, Optional, Union

Encryptor = Callable[[int, bytes], bytes]
BlendMode = Union[str, Enum]


def _blend_name(mode: BlendMode) -> str:
    return str(mode.value) if isinstance(mode, Enum) else str(mode)


def _ascii(text: str) -> bytes:
    return text.encode("latin-1")


@dataclass
class Catalog:
    """The document catalog, pointing at the page tree and optional outlines."""

    outlines_obj_id: int = -1

    def set_outlines_index(self, index: int) -> None:
        """Link the outlines object stored at zero-based ``index``."""
        self.outlines_obj_id = index + 1

    def write(self, w: BinaryIO, obj_id: int) -> None:
        w.write(b"<<\n")
        w.write(b"  /Type /Catalog\n")
        w.write(b"  /Pages 2 0 R\n")
        if self.outlines_obj_id >= 0:
            w.write(b"  /PageMode /UseOutlines\n")
            w.write(_ascii(f"  /Outlines {self.outlines_obj_id} 0 R\n"))
        w.write(b">>\n")


def _escape_pdf_string(data: bytes) -> bytes:
    return (
        data.replace(b"\\", b"\\\\")
        .replace(b"(", b"\\(")
        .replace(b")", b"\\)")
        .replace(b"\r", b"\\r")
    )


@dataclass
class EncryptionDict:
    """The standard security handler dictionary (revision 2)."""

    o_value: bytes = b""
    u_value: bytes = b""
    p_value: int = 0

    def write(self, w: BinaryIO, obj_id: int) -> None:
        w.write(b"<<\n")
        w.write(b"/Filter /Standard\n")
        w.write(b"/V 1\n")
        w.write(b"/R 2\n")
        w.write(b"/O (" + _escape_pdf_string(self.o_value) + b")\n")
        w.write(b"/U (" + _escape_pdf_string(self.u_value) + b")\n")
        w.write(_ascii(f"/P {self.p_value}\n"))
        w.write(b">>\n")


@dataclass(frozen=True)
class ExtGStateOptions:
    """The settings that identify an external graphics state."""

    stroking_ca: Optional[float] = None
    non_stroking_ca: Optional[float] = None
    blend_mode: Optional[BlendMode] = None
    smask_index: Optional[int] = None

    def key(self) -> str:
        """Return a string that is equal for equal settings."""
        parts = []
        if self.stroking_ca is not None:
            parts.append(f"CA_{self.stroking_ca:.3f};")
        if self.non_stroking_ca is not None:
            parts.append(f"ca_{self.non_stroking_ca:.3f};")
        if self.blend_mode is not None:
            parts.append(f"BM_{_blend_name(self.blend_mode)};")
        if self.smask_index is not None:
            parts.append(f"SMask_{self.smask_index}_0_R;")
        return "".join(parts)


@dataclass
class ExtGState:
    """An external graphics state object with alpha, blend mode and soft mask."""

    index: int = 0
    stroking_ca: Optional[float] = None
    non_stroking_ca: Optional[float] = None
    blend_mode: Optional[BlendMode] = None
    smask_index: Optional[int] = None

    @classmethod
    def from_options(cls, options: ExtGStateOptions, index: int = 0) -> ExtGState:
        return cls(
            index=index,
            stroking_ca=options.stroking_ca,
            non_stroking_ca=options.non_stroking_ca,
            blend_mode=options.blend_mode,
            smask_index=options.smask_index,
        )

    def write(self, w: BinaryIO, obj_id: int) -> None:
        content = "<<\n\t/Type /ExtGState\n"
        if self.non_stroking_ca is not None:
            content += f"\t/ca {self.non_stroking_ca:.3f}\n"
        if self.stroking_ca is not None:
            content += f"\t/CA {self.stroking_ca:.3f}\n"
        if self.blend_mode is not None:
            content += f"\t/BM {_blend_name(self.blend_mode)}\n"
        if self.smask_index is not None:
            content += f"\t/SMask {self.smask_index + 1} 0 R\n"
        content += ">>\n"
        w.write(_ascii(content))


class ExtGStateRegistry:
    """A thread-safe cache of graphics states keyed by their options."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._table: dict[str, ExtGState] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._table)

    def find(self, options: ExtGStateOptions) -> Optional[ExtGState]:
        """Return the state saved for ``options``, or ``None``."""
        key = options.key()
        with self._lock:
            return self._table.get(key)

    def save(self, key: str, state: ExtGState) -> ExtGState:
        """Store ``state`` under ``key`` and return it."""
        with self._lock:
            self._table[key] = state
        return state


@dataclass
class FontDict:
    """A simple TrueType font dictionary, optionally embedded."""

    family: str
    font_name: Optional[str] = None
    is_embed_font: bool = False
    widths_obj_id: int = 0
    font_descriptor_obj_id: int = 0
    encoding_obj_id: int = 0

    def write(self, w: BinaryIO, obj_id: int) -> None:
        base_font = self.font_name if self.font_name is not None else self.family
        w.write(b"<<\n")
        w.write(b"  /Type /Font\n")
        w.write(b"  /Subtype /TrueType\n")
        w.write(_ascii(f"  /BaseFont /{base_font}\n"))
        if self.is_embed_font:
            w.write(b"  /FirstChar 32 /LastChar 255\n")
            w.write(_ascii(f"  /Widths {self.widths_obj_id} 0 R\n"))
            w.write(_ascii(f"  /FontDescriptor {self.font_descriptor_obj_id} 0 R\n"))
            w.write(_ascii(f"  /Encoding {self.encoding_obj_id} 0 R\n"))
        w.write(b">>\n")


@dataclass
class EncodingDict:
    """A WinAnsi-based encoding with a ``/Differences`` array."""

    differences: str = ""

    def write(self, w: BinaryIO, obj_id: int) -> None:
        w.write(b"<</Type /Encoding /BaseEncoding /WinAnsiEncoding /Differences [")
        w.write(_ascii(self.differences))
        w.write(b"]>>\n")


@dataclass
class FontDescriptor:
    """A font descriptor listing metrics and the embedded font file."""

    font_name: str
    descriptors: Sequence[tuple[str, str]] = field(default_factory=list)
    font_file_ref: str = ""

    def write(self, w: BinaryIO, obj_id: int) -> None:
        w.write(_ascii(f"<</Type /FontDescriptor /FontName /{self.font_name} "))
        for key, value in self.descriptors:
            w.write(_ascii(f"/{key} {value} "))
        w.write(b"/FontFile2 ")
        w.write(_ascii(self.font_file_ref))
        w.write(b">>\n")


@dataclass
class DeviceRGB:
    """A raw stream object holding device RGB data."""

    data: bytes = b""
    encrypt: Optional[Encryptor] = None

    def write(self, w: BinaryIO, obj_id: int) -> None:
        w.write(b"<<\n")
        w.write(_ascii(f"/Length {len(self.data)}\n"))
        w.write(b">>\n")
        w.write(b"stream\n")
        if self.encrypt is not None:
            w.write(self.encrypt(obj_id, self.data))
            w.write(b"\n")
        else:
            w.write(self.data)
        w.write(b"endstream\n")