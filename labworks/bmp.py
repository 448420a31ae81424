"""Reading and writing 24-bit uncompressed BMP images."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field

MAGIC = 19778
HEADER_FORMAT = struct.Struct("<IIIIiiHHIIiiII")
_MAGIC_FORMAT = struct.Struct("<H")
PIXEL_SIZE = 3


class BmpError(Exception):
    """Raised when a file is not a readable BMP image."""


def get_padding(width: int) -> int:
    """Return the number of padding bytes written after each pixel row."""
    return width % 4


@dataclass
class BmpHeader:
    """The BMP file and info header that follows the two magic bytes."""

    bf_size: int = 0
    bf_reserved: int = 0
    bf_off_bits: int = 54
    bi_size: int = 40
    bi_width: int = 0
    bi_height: int = 0
    bi_planes: int = 1
    bi_bit_count: int = 24
    bi_compression: int = 0
    bi_size_image: int = 0
    bi_x_pels_per_meter: int = 0
    bi_y_pels_per_meter: int = 0
    bi_clr_used: int = 0
    bi_clr_important: int = 0

    @classmethod
    def default(cls, width: int, height: int) -> BmpHeader:
        """Return a header for a ``width`` by ``height`` 24-bit image."""
        return cls(
            bf_size=(PIXEL_SIZE * width + get_padding(width)) * abs(height),
            bi_width=width,
            bi_height=height,
        )

    def pack(self) -> bytes:
        """Return the header as it is stored on disk."""
        return HEADER_FORMAT.pack(
            self.bf_size,
            self.bf_reserved,
            self.bf_off_bits,
            self.bi_size,
            self.bi_width,
            self.bi_height,
            self.bi_planes,
            self.bi_bit_count,
            self.bi_compression,
            self.bi_size_image,
            self.bi_x_pels_per_meter,
            self.bi_y_pels_per_meter,
            self.bi_clr_used,
            self.bi_clr_important,
        )

    @classmethod
    def unpack(cls, data: bytes) -> BmpHeader:
        """Parse a header from the start of ``data``."""
        if len(data) < HEADER_FORMAT.size:
            raise BmpError(
                f"header needs {HEADER_FORMAT.size} bytes, got {len(data)}"
            )
        return cls(*HEADER_FORMAT.unpack_from(data))


@dataclass(frozen=True)
class BmpPixel:
    """One pixel; stored on disk in blue, green, red order."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def pack(self) -> bytes:
        return bytes((self.blue, self.green, self.red))

    @classmethod
    def unpack(cls, data: bytes) -> BmpPixel:
        blue, green, red = data
        return cls(red, green, blue)


def _row_order(height: int) -> list[int]:
    """Indices of in-memory rows in the order they appear in the file."""
    rows = abs(height)
    offset = rows - 1 if height > 0 else 0
    return [abs(offset - y) for y in range(rows)]


@dataclass
class BmpImage:
    """A header plus pixel rows, top row first."""

    header: BmpHeader
    pixels: list[list[BmpPixel]] = field(default_factory=list, repr=False)

    @property
    def width(self) -> int:
        return self.header.bi_width

    @property
    def height(self) -> int:
        return abs(self.header.bi_height)

    @classmethod
    def new(cls, width: int, height: int) -> BmpImage:
        """Return a black image with a default header."""
        if width < 0:
            raise ValueError(f"width must be non-negative, got {width}")
        pixels = [[BmpPixel() for _ in range(width)] for _ in range(abs(height))]
        return cls(BmpHeader.default(width, height), pixels)

    @classmethod
    def read(cls, path: str | os.PathLike[str]) -> BmpImage:
        """Load an image; raises BmpError for a bad or truncated file."""
        with open(path, "rb") as stream:
            magic = stream.read(_MAGIC_FORMAT.size)
            if len(magic) != _MAGIC_FORMAT.size or _MAGIC_FORMAT.unpack(magic)[0] != MAGIC:
                raise BmpError(f"{os.fspath(path)!r} is not a BMP file")
            raw_header = stream.read(HEADER_FORMAT.size)
            header = BmpHeader.unpack(raw_header)
            width = header.bi_width
            if width < 0:
                raise BmpError(f"invalid image width {width}")
            row_bytes = width * PIXEL_SIZE
            padding = get_padding(width)
            pixels: list[list[BmpPixel]] = [[] for _ in range(abs(header.bi_height))]
            for index in _row_order(header.bi_height):
                raw = stream.read(row_bytes)
                if len(raw) != row_bytes:
                    raise BmpError("pixel data is truncated")
                pixels[index] = [
                    BmpPixel(red, green, blue)
                    for blue, green, red in zip(*[iter(raw)] * PIXEL_SIZE)
                ]
                stream.seek(padding, os.SEEK_CUR)
        return cls(header, pixels)

    def write(self, path: str | os.PathLike[str]) -> None:
        """Save the image with its header to ``path``."""
        width = self.header.bi_width
        if len(self.pixels) != self.height:
            raise ValueError(f"expected {self.height} rows, got {len(self.pixels)}")
        if any(len(row) != width for row in self.pixels):
            raise ValueError(f"every row must hold {width} pixels")
        padding = bytes(get_padding(width))
        with open(path, "wb") as stream:
            stream.write(_MAGIC_FORMAT.pack(MAGIC))
            stream.write(self.header.pack())
            for index in _row_order(self.header.bi_height):
                stream.write(b"".join(pixel.pack() for pixel in self.pixels[index]))
                stream.write(padding)