"""Flat RGBA storage with bounds-checked pixel access."""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence, Tuple, Union

from ..errors import InvalidArgument, OutOfRange

CHANNELS = 4

Pixel = Tuple[int, int, int, int]
PixelLike = Sequence[float]
BytesLike = Union[bytes, bytearray, memoryview]


class RawImage(NamedTuple):
    """Boundary value exchanged with loaders and display surfaces."""

    width: int
    height: int
    data: bytes


def clamp_channel(value: float) -> int:
    return int(round(min(255.0, max(0.0, value))))


def clamp_pixel(pixel: PixelLike) -> Pixel:
    if len(pixel) != CHANNELS:
        raise InvalidArgument(f"Expected {CHANNELS} channel values, got {len(pixel)}")
    r, g, b, a = pixel
    return clamp_channel(r), clamp_channel(g), clamp_channel(b), clamp_channel(a)


class PixelBuffer:
    """RGBA image storage backed by a single ``bytearray``.

    Pixels are addressed by ``(row, col)``; the channel bytes of a pixel start
    at ``(row * width + col) * 4`` and are laid out as R, G, B, A.
    """

    __slots__ = ("width", "height", "data")

    def __init__(self, width: int, height: int, data: BytesLike) -> None:
        if width < 0 or height < 0:
            raise InvalidArgument(f"Invalid dimensions {width}x{height}")
        # A bytearray is adopted as-is; anything else is copied into one.
        if not isinstance(data, bytearray):
            data = bytearray(data)
        expected = width * height * CHANNELS
        if len(data) != expected:
            raise InvalidArgument(
                f"Buffer holds {len(data)} bytes, expected {expected} for {width}x{height}"
            )
        self.width = width
        self.height = height
        self.data = data

    @classmethod
    def from_dimensions(cls, width: int, height: int) -> "PixelBuffer":
        if width < 0 or height < 0:
            raise InvalidArgument(f"Invalid dimensions {width}x{height}")
        return cls(width, height, bytearray(width * height * CHANNELS))

    @classmethod
    def from_raw_buffer(cls, width: int, height: int, data: BytesLike) -> "PixelBuffer":
        return cls(width, height, data)

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.width, self.height, bytearray(self.data))

    def get(self, row: int, col: int) -> Pixel:
        start = self._offset(row, col)
        data = self.data
        return data[start], data[start + 1], data[start + 2], data[start + 3]

    def set(self, row: int, col: int, pixel: PixelLike) -> None:
        start = self._offset(row, col)
        self.data[start:start + CHANNELS] = bytes(clamp_pixel(pixel))

    def export_region(
        self,
        offset_row: int = 0,
        offset_col: int = 0,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> RawImage:
        """Copy a rectangle out of the buffer.

        Extents default to the space remaining after the offset. The rectangle
        must lie completely inside the buffer.
        """

        if not 0 <= offset_row < self.height or not 0 <= offset_col < self.width:
            raise OutOfRange(
                f"Offset ({offset_row}, {offset_col}) outside {self.width}x{self.height} buffer"
            )
        if width is None:
            width = self.width - offset_col
        if height is None:
            height = self.height - offset_row
        if width < 1 or height < 1:
            raise OutOfRange(f"Region extent {width}x{height} is empty")
        if offset_col + width > self.width or offset_row + height > self.height:
            raise OutOfRange(
                f"Region {width}x{height} at ({offset_row}, {offset_col}) exceeds "
                f"{self.width}x{self.height} buffer"
            )

        out = bytearray()
        stride = self.width * CHANNELS
        for row in range(offset_row, offset_row + height):
            start = row * stride + offset_col * CHANNELS
            out += self.data[start:start + width * CHANNELS]
        return RawImage(width, height, bytes(out))

    def _offset(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise OutOfRange(f"Pixel ({row}, {col}) outside {self.width}x{self.height} buffer")
        return (row * self.width + col) * CHANNELS

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.data == other.data
        )

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height})"
