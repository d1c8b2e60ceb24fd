"""Colour-space tagged image and the two raster pipelines built on it."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..errors import ColorSpaceMismatch, InvalidArgument
from .aggregate import Neighbourhood, convolve
from .kernels import KernelLike, Size, kernel_shape, kernel_size
from .pixels import BytesLike, Pixel, PixelBuffer, PixelLike, RawImage

LOGGER = logging.getLogger(__name__)

Processor = Callable[[Pixel, int, int], PixelLike]
Aggregate = Callable[[Neighbourhood, Optional[KernelLike]], PixelLike]


class Image:
    """An RGBA pixel buffer tagged with the colour space its values are in.

    Transforms either return a new ``Image`` over a freshly allocated buffer or,
    with ``in_place=True``, rewrite this image's buffer and return ``self``.
    """

    def __init__(self, buffer: PixelBuffer, color_space: str = "RGB") -> None:
        self._buffer = buffer
        self.color_space = color_space

    @classmethod
    def from_dimensions(cls, width: int, height: int) -> "Image":
        return cls(PixelBuffer.from_dimensions(width, height))

    @classmethod
    def from_raw_buffer(cls, width: int, height: int, data: BytesLike) -> "Image":
        return cls(PixelBuffer.from_raw_buffer(width, height, data))

    @classmethod
    def from_raw(cls, raw: RawImage) -> "Image":
        return cls.from_raw_buffer(raw.width, raw.height, raw.data)

    @property
    def width(self) -> int:
        return self._buffer.width

    @property
    def height(self) -> int:
        return self._buffer.height

    @property
    def pixels(self) -> PixelBuffer:
        return self._buffer

    def export(
        self,
        offset_row: int = 0,
        offset_col: int = 0,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> RawImage:
        return self._buffer.export_region(offset_row, offset_col, width, height)

    def require_color_space(self, color_space: str) -> None:
        if self.color_space.upper() != color_space.upper():
            raise ColorSpaceMismatch(
                f"Operation requires {color_space!r}, image is {self.color_space!r}"
            )

    def iterate(self, color_space: str, processor: Processor, in_place: bool = False) -> "Image":
        """Apply ``processor(pixel, row, col)`` to every pixel in row-major order.

        The processor must look at its own pixel only. Returned values are
        clamped into [0, 255].
        """

        self.require_color_space(color_space)
        source = self._buffer
        target = PixelBuffer.from_dimensions(source.width, source.height)
        LOGGER.debug("iterate %dx%d in_place=%s", source.width, source.height, in_place)

        for row in range(source.height):
            for col in range(source.width):
                target.set(row, col, processor(source.get(row, col), row, col))

        return self._commit(target, in_place)

    def filter(
        self,
        kernel: Optional[KernelLike] = None,
        aggregate: Optional[Aggregate] = None,
        *,
        size: Optional[Size] = None,
        fill: Optional[PixelLike] = None,
        color_space: str = "RGB",
        in_place: bool = False,
    ) -> "Image":
        """Reduce the neighbourhood of every pixel with ``aggregate``.

        ``aggregate`` defaults to :func:`convolve` when only a kernel is given.
        Neighbours outside the image are replaced by ``fill`` (with the centre
        pixel's alpha) or, without a fill, by the centre pixel itself.
        Neighbours are always read from the image as it was before the pass.
        """

        if kernel is None and aggregate is None:
            raise InvalidArgument("filter needs a kernel or an aggregate function")
        if aggregate is None:
            aggregate = convolve
        if kernel is not None:
            rows, cols = kernel_shape(kernel)
            if size is not None and kernel_size(size) != (rows, cols):
                raise InvalidArgument(
                    f"Window size {size} disagrees with {rows}x{cols} kernel"
                )
        else:
            rows, cols = kernel_size(size if size is not None else 3)
            if rows % 2 == 0 or cols % 2 == 0:
                raise InvalidArgument(f"Window dimensions must be odd, got {rows}x{cols}")
        if fill is not None and len(fill) != 4:
            raise InvalidArgument(f"Fill pixel needs 4 channel values, got {len(fill)}")
        self.require_color_space(color_space)

        source = self._buffer
        width, height = source.width, source.height
        target = PixelBuffer.from_dimensions(width, height)
        row_offset, col_offset = rows // 2, cols // 2
        LOGGER.debug(
            "filter %dx%d window=%dx%d in_place=%s", width, height, rows, cols, in_place
        )

        for row in range(height):
            for col in range(width):
                centre = source.get(row, col)
                if fill is None:
                    outside: PixelLike = centre
                else:
                    outside = (fill[0], fill[1], fill[2], centre[3])
                neighbourhood: List[List[PixelLike]] = []
                for y in range(row - row_offset, row - row_offset + rows):
                    line: List[PixelLike] = []
                    for x in range(col - col_offset, col - col_offset + cols):
                        if 0 <= y < height and 0 <= x < width:
                            line.append(source.get(y, x))
                        else:
                            line.append(outside)
                    neighbourhood.append(line)
                target.set(row, col, aggregate(neighbourhood, kernel))

        return self._commit(target, in_place)

    def copy(self) -> "Image":
        return Image(self._buffer.copy(), self.color_space)

    def _commit(self, target: PixelBuffer, in_place: bool) -> "Image":
        if in_place:
            self._buffer.data[:] = target.data
            return self
        return Image(target, self.color_space)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self.color_space.upper() == other.color_space.upper()
            and self._buffer == other._buffer
        )

    def __repr__(self) -> str:
        return f"Image({self.width}x{self.height}, {self.color_space!r})"
