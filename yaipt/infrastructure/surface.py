from __future__ import annotations

from typing import Optional

from PIL import Image as PILImage

from ..errors import OutOfRange
from ..processing.pixels import RawImage


class Surface:
    """Drawing surface handed to the engine's callers in place of a canvas.

    It holds an RGBA Pillow image. ``read`` and ``put`` move raw RGBA
    rectangles in and out of it, and nothing is shared between surfaces.
    """

    def __init__(self, width: int, height: int) -> None:
        self._image = PILImage.new("RGBA", (width, height), (0, 0, 0, 0))

    @classmethod
    def from_pil(cls, image: PILImage.Image) -> "Surface":
        surface = cls.__new__(cls)
        surface._image = image.convert("RGBA")
        return surface

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    def read(
        self,
        x: int = 0,
        y: int = 0,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> RawImage:
        width = self.width - x if width is None else width
        height = self.height - y if height is None else height
        if x < 0 or y < 0 or width < 1 or height < 1 or x + width > self.width or y + height > self.height:
            raise OutOfRange(
                f"Region {width}x{height} at ({x}, {y}) outside {self.width}x{self.height} surface"
            )
        region = self._image.crop((x, y, x + width, y + height))
        return RawImage(width, height, region.tobytes())

    def put(self, raw: RawImage, x: int = 0, y: int = 0) -> None:
        tile = PILImage.frombytes("RGBA", (raw.width, raw.height), bytes(raw.data))
        self._image.paste(tile, (x, y))

    def to_image(self) -> PILImage.Image:
        return self._image.copy()
