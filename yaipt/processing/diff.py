from __future__ import annotations

from PIL import ImageChops

from ..infrastructure.surface import Surface
from .image import Image


def _canvas(image: Image, width: int, height: int) -> Surface:
    surface = Surface(width, height)
    if image.width and image.height:
        surface.put(image.export())
    return surface


def diff(first: Image, second: Image) -> Image:
    """Per-channel absolute difference of two images with opaque alpha.

    The result covers both extents; pixels missing from the smaller image read
    as transparent black.
    """

    first.require_color_space("RGB")
    second.require_color_space("RGB")
    width = max(first.width, second.width)
    height = max(first.height, second.height)
    if not width or not height:
        return Image.from_dimensions(width, height)

    difference = ImageChops.difference(
        _canvas(first, width, height).to_image(),
        _canvas(second, width, height).to_image(),
    )
    difference.putalpha(255)
    return Image.from_raw(Surface.from_pil(difference).read())
