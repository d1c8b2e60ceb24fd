"""Pixel buffers, raster pipelines and the transforms built on them."""

from .aggregate import convolve, median, median_aggregate
from .diff import diff
from .image import Image
from .kernels import box_kernel, gaussian_kernel
from .pixels import PixelBuffer, RawImage
from .transforms import (
    BlurMode,
    Channel,
    ContrastMode,
    GrayscaleMode,
    be_blue,
    be_gray,
    be_green,
    be_red,
    blur,
    brightness,
    brightness_contrast,
    contrast,
    invert,
    isolate_channel,
    sepia,
)

__all__ = [
    "convolve",
    "median",
    "median_aggregate",
    "diff",
    "Image",
    "box_kernel",
    "gaussian_kernel",
    "PixelBuffer",
    "RawImage",
    "BlurMode",
    "Channel",
    "ContrastMode",
    "GrayscaleMode",
    "be_blue",
    "be_gray",
    "be_green",
    "be_red",
    "blur",
    "brightness",
    "brightness_contrast",
    "contrast",
    "invert",
    "isolate_channel",
    "sepia",
]
