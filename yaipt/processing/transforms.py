"""Named RGB transforms built on ``Image.iterate`` and ``Image.filter``."""

from __future__ import annotations

import random
from enum import Enum
from typing import Optional, Sequence, Tuple

from ..config import SETTINGS
from ..errors import InvalidArgument
from .aggregate import median_aggregate
from .image import Image
from .kernels import box_kernel, gaussian_kernel
from .pixels import PixelLike

RGB = "RGB"

Weights = Tuple[float, float, float]


class Channel(Enum):
    RED = 0
    GREEN = 1
    BLUE = 2


class GrayscaleMode(Enum):
    LUMINANCE = "luminance"
    LUMA = "luma"
    AVERAGE = "average"
    RANDOM = "random"
    CUSTOM = "custom"


class ContrastMode(Enum):
    LINEAR = "linear"
    NONLINEAR = "nonlinear"


class BlurMode(Enum):
    AVERAGE = "average"
    MEDIAN = "median"
    GAUSSIAN = "gaussian"


_FIXED_WEIGHTS = {
    GrayscaleMode.LUMINANCE: (0.2126, 0.7152, 0.0722),
    GrayscaleMode.LUMA: (0.299, 0.587, 0.114),
    GrayscaleMode.AVERAGE: (1 / 3, 1 / 3, 1 / 3),
}

_SEPIA = (
    (0.393, 0.769, 0.189),
    (0.349, 0.686, 0.168),
    (0.272, 0.534, 0.131),
)


def _luminance(pixel: PixelLike) -> float:
    return 0.2126 * pixel[0] + 0.7152 * pixel[1] + 0.0722 * pixel[2]


def isolate_channel(image: Image, channel: Channel, in_place: bool = False) -> Image:
    keep = channel.value

    def processor(pixel, row, col):
        return [pixel[i] if i == keep else 0 for i in range(3)] + [pixel[3]]

    return image.iterate(RGB, processor, in_place)


def be_red(image: Image, in_place: bool = False) -> Image:
    return isolate_channel(image, Channel.RED, in_place)


def be_green(image: Image, in_place: bool = False) -> Image:
    return isolate_channel(image, Channel.GREEN, in_place)


def be_blue(image: Image, in_place: bool = False) -> Image:
    return isolate_channel(image, Channel.BLUE, in_place)


def grayscale_weights(
    mode: GrayscaleMode,
    weights: Optional[Sequence[Optional[float]]] = None,
    rng: Optional[random.Random] = None,
) -> Weights:
    """Resolve the R, G, B weights used by :func:`be_gray`."""

    if mode is GrayscaleMode.CUSTOM:
        if weights is None or len(weights) != 3 or any(w is None for w in weights):
            raise InvalidArgument("CUSTOM grayscale needs three weights")
        red, green, blue = weights
        return float(red), float(green), float(blue)
    if mode is GrayscaleMode.RANDOM:
        rng = rng or random.Random()
        low, high = sorted((rng.random(), rng.random()))
        return low, high - low, 1.0 - high
    return _FIXED_WEIGHTS[mode]


def be_gray(
    image: Image,
    mode: GrayscaleMode = GrayscaleMode.LUMINANCE,
    weights: Optional[Sequence[Optional[float]]] = None,
    rng: Optional[random.Random] = None,
    in_place: bool = False,
) -> Image:
    image.require_color_space(RGB)
    red, green, blue = grayscale_weights(mode, weights, rng)

    def processor(pixel, row, col):
        intensity = pixel[0] * red + pixel[1] * green + pixel[2] * blue
        return [intensity, intensity, intensity, pixel[3]]

    return image.iterate(RGB, processor, in_place)


def sepia(image: Image, in_place: bool = False) -> Image:
    def processor(pixel, row, col):
        r, g, b, a = pixel
        return [m[0] * r + m[1] * g + m[2] * b for m in _SEPIA] + [a]

    return image.iterate(RGB, processor, in_place)


def invert(image: Image, in_place: bool = False) -> Image:
    def processor(pixel, row, col):
        r, g, b, a = pixel
        return [255 - r, 255 - g, 255 - b, a]

    return image.iterate(RGB, processor, in_place)


def brightness(image: Image, offset: float, in_place: bool = False) -> Image:
    return brightness_contrast(image, offset, 1.0, ContrastMode.LINEAR, in_place)


def contrast(
    image: Image,
    amount: float,
    mode: ContrastMode = ContrastMode.LINEAR,
    in_place: bool = False,
) -> Image:
    return brightness_contrast(image, 0.0, amount, mode, in_place)


def _nonlinear_channel(value: float, threshold: float, amount: float) -> float:
    if amount >= 255:
        return 255.0 if value > threshold else 0.0
    if amount >= 0:
        return value + (value - threshold) * (1.0 / (1.0 - amount / 255.0) - 1.0)
    if amount > -255:
        return value + (value - threshold) * (amount / 255.0)
    return threshold


def brightness_contrast(
    image: Image,
    brightness: float,
    contrast: float,
    mode: ContrastMode = ContrastMode.LINEAR,
    in_place: bool = False,
) -> Image:
    """Apply contrast, then add ``brightness`` to R, G and B.

    LINEAR multiplies each channel by ``contrast``. NONLINEAR pushes each
    channel away from (or towards) the pixel's luminance; ``contrast`` runs
    from -255 (flat grey) through 0 (unchanged) to 255 (binarised).
    """

    if mode is ContrastMode.LINEAR:
        def processor(pixel, row, col):
            r, g, b, a = pixel
            return [r * contrast + brightness, g * contrast + brightness, b * contrast + brightness, a]
    else:
        def processor(pixel, row, col):
            threshold = _luminance(pixel)
            return [
                _nonlinear_channel(pixel[i], threshold, contrast) + brightness for i in range(3)
            ] + [pixel[3]]

    return image.iterate(RGB, processor, in_place)


def blur(
    image: Image,
    mode: BlurMode = BlurMode.AVERAGE,
    size: Optional[int] = None,
    sigma: Optional[float] = None,
    fill: Optional[PixelLike] = None,
    in_place: bool = False,
) -> Image:
    image.require_color_space(RGB)
    size = SETTINGS.blur_size if size is None else size
    if mode is BlurMode.MEDIAN:
        return image.filter(aggregate=median_aggregate, size=size, fill=fill, in_place=in_place)
    if mode is BlurMode.GAUSSIAN:
        sigma = SETTINGS.gaussian_sigma if sigma is None else sigma
        kernel = gaussian_kernel(size, sigma)
    else:
        kernel = box_kernel(size)
    return image.filter(kernel, fill=fill, in_place=in_place)
