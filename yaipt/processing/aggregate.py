"""Aggregation functions that reduce a pixel neighbourhood to one pixel."""

from __future__ import annotations

import statistics
from typing import List, Optional, Sequence

from ..errors import InvalidArgument
from .kernels import KernelLike
from .pixels import PixelLike

Neighbourhood = Sequence[Sequence[PixelLike]]


def _centre(neighbourhood: Neighbourhood) -> PixelLike:
    row = neighbourhood[len(neighbourhood) // 2]
    return row[len(row) // 2]


def convolve(neighbourhood: Neighbourhood, kernel: Optional[KernelLike]) -> List[float]:
    """Weighted sum of the neighbourhood with the flipped kernel.

    The sum is divided by the kernel weight total when that total is positive.
    Alpha is taken from the centre pixel.
    """

    if kernel is None:
        raise InvalidArgument("convolve requires a kernel")
    rows = len(kernel)
    cols = len(kernel[0]) if rows else 0
    if len(neighbourhood) != rows or any(len(line) != cols for line in neighbourhood):
        raise InvalidArgument("Kernel and neighbourhood shapes differ")

    red = green = blue = 0.0
    total = 0.0
    for i, line in enumerate(neighbourhood):
        weights = kernel[rows - 1 - i]
        for j, pixel in enumerate(line):
            weight = weights[cols - 1 - j]
            red += pixel[0] * weight
            green += pixel[1] * weight
            blue += pixel[2] * weight
            total += weight

    if total > 0:
        red /= total
        green /= total
        blue /= total
    return [red, green, blue, _centre(neighbourhood)[3]]


def median(values: Sequence[float]) -> float:
    if not values:
        raise InvalidArgument("median of an empty sequence")
    return statistics.median(values)


def median_aggregate(neighbourhood: Neighbourhood, kernel: Optional[KernelLike] = None) -> List[float]:
    pixels = [pixel for line in neighbourhood for pixel in line]
    return [
        median([pixel[0] for pixel in pixels]),
        median([pixel[1] for pixel in pixels]),
        median([pixel[2] for pixel in pixels]),
        _centre(neighbourhood)[3],
    ]
