from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple, Union

from ..errors import InvalidArgument

LOGGER = logging.getLogger(__name__)

Kernel = List[List[float]]
KernelLike = Sequence[Sequence[float]]
Size = Union[int, Tuple[int, int]]


def kernel_size(size: Size) -> Tuple[int, int]:
    if isinstance(size, int):
        rows = cols = size
    else:
        rows, cols = size
    if rows < 1 or cols < 1:
        raise InvalidArgument(f"Kernel size must be positive, got {rows}x{cols}")
    return rows, cols


def kernel_shape(kernel: KernelLike) -> Tuple[int, int]:
    """Return ``(rows, cols)`` of a rectangular kernel with odd dimensions."""

    rows = len(kernel)
    if rows == 0 or len(kernel[0]) == 0:
        raise InvalidArgument("Kernel must not be empty")
    cols = len(kernel[0])
    if any(len(row) != cols for row in kernel):
        raise InvalidArgument("Kernel rows must all have the same length")
    if rows % 2 == 0 or cols % 2 == 0:
        raise InvalidArgument(f"Kernel dimensions must be odd, got {rows}x{cols}")
    return rows, cols


def box_kernel(size: Size = 3) -> Kernel:
    rows, cols = kernel_size(size)
    return [[1.0] * cols for _ in range(rows)]


def gaussian_kernel(size: int = 3, sigma: float = 1.0) -> Kernel:
    """Sample a 2D Gaussian on a ``size`` x ``size`` grid centred on the middle cell.

    The weights are left unnormalised; ``convolve`` divides by the kernel sum.
    """

    rows, _ = kernel_size(size)
    if sigma == 0:
        LOGGER.warning("Gaussian sigma of 0 is undefined, using 1.0")
        sigma = 1.0
    offset = rows // 2
    variance = 2.0 * sigma * sigma
    scale = 1.0 / (math.pi * variance)
    return [
        [
            scale * math.exp(-((x - offset) ** 2 + (y - offset) ** 2) / variance)
            for x in range(rows)
        ]
        for y in range(rows)
    ]
