"""yaipt: a small pixel-level image-processing engine."""

from .config import APP_VERSION
from . import infrastructure, processing
from .app import create_app
from .processing.image import Image
from .processing.pixels import PixelBuffer, RawImage

__version__ = APP_VERSION

__all__ = [
    "APP_VERSION",
    "__version__",
    "create_app",
    "infrastructure",
    "processing",
    "Image",
    "PixelBuffer",
    "RawImage",
]
