"""Error taxonomy shared by the engine and its collaborators."""

from __future__ import annotations


class YaiptError(Exception):
    """Base class for every error raised by yaipt."""


class OutOfRange(YaiptError, IndexError):
    """A coordinate or rectangle falls outside a pixel buffer."""


class InvalidArgument(YaiptError, ValueError):
    """A caller supplied malformed input (pixel arity, kernel shape, ...)."""


class ColorSpaceMismatch(YaiptError, ValueError):
    """The image is tagged with a colour space the operation cannot handle."""


class SourceError(YaiptError, RuntimeError):
    """The upstream image could not be fetched or decoded."""
