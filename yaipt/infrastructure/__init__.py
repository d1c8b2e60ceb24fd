"""Collaborators that sit at the edges of the engine: fetching, display and HTTP output."""

from .network import FETCHER, SourceFetcher
from .responses import send_png
from .surface import Surface

__all__ = [
    "FETCHER",
    "SourceFetcher",
    "send_png",
    "Surface",
]
