from __future__ import annotations

import io

from flask import send_file

from ..processing.pixels import RawImage
from .surface import Surface


def send_png(raw: RawImage):
    surface = Surface(raw.width, raw.height)
    surface.put(raw)
    buffer = io.BytesIO()
    surface.to_image().save(buffer, "PNG", optimize=True)
    buffer.seek(0)
    return send_file(buffer, mimetype="image/png")
