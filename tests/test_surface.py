import pytest
from PIL import Image as PILImage

from yaipt.errors import OutOfRange
from yaipt.infrastructure.surface import Surface
from yaipt.processing.image import Image
from yaipt.processing.pixels import RawImage
from yaipt.processing.transforms import invert


def test_new_surface_is_transparent():
    surface = Surface(2, 2)

    assert surface.read() == RawImage(2, 2, bytes(16))


def test_from_pil_converts_to_rgba_copy():
    source = PILImage.new("RGB", (3, 2), (255, 0, 0))

    surface = Surface.from_pil(source)
    source.putpixel((0, 0), (0, 0, 0))

    raw = surface.read()
    assert (raw.width, raw.height) == (3, 2)
    assert raw.data == bytes((255, 0, 0, 255)) * 6


def test_put_then_read_region():
    surface = Surface(4, 3)
    tile = RawImage(2, 1, bytes((1, 2, 3, 4, 5, 6, 7, 8)))

    surface.put(tile, x=1, y=2)

    assert surface.read(1, 2, 2, 1) == tile
    assert surface.read(0, 0, 1, 1).data == bytes(4)


@pytest.mark.parametrize(
    "x, y, width, height",
    [(-1, 0, None, None), (0, 0, 5, None), (3, 2, 2, 1), (0, 3, None, None)],
)
def test_read_rejects_regions_outside_surface(x, y, width, height):
    with pytest.raises(OutOfRange):
        Surface(4, 3).read(x, y, width, height)


def test_engine_round_trip_through_surface():
    surface = Surface.from_pil(PILImage.new("RGBA", (2, 2), (10, 20, 30, 40)))

    processed = invert(Image.from_raw(surface.read()))
    surface.put(processed.export())

    assert surface.to_image().getpixel((1, 1)) == (245, 235, 225, 40)
