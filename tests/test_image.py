import pytest

from yaipt.errors import ColorSpaceMismatch, InvalidArgument
from yaipt.processing.aggregate import median_aggregate
from yaipt.processing.image import Image
from yaipt.processing.kernels import box_kernel


def _solid(width, height, pixel):
    return Image.from_raw_buffer(width, height, bytes(pixel) * (width * height))


def _gradient(width, height):
    data = bytearray()
    for row in range(height):
        for col in range(width):
            data += bytes((row * 40 % 256, col * 30 % 256, (row + col) * 20 % 256, 255))
    return Image.from_raw_buffer(width, height, data)


def test_from_raw_buffer_tags_rgb():
    image = _solid(2, 3, (1, 2, 3, 4))

    assert image.color_space == "RGB"
    assert (image.width, image.height) == (2, 3)


def test_from_raw_buffer_rejects_wrong_length():
    with pytest.raises(InvalidArgument):
        Image.from_raw_buffer(2, 2, bytes(12))


def test_export_sub_rectangle():
    image = _gradient(3, 3)

    raw = image.export(1, 0, width=3, height=1)

    assert raw.data == b"".join(bytes(image.pixels.get(1, col)) for col in range(3))


def test_iterate_visits_every_pixel_in_row_major_order():
    image = _solid(3, 2, (0, 0, 0, 255))
    visited = []

    def record(pixel, row, col):
        visited.append((row, col))
        return pixel

    image.iterate("RGB", record)

    assert visited == [(row, col) for row in range(2) for col in range(3)]


def test_iterate_matches_color_space_case_insensitively():
    image = _solid(1, 1, (1, 2, 3, 4))
    image.color_space = "rgb"

    assert image.iterate("RGB", lambda pixel, row, col: pixel) == image


def test_iterate_rejects_other_color_space():
    image = _solid(1, 1, (1, 2, 3, 4))
    image.color_space = "HSV"

    with pytest.raises(ColorSpaceMismatch):
        image.iterate("RGB", lambda pixel, row, col: pixel)


def test_iterate_clamps_processor_output():
    image = _solid(1, 1, (0, 0, 0, 0))

    result = image.iterate("RGB", lambda pixel, row, col: (300, -20, 127.6, 255))

    assert result.pixels.get(0, 0) == (255, 0, 128, 255)


def test_iterate_rejects_processor_with_wrong_arity():
    image = _solid(1, 1, (0, 0, 0, 0))

    with pytest.raises(InvalidArgument):
        image.iterate("RGB", lambda pixel, row, col: (1, 2, 3))


def test_iterate_copy_mode_leaves_source_untouched():
    image = _solid(2, 2, (10, 20, 30, 40))
    before = bytes(image.pixels.data)

    result = image.iterate("RGB", lambda pixel, row, col: (0, 0, 0, 0))

    assert result is not image
    assert result.pixels is not image.pixels
    assert bytes(image.pixels.data) == before
    assert set(result.pixels.data) == {0}


def test_iterate_in_place_rewrites_buffer():
    image = _solid(2, 2, (10, 20, 30, 40))
    buffer = image.pixels

    result = image.iterate("RGB", lambda pixel, row, col: (0, 0, 0, 0), in_place=True)

    assert result is image
    assert image.pixels is buffer
    assert set(buffer.data) == {0}


def test_iterate_failure_leaves_in_place_image_unchanged():
    image = _gradient(3, 3)
    before = bytes(image.pixels.data)

    def explode(pixel, row, col):
        if row == 2:
            raise RuntimeError("boom")
        return (0, 0, 0, 0)

    with pytest.raises(RuntimeError):
        image.iterate("RGB", explode, in_place=True)

    assert bytes(image.pixels.data) == before


def test_filter_requires_kernel_or_aggregate():
    with pytest.raises(InvalidArgument):
        _solid(2, 2, (0, 0, 0, 0)).filter()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"kernel": [[1, 1], [1, 1]]},
        {"kernel": [[1, 1, 1], [1, 1]]},
        {"aggregate": median_aggregate, "size": 2},
        {"aggregate": median_aggregate, "size": (3, 4)},
        {"kernel": box_kernel(), "fill": (0, 0, 0)},
    ],
)
def test_filter_rejects_malformed_arguments(kwargs):
    with pytest.raises(InvalidArgument):
        _solid(2, 2, (0, 0, 0, 0)).filter(**kwargs)


def test_filter_rejects_other_color_space():
    image = _solid(2, 2, (0, 0, 0, 0))
    image.color_space = "Lab"

    with pytest.raises(ColorSpaceMismatch):
        image.filter(box_kernel())


@pytest.mark.parametrize("fill", [None, (0, 0, 0, 0), (255, 255, 255, 255)])
def test_box_filter_keeps_uniform_interior(fill):
    image = _solid(5, 5, (50, 60, 70, 255))

    result = image.filter(box_kernel(), fill=fill)

    for row in range(1, 4):
        for col in range(1, 4):
            assert result.pixels.get(row, col) == (50, 60, 70, 255)


def test_box_filter_without_fill_keeps_uniform_edges():
    image = _solid(4, 3, (50, 60, 70, 255))

    assert image.filter(box_kernel()) == image


def test_filter_uses_true_convolution():
    image = Image.from_raw_buffer(3, 1, bytes((10, 0, 0, 255, 20, 0, 0, 255, 30, 0, 0, 255)))
    shift = [[0, 0, 0], [0, 0, 1], [0, 0, 0]]

    result = image.filter(shift)

    assert [result.pixels.get(0, col)[0] for col in range(3)] == [10, 10, 20]


def test_filter_fill_takes_centre_alpha():
    image = _solid(1, 1, (10, 20, 30, 200))
    seen = []

    def capture(neighbourhood, kernel):
        seen.append(neighbourhood)
        return neighbourhood[1][1]

    image.filter(aggregate=capture, fill=(1, 2, 3, 4))

    window = seen[0]
    assert window[1][1] == (10, 20, 30, 200)
    assert window[0][0] == (1, 2, 3, 200)
    assert window[2][1] == (1, 2, 3, 200)


def test_filter_without_fill_repeats_centre():
    image = _solid(1, 1, (10, 20, 30, 200))
    seen = []

    def capture(neighbourhood, kernel):
        seen.append(neighbourhood)
        assert kernel is None
        return neighbourhood[0][0]

    image.filter(aggregate=capture, size=(1, 3))

    assert seen[0] == [[(10, 20, 30, 200)] * 3]


def test_in_place_filter_matches_copy_mode():
    image = _gradient(5, 4)

    copied = image.filter(box_kernel())
    result = image.filter(box_kernel(), in_place=True)

    assert result is image
    assert image == copied


def test_filter_rejects_size_that_disagrees_with_kernel():
    image = _solid(3, 3, (0, 0, 0, 255))

    with pytest.raises(InvalidArgument):
        image.filter(box_kernel(), size=5)


def test_filter_accepts_size_matching_kernel():
    image = _solid(3, 3, (50, 60, 70, 255))

    assert image.filter(box_kernel((3, 5)), size=(3, 5)) == image
