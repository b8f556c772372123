import numpy as np
import pytest
from PIL import Image

from meat_quality.services.preprocess import IMAGE_SIZE, image_to_tensor, scale_image

EXPECTED_LEN = 3 * 224 * 224


@pytest.mark.parametrize("size", [(1, 1), (224, 224), (640, 480), (1000, 10), (37, 913)])
def test_tensor_length_is_fixed(size):
    x = image_to_tensor(Image.new("RGB", size, (1, 2, 3)))
    assert x.shape == (EXPECTED_LEN,)
    assert x.dtype == np.float32


@pytest.mark.parametrize("mode", ["L", "RGBA", "P"])
def test_non_rgb_modes_are_converted(mode):
    x = image_to_tensor(Image.new(mode, (50, 80)))
    assert x.shape == (EXPECTED_LEN,)


def test_every_channel_value_is_divided_by_255():
    for v in range(256):
        x = image_to_tensor(Image.new("RGB", (8, 8), (v, v, v)))
        np.testing.assert_allclose(x, v / 255.0, rtol=0, atol=1e-7)


def test_channel_order_and_row_major_layout():
    img = Image.new("RGB", (IMAGE_SIZE, IMAGE_SIZE), (0, 0, 0))
    img.putpixel((0, 0), (10, 20, 30))
    img.putpixel((1, 0), (255, 0, 0))
    img.putpixel((0, 1), (0, 0, 255))

    x = image_to_tensor(img)

    np.testing.assert_allclose(x[0:3], np.array([10, 20, 30]) / 255.0, atol=1e-7)
    np.testing.assert_allclose(x[3:6], [1.0, 0.0, 0.0], atol=1e-7)
    row1 = 3 * IMAGE_SIZE
    np.testing.assert_allclose(x[row1:row1 + 3], [0.0, 0.0, 1.0], atol=1e-7)


def test_scaling_is_unfiltered_and_ignores_aspect_ratio():
    img = Image.new("RGB", (2, 1))
    img.putpixel((0, 0), (255, 0, 0))
    img.putpixel((1, 0), (0, 0, 255))

    scaled = scale_image(img)
    assert scaled.size == (IMAGE_SIZE, IMAGE_SIZE)

    colors = {c for _, c in scaled.getcolors(maxcolors=IMAGE_SIZE * IMAGE_SIZE)}
    assert colors == {(255, 0, 0), (0, 0, 255)}
    assert scaled.getpixel((0, IMAGE_SIZE - 1)) == (255, 0, 0)
    assert scaled.getpixel((IMAGE_SIZE - 1, 0)) == (0, 0, 255)
