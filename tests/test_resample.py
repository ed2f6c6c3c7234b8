import numpy as np
import pytest
from PIL import Image

from icopack import SizeRangeError, resample


def test_same_size_is_identity(noise):
    img = noise(32, 32)
    assert resample(img, 32, 32) is img


@pytest.mark.parametrize('width,height', [(16, 16), (64, 48), (1, 1), (256, 256)])
def test_exact_target_size(noise, width, height):
    out = resample(noise(100, 80), width, height)
    assert out.size == (width, height)
    assert out.mode == 'RGBA'


def test_deterministic(noise):
    img = noise(200, 200, opaque=False)
    assert resample(img, 24, 24).tobytes() == resample(img, 24, 24).tobytes()


def test_alpha_is_resampled_on_its_own():
    # Fully transparent pixels keep their color, nothing is premultiplied
    img = Image.new('RGBA', (64, 64), (200, 100, 50, 0))
    out = np.asarray(resample(img, 16, 16))
    assert (out[:, :, 0] == 200).all()
    assert (out[:, :, 1] == 100).all()
    assert (out[:, :, 2] == 50).all()
    assert (out[:, :, 3] == 0).all()


def test_input_is_not_modified(noise):
    img = noise(50, 50)
    before = img.tobytes()
    resample(img, 16, 16)
    assert img.tobytes() == before


@pytest.mark.parametrize('width,height', [(0, 16), (16, 0), (-5, 10)])
def test_bad_target_size(noise, width, height):
    with pytest.raises(SizeRangeError):
        resample(noise(8, 8), width, height)
