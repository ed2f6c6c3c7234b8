import io
import struct

import numpy as np
import pytest
from PIL import Image


def read_icon(data):
    """Split icon bytes into (reserved, type, count) and a list of entries."""
    header = struct.unpack_from('<HHH', data, 0)
    entries = []
    for i in range(header[2]):
        w, h, colors, reserved, planes, bpp, size, offset = \
            struct.unpack_from('<BBBBHHII', data, 6 + 16 * i)
        entries.append({
            'width': w or 256,
            'height': h or 256,
            'raw_width': w,
            'raw_height': h,
            'colors': colors,
            'reserved': reserved,
            'planes': planes,
            'bpp': bpp,
            'size': size,
            'offset': offset,
            'payload': data[offset:offset + size],
        })
    return header, entries


def png_bytes(img, **params):
    buf = io.BytesIO()
    img.save(buf, format='PNG', **params)
    return buf.getvalue()


def image_bytes(img, fmt):
    buf = io.BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def ico():
    return read_icon


@pytest.fixture
def noise():
    """Factory for deterministic random RGBA images."""
    def make(width, height, opaque=True, seed=0):
        rng = np.random.default_rng(seed)
        arr = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
        if opaque:
            arr[:, :, 3] = 255
        return Image.fromarray(arr)
    return make


@pytest.fixture
def red_pixel():
    return Image.new('RGBA', (1, 1), (255, 0, 0, 255))


@pytest.fixture
def rgba_png(noise):
    """An 8-bit RGBA PNG file with some transparency."""
    img = noise(40, 30, opaque=False, seed=7)
    return png_bytes(img)
