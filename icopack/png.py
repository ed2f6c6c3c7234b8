"""
PNG payloads for icon entries.

Two paths lead to a payload:
  - encode_with_forced_alpha() re-encodes a decoded image as 32-bit RGBA PNG
  - is_passthrough_eligible() spots PNG files that can be embedded unchanged,
    which keeps whatever optimization (e.g. ZopfliPNG) was applied to them
"""

import io
import struct
import zlib

import numpy as np
from PIL import Image

from .errors import DecodeError, EncodeError

# =============================================================================
# Configuration
# =============================================================================
PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'
IHDR_LENGTH = 13
TRUECOLOR_WITH_ALPHA = 6   # PNG color type 6: R, G, B, A
BIT_DEPTH = 8
FORCED_ALPHA = 254         # alpha given to one pixel of a fully opaque image
# =============================================================================

# Signature, IHDR length + tag, then width, height, bit depth, color type
_IHDR_PREFIX = struct.Struct('>8sI4sIIBB')

# What Pillow raises for data it cannot read as PNG
_PNG_READ_ERRORS = (
    OSError,
    SyntaxError,
    ValueError,
    EOFError,
    struct.error,
    zlib.error,
    Image.DecompressionBombError,
)


def _read_ihdr(data: bytes):
    """Return (width, height, bit_depth, color_type), or None if there is no IHDR."""
    if len(data) < _IHDR_PREFIX.size:
        return None
    signature, length, tag, width, height, bit_depth, color_type = \
        _IHDR_PREFIX.unpack_from(data)
    if signature != PNG_SIGNATURE or length != IHDR_LENGTH or tag != b'IHDR':
        return None
    return width, height, bit_depth, color_type


def is_passthrough_eligible(data: bytes) -> bool:
    """True if data is a valid PNG with 8 bits per channel, truecolor with alpha."""
    ihdr = _read_ihdr(data)
    if ihdr is None:
        return False
    _, _, bit_depth, color_type = ihdr
    if bit_depth != BIT_DEPTH or color_type != TRUECOLOR_WITH_ALPHA:
        return False

    # Header looks right, make sure the rest of the file is intact too.
    # verify() checks every chunk CRC and requires IEND but leaves the image
    # unusable, so the pixels are decoded from a second open.
    try:
        with Image.open(io.BytesIO(data), formats=['PNG']) as img:
            img.verify()
        with Image.open(io.BytesIO(data), formats=['PNG']) as img:
            img.load()
    except _PNG_READ_ERRORS:
        return False
    return True


def read_png_size(data: bytes):
    """Read (width, height) from a PNG header without decoding the pixels."""
    try:
        with Image.open(io.BytesIO(data), formats=['PNG']) as img:
            return img.size
    except _PNG_READ_ERRORS as exc:
        raise DecodeError(
            "icopack.read_png_size", f"failed to decode PNG header: {exc}"
        ) from exc


def encode_with_forced_alpha(image: Image.Image) -> bytes:
    """
    Encode image as PNG with color type RGBA.

    Icon consumers do not render PNG entries without an alpha plane properly,
    and encoders are free to drop the alpha channel of a fully opaque image.
    If no pixel is transparent, the bottom-right pixel of a private copy gets
    alpha 254, which is invisible but keeps the RGBA color type. The caller's
    image is never modified.
    """
    width, height = image.size
    if width < 1 or height < 1:
        raise EncodeError(
            "icopack.encode_with_forced_alpha",
            f"cannot encode an empty image of size {width}x{height}",
        )

    # convert() always returns a new image, also for RGBA input
    rgba = image.convert('RGBA')

    alpha = np.asarray(rgba.getchannel('A'))
    if alpha.min() == 255:
        r, g, b, _ = rgba.getpixel((width - 1, height - 1))
        rgba.putpixel((width - 1, height - 1), (r, g, b, FORCED_ALPHA))

    buf = io.BytesIO()
    try:
        rgba.save(buf, format='PNG')
    except (OSError, ValueError) as exc:
        raise EncodeError(
            "icopack.encode_with_forced_alpha", f"PNG encoding failed: {exc}"
        ) from exc
    return buf.getvalue()
