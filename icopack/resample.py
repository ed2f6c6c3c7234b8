"""Resize images to exact icon dimensions."""

from PIL import Image

from .errors import SizeRangeError

# =============================================================================
# Configuration
# =============================================================================
RESAMPLE_FILTER = Image.Resampling.BICUBIC
# =============================================================================


def resample(image: Image.Image, width: int, height: int) -> Image.Image:
    """
    Return image scaled to exactly width x height.

    Returns the same object when it already has that size. Otherwise every band
    (including alpha) is filtered on its own, so colors are not premultiplied
    by alpha the way Image.resize() does for RGBA. Same input, same output.
    """
    if width < 1 or height < 1:
        raise SizeRangeError(
            "icopack.resample",
            f"target size must be at least 1x1, got {width}x{height}",
            width=width,
            height=height,
        )
    if image.size == (width, height):
        return image

    rgba = image.convert('RGBA')
    bands = [band.resize((width, height), RESAMPLE_FILTER) for band in rgba.split()]
    return Image.merge('RGBA', bands)
