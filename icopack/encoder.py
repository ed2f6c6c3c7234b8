"""
Turn images into .ico files.

  from_image(img)          one entry at the image's own size
  from_image_sizes(img)    one entry per size in ICON_SIZES, resampled
  from_bytes(data)         raw file data; 32-bit PNGs are embedded unchanged
  from_file(path)          same as from_bytes, reading path first
"""

from pathlib import Path
from typing import Iterable, Optional, Sequence

from PIL import Image

from . import decoders as _decoders
from .container import IconEntry, build_container, check_size
from .errors import IcoError
from .png import encode_with_forced_alpha, is_passthrough_eligible, read_png_size
from .resample import resample

# =============================================================================
# Configuration
# =============================================================================
ICON_SIZES = (16, 24, 32, 48, 64, 96, 128, 192, 256)
# =============================================================================


class IcoEncoder:
    """Builds icon files using an explicit list of input decoders."""

    def __init__(self,
                 decoders: Sequence[_decoders.Decoder] = _decoders.DEFAULT_DECODERS,
                 sizes: Iterable[int] = ICON_SIZES):
        self.decoders = tuple(decoders)
        self.sizes = tuple(sizes)

    def from_image(self, image: Image.Image) -> bytes:
        """Encode image at its native size as a single-entry icon."""
        width, height = image.size
        check_size("icopack.from_image", width, height)
        payload = encode_with_forced_alpha(image)
        return build_container([IconEntry(width, height, payload)])

    def from_image_sizes(self, image: Image.Image, sizes: Optional[Iterable[int]] = None) -> bytes:
        """Encode image once per square size, in the given order."""
        sizes = self.sizes if sizes is None else tuple(sizes)
        for size in sizes:
            check_size("icopack.from_image_sizes", size, size)

        entries = []
        for size in sizes:
            # resample() hands back the image itself if it is already this size
            scaled = resample(image, size, size)
            entries.append(IconEntry(size, size, encode_with_forced_alpha(scaled)))
        return build_container(entries)

    def from_bytes(self, data: bytes, multi: bool = False) -> bytes:
        """
        Encode raw image file data (any bytes-like object).

        A PNG with 8-bit RGBA pixels is embedded as is, so an optimized file
        stays optimized. Anything else is decoded and re-encoded. With multi,
        the data is always decoded and every size in the ladder is generated.
        """
        data = bytes(data)
        if not multi and is_passthrough_eligible(data):
            width, height = read_png_size(data)
            check_size("icopack.from_bytes", width, height)
            return build_container([IconEntry(width, height, data)])

        image = _decoders.decode(data, self.decoders)
        if multi:
            return self.from_image_sizes(image)
        return self.from_image(image)

    def from_file(self, path, multi: bool = False) -> bytes:
        """Read path and encode it with from_bytes(); errors name the path."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise IcoError(
                "icopack.from_file", f"failed to read file: {exc.strerror or exc}", path=path
            ) from exc

        try:
            return self.from_bytes(data, multi=multi)
        except IcoError as exc:
            raise exc.with_path("icopack.from_file", path) from exc


_default = IcoEncoder()


def from_image(image: Image.Image) -> bytes:
    return _default.from_image(image)


def from_image_sizes(image: Image.Image, sizes: Optional[Iterable[int]] = None) -> bytes:
    return _default.from_image_sizes(image, sizes)


def from_bytes(data: bytes, multi: bool = False) -> bytes:
    return _default.from_bytes(data, multi=multi)


def from_file(path, multi: bool = False) -> bytes:
    return _default.from_file(path, multi=multi)
