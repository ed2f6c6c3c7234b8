"""Build Windows .ico files with PNG-compressed images."""

from .container import IconEntry, build_container
from .decoders import DEFAULT_DECODERS, Decoder
from .encoder import (
    ICON_SIZES,
    IcoEncoder,
    from_bytes,
    from_file,
    from_image,
    from_image_sizes,
)
from .errors import DecodeError, EncodeError, IcoError, SizeRangeError
from .png import encode_with_forced_alpha, is_passthrough_eligible, read_png_size
from .resample import resample

__all__ = [
    "DEFAULT_DECODERS",
    "Decoder",
    "DecodeError",
    "EncodeError",
    "ICON_SIZES",
    "IcoEncoder",
    "IcoError",
    "IconEntry",
    "SizeRangeError",
    "build_container",
    "encode_with_forced_alpha",
    "from_bytes",
    "from_file",
    "from_image",
    "from_image_sizes",
    "is_passthrough_eligible",
    "read_png_size",
    "resample",
]
