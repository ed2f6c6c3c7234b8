"""
Assemble Windows .ico files from PNG payloads.

Layout (all integers little-endian):

  ICONDIR       reserved=0 (2), type=1 (2), count (2)
  ICONDIRENTRY  width (1), height (1), colors=0 (1), reserved=0 (1),
                planes=1 (2), bpp=32 (2), size (4), offset (4)   x count
  payloads      concatenated in directory order, no padding
"""

import struct
from typing import NamedTuple, Sequence

from .errors import SizeRangeError

# =============================================================================
# Configuration
# =============================================================================
HEADER_SIZE = 6            # ICONDIR
DIRECTORY_ENTRY_SIZE = 16  # ICONDIRENTRY
MAX_DIMENSION = 256        # stored as 0 in the directory
MAX_IMAGES = 0xFFFF        # count is a 16-bit field
ICON_TYPE = 1              # 1 for .ico, 2 for .cur
BITS_PER_PIXEL = 32
# =============================================================================

_HEADER = struct.Struct('<HHH')
_ENTRY = struct.Struct('<BBBBHHII')


class IconEntry(NamedTuple):
    """One image to embed: its pixel size and its PNG bytes."""
    width: int
    height: int
    payload: bytes


def check_size(operation: str, width: int, height: int):
    """Raise SizeRangeError unless both dimensions are in [1..256]."""
    if not (1 <= width <= MAX_DIMENSION and 1 <= height <= MAX_DIMENSION):
        raise SizeRangeError(
            operation,
            f"illegal image size, width and height must be in range "
            f"[1..{MAX_DIMENSION}] but the given image has size {width}x{height}",
            width=width,
            height=height,
        )


def build_container(entries: Sequence[IconEntry]) -> bytes:
    """Build a complete ICO file with one directory entry per image."""
    count = len(entries)
    if not 1 <= count <= MAX_IMAGES:
        raise SizeRangeError(
            "icopack.build_container",
            f"an icon must hold between 1 and {MAX_IMAGES} images, got {count}",
        )
    for entry in entries:
        check_size("icopack.build_container", entry.width, entry.height)

    header = _HEADER.pack(0, ICON_TYPE, count)

    # First payload starts right after the full directory
    data_offset = HEADER_SIZE + DIRECTORY_ENTRY_SIZE * count

    directory = []
    for entry in entries:
        directory.append(_ENTRY.pack(
            entry.width % MAX_DIMENSION,   # 0 means 256
            entry.height % MAX_DIMENSION,  # 0 means 256
            0,                             # no color palette
            0,                             # reserved
            1,                             # color planes
            BITS_PER_PIXEL,
            len(entry.payload),
            data_offset,
        ))
        data_offset += len(entry.payload)

    return header + b''.join(directory) + b''.join(bytes(e.payload) for e in entries)
