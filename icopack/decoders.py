"""
Decoders for the image formats icopack accepts as input.

Each Decoder pairs the magic bytes of a format with a function that turns file
data into a Pillow image. Callers pass a list of them to IcoEncoder; the first
decoder with a matching signature wins.
"""

import io
from typing import Callable, NamedTuple, Optional, Sequence, Tuple

from PIL import Image

from .errors import DecodeError
from .png import PNG_SIGNATURE


class Decoder(NamedTuple):
    name: str
    signatures: Tuple[bytes, ...]
    decode: Callable[[bytes], Image.Image]


def pillow_decoder(fmt: str) -> Callable[[bytes], Image.Image]:
    """Build a decode function that only lets Pillow try the given format."""

    def decode(data: bytes) -> Image.Image:
        img = Image.open(io.BytesIO(data), formats=[fmt])
        img.load()
        return img

    decode.__name__ = f"decode_{fmt.lower()}"
    return decode


# =============================================================================
# Configuration
# =============================================================================
DEFAULT_DECODERS = (
    Decoder('BMP', (b'BM',), pillow_decoder('BMP')),
    Decoder('PNG', (PNG_SIGNATURE,), pillow_decoder('PNG')),
    Decoder('JPEG', (b'\xff\xd8\xff',), pillow_decoder('JPEG')),
    Decoder('GIF', (b'GIF87a', b'GIF89a'), pillow_decoder('GIF')),
)
# =============================================================================


def find_decoder(data: bytes, decoders: Sequence[Decoder] = DEFAULT_DECODERS) -> Optional[Decoder]:
    """Return the first decoder whose signature starts data, or None."""
    for decoder in decoders:
        if data.startswith(decoder.signatures):
            return decoder
    return None


def decode(data: bytes, decoders: Sequence[Decoder] = DEFAULT_DECODERS) -> Image.Image:
    """Decode data with the matching decoder; raise DecodeError otherwise."""
    decoder = find_decoder(data, decoders)
    if decoder is None:
        known = ", ".join(d.name for d in decoders) or "none"
        raise DecodeError(
            "icopack.decode",
            f"unknown image format (supported: {known})",
        )
    try:
        return decoder.decode(data)
    except DecodeError:
        raise
    except Exception as exc:  # decoders may be caller-supplied
        raise DecodeError(
            "icopack.decode", f"failed to decode {decoder.name} image: {exc}"
        ) from exc
