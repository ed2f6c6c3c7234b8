import pytest
from PIL import Image

from conftest import image_bytes, png_bytes
from icopack import DEFAULT_DECODERS, DecodeError, Decoder
from icopack.decoders import decode, find_decoder


@pytest.mark.parametrize('fmt,name', [
    ('BMP', 'BMP'),
    ('PNG', 'PNG'),
    ('JPEG', 'JPEG'),
    ('GIF', 'GIF'),
])
def test_formats_are_sniffed(noise, fmt, name):
    data = image_bytes(noise(12, 9).convert('RGB'), fmt)
    assert find_decoder(data).name == name
    img = decode(data)
    assert img.size == (12, 9)


def test_unknown_format():
    assert find_decoder(b'\x00\x01\x02\x03') is None
    with pytest.raises(DecodeError) as info:
        decode(b'\x00\x01\x02\x03')
    assert "unknown image format" in str(info.value)
    assert "BMP, PNG, JPEG, GIF" in str(info.value)


def test_broken_data_with_known_signature():
    with pytest.raises(DecodeError) as info:
        decode(b'BM' + b'\xff' * 40)
    assert "BMP" in str(info.value)


def test_empty_decoder_list_knows_nothing(noise):
    data = png_bytes(noise(4, 4))
    with pytest.raises(DecodeError):
        decode(data, decoders=[])


def test_caller_supplied_decoder():
    def decode_fake(data):
        return Image.new('RGBA', (data[4], data[5]), (1, 2, 3, 255))

    decoders = [Decoder('FAKE', (b'FAKE',), decode_fake)] + list(DEFAULT_DECODERS)
    img = decode(b'FAKE\x07\x05', decoders)
    assert img.size == (7, 5)


def test_decoder_errors_are_wrapped():
    def explode(data):
        raise RuntimeError("boom")

    with pytest.raises(DecodeError) as info:
        decode(b'XX', [Decoder('XX', (b'XX',), explode)])
    assert "boom" in str(info.value)
    assert isinstance(info.value.__cause__, RuntimeError)
