import struct

import pytest

from errors import UnsupportedUnit
from units import CODECS, CharCodec, IntCodec, get_codec, group_text


def test_get_codec_by_name_and_instance():
    assert get_codec("byte").size == 1
    c = CharCodec(2)
    assert get_codec(c) is c


def test_unknown_codec():
    with pytest.raises(UnsupportedUnit):
        get_codec("float64")


@pytest.mark.parametrize("name,unit", [
    ("byte", 0), ("byte", 255), ("u16", 65535), ("i16", -32768),
    ("u32", 2 ** 32 - 1), ("i32", -1), ("char", "é"), ("char", "\U0001F600"), ("char2", "ab"),
])
def test_pack_unpack(name, unit):
    codec = CODECS[name]
    data = codec.pack(unit)
    assert len(data) == codec.size
    assert codec.unpack(b"xx" + data, 2) == unit


@pytest.mark.parametrize("name,unit", [
    ("byte", 256), ("byte", -1), ("byte", "a"), ("byte", True), ("i16", 40000),
    ("u16", 1.5), ("char", "ab"), ("char", "\ud800"), ("char2", "a\udfff"), ("char", ""), ("char", 97), ("char2", "a"),
])
def test_unsupported(name, unit):
    with pytest.raises(UnsupportedUnit):
        CODECS[name].pack(unit)


def test_invalid_code_point():
    with pytest.raises(UnsupportedUnit):
        CODECS["char"].unpack(struct.pack("<I", 0x110000))


def test_char_size():
    assert CharCodec(1).size == 4
    assert CharCodec(3).size == 12
    assert IntCodec("x", "<q", -2 ** 63, 2 ** 63 - 1).size == 8


def test_group_text():
    assert group_text("abcde", 2) == ["ab", "cd", "e\n"]
    assert group_text("abcd", 2, fill=" ") == ["ab", "cd"]
    assert group_text("", 3) == []
    with pytest.raises(ValueError):
        group_text("abc", 0)


@pytest.mark.parametrize("point", [0xD800, 0xDBFF, 0xDC00, 0xDFFF])
def test_surrogate_code_point(point):
    with pytest.raises(UnsupportedUnit):
        CODECS["char"].unpack(struct.pack("<I", point))


def test_code_points_around_surrogates():
    assert CODECS["char"].unpack(struct.pack("<I", 0xD7FF)) == chr(0xD7FF)
    assert CODECS["char"].unpack(struct.pack("<I", 0xE000)) == chr(0xE000)
