import pytest

from hyperdbg_client.hexjson import (
    decode_hex_bytes,
    decode_hex_int,
    decode_hex_string,
    decode_hex_uint64,
    encode_hex_uint64,
)

UINT64_MAX = (1 << 64) - 1


def test_encode_uses_lowercase_prefixed_quoted_hex():
    assert encode_hex_uint64(255) == '"0xff"'


@pytest.mark.parametrize("value", [0, 1, 0x401000, 0xDEADBEEF, UINT64_MAX])
def test_uint64_round_trip(value):
    assert decode_hex_uint64(encode_hex_uint64(value)) == value


def test_decode_uint64_accepts_bytes_and_bare_digits():
    assert decode_hex_uint64(b'"0x1f"') == decode_hex_uint64("1f")
    assert decode_hex_uint64("0x1f") == 31


@pytest.mark.parametrize("bad", ['""', '"0x"', '"0xzz"', '"0x1_0"', '" 10"'])
def test_decode_uint64_rejects_invalid(bad):
    with pytest.raises(ValueError):
        decode_hex_uint64(bad)


def test_decode_uint64_rejects_overflow():
    with pytest.raises(ValueError):
        decode_hex_uint64('"0x10000000000000000"')


@pytest.mark.parametrize("value", [-1, UINT64_MAX + 1])
def test_encode_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        encode_hex_uint64(value)


def test_encode_rejects_non_integer():
    with pytest.raises(TypeError):
        encode_hex_uint64("12")


def test_decode_int_matches_uint_for_positive_values():
    for text in ('"0x0"', '"0x7f"', '"0x401000"'):
        assert decode_hex_int(text) == decode_hex_uint64(text)


def test_decode_int_wraps_negative_values():
    assert decode_hex_int('"-1"') == UINT64_MAX
    assert decode_hex_int('"-1"') + 1 == 1 << 64


def test_decode_int_rejects_out_of_int64_range():
    with pytest.raises(ValueError):
        decode_hex_int('"0x8000000000000000"')


@pytest.mark.parametrize("bad", ['"-"', '"+"', '"0xg1"', '""'])
def test_decode_int_rejects_invalid(bad):
    with pytest.raises(ValueError):
        decode_hex_int(bad)


@pytest.mark.parametrize("raw", [b"", b"\x00", b"\xde\xad\xbe\xef", bytes(range(256))])
def test_bytes_round_trip(raw):
    assert decode_hex_bytes('"0x' + raw.hex() + '"') == raw
    assert decode_hex_bytes(raw.hex()) == raw


def test_decode_bytes_rejects_odd_length():
    with pytest.raises(ValueError):
        decode_hex_bytes('"0xabc"')


def test_decode_bytes_rejects_invalid_characters():
    with pytest.raises(ValueError):
        decode_hex_bytes('"0xab cd"')


def test_decode_string_from_hex():
    assert decode_hex_string('"0x68656c6c6f"') == "hello"


def test_decode_string_keeps_undecodable_bytes():
    text = decode_hex_string('"ff00"')
    assert text.encode("utf-8", "surrogateescape") == b"\xff\x00"