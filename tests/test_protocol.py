import pytest

from sigtalk.protocol import Decoder, encode_char, encode_message


def _decode(bits):
    decoder = Decoder()
    out = bytearray()
    for bit in bits:
        byte = decoder.feed(bit)
        if byte is not None:
            out.append(byte)
    return bytes(out)


def test_encode_char_sends_lsb_first_with_trailing_zero():
    assert encode_char("A") == [1, 0, 0, 0, 0, 0, 1, 0, 0]


def test_encode_char_length_is_nine():
    assert all(len(encode_char(code)) == 9 for code in range(256))


def test_str_and_int_agree():
    assert encode_char("z") == encode_char(ord("z"))


def test_ascii_round_trip():
    text = "Hello, world! 0123456789 ~"
    assert _decode(encode_message(text)) == text.encode()


@pytest.mark.parametrize("code", range(0, 128))
def test_every_ascii_byte_round_trips(code):
    assert _decode(encode_char(code)) == bytes([code])


def test_byte_128_survives_signed_char():
    assert _decode(encode_char(0x80)) == b"\x80"


def test_high_byte_loses_sign():
    assert encode_char(0xFF) == [1, 0, 0, 0, 0, 0, 0, 0, 0]


def test_message_stops_at_nul():
    assert _decode(encode_message(b"ab\0cd")) == b"ab"


def test_empty_message_has_no_bits():
    assert list(encode_message("")) == []


def test_decoder_emits_only_on_ninth_bit():
    decoder = Decoder()
    results = [decoder.feed(bit) for bit in encode_char("B")]
    assert results[:8] == [None] * 8
    assert results[8] == ord("B")


def test_ninth_bit_value_is_ignored():
    bits = encode_char("C")
    bits[8] = 1
    assert _decode(bits) == b"C"


def test_decoder_resets_between_bytes():
    bits = list(encode_char(0x7F)) + list(encode_char(0))
    assert _decode(bits) == b"\x7f\x00"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        encode_char("ab")


def test_wide_character_rejected():
    with pytest.raises(ValueError):
        encode_char("\u20ac")


def test_out_of_range_int_rejected():
    with pytest.raises(ValueError):
        encode_char(256)


def test_non_char_type_rejected():
    with pytest.raises(TypeError):
        encode_char(1.5)