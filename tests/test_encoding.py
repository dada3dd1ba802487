import pytest

from sigtalk.encoding import BitDecoder, encode_bits


def _decode(bits):
    decoder = BitDecoder()
    out = bytearray()
    for bit in bits:
        byte = decoder.feed(bit)
        if byte is not None:
            out.append(byte)
    return bytes(out)


def test_single_letter_wire_bits():
    assert list(encode_bits("A")) == [0, 1, 0, 0, 0, 0, 0, 1] + [0] * 8


def test_empty_text_is_only_terminator():
    assert list(encode_bits("")) == [0] * 8


@pytest.mark.parametrize("text", ["", "a", "Hello, World!", "caf\u00e9", "line\nbreak"])
def test_round_trip(text):
    decoded = _decode(encode_bits(text))
    assert decoded == text.encode("utf-8") + b"\0"


@pytest.mark.parametrize("text", ["x", "abc", "\u00e9\u00e8"])
def test_bit_count_is_eight_per_byte_plus_terminator(text):
    bits = list(encode_bits(text))
    assert len(bits) == 8 * (len(text.encode("utf-8")) + 1)
    assert set(bits) <= {0, 1}


def test_decoder_returns_byte_only_on_eighth_bit():
    decoder = BitDecoder()
    bits = list(encode_bits("A"))[:8]
    results = [decoder.feed(bit) for bit in bits]
    assert results[:7] == [None] * 7
    assert results[7] == ord("A")


def test_decoder_resets_after_each_byte():
    decoder = BitDecoder()
    for bit in [1] * 8:
        decoder.feed(bit)
    assert decoder.pending == 0
    zero = None
    for _ in range(8):
        zero = decoder.feed(0)
    assert zero == 0


def test_pending_counts_bits():
    decoder = BitDecoder()
    decoder.feed(1)
    decoder.feed(0)
    decoder.feed(1)
    assert decoder.pending == 3


def test_high_bit_byte_decodes_unsigned():
    decoder = BitDecoder()
    result = None
    for bit in [1] * 8:
        result = decoder.feed(bit)
    assert result == 0xFF


@pytest.mark.parametrize("bad", [2, -1, "1"])
def test_invalid_bit_rejected(bad):
    with pytest.raises(ValueError):
        BitDecoder().feed(bad)