"""
Tests for the Oregon V2/V3 bit stream decoders and the CUL preprocessor.
"""

import pytest

from oregon_protocols.exceptions import (
    EmptyDecodeError,
    InvalidFramingError,
    InvalidHexEncodingError,
    PayloadTooLongError,
    UnrecognizedProtocolError,
)


class TestDecodeOregonV2:

    def test_decode_v2_single_chunk(self, proto):
        # odd positions 1..15 of 1001100111110101, read back to front
        assert proto.decode_oregon_v2("1001100111110101") == "08FA"

    def test_decode_v2_discards_incomplete_chunk(self, proto):
        assert proto.decode_oregon_v2("1001100111110101" + "101010") == "08FA"

    def test_decode_v2_starts_at_preamble(self, proto):
        assert proto.decode_oregon_v2("0000" + "1001100111110101") == "08FA"

    def test_decode_v2_no_preamble(self, proto):
        with pytest.raises(UnrecognizedProtocolError):
            proto.decode_oregon_v2("1111010100001111")

    def test_decode_v2_empty(self, proto):
        with pytest.raises(EmptyDecodeError):
            proto.decode_oregon_v2("10011001")

    def test_decode_v2_too_long_for_length_byte(self, proto):
        # 32 decoded bytes would need a bit count of 256
        with pytest.raises(PayloadTooLongError):
            proto.decode_oregon_v2("1001100110101010" + "1010101010101010" * 31)


class TestDecodeOregonV3:

    def test_decode_v3(self, proto):
        # data starts at the first 0101, 01010000 reversed is 0x0A
        assert proto.decode_oregon_v3("1111010100001111") == "080A"

    def test_decode_v3_multiple_bytes(self, proto):
        assert proto.decode_oregon_v3("11110101" + "10000000" + "00000001") == "101A00"

    def test_decode_v3_no_preamble(self, proto):
        with pytest.raises(UnrecognizedProtocolError):
            proto.decode_oregon_v3("1001100111110000")

    def test_decode_v3_empty(self, proto):
        with pytest.raises(EmptyDecodeError):
            proto.decode_oregon_v3("11110101")


class TestPreprocessCulMessage:

    def test_preprocess_v2_message(self, proto, thgr228n_message, thgr228n_payload):
        assert proto.preprocess_cul_message(thgr228n_message) == thgr228n_payload

    def test_preprocess_truncated_sample(self, proto):
        # The last byte of this capture is cut off, 9 bytes are decoded
        assert (
            proto.preprocess_cul_message("omAAAAAAAB32D4CB3554D54CAB5554B53554B54D4D555414")
            == "481A2D10F40023304400"
        )

    def test_preprocess_v3_message(self, proto):
        assert proto.preprocess_cul_message("omF50F") == "080A"

    def test_preprocess_prefers_v2(self, proto):
        # Both preambles are present; V3 alone would yield 085A
        assert proto.decode_oregon_v3(proto.hex_to_bin_str("99F5A0")) == "085A"
        assert proto.preprocess_cul_message("om99F5A0") == "08FA"

    @pytest.mark.parametrize("message", [
        "AAAAAAAB32D4CB3554D54CAB5554B53554B54D4D4CB55554",
        "OMAAAA",
        "om",
        "omA",
        "",
        None,
    ])
    def test_preprocess_invalid_framing(self, proto, message):
        with pytest.raises(InvalidFramingError):
            proto.preprocess_cul_message(message)

    def test_preprocess_invalid_hex(self, proto):
        with pytest.raises(InvalidHexEncodingError):
            proto.preprocess_cul_message("omZZ12")

    def test_preprocess_too_long(self, proto):
        with pytest.raises(PayloadTooLongError):
            proto.preprocess_cul_message("om" + "A" * 255)

    def test_preprocess_unrecognized(self, proto):
        with pytest.raises(UnrecognizedProtocolError):
            proto.preprocess_cul_message("om0000")

    @pytest.mark.parametrize("message", ["om99", "omF5"])
    def test_preprocess_empty_decode(self, proto, message):
        with pytest.raises(EmptyDecodeError):
            proto.preprocess_cul_message(message)

    def test_preprocess_logging(self, proto):
        events = []
        proto.register_log_callback(lambda message, level: events.append((level, message)))

        proto.preprocess_cul_message("omF50F", name="test")

        assert any("decode_oregon_v2 failed" in message for _, message in events)
        assert any("OSV3 converted to hex: 0A" in message for _, message in events)
