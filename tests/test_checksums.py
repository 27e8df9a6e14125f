"""Tests for the nibble-sum checksum validators."""

import pytest

from oregon_protocols.checksums import nibble_sum
from oregon_protocols.exceptions import TruncatedMessageError


class TestNibbleSum:

    def test_nibble_sum_whole_bytes(self):
        assert nibble_sum(bytes([0x12, 0x34]), 2) == 10

    def test_nibble_sum_fractional(self):
        # only the high nibble of the third byte counts
        assert nibble_sum(bytes([0x12, 0x34, 0x5F]), 2.5) == 15

    def test_nibble_sum_ignores_trailing_bytes(self):
        assert nibble_sum(bytes([0xFF, 0xFF, 0xFF]), 1) == 30

    def test_nibble_sum_too_short(self):
        with pytest.raises(TruncatedMessageError):
            nibble_sum(bytes([0x12, 0x34]), 2.5)


class TestChecksumValidators:

    def test_checksum1(self, proto):
        # checksum 0x43 split into the high nibble of byte 6 and low nibble of byte 7
        assert proto.checksum1(bytes.fromhex("EA4C10F4002C3044"))
        assert not proto.checksum1(bytes.fromhex("EA4C10F4002C3045"))

    def test_checksum2(self, proto):
        assert proto.checksum2(bytes.fromhex("1A2D10F4002330443400"))
        assert not proto.checksum2(bytes.fromhex("1A2D10F4002330443500"))

    def test_checksum2_wraps_below_zero(self, proto):
        assert proto.checksum2(bytes(8) + bytes([0xF6]))

    def test_checksum4(self, proto):
        assert proto.checksum4(bytes.fromhex("1A9910F4002330440037"))
        assert not proto.checksum4(bytes.fromhex("1A9910F4002330440036"))

    def test_checksum5(self, proto):
        assert proto.checksum5(bytes.fromhex("5A6D10F4002330449BC05C"))
        assert not proto.checksum5(bytes.fromhex("5A6D10F4002330449BC15C"))

    @pytest.mark.parametrize("method, length", [
        ("checksum1", 7),
        ("checksum2", 8),
        ("checksum4", 9),
        ("checksum5", 10),
    ])
    def test_checksum_truncated_payload(self, proto, method, length):
        with pytest.raises(TruncatedMessageError):
            getattr(proto, method)(bytes(length))

    def test_checksum_is_deterministic(self, proto):
        payload = bytes.fromhex("1A2D10F4002330443400")
        assert [proto.checksum2(payload) for _ in range(3)] == [True, True, True]

    def test_bit_flip_in_summed_range(self, proto):
        payload = bytes.fromhex("1A2D10F4002330443400")
        reference = nibble_sum(payload, 8)

        for index in range(8):
            for bit in range(8):
                flipped = bytearray(payload)
                flipped[index] ^= 1 << bit
                assert nibble_sum(flipped, 8) != reference
                assert not proto.checksum2(bytes(flipped))

    def test_checksum_logging(self, proto):
        events = []
        proto.register_log_callback(lambda message, level: events.append((level, message)))

        proto.checksum2(bytes.fromhex("1A2D10F4002330443400"))

        assert events == [(5, "checksum2: computed 0x34, expected 0x34")]
