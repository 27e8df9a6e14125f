"""
Nibble-sum checksums used by Oregon Scientific V2/V3 sensors.

Every variant sums the nibbles of the leading payload bytes, subtracts 0xA
and compares the low byte with a checksum stored further down the payload.
The variants differ only in how many bytes are summed and where the
checksum lives.
"""

import math

from .exceptions import TruncatedMessageError
from .helpers import hi_nibble, lo_nibble

CHECKSUM_OFFSET = 0xA


def nibble_sum(data, count):
    """
    Sum the high and low nibbles of the first ``count`` bytes.

    A fractional count (e.g. 6.5) adds only the high nibble of the byte
    following the whole ones.

    >>> nibble_sum(bytes([0x12, 0x34]), 2)
    10
    >>> nibble_sum(bytes([0x12, 0x34]), 1.5)
    6
    """
    whole = int(count)
    if len(data) < math.ceil(count):
        raise TruncatedMessageError(
            f"need {math.ceil(count)} bytes for nibble sum, got {len(data)}"
        )

    total = sum(hi_nibble(b) + lo_nibble(b) for b in data[:whole])
    if count > whole:
        total += hi_nibble(data[whole])
    return total


def _require(payload, index):
    if len(payload) <= index:
        raise TruncatedMessageError(
            f"checksum byte {index} missing, payload has {len(payload)} bytes"
        )


class ChecksumMixin:
    """Mixin providing the checksum validators referenced by the sensor table."""

    def _compare_checksum(self, name, computed, expected):
        self._logging(f"{name}: computed 0x{computed:02x}, expected 0x{expected:02x}", 5)
        return computed == expected

    def checksum1(self, payload):
        """6.5 bytes; checksum split over the high nibble of 6 and low nibble of 7."""
        _require(payload, 7)
        expected = hi_nibble(payload[6]) + (lo_nibble(payload[7]) << 4)
        computed = (nibble_sum(payload, 6.5) - CHECKSUM_OFFSET) & 0xFF
        return self._compare_checksum("checksum1", computed, expected)

    def checksum2(self, payload):
        _require(payload, 8)
        computed = (nibble_sum(payload, 8) - CHECKSUM_OFFSET) & 0xFF
        return self._compare_checksum("checksum2", computed, payload[8])

    def checksum4(self, payload):
        _require(payload, 9)
        computed = (nibble_sum(payload, 9) - CHECKSUM_OFFSET) & 0xFF
        return self._compare_checksum("checksum4", computed, payload[9])

    def checksum5(self, payload):
        _require(payload, 10)
        computed = (nibble_sum(payload, 10) - CHECKSUM_OFFSET) & 0xFF
        return self._compare_checksum("checksum5", computed, payload[10])
