"""
Oregon Scientific V2/V3 bit stream decoders.

This module contains a mixin class that turns the demodulated bit string
received from a CUL dongle into the canonical Oregon hex string: one byte
holding the decoded bit count, followed by the decoded payload bytes.

Oregon V2 transmits every data bit as a Manchester pair, least significant
bit first. Oregon V3 drops the Manchester doubling but keeps the reversed
bit order inside each byte.
"""

from __future__ import annotations

from .exceptions import EmptyDecodeError, PayloadTooLongError, UnrecognizedProtocolError

OSV2_PREAMBLE = "10011001"
OSV3_PREAMBLE = "11110101"
OSV3_DATA_MARKER = "0101"

# The bit count is announced in a single byte.
MAX_BIT_LENGTH = 0xFF


class ManchesterMixin:
    """Mixin providing the Oregon V2 and V3 bit stream decoders.

    Both decoders return the canonical hex string on success and raise an
    OregonError subclass otherwise, so the caller can decide whether to try
    the next decoder.
    """

    def _prepend_bit_length(self, name: str, hex_msg: str) -> str:
        """Prefix the payload with its bit count as two hex digits."""
        if not hex_msg:
            raise EmptyDecodeError("no complete byte after preamble")

        total_bits = len(hex_msg) * 4
        if total_bits > MAX_BIT_LENGTH:
            raise PayloadTooLongError(
                f"{total_bits} decoded bits do not fit into the length byte"
            )

        self._logging(f"{name}: {total_bits} bits decoded", 5)
        return f"{total_bits:02X}{hex_msg}"

    def decode_oregon_v2(self, bit_data: str, name: str = "anonymous") -> str:
        """Decode an Oregon Scientific V2 Manchester-encoded bit stream.

        Starting at the preamble, every 16 bit chunk holds one byte as eight
        Manchester pairs. The second bit of each pair carries the data bit
        and the bits arrive LSB first, so reading positions 15, 13, ..., 1
        selects the symbols and restores the bit order in one pass.

        Args:
            bit_data: Demodulated bit string
            name: Device/message name for logging

        Returns:
            Canonical hex string (bit count byte + payload)

        Raises:
            UnrecognizedProtocolError: if the V2 preamble is missing
            EmptyDecodeError: if less than one full chunk follows the preamble
        """
        start = bit_data.find(OSV2_PREAMBLE)
        if start < 0:
            raise UnrecognizedProtocolError("Oregon V2 preamble not found")

        self._logging(f"{name}: lib/decode_oregon_v2, preamble at bit {start}", 5)

        # trailing chunks shorter than 16 bits are dropped
        decoded_bits = "".join(
            bit_data[pos:pos + 16][15:0:-2]
            for pos in range(start, len(bit_data) - 15, 16)
        )
        hex_msg = self.bin_str_to_hex_str(decoded_bits)

        self._logging(f"{name}: OSV2 converted to hex: {hex_msg}", 5)
        return self._prepend_bit_length(name, hex_msg)

    def decode_oregon_v3(self, bit_data: str, name: str = "anonymous") -> str:
        """Decode an Oregon Scientific V3 bit stream.

        The preamble only has to be present; decoding starts at the first
        data marker and reverses every 8 bit group.

        Args:
            bit_data: Demodulated bit string
            name: Device/message name for logging

        Returns:
            Canonical hex string (bit count byte + payload)

        Raises:
            UnrecognizedProtocolError: if the V3 preamble is missing
            EmptyDecodeError: if less than one full byte follows the marker
        """
        if OSV3_PREAMBLE not in bit_data:
            raise UnrecognizedProtocolError("Oregon V3 preamble not found")

        start = bit_data.find(OSV3_DATA_MARKER)
        self._logging(f"{name}: lib/decode_oregon_v3, data starts at bit {start}", 5)

        decoded_bits = "".join(
            bit_data[pos:pos + 8][::-1]
            for pos in range(start, len(bit_data) - 7, 8)
        )
        hex_msg = self.bin_str_to_hex_str(decoded_bits)

        self._logging(f"{name}: OSV3 converted to hex: {hex_msg}", 5)
        return self._prepend_bit_length(name, hex_msg)
