import re

from .exceptions import InvalidHexEncodingError, PayloadTooLongError

# Capacity of the parser's byte buffer, length byte included.
MAX_PAYLOAD_BYTES = 32

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


def hi_nibble(value):
    """Upper 4 bits of a byte."""
    return (value >> 4) & 0x0F


def lo_nibble(value):
    """Lower 4 bits of a byte."""
    return value & 0x0F


def bcd_to_dec(value):
    """Decode a binary coded decimal byte, e.g. 0x21 -> 21."""
    return hi_nibble(value) * 10 + lo_nibble(value)


class ProtocolHelpersMixin:
    """Mixin class providing conversion helpers for protocol processing."""

    def hex_to_bin_str(self, hex_string):
        """
        Convert hex string to binary string.

        Every hex digit expands to exactly four bits, leading zeros included,
        so the result is always four times as long as the input.

        Args:
            hex_string: Hexadecimal string (e.g., '1A3F')

        Returns:
            Binary string (e.g., '0001101000111111')

        Raises:
            InvalidHexEncodingError: if the input is missing or contains a
                character that is not a hex digit
        """
        if hex_string is None:
            raise InvalidHexEncodingError("no hex data provided")
        if not _HEX_DIGITS.fullmatch(hex_string):
            raise InvalidHexEncodingError(f"invalid hex data: {hex_string!r}")

        return "".join(format(int(digit, 16), "04b") for digit in hex_string)

    def bin_str_to_hex_str(self, bit_data):
        """
        Convert a bit string whose length is a multiple of 8 into hex bytes.

        Args:
            bit_data: Binary string (e.g., '0001101000111111')

        Returns:
            Uppercase hex string with two digits per byte (e.g., '1A3F')
        """
        return "".join(
            f"{int(bit_data[i:i + 8], 2):02X}" for i in range(0, len(bit_data), 8)
        )

    def hex_to_bytes(self, hex_string, max_len=MAX_PAYLOAD_BYTES):
        """
        Convert a hex string to bytes.

        Args:
            hex_string: Hex string with two digits per byte
            max_len: Maximum number of bytes accepted

        Returns:
            bytes

        Raises:
            InvalidHexEncodingError: on odd length or invalid digits
            PayloadTooLongError: if more than max_len bytes would result
        """
        if hex_string is None:
            raise InvalidHexEncodingError("no hex data provided")
        if len(hex_string) % 2 != 0:
            raise InvalidHexEncodingError(f"odd length hex string: {hex_string!r}")
        if not _HEX_DIGITS.fullmatch(hex_string):
            raise InvalidHexEncodingError(f"invalid hex data: {hex_string!r}")
        if len(hex_string) // 2 > max_len:
            raise PayloadTooLongError(
                f"message has {len(hex_string) // 2} bytes, at most {max_len} allowed"
            )
        return bytes.fromhex(hex_string)
