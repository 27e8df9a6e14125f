from __future__ import annotations

from typing import Mapping

from .checksums import ChecksumMixin
from .exceptions import (
    ChecksumMismatchError,
    EmptyDecodeError,
    InvalidFramingError,
    PayloadTooLongError,
    TruncatedMessageError,
    UnknownSensorError,
    UnrecognizedProtocolError,
)
from .helpers import ProtocolHelpersMixin
from .loader import resolve_method
from .manchester import ManchesterMixin
from .readings import OregonParseResult
from .sensor_types import SENSOR_TYPES, SensorType, sensor_key

CUL_OREGON_PREFIX = "om"
MIN_MESSAGE_LENGTH = 4
MAX_MESSAGE_LENGTH = 256

# Number of bit-length candidates tried below the announced length
BIT_LENGTH_STEP = 4
BIT_LENGTH_WINDOW = 8


class OregonProtocols(ProtocolHelpersMixin, ManchesterMixin, ChecksumMixin):
    """Decoding pipeline for Oregon Scientific messages received by a CUL.

    Inherits from:
    - ProtocolHelpersMixin: hex/bit/byte conversion
    - ManchesterMixin: Oregon V2 and V3 bit stream decoders
    - ChecksumMixin: nibble-sum checksum validators

    The instance holds no per-message state; the same object can decode
    any number of messages.
    """

    def __init__(self, sensor_types: Mapping[int, SensorType] | None = None):
        self._sensor_types = sensor_types if sensor_types is not None else SENSOR_TYPES
        self._log_callback = None

    def preprocess_cul_message(self, cul_msg: str, name: str = "anonymous") -> str:
        """Turn a raw CUL 'om' message into the canonical Oregon hex string.

        Oregon V2 is tried first and wins whenever its preamble is present;
        V3 is only attempted when V2 fails.

        Raises:
            InvalidFramingError: missing 'om' marker or message too short
            PayloadTooLongError: message longer than MAX_MESSAGE_LENGTH
            InvalidHexEncodingError: non-hex character after the marker
            EmptyDecodeError: a preamble matched but nothing was decoded
            UnrecognizedProtocolError: neither V2 nor V3
        """
        if (
            not cul_msg
            or not cul_msg.startswith(CUL_OREGON_PREFIX)
            or len(cul_msg) < MIN_MESSAGE_LENGTH
        ):
            raise InvalidFramingError(
                f"invalid CUL message format, must start with '{CUL_OREGON_PREFIX}': {cul_msg!r}"
            )
        if len(cul_msg) > MAX_MESSAGE_LENGTH:
            raise PayloadTooLongError(
                f"CUL message has {len(cul_msg)} characters, at most {MAX_MESSAGE_LENGTH} allowed"
            )

        bit_data = self.hex_to_bin_str(cul_msg[len(CUL_OREGON_PREFIX):])
        self._logging(f"{name}: extracted data {bit_data} (bin)", 5)

        failures = []
        for decoder in (self.decode_oregon_v2, self.decode_oregon_v3):
            try:
                return decoder(bit_data, name=name)
            except (UnrecognizedProtocolError, EmptyDecodeError) as e:
                self._logging(f"{name}: {decoder.__name__} failed: {e}", 5)
                failures.append(e)

        empty = [e for e in failures if isinstance(e, EmptyDecodeError)]
        if empty:
            raise EmptyDecodeError(str(empty[0])) from empty[0]
        raise UnrecognizedProtocolError("not a recognized Oregon V2 or V3 message")

    def find_sensor_type(self, type_id: int, bit_length: int) -> SensorType:
        """Search the sensor table for type_id, trying bit lengths L, L-4 and L-8.

        The first candidate found in this descending order wins.

        Raises:
            UnknownSensorError: if no candidate matches
        """
        lowest = bit_length - BIT_LENGTH_WINDOW
        for bits in range(bit_length, lowest - 1, -BIT_LENGTH_STEP):
            if bits <= 0:
                break
            sensor = self._sensor_types.get(sensor_key(type_id, bits))
            if sensor is not None:
                return sensor

        raise UnknownSensorError(
            f"unknown sensor type 0x{type_id:04x} for bit lengths {lowest}..{bit_length}"
        )

    def parse_oregon_message(self, hex_msg: str, name: str = "anonymous") -> OregonParseResult:
        """Parse a canonical Oregon hex string into readings.

        Raises:
            InvalidHexEncodingError, PayloadTooLongError: malformed hex input
            TruncatedMessageError: fewer than 3 bytes, or a payload too short
                for the checksum or decode method of the matched sensor
            UnknownSensorError: no sensor type matched
            ChecksumMismatchError: the sensor's checksum failed
        """
        msg_bytes = self.hex_to_bytes(hex_msg)
        if len(msg_bytes) < 3:
            raise TruncatedMessageError(f"message too short: {hex_msg!r}")

        bit_length = msg_bytes[0]
        payload = msg_bytes[1:]
        type_id = (payload[0] << 8) | payload[1]

        self._logging(f"{name}: bits {bit_length}, sensor type id 0x{type_id:04x}", 4)

        sensor = self.find_sensor_type(type_id, bit_length)
        self._logging(f"{name}: found sensor definition {sensor.part}", 4)

        result = OregonParseResult(part_name=sensor.part, type_id=type_id, bit_length=bit_length)

        if sensor.checksum:
            checksum = getattr(self, sensor.checksum)
            if not checksum(payload):
                raise ChecksumMismatchError(
                    f"{sensor.part}: {sensor.checksum} validation failed for {hex_msg}"
                )
            result.checksum_checked = True
        else:
            self._logging(f"{name}: no checksum function defined for {sensor.part}", 2)

        if not sensor.method:
            self._logging(f"{name}: no decoding method implemented for '{sensor.part}'", 3)
            result.implemented = False
            return result

        method = resolve_method(sensor.method)
        result.readings = list(method(sensor.part, payload))
        return result

    def register_log_callback(self, callback):
        """Register a callback function for logging."""
        if callable(callback):
            self._log_callback = callback

    def _logging(self, message: str, level: int = 3):
        """Log a message if a callback is registered."""
        if self._log_callback:
            self._log_callback(message, level)
