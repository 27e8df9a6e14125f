"""Exception hierarchy for the Oregon Scientific decoding pipeline."""


class OregonError(Exception):
    """Base class for all decoding errors."""


class InvalidFramingError(OregonError):
    """Raised when a CUL message lacks the 'om' marker or is too short."""


class InvalidHexEncodingError(OregonError):
    """Raised when a hex string has an odd length or a non-hex character."""


class UnrecognizedProtocolError(OregonError):
    """Raised when neither the V2 nor the V3 preamble is present."""


class EmptyDecodeError(OregonError):
    """Raised when a preamble matched but no complete byte could be decoded."""


class PayloadTooLongError(OregonError):
    """Raised when a message exceeds the fixed message or payload bounds."""


class TruncatedMessageError(OregonError):
    """Raised when a payload is too short for the requested field or checksum."""


class UnknownSensorError(OregonError):
    """Raised when no sensor type matches within the bit-length search window."""


class ChecksumMismatchError(OregonError):
    """Raised when the sensor checksum does not match the computed one."""
