"""A Python library to decode Oregon Scientific sensors received by a CUL dongle."""

from .parser import CulParser
from .types import DecodedMessage, OregonReading, RawFrame

__all__ = ["CulParser", "DecodedMessage", "OregonReading", "RawFrame"]
