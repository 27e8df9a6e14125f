"""
Table of known Oregon Scientific sensor types.

Sensors are keyed by ``(type_id << 16) | bit_length``: the 16 bit type
field of the payload combined with the bit count the sensor transmits.
``checksum`` names a validator of ChecksumMixin, ``method`` a
``module.function`` path below ``oregon_protocols.methods``.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional


@dataclass(frozen=True, slots=True)
class SensorType:
    key: int
    part: str
    checksum: Optional[str] = None
    method: Optional[str] = None

    @property
    def type_id(self) -> int:
        return self.key >> 16

    @property
    def bit_length(self) -> int:
        return self.key & 0xFFFF


def sensor_key(type_id: int, bit_length: int) -> int:
    """
    >>> hex(sensor_key(0xFA28, 80))
    '0xfa280050'
    """
    return ((type_id & 0xFFFF) << 16) | (bit_length & 0xFFFF)


_SENSOR_TYPES = (
    SensorType(0xFA280050, "THGR810", "checksum2", "temphydro.common_temphydro"),
    SensorType(0xFAB80050, "WTGR800_T", "checksum2", "temphydro.common_temphydro"),
    SensorType(0x1A990058, "WTGR800_A", "checksum4"),
    SensorType(0x1A890058, "WGR800", "checksum4"),
    SensorType(0xEA4C0050, "THWR288A", "checksum1"),
    SensorType(0xEA4C0040, "THN132N", "checksum1"),
    SensorType(0x1A2D0050, "THGR228N", "checksum2", "temphydro.common_temphydro"),
    SensorType(0x1A3D0050, "THGR918", "checksum2", "temphydro.common_temphydro"),
    SensorType(0x5A6D0058, "BTHR918N", "checksum5", "temphydro.alt_temphydrobaro"),
    SensorType(0xCA2C0050, "THGR328N", "checksum2", "temphydro.common_temphydro"),
)

SENSOR_TYPES = MappingProxyType({sensor.key: sensor for sensor in _SENSOR_TYPES})
