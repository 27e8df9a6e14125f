# oregon_protocols/methods/temphydro.py
"""
Decode methods for the temperature/humidity(/barometer) sensor families.

Every method takes the part name of the matched sensor and the validated
payload (the canonical message without its length byte) and returns the
list of readings for that message.
"""

from __future__ import annotations

from typing import List

from ..exceptions import TruncatedMessageError
from ..helpers import bcd_to_dec, hi_nibble, lo_nibble
from ..readings import OregonReading

COMFORT_LEVELS = ("normal", "comfortable", "dry", "wet")

FORECASTS = {
    0xC: "sunny",
    0x6: "partly",
    0x2: "cloudy",
    0x3: "rain",
}

# BTHR918N reports the pressure as an offset to 856 hPa
BTHR918N_PRESSURE_OFFSET = 856


def _require(payload, length):
    if len(payload) < length:
        raise TruncatedMessageError(
            f"payload has {len(payload)} bytes, decoder needs {length}"
        )


def device_string(part_name: str, payload) -> str:
    """
    Build the device identifier from the rolling code and the channel.

    >>> device_string("THGR228N", bytes([0x1A, 0x2D, 0x10, 0xF4]))
    'THGR228N_f4_1'
    >>> device_string("THGR810", bytes([0xFA, 0x28, 0x05, 0x3C]))
    'THGR810_3c'
    """
    _require(payload, 4)
    device = f"{part_name}_{payload[3]:02x}"
    channel = hi_nibble(payload[2])
    if channel > 0:
        device += f"_{channel}"
    return device


def decode_temperature(payload, device: str) -> OregonReading:
    _require(payload, 7)
    sign = -1.0 if payload[6] & 0x08 else 1.0
    value = bcd_to_dec(payload[5]) + hi_nibble(payload[4]) / 10.0
    return OregonReading(device=device, type="temperature", current=sign * value, units="C")


def decode_humidity(payload, device: str) -> OregonReading:
    _require(payload, 8)
    return OregonReading(
        device=device,
        type="humidity",
        current=float(lo_nibble(payload[7]) * 10 + hi_nibble(payload[6])),
        string_val=COMFORT_LEVELS[payload[7] >> 6],
        units="%",
    )


def decode_simple_battery(payload, device: str) -> OregonReading:
    _require(payload, 5)
    return OregonReading(
        device=device,
        type="battery_status",
        string_val="low" if payload[4] & 0x04 else "ok",
    )


def decode_pressure(payload, device: str, offset: int, forecast_nibble: int) -> OregonReading:
    _require(payload, 9)
    return OregonReading(
        device=device,
        type="pressure",
        current=float(payload[8] + offset),
        units="hPa",
        forecast=FORECASTS.get(forecast_nibble, "unknown"),
    )


def common_temphydro(part_name: str, payload) -> List[OregonReading]:
    """Temperature, humidity and battery state sharing one device string."""
    device = device_string(part_name, payload)
    return [
        decode_temperature(payload, device),
        decode_humidity(payload, device),
        decode_simple_battery(payload, device),
    ]


def alt_temphydrobaro(part_name: str, payload) -> List[OregonReading]:
    """Temperature, humidity and pressure with forecast.

    The percentage battery level these sensors also send is not decoded.
    """
    _require(payload, 10)
    device = device_string(part_name, payload)
    return [
        decode_temperature(payload, device),
        decode_humidity(payload, device),
        decode_pressure(payload, device, BTHR918N_PRESSURE_OFFSET, hi_nibble(payload[9])),
    ]
