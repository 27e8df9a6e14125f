"""Result dataclasses produced by the Oregon message parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class OregonReading:
    """One decoded measurement of a sensor."""

    device: str
    type: str
    current: float = 0.0
    average: float = 0.0
    string_val: str = ""
    units: str = ""
    forecast: str = ""
    risk: str = ""


@dataclass(slots=True)
class OregonParseResult:
    """Outcome of parsing one canonical Oregon hex string."""

    part_name: str
    type_id: int
    bit_length: int
    readings: List[OregonReading] = field(default_factory=list)
    checksum_checked: bool = False
    implemented: bool = True
