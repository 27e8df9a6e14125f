"""Shared dataclasses for the CUL Oregon application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from oregon_protocols.readings import OregonReading


@dataclass(slots=True)
class RawFrame:
    """Single line received from the dongle before decoding."""

    line: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    message_type: Optional[str] = None


@dataclass(slots=True)
class DecodedMessage:
    """Sensor message after running through both decoding stages."""

    part_name: str
    payload: str
    raw: RawFrame
    readings: List[OregonReading] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)

    @property
    def device(self) -> Optional[str]:
        return self.readings[0].device if self.readings else None


__all__ = ["RawFrame", "DecodedMessage", "OregonReading"]
