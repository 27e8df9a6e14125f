"""Oregon Scientific V2/V3 decoding for messages received by a CUL dongle."""

from .oregon_protocols import OregonProtocols
from .readings import OregonParseResult, OregonReading
from .sensor_types import SENSOR_TYPES, SensorType, sensor_key

__all__ = [
    "OregonProtocols",
    "OregonParseResult",
    "OregonReading",
    "SENSOR_TYPES",
    "SensorType",
    "sensor_key",
]
