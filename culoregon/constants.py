"""Constants used throughout the CUL Oregon project."""

# Message type prefixes emitted by the CUL firmware
MESSAGE_TYPE_OREGON = "om"

# Default settings
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MQTT_HOST = "localhost"
DEFAULT_MQTT_PORT = 1883
DEFAULT_MQTT_TOPIC = "culoregon"
