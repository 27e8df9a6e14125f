import json
import logging
import os
from dataclasses import asdict
from typing import Optional

import aiomqtt as mqtt

from .constants import DEFAULT_MQTT_HOST, DEFAULT_MQTT_PORT, DEFAULT_MQTT_TOPIC
from .types import DecodedMessage


class ReadingPublisher:
    """Publishes the readings of DecodedMessage objects to an MQTT server."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.client: Optional[mqtt.Client] = None  # Will be set in __aenter__

        self.mqtt_host = os.environ.get("MQTT_HOST", DEFAULT_MQTT_HOST)
        self.mqtt_port = int(os.environ.get("MQTT_PORT", DEFAULT_MQTT_PORT))
        self.mqtt_topic = os.environ.get("MQTT_TOPIC", DEFAULT_MQTT_TOPIC)
        self.mqtt_username = os.environ.get("MQTT_USERNAME")
        self.mqtt_password = os.environ.get("MQTT_PASSWORD")

    async def __aenter__(self) -> "ReadingPublisher":
        self.logger.debug("Initializing MQTT client...")

        if self.mqtt_username and self.mqtt_password:
            self.client = mqtt.Client(
                hostname=self.mqtt_host,
                port=self.mqtt_port,
                username=self.mqtt_username,
                password=self.mqtt_password,
            )
        else:
            self.client = mqtt.Client(
                hostname=self.mqtt_host,
                port=self.mqtt_port,
            )
        try:
            await self.client.__aenter__()
            self.logger.info("Connected to MQTT broker %s:%s", self.mqtt_host, self.mqtt_port)
            return self
        except Exception:
            self.client = None
            self.logger.error("Could not connect to MQTT broker %s:%s", self.mqtt_host, self.mqtt_port, exc_info=True)
            raise

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.client:
            self.logger.info("Disconnecting from MQTT broker...")
            await self.client.__aexit__(exc_type, exc_val, exc_tb)
            self.client = None
            self.logger.info("Disconnected from MQTT broker.")

    def reading_topic(self, device: str, reading_type: str) -> str:
        return f"{self.mqtt_topic}/{device}/{reading_type}"

    @staticmethod
    def _reading_to_json(message: DecodedMessage, index: int) -> str:
        """Serializes one reading of a DecodedMessage, tagged with its sensor."""
        reading_dict = asdict(message.readings[index])
        reading_dict["part_name"] = message.part_name
        reading_dict["timestamp"] = message.raw.timestamp.isoformat()
        return json.dumps(reading_dict)

    async def publish(self, message: DecodedMessage) -> None:
        """Publishes every reading of a DecodedMessage to its own topic."""
        if not self.client:
            self.logger.warning("Attempted to publish without an active MQTT client.")
            return

        for index, reading in enumerate(message.readings):
            topic = self.reading_topic(reading.device, reading.type)
            try:
                await self.client.publish(topic, self._reading_to_json(message, index))
                self.logger.debug("Published %s reading of %s to %s", reading.type, message.part_name, topic)
            except mqtt.MqttError:
                self.logger.error("Failed to publish reading to %s", topic, exc_info=True)
