import argparse
import asyncio
import logging
import os
import sys
from typing import Iterable, List, Optional

from dotenv import load_dotenv

from culoregon.constants import DEFAULT_LOG_LEVEL
from culoregon.parser import CulParser
from culoregon.types import DecodedMessage


def initialize_logging(log_level_str: str):
    """Initialize logging from a level name such as 'DEBUG'."""
    level = getattr(logging, log_level_str.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    # basicConfig is a no-op once handlers exist, so set the level explicitly
    logging.getLogger().setLevel(level)


initialize_logging(os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL))

logger = logging.getLogger("main")


def report_message(message: DecodedMessage):
    """Log a decoded sensor and its readings."""
    logger.info("--- Decoded Sensor: %s (%s) ---", message.device or message.part_name, message.payload)
    if not message.metadata.get("implemented", True):
        logger.info("  No decoding method implemented for '%s'", message.part_name)
    for reading in message.readings:
        logger.info("  - Type: %s", reading.type)
        if reading.units:
            logger.info("    Value: %.2f %s", reading.current, reading.units)
        if reading.string_val:
            logger.info("    State: %s", reading.string_val)
        if reading.forecast:
            logger.info("    Forecast: %s", reading.forecast)


def read_message_file(path: str) -> List[str]:
    """Read one raw CUL message per line, skipping blank lines."""
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def decode_lines(parser: CulParser, lines: Iterable[str]) -> tuple[List[DecodedMessage], int]:
    """Run every line through the parser.

    Returns:
        Tuple of (decoded messages, number of lines that produced nothing)
    """
    decoded: List[DecodedMessage] = []
    failures = 0
    for number, line in enumerate(lines, start=1):
        logger.info("Message %d: %s", number, line)
        messages = parser.parse_line(line)
        if not messages:
            logger.error("Message %d: no Oregon sensor decoded", number)
            failures += 1
        for message in messages:
            report_message(message)
            decoded.append(message)
    return decoded, failures


async def _publish(messages: List[DecodedMessage]):
    from culoregon.mqtt import ReadingPublisher

    async with ReadingPublisher(logger=logger) as publisher:
        for message in messages:
            await publisher.publish(message)


def main(argv: Optional[List[str]] = None) -> int:
    # Environment variables provide the defaults, CLI arguments override them.
    load_dotenv()

    default_log_level = os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    default_input_file = os.environ.get("CUL_OREGON_INPUT_FILE")

    parser = argparse.ArgumentParser(description="Decode Oregon Scientific messages received by a CUL")
    parser.add_argument("messages", nargs="*", help="Raw CUL messages, e.g. omAAAAAAAB32D4CB3554...")
    parser.add_argument("--file", default=default_input_file, help=f"File with one raw CUL message per line. Default: {default_input_file or 'none'}")
    parser.add_argument("--log-level", default=default_log_level, choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help=f"Logging level. Default: {default_log_level}")
    parser.add_argument("--mqtt", action="store_true", help="Publish decoded readings to the MQTT broker configured by MQTT_HOST/MQTT_PORT/MQTT_TOPIC")

    args = parser.parse_args(argv)

    initialize_logging(args.log_level)

    lines = list(args.messages)
    if args.file:
        try:
            lines.extend(read_message_file(args.file))
        except OSError as e:
            logger.error("Could not read message file %s: %s", args.file, e)
            return 1

    if not lines:
        parser.print_usage(sys.stderr)
        logger.error("No messages given. Example: omAAAAAAAB32D4CB3554D54CAB5554B53554B54D4D4CB55554")
        return 1

    decoded, failures = decode_lines(CulParser(logger=logging.getLogger("culoregon")), lines)
    logger.info("Decoded %d of %d messages.", len(lines) - failures, len(lines))

    if args.mqtt and decoded:
        try:
            asyncio.run(_publish(decoded))
        except Exception as e:
            logger.error("Publishing to MQTT failed: %s", e, exc_info=True)
            return 1

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
