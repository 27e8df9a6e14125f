"""Entry point for CUL line parsing logic."""

from __future__ import annotations

import logging
from typing import List

from oregon_protocols import OregonProtocols

from ..constants import MESSAGE_TYPE_OREGON
from ..types import DecodedMessage, RawFrame
from . import base
from .oregon import OregonParser


class CulParser:
    """Routes dongle lines to the dedicated parser for each message type."""

    def __init__(
        self,
        protocols: OregonProtocols | None = None,
        logger: logging.Logger | None = None,
    ):
        self.protocols = protocols or OregonProtocols()
        self.logger = logger or logging.getLogger(__name__)
        self.protocols.register_log_callback(self._log_adapter)
        self.oregon_parser = OregonParser(self.protocols, self.logger)

    def parse_line(self, line: str) -> List[DecodedMessage]:
        payload = base.extract_payload(line)
        if payload is None:
            self.logger.debug("CulParser: ignoring empty line")
            return []

        frame = RawFrame(line=payload, message_type=payload[:2])
        parser = self._select_parser(frame.message_type)

        if parser is None:
            self.logger.debug("CulParser: no parser registered for %s", frame.message_type)
            return []

        return list(parser.parse(frame))

    def _log_adapter(self, message: str, level: int):
        """Adapts OregonProtocols log levels to python logging."""
        # FHEM levels: 1=Error, 2=Warn, 3=Info, 4=More Info, 5=Debug
        if level <= 1:
            self.logger.error(message)
        elif level == 2:
            self.logger.warning(message)
        elif level == 3:
            self.logger.info(message)
        else:
            self.logger.debug(message)

    def _select_parser(self, message_type: str | None):
        if message_type == MESSAGE_TYPE_OREGON:
            return self.oregon_parser
        return None


__all__ = ["CulParser", "OregonParser"]
