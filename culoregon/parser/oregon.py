"""Oregon Scientific (om) parser."""

from __future__ import annotations

import logging
from typing import Iterable

from oregon_protocols import OregonProtocols
from oregon_protocols.exceptions import OregonError

from ..constants import MESSAGE_TYPE_OREGON
from ..exceptions import CulParserError
from ..types import DecodedMessage, RawFrame
from .base import ensure_message_type


class OregonParser:
    """
    Parses Oregon Scientific (om) messages received by the CUL.
    """

    def __init__(self, protocols: OregonProtocols, logger: logging.Logger):
        self.protocols = protocols
        self.logger = logger

    def parse(self, frame: RawFrame) -> Iterable[DecodedMessage]:
        """
        Runs a raw om frame through the preprocessor and the Oregon parser
        and yields zero or one DecodedMessage.
        """
        try:
            ensure_message_type(frame.line, MESSAGE_TYPE_OREGON)
        except CulParserError as e:
            self.logger.debug("Not an Oregon message: %s", e)
            return

        # Example: omAAAAAAAB32D4CB3554D54CAB5554B53554B54D4D4CB55554
        try:
            payload = self.protocols.preprocess_cul_message(frame.line, name=frame.line)
        except OregonError as e:
            self.logger.warning(
                "Preprocessing failed (%s): %s - %s", type(e).__name__, e, frame.line
            )
            return

        self.logger.debug("Preprocessor output: %s", payload)

        try:
            result = self.protocols.parse_oregon_message(payload, name=frame.line)
        except OregonError as e:
            self.logger.warning(
                "Oregon parsing failed (%s): %s - %s", type(e).__name__, e, payload
            )
            return

        yield DecodedMessage(
            part_name=result.part_name,
            payload=payload,
            raw=frame,
            readings=result.readings,
            metadata={
                "type_id": result.type_id,
                "bit_length": result.bit_length,
                "checksum_checked": result.checksum_checked,
                "implemented": result.implemented,
            },
        )
