"""Uplink payload extraction.

Network servers hand the payload formatter an envelope object. The raw
bytes are usually in ``bytes``; older or misconfigured integrations only
provide the base64 text of the payload.
"""

import base64
import binascii
import logging
from typing import Any, Mapping, Optional

from ...const import ERROR_NO_PAYLOAD
from ...domain.exceptions import NoPayloadBytesError, PayloadEncodingError

_LOGGER = logging.getLogger(__name__)


class PayloadExtractor:
    """Resolve the uplink payload bytes from a network server envelope.

    Lookup order:
        1. ``bytes``: byte array (list of ints or bytes)
        2. ``uplink_message.frm_payload``: base64 text (TTN v3)
        3. ``payload_raw``: base64 text (TTN v2)

    The first non-empty source wins.

    Example:
        >>> extractor = PayloadExtractor()
        >>> extractor.extract({"payload_raw": "AQMC/5w="}).hex()
        '010302ff9c'
    """

    def extract(self, envelope: Mapping[str, Any]) -> bytes:
        """Extract payload bytes.

        Args:
            envelope: Input object from the network server

        Returns:
            Payload bytes

        Raises:
            NoPayloadBytesError: If no source carries any bytes
            PayloadEncodingError: If a source is present but malformed
        """
        if not isinstance(envelope, Mapping):
            raise NoPayloadBytesError(ERROR_NO_PAYLOAD)

        payload = self._from_byte_array(envelope.get("bytes"))

        if not payload:
            uplink_message = envelope.get("uplink_message")
            if isinstance(uplink_message, Mapping):
                payload = self._from_base64(
                    uplink_message.get("frm_payload"), "uplink_message.frm_payload"
                )

        if not payload:
            payload = self._from_base64(envelope.get("payload_raw"), "payload_raw")

        if not payload:
            raise NoPayloadBytesError(ERROR_NO_PAYLOAD)

        return payload

    @staticmethod
    def _from_byte_array(value: Any) -> Optional[bytes]:
        if not value:
            return None
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        if not isinstance(value, (list, tuple)):
            raise PayloadEncodingError(
                f"Payload bytes must be a byte array, got {type(value).__name__}"
            )
        try:
            return bytes(value)
        except (TypeError, ValueError) as err:
            raise PayloadEncodingError(
                f"Payload bytes must be integers 0-255: {err}"
            ) from err

    @staticmethod
    def _from_base64(value: Any, source: str) -> Optional[bytes]:
        if not value:
            return None
        try:
            payload = base64.b64decode(value, validate=True)
        except (binascii.Error, TypeError, ValueError) as err:
            raise PayloadEncodingError(f"Invalid base64 in {source}: {err}") from err

        _LOGGER.debug("Using base64 payload from %s (%d bytes)", source, len(payload))
        return payload
