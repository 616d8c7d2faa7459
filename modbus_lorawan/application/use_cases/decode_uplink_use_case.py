"""DecodeUplinkUseCase for uplink payloads.

This use case orchestrates the decode workflow:
1. Extract payload bytes from the network server envelope
2. Parse the Modbus frame against the device catalog
3. Optionally attach a raw dump of the register window
4. Report the outcome as a result DTO
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping

from ...domain.exceptions import ModbusCodecError
from ...domain.interfaces import IFrameParser
from ...infrastructure.payload import PayloadExtractor
from .decode_uplink_result import DecodeUplinkResult

_LOGGER = logging.getLogger(__name__)


class DecodeUplinkUseCase:
    """Use case for decoding uplink payloads.

    Codec errors end the call and are returned as a failed result; there
    is no partial output. Any other exception propagates.

    Dependencies (injected):
    - parser: Decodes frames against a device catalog
    - extractor: Resolves bytes from the network server envelope

    Example:
        >>> use_case = DecodeUplinkUseCase(FrameParser(catalog))
        >>> result = use_case.execute({"bytes": [0x01, 0x03, 0x02, 0xFF, 0x9C]})
        >>> result.frame.values
        {'temperature': -0.1}
    """

    def __init__(
        self,
        parser: IFrameParser,
        extractor: PayloadExtractor | None = None,
    ):
        """Initialize use case with dependencies.

        Args:
            parser: Frame parser
            extractor: Payload extractor (default: PayloadExtractor())
        """
        self._parser = parser
        self._extractor = extractor or PayloadExtractor()

    def execute(
        self, envelope: Mapping[str, Any], include_raw: bool = False
    ) -> DecodeUplinkResult:
        """Execute uplink decode.

        Args:
            envelope: Network server input object
            include_raw: Attach the register window as raw 16-bit words

        Returns:
            DecodeUplinkResult with the decoded frame or an error message
        """
        try:
            payload = self._extractor.extract(envelope)
            frame = self._parser.parse(payload)
            if include_raw:
                frame = replace(
                    frame, raw_registers=self._parser.read_raw_registers(payload)
                )
        except ModbusCodecError as err:
            _LOGGER.warning("Uplink decode failed: %s", err)
            return DecodeUplinkResult(success=False, error=str(err))

        return DecodeUplinkResult(success=True, frame=frame)
