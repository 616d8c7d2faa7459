"""EncodeDownlinkUseCase for downlink write commands."""

import logging
from typing import Any, Mapping

from ...const import ERROR_MISSING_FIELDS
from ...domain.exceptions import MissingEncodeFieldsError, ModbusCodecError
from ...domain.interfaces import IFrameEncoder
from .encode_downlink_result import EncodeDownlinkResult

_LOGGER = logging.getLogger(__name__)


class EncodeDownlinkUseCase:
    """Use case for encoding downlink write commands.

    Input object:
        {
            "slaveAddress": 1,      # Modbus slave address (0-247)
            "functionCode": 6,      # 6 or 16
            "register": 0,          # Register index (0-based)
            "values": [1234]        # Register values
        }

    Example:
        >>> use_case = EncodeDownlinkUseCase(FrameEncoder())
        >>> result = use_case.execute(
        ...     {"slaveAddress": 1, "functionCode": 6, "register": 0, "values": [300]}
        ... )
        >>> list(result.payload)
        [1, 6, 0, 0, 1, 44]
    """

    def __init__(self, encoder: IFrameEncoder):
        """Initialize use case with dependencies.

        Args:
            encoder: Write frame encoder
        """
        self._encoder = encoder

    def execute(self, request: Mapping[str, Any]) -> EncodeDownlinkResult:
        """Execute downlink encode.

        Args:
            request: Network server input object

        Returns:
            EncodeDownlinkResult with the frame bytes or an error message
        """
        try:
            if not isinstance(request, Mapping):
                raise MissingEncodeFieldsError(ERROR_MISSING_FIELDS)

            payload = self._encoder.encode(
                slave_address=request.get("slaveAddress"),
                function_code=request.get("functionCode"),
                register=request.get("register"),
                values=request.get("values"),
            )
        except ModbusCodecError as err:
            _LOGGER.warning("Downlink encode failed: %s", err)
            return EncodeDownlinkResult(success=False, error=str(err))

        return EncodeDownlinkResult(success=True, payload=payload)
