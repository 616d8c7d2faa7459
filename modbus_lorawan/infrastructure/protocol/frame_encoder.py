"""Downlink frame encoder.

Builds Modbus Write Single Register (0x06) and Write Multiple Registers
(0x10) frames for transmission as LoRaWAN downlinks. The frames carry no
CRC; the gateway on the Modbus side appends it.
"""

import logging
import numbers
import struct
from typing import Any, Optional, Sequence

from ...const import (
    ERROR_MISSING_FIELDS,
    ERROR_UNSUPPORTED_FUNCTION,
    FUNC_WRITE_MULTIPLE,
    FUNC_WRITE_SINGLE,
    MAX_WRITE_REGISTERS,
)
from ...domain.exceptions import (
    InvalidEncodeValueError,
    MissingEncodeFieldsError,
    UnsupportedFunctionCodeError,
)
from ...domain.interfaces import IFrameEncoder
from ...domain.strategies import UInt16Codec

_LOGGER = logging.getLogger(__name__)


class FrameEncoder(IFrameEncoder):
    """Modbus write frame builder.

    Header fields are truncated to their wire width: the slave address to
    8 bits, register address and values to 16 bits. Negative values are
    therefore written as their two's complement.

    Example:
        >>> encoder = FrameEncoder()
        >>> encoder.encode(1, 16, 0, [10, 20]).hex()
        '01100000000204000a0014'
    """

    def __init__(self) -> None:
        """Initialize encoder."""
        self._word_codec = UInt16Codec()

    def encode(
        self,
        slave_address: Optional[int],
        function_code: Optional[int],
        register: Optional[int],
        values: Optional[Sequence[Any]],
    ) -> bytes:
        """Build a write frame.

        Args:
            slave_address: Modbus slave address (0-247)
            function_code: 6 (write single) or 16 (write multiple)
            register: Starting register address (0-based)
            values: Register values; for 0x06 only the first is used and a
                missing or falsy first value writes 0

        Returns:
            Complete downlink frame
            0x06: [Slave][0x06][Reg_H][Reg_L][Val_H][Val_L]
            0x10: [Slave][0x10][Reg_H][Reg_L][Cnt_H][Cnt_L][Bytes][Values...]

        Raises:
            MissingEncodeFieldsError: If any argument is None, or 0x10 is
                requested with no values
            UnsupportedFunctionCodeError: If function code is not 6 or 16
            InvalidEncodeValueError: If a field is not an integer
        """
        if (
            slave_address is None
            or function_code is None
            or register is None
            or values is None
        ):
            raise MissingEncodeFieldsError(ERROR_MISSING_FIELDS)

        function_code = self._as_int(function_code, "functionCode")

        if function_code not in (FUNC_WRITE_SINGLE, FUNC_WRITE_MULTIPLE):
            _LOGGER.debug("Rejected unsupported function code: %s", function_code)
            raise UnsupportedFunctionCodeError(ERROR_UNSUPPORTED_FUNCTION)

        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            raise InvalidEncodeValueError(
                f"values must be a list of integers, got {type(values).__name__}"
            )

        slave = self._as_int(slave_address, "slaveAddress") & 0xFF
        address = self._as_int(register, "register") & 0xFFFF

        if function_code == FUNC_WRITE_SINGLE:
            frame = self._build_write_single(slave, address, values)
        else:
            frame = self._build_write_multiple(slave, address, values)

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug(
                "Built write command: slave=%d, func=0x%02X, addr=0x%04X, frame=%s",
                slave,
                function_code,
                address,
                frame.hex(),
            )

        return frame

    def _build_write_single(
        self, slave: int, address: int, values: Sequence[Any]
    ) -> bytes:
        """Build Write Single Register (0x06) frame."""
        first = values[0] if len(values) > 0 else 0
        value = self._as_int(first or 0, "values[0]")

        return struct.pack(">BBH", slave, FUNC_WRITE_SINGLE, address) + (
            self._word_codec.encode(value & 0xFFFF)
        )

    def _build_write_multiple(
        self, slave: int, address: int, values: Sequence[Any]
    ) -> bytes:
        """Build Write Multiple Registers (0x10) frame."""
        count = len(values)
        if count == 0:
            raise MissingEncodeFieldsError(
                "values must contain at least one register value for function code 16"
            )
        if count > MAX_WRITE_REGISTERS:
            raise InvalidEncodeValueError(
                f"Register count must be 1-{MAX_WRITE_REGISTERS}, got {count}"
            )

        payload = b"".join(
            self._word_codec.encode(self._as_int(value, f"values[{i}]") & 0xFFFF)
            for i, value in enumerate(values)
        )

        return (
            struct.pack(
                ">BBHHB", slave, FUNC_WRITE_MULTIPLE, address, count, count * 2
            )
            + payload
        )

    @staticmethod
    def _as_int(value: Any, field: str) -> int:
        """Coerce an integral number, rejecting anything else."""
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, float) and value.is_integer():
            return int(value)
        raise InvalidEncodeValueError(f"{field} must be an integer, got {value!r}")
