"""IFrameEncoder interface for downlink write commands."""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence


class IFrameEncoder(ABC):
    """Interface for building Modbus write frames.

    Downlink Frame Structures (no CRC):
        0x06: [Slave][0x06][Reg_H][Reg_L][Val_H][Val_L]
        0x10: [Slave][0x10][Reg_H][Reg_L][Cnt_H][Cnt_L][Bytes][V0_H][V0_L]...
    """

    @abstractmethod
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
            values: Register values; only the first is used for 0x06

        Returns:
            Complete downlink frame

        Raises:
            MissingEncodeFieldsError: If any argument is None
            UnsupportedFunctionCodeError: If function code is not 6 or 16
            InvalidEncodeValueError: If a field is not an integer
        """
