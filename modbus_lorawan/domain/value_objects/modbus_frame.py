"""ModbusFrame value object.

Represents the register read response carried in an uplink payload.
"""

from dataclasses import dataclass

from ..exceptions import OutOfRangeReadError
from ...const import HEADER_SIZE


@dataclass(frozen=True)
class ModbusFrame:
    """Immutable Modbus RTU read response, without CRC.

    Uplink Frame Structure:
        [Slave Address][Function][Byte Count][Register data...]

    Only ``byte_count`` bytes after the header belong to the frame. Anything
    beyond (a trailing CRC, padding) is dropped by ``from_bytes``.

    Attributes:
        slave_address: Modbus slave address (0-247), key into the catalog
        function_code: Function code, echoed back and not interpreted
        byte_count: Number of register data bytes declared by the header
        data: Register data window, exactly ``byte_count`` bytes

    Example:
        >>> frame = ModbusFrame.from_bytes(bytes([0x01, 0x03, 0x02, 0xFF, 0x9C]))
        >>> assert frame.slave_address == 1
        >>> assert frame.data == b"\\xff\\x9c"
    """

    slave_address: int
    function_code: int
    byte_count: int
    data: bytes

    def __post_init__(self) -> None:
        """Validate frame components.

        Raises:
            ValueError: If any header field is outside one byte
            OutOfRangeReadError: If data length disagrees with byte_count
        """
        for label, value in (
            ("Slave address", self.slave_address),
            ("Function code", self.function_code),
            ("Byte count", self.byte_count),
        ):
            if not isinstance(value, int) or not 0 <= value <= 0xFF:
                raise ValueError(f"{label} must be 0-255, got {value}")

        if not isinstance(self.data, (bytes, bytearray)):
            raise TypeError(f"Data must be bytes, got {type(self.data).__name__}")

        if len(self.data) != self.byte_count:
            raise OutOfRangeReadError(
                f"Frame declares {self.byte_count} data bytes but carries "
                f"{len(self.data)}"
            )

    @classmethod
    def from_bytes(cls, payload: bytes) -> "ModbusFrame":
        """Parse the header and register window from raw payload bytes.

        Args:
            payload: Raw uplink payload

        Returns:
            Parsed ModbusFrame

        Raises:
            OutOfRangeReadError: If the payload is shorter than the header or
                than the window declared by the byte count
        """
        if len(payload) < HEADER_SIZE:
            raise OutOfRangeReadError(
                f"Payload too short for Modbus header, expected at least "
                f"{HEADER_SIZE} bytes, got {len(payload)}"
            )

        byte_count = payload[2]
        end = HEADER_SIZE + byte_count
        if len(payload) < end:
            raise OutOfRangeReadError(
                f"Byte count {byte_count} requires {end} bytes, "
                f"payload has {len(payload)}"
            )

        return cls(
            slave_address=payload[0],
            function_code=payload[1],
            byte_count=byte_count,
            data=bytes(payload[HEADER_SIZE:end]),
        )

    def __str__(self) -> str:
        """String representation for logging."""
        return (
            f"ModbusFrame(slave={self.slave_address:#04x}, "
            f"func={self.function_code:#04x}, "
            f"data={self.byte_count} bytes)"
        )
