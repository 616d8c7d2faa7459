"""Register data types.

Each type knows how many 16-bit registers it spans on the wire.
"""

from enum import Enum


class DataType(Enum):
    """Register data types."""

    UINT16 = "uint16"  # Unsigned 16-bit integer (0-65535)
    INT16 = "int16"  # Signed 16-bit integer (-32768 to 32767)
    UINT32 = "uint32"  # Unsigned 32-bit (two registers)
    INT32 = "int32"  # Signed 32-bit (two registers)
    FLOAT32 = "float32"  # IEEE 754 binary32 (two registers)

    @property
    def register_count(self) -> int:
        """Number of 16-bit registers occupied by this type."""
        if self in (DataType.UINT16, DataType.INT16):
            return 1
        return 2

    @property
    def byte_width(self) -> int:
        """Number of payload bytes occupied by this type."""
        return self.register_count * 2
