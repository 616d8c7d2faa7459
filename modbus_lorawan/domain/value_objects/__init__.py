"""Value Objects for the Modbus LoRaWAN codec domain.

Value Objects are immutable domain primitives that:
- Have no identity (equality based on value, not reference)
- Are immutable (cannot be changed after creation)
- Validate their invariants at construction
"""

from .data_type import DataType
from .decoded_frame import DecodedFrame
from .endianness import Endianness
from .modbus_frame import ModbusFrame

__all__ = [
    "DataType",
    "DecodedFrame",
    "Endianness",
    "ModbusFrame",
]
