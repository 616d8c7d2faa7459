"""DecodedFrame value object.

Result of decoding one uplink frame against the device catalog.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

DecodedValue = Union[int, float, Dict[str, bool]]


@dataclass(frozen=True)
class DecodedFrame:
    """Decoded uplink frame.

    Attributes:
        slave_address: Slave address from the frame header
        function_code: Function code from the frame header, as received
        values: Field name to scaled number, flag dict, or raw 16-bit
            integer for registers missing from the catalog
        raw_registers: Optional dump of the register window as
            (index, raw value) pairs
    """

    slave_address: int
    function_code: int
    values: Dict[str, DecodedValue] = field(default_factory=dict)
    raw_registers: Optional[List[Tuple[int, int]]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the payload formatter ``data`` object."""
        data: Dict[str, Any] = {
            "slaveAddress": self.slave_address,
            "functionCode": self.function_code,
            "values": {
                name: dict(value) if isinstance(value, dict) else value
                for name, value in self.values.items()
            },
        }
        if self.raw_registers is not None:
            data["registers"] = [
                {"index": index, "rawValue": raw} for index, raw in self.raw_registers
            ]
        return data
