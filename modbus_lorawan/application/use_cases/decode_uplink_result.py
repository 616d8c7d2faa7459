"""Decode Uplink Result DTO.

Data Transfer Object representing the result of decoding one uplink.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ...domain.value_objects import DecodedFrame


@dataclass
class DecodeUplinkResult:
    """Result of uplink decode operation.

    Attributes:
        success: Whether decoding was successful
        frame: Decoded frame if successful
        error: Error message if failed
    """

    success: bool
    frame: Optional[DecodedFrame] = None
    error: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the payload formatter output object."""
        if not self.success or self.frame is None:
            return {"errors": [self.error]}
        return {"data": self.frame.to_dict()}
