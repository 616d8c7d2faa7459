"""Encode Downlink Result DTO.

Data Transfer Object representing the result of encoding one downlink.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class EncodeDownlinkResult:
    """Result of downlink encode operation.

    Attributes:
        success: Whether encoding was successful
        payload: Encoded frame if successful
        error: Error message if failed
    """

    success: bool
    payload: bytes = b""
    error: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the payload formatter output object."""
        if not self.success:
            return {"errors": [self.error]}
        return {"bytes": list(self.payload)}
