"""IFrameParser interface for uplink frame decoding."""

from abc import ABC, abstractmethod
from typing import List, Tuple

from ..value_objects.decoded_frame import DecodedFrame


class IFrameParser(ABC):
    """Interface for turning uplink payload bytes into named values.

    Uplink Frame Structure:
        [Slave Address][Function][Byte Count][Register data...]

    Example:
        >>> parser = FrameParser(catalog)
        >>> decoded = parser.parse(bytes([0x01, 0x03, 0x02, 0xFF, 0x9C]))
        >>> decoded.values  # {"temperature": -0.1}
    """

    @abstractmethod
    def parse(self, payload: bytes) -> DecodedFrame:
        """Decode a read response against the device catalog.

        Args:
            payload: Raw uplink bytes (trailing bytes after the declared
                register window are ignored)

        Returns:
            DecodedFrame with header fields and decoded values

        Raises:
            OutOfRangeReadError: If the payload is shorter than the header,
                the declared window, or a register's width
        """

    @abstractmethod
    def read_raw_registers(self, payload: bytes) -> List[Tuple[int, int]]:
        """Read the register window as plain 16-bit words.

        Args:
            payload: Raw uplink bytes

        Returns:
            (register index, unsigned 16-bit value) pairs

        Raises:
            OutOfRangeReadError: If the window is truncated or has an odd
                number of bytes
        """
