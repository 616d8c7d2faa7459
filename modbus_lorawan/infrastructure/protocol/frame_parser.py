"""Uplink frame parser.

Walks the register window of a Modbus read response and decodes each
register according to the device catalog. Registers the catalog does not
describe are reported as raw 16-bit words under ``register_<index>``.
"""

import logging
import struct
from typing import Dict, List, Tuple

from ...const import FALLBACK_FIELD_TEMPLATE, REGISTER_SIZE
from ...domain.entities import RegisterCatalog
from ...domain.exceptions import OutOfRangeReadError
from ...domain.interfaces import IFrameParser
from ...domain.strategies import UInt16Codec
from ...domain.value_objects import DecodedFrame, ModbusFrame
from ...domain.value_objects.decoded_frame import DecodedValue

_LOGGER = logging.getLogger(__name__)


class FrameParser(IFrameParser):
    """Catalog-driven decoder for Modbus read responses.

    The cursor walks the register window from its first byte. Each step
    looks up the definition at the current register index:

    - no definition: 2 bytes are read as an unsigned big-endian word, the
      index advances by 1
    - definition: its byte width is decoded by the value codec, the index
      advances by the number of registers it spans

    The walk ends exactly at the end of the declared window.

    Attributes:
        catalog: Device catalog used to look up register layouts

    Example:
        >>> parser = FrameParser(catalog)
        >>> decoded = parser.parse(bytes([0x01, 0x03, 0x02, 0xFF, 0x9C]))
        >>> decoded.values
        {'temperature': -0.1}
    """

    def __init__(self, catalog: RegisterCatalog):
        """Initialize parser.

        Args:
            catalog: Device catalog
        """
        self._catalog = catalog
        self._word_codec = UInt16Codec()

    @property
    def catalog(self) -> RegisterCatalog:
        """Device catalog used by this parser."""
        return self._catalog

    def parse(self, payload: bytes) -> DecodedFrame:
        """Decode a read response into named values.

        Args:
            payload: Raw uplink bytes

        Returns:
            DecodedFrame with header fields and values in register order

        Raises:
            OutOfRangeReadError: If the payload is shorter than the header or
                the declared window, or a register does not fit the window
        """
        frame = ModbusFrame.from_bytes(payload)
        registers = self._catalog.registers_for(frame.slave_address)

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug(
                "Decoding %s against %d catalog registers, data=%s",
                frame,
                len(registers),
                frame.data.hex(),
            )

        values: Dict[str, DecodedValue] = {}
        data = frame.data
        cursor = 0
        index = 0

        while cursor < frame.byte_count:
            definition = registers.get(index)

            if definition is None:
                name = FALLBACK_FIELD_TEMPLATE.format(index=index)
                window = self._take(data, cursor, REGISTER_SIZE, name, index)
                values[name] = self._word_codec.decode(window)
                cursor += REGISTER_SIZE
                index += 1
                continue

            window = self._take(data, cursor, definition.byte_width, definition.name, index)
            values[definition.name] = definition.decode(window)
            cursor += definition.byte_width
            index += definition.register_count

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug(
                "Decoded %d fields from slave %d: %s",
                len(values),
                frame.slave_address,
                values,
            )

        return DecodedFrame(
            slave_address=frame.slave_address,
            function_code=frame.function_code,
            values=values,
        )

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
        frame = ModbusFrame.from_bytes(payload)

        if frame.byte_count % REGISTER_SIZE:
            raise OutOfRangeReadError(
                f"Byte count {frame.byte_count} is not a whole number of registers"
            )

        register_count = frame.byte_count // REGISTER_SIZE
        # Bulk unpack all registers at once
        unpacked_values = struct.unpack(f">{register_count}H", frame.data)

        return list(enumerate(unpacked_values))

    @staticmethod
    def _take(data: bytes, cursor: int, width: int, name: str, index: int) -> bytes:
        """Slice ``width`` bytes at ``cursor``, refusing to read past the window."""
        remaining = len(data) - cursor
        if width > remaining:
            raise OutOfRangeReadError(
                f"Register '{name}' at index {index} needs {width} bytes, "
                f"only {remaining} remain in the {len(data)}-byte register window"
            )
        return data[cursor : cursor + width]
