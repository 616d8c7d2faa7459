"""Value encoding/decoding strategies using Strategy pattern."""

import struct
from abc import ABC, abstractmethod
from typing import Union

from ..helpers.transformations import (
    convert_to_signed_int16,
    convert_to_signed_int32,
    reorder_bytes,
)
from ..value_objects.data_type import DataType
from ..value_objects.endianness import Endianness

Number = Union[int, float]


class ValueCodecStrategy(ABC):
    """Abstract strategy for converting register bytes to numbers and back.

    Subclasses only deal with big-endian windows; ``decode`` and ``encode``
    apply the byte reordering for the register's endianness around them.
    """

    data_type: DataType

    @property
    def byte_width(self) -> int:
        """Payload bytes consumed by one value."""
        return self.data_type.byte_width

    def decode(self, window: bytes, endian: Endianness = Endianness.BIG) -> Number:
        """Reconstruct a raw (unscaled) value from its payload bytes.

        Args:
            window: Exactly ``byte_width`` bytes from the payload
            endian: Byte order used by the device

        Returns:
            Reconstructed value

        Raises:
            ValueError: If the window has the wrong length
        """
        if len(window) != self.byte_width:
            raise ValueError(
                f"{self.data_type.value} needs {self.byte_width} bytes, "
                f"got {len(window)}"
            )
        return self._from_big_endian(reorder_bytes(window, endian))

    def encode(self, value: Number, endian: Endianness = Endianness.BIG) -> bytes:
        """Convert a raw value into payload bytes.

        Args:
            value: Raw (unscaled) value
            endian: Byte order expected by the device

        Returns:
            ``byte_width`` bytes

        Raises:
            struct.error: If the value does not fit the data type
        """
        # Every reordering is its own inverse
        return reorder_bytes(self._to_big_endian(value), endian)

    @abstractmethod
    def _from_big_endian(self, window: bytes) -> Number:
        """Reconstruct a value from a big-endian window."""

    @abstractmethod
    def _to_big_endian(self, value: Number) -> bytes:
        """Pack a value into a big-endian window."""


class UInt16Codec(ValueCodecStrategy):
    """Codec for unsigned 16-bit integers."""

    data_type = DataType.UINT16

    def _from_big_endian(self, window: bytes) -> int:
        return struct.unpack(">H", window)[0]

    def _to_big_endian(self, value: Number) -> bytes:
        return struct.pack(">H", int(value))


class Int16Codec(ValueCodecStrategy):
    """Codec for signed 16-bit integers (two's complement)."""

    data_type = DataType.INT16

    def _from_big_endian(self, window: bytes) -> int:
        return convert_to_signed_int16(struct.unpack(">H", window)[0])

    def _to_big_endian(self, value: Number) -> bytes:
        return struct.pack(">h", int(value))


class UInt32Codec(ValueCodecStrategy):
    """Codec for unsigned 32-bit integers spread over two registers."""

    data_type = DataType.UINT32

    def _from_big_endian(self, window: bytes) -> int:
        return struct.unpack(">I", window)[0]

    def _to_big_endian(self, value: Number) -> bytes:
        return struct.pack(">I", int(value))


class Int32Codec(ValueCodecStrategy):
    """Codec for signed 32-bit integers (two's complement)."""

    data_type = DataType.INT32

    def _from_big_endian(self, window: bytes) -> int:
        return convert_to_signed_int32(struct.unpack(">I", window)[0])

    def _to_big_endian(self, value: Number) -> bytes:
        return struct.pack(">i", int(value))


class Float32Codec(ValueCodecStrategy):
    """Codec for IEEE 754 single precision floats."""

    data_type = DataType.FLOAT32

    def _from_big_endian(self, window: bytes) -> float:
        return struct.unpack(">f", window)[0]

    def _to_big_endian(self, value: Number) -> bytes:
        return struct.pack(">f", float(value))


class CodecFactory:
    """Factory for creating appropriate codec based on data type."""

    _codecs = {
        DataType.UINT16: UInt16Codec(),
        DataType.INT16: Int16Codec(),
        DataType.UINT32: UInt32Codec(),
        DataType.INT32: Int32Codec(),
        DataType.FLOAT32: Float32Codec(),
    }

    @classmethod
    def get_codec(cls, data_type: Union[DataType, str]) -> ValueCodecStrategy:
        """Get codec for data type.

        Args:
            data_type: DataType member or its string tag (uint16, int16, ...)

        Returns:
            Appropriate codec instance

        Raises:
            ValueError: If data type unknown

        Example:
            >>> codec = CodecFactory.get_codec("int16")
            >>> codec.decode(bytes([0xFF, 0x9C]))
            -100
        """
        if not isinstance(data_type, DataType):
            try:
                data_type = DataType(str(data_type).lower())
            except ValueError:
                raise ValueError(f"Unknown data type: {data_type}") from None
        return cls._codecs[data_type]

    @classmethod
    def get_supported_types(cls) -> list[str]:
        """Get list of supported data types.

        Returns:
            List of data type strings
        """
        return [data_type.value for data_type in cls._codecs]
