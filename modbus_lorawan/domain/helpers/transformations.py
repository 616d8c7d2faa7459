"""Value transformation helper functions.

This module provides utilities for transforming register values including
byte reordering, signed conversion and scaling.
"""

import math
from typing import Union

from ..value_objects.endianness import Endianness


def reorder_bytes(window: bytes, endian: Endianness) -> bytes:
    """Reorder a register byte window into big-endian order.

    Args:
        window: 2 or 4 bytes as they appear in the payload
        endian: Byte order the device used for this value

    Returns:
        The same bytes in most-significant-first order

    Examples:
        >>> reorder_bytes(bytes([0x01, 0x02]), Endianness.LITTLE).hex()
        '0201'
        >>> reorder_bytes(bytes([0x01, 0x02, 0x03, 0x04]), Endianness.MIXED).hex()
        '03040102'
        >>> reorder_bytes(bytes([0x01, 0x02]), Endianness.MIXED).hex()
        '0102'
    """
    if endian is Endianness.BIG:
        return bytes(window)
    if endian is Endianness.LITTLE:
        return bytes(reversed(window))
    if endian is Endianness.MIXED:
        # Word swap; a single register has nothing to swap
        if len(window) == 4:
            return bytes(window[2:4]) + bytes(window[0:2])
        return bytes(window)
    raise ValueError(f"Unknown endianness: {endian}")


def convert_to_signed_int16(value: int) -> int:
    """Convert unsigned 16-bit to signed 16-bit.

    Uses two's complement representation. Values >= 0x8000 are negative.

    Args:
        value: Unsigned 16-bit integer (0-65535)

    Returns:
        Signed 16-bit integer (-32768 to 32767)

    Examples:
        >>> convert_to_signed_int16(0x7FFF)
        32767
        >>> convert_to_signed_int16(0xFF9C)
        -100
    """
    if value & 0x8000:
        return value - 0x10000
    return value


def convert_to_signed_int32(value: int) -> int:
    """Convert unsigned 32-bit to signed 32-bit.

    Args:
        value: Unsigned 32-bit integer (0-4294967295)

    Returns:
        Signed 32-bit integer

    Examples:
        >>> convert_to_signed_int32(0xFFFFFFFF)
        -1
        >>> convert_to_signed_int32(0x7FFFFFFF)
        2147483647
    """
    if value & 0x80000000:
        return value - 0x100000000
    return value


def apply_scaling(value: Union[int, float], scale: float = 1.0) -> float:
    """Divide a reconstructed value by its scale.

    Scale is a divisor: a device reporting milli-degrees has scale 1000.
    The result is always a float, even for integer inputs.

    Args:
        value: Reconstructed raw value
        scale: Positive, finite divisor (default: 1.0)

    Returns:
        Scaled value as float

    Raises:
        ValueError: If scale is zero, negative or not finite

    Examples:
        >>> apply_scaling(19464, 1000)
        19.464
        >>> apply_scaling(450, 10)
        45.0
        >>> apply_scaling(812)
        812.0
    """
    if not math.isfinite(scale) or scale <= 0:
        raise ValueError(f"Scale must be a positive finite number, got {scale}")
    return value / scale
