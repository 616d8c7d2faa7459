"""Byte order conventions for multi-byte register values."""

from enum import Enum


class Endianness(Enum):
    """Byte order of a register value inside the payload.

    BIG is the Modbus standard (most significant byte first). LITTLE is a
    full reversal of the value's bytes. MIXED is a word swap: the two 16-bit
    registers of a 32-bit value arrive in reverse register order while each
    register keeps its big-endian byte order, so ``[b0, b1, b2, b3]`` is read
    as ``[b2, b3, b0, b1]``.
    """

    BIG = "big"
    LITTLE = "little"
    MIXED = "mixed"
