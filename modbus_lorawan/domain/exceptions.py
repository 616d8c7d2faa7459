"""Custom exceptions for the Modbus LoRaWAN payload codec.

Every error condition of the decode and encode paths is terminal for the
call. The application layer catches ``ModbusCodecError`` and reports the
message back to the network server; nothing here is retried.
"""


class ModbusCodecError(Exception):
    """Base class for all codec errors."""


class NoPayloadBytesError(ModbusCodecError):
    """The uplink envelope did not carry any payload bytes."""


class PayloadEncodingError(ModbusCodecError):
    """A payload field could not be converted to bytes.

    Raised for invalid base64 text in the TTN fallback fields, or for a byte
    list containing values outside 0-255.
    """


class OutOfRangeReadError(ModbusCodecError):
    """A read would go past the end of the available bytes.

    Raised when the payload is shorter than the 3-byte header, when the
    declared byte count exceeds the bytes actually supplied, or when a
    register's width does not fit into what is left of the register window.

    Example:
        >>> raise OutOfRangeReadError(
        ...     "Register 'energy_total' at index 2 needs 4 bytes, 2 remain"
        ... )
    """


class MissingEncodeFieldsError(ModbusCodecError):
    """A required downlink field is absent."""


class UnsupportedFunctionCodeError(ModbusCodecError):
    """The downlink function code is neither 0x06 nor 0x10."""


class InvalidEncodeValueError(ModbusCodecError, ValueError):
    """A downlink register value is not an integer."""


class InvalidRegisterDefinitionError(ModbusCodecError, ValueError):
    """A register definition in the device catalog is malformed.

    Catalog defects (zero scale, unknown data type, bitmask on a 32-bit
    register, ...) are reported when the catalog is built, never while a
    frame is being decoded.
    """


class CatalogLoadError(ModbusCodecError, ValueError):
    """The device catalog file could not be read or failed validation."""
