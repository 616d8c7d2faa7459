"""Modbus RTU codec for LoRaWAN uplink and downlink payloads.

Decodes register read responses into named, typed, scaled values using a
per-device register catalog, and encodes write commands (0x06, 0x10) into
downlink frames.
"""

from .config_loader import build_catalog, get_default_catalog, load_register_catalog
from .domain.entities import RegisterCatalog, RegisterDefinition
from .domain.exceptions import (
    CatalogLoadError,
    InvalidEncodeValueError,
    InvalidRegisterDefinitionError,
    MissingEncodeFieldsError,
    ModbusCodecError,
    NoPayloadBytesError,
    OutOfRangeReadError,
    PayloadEncodingError,
    UnsupportedFunctionCodeError,
)
from .domain.value_objects import DataType, DecodedFrame, Endianness
from .formatters import decode_uplink, encode_downlink
from .infrastructure.protocol import FrameEncoder, FrameParser

__version__ = "1.0.0"

__all__ = [
    "CatalogLoadError",
    "DataType",
    "DecodedFrame",
    "Endianness",
    "FrameEncoder",
    "FrameParser",
    "InvalidEncodeValueError",
    "InvalidRegisterDefinitionError",
    "MissingEncodeFieldsError",
    "ModbusCodecError",
    "NoPayloadBytesError",
    "OutOfRangeReadError",
    "PayloadEncodingError",
    "RegisterCatalog",
    "RegisterDefinition",
    "UnsupportedFunctionCodeError",
    "build_catalog",
    "decode_uplink",
    "encode_downlink",
    "get_default_catalog",
    "load_register_catalog",
]
