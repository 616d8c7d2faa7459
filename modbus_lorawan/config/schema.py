"""Voluptuous schemas for the YAML device catalog.

Catalog file layout (version 1 or 1.x):

    version: "1.0"
    devices:
      <slave address>:
        <register index>:
          name: temperature
          type: int16          # uint16 | int16 | uint32 | int32 | float32
          scale: 1000          # optional, default 1
          endian: big          # optional, big | little | mixed
          bitmask:             # optional, uint16 only
            0: system_ok

Slave addresses, register indices and bit numbers must be integers or
all-digit strings. Keys that name the same number twice are rejected.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping

import voluptuous as vol

from ..const import (
    MAX_BIT_INDEX,
    MAX_SLAVE_ADDRESS,
    SUPPORTED_CATALOG_MAJOR_VERSION,
)
from ..domain.value_objects import DataType, Endianness

DATA_TYPES = [data_type.value for data_type in DataType]
ENDIANNESS = [endian.value for endian in Endianness]


def strict_int(value: Any) -> int:
    """Accept an int or an all-digit string, never a bool or a float."""
    if isinstance(value, bool):
        raise vol.Invalid(f"expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise vol.Invalid(f"expected an integer, got {value!r}")


def positive_number(value: Any) -> float:
    """Accept a finite int or float greater than zero, never a bool."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise vol.Invalid(f"expected a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise vol.Invalid(f"must be a positive finite number, got {value!r}")
    return float(value)


def distinct_int_keys(value: Any) -> Any:
    """Reject mappings where two keys convert to the same integer."""
    if not isinstance(value, Mapping):
        raise vol.Invalid(f"expected a mapping, got {type(value).__name__}")

    seen: dict[int, Any] = {}
    for key in value:
        try:
            number = strict_int(key)
        except vol.Invalid:
            # reported by the key schema
            continue
        if number in seen:
            raise vol.Invalid(f"keys {seen[number]!r} and {key!r} both mean {number}")
        seen[number] = key

    return dict(value)


BITMASK_SCHEMA = vol.All(
    distinct_int_keys,
    vol.Schema(
        {
            vol.All(strict_int, vol.Range(min=0, max=MAX_BIT_INDEX)): vol.All(
                str, vol.Length(min=1)
            )
        }
    ),
)

REGISTER_SCHEMA = vol.Schema(
    {
        vol.Required("name"): vol.All(str, vol.Length(min=1)),
        vol.Required("type"): vol.All(str, vol.Lower, vol.In(DATA_TYPES)),
        vol.Optional("scale", default=1): positive_number,
        vol.Optional("endian", default="big"): vol.All(
            str, vol.Lower, vol.In(ENDIANNESS)
        ),
        vol.Optional("bitmask"): BITMASK_SCHEMA,
        vol.Optional("unit"): str,
        vol.Optional("description"): str,
    }
)

REGISTERS_SCHEMA = vol.All(
    distinct_int_keys,
    vol.Schema({vol.All(strict_int, vol.Range(min=0)): REGISTER_SCHEMA}),
)

DEVICES_SCHEMA = vol.All(
    distinct_int_keys,
    vol.Schema(
        {
            vol.All(strict_int, vol.Range(min=0, max=MAX_SLAVE_ADDRESS)): vol.Any(
                None, REGISTERS_SCHEMA
            )
        }
    ),
)

CATALOG_SCHEMA = vol.Schema(
    {
        vol.Required("version"): vol.All(
            vol.Coerce(str),
            vol.Match(
                "^" + re.escape(SUPPORTED_CATALOG_MAJOR_VERSION) + r"(\.|$)"
            ),
        ),
        vol.Required("devices"): DEVICES_SCHEMA,
    }
)
