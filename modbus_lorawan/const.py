"""Constants for the Modbus LoRaWAN payload codec.

Register layouts are not defined here; they live in the YAML device
catalog (config/devices.yaml).
"""

from __future__ import annotations

# Modbus function codes
FUNC_WRITE_SINGLE = 0x06
FUNC_WRITE_MULTIPLE = 0x10

# Frame layout
HEADER_SIZE = 3  # slave address + function code + byte count
REGISTER_SIZE = 2  # bytes per 16-bit holding register

# Address and value limits
MAX_SLAVE_ADDRESS = 247
MAX_BIT_INDEX = 15

# Synthetic field name for registers missing from the catalog
FALLBACK_FIELD_TEMPLATE = "register_{index}"

# Device catalog
DEFAULT_CATALOG_FILENAME = "devices.yaml"
SUPPORTED_CATALOG_MAJOR_VERSION = "1"

# Error messages surfaced to the network server
ERROR_NO_PAYLOAD = "No payload bytes found."
ERROR_MISSING_FIELDS = (
    "Missing required fields: slaveAddress, functionCode, register, values"
)
ERROR_UNSUPPORTED_FUNCTION = "Unsupported function code. Use 6 (0x06) or 16 (0x10)."

# Write Multiple Registers (0x10) accepts at most 123 registers per request
MAX_WRITE_REGISTERS = 123
