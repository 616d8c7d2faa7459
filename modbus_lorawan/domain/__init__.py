"""Domain layer for the Modbus LoRaWAN payload codec.

This layer contains:
- Value Objects: Immutable domain primitives (frames, type and byte order tags)
- Entities: Register definitions and the device catalog
- Strategies: Per-datatype value codecs
- Helpers: Pure transformation functions

The domain layer has ZERO dependencies on external libraries (except Python stdlib).
"""
