"""Device catalog configuration."""

from .schema import CATALOG_SCHEMA, DEVICES_SCHEMA, REGISTER_SCHEMA

__all__ = [
    "CATALOG_SCHEMA",
    "DEVICES_SCHEMA",
    "REGISTER_SCHEMA",
]
