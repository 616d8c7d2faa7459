"""Device catalog loader.

Register layouts live in versioned YAML files. They are validated with the
voluptuous schemas in ``config.schema`` and turned into an immutable
RegisterCatalog.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Mapping

import voluptuous as vol
import yaml

from .config.schema import CATALOG_SCHEMA, DEVICES_SCHEMA
from .const import DEFAULT_CATALOG_FILENAME
from .domain.entities import RegisterCatalog, RegisterDefinition
from .domain.exceptions import CatalogLoadError

_LOGGER = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "config" / DEFAULT_CATALOG_FILENAME

_default_catalog: RegisterCatalog | None = None
_default_catalog_lock = threading.Lock()


def load_register_catalog(path: str | Path | None = None) -> RegisterCatalog:
    """Load and validate a device catalog from YAML.

    Args:
        path: Catalog file (default: the packaged devices.yaml)

    Returns:
        Immutable RegisterCatalog

    Raises:
        CatalogLoadError: If the file is missing, unreadable or invalid
        InvalidRegisterDefinitionError: If a register definition is malformed
    """
    config_file = Path(path) if path is not None else DEFAULT_CATALOG_PATH

    if not config_file.exists():
        raise CatalogLoadError(f"Catalog file not found: {config_file}")

    try:
        config = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    except yaml.YAMLError as err:
        raise CatalogLoadError(f"Invalid YAML in {config_file}: {err}") from err
    except OSError as err:
        raise CatalogLoadError(f"Cannot read {config_file}: {err}") from err

    if not config:
        raise CatalogLoadError(f"Catalog file is empty: {config_file}")

    try:
        config = CATALOG_SCHEMA(config)
    except vol.Invalid as err:
        raise CatalogLoadError(f"Invalid catalog {config_file}: {err}") from err

    catalog = _build_validated(config["devices"])

    _LOGGER.info(
        "Loaded device catalog %s (version %s): %d devices",
        config_file.name,
        config["version"],
        len(catalog),
    )

    return catalog


def build_catalog(devices: Mapping[Any, Any]) -> RegisterCatalog:
    """Build a catalog from a plain mapping.

    The mapping has the same shape as the ``devices`` section of a catalog
    file: slave address -> register index -> register fields.

    Args:
        devices: Raw device mapping

    Returns:
        Immutable RegisterCatalog

    Raises:
        CatalogLoadError: If the mapping fails schema validation

    Example:
        >>> catalog = build_catalog({
        ...     1: {0: {"name": "temperature", "type": "int16", "scale": 1000}},
        ... })
        >>> catalog.registers_for(1)[0].scale
        1000.0
    """
    try:
        validated = DEVICES_SCHEMA(devices)
    except vol.Invalid as err:
        raise CatalogLoadError(f"Invalid device mapping: {err}") from err

    return _build_validated(validated)


def _build_validated(devices: Mapping[int, Any]) -> RegisterCatalog:
    """Create RegisterDefinitions from schema-validated data."""
    tables = {}
    for slave_address, registers in devices.items():
        tables[slave_address] = {
            index: RegisterDefinition(
                name=fields["name"],
                data_type=fields["type"],
                scale=fields["scale"],
                endian=fields["endian"],
                bitmask=fields.get("bitmask"),
            )
            for index, fields in (registers or {}).items()
        }

    catalog = RegisterCatalog(tables)

    for slave_address, hidden, covering in catalog.find_overlaps():
        _LOGGER.warning(
            "Slave %d: register %d lies inside the 32-bit register at %d "
            "and will never be decoded",
            slave_address,
            hidden,
            covering,
        )

    return catalog


def get_default_catalog() -> RegisterCatalog:
    """Get the packaged device catalog, loading it on first use.

    The catalog is loaded at most once per process.

    Returns:
        Shared immutable RegisterCatalog
    """
    global _default_catalog

    if _default_catalog is None:
        with _default_catalog_lock:
            if _default_catalog is None:
                _default_catalog = load_register_catalog(DEFAULT_CATALOG_PATH)

    return _default_catalog
