"""Domain entities."""

from .register_catalog import RegisterCatalog
from .register_definition import RegisterDefinition

__all__ = [
    "RegisterCatalog",
    "RegisterDefinition",
]
