"""Domain helper functions."""

from .bitmask import expand_bitmask
from .transformations import (
    apply_scaling,
    convert_to_signed_int16,
    convert_to_signed_int32,
    reorder_bytes,
)

__all__ = [
    "apply_scaling",
    "convert_to_signed_int16",
    "convert_to_signed_int32",
    "expand_bitmask",
    "reorder_bytes",
]
