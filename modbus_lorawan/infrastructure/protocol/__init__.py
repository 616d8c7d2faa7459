"""Modbus frame codec implementations.

This module contains implementations of the frame interfaces defined in
the domain layer.
"""

from .frame_encoder import FrameEncoder
from .frame_parser import FrameParser

__all__ = [
    "FrameEncoder",
    "FrameParser",
]
