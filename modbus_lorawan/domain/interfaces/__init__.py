"""Domain interfaces (ports) for the codec.

The application layer depends on these abstractions; the infrastructure
layer provides the implementations.
"""

from .i_frame_encoder import IFrameEncoder
from .i_frame_parser import IFrameParser

__all__ = [
    "IFrameEncoder",
    "IFrameParser",
]
