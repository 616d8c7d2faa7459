"""Domain strategies."""

from .value_codec_strategy import (
    CodecFactory,
    Float32Codec,
    Int16Codec,
    Int32Codec,
    UInt16Codec,
    UInt32Codec,
    ValueCodecStrategy,
)

__all__ = [
    "CodecFactory",
    "Float32Codec",
    "Int16Codec",
    "Int32Codec",
    "UInt16Codec",
    "UInt32Codec",
    "ValueCodecStrategy",
]
