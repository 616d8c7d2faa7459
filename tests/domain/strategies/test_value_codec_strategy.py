"""Tests for value codec strategies."""

import math
import struct

import pytest

from modbus_lorawan.domain.strategies.value_codec_strategy import (
    CodecFactory,
    Float32Codec,
    Int16Codec,
    Int32Codec,
    UInt16Codec,
    UInt32Codec,
)
from modbus_lorawan.domain.value_objects import DataType, Endianness


class TestUInt16Codec:
    """Test unsigned 16-bit codec."""

    def test_decode_big_endian(self):
        """Test most significant byte first."""
        assert UInt16Codec().decode(b"\x4C\x08") == 19464

    def test_decode_little_endian(self):
        """Test swapped bytes."""
        assert UInt16Codec().decode(b"\x08\x4C", Endianness.LITTLE) == 19464

    def test_decode_full_range(self):
        """Test maximum value stays unsigned."""
        assert UInt16Codec().decode(b"\xFF\xFF") == 65535

    def test_decode_wrong_width_raises(self):
        """Test window length is checked."""
        with pytest.raises(ValueError, match="needs 2 bytes"):
            UInt16Codec().decode(b"\x01")

    def test_encode(self):
        """Test encode to big-endian bytes."""
        assert UInt16Codec().encode(300) == b"\x01\x2C"

    def test_encode_out_of_range_raises(self):
        """Test values above 0xFFFF cannot be packed."""
        with pytest.raises(struct.error):
            UInt16Codec().encode(0x10000)


class TestInt16Codec:
    """Test signed 16-bit codec."""

    def test_decode_negative(self):
        """Test two's complement conversion."""
        assert Int16Codec().decode(b"\xFF\x9C") == -100

    def test_decode_positive(self):
        """Test values without sign bit."""
        assert Int16Codec().decode(b"\x00\x64") == 100

    def test_decode_little_endian_negative(self):
        """Test reordering happens before sign conversion."""
        assert Int16Codec().decode(b"\x9C\xFF", Endianness.LITTLE) == -100

    def test_encode_negative(self):
        """Test negative values encode as two's complement."""
        assert Int16Codec().encode(-100) == b"\xFF\x9C"


class TestUInt32Codec:
    """Test unsigned 32-bit codec."""

    def test_decode_big_endian(self):
        """Test four bytes combine most significant first."""
        assert UInt32Codec().decode(b"\x00\x01\x23\x45") == 74565

    def test_decode_no_signed_overflow(self):
        """Test values above 2^31 stay positive."""
        assert UInt32Codec().decode(b"\xFF\xFF\xFF\xFF") == 4294967295
        assert UInt32Codec().decode(b"\x80\x00\x00\x00") == 2147483648

    def test_decode_little_endian(self):
        """Test full reversal."""
        assert UInt32Codec().decode(b"\x45\x23\x01\x00", Endianness.LITTLE) == 74565

    def test_decode_mixed_endian(self):
        """Test word swap."""
        assert UInt32Codec().decode(b"\x23\x45\x00\x01", Endianness.MIXED) == 74565

    def test_decode_wrong_width_raises(self):
        """Test window length is checked."""
        with pytest.raises(ValueError, match="needs 4 bytes"):
            UInt32Codec().decode(b"\x00\x01")


class TestInt32Codec:
    """Test signed 32-bit codec."""

    def test_decode_negative(self):
        """Test two's complement at 0x80000000."""
        assert Int32Codec().decode(b"\xFF\xFF\xCF\xC7") == -12345

    def test_decode_little_endian_negative(self):
        """Test reversed bytes of a negative value."""
        assert Int32Codec().decode(b"\xC7\xCF\xFF\xFF", Endianness.LITTLE) == -12345

    def test_decode_minimum(self):
        """Test most negative value."""
        assert Int32Codec().decode(b"\x80\x00\x00\x00") == -2147483648

    def test_encode_mixed_roundtrip(self):
        """Test encoding applies the same word swap as decoding."""
        codec = Int32Codec()
        encoded = codec.encode(-12345, Endianness.MIXED)
        assert encoded == b"\xCF\xC7\xFF\xFF"
        assert codec.decode(encoded, Endianness.MIXED) == -12345


class TestFloat32Codec:
    """Test IEEE 754 float codec."""

    def test_decode_big_endian(self):
        """Test plain big-endian float."""
        assert Float32Codec().decode(b"\x41\x48\x00\x00") == 12.5

    def test_decode_mixed_endian(self):
        """Test registers in reverse order are word swapped before decoding."""
        assert Float32Codec().decode(b"\x00\x00\x41\x48", Endianness.MIXED) == 12.5

    def test_decode_mixed_endian_pi(self):
        """Test word swap with non-zero low word."""
        # 3.14159 -> 0x40490FD0, low word first on the wire
        value = Float32Codec().decode(b"\x0F\xD0\x40\x49", Endianness.MIXED)
        assert value == pytest.approx(3.14159, rel=1e-6)

    def test_decode_little_endian(self):
        """Test full reversal."""
        assert Float32Codec().decode(b"\x00\x00\xC0\x3F", Endianness.LITTLE) == 1.5

    def test_decode_nan(self):
        """Test NaN payloads come through as NaN."""
        assert math.isnan(Float32Codec().decode(b"\x7F\xC0\x00\x00"))


class TestCodecFactory:
    """Test codec factory."""

    @pytest.mark.parametrize(
        "data_type,codec_cls",
        [
            (DataType.UINT16, UInt16Codec),
            (DataType.INT16, Int16Codec),
            (DataType.UINT32, UInt32Codec),
            (DataType.INT32, Int32Codec),
            (DataType.FLOAT32, Float32Codec),
        ],
    )
    def test_get_codec_by_enum(self, data_type, codec_cls):
        """Test every data type has a codec."""
        assert isinstance(CodecFactory.get_codec(data_type), codec_cls)

    def test_get_codec_by_string(self):
        """Test string tags are accepted, case insensitive."""
        assert isinstance(CodecFactory.get_codec("FLOAT32"), Float32Codec)

    def test_unknown_type_raises(self):
        """Test unknown data type raises ValueError."""
        with pytest.raises(ValueError, match="Unknown data type"):
            CodecFactory.get_codec("float64")

    def test_supported_types(self):
        """Test all five types are listed."""
        assert CodecFactory.get_supported_types() == [
            "uint16",
            "int16",
            "uint32",
            "int32",
            "float32",
        ]

    def test_byte_width(self):
        """Test byte width follows the data type."""
        assert CodecFactory.get_codec("int16").byte_width == 2
        assert CodecFactory.get_codec("int32").byte_width == 4
