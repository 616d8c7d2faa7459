"""RegisterDefinition entity.

A RegisterDefinition describes how one logical register of a device is
laid out in the payload and how it is turned into an output field.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from ..exceptions import InvalidRegisterDefinitionError
from ..helpers.bitmask import expand_bitmask
from ..helpers.transformations import apply_scaling
from ..strategies.value_codec_strategy import CodecFactory
from ..value_objects.data_type import DataType
from ..value_objects.decoded_frame import DecodedValue
from ..value_objects.endianness import Endianness
from ...const import MAX_BIT_INDEX


@dataclass(frozen=True)
class RegisterDefinition:
    """Immutable description of a catalog register.

    Attributes:
        name: Output field name
        data_type: How the register bytes are interpreted
        scale: Divisor applied to the reconstructed value (default: 1)
        endian: Byte order of the value in the payload (default: big)
        bitmask: Optional bit index to flag name table (uint16 only).
            When present the register decodes to a dict of booleans and
            scale is not applied.

    String tags are accepted for ``data_type`` and ``endian`` and converted
    to their enum members.

    Example:
        >>> temperature = RegisterDefinition(
        ...     name="temperature", data_type="int16", scale=1000
        ... )
        >>> temperature.decode(bytes([0xFF, 0x9C]))
        -0.1
    """

    name: str
    data_type: DataType = DataType.UINT16
    scale: float = 1.0
    endian: Endianness = Endianness.BIG
    bitmask: Optional[Mapping[int, str]] = None

    def __post_init__(self) -> None:
        """Validate the definition and freeze the bitmask table.

        Raises:
            InvalidRegisterDefinitionError: If any field is malformed
        """
        if not isinstance(self.name, str) or not self.name:
            raise InvalidRegisterDefinitionError(
                f"Register name must be a non-empty string, got {self.name!r}"
            )

        object.__setattr__(
            self, "data_type", self._coerce(DataType, self.data_type, "data type")
        )
        object.__setattr__(
            self, "endian", self._coerce(Endianness, self.endian, "endianness")
        )

        if (
            isinstance(self.scale, bool)
            or not isinstance(self.scale, (int, float))
            or not math.isfinite(self.scale)
            or self.scale <= 0
        ):
            raise InvalidRegisterDefinitionError(
                f"Register '{self.name}': scale must be a positive number, "
                f"got {self.scale!r}"
            )

        if self.bitmask is not None:
            if self.data_type is not DataType.UINT16:
                raise InvalidRegisterDefinitionError(
                    f"Register '{self.name}': bitmask is only supported on "
                    f"uint16 registers, not {self.data_type.value}"
                )
            object.__setattr__(
                self, "bitmask", MappingProxyType(self._validate_bits(self.bitmask))
            )

    def _coerce(self, enum_cls, value, label: str):
        if isinstance(value, enum_cls):
            return value
        try:
            return enum_cls(str(value).lower())
        except ValueError:
            allowed = ", ".join(member.value for member in enum_cls)
            raise InvalidRegisterDefinitionError(
                f"Register '{self.name}': unknown {label} {value!r} "
                f"(expected one of: {allowed})"
            ) from None

    def _validate_bits(self, bits: Mapping[int, str]) -> Dict[int, str]:
        validated = {}
        for bit, flag in bits.items():
            if isinstance(bit, bool) or not isinstance(bit, int):
                raise InvalidRegisterDefinitionError(
                    f"Register '{self.name}': bit index must be an integer, "
                    f"got {bit!r}"
                )
            if not 0 <= bit <= MAX_BIT_INDEX:
                raise InvalidRegisterDefinitionError(
                    f"Register '{self.name}': bit index {bit} outside 0-{MAX_BIT_INDEX}"
                )
            if not isinstance(flag, str) or not flag:
                raise InvalidRegisterDefinitionError(
                    f"Register '{self.name}': bit {bit} needs a flag name"
                )
            validated[bit] = flag
        return validated

    @property
    def register_count(self) -> int:
        """Number of 16-bit registers this definition spans."""
        return self.data_type.register_count

    @property
    def byte_width(self) -> int:
        """Number of payload bytes this definition consumes."""
        return self.data_type.byte_width

    @property
    def is_bitmask(self) -> bool:
        """True if the register decodes to flags instead of a number."""
        return self.bitmask is not None

    def decode(self, window: bytes) -> DecodedValue:
        """Decode this register's payload bytes into its output value.

        Args:
            window: Exactly ``byte_width`` payload bytes

        Returns:
            Scaled float, or a flag dict for bitmask registers
        """
        codec = CodecFactory.get_codec(self.data_type)
        raw_value = codec.decode(window, self.endian)

        if self.bitmask is not None:
            return expand_bitmask(raw_value, self.bitmask)

        return apply_scaling(raw_value, self.scale)
