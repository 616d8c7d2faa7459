"""RegisterCatalog entity.

The catalog maps each Modbus slave address to the register layout of the
device behind it. It is built once and never mutated, so it can be shared
freely between threads.
"""

from types import MappingProxyType
from typing import Iterator, List, Mapping, Tuple

from ..exceptions import InvalidRegisterDefinitionError
from .register_definition import RegisterDefinition
from ...const import MAX_SLAVE_ADDRESS

_EMPTY_TABLE: Mapping[int, RegisterDefinition] = MappingProxyType({})


class RegisterCatalog:
    """Immutable table of slave address -> register index -> definition.

    The register index is the word offset of the register from the start
    of the frame's register data. A 32-bit register at index ``i`` covers
    indices ``i`` and ``i + 1``; the next register starts at ``i + 2``.

    Example:
        >>> catalog = RegisterCatalog({
        ...     1: {0: RegisterDefinition("temperature", "int16", scale=1000)},
        ... })
        >>> catalog.registers_for(1)[0].name
        'temperature'
        >>> len(catalog.registers_for(9))
        0
    """

    def __init__(
        self, devices: Mapping[int, Mapping[int, RegisterDefinition]]
    ) -> None:
        """Build the catalog.

        Args:
            devices: Slave address to register table

        Raises:
            InvalidRegisterDefinitionError: If an address, index or
                definition is invalid
        """
        for slave_address in devices:
            self._validate_slave_address(slave_address)

        frozen = {}
        for slave_address in sorted(devices):
            table = devices[slave_address]
            for index in table:
                if isinstance(index, bool) or not isinstance(index, int) or index < 0:
                    raise InvalidRegisterDefinitionError(
                        f"Slave {slave_address}: register index must be a "
                        f"non-negative integer, got {index!r}"
                    )

            registers = {}
            for index in sorted(table):
                definition = table[index]
                if not isinstance(definition, RegisterDefinition):
                    raise InvalidRegisterDefinitionError(
                        f"Slave {slave_address}, register {index}: expected "
                        f"RegisterDefinition, got {type(definition).__name__}"
                    )
                registers[index] = definition
            frozen[slave_address] = MappingProxyType(registers)

        self._devices: Mapping[int, Mapping[int, RegisterDefinition]] = (
            MappingProxyType(frozen)
        )

    @staticmethod
    def _validate_slave_address(slave_address: int) -> None:
        if (
            isinstance(slave_address, bool)
            or not isinstance(slave_address, int)
            or not 0 <= slave_address <= MAX_SLAVE_ADDRESS
        ):
            raise InvalidRegisterDefinitionError(
                f"Slave address must be 0-{MAX_SLAVE_ADDRESS}, got {slave_address!r}"
            )

    def registers_for(self, slave_address: int) -> Mapping[int, RegisterDefinition]:
        """Get the register table of a device.

        Args:
            slave_address: Modbus slave address from the frame header

        Returns:
            Read-only register table, empty if the device is unknown
        """
        return self._devices.get(slave_address, _EMPTY_TABLE)

    @property
    def slave_addresses(self) -> Tuple[int, ...]:
        """Addresses of all devices in the catalog, ascending."""
        return tuple(self._devices)

    def find_overlaps(self) -> List[Tuple[int, int, int]]:
        """Find definitions hidden inside a preceding 32-bit register.

        Such definitions are never reached by the frame parser.

        Returns:
            (slave address, hidden index, covering index) triples
        """
        overlaps = []
        for slave_address, table in self._devices.items():
            for index, definition in table.items():
                for covered in range(index + 1, index + definition.register_count):
                    if covered in table:
                        overlaps.append((slave_address, covered, index))
        return overlaps

    def __contains__(self, slave_address: object) -> bool:
        return slave_address in self._devices

    def __iter__(self) -> Iterator[int]:
        return iter(self._devices)

    def __len__(self) -> int:
        return len(self._devices)

    def __repr__(self) -> str:
        return f"RegisterCatalog(devices={list(self._devices)})"
