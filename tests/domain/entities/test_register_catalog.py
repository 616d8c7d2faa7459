"""Tests for RegisterCatalog entity."""

import pytest

from modbus_lorawan.domain.entities import RegisterCatalog, RegisterDefinition
from modbus_lorawan.domain.exceptions import InvalidRegisterDefinitionError


class TestRegisterCatalog:
    """Test catalog lookup and immutability."""

    def test_registers_for_known_slave(self, catalog):
        """Test lookup returns the device table."""
        table = catalog.registers_for(1)
        assert table[0].name == "temperature"
        assert table[2].name == "energy_total"

    def test_registers_for_unknown_slave_is_empty(self, catalog):
        """Test unmapped slave addresses yield an empty table."""
        assert len(catalog.registers_for(99)) == 0

    def test_tables_are_read_only(self, catalog):
        """Test register tables cannot be mutated."""
        with pytest.raises(TypeError):
            catalog.registers_for(1)[5] = RegisterDefinition("x")

    def test_source_mapping_changes_do_not_leak(self):
        """Test the catalog copies its input."""
        table = {0: RegisterDefinition("co2")}
        catalog = RegisterCatalog({3: table})
        table[1] = RegisterDefinition("voc")
        assert list(catalog.registers_for(3)) == [0]

    def test_tables_ordered_by_index(self):
        """Test indices iterate in ascending order."""
        catalog = RegisterCatalog(
            {1: {2: RegisterDefinition("b"), 0: RegisterDefinition("a")}}
        )
        assert list(catalog.registers_for(1)) == [0, 2]

    def test_container_protocol(self, catalog):
        """Test membership, length and iteration."""
        assert 1 in catalog
        assert 3 not in catalog
        assert len(catalog) == 2
        assert list(catalog) == [1, 2]
        assert catalog.slave_addresses == (1, 2)

    @pytest.mark.parametrize("slave_address", [-1, 248, "1"])
    def test_invalid_slave_address_rejected(self, slave_address):
        """Test slave addresses must be 0-247 integers."""
        with pytest.raises(InvalidRegisterDefinitionError, match="Slave address"):
            RegisterCatalog({slave_address: {}})

    def test_negative_index_rejected(self):
        """Test register indices must be non-negative."""
        with pytest.raises(InvalidRegisterDefinitionError, match="register index"):
            RegisterCatalog({1: {-1: RegisterDefinition("x")}})

    def test_non_definition_rejected(self):
        """Test table values must be RegisterDefinitions."""
        with pytest.raises(InvalidRegisterDefinitionError, match="RegisterDefinition"):
            RegisterCatalog({1: {0: {"name": "x", "type": "uint16"}}})


class TestFindOverlaps:
    """Test detection of unreachable definitions."""

    def test_no_overlaps_in_sample_catalog(self, catalog):
        """Test index gaps after 32-bit registers are respected."""
        assert catalog.find_overlaps() == []

    def test_definition_inside_32bit_register(self):
        """Test a definition on the second word of a 32-bit register is found."""
        catalog = RegisterCatalog(
            {
                4: {
                    0: RegisterDefinition("energy", "uint32"),
                    1: RegisterDefinition("hidden"),
                }
            }
        )
        assert catalog.find_overlaps() == [(4, 1, 0)]
