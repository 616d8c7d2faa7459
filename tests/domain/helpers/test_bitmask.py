"""Tests for bit flag expansion."""

from modbus_lorawan.domain.helpers import expand_bitmask

STATUS_BITS = {0: "system_ok", 1: "heater_on", 2: "fan_on", 3: "error_flag"}


class TestExpandBitmask:
    """Test expand_bitmask function."""

    def test_documented_example(self):
        """Test 0b0110 sets heater_on and fan_on only."""
        assert expand_bitmask(0b00000110, STATUS_BITS) == {
            "system_ok": False,
            "heater_on": True,
            "fan_on": True,
            "error_flag": False,
        }

    def test_unlisted_bits_not_reported(self):
        """Test bits outside the table are ignored."""
        flags = expand_bitmask(0xFFFF, {15: "alarm"})
        assert flags == {"alarm": True}

    def test_high_bit(self):
        """Test bit 15 is read from the top of the word."""
        assert expand_bitmask(0x8000, {15: "alarm", 0: "ok"}) == {
            "alarm": True,
            "ok": False,
        }

    def test_output_follows_table_order(self):
        """Test output order matches the table, not bit order."""
        flags = expand_bitmask(0, {3: "c", 0: "a", 1: "b"})
        assert list(flags) == ["c", "a", "b"]

    def test_empty_table(self):
        """Test empty table yields empty flags."""
        assert expand_bitmask(0x1234, {}) == {}

    def test_values_are_booleans(self):
        """Test flags are real booleans, not bit values."""
        flags = expand_bitmask(0b100, {2: "fan_on"})
        assert flags["fan_on"] is True
