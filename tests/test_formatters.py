"""End-to-end tests for the payload formatter hooks."""

import base64

from modbus_lorawan import build_catalog, decode_uplink, encode_downlink


class TestDecodeUplink:
    """Test decode_uplink with the packaged catalog."""

    def test_documented_example(self):
        """Test 01 03 02 FF 9C -> temperature = -0.1."""
        assert decode_uplink({"bytes": [0x01, 0x03, 0x02, 0xFF, 0x9C]}) == {
            "data": {
                "slaveAddress": 1,
                "functionCode": 3,
                "values": {"temperature": -0.1},
            }
        }

    def test_status_flags(self):
        """Test the packaged status bitmask."""
        output = decode_uplink({"bytes": [0x01, 0x03, 0x04, 0x4C, 0x08, 0x00, 0x06]})
        assert output["data"]["values"]["status"] == {
            "system_ok": False,
            "heater_on": True,
            "fan_on": True,
            "error_flag": False,
            "maintenance_required": False,
        }

    def test_base64_envelope(self):
        """Test TTN v3 envelope without bytes."""
        frm_payload = base64.b64encode(bytes([0x01, 0x03, 0x02, 0xFF, 0x9C])).decode()
        output = decode_uplink({"uplink_message": {"frm_payload": frm_payload}})
        assert output["data"]["values"] == {"temperature": -0.1}

    def test_custom_catalog(self):
        """Test a caller-supplied catalog replaces the packaged one."""
        catalog = build_catalog({1: {0: {"name": "level", "type": "uint16", "scale": 10}}})
        output = decode_uplink({"bytes": [0x01, 0x03, 0x02, 0x01, 0xC2]}, catalog=catalog)
        assert output["data"]["values"] == {"level": 45.0}

    def test_include_raw(self):
        """Test raw dump through the hook."""
        output = decode_uplink(
            {"bytes": [0x01, 0x03, 0x02, 0xFF, 0x9C]}, include_raw=True
        )
        assert output["data"]["registers"] == [{"index": 0, "rawValue": 0xFF9C}]

    def test_no_payload(self):
        """Test error object."""
        assert decode_uplink({}) == {"errors": ["No payload bytes found."]}


class TestEncodeDownlink:
    """Test encode_downlink."""

    def test_write_multiple(self):
        """Test functionCode=16, register=0, values=[10, 20]."""
        assert encode_downlink(
            {"slaveAddress": 1, "functionCode": 16, "register": 0, "values": [10, 20]}
        ) == {"bytes": [1, 16, 0, 0, 0, 2, 4, 0, 10, 0, 20]}

    def test_unsupported_function_code(self):
        """Test functionCode=5 returns errors and no bytes."""
        output = encode_downlink(
            {"slaveAddress": 1, "functionCode": 5, "register": 0, "values": [1]}
        )
        assert "bytes" not in output
        assert len(output["errors"]) == 1
