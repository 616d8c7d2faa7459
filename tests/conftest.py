"""Pytest configuration and fixtures for Modbus LoRaWAN codec tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to Python path so we can import modbus_lorawan
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from modbus_lorawan.domain.entities import RegisterCatalog, RegisterDefinition
from modbus_lorawan.infrastructure.protocol import FrameEncoder, FrameParser


@pytest.fixture
def climate_controller_registers() -> dict[int, RegisterDefinition]:
    """Register table of the climate controller (slave 1)."""
    return {
        0: RegisterDefinition("temperature", "int16", scale=1000),
        1: RegisterDefinition(
            "status",
            "uint16",
            bitmask={
                0: "system_ok",
                1: "heater_on",
                2: "fan_on",
                3: "error_flag",
            },
        ),
        2: RegisterDefinition("energy_total", "uint32"),
    }


@pytest.fixture
def air_quality_registers() -> dict[int, RegisterDefinition]:
    """Register table of the air quality sensor (slave 2)."""
    return {
        0: RegisterDefinition("co2", "uint16"),
        1: RegisterDefinition("voc", "float32", endian="mixed"),
        3: RegisterDefinition("power", "int32", scale=10, endian="little"),
    }


@pytest.fixture
def catalog(climate_controller_registers, air_quality_registers) -> RegisterCatalog:
    """Catalog with both sample devices."""
    return RegisterCatalog(
        {
            1: climate_controller_registers,
            2: air_quality_registers,
        }
    )


@pytest.fixture
def parser(catalog) -> FrameParser:
    """Frame parser over the sample catalog."""
    return FrameParser(catalog)


@pytest.fixture
def encoder() -> FrameEncoder:
    """Write frame encoder."""
    return FrameEncoder()


@pytest.fixture
def climate_frame() -> bytes:
    """Full read response from the climate controller.

    temperature 0x4C08 (19464 -> 19.464), status 0x0006,
    energy_total 0x00012345 (74565).
    """
    return bytes(
        [0x01, 0x03, 0x08, 0x4C, 0x08, 0x00, 0x06, 0x00, 0x01, 0x23, 0x45]
    )


@pytest.fixture
def air_quality_frame() -> bytes:
    """Full read response from the air quality sensor.

    co2 0x0190 (400), voc 12.5 (0x41480000 word swapped),
    power -12345 little-endian (-> -1234.5 at scale 10).
    """
    return bytes(
        [
            0x02, 0x03, 0x0A,
            0x01, 0x90,
            0x00, 0x00, 0x41, 0x48,
            0xC7, 0xCF, 0xFF, 0xFF,
        ]
    )
