"""Payload formatter hooks for LoRaWAN network servers.

``decode_uplink`` and ``encode_downlink`` follow the TTN payload formatter
contract: they take the network server's input object and return either a
result object or ``{"errors": [message]}``.
"""

from __future__ import annotations

from typing import Any, Mapping

from .application.use_cases import DecodeUplinkUseCase, EncodeDownlinkUseCase
from .config_loader import get_default_catalog
from .domain.entities import RegisterCatalog
from .infrastructure.protocol import FrameEncoder, FrameParser


def decode_uplink(
    input: Mapping[str, Any],
    catalog: RegisterCatalog | None = None,
    include_raw: bool = False,
) -> dict[str, Any]:
    """Decode a Modbus read response carried in an uplink.

    Args:
        input: Network server input object (``bytes``, or base64 in
            ``uplink_message.frm_payload`` / ``payload_raw``)
        catalog: Device catalog (default: packaged devices.yaml)
        include_raw: Add the register window as raw words under
            ``data.registers``

    Returns:
        {"data": {"slaveAddress": ..., "functionCode": ..., "values": {...}}}
        or {"errors": ["..."]}

    Example:
        >>> decode_uplink({"bytes": [0x01, 0x03, 0x02, 0xFF, 0x9C]})
        {'data': {'slaveAddress': 1, 'functionCode': 3, 'values': {'temperature': -0.1}}}
    """
    parser = FrameParser(catalog if catalog is not None else get_default_catalog())
    return DecodeUplinkUseCase(parser).execute(input, include_raw=include_raw).to_dict()


def encode_downlink(input: Mapping[str, Any]) -> dict[str, Any]:
    """Encode a Modbus write command for a downlink.

    Args:
        input: {"slaveAddress": int, "functionCode": 6 | 16,
            "register": int, "values": [int, ...]}

    Returns:
        {"bytes": [...]} or {"errors": ["..."]}

    Example:
        >>> encode_downlink(
        ...     {"slaveAddress": 1, "functionCode": 16, "register": 0, "values": [10, 20]}
        ... )
        {'bytes': [1, 16, 0, 0, 0, 2, 4, 0, 10, 0, 20]}
    """
    return EncodeDownlinkUseCase(FrameEncoder()).execute(input).to_dict()
