"""Use cases for the Modbus LoRaWAN codec.

Each use case has a single public ``execute`` method, accepts the network
server's input object and returns a result DTO.
"""

from .decode_uplink_result import DecodeUplinkResult
from .decode_uplink_use_case import DecodeUplinkUseCase
from .encode_downlink_result import EncodeDownlinkResult
from .encode_downlink_use_case import EncodeDownlinkUseCase

__all__ = [
    "DecodeUplinkResult",
    "DecodeUplinkUseCase",
    "EncodeDownlinkResult",
    "EncodeDownlinkUseCase",
]
