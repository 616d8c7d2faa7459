"""Bit flag expansion for status registers."""

from typing import Dict, Mapping


def expand_bitmask(raw_value: int, bits: Mapping[int, str]) -> Dict[str, bool]:
    """Expand a 16-bit status word into named boolean flags.

    Only bits listed in ``bits`` are reported. Output order follows the
    order of ``bits``.

    Args:
        raw_value: Unsigned 16-bit register value
        bits: Bit index (0-15) to flag name

    Returns:
        Flag name to boolean

    Example:
        >>> expand_bitmask(0b0110, {0: "system_ok", 1: "heater_on", 2: "fan_on"})
        {'system_ok': False, 'heater_on': True, 'fan_on': True}
    """
    return {name: (raw_value >> bit) & 1 != 0 for bit, name in bits.items()}
