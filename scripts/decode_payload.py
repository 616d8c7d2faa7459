#!/usr/bin/env python3
"""Decode uplink payloads or encode downlink commands from the command line.

Usage:
    python scripts/decode_payload.py decode "01 03 02 FF 9C"
    python scripts/decode_payload.py decode 0x010304004B1234 --catalog my_devices.yaml --raw
    python scripts/decode_payload.py encode --slave 1 --function 16 --register 0 10 20
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Allow running from a source checkout without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from modbus_lorawan import (  # noqa: E402
    ModbusCodecError,
    decode_uplink,
    encode_downlink,
    load_register_catalog,
)


def parse_hex(text: str) -> list[int]:
    """Turn '01 03 02 FF 9C', '0x010302ff9c' or '01:03:02' into byte values."""
    cleaned = text.replace("0x", "").replace("0X", "")
    for separator in (" ", ":", "-", ","):
        cleaned = cleaned.replace(separator, "")
    return list(bytes.fromhex(cleaned))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    decode = commands.add_parser("decode", help="decode an uplink payload")
    decode.add_argument("payload", help="payload as hex string")
    decode.add_argument("--catalog", type=Path, help="device catalog YAML file")
    decode.add_argument(
        "--raw", action="store_true", help="include raw register words"
    )

    encode = commands.add_parser("encode", help="encode a downlink write command")
    encode.add_argument("--slave", type=int, required=True)
    encode.add_argument("--function", type=int, required=True, choices=(6, 16))
    encode.add_argument("--register", type=int, required=True)
    encode.add_argument("values", type=int, nargs="+")

    return parser


def main() -> int:
    args = build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "decode":
        try:
            payload = parse_hex(args.payload)
        except ValueError as err:
            print(f"Invalid hex payload: {err}", file=sys.stderr)
            return 2
        try:
            catalog = load_register_catalog(args.catalog) if args.catalog else None
        except ModbusCodecError as err:
            print(err, file=sys.stderr)
            return 2
        result = decode_uplink({"bytes": payload}, catalog=catalog, include_raw=args.raw)
    else:
        result = encode_downlink(
            {
                "slaveAddress": args.slave,
                "functionCode": args.function,
                "register": args.register,
                "values": args.values,
            }
        )
        if "bytes" in result:
            result["hex"] = bytes(result["bytes"]).hex()

    print(json.dumps(result, indent=2))
    return 1 if "errors" in result else 0


if __name__ == "__main__":
    sys.exit(main())
