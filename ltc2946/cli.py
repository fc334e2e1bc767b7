"""Command-line access to LTC2946 attributes.

Usage:
    ltc2946 list
    ltc2946 [--bus N] [--address 0x67] [--config board.yaml] read curr_input
    ltc2946 write power_max 1000000
    ltc2946 dump
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from .config_loader import load_device_config
from .const import CONF_ADDRESS, CONF_BUS, DEFAULT_BUS_NUMBER, DEFAULT_DEVICE_ADDRESS
from .device import Ltc2946Device
from .domain.exceptions import Ltc2946Error
from .domain.interfaces import IBus
from .infrastructure.transport import SMBusTransport

_LOGGER = logging.getLogger(__name__)

BusFactory = Callable[[int, int], IBus]


def _int_auto(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from err


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ltc2946", description="Read and write LTC2946 telemetry attributes."
    )
    parser.add_argument("--bus", type=_int_auto, help="I2C adapter number")
    parser.add_argument("--address", type=_int_auto, help="7-bit device address")
    parser.add_argument("--config", help="YAML board configuration file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log register traffic"
    )

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="list attributes")
    read = sub.add_parser("read", help="read one attribute")
    read.add_argument("name")
    write = sub.add_parser("write", help="write one attribute")
    write.add_argument("name")
    write.add_argument("value")
    sub.add_parser("dump", help="read every attribute")
    return parser


def _print_list() -> None:
    for binding in Ltc2946Device.attributes():
        print(
            f"{binding.name:<12} 0x{binding.register_address:02X} "
            f"{str(binding.width):<7} {binding.access.value} {binding.unit}"
        )


def main(
    argv: Optional[Sequence[str]] = None,
    bus_factory: BusFactory = SMBusTransport,
) -> int:
    """Entry point of the ``ltc2946`` console script."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "list":
        _print_list()
        return 0

    try:
        config = load_device_config(args.config) if args.config else {}
        bus_number = args.bus
        if bus_number is None:
            bus_number = config.get(CONF_BUS, DEFAULT_BUS_NUMBER)
        address = args.address
        if address is None:
            address = config.get(CONF_ADDRESS, DEFAULT_DEVICE_ADDRESS)

        with Ltc2946Device.attach(bus_factory(bus_number, address), config) as dev:
            if args.command == "read":
                sys.stdout.write(dev.show(args.name))
            elif args.command == "write":
                raw = dev.write(args.name, args.value)
                _LOGGER.info("%s written, raw 0x%X", args.name, raw)
            else:
                for reading in dev.snapshot().values():
                    print(reading)
    except (Ltc2946Error, ValueError) as err:
        print(f"ltc2946: {err}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
