from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running directly via: `python examples/print_lcd.py ...`
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from py_lcd1602_i2c_pcf8574 import (
    LCD1602,
    LCD1602Config,
    MCP2221AI2C,
    VARIANT_A,
    VARIANT_B,
    I2CWriteError,
)
from py_lcd1602_i2c_pcf8574.mcp2221a_i2c import I2CDevice


def _open_transport(args: argparse.Namespace) -> I2CDevice:
    if args.transport == "smbus":
        from py_lcd1602_i2c_pcf8574.smbus2_i2c import SMBus2I2C

        return SMBus2I2C(bus_id=args.bus).open()
    return MCP2221AI2C(i2c_speed_hz=100_000).open()


def main() -> None:
    parser = argparse.ArgumentParser(description="Print text on an LCD 1602 via PCF8574")
    parser.add_argument("line1", help="Text for row 0")
    parser.add_argument("line2", nargs="?", default="", help="Text for row 1")
    parser.add_argument("--address", default="0x27", help="PCF8574 7-bit I2C address (default: 0x27)")
    parser.add_argument("--transport", choices=["mcp2221a", "smbus"], default="mcp2221a")
    parser.add_argument("--bus", type=int, default=1, help="i2c-dev bus number for --transport smbus")
    parser.add_argument(
        "--variant",
        choices=["A", "B"],
        default="A",
        help="PCF8574->HD44780 pin mapping variant (default: A)",
    )
    parser.add_argument("--strict", action="store_true", help="Abort on the first failed I2C write")
    parser.add_argument("--verbose", action="store_true", help="Log every command byte")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    mapping = {"A": VARIANT_A, "B": VARIANT_B}[args.variant]
    lcd = LCD1602(
        _open_transport(args),
        int(args.address, 0),
        mapping=mapping,
        config=LCD1602Config(raise_on_error=args.strict),
        init=False,
    )

    try:
        result = lcd.init()
        result.merge(lcd.print(args.line1))
        if args.line2:
            result.merge(lcd.set_cursor(1, 0))
            result.merge(lcd.print(args.line2))
    except I2CWriteError as exc:
        raise SystemExit(str(exc))

    if not result:
        raise SystemExit(f"{len(result.errors)} of {result.writes} I2C writes failed")


if __name__ == "__main__":
    main()
