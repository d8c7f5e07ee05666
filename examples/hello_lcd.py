from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

# Allow running this file directly via: `python examples/hello_lcd.py`
# by ensuring the project root (parent of `examples/`) is on sys.path.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from py_lcd1602_i2c_pcf8574 import LCD1602, MCP2221AI2C
from py_lcd1602_i2c_pcf8574.mcp2221a_i2c import I2CDevice


def _open_transport(args: argparse.Namespace) -> I2CDevice:
    if args.transport == "smbus":
        from py_lcd1602_i2c_pcf8574.smbus2_i2c import SMBus2I2C

        return SMBus2I2C(bus_id=args.bus).open()
    return MCP2221AI2C(i2c_speed_hz=100_000).open()


def main() -> None:
    parser = argparse.ArgumentParser(description="LCD 1602 demo loop via PCF8574 (I2C)")
    parser.add_argument("--address", default="0x27", help="PCF8574 7-bit I2C address (default: 0x27)")
    parser.add_argument("--transport", choices=["mcp2221a", "smbus"], default="mcp2221a")
    parser.add_argument("--bus", type=int, default=1, help="i2c-dev bus number for --transport smbus")
    parser.add_argument("--once", action="store_true", help="Run one iteration and exit")
    parser.add_argument("--verbose", action="store_true", help="Log every command byte")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    lcd = LCD1602(_open_transport(args), int(args.address, 0))

    while True:
        lcd.print("  Hello World!")
        time.sleep(1)
        lcd.set_cursor(1, 0)
        result = lcd.print("Rasperry Pi Pico")
        if not result:
            print(f"{len(result.errors)} of {result.writes} writes dropped", file=sys.stderr)
        time.sleep(2)
        if args.once:
            break
        lcd.init()


if __name__ == "__main__":
    main()
