from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Allow running directly via: `python examples/i2c_scan.py`
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from py_lcd1602_i2c_pcf8574 import I2CError, MCP2221AI2C
from py_lcd1602_i2c_pcf8574.mcp2221a_i2c import I2CDevice


def _open_transport(args: argparse.Namespace) -> I2CDevice:
    if args.transport == "smbus":
        from py_lcd1602_i2c_pcf8574.smbus2_i2c import SMBus2I2C

        return SMBus2I2C(bus_id=args.bus).open()
    return MCP2221AI2C(i2c_speed_hz=100_000).open()


def main() -> None:
    parser = argparse.ArgumentParser(description="List responding I2C addresses")
    parser.add_argument("--transport", choices=["mcp2221a", "smbus"], default="mcp2221a")
    parser.add_argument("--bus", type=int, default=1, help="i2c-dev bus number for --transport smbus")
    args = parser.parse_args()

    i2c = _open_transport(args)

    found: list[int] = []
    for addr in range(0x03, 0x78):
        try:
            # Prefer read: doesn't toggle PCF8574 output latch.
            i2c.i2c_read(addr, 1)
            found.append(addr)
        except (OSError, I2CError, RuntimeError):
            continue

    if not found:
        print("No I2C devices found.")
        return

    print("Found I2C devices:")
    for addr in found:
        print(f"- 0x{addr:02X}")


if __name__ == "__main__":
    main()
