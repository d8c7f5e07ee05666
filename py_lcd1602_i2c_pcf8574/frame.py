"""Nibble framing for an HD44780 behind a PCF8574.

Only D4..D7 are wired through the bridge, so every instruction or character
byte goes out as two frames. A frame is one PCF8574 byte: the nibble in bits
7-4 plus the RS line. The backlight and enable lines are added when the frame
is pulsed onto the bus.
"""

from __future__ import annotations

from .commands import Register
from .pins import PinMapping, VARIANT_A


def split_nibbles(
    value: int,
    register: Register,
    mapping: PinMapping = VARIANT_A,
) -> tuple[int, int]:
    """Return the (high, low) frames for ``value``."""
    value &= 0xFF
    rs = mapping.rs_mask if register == Register.DATA else 0x00
    high = (value & 0xF0) | rs
    low = ((value << 4) & 0xF0) | rs
    return high, low


def pulse(frame: int, mapping: PinMapping = VARIANT_A, backlight: bool = True) -> tuple[int, int]:
    """Return the (enable-asserted, enable-deasserted) bytes for one frame.

    The controller latches on the falling edge of E, so the data and RS lines
    are already stable in the first byte.
    """
    bl = mapping.bl_mask if backlight else 0x00
    enabled = (frame | bl | mapping.e_mask) & 0xFF
    disabled = ((frame & ~mapping.e_mask) | bl) & 0xFF
    return enabled, disabled


def decode_nibbles(high: int, low: int) -> int:
    """Reassemble a byte from its two frames."""
    return (high & 0xF0) | ((low >> 4) & 0x0F)


def register_of(frame: int, mapping: PinMapping = VARIANT_A) -> Register:
    return Register.DATA if frame & mapping.rs_mask else Register.COMMAND
