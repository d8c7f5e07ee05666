from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PinMapping:
    """PCF8574 control-line mapping for an HD44780 in 4-bit mode.

    Bits are PCF8574 pin indices (0..7). Data lines D4..D7 sit on P4..P7
    because nibbles are framed in the high half of each bridge byte.
    """

    rs: int
    rw: int
    e: int
    bl: int

    def __post_init__(self) -> None:
        pins = (self.rs, self.rw, self.e, self.bl)
        for bit in pins:
            if not 0 <= bit <= 3:
                raise ValueError(f"control lines must use P0..P3, got P{bit}")
        if len(set(pins)) != len(pins):
            raise ValueError(f"control lines must be distinct, got {pins}")

    @property
    def rs_mask(self) -> int:
        return bit_mask(self.rs)

    @property
    def rw_mask(self) -> int:
        return bit_mask(self.rw)

    @property
    def e_mask(self) -> int:
        return bit_mask(self.e)

    @property
    def bl_mask(self) -> int:
        return bit_mask(self.bl)


# Variant A (very common): P0=RS, P1=RW, P2=E, P3=BL, P4..P7=D4..D7
VARIANT_A = PinMapping(rs=0, rw=1, e=2, bl=3)

# Variant B (RW/E swapped): P0=RS, P1=E, P2=RW, P3=BL, P4..P7=D4..D7
VARIANT_B = PinMapping(rs=0, rw=2, e=1, bl=3)


def bit_mask(bit: int) -> int:
    if not 0 <= bit <= 7:
        raise ValueError(f"PCF8574 bit must be 0..7, got {bit}")
    return 1 << bit
