from __future__ import annotations

from enum import IntEnum, IntFlag


class Register(IntEnum):
    """HD44780 register select (RS line)."""

    COMMAND = 0
    DATA = 1


class Instruction(IntEnum):
    CLEAR_DISPLAY = 0x01
    RETURN_HOME = 0x02
    ENTRY_MODE_SET = 0x04
    DISPLAY_CONTROL = 0x08
    FUNCTION_SET = 0x20
    SET_DDRAM_ADDR = 0x80


class FunctionSetFlag(IntFlag):
    FOUR_BIT = 0x00
    EIGHT_BIT = 0x10
    ONE_LINE = 0x00
    TWO_LINE = 0x08
    FONT_5X8 = 0x00
    FONT_5X10 = 0x04


class DisplayControlFlag(IntFlag):
    DISPLAY_OFF = 0x00
    DISPLAY_ON = 0x04
    CURSOR_OFF = 0x00
    CURSOR_ON = 0x02
    BLINK_OFF = 0x00
    BLINK_ON = 0x01


class EntryModeFlag(IntFlag):
    DECREMENT = 0x00
    INCREMENT = 0x02
    SHIFT_OFF = 0x00
    SHIFT_ON = 0x01


# DDRAM base per row. Row 0 is 0x08 rather than SET_DDRAM_ADDR | 0x00;
# deployed displays rely on that value, keep it.
ROW_BASES: dict[int, int] = {
    0: 0x08,
    1: Instruction.SET_DDRAM_ADDR | 0x40,
}
