from __future__ import annotations

from dataclasses import dataclass

from .commands import DisplayControlFlag, EntryModeFlag, FunctionSetFlag, Instruction


@dataclass(slots=True)
class DisplayConfig:
    """Controller attributes, grouped the way the instruction set groups them.

    Each group renders to one command byte; groups are never merged.
    The interface width is always 4 bits.
    """

    two_line: bool = True
    font_5x10: bool = False
    display_on: bool = True
    cursor_on: bool = False
    blink_on: bool = False
    increment: bool = True
    shift: bool = False

    def function_set(self) -> int:
        cmd = Instruction.FUNCTION_SET | FunctionSetFlag.FOUR_BIT
        cmd |= FunctionSetFlag.TWO_LINE if self.two_line else FunctionSetFlag.ONE_LINE
        cmd |= FunctionSetFlag.FONT_5X10 if self.font_5x10 else FunctionSetFlag.FONT_5X8
        return int(cmd)

    def display_control(self) -> int:
        cmd = Instruction.DISPLAY_CONTROL
        cmd |= DisplayControlFlag.DISPLAY_ON if self.display_on else DisplayControlFlag.DISPLAY_OFF
        cmd |= DisplayControlFlag.CURSOR_ON if self.cursor_on else DisplayControlFlag.CURSOR_OFF
        cmd |= DisplayControlFlag.BLINK_ON if self.blink_on else DisplayControlFlag.BLINK_OFF
        return int(cmd)

    def entry_mode(self) -> int:
        cmd = Instruction.ENTRY_MODE_SET
        cmd |= EntryModeFlag.INCREMENT if self.increment else EntryModeFlag.DECREMENT
        cmd |= EntryModeFlag.SHIFT_ON if self.shift else EntryModeFlag.SHIFT_OFF
        return int(cmd)


@dataclass(slots=True)
class LCD1602Config:
    power_on_delay_ms: int = 15
    command_delay_ms: int = 2
    backlight: bool = True
    encoding: str = "latin-1"
    errors: str = "replace"
    # Off: dropped bridge writes are logged and reported in WriteResult only.
    raise_on_error: bool = False

    def __post_init__(self) -> None:
        if self.power_on_delay_ms < 0:
            raise ValueError(f"power_on_delay_ms must be >= 0, got {self.power_on_delay_ms}")
        if self.command_delay_ms < 0:
            raise ValueError(f"command_delay_ms must be >= 0, got {self.command_delay_ms}")
