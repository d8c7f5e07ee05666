from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field, replace
from typing import Callable, Optional, Union

from .commands import ROW_BASES, Instruction, Register
from .config import DisplayConfig, LCD1602Config
from .errors import I2CWriteError
from .frame import pulse, split_nibbles
from .mcp2221a_i2c import I2CDevice, check_address
from .pins import PinMapping, VARIANT_A

logger = logging.getLogger(__name__)

DelayFn = Callable[[int], None]


def sleep_ms(ms: int) -> None:
    time.sleep(ms / 1000)


@dataclass(slots=True)
class WriteResult:
    """Outcome of one driver operation.

    A dropped bridge write does not stop the operation; it is collected here.
    Callers that ignore the result get fire-and-forget behavior.
    """

    writes: int = 0
    errors: list[I2CWriteError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.ok

    def merge(self, other: "WriteResult") -> "WriteResult":
        self.writes += other.writes
        self.errors.extend(other.errors)
        return self

    def raise_for_errors(self) -> None:
        if self.errors:
            raise self.errors[0]


class LCD1602:
    """HD44780 (4-bit, two-line) over a PCF8574 I2C backpack.

    Write-only: timing is fixed delays, the busy flag is never read.
    Not thread-safe; one caller owns an instance.
    """

    def __init__(
        self,
        i2c: I2CDevice,
        address_7bit: int = 0x27,
        *,
        mapping: PinMapping = VARIANT_A,
        config: Optional[LCD1602Config] = None,
        display: Optional[DisplayConfig] = None,
        delay_ms: Optional[DelayFn] = None,
        init: bool = True,
    ) -> None:
        self._i2c = i2c
        self._address = check_address(address_7bit)
        self._mapping = mapping
        self._cfg = config or LCD1602Config()
        self._display = replace(display) if display is not None else DisplayConfig()
        self._delay = delay_ms or sleep_ms

        if init:
            self.init()

    @property
    def address(self) -> int:
        return self._address

    @property
    def display(self) -> DisplayConfig:
        return replace(self._display)

    def init(self) -> WriteResult:
        """Bring the controller to a known state. Clears the screen."""
        logger.debug("init LCD @0x%02X", self._address)
        # HD44780 needs >= 15ms after VCC rises before the first instruction.
        self._delay(self._cfg.power_on_delay_ms)

        result = WriteResult()
        for cmd in (
            Instruction.RETURN_HOME,
            self._display.function_set(),
            self._display.display_control(),
            self._display.entry_mode(),
            Instruction.CLEAR_DISPLAY,
        ):
            result.merge(self.send_command(cmd))
        return result

    def clear(self) -> WriteResult:
        return self.send_command(Instruction.CLEAR_DISPLAY)

    def home(self) -> WriteResult:
        return self.send_command(Instruction.RETURN_HOME)

    def print(self, text: Union[str, bytes]) -> WriteResult:
        if isinstance(text, (bytes, bytearray, memoryview)):
            data = bytes(text)
        else:
            data = text.encode(self._cfg.encoding, errors=self._cfg.errors)

        result = WriteResult()
        for b in data:
            result.merge(self.send_data(b))
        return result

    def set_cursor(self, row: int, column: int) -> WriteResult:
        base = ROW_BASES.get(row)
        if base is None:
            logger.debug("set_cursor: row %r ignored", row)
            return WriteResult()
        # Column is passed through; the controller's address counter handles overflow.
        return self.send_command(base + column)

    def set_display(
        self,
        display_on: Optional[bool] = None,
        cursor_on: Optional[bool] = None,
        blink_on: Optional[bool] = None,
    ) -> WriteResult:
        if display_on is not None:
            self._display.display_on = bool(display_on)
        if cursor_on is not None:
            self._display.cursor_on = bool(cursor_on)
        if blink_on is not None:
            self._display.blink_on = bool(blink_on)
        return self.send_command(self._display.display_control())

    def set_entry_mode(self, increment: Optional[bool] = None, shift: Optional[bool] = None) -> WriteResult:
        if increment is not None:
            self._display.increment = bool(increment)
        if shift is not None:
            self._display.shift = bool(shift)
        return self.send_command(self._display.entry_mode())

    def set_function(self, two_line: Optional[bool] = None, font_5x10: Optional[bool] = None) -> WriteResult:
        if two_line is not None:
            self._display.two_line = bool(two_line)
        if font_5x10 is not None:
            self._display.font_5x10 = bool(font_5x10)
        return self.send_command(self._display.function_set())

    # --- low level ---

    def send_command(self, value: int) -> WriteResult:
        logger.debug("cmd 0x%02X", value & 0xFF)
        result = self._send(value, Register.COMMAND)
        # Blanket delay; covers clear/home (~1.52ms) and everything faster.
        self._delay(self._cfg.command_delay_ms)
        return result

    def send_data(self, value: int) -> WriteResult:
        # No trailing delay: bus transfer time covers the ~43us write.
        return self._send(value, Register.DATA)

    def send_byte(self, value: int) -> WriteResult:
        """Pulse one frame: E high, then E low. Both writes keep the bus open."""
        enabled, disabled = pulse(value, self._mapping, self._cfg.backlight)
        result = WriteResult()
        self._write_pcf(enabled, result)
        self._write_pcf(disabled, result)
        return result

    def _send(self, value: int, register: Register) -> WriteResult:
        high, low = split_nibbles(value, register, self._mapping)
        return self.send_byte(high).merge(self.send_byte(low))

    def _write_pcf(self, value: int, result: WriteResult) -> None:
        result.writes += 1
        try:
            self._i2c.i2c_write(self._address, bytes([value & 0xFF]), nostop=True)
        except I2CWriteError as exc:
            self._dropped(exc, result)
        except OSError as exc:
            self._dropped(I2CWriteError(self._address, value & 0xFF, exc), result)

    def _dropped(self, err: I2CWriteError, result: WriteResult) -> None:
        logger.warning("%s", err)
        if self._cfg.raise_on_error:
            raise err
        result.errors.append(err)
