from __future__ import annotations

from typing import Optional


class LCDError(Exception):
    """Base exception for the driver and its transports."""


class I2CError(LCDError):
    """Base exception for I2C-related failures."""


class I2CNotOpenError(I2CError):
    """Raised when using a transport that has not been opened."""


class I2CWriteError(I2CError):
    """A bridge write that did not reach the device."""

    def __init__(self, address: int, value: int, cause: Optional[BaseException] = None) -> None:
        self.address = address
        self.value = value
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"I2C write of 0x{value:02X} to 0x{address:02X} failed{detail}")
