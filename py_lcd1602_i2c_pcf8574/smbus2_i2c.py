from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from smbus2 import SMBus, i2c_msg

from .errors import I2CError, I2CNotOpenError
from .mcp2221a_i2c import I2CDevice, check_address

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SMBus2I2C(I2CDevice):
    """Linux i2c-dev transport (Raspberry Pi and friends).

    The bus clock is fixed by the kernel (device tree), not here. i2c-dev
    ends every message with STOP, so ``nostop`` is accepted and ignored;
    the PCF8574 latches each byte on its own.
    """

    bus_id: int = 1
    _bus: Optional[SMBus] = None

    def open(self) -> "SMBus2I2C":
        if self._bus is not None:
            return self
        try:
            self._bus = SMBus(self.bus_id)
        except FileNotFoundError as e:
            raise I2CError(f"I2C bus /dev/i2c-{self.bus_id} not found") from e
        except PermissionError as e:
            raise I2CError(
                f"Permission denied opening /dev/i2c-{self.bus_id} (try adding user to i2c group)"
            ) from e
        logger.info("Opened /dev/i2c-%d", self.bus_id)
        return self

    def close(self) -> None:
        if self._bus is not None:
            try:
                self._bus.close()
            finally:
                self._bus = None

    def __enter__(self) -> "SMBus2I2C":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _require_open(self) -> SMBus:
        if self._bus is None:
            raise I2CNotOpenError("SMBus2I2C not opened. Call .open() first.")
        return self._bus

    def i2c_write(self, address_7bit: int, data: bytes, nostop: bool = False) -> None:
        bus = self._require_open()
        check_address(address_7bit)
        if len(data) == 1:
            bus.write_byte(address_7bit, data[0])
        else:
            bus.i2c_rdwr(i2c_msg.write(address_7bit, list(data)))

    def i2c_read(self, address_7bit: int, length: int) -> bytes:
        bus = self._require_open()
        check_address(address_7bit)
        if length <= 0:
            raise ValueError(f"length must be > 0, got {length}")
        msg = i2c_msg.read(address_7bit, length)
        bus.i2c_rdwr(msg)
        return bytes(list(msg))
