# =============================================================================
# conftest.py - Shared fixtures
# =============================================================================
# A recording I2C transport (which also decodes what it saw back into
# register/byte pairs) and a recording delay, so driver tests can assert
# on the exact bridge bytes and on where the settling delays fall.
# =============================================================================

from dataclasses import dataclass, field

import pytest

from py_lcd1602_i2c_pcf8574 import LCD1602, LCD1602Config
from py_lcd1602_i2c_pcf8574.frame import decode_nibbles, register_of


@dataclass
class Write:
    address: int
    data: bytes
    nostop: bool


@dataclass
class FakeI2C:
    """Records every write; optionally fails the writes whose index is in fail_at."""

    writes: list = field(default_factory=list)
    fail_at: set = field(default_factory=set)
    error: type = OSError

    def i2c_write(self, address_7bit, data, nostop=False):
        index = len(self.writes)
        self.writes.append(Write(address_7bit, bytes(data), nostop))
        if index in self.fail_at:
            raise self.error(121, "Remote I/O error")

    def i2c_read(self, address_7bit, length):
        return bytes(length)

    @property
    def values(self):
        return [w.data[0] for w in self.writes]

    @property
    def latched(self):
        return latched_bytes(self.values)


class DelayRecorder:
    def __init__(self, i2c=None):
        self.i2c = i2c
        self.calls = []

    def __call__(self, ms):
        # Store the write count at the time of the delay, to locate it.
        position = len(self.i2c.writes) if self.i2c is not None else None
        self.calls.append((ms, position))

    @property
    def durations(self):
        return [ms for ms, _ in self.calls]


def latched_bytes(values):
    """
    Decode bridge writes back into (register, byte) pairs.

    Every nibble is written as (E high, E low); a byte is two nibbles, so
    four writes per byte. The nibble is taken from the E-low write.
    """
    assert len(values) % 4 == 0
    out = []
    for i in range(0, len(values), 4):
        high = values[i + 1]
        low = values[i + 3]
        out.append((register_of(high), decode_nibbles(high, low)))
    return out


@pytest.fixture
def i2c():
    return FakeI2C()


@pytest.fixture
def delay(i2c):
    return DelayRecorder(i2c)


@pytest.fixture
def lcd(i2c, delay):
    return LCD1602(i2c, 0x27, delay_ms=delay, init=False)


@pytest.fixture
def strict_lcd(i2c, delay):
    return LCD1602(i2c, 0x27, config=LCD1602Config(raise_on_error=True), delay_ms=delay, init=False)
