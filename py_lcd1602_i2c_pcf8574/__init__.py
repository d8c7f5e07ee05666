from .pins import PinMapping, VARIANT_A, VARIANT_B
from .commands import (
    DisplayControlFlag,
    EntryModeFlag,
    FunctionSetFlag,
    Instruction,
    Register,
)
from .config import DisplayConfig, LCD1602Config
from .errors import I2CError, I2CNotOpenError, I2CWriteError, LCDError
from .lcd import LCD1602, WriteResult
from .mcp2221a_i2c import I2CDevice, MCP2221AI2C

__all__ = [
    "PinMapping",
    "VARIANT_A",
    "VARIANT_B",
    "DisplayControlFlag",
    "EntryModeFlag",
    "FunctionSetFlag",
    "Instruction",
    "Register",
    "DisplayConfig",
    "LCD1602Config",
    "LCDError",
    "I2CError",
    "I2CNotOpenError",
    "I2CWriteError",
    "LCD1602",
    "WriteResult",
    "I2CDevice",
    "MCP2221AI2C",
]
