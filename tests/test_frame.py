# =============================================================================
# test_frame.py - Nibble Framing Unit Tests
# =============================================================================
# Tests for the pure PCF8574 frame helpers.
#
# Test coverage includes:
#   - High/low nibble split for commands and data
#   - Enable pulse shape (E high then low, backlight held)
#   - Pin mapping variants
#   - Decode round trip for every byte value
# =============================================================================

import pytest

from py_lcd1602_i2c_pcf8574.commands import Register
from py_lcd1602_i2c_pcf8574.frame import decode_nibbles, pulse, register_of, split_nibbles
from py_lcd1602_i2c_pcf8574.pins import VARIANT_A, VARIANT_B, PinMapping, bit_mask


# =============================================================================
# Nibble Split Tests
# =============================================================================

class TestSplitNibbles:
    """Test splitting a byte into two frames."""

    def test_command_frames(self):
        """Command frames carry the nibbles with RS clear."""
        assert split_nibbles(0x28, Register.COMMAND) == (0x20, 0x80)

    def test_data_frames(self):
        """Data frames carry the nibbles with RS set."""
        assert split_nibbles(0x41, Register.DATA) == (0x41, 0x11)

    @pytest.mark.parametrize("value", range(256))
    def test_command_nibbles_for_every_byte(self, value):
        """High frame holds v's high nibble, low frame holds (v << 4)'s."""
        high, low = split_nibbles(value, Register.COMMAND)
        assert high & 0xF0 == value & 0xF0
        assert low & 0xF0 == (value << 4) & 0xF0
        assert high & 0x0F == 0
        assert low & 0x0F == 0

    @pytest.mark.parametrize("value", range(256))
    def test_data_nibbles_for_every_byte(self, value):
        """Data frames differ from command frames only by RS."""
        high, low = split_nibbles(value, Register.DATA)
        assert high == (value & 0xF0) | 0x01
        assert low == ((value << 4) & 0xF0) | 0x01

    def test_value_masked_to_byte(self):
        """Values above 0xFF are truncated to their low byte."""
        assert split_nibbles(0x1C8, Register.COMMAND) == split_nibbles(0xC8, Register.COMMAND)


# =============================================================================
# Enable Pulse Tests
# =============================================================================

class TestPulse:
    """Test the enable-asserted / enable-deasserted pair."""

    def test_pulse_variant_a(self):
        """E is 0x04 and BL is 0x08 on the common backpack."""
        assert pulse(0x41) == (0x4D, 0x49)

    def test_pulse_clears_enable_already_set(self):
        """A frame that somehow carries E still ends with E low."""
        enabled, disabled = pulse(0x24)
        assert enabled & 0x04
        assert not disabled & 0x04

    @pytest.mark.parametrize("frame", [0x00, 0x20, 0x81, 0xF0, 0xF1])
    def test_backlight_on_both_writes(self, frame):
        """BL stays set across the pulse."""
        enabled, disabled = pulse(frame)
        assert enabled & 0x08
        assert disabled & 0x08
        assert enabled & 0x04
        assert not disabled & 0x04

    def test_backlight_off(self):
        """Backlight can be left dark."""
        assert pulse(0x40, backlight=False) == (0x44, 0x40)

    def test_variant_b_enable_bit(self):
        """Variant B puts E on P1."""
        assert pulse(0x40, VARIANT_B) == (0x4A, 0x48)


# =============================================================================
# Decode Tests
# =============================================================================

class TestDecode:
    """Test reassembling bytes from frames."""

    @pytest.mark.parametrize("value", range(256))
    def test_round_trip(self, value):
        """Every byte survives the split and the pulse."""
        high, low = split_nibbles(value, Register.COMMAND)
        _, high_latched = pulse(high)
        _, low_latched = pulse(low)
        assert decode_nibbles(high_latched, low_latched) == value

    def test_register_of(self):
        """RS bit identifies the register."""
        assert register_of(0x49) == Register.DATA
        assert register_of(0x48) == Register.COMMAND


# =============================================================================
# Pin Mapping Tests
# =============================================================================

class TestPinMapping:
    """Test PCF8574 pin mapping validation."""

    def test_variant_a_masks(self):
        assert (VARIANT_A.rs_mask, VARIANT_A.rw_mask, VARIANT_A.e_mask, VARIANT_A.bl_mask) == (
            0x01,
            0x02,
            0x04,
            0x08,
        )

    def test_control_line_on_data_pin_rejected(self):
        """Control lines cannot sit on the nibble pins P4..P7."""
        with pytest.raises(ValueError):
            PinMapping(rs=4, rw=1, e=2, bl=3)

    def test_duplicate_pins_rejected(self):
        with pytest.raises(ValueError):
            PinMapping(rs=0, rw=0, e=2, bl=3)

    def test_bit_mask_range(self):
        assert bit_mask(7) == 0x80
        with pytest.raises(ValueError):
            bit_mask(8)
