#!/usr/bin/env python3
"""
conversion-related functions
"""

# EMC2301 datasheet: EQUATION 4-3: SIMPLIFIED TACH CONVERSION (with m = 1)
TACH2RPM = 3_932_160


def convert_bytes2tach(msb: int, lsb: int) -> int:
    """
    combine the tach reading registers into a 13-bit tach count
    (0x01 + 0x00 -> 32)
    """
    # HIGH BYTE - bit 7: 2048 ... bit 0: 32
    # LOW BYTE  - bit 7:   16 ... bit 3: 1, bits 2-0: ignored
    return ((msb & 0xFF) << 5) | ((lsb & 0xFF) >> 3)


def convert_tach2rpm(tach: int) -> int | None:
    """
    convert the tach count to an RPM value

    returns 'None' if the tach count is zero
    """
    if tach > 0:
        return TACH2RPM // tach
    else:
        return None


def convert_dutycycle_raw2percentage(value: int) -> int:
    """
    convert the provided value from the internal value to percentage
    used by EMC2301 (0x00 -> 0%, 0xFF -> 100%)
    """
    if 0 <= value <= 255:
        return _round_half_up(value * 100, 255)
    else:
        raise ValueError("Raw value must be in range 0 ≤ x ≤ 255!")


def convert_dutycycle_percentage2raw(value: int) -> int:
    """
    convert the provided value from percentage to the internal value
    used by EMC2301 (0% -> 0x00, 100% -> 0xFF)
    """
    if 0 <= value <= 100:
        return _round_half_up(value * 255, 100)
    else:
        raise ValueError("Percentage value must be in range 0 ≤ x ≤ 100!")


def _round_half_up(numerator: int, denominator: int) -> int:
    # round() rounds half to even, the datasheet's equation rounds half up
    return (2 * numerator + denominator) // (2 * denominator)
