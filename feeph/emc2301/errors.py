#!/usr/bin/env python3
"""
exceptions raised by this library

All exceptions derive from Emc2301Error. Some of them additionally derive
from a builtin exception to keep them compatible with code that expects
the builtin one (e.g. ValueError for invalid arguments).
"""


class Emc2301Error(Exception):
    pass


class BusOpenError(Emc2301Error, OSError):
    """
    unable to open the I²C bus with the provided index
    """

    def __init__(self, bus_index: int, reason: str = ""):
        self.bus_index = bus_index
        if reason:
            super().__init__(f"Unable to open I²C bus {bus_index}: {reason}")
        else:
            super().__init__(f"Unable to open I²C bus {bus_index}.")


class DeviceNotFound(Emc2301Error):
    pass


class IdentityMismatch(Emc2301Error):
    """
    a device responded but it's not an EMC2301
    """

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Unexpected product id 0x{actual:02X} (expected: 0x{expected:02X})")


class RegisterIOError(Emc2301Error, RuntimeError):
    pass


class InvalidArgument(Emc2301Error, ValueError):
    pass
