#!/usr/bin/env python3
"""
access to the I²C bus the EMC2301 is connected to

The device logic only needs to open a bus by its index and read or write
single byte registers. RegisterBus and RegisterConnection describe this
capability. Two implementations are provided:
 - SMBusRegisterBus uses the Linux SMBus device files (/dev/i2c-<n>)
 - BusioRegisterBus uses CircuitPython/Blinka compatible bus objects
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

# module busio provides no type hints
import busio  # type: ignore
import smbus2
from feeph.i2c import BurstHandler

from feeph.emc2301.errors import BusOpenError, InvalidArgument, RegisterIOError

LH = logging.getLogger('feeph.emc2301')


class RegisterConnection(ABC):
    """
    an open connection to a device on a specific bus

    Connections can be used as a context manager. The connection is
    closed when leaving the context.
    """

    def __init__(self, bus_index: int, i2c_address: int):
        self.bus_index = bus_index
        self.i2c_address = i2c_address
        self._is_open = True

    def read_register(self, register: int) -> int:
        """
        read a single byte register and return its content as an integer value
         - raises RegisterIOError if the register can't be read
        """
        self._ensure_open(register)
        value = self._read_byte(register)
        LH.debug("[bus %i] read register 0x%02X -> 0x%02X", self.bus_index, register, value)
        return value

    def write_register(self, register: int, value: int):
        """
        write a single byte register
         - raises RegisterIOError if the register can't be written
         - raises InvalidArgument if the value does not fit into a byte
        """
        self._ensure_open(register)
        if not 0x00 <= value <= 0xFF:
            raise InvalidArgument(f"Unable to write register 0x{register:02X}: value {value} is out of range (0x00 ≤ x ≤ 0xFF)")
        LH.debug("[bus %i] write register 0x%02X <- 0x%02X", self.bus_index, register, value)
        self._write_byte(register, value)

    def is_open(self) -> bool:
        return self._is_open

    def close(self):
        # closing a closed connection is a no-op
        if self._is_open:
            self._is_open = False
            self._release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        self.close()

    def _ensure_open(self, register: int):
        if not self._is_open:
            raise RegisterIOError(f"Unable to access register 0x{register:02X}: connection to bus {self.bus_index} is closed")

    @abstractmethod
    def _read_byte(self, register: int) -> int:
        ...

    @abstractmethod
    def _write_byte(self, register: int, value: int):
        ...

    @abstractmethod
    def _release(self):
        ...


class RegisterBus(ABC):
    """
    abstract base class for bus implementations
    """

    @abstractmethod
    def open(self, bus_index: int, i2c_address: int) -> RegisterConnection:
        """
        open a connection to the device at the provided address
         - raises BusOpenError if the bus is not available
        """
        ...


# ---------------------------------------------------------------------
# Linux SMBus
# ---------------------------------------------------------------------

class SMBusConnection(RegisterConnection):

    def __init__(self, bus_index: int, i2c_address: int, smbus: smbus2.SMBus):
        super().__init__(bus_index=bus_index, i2c_address=i2c_address)
        self._smbus = smbus

    def _read_byte(self, register: int) -> int:
        try:
            return self._smbus.read_byte_data(self.i2c_address, register)
        except OSError as e:
            # [Errno 121] Remote I/O error
            raise RegisterIOError(f"Unable to read register 0x{register:02X}: {e}") from e

    def _write_byte(self, register: int, value: int):
        try:
            self._smbus.write_byte_data(self.i2c_address, register, value)
        except OSError as e:
            raise RegisterIOError(f"Unable to write register 0x{register:02X}: {e}") from e

    def _release(self):
        self._smbus.close()


class SMBusRegisterBus(RegisterBus):
    """
    use the kernel's SMBus device files (/dev/i2c-<bus_index>)
    """

    def open(self, bus_index: int, i2c_address: int) -> RegisterConnection:
        try:
            smbus = smbus2.SMBus(bus_index)
        except OSError as e:
            # FileNotFoundError (no such bus) or PermissionError
            raise BusOpenError(bus_index=bus_index, reason=str(e)) from e
        return SMBusConnection(bus_index=bus_index, i2c_address=i2c_address, smbus=smbus)


# ---------------------------------------------------------------------
# CircuitPython / Blinka
# ---------------------------------------------------------------------

class BusioConnection(RegisterConnection):

    def __init__(self, bus_index: int, i2c_address: int, i2c_bus: busio.I2C):
        super().__init__(bus_index=bus_index, i2c_address=i2c_address)
        self._i2c_bus = i2c_bus

    def _read_byte(self, register: int) -> int:
        try:
            with BurstHandler(i2c_bus=self._i2c_bus, i2c_adr=self.i2c_address) as bh:
                return bh.read_register(register)
        except (OSError, RuntimeError) as e:
            raise RegisterIOError(f"Unable to read register 0x{register:02X}: {e}") from e

    def _write_byte(self, register: int, value: int):
        try:
            with BurstHandler(i2c_bus=self._i2c_bus, i2c_adr=self.i2c_address) as bh:
                bh.write_register(register, value)
        except (OSError, RuntimeError) as e:
            raise RegisterIOError(f"Unable to write register 0x{register:02X}: {e}") from e

    def _release(self):
        # emulated buses have nothing to release
        if hasattr(self._i2c_bus, 'deinit'):
            self._i2c_bus.deinit()


class BusioRegisterBus(RegisterBus):
    """
    use busio.I2C compatible objects (e.g. adafruit-blinka on Linux or
    feeph.i2c.EmulatedI2C for testing)

    The opener is called with the bus index and must return an I²C bus
    object or raise an exception if there is no such bus.
    """

    def __init__(self, opener: Callable[[int], busio.I2C]):
        self._opener = opener

    def open(self, bus_index: int, i2c_address: int) -> RegisterConnection:
        try:
            i2c_bus = self._opener(bus_index)
        except (OSError, RuntimeError, ValueError) as e:
            raise BusOpenError(bus_index=bus_index, reason=str(e)) from e
        return BusioConnection(bus_index=bus_index, i2c_address=i2c_address, i2c_bus=i2c_bus)
