#!/usr/bin/env python3
"""
interface to the EMC2301 chip

datasheet: https://ww1.microchip.com/downloads/en/DeviceDoc/EMC2301-2-3-5-Data-Sheet-DS20006532A.pdf

Use open_device() to find, verify and configure the chip.
"""

import logging
from contextlib import ExitStack

import feeph.emc2301.constants as const
from feeph.emc2301.config_register import TachRange, parse_fan_config_register
from feeph.emc2301.conversions import convert_bytes2tach, convert_dutycycle_percentage2raw, convert_dutycycle_raw2percentage, convert_tach2rpm
from feeph.emc2301.device_config import DeviceConfig, emc2301_default_config
from feeph.emc2301.errors import IdentityMismatch, InvalidArgument
from feeph.emc2301.locator import locate_device
from feeph.emc2301.register_bus import RegisterBus, RegisterConnection, SMBusRegisterBus
from feeph.emc2301.rpm_result import Measured, RpmResult, Stopped, Undefined

LH = logging.getLogger('feeph.emc2301')


class Emc2301:
    """
    an initialized EMC2301 chip

    Creating an instance verifies the product id and selects the 500 RPM
    tach range. The provided connection is owned by this object from here
    on. It is not closed if initialization fails. (Use open_device() if
    you want that.)
    """

    def __init__(self, connection: RegisterConnection):
        self._connection = connection
        # -- verify product id --
        product_id = connection.read_register(const.PRODUCT_ID_REGISTER)
        if product_id != const.EMC2301_PRODUCT_ID:
            LH.warning("Device on bus %i is not an EMC2301. (product id: 0x%02X)", connection.bus_index, product_id)
            raise IdentityMismatch(expected=const.EMC2301_PRODUCT_ID, actual=product_id)
        # -- configure tach range --
        # set RNG[1:0] to 500 RPM (-> m = 1), TACH2RPM depends on this
        config = parse_fan_config_register(connection.read_register(const.FAN_CONFIG_REGISTER))
        config.tach_range = TachRange.RPM_500
        connection.write_register(const.FAN_CONFIG_REGISTER, config.as_int())

    def close(self):
        self._connection.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        self.close()

    def get_manufacturer_id(self) -> int:
        """
        read the manufacturer ID
        (0x5d for SMSC)
        """
        return self._connection.read_register(const.MANUFACTURER_ID_REGISTER)

    def get_product_id(self) -> int:
        """
        read the product ID
        (0x37 for EMC2301)
        """
        return self._connection.read_register(const.PRODUCT_ID_REGISTER)

    def get_product_revision(self) -> int:
        return self._connection.read_register(const.REVISION_REGISTER)

    def describe_device(self) -> str:
        manufacturer_id = self._connection.read_register(const.MANUFACTURER_ID_REGISTER)
        product_id = self._connection.read_register(const.PRODUCT_ID_REGISTER)
        product_revision = self._connection.read_register(const.REVISION_REGISTER)
        manufacturer_name = const.MANUFACTURER_IDS.get(manufacturer_id, "<unknown manufacturer>")
        product_name      = const.PRODUCT_IDS.get(product_id, "<unknown product>")
        return f"{manufacturer_name} (0x{manufacturer_id:02X}) {product_name} (0x{product_id:02X}) (rev: {product_revision})"

    # ---------------------------------------------------------------------
    # fan speed control
    # ---------------------------------------------------------------------

    def get_dutycycle(self) -> int:
        """
        get the configured PWM duty cycle in %
        """
        value = self._connection.read_register(const.FAN_SETTING_REGISTER)
        return convert_dutycycle_raw2percentage(value)

    def set_dutycycle(self, percent: int):
        """
        set the PWM duty cycle in %

        The value is not read back.
        """
        if isinstance(percent, int) and not isinstance(percent, bool) and 0 <= percent <= 100:
            value = convert_dutycycle_percentage2raw(percent)
            self._connection.write_register(const.FAN_SETTING_REGISTER, value)
        else:
            raise InvalidArgument(f"provided value {percent} is out of range (0 ≤ x ≤ 100%)")

    # ---------------------------------------------------------------------
    # fan speed measurement
    # ---------------------------------------------------------------------

    def get_rpm(self) -> RpmResult:
        """
        get current fan speed

        The simplified tach conversion can't be trusted for slow fans. If
        the fan speed is too low to be measured the duty cycle is used to
        find out if the fan is supposed to be stopped.
        """
        msb = self._connection.read_register(const.TACH_HIGH_REGISTER)
        lsb = self._connection.read_register(const.TACH_LOW_REGISTER)
        tach = convert_bytes2tach(msb=msb, lsb=lsb)
        LH.debug("tach readings: MSB=0x%02X LSB=0x%02X -> tach=%i", msb, lsb, tach)
        rpm = convert_tach2rpm(tach)
        if rpm is None:
            # the chip never reports a tach count of zero for a working fan
            LH.debug("Tach count is zero. Unable to determine fan speed.")
            return Undefined()
        if rpm > const.MINIMUM_TRUSTED_RPM:
            return Measured(rpm=rpm)
        # check duty cycle to find out if the fan is stopped
        if self.get_dutycycle() == 0:
            return Stopped()
        else:
            LH.debug("Fan speed is too low to be measured. (%i RPM)", rpm)
            return Undefined()


def open_device(register_bus: RegisterBus | None = None, device_config: DeviceConfig = emc2301_default_config) -> Emc2301:
    """
    find the EMC2301, verify its product id and configure it
     - uses the Linux SMBus device files unless a bus is provided
     - raises DeviceNotFound, BusOpenError, IdentityMismatch or RegisterIOError

    The connection is closed if anything goes wrong.
    """
    if register_bus is None:
        register_bus = SMBusRegisterBus()
    bus_index = locate_device(register_bus=register_bus, device_config=device_config)
    connection = register_bus.open(bus_index=bus_index, i2c_address=device_config.i2c_address)
    with ExitStack() as stack:
        stack.callback(connection.close)
        emc2301 = Emc2301(connection=connection)
        # initialization succeeded, keep the connection open
        stack.pop_all()
    LH.info("Using EMC2301 on bus %i (address: 0x%02X).", bus_index, device_config.i2c_address)
    return emc2301
