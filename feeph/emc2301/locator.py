#!/usr/bin/env python3
"""
find the I²C bus the EMC2301 is connected to
"""

import logging

import feeph.emc2301.constants as const
from feeph.emc2301.device_config import DeviceConfig, emc2301_default_config
from feeph.emc2301.errors import BusOpenError, DeviceNotFound, RegisterIOError
from feeph.emc2301.register_bus import RegisterBus

LH = logging.getLogger('feeph.emc2301')


def locate_device(register_bus: RegisterBus, device_config: DeviceConfig = emc2301_default_config) -> int:
    """
    probe the configured buses and return the index of the first bus
    where the product id register can be read
     - raises DeviceNotFound if no bus responded

    The product id itself is not verified. (A device might be found here
    and rejected later on.)
    """
    for bus_index in device_config.bus_indices:
        try:
            connection = register_bus.open(bus_index=bus_index, i2c_address=device_config.i2c_address)
        except BusOpenError as e:
            LH.debug("Skipping bus %i: %s", bus_index, e)
            continue
        # only one probe connection may be open at any time
        with connection:
            try:
                connection.read_register(const.PRODUCT_ID_REGISTER)
            except RegisterIOError as e:
                LH.debug("No response on bus %i: %s", bus_index, e)
                continue
        LH.debug("Found a device on bus %i (address: 0x%02X).", bus_index, device_config.i2c_address)
        return bus_index
    raise DeviceNotFound(f"Unable to find a device at address 0x{device_config.i2c_address:02X} (buses: {list(device_config.bus_indices)})")
