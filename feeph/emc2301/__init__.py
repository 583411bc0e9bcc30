#!/usr/bin/env python3
"""
a driver for the EMC2301 fan controller (e.g. Raspberry Pi CM4 IO board)

The main design goal is to hide as many low-level details as possible while
making the code comprehensible. Additionally we want to leverage as much
tool-based development support as possible.
"""

# typical usage scenarios
# =======================

# control the fan
# -> find the device on any of the I²C buses /dev/i2c-0 .. /dev/i2c-10
# -------------------------------------------------------------------------
# from feeph.emc2301 import Measured, Stopped, open_device
#
# with open_device() as emc2301:
#     emc2301.set_dutycycle(60)
#     result = emc2301.get_rpm()
#     if isinstance(result, Measured):
#         print("RPM:", result.rpm)
#     elif isinstance(result, Stopped):
#         print("RPM: <stopped>")
#     else:
#         print("RPM: <n/a>")
# -------------------------------------------------------------------------

# use a device configuration
# -> restrict the search to specific buses
# -------------------------------------------------------------------------
# import yaml
#
# from feeph.emc2301 import import_device_config, open_device
#
# with open('emc2301.yaml', 'r') as fh:
#   device_config = import_device_config(yaml.safe_load(fh))
#
# emc2301 = open_device(device_config=device_config)
# -------------------------------------------------------------------------

# the following imports are provided for user convenience
# flake8: noqa: F401
from feeph.emc2301.config_register import FanConfigRegister, TachEdges, TachRange, UpdateTime
from feeph.emc2301.core import Emc2301, open_device
from feeph.emc2301.device_config import DeviceConfig, emc2301_default_config, export_device_config, import_device_config
from feeph.emc2301.errors import BusOpenError, DeviceNotFound, Emc2301Error, IdentityMismatch, InvalidArgument, RegisterIOError
from feeph.emc2301.locator import locate_device
from feeph.emc2301.register_bus import BusioRegisterBus, RegisterBus, RegisterConnection, SMBusRegisterBus
from feeph.emc2301.rpm_result import Measured, RpmResult, Stopped, Undefined
