#!/usr/bin/env python3
"""
register map of the EMC2301 chip

datasheet: https://ww1.microchip.com/downloads/en/DeviceDoc/EMC2301-2-3-5-Data-Sheet-DS20006532A.pdf
"""

#                             address      purpose                    section
# -----------------------------------------------------------------------------
FAN_SETTING_REGISTER        = 0x30  # fan drive setting (duty cycle)  6.12
FAN_CONFIG_REGISTER         = 0x32  # fan configuration 1             6.14
TACH_HIGH_REGISTER          = 0x3E  # tach reading, high byte         6.23
TACH_LOW_REGISTER           = 0x3F  # tach reading, low byte          6.23
PRODUCT_ID_REGISTER         = 0xFD  # product id                      6.29
MANUFACTURER_ID_REGISTER    = 0xFE  # manufacturer id                 6.30
REVISION_REGISTER           = 0xFF  # revision                        6.31


MANUFACTURER_IDS = {
    0x5D: "SMSC",
}


PRODUCT_IDS = {
    0x37: "EMC2301",
}

EMC2301_PRODUCT_ID = 0x37

# below this fan speed the simplified tach conversion is not trustworthy
MINIMUM_TRUSTED_RPM = 500
