#!/usr/bin/env python3

from attrs import define, field


def _validate_bus_indices(instance, attribute, value):
    if len(value) == 0:
        raise ValueError("must provide at least one bus index")
    for bus_index in value:
        if not isinstance(bus_index, int):
            raise ValueError(f"bus index must be an integer (got: {bus_index!r})")
        if bus_index < 0:
            raise ValueError(f"bus index can't be negative (got: {bus_index})")


def _validate_i2c_address(instance, attribute, value):
    # 0x00..0x02 and 0x78..0x7F are reserved
    if not 0x03 <= value <= 0x77:
        raise ValueError(f"I²C address 0x{value:02X} is out of range (0x03 ≤ x ≤ 0x77)")


@define(eq=True)
class DeviceConfig:
    """
    configure hardware-specific settings

    These settings depend on the board the EMC2301 is soldered onto.
    """
    # buses are probed in the provided order
    bus_indices: tuple[int, ...] = field(default=tuple(range(0, 11)), converter=tuple, validator=_validate_bus_indices)
    # the SMBus address is hardcoded
    i2c_address: int = field(default=0x2F, validator=_validate_i2c_address)


emc2301_default_config = DeviceConfig()


def export_device_config(device_config: DeviceConfig) -> dict[str, int | list[int]]:
    return {
        'bus_indices': list(device_config.bus_indices),
        'i2c_address': device_config.i2c_address,
    }


def import_device_config(device_config: dict[str, int | list[int]]) -> DeviceConfig:
    """
    create a device configuration from a dictionary (e.g. a parsed YAML file)
     - missing keys use their default values
    """
    params = dict()
    if 'bus_indices' in device_config:
        bus_indices = device_config['bus_indices']
        if isinstance(bus_indices, list):
            params['bus_indices'] = bus_indices
        else:
            raise ValueError("bus_indices must be a list of integers")
    if 'i2c_address' in device_config:
        i2c_address = device_config['i2c_address']
        if isinstance(i2c_address, int):
            params['i2c_address'] = i2c_address
        else:
            raise ValueError("i2c_address must be an integer")
    return DeviceConfig(**params)  # type: ignore [arg-type]
