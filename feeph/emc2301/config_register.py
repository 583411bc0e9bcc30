#!/usr/bin/env python3

from enum import Enum

from attrs import define


class TachRange(Enum):
    # bits 6-5, minimum measurable RPM and tach count multiplier
    RPM_500  = 0b0000_0000  # m = 1
    RPM_1000 = 0b0010_0000  # m = 2 (default)
    RPM_2000 = 0b0100_0000  # m = 4
    RPM_4000 = 0b0110_0000  # m = 8


class TachEdges(Enum):
    # bits 4-3, number of edges sampled per tach measurement
    EDGES_3 = 0b0000_0000  # 1 pole
    EDGES_5 = 0b0000_1000  # 2 poles (default)
    EDGES_7 = 0b0001_0000  # 3 poles
    EDGES_9 = 0b0001_1000  # 4 poles


class UpdateTime(Enum):
    # bits 2-0, update interval of the fan speed control algorithm
    TIME_100  = 0b0000_0000  #  100ms
    TIME_200  = 0b0000_0001  #  200ms
    TIME_300  = 0b0000_0010  #  300ms
    TIME_400  = 0b0000_0011  #  400ms (default)
    TIME_500  = 0b0000_0100  #  500ms
    TIME_800  = 0b0000_0101  #  800ms
    TIME_1200 = 0b0000_0110  # 1200ms
    TIME_1600 = 0b0000_0111  # 1600ms


@define(eq=True)
class FanConfigRegister:
    """
    a representation of the EMC2301's fan configuration register 1 (0x32)

    for an exhaustive description refer to EMC2301 datasheet section 6.14
    """
    en_algo:     bool       = False                # enable RPM-based fan speed control
    tach_range:  TachRange  = TachRange.RPM_1000   # must be RPM_500 for TACH2RPM to be valid
    edges:       TachEdges  = TachEdges.EDGES_5
    update_time: UpdateTime = UpdateTime.TIME_400

    def as_int(self) -> int:
        """
        compute the register's value
        """
        config = 0x00
        if self.en_algo:
            config |= 0b1000_0000
        config |= self.tach_range.value
        config |= self.edges.value
        config |= self.update_time.value
        return config


def parse_fan_config_register(value: int) -> FanConfigRegister:
    """
    parse the register's value
    """
    return FanConfigRegister(
        en_algo=bool(value & 0b1000_0000),
        tach_range=TachRange(value & 0b0110_0000),
        edges=TachEdges(value & 0b0001_1000),
        update_time=UpdateTime(value & 0b0000_0111),
    )
