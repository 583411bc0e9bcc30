#!/usr/bin/env python3
"""
show the state of the connected fan

usage:
  - scripts/emc2301_status.py
  - scripts/emc2301_status.py -c emc2301.yaml -d 60
"""

import argparse
import logging
import sys
import time

import yaml

from feeph.emc2301 import Emc2301Error, Measured, Stopped, emc2301_default_config, import_device_config, open_device

LH = logging.getLogger("main")

SLEEP_TIME = 2.0


if __name__ == "__main__":
    logging.basicConfig(format='%(levelname).1s: %(message)s', level=logging.INFO)

    parser = argparse.ArgumentParser(prog="emc2301_status", description="show fan speed and duty cycle")
    parser.add_argument("-c", "--config", type=str, help="device configuration (YAML)")
    parser.add_argument("-d", "--dutycycle", type=int, help="set duty cycle (0..100%%) before reading")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(level=logging.DEBUG)

    if args.config is not None:
        with open(args.config, 'r') as fh:
            device_config = import_device_config(yaml.safe_load(fh))
    else:
        device_config = emc2301_default_config

    try:
        with open_device(device_config=device_config) as emc2301:
            LH.info("device: %s", emc2301.describe_device())
            if args.dutycycle is not None:
                emc2301.set_dutycycle(args.dutycycle)
                # give the fan some time to settle
                time.sleep(SLEEP_TIME)
            LH.info("duty cycle: %4i%%", emc2301.get_dutycycle())
            result = emc2301.get_rpm()
            if isinstance(result, Measured):
                LH.info("fan speed:  %4iRPM", result.rpm)
            elif isinstance(result, Stopped):
                LH.info("fan speed:  <stopped>")
            else:
                LH.info("fan speed:  <n/a>")
    except Emc2301Error as e:
        LH.error("%s", e)
        sys.exit(1)
